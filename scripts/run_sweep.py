#!/usr/bin/env python
"""
Geometric Efficiency - Main Runner Script

This script runs a distance sweep of the geometric efficiency.

Usage:
    python run_sweep.py uniform circular
    python run_sweep.py gaussian annular --ratio 0.5 -s 0.2 -n 5
    python run_sweep.py uniform circular --no-plot

Output files (Data/, Figures/) are saved in the project directory, or in the
directory given with --output-dir.
"""

from pathlib import Path
import sys

# Project root on the path so the script runs from a source checkout
project_dir = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_dir))

from geomeff_simulation.runner import main as runner_main


def main():
    """Script entry point."""
    argv = sys.argv[1:]
    if "--output-dir" not in argv:
        argv += ["--output-dir", str(project_dir)]
    runner_main(argv)


if __name__ == "__main__":
    main()
