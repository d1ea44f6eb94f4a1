"""
Plotting subpackage for the geometric efficiency sweep.

Example usage:
    from geomeff_simulation.plotting import visualize_sweep, print_statistics

    print_statistics(result)
    visualize_sweep(result, save_path='Figures/geometric_efficiency')
"""

from .results import (
    visualize_sweep,
    visualize_detector_hits,
    print_statistics,
)

__all__ = [
    "visualize_sweep",
    "visualize_detector_hits",
    "print_statistics",
]
