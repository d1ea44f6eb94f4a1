"""
Geometric Efficiency Sweep Runner Module

This module provides the main sweep runner function that can be called
from scripts or imported directly, and the command-line entry point.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from . import config
from .core.data_classes import DetectorShape, SourceProfile, SweepConfig, SweepPoint, SweepResult
from .core.errors import InvalidConfiguration
from .core.io_utils import export_sweep_to_tsv
from .core.sweep import run_sweep
from .plotting import print_statistics, visualize_sweep


def build_sweep_config(
    source_type: str = config.DEFAULT_SOURCE_TYPE,
    detector_type: str = config.DEFAULT_DETECTOR_TYPE,
    z_min: float = config.DEFAULT_Z_MIN,
    z_max: float = config.DEFAULT_Z_MAX,
    n_points: int = config.DEFAULT_N_POINTS,
    source_size: float = config.DEFAULT_SOURCE_SIZE,
    power: int = config.DEFAULT_POWER,
    ratio: Optional[float] = None,
    seed: int = config.DEFAULT_RANDOM_SEED,
) -> SweepConfig:
    """Build and validate a sweep configuration from plain values.

    Raises
    ------
    InvalidConfiguration
        If any value is out of range or a type name is unknown.
    """
    source = SourceProfile.from_name(source_type, source_size)
    if ratio is None and str(detector_type).strip().lower() == "annular":
        ratio = config.DEFAULT_ANNULAR_RATIO
    detector = DetectorShape.from_name(detector_type, ratio)
    return SweepConfig(
        z_min=z_min,
        z_max=z_max,
        n_points=n_points,
        source=source,
        detector=detector,
        power=power,
        seed=seed,
    )


def run_full_sweep(
    sweep_config: SweepConfig,
    output_dir: Optional[Path] = None,
    output_file: Optional[str] = None,
    save_results: bool = True,
    generate_plots: bool = True,
    show_plots: bool = False,
    verbose: bool = True,
) -> SweepResult:
    """Run a complete distance sweep.

    This is the main entry point for running sweeps. It handles:
    1. Running the Monte Carlo estimate at every distance
    2. Printing the per-distance results
    3. Exporting the result table
    4. Generating the efficiency plot

    Parameters
    ----------
    sweep_config : SweepConfig
        Validated sweep configuration.
    output_dir : Path, optional
        Directory for output files (Data/, Figures/). If None, uses current working directory.
    output_file : str, optional
        Name of the result table. If None, uses config default.
    save_results : bool
        Whether to save the result table.
    generate_plots : bool
        Whether to generate the efficiency plot.
    show_plots : bool
        Whether to open the plot interactively.
    verbose : bool
        Print progress and a summary.

    Returns
    -------
    SweepResult
        Result of the sweep.
    """
    if output_dir is None:
        output_dir = Path.cwd()
    else:
        output_dir = Path(output_dir)

    if output_file is None:
        output_file = config.SWEEP_TABLE_FILE

    z_last = sweep_config.z_max

    def report(index: int, point: SweepPoint):
        completion = point.z / z_last if z_last > 0 else 1.0
        tqdm.write(f"{completion:.4f}\t{point.efficiency_percent:.6g}\t\t{point.relative_error_percent:.6g}")

    if verbose:
        print(f"[info] Starting sweep over {sweep_config.n_points} distances "
              f"with {sweep_config.n_samples:,} samples each...")
        print("Completion(%)\tEfficiency (%)\t\tRelative error (%)")

    result = run_sweep(
        sweep_config,
        progress=verbose,
        callback=report if verbose else None,
    )

    if verbose:
        print_statistics(result)

    if save_results and result.points:
        table_path = output_dir / config.DATA_OUTPUT_DIR / output_file
        export_sweep_to_tsv(result, filename=table_path)

    if generate_plots and result.points:
        print("[info] Generating visualizations...")
        figures_dir = output_dir / config.FIGURES_OUTPUT_DIR
        figures_dir.mkdir(parents=True, exist_ok=True)
        save_base = str(figures_dir / config.EFFICIENCY_FIGURE_BASE)
        visualize_sweep(result, save_path=save_base, show=show_plots)
        print("[info] Visualization complete!")

    return result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Monte Carlo geometric efficiency of a detector facing an isotropic source"
    )
    parser.add_argument("source_type", choices=["uniform", "gaussian"],
                        help="Source spatial distribution")
    parser.add_argument("detector_type", choices=["circular", "annular"],
                        help="Detector shape")
    parser.add_argument("--z-min", type=float, default=config.DEFAULT_Z_MIN,
                        help="Smallest distance (z/r_d)")
    parser.add_argument("--z-max", type=float, default=config.DEFAULT_Z_MAX,
                        help="Largest distance (z/r_d)")
    parser.add_argument("-p", "--points", type=int, default=config.DEFAULT_N_POINTS,
                        help="Number of distances (>= 2)")
    parser.add_argument("-s", "--source-size", type=float, default=config.DEFAULT_SOURCE_SIZE,
                        help="Source radius or sigma (in units of r_d)")
    parser.add_argument("-n", "--power", type=int, default=config.DEFAULT_POWER,
                        help="Samples per distance = 10^power")
    parser.add_argument("--ratio", type=float, default=None,
                        help="Annular detector inner/outer radius ratio")
    parser.add_argument("--seed", type=int, default=config.DEFAULT_RANDOM_SEED,
                        help="Initial random seed")
    parser.add_argument("-o", "--output", type=str, default=None,
                        help="Name of the result table")
    parser.add_argument("--output-dir", type=Path, default=None,
                        help="Output directory for results and figures")
    parser.add_argument("--no-save", action="store_true",
                        help="Don't save the result table")
    parser.add_argument("--no-plot", action="store_true",
                        help="Don't generate the efficiency plot")
    parser.add_argument("--show", action="store_true",
                        help="Open the plot in a window")
    parser.add_argument("-q", "--quiet", action="store_true",
                        help="Don't print progress and summary")
    return parser


def main(argv: Optional[List[str]] = None):
    """Command-line entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        sweep_config = build_sweep_config(
            source_type=args.source_type,
            detector_type=args.detector_type,
            z_min=args.z_min,
            z_max=args.z_max,
            n_points=args.points,
            source_size=args.source_size,
            power=args.power,
            ratio=args.ratio,
            seed=args.seed,
        )
    except InvalidConfiguration as e:
        parser.error(str(e))

    run_full_sweep(
        sweep_config,
        output_dir=args.output_dir,
        output_file=args.output,
        save_results=not args.no_save,
        generate_plots=not args.no_plot,
        show_plots=args.show,
        verbose=not args.quiet,
    )


if __name__ == "__main__":
    main()
