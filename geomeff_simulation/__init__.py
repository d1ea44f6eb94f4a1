"""
Geometric Efficiency Simulation Package
=======================================

Monte Carlo estimate of the geometric detection efficiency of a circular or
annular detector facing an isotropically emitting source, as a function of
the source-to-detector distance.

Modules:
--------
- config: Configurable default parameters
- core.constants: Numerical constants
- core.errors: Exception types
- core.data_classes: Data structures (PointBatch, SourceProfile, DetectorShape, ...)
- core.sampling: Seeded random sampler
- core.generators: Source and emission point generators
- core.projection: Projection onto the detector plane and hit test
- core.estimator: Efficiency estimate at one distance
- core.sweep: Distance sweep and point-source approximation
- core.io_utils: Result table export/import
- plotting: Plots and console summary
- runner: Sweep runner and command-line interface
"""

from . import config
from .core.constants import DEFAULT_SEED, HEMISPHERE_PERCENT
from .core.errors import GeomEffError, InvalidConfiguration, SizeMismatch
from .core.data_classes import (
    PointBatch,
    SourceType,
    SourceProfile,
    DetectorType,
    DetectorShape,
    EfficiencyEstimate,
    AnnularEstimate,
    SweepPoint,
    SweepConfig,
    SweepResult,
)
from .core.sampling import RandomSampler
from .core.generators import (
    generate_isotropic,
    generate_circular,
    generate_gaussian,
    generate_source,
)
from .core.projection import translate, squared_radius, hit_mask, count_hits
from .core.estimator import (
    relative_error,
    evaluate,
    evaluate_annular,
    evaluate_detector,
)
from .core.sweep import distance_grid, point_source, seed_for_point, run_sweep
from .core.io_utils import export_sweep_to_tsv, load_sweep_table
from .plotting import visualize_sweep, visualize_detector_hits, print_statistics
from .runner import build_sweep_config, run_full_sweep

__version__ = "1.0.0"
__all__ = [
    # Config module
    "config",
    # Constants
    "DEFAULT_SEED",
    "HEMISPHERE_PERCENT",
    # Errors
    "GeomEffError",
    "InvalidConfiguration",
    "SizeMismatch",
    # Data classes
    "PointBatch",
    "SourceType",
    "SourceProfile",
    "DetectorType",
    "DetectorShape",
    "EfficiencyEstimate",
    "AnnularEstimate",
    "SweepPoint",
    "SweepConfig",
    "SweepResult",
    # Sampling
    "RandomSampler",
    # Generators
    "generate_isotropic",
    "generate_circular",
    "generate_gaussian",
    "generate_source",
    # Projection
    "translate",
    "squared_radius",
    "hit_mask",
    "count_hits",
    # Estimator
    "relative_error",
    "evaluate",
    "evaluate_annular",
    "evaluate_detector",
    # Sweep
    "distance_grid",
    "point_source",
    "seed_for_point",
    "run_sweep",
    # IO
    "export_sweep_to_tsv",
    "load_sweep_table",
    # Visualization
    "visualize_sweep",
    "visualize_detector_hits",
    "print_statistics",
    # Runner
    "build_sweep_config",
    "run_full_sweep",
]
