"""
Core modules of the geometric efficiency simulation.

- constants: Numerical constants and the default seed
- errors: InvalidConfiguration and SizeMismatch
- data_classes: PointBatch, SourceProfile, DetectorShape, sweep containers
- sampling: Seeded random sampler
- generators: Source position and isotropic emission generators
- projection: Translation, squared radius and hit test
- estimator: Efficiency and relative error at one distance
- sweep: Distance sweep and point-source approximation
- io_utils: Result table export/import
"""

from .constants import (
    DEFAULT_SEED,
    DETECTOR_RADIUS,
    HEMISPHERE_PERCENT,
    MAX_BATCH_SIZE,
    SEEDS_PER_POINT,
)

from .errors import (
    GeomEffError,
    InvalidConfiguration,
    SizeMismatch,
)

from .data_classes import (
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

from .sampling import RandomSampler

from .generators import (
    generate_isotropic,
    generate_circular,
    generate_gaussian,
    generate_source,
)

from .projection import (
    translate,
    squared_radius,
    hit_mask,
    count_hits,
)

from .estimator import (
    relative_error,
    evaluate,
    combine_annular,
    evaluate_annular,
    evaluate_detector,
)

from .sweep import (
    distance_grid,
    point_source,
    seed_for_point,
    run_sweep,
)

from .io_utils import (
    sweep_to_dataframe,
    export_sweep_to_tsv,
    load_sweep_table,
)

__all__ = [
    # Constants
    'DEFAULT_SEED',
    'DETECTOR_RADIUS',
    'HEMISPHERE_PERCENT',
    'MAX_BATCH_SIZE',
    'SEEDS_PER_POINT',
    # Errors
    'GeomEffError',
    'InvalidConfiguration',
    'SizeMismatch',
    # Data classes
    'PointBatch',
    'SourceType',
    'SourceProfile',
    'DetectorType',
    'DetectorShape',
    'EfficiencyEstimate',
    'AnnularEstimate',
    'SweepPoint',
    'SweepConfig',
    'SweepResult',
    # Sampling
    'RandomSampler',
    # Generators
    'generate_isotropic',
    'generate_circular',
    'generate_gaussian',
    'generate_source',
    # Projection
    'translate',
    'squared_radius',
    'hit_mask',
    'count_hits',
    # Estimator
    'relative_error',
    'evaluate',
    'combine_annular',
    'evaluate_annular',
    'evaluate_detector',
    # Sweep
    'distance_grid',
    'point_source',
    'seed_for_point',
    'run_sweep',
    # IO
    'sweep_to_dataframe',
    'export_sweep_to_tsv',
    'load_sweep_table',
]
