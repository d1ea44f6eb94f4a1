"""
Testing subpackage for the geometric efficiency simulation.

Tools to check the generators and the estimator before long sweeps:

    from geomeff_simulation.testing import run_quick_test

    run_quick_test()
"""

from .validation import (
    validate_batch,
    validate_against_point_source,
    validate_sampling_module,
    run_quick_test,
)

__all__ = [
    "validate_batch",
    "validate_against_point_source",
    "validate_sampling_module",
    "run_quick_test",
]
