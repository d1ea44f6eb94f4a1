"""
Distance sweep driver.
"""

from __future__ import annotations

from typing import Callable, Optional

import numpy as np
from tqdm import tqdm

from .constants import POINT_SOURCE_LIMIT_PERCENT, SEEDS_PER_POINT
from .data_classes import SweepConfig, SweepPoint, SweepResult
from .errors import InvalidConfiguration
from .estimator import evaluate_detector


def distance_grid(z_min: float, z_max: float, n_points: int) -> np.ndarray:
    """``n_points`` evenly spaced distances, both ends included."""
    if n_points < 2:
        raise InvalidConfiguration(f"Number of points must be >= 2, got {n_points}")
    delta = (z_max - z_min) / (n_points - 1)
    return z_min + delta * np.arange(n_points, dtype=float)


def point_source(z):
    """Point-source approximation of the efficiency (%) at distance ``z``.

    ``50 - 50 z / sqrt(1 + z²)``: the solid angle fraction subtended by the
    unit disc as seen from a point on its axis.
    """
    z = np.asarray(z, dtype=float)
    ps = POINT_SOURCE_LIMIT_PERCENT - POINT_SOURCE_LIMIT_PERCENT * z / np.sqrt(1.0 + z * z)
    return float(ps) if ps.ndim == 0 else ps


def seed_for_point(config: SweepConfig, index: int) -> int:
    """Seed used for the ``index``-th distance of a sweep."""
    return config.seed + SEEDS_PER_POINT * index


def run_sweep(
    config: SweepConfig,
    progress: bool = False,
    callback: Optional[Callable[[int, SweepPoint], None]] = None,
) -> SweepResult:
    """Evaluate the efficiency at every distance of ``config``.

    Parameters
    ----------
    config : SweepConfig
        Validated sweep configuration.
    progress : bool
        Show a tqdm progress bar over the distances.
    callback : callable, optional
        Called as ``callback(index, point)`` after each distance.

    Returns
    -------
    SweepResult
        One point per distance, in increasing order of distance.
    """
    distances = distance_grid(config.z_min, config.z_max, config.n_points)
    ps = point_source(distances)
    n_samples = config.n_samples
    result = SweepResult(config=config)

    seed = config.seed
    iterator = enumerate(distances)
    if progress:
        iterator = tqdm(iterator, total=len(distances), desc="Sweeping distances")

    for i, z in iterator:
        efficiency, rel_error = evaluate_detector(z, config.source, config.detector, n_samples, seed)
        point = SweepPoint(
            z=float(z),
            efficiency_percent=efficiency,
            relative_error_percent=rel_error,
            point_source_percent=float(ps[i]),
            seed=seed,
        )
        result.points.append(point)
        if callback is not None:
            callback(i, point)
        seed += SEEDS_PER_POINT

    return result
