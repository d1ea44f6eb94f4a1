"""
Projection of source points onto the detector plane and the hit test.
"""

from __future__ import annotations

import numpy as np

from .constants import DETECTOR_RADIUS
from .data_classes import PointBatch
from .errors import SizeMismatch


def translate(batch: PointBatch, dx: np.ndarray, dy: np.ndarray) -> PointBatch:
    """Add the offsets ``dx``, ``dy`` to every point of ``batch`` in place.

    Raises
    ------
    SizeMismatch
        If the offsets do not have exactly one entry per point.
    """
    dx = np.asarray(dx, dtype=float)
    dy = np.asarray(dy, dtype=float)
    n = len(batch)
    if dx.shape != batch.x.shape or dy.shape != batch.y.shape:
        raise SizeMismatch(
            f"Vector addition with different sizes: batch has {n} points, "
            f"offsets have {dx.size} and {dy.size}"
        )
    batch.x += dx
    batch.y += dy
    return batch


def squared_radius(batch: PointBatch) -> np.ndarray:
    """x² + y² for every point."""
    return batch.x * batch.x + batch.y * batch.y


def hit_mask(batch: PointBatch, radius: float = DETECTOR_RADIUS) -> np.ndarray:
    """Boolean mask of the points inside the detector disc (boundary included)."""
    return squared_radius(batch) <= radius * radius


def count_hits(batch: PointBatch, radius: float = DETECTOR_RADIUS) -> int:
    return int(np.count_nonzero(hit_mask(batch, radius)))
