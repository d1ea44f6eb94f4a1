"""
Point generators for source positions and isotropic emission offsets.

Every generator fills an already-sized :class:`PointBatch` in place using a
fresh :class:`RandomSampler` built from the given seed. The azimuths of all
points are drawn first, then the radial (or polar) variable of all points.
"""

from __future__ import annotations

import numpy as np

from .constants import TWO_PI
from .data_classes import PointBatch, SourceProfile, SourceType
from .errors import InvalidConfiguration
from .sampling import RandomSampler


def generate_isotropic(batch: PointBatch, z: float, seed: int, stream: int = 0) -> PointBatch:
    """Extrapolate isotropically emitted rays to a plane at distance ``z``.

    Directions cover the full sphere: theta = acos(1 - 2u) with u ~ U(0, 1).
    Rays emitted away from the detector (theta > pi/2) land on the mirrored
    side of the plane, so the hit count has to be halved afterwards.

    Parameters
    ----------
    batch : PointBatch
        Batch to fill; its length sets the number of rays.
    z : float
        Source-to-detector distance in units of the detector radius.
    seed : int
        Seed of the random sampler.
    stream : int
        Sub-sequence of ``seed`` to draw from, one per chunk of a large
        evaluation.

    Returns
    -------
    PointBatch
        ``batch``, filled with the (dx, dy) offsets at the detector plane.
    """
    n = len(batch)
    sampler = RandomSampler(seed, stream)
    phi = sampler.uniform(0.0, TWO_PI, n)
    theta = np.arccos(1.0 - 2.0 * sampler.uniform(0.0, 1.0, n))
    radial = z * np.tan(theta)
    batch.x[:] = radial * np.cos(phi)
    batch.y[:] = radial * np.sin(phi)
    return batch


def generate_circular(batch: PointBatch, r: float, seed: int, stream: int = 0) -> PointBatch:
    """Uniformly distributed points inside a disc of radius ``r``."""
    n = len(batch)
    sampler = RandomSampler(seed, stream)
    phi = sampler.uniform(0.0, TWO_PI, n)
    rho = r * np.sqrt(sampler.uniform(0.0, 1.0, n))
    batch.x[:] = rho * np.cos(phi)
    batch.y[:] = rho * np.sin(phi)
    return batch


def generate_gaussian(batch: PointBatch, sigma: float, seed: int, stream: int = 0) -> PointBatch:
    """Points with a signed radial offset r ~ N(0, sigma) at a uniform azimuth.

    A negative r puts the point on the opposite side of the same azimuth.
    This is a Gaussian radial fall-off, not a bivariate normal.
    """
    n = len(batch)
    sampler = RandomSampler(seed, stream)
    phi = sampler.uniform(0.0, TWO_PI, n)
    r = sampler.normal(0.0, sigma, n)
    batch.x[:] = r * np.cos(phi)
    batch.y[:] = r * np.sin(phi)
    return batch


_SOURCE_GENERATORS = {
    SourceType.UNIFORM: generate_circular,
    SourceType.GAUSSIAN: generate_gaussian,
}


def generate_source(batch: PointBatch, source: SourceProfile, seed: int, stream: int = 0) -> PointBatch:
    """Fill ``batch`` with source positions drawn from ``source``."""
    try:
        generator = _SOURCE_GENERATORS[source.kind]
    except (KeyError, AttributeError):
        raise InvalidConfiguration(f"Not a valid source profile: {source!r}") from None
    return generator(batch, source.size, seed, stream)
