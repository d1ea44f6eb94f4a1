"""
Monte Carlo estimate of the geometric efficiency at one distance.
"""

from __future__ import annotations

import math
from typing import Tuple, Union

from .constants import HEMISPHERE_PERCENT, MAX_BATCH_SIZE
from .data_classes import (
    AnnularEstimate,
    DetectorShape,
    EfficiencyEstimate,
    PointBatch,
    SourceProfile,
)
from .errors import InvalidConfiguration
from .generators import generate_isotropic, generate_source
from .projection import count_hits, translate


def relative_error(efficiency_percent: float, n_samples: int) -> float:
    """Relative statistical uncertainty (%) of an efficiency estimate.

    ``100 / sqrt(2 N eff / 100)``, i.e. 1/sqrt(hits) with the hemisphere
    factor undone. Zero hits give ``inf``.
    """
    expected_hits = 2.0 * n_samples * efficiency_percent / 100.0
    if expected_hits <= 0.0:
        return math.inf
    return 100.0 / math.sqrt(expected_hits)


def evaluate(
    z: float,
    source: SourceProfile,
    n_samples: int,
    seed: int,
    batch_size: int = MAX_BATCH_SIZE,
) -> EfficiencyEstimate:
    """Estimate the efficiency of the unit detector disc at distance ``z``.

    Parameters
    ----------
    z : float
        Source-to-detector distance in units of the detector radius.
    source : SourceProfile
        Source spatial profile; its size is in units of the detector radius.
    n_samples : int
        Number of emitted rays.
    seed : int
        Seed of the source positions. The emission directions use ``seed + 1``.
    batch_size : int
        Largest number of rays generated at once. Chunk ``k`` draws from
        stream ``k`` of both seeds, so an evaluation that fits in one chunk
        uses the plain seeds.

    Returns
    -------
    EfficiencyEstimate
        Efficiency in percent of the full solid angle, its relative error in
        percent and the raw hit count.
    """
    n_samples = int(n_samples)
    if n_samples < 0:
        raise InvalidConfiguration(f"Number of samples must be >= 0, got {n_samples}")
    batch_size = int(batch_size)
    if batch_size < 1:
        raise InvalidConfiguration(f"Batch size must be >= 1, got {batch_size}")

    hits = 0
    for stream, start in enumerate(range(0, n_samples, batch_size)):
        n = min(batch_size, n_samples - start)
        positions = generate_source(PointBatch.empty(n), source, seed, stream)
        emission = generate_isotropic(PointBatch.empty(n), z, seed + 1, stream)
        translate(positions, emission.x, emission.y)
        hits += count_hits(positions)

    if n_samples == 0:
        efficiency = 0.0
    else:
        efficiency = HEMISPHERE_PERCENT * hits / n_samples
    return EfficiencyEstimate(
        efficiency_percent=efficiency,
        relative_error_percent=relative_error(efficiency, n_samples),
        hits=hits,
        n_samples=n_samples,
    )


def combine_annular(outer: EfficiencyEstimate, inner: EfficiencyEstimate) -> AnnularEstimate:
    """Subtract the inner disc from the outer one.

    The relative errors are added in quadrature even though they refer to
    different base quantities, so the combined error is approximate.
    """
    return AnnularEstimate(
        outer=outer,
        inner=inner,
        efficiency_percent=outer.efficiency_percent - inner.efficiency_percent,
        relative_error_percent=math.hypot(outer.relative_error_percent, inner.relative_error_percent),
    )


def evaluate_annular(
    z: float,
    source: SourceProfile,
    detector: Union[DetectorShape, float],
    n_samples: int,
    seed: int,
) -> AnnularEstimate:
    """Estimate the efficiency of an annular detector.

    ``detector`` is an annular :class:`DetectorShape` or directly the
    inner/outer radius ratio. The inner disc is evaluated with distance and
    source size rescaled to the inner radius, using the same seed as the
    outer disc.
    """
    if not isinstance(detector, DetectorShape):
        detector = DetectorShape.annular(detector)
    if not detector.is_annular:
        raise InvalidConfiguration(f"Expected an annular detector, got {detector.kind.value}")

    scale = detector.inner_scale
    outer = evaluate(z, source, n_samples, seed)
    inner = evaluate(z * scale, source.scaled(scale), n_samples, seed)
    return combine_annular(outer, inner)


def evaluate_detector(
    z: float,
    source: SourceProfile,
    detector: DetectorShape,
    n_samples: int,
    seed: int,
) -> Tuple[float, float]:
    """(efficiency %, relative error %) for any detector shape."""
    if detector.is_annular:
        return evaluate_annular(z, source, detector, n_samples, seed).as_tuple()
    return evaluate(z, source, n_samples, seed).as_tuple()
