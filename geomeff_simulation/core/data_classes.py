"""
Data classes for the geometric efficiency simulation.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

import numpy as np

from .constants import DEFAULT_SEED
from .errors import InvalidConfiguration, SizeMismatch


@dataclass
class PointBatch:
    """A batch of 2D points stored as two coordinate arrays of equal length."""

    x: np.ndarray
    y: np.ndarray

    def __post_init__(self):
        self.x = np.asarray(self.x, dtype=float)
        self.y = np.asarray(self.y, dtype=float)
        if self.x.shape != self.y.shape:
            raise SizeMismatch(
                f"x and y must have the same length, got {self.x.size} and {self.y.size}"
            )

    @classmethod
    def empty(cls, n: int) -> "PointBatch":
        """Allocate a zero-filled batch of ``n`` points, ready to be generated into."""
        if n < 0:
            raise InvalidConfiguration(f"Batch size must be non-negative, got {n}")
        return cls(np.zeros(n, dtype=float), np.zeros(n, dtype=float))

    def __len__(self) -> int:
        return int(self.x.size)


class SourceType(str, Enum):
    UNIFORM = "uniform"
    GAUSSIAN = "gaussian"


class DetectorType(str, Enum):
    CIRCULAR = "circular"
    ANNULAR = "annular"


def _parse_enum(enum_cls, name, what: str):
    if isinstance(name, enum_cls):
        return name
    try:
        return enum_cls(str(name).strip().lower())
    except ValueError:
        choices = " or ".join(f"'{member.value}'" for member in enum_cls)
        raise InvalidConfiguration(
            f"Not a valid {what} type: {name!r}. Choose {choices}"
        ) from None


def _as_float(value, what: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError, OverflowError):
        raise InvalidConfiguration(f"{what} must be a number, got {value!r}") from None


def _as_int(value, what: str) -> int:
    """Integer value of ``value``; non-integral floats, NaN and inf are rejected."""
    try:
        as_int = int(value)
    except (TypeError, ValueError, OverflowError):
        raise InvalidConfiguration(f"{what} must be an integer, got {value!r}") from None
    if as_int != value:
        raise InvalidConfiguration(f"{what} must be an integer, got {value!r}")
    return as_int


@dataclass(frozen=True)
class SourceProfile:
    """Spatial profile of the emitting source.

    ``size`` is the disc radius for a uniform source and the standard
    deviation of the radial offset for a Gaussian source, both in units of
    the detector radius.
    """

    kind: SourceType
    size: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "kind", _parse_enum(SourceType, self.kind, "source"))
        size = _as_float(self.size, "Source size")
        if not math.isfinite(size) or size < 0.0:
            raise InvalidConfiguration(f"Source size must be finite and >= 0, got {self.size}")
        object.__setattr__(self, "size", size)

    @classmethod
    def uniform(cls, radius: float) -> "SourceProfile":
        return cls(SourceType.UNIFORM, radius)

    @classmethod
    def gaussian(cls, sigma: float) -> "SourceProfile":
        return cls(SourceType.GAUSSIAN, sigma)

    @classmethod
    def from_name(cls, name: str, size: float) -> "SourceProfile":
        return cls(_parse_enum(SourceType, name, "source"), size)

    def scaled(self, factor: float) -> "SourceProfile":
        """Same profile with its size expressed in a detector ``1/factor`` times as large."""
        return SourceProfile(self.kind, self.size * factor)


@dataclass(frozen=True)
class DetectorShape:
    """Detector geometry: a full disc, or a disc with an inner exclusion.

    For an annular detector ``ratio`` is inner radius / outer radius, in (0, 1].
    """

    kind: DetectorType = DetectorType.CIRCULAR
    ratio: Optional[float] = None

    def __post_init__(self):
        object.__setattr__(self, "kind", _parse_enum(DetectorType, self.kind, "detector"))
        if self.kind is DetectorType.ANNULAR:
            if self.ratio is None:
                raise InvalidConfiguration("An annular detector needs an inner/outer radius ratio")
            ratio = _as_float(self.ratio, "Inner/outer radius ratio")
            if not (0.0 < ratio <= 1.0):
                raise InvalidConfiguration(
                    f"Inner/outer radius ratio must be in (0, 1], got {self.ratio}"
                )
            object.__setattr__(self, "ratio", ratio)
        else:
            object.__setattr__(self, "ratio", None)

    @classmethod
    def circular(cls) -> "DetectorShape":
        return cls(DetectorType.CIRCULAR)

    @classmethod
    def annular(cls, ratio: float) -> "DetectorShape":
        return cls(DetectorType.ANNULAR, ratio)

    @classmethod
    def from_outer_inner(cls, fraction: float) -> "DetectorShape":
        """Annular detector from an outer/inner radius fraction (>= 1)."""
        fraction = _as_float(fraction, "Outer/inner radius fraction")
        if not fraction >= 1.0:
            raise InvalidConfiguration(f"Outer/inner radius fraction must be >= 1, got {fraction}")
        return cls.annular(1.0 / fraction)

    @classmethod
    def from_name(cls, name: str, ratio: Optional[float] = None) -> "DetectorShape":
        return cls(_parse_enum(DetectorType, name, "detector"), ratio)

    @property
    def is_annular(self) -> bool:
        return self.kind is DetectorType.ANNULAR

    @property
    def inner_scale(self) -> float:
        """Factor turning lengths in outer-radius units into inner-radius units."""
        if not self.is_annular:
            return 1.0
        return 1.0 / self.ratio


@dataclass
class EfficiencyEstimate:
    """Result of one Monte Carlo efficiency evaluation."""

    efficiency_percent: float
    relative_error_percent: float  # inf when no hit was recorded
    hits: int = 0
    n_samples: int = 0

    def as_tuple(self) -> Tuple[float, float]:
        return self.efficiency_percent, self.relative_error_percent


@dataclass
class AnnularEstimate:
    """Outer and inner disc estimates combined into an annulus estimate."""

    outer: EfficiencyEstimate
    inner: EfficiencyEstimate
    efficiency_percent: float
    relative_error_percent: float

    def as_tuple(self) -> Tuple[float, float]:
        return self.efficiency_percent, self.relative_error_percent


@dataclass
class SweepPoint:
    """One distance of a sweep and its results."""

    z: float  # distance / detector radius
    efficiency_percent: float
    relative_error_percent: float
    point_source_percent: float
    seed: int


@dataclass
class SweepConfig:
    """Input of a distance sweep, validated once at construction.

    Attributes
    ----------
    z_min, z_max : float
        Distance range in units of the detector radius (both ends included).
    n_points : int
        Number of distances, at least 2.
    source : SourceProfile
        Source spatial profile and size.
    detector : DetectorShape
        Detector shape.
    power : int
        Samples per distance are ``10 ** power``. They are generated in
        chunks of at most ``MAX_BATCH_SIZE`` rays, so memory does not grow
        with ``power``.
    seed : int
        Initial value of the seed counter.
    """

    z_min: float
    z_max: float
    n_points: int
    source: SourceProfile
    detector: DetectorShape = field(default_factory=DetectorShape.circular)
    power: int = 4
    seed: int = DEFAULT_SEED

    def __post_init__(self):
        if not isinstance(self.source, SourceProfile):
            raise InvalidConfiguration(f"source must be a SourceProfile, got {self.source!r}")
        if not isinstance(self.detector, DetectorShape):
            raise InvalidConfiguration(f"detector must be a DetectorShape, got {self.detector!r}")
        self.n_points = _as_int(self.n_points, "Number of points")
        if self.n_points < 2:
            raise InvalidConfiguration(f"Number of points must be an integer >= 2, got {self.n_points}")
        self.power = _as_int(self.power, "Power")
        if self.power < 0:
            raise InvalidConfiguration(f"Power must be a non-negative integer, got {self.power}")
        self.seed = _as_int(self.seed, "Seed")
        self.z_min = _as_float(self.z_min, "z_min")
        self.z_max = _as_float(self.z_max, "z_max")
        if not (math.isfinite(self.z_min) and math.isfinite(self.z_max)):
            raise InvalidConfiguration(f"Distances must be finite, got [{self.z_min}, {self.z_max}]")
        if self.z_min < 0.0 or self.z_max < self.z_min:
            raise InvalidConfiguration(
                f"Distance range must satisfy 0 <= z_min <= z_max, got [{self.z_min}, {self.z_max}]"
            )

    @property
    def n_samples(self) -> int:
        return 10 ** self.power


@dataclass
class SweepResult:
    """Ordered sweep points together with the configuration that produced them."""

    config: SweepConfig
    points: List[SweepPoint] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.points)

    @property
    def z(self) -> np.ndarray:
        return np.array([p.z for p in self.points], dtype=float)

    @property
    def efficiencies(self) -> np.ndarray:
        return np.array([p.efficiency_percent for p in self.points], dtype=float)

    @property
    def relative_errors(self) -> np.ndarray:
        return np.array([p.relative_error_percent for p in self.points], dtype=float)

    @property
    def point_source(self) -> np.ndarray:
        return np.array([p.point_source_percent for p in self.points], dtype=float)

    @property
    def absolute_errors(self) -> np.ndarray:
        """Relative errors converted to efficiency percent (NaN where nothing was hit)."""
        with np.errstate(invalid="ignore"):
            return self.efficiencies * self.relative_errors / 100.0

    def as_tuples(self) -> List[Tuple[float, float, float]]:
        return [(p.z, p.efficiency_percent, p.relative_error_percent) for p in self.points]
