"""
Seeded random sampling for the point generators.
"""

from __future__ import annotations

from typing import Optional, Union

import numpy as np

from .constants import SEED_MODULUS

Draws = Union[float, np.ndarray]


class RandomSampler:
    """Reproducible uniform and normal draws from a single seed.

    Two samplers built from the same seed produce identical sequences of
    draws, provided the draws are requested in the same order and with the
    same sizes.

    Parameters
    ----------
    seed : int
        Any Python integer. Negative values are folded into the unsigned
        64-bit range accepted by numpy.
    stream : int
        Index of an independent sub-sequence of ``seed``. Stream 0 is the
        plain seed.
    """

    def __init__(self, seed: int, stream: int = 0):
        self.reseed(seed, stream)

    def reseed(self, seed: int, stream: int = 0):
        """Restart the draw sequence from ``seed``."""
        self.seed = int(seed)
        self.stream = int(stream)
        if self.stream == 0:
            entropy = self.seed % SEED_MODULUS
        else:
            entropy = [self.seed % SEED_MODULUS, self.stream]
        self._generator = np.random.default_rng(entropy)

    def uniform(self, low: float = 0.0, high: float = 1.0, size: Optional[int] = None) -> Draws:
        """Draw from U(low, high)."""
        return self._generator.uniform(low, high, size)

    def normal(self, mean: float = 0.0, stddev: float = 1.0, size: Optional[int] = None) -> Draws:
        """Draw from N(mean, stddev). A zero ``stddev`` returns ``mean`` exactly."""
        return self._generator.normal(mean, stddev, size)

    def __repr__(self) -> str:
        return f"RandomSampler(seed={self.seed}, stream={self.stream})"
