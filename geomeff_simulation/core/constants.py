"""
Numerical constants for the geometric efficiency simulation.
"""

import math

TWO_PI = 2.0 * math.pi

# Isotropic emission is sampled over the full sphere, only the half facing
# the detector counts, so hits are converted to percent with 50 instead of 100.
HEMISPHERE_PERCENT = 50.0

# Point-source approximation at z = 0
POINT_SOURCE_LIMIT_PERCENT = 50.0

# Detector radius in normalised units (all lengths are z / r_d)
DETECTOR_RADIUS = 1.0

# Seeds consumed by one efficiency evaluation: source positions, emission offsets
SEEDS_PER_POINT = 2

# Randomly picked default seed
DEFAULT_SEED = 15763027

# numpy seeds must be non-negative, any Python int is folded into this range
SEED_MODULUS = 2 ** 64

# Largest number of rays held in memory at once by one evaluation
MAX_BATCH_SIZE = 10 ** 6
