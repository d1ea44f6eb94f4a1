"""
Configuration settings for the geometric efficiency simulation.

Default values used by the runner and the command-line interface. Users can
modify these values, or override them from the command line, to customise a
sweep without touching the core code.

All lengths are in units of the (outer) detector radius.
"""

from __future__ import annotations

from .core.constants import DEFAULT_SEED

# =============================================================================
# Sweep Parameters
# =============================================================================

# Distance range (z / r_d), both ends included
DEFAULT_Z_MIN = 0.0
DEFAULT_Z_MAX = 5.0

# Number of distances in the sweep (>= 2)
DEFAULT_N_POINTS = 6

# Samples per distance = 10 ** DEFAULT_POWER
DEFAULT_POWER = 4

# Initial value of the seed counter
DEFAULT_RANDOM_SEED = DEFAULT_SEED

# =============================================================================
# Source and Detector
# =============================================================================

# 'uniform' or 'gaussian'
DEFAULT_SOURCE_TYPE = "uniform"

# Source radius (uniform) or sigma (gaussian), in units of r_d
DEFAULT_SOURCE_SIZE = 0.0

# 'circular' or 'annular'
DEFAULT_DETECTOR_TYPE = "circular"

# Inner/outer radius ratio of an annular detector
DEFAULT_ANNULAR_RATIO = 0.5

# =============================================================================
# Output
# =============================================================================

DATA_OUTPUT_DIR = "Data"
FIGURES_OUTPUT_DIR = "Figures"

SWEEP_TABLE_FILE = "geometric_efficiency.txt"
EFFICIENCY_FIGURE_BASE = "geometric_efficiency"

# =============================================================================
# Visualization Settings
# =============================================================================

PLOT_DPI = 300
EFFICIENCY_FIGSIZE = (10, 8)

MODEL_COLOR = "red"
POINT_SOURCE_COLOR = "blue"
