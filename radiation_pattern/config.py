"""
Configuration settings for the falling-beam dose simulation.

This module holds the defaults used when a value is not given on the command
line. Users can modify these values to customise the simulation without
changing the core code.
"""

from __future__ import annotations

# =============================================================================
# Detector Configuration
# =============================================================================

# Radius of the circular detector region (cm). The dose grid is the square
# bounding this circle.
GRID_RADIUS_CM = 0.15

# Number of lattice points per axis
GRID_RESOLUTION = 50

# Detector centre (cm)
DETECTOR_CENTER_CM = (0.0, 0.0)

# =============================================================================
# Beam Configuration
# =============================================================================

# Disk radius for the circular beam, standard deviation for the Gaussian beam (cm)
BEAM_RADIUS_CM = 1.0

# Baseline dose rate (W/cm²)
BEAM_INTENSITY_W_CM2 = 2.0

# Linear change of the baseline dose rate per second (W/cm²/s); 0 disables it
BEAM_INTENSITY_RAMP = 0.0

# Horizontal position of the falling beam (cm)
BEAM_X_CM = 0.0

# =============================================================================
# Execution
# =============================================================================

# Worker threads used to sample the grid; None lets the executor choose
DEFAULT_MAX_WORKERS = None

# Evaluate the dose field on whole coordinate arrays instead of per cell
DEFAULT_VECTORIZED = False

# =============================================================================
# Output
# =============================================================================

DATA_OUTPUT_DIR = "Data"
FIGURES_OUTPUT_DIR = "Figures"
DOSE_MAP_FILE = "dose_map.txt"
DOSE_MAP_FIGURE = "dose_map.png"

# =============================================================================
# Visualization Settings
# =============================================================================

PLOT_DPI = 300
DOSE_MAP_FIGSIZE = (8, 7)
DOSE_COLORMAP = "inferno"
DETECTOR_COLOR = "cyan"
DETECTOR_LINEWIDTH = 1.5
