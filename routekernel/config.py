"""
Configuration constants for the Route Kernel project.

All tunable parameters are defined here. Runtime overrides come from
environment variables (a .env file is loaded by the scripts).
"""

import os
from pathlib import Path

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of routekernel/
PROJECT_ROOT = Path(__file__).parent.parent

# Where the CLI writes HTML figures by default
RESULTS_DIR = PROJECT_ROOT / "results"

# =============================================================================
# Geometry Configuration
# =============================================================================

# Approximate meters per degree of latitude/longitude.
# The A* heuristic scales raw coordinate distance by this factor.
METERS_PER_DEGREE = 111000

# Mean Earth radius in meters (haversine)
EARTH_RADIUS_M = 6371e3

# =============================================================================
# Search Configuration
# =============================================================================

# Algorithm used by find_path() when none is given
DEFAULT_ALGORITHM = "dijkstra"

# Preference order when comparison results tie on distance
COMPARISON_TIE_ORDER = ("dijkstra", "bfs", "astar")

# =============================================================================
# Random Graph Configuration
# =============================================================================

# Default center (Hyderabad)
DEFAULT_CENTER_LAT = 17.4474
DEFAULT_CENTER_LNG = 78.3762

# Number of nodes scattered around the center
DEFAULT_NUM_NODES = 100

# Radius of the disc nodes are scattered in (meters)
DEFAULT_RADIUS_M = 5000.0

# Connect two nodes if closer than this (meters)
DEFAULT_CONNECT_WITHIN_M = 800.0

# =============================================================================
# Visualization Configuration
# =============================================================================

FIGURE_HEIGHT = 600
NODE_MARKER_SIZE = 6
PATH_LINE_WIDTH = 4

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
