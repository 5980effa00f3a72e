"""
Heuristics module.

Provides heuristic functions for guiding A* search:
- euclidean_heuristic: Scaled straight-line coordinate distance
- zero_heuristic: Uninformed baseline
"""

from routekernel.heuristics.euclidean import (
    coordinate_distance_m,
    euclidean_heuristic,
    zero_heuristic,
)

__all__ = ["coordinate_distance_m", "euclidean_heuristic", "zero_heuristic"]
