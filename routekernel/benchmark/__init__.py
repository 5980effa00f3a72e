"""
Benchmark module.

Compares search engines on the same query (distance, expansions, time).
"""

from routekernel.benchmark.compare import ComparisonReport, compare_algorithms

__all__ = ["ComparisonReport", "compare_algorithms"]
