"""
Visualization module.

Plotly figures for exploring search results:
- create_exploration_figure: Expanded nodes and path on a coordinate plot
- create_comparison_chart: Distance / expansion bars per algorithm
"""

from routekernel.visualization.charts import create_comparison_chart, create_exploration_figure

__all__ = ["create_comparison_chart", "create_exploration_figure"]
