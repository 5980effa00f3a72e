"""
Plotly figures for search results.
"""

from __future__ import annotations

from collections.abc import Mapping

import plotly.graph_objects as go

from routekernel.benchmark.compare import ComparisonReport
from routekernel.config import FIGURE_HEIGHT, NODE_MARKER_SIZE, PATH_LINE_WIDTH
from routekernel.graph.model import Node
from routekernel.search.base import SearchResult


def _edge_lines(graph: Mapping[str, Node]) -> tuple[list[float | None], list[float | None]]:
    """Line coordinates for every edge, separated by None gaps."""
    xs: list[float | None] = []
    ys: list[float | None] = []
    for node in graph.values():
        if not node.has_coordinates:
            continue
        for neighbor_id in node.neighbors:
            neighbor = graph.get(neighbor_id)
            if neighbor is None or not neighbor.has_coordinates:
                continue
            xs += [node.lng, neighbor.lng, None]
            ys += [node.lat, neighbor.lat, None]
    return xs, ys


def create_exploration_figure(
    graph: Mapping[str, Node],
    result: SearchResult,
    title: str = "Search exploration",
) -> go.Figure:
    """
    Map of a search: edges, expanded nodes colored by order, and the path.

    Nodes without coordinates are left out.
    """
    fig = go.Figure()

    edge_x, edge_y = _edge_lines(graph)
    fig.add_trace(go.Scatter(
        x=edge_x,
        y=edge_y,
        mode="lines",
        line=dict(width=0.5, color="#bdc3c7"),
        hoverinfo="skip",
        name="edges",
    ))

    visited = [
        (order, graph[node_id])
        for order, node_id in enumerate(result.visited_order)
        if graph[node_id].has_coordinates
    ]
    fig.add_trace(go.Scatter(
        x=[node.lng for _, node in visited],
        y=[node.lat for _, node in visited],
        mode="markers",
        marker=dict(
            size=NODE_MARKER_SIZE,
            color=[order for order, _ in visited],
            colorscale="Viridis",
            colorbar=dict(title=dict(text="Order")),
        ),
        text=[node.id for _, node in visited],
        hovertemplate="<b>%{text}</b><br>expanded #%{marker.color}<extra></extra>",
        name="visited",
    ))

    path_nodes = [graph[node_id] for node_id in result.path if graph[node_id].has_coordinates]
    fig.add_trace(go.Scatter(
        x=[node.lng for node in path_nodes],
        y=[node.lat for node in path_nodes],
        mode="lines+markers",
        line=dict(width=PATH_LINE_WIDTH, color="#e74c3c"),
        text=[node.id for node in path_nodes],
        hovertemplate="<b>%{text}</b><extra></extra>",
        name="path",
    ))

    distance = "unreachable" if not result.found else f"{result.distance:,.1f}"
    fig.update_layout(
        title=f"{title} (distance: {distance}, expanded: {result.expanded_count})",
        xaxis_title="Longitude",
        yaxis_title="Latitude",
        height=FIGURE_HEIGHT,
        margin=dict(t=50, b=45, l=55, r=15),
    )
    fig.update_yaxes(scaleanchor="x", scaleratio=1)
    return fig


def create_comparison_chart(report: ComparisonReport) -> go.Figure:
    """Grouped bars: distance and expanded nodes per algorithm."""
    names = list(report.results.keys())
    colors = ["#2ecc71" if name == report.best else "#3498db" for name in names]

    fig = go.Figure(data=[
        go.Bar(
            x=names,
            y=[r.distance if r.found else None for r in report.results.values()],
            marker_color=colors,
            name="distance",
        ),
        go.Bar(
            x=names,
            y=[r.expanded_count for r in report.results.values()],
            marker_color="#95a5a6",
            name="expanded",
            yaxis="y2",
        ),
    ])

    fig.update_layout(
        title=f"Route comparison: {report.start_id} -> {report.end_id}",
        barmode="group",
        yaxis=dict(title="Distance"),
        yaxis2=dict(title="Expanded nodes", overlaying="y", side="right"),
        height=320,
        margin=dict(t=35, b=45, l=55, r=55),
    )
    return fig
