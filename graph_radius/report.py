"""
Turns analyzed examples into text, JSON-ready dicts, DataFrames and figures.
"""
from typing import Any, Dict, Iterable, List, Optional, Sequence
import matplotlib.pyplot as plt
import networkx as nx
import pandas as pd

from graph_radius import config
from graph_radius.gwf import GwfExample
from graph_radius.incidence import IncidenceStore
from graph_radius.metrics import GraphMetrics, compute_metrics
from graph_radius.radius_graph import build_radius_graph


class ExampleResult:
    """Everything computed for one example."""
    def __init__(self, number: int, store: IncidenceStore, metrics: GraphMetrics, radius_graph: IncidenceStore):
        self.number = number
        self.store = store
        self.metrics = metrics
        self.radius_graph = radius_graph

    def __repr__(self):
        return (f"ExampleResult(number={self.number}, vertices={self.store.vertex_count}, "
                f"edges={self.store.edge_count}, metrics={self.metrics})")


def analyze_example(example: GwfExample, vertex_count: Optional[int] = None,
                    deduplicate: bool = False) -> ExampleResult:
    """
    Builds the incidence store for an example and computes its metrics and radius graph.

    Args:
        example (GwfExample): Parsed example.
        vertex_count (Optional[int]): Overrides the vertex count declared by the example.
        deduplicate (bool): Emit each radius-graph pair once.

    Returns:
        ExampleResult: The store, its metrics and the derived radius graph.
    """
    if vertex_count is None:
        vertex_count = example.vertex_count(config.DEFAULT_VERTEX_COUNT)
    store = IncidenceStore.from_edges(vertex_count, example.edges)
    metrics = compute_metrics(store)
    radius_graph = build_radius_graph(store, metrics.radius, deduplicate=deduplicate)
    return ExampleResult(example.number, store, metrics, radius_graph)


def _join(values: Iterable[Any]) -> str:
    return " ".join(str(value) for value in values)


def format_matrix(matrix: Sequence[Sequence[int]]) -> str:
    return "\n".join(_join(row) for row in matrix)


def render_report(result: ExampleResult) -> str:
    lines = [
        f"Example {result.number}:",
        "Original Incidence Matrix:",
    ]
    if result.store.edge_count:
        lines.append(format_matrix(result.store.matrix()))
    lines.extend([
        f"Eccentricities: {_join(result.metrics.eccentricities)}",
        f"Radius: {result.metrics.radius}",
        f"Diameter: {result.metrics.diameter}",
        f"Central Vertices: {_join(result.metrics.central_vertices)}",
        "Radius Graph Incidence Matrix:",
    ])
    if result.radius_graph.edge_count:
        lines.append(format_matrix(result.radius_graph.matrix()))
    lines.append(config.SEPARATOR)
    return "\n".join(lines)


def result_to_dict(result: ExampleResult) -> Dict[str, Any]:
    return {
        "example": result.number,
        "vertex_count": result.store.vertex_count,
        "edges": [list(edge) for edge in result.store.edges],
        "incidence_matrix": result.store.matrix(),
        "eccentricities": result.metrics.eccentricities,
        "radius": result.metrics.radius,
        "diameter": result.metrics.diameter,
        "central_vertices": result.metrics.central_vertices,
        "radius_graph": {
            "edges": [list(edge) for edge in result.radius_graph.edges],
            "incidence_matrix": result.radius_graph.matrix(),
        },
    }


def matrix_to_frame(matrix: List[List[int]], vertex_count: int) -> pd.DataFrame:
    """Incidence matrix as a DataFrame with e0.. row labels and v0.. column labels."""
    return pd.DataFrame(
        matrix,
        index=[f"e{i}" for i in range(len(matrix))],
        columns=[f"v{j}" for j in range(vertex_count)],
        dtype=int,
    )


def plot_graph(store: IncidenceStore, central: Iterable[int] = (), title: Optional[str] = None):
    """
    Draws the graph on a circular layout with central vertices highlighted.

    Returns:
        matplotlib.figure.Figure: The figure, left open for the caller to show or save.
    """
    graph = store.to_networkx()
    central_set = set(central)
    pos = nx.circular_layout(graph)
    colors = [config.CENTER_COLOR if node in central_set else config.NODE_COLOR for node in graph.nodes()]

    fig, ax = plt.subplots(figsize=(4, 4))
    nx.draw_networkx_nodes(graph, pos, ax=ax, node_color=colors)
    nx.draw_networkx_labels(graph, pos, ax=ax)
    nx.draw_networkx_edges(graph, pos, ax=ax)
    if title:
        ax.set_title(title)
    ax.set_axis_off()
    return fig
