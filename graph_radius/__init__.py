"""
Eccentricity, radius, center and radius graph of small undirected graphs
stored as incidence matrices.
"""
from graph_radius.distances import UNREACHABLE, bfs_distances, distance_table
from graph_radius.errors import (
    DisconnectedGraph,
    EmptyGraph,
    GraphError,
    GwfFormatError,
    IncompleteGraph,
    InvalidGraphSize,
    InvalidEdge,
    InvalidVertex,
)
from graph_radius.incidence import IncidenceStore
from graph_radius.metrics import (
    GraphMetrics,
    central_vertices,
    compute_metrics,
    diameter,
    eccentricities,
    eccentricity,
    radius,
)
from graph_radius.radius_graph import build_radius_graph, radius_edges
