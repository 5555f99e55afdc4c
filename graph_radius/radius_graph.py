"""
Radius graph: connects every pair of distinct vertices within radius hops.

By default one edge is emitted per ordered pair, so a symmetric pair shows up
twice, once as (u, v) and once as (v, u). deduplicate=True keeps only u < v.
"""
from typing import List

from graph_radius.distances import bfs_distances
from graph_radius.incidence import Edge, IncidenceStore


def radius_edges(store: IncidenceStore, radius: int, deduplicate: bool = False) -> List[Edge]:
    if radius < 0:
        raise ValueError(f"radius must be non-negative, got {radius}")

    edges: List[Edge] = []
    for u in store.vertices():
        dist = bfs_distances(store, u)
        for v in store.vertices():
            if u == v or dist[v] > radius:
                continue
            if deduplicate and v < u:
                continue
            edges.append((u, v))
    return edges


def build_radius_graph(store: IncidenceStore, radius: int, deduplicate: bool = False) -> IncidenceStore:
    """
    Builds a new incidence structure over the same vertices.

    Args:
        store (IncidenceStore): Source graph.
        radius (int): Maximum BFS distance for a pair to be connected.
        deduplicate (bool): Emit each unordered pair once instead of per ordered pair.

    Returns:
        IncidenceStore: Independent store with store.vertex_count vertices.
    """
    return IncidenceStore.from_edges(store.vertex_count, radius_edges(store, radius, deduplicate))
