"""
Eccentricity, radius, center and diameter of a connected graph.

Eccentricity is only defined for connected graphs: a vertex that cannot reach
every other vertex raises DisconnectedGraph instead of reporting an infinite
distance.
"""
from typing import List, Optional, Sequence

from graph_radius.distances import UNREACHABLE, Distance, bfs_distances
from graph_radius.errors import DisconnectedGraph, EmptyGraph
from graph_radius.incidence import IncidenceStore


def eccentricity(distances: Sequence[Distance], source: Optional[int] = None) -> int:
    """
    Greatest distance in a single-source distance vector.

    Args:
        distances: Output of bfs_distances for one source
        source: Source vertex, only used in the error message

    Returns:
        int: The eccentricity of the source vertex
    """
    unreachable = [vertex for vertex, dist in enumerate(distances) if dist == UNREACHABLE]
    if unreachable:
        raise DisconnectedGraph(source, unreachable)
    return max(distances, default=0)


def eccentricities(store: IncidenceStore) -> List[int]:
    return [eccentricity(bfs_distances(store, vertex), vertex) for vertex in store.vertices()]


def radius(ecc: Sequence[int]) -> int:
    """The radius is the minimum eccentricity among all vertices in the graph."""
    if not ecc:
        raise EmptyGraph("Radius is undefined for a graph without vertices.")
    return min(ecc)


def diameter(ecc: Sequence[int]) -> int:
    if not ecc:
        raise EmptyGraph("Diameter is undefined for a graph without vertices.")
    return max(ecc)


def central_vertices(ecc: Sequence[int], rad: int) -> List[int]:
    """Vertices whose eccentricity equals the radius, in ascending order."""
    return [vertex for vertex, value in enumerate(ecc) if value == rad]


class GraphMetrics:
    """Metrics of one graph, derived together from a single eccentricity vector."""
    def __init__(self, eccentricities: List[int], radius: int, central_vertices: List[int], diameter: int):
        self.eccentricities = eccentricities
        self.radius = radius
        self.central_vertices = central_vertices
        self.diameter = diameter

    def __eq__(self, other):
        if not isinstance(other, GraphMetrics):
            return NotImplemented
        return (self.eccentricities == other.eccentricities
                and self.radius == other.radius
                and self.central_vertices == other.central_vertices
                and self.diameter == other.diameter)

    def __repr__(self):
        return (f"GraphMetrics(eccentricities={self.eccentricities}, radius={self.radius}, "
                f"central_vertices={self.central_vertices}, diameter={self.diameter})")


def compute_metrics(store: IncidenceStore) -> GraphMetrics:
    ecc = eccentricities(store)
    rad = radius(ecc)
    return GraphMetrics(
        eccentricities=ecc,
        radius=rad,
        central_vertices=central_vertices(ecc, rad),
        diameter=diameter(ecc),
    )
