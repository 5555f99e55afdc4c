from collections import deque
from typing import List, Union

from graph_radius.errors import IncompleteGraph, InvalidVertex
from graph_radius.incidence import IncidenceStore

# Distance of a vertex the search never reached
UNREACHABLE = float('inf')

Distance = Union[int, float]


def bfs_distances(store: IncidenceStore, source: int) -> List[Distance]:
    """
    Compute shortest-path distances (in edges) from source to every vertex.

    Args:
        store: Incidence structure of an unweighted, undirected graph
        source: Vertex the search starts from

    Returns:
        list: distance per vertex index; UNREACHABLE for vertices in other components
    """
    if isinstance(source, bool) or not isinstance(source, int) or not 0 <= source < store.vertex_count:
        raise InvalidVertex(source, store.vertex_count)
    if not store.is_complete():
        raise IncompleteGraph(f"{store.edge_count - len(store.edges)} incidence rows were never written.")

    dist: List[Distance] = [UNREACHABLE] * store.vertex_count
    dist[source] = 0
    queue = deque([source])

    while queue:
        node = queue.popleft()
        for neighbor in store.neighbors(node):
            if dist[neighbor] == UNREACHABLE:
                dist[neighbor] = dist[node] + 1
                queue.append(neighbor)

    return dist


def distance_table(store: IncidenceStore) -> List[List[Distance]]:
    """One fresh distance vector per source vertex."""
    return [bfs_distances(store, source) for source in store.vertices()]
