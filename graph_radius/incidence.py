"""
Incidence-matrix storage for small undirected graphs.
Rows are edges, columns are vertices; a written row has exactly two 1-entries.
"""
from typing import Iterable, List, Optional, Tuple
import networkx as nx

from graph_radius.errors import InvalidEdge, InvalidGraphSize, InvalidVertex

Edge = Tuple[int, int]


class IncidenceStore:
    """
    Holds a graph as a vertex count plus an ordered edge list, materializable
    as a dense E x V incidence matrix.

    Rows are allocated up front and written once through add_edge().
    """
    def __init__(self, vertex_count: int, edge_count: int = 0):
        if not isinstance(vertex_count, int) or vertex_count < 0:
            raise InvalidGraphSize(f"vertex_count must be a non-negative integer, got {vertex_count!r}")
        if not isinstance(edge_count, int) or edge_count < 0:
            raise InvalidGraphSize(f"edge_count must be a non-negative integer, got {edge_count!r}")
        self.vertex_count = vertex_count
        self._rows: List[List[int]] = [[0] * vertex_count for _ in range(edge_count)]
        self._edges: List[Optional[Edge]] = [None] * edge_count
        self._adjacency: Optional[List[Tuple[int, ...]]] = None

    @classmethod
    def from_edges(cls, vertex_count: int, edges: Iterable[Edge]) -> "IncidenceStore":
        """Allocates one row per edge and writes them in order."""
        edge_list = [tuple(edge) for edge in edges]
        store = cls(vertex_count, len(edge_list))
        for edge_index, (u, v) in enumerate(edge_list):
            store.add_edge(edge_index, u, v)
        return store

    def _check_vertex(self, vertex):
        # bool is an int subclass but never a vertex index
        if isinstance(vertex, bool) or not isinstance(vertex, int) or not 0 <= vertex < self.vertex_count:
            raise InvalidVertex(vertex, self.vertex_count)

    def add_edge(self, edge_index: int, u: int, v: int):
        """
        Sets the two incidence bits of row edge_index.

        Args:
            edge_index (int): Row to write, must be pre-allocated and still empty.
            u (int): First endpoint.
            v (int): Second endpoint, different from u.
        """
        self._check_vertex(u)
        self._check_vertex(v)
        if u == v:
            raise InvalidEdge(f"Self-loop on vertex {u} is not supported.")
        if not 0 <= edge_index < len(self._rows):
            raise InvalidEdge(f"Edge index {edge_index} is outside the {len(self._rows)} allocated rows.")
        if self._edges[edge_index] is not None:
            raise InvalidEdge(f"Edge row {edge_index} is already set to {self._edges[edge_index]}.")

        self._rows[edge_index][u] = 1
        self._rows[edge_index][v] = 1
        self._edges[edge_index] = (u, v)
        self._adjacency = None

    @property
    def edge_count(self) -> int:
        return len(self._rows)

    @property
    def edges(self) -> List[Edge]:
        return [edge for edge in self._edges if edge is not None]

    def vertices(self) -> range:
        return range(self.vertex_count)

    def is_complete(self) -> bool:
        return all(edge is not None for edge in self._edges)

    def matrix(self) -> List[List[int]]:
        return [list(row) for row in self._rows]

    def _build_adjacency(self) -> List[Tuple[int, ...]]:
        adjacency: List[List[int]] = [[] for _ in range(self.vertex_count)]
        for u, v in self.edges:
            adjacency[u].append(v)
            adjacency[v].append(u)
        return [tuple(neighbors) for neighbors in adjacency]

    def neighbors(self, u: int) -> Tuple[int, ...]:
        """
        Neighbors of u, one entry per incident edge, in edge order.
        The adjacency is derived from the written rows once and reused read-only.
        """
        self._check_vertex(u)
        if self._adjacency is None:
            self._adjacency = self._build_adjacency()
        return self._adjacency[u]

    def degree(self, u: int) -> int:
        return len(self.neighbors(u))

    def to_networkx(self) -> nx.MultiGraph:
        graph = nx.MultiGraph()
        graph.add_nodes_from(self.vertices())
        graph.add_edges_from(self.edges)
        return graph

    def __repr__(self):
        return f"IncidenceStore(vertices={self.vertex_count}, edges={self.edges})"
