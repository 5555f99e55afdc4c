"""
Errors raised while building, traversing and reading graphs.
"""


class GraphError(ValueError):
    """Base class for every graph related error in this package."""


class InvalidVertex(GraphError):
    """An edge or a query referenced a vertex outside [0, V)."""

    def __init__(self, vertex, vertex_count: int):
        self.vertex = vertex
        self.vertex_count = vertex_count
        super().__init__(f"Vertex {vertex} is outside the range [0, {vertex_count}).")


class InvalidGraphSize(GraphError):
    """A vertex or edge count that is not a non-negative integer."""


class InvalidEdge(GraphError):
    """Self-loops, bad row indices and rewritten rows."""


class IncompleteGraph(GraphError):
    """Some incidence rows were allocated but never written."""


class EmptyGraph(GraphError):
    """An example has no edges (or no vertices) to analyze."""

    def __init__(self, message: str, example_number=None):
        self.example_number = example_number
        super().__init__(message)


class DisconnectedGraph(GraphError):
    """Eccentricity is undefined because some vertex cannot be reached."""

    def __init__(self, source, unreachable):
        self.source = source
        self.unreachable = list(unreachable)
        super().__init__(
            f"Graph is disconnected: vertices {self.unreachable} are unreachable from vertex {source}."
        )


class GwfFormatError(GraphError):
    def __init__(self, line_number: int, line: str, reason: str):
        self.line_number = line_number
        self.line = line
        super().__init__(f"Line {line_number}: {reason} ({line!r})")
