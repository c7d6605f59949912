"""Exceptions raised by simplegraphs.

Each class also derives from the builtin normally raised for the same
situation, so ``except KeyError`` style handlers keep working.
"""


class GraphError(Exception):
    """Base exception for graph operations."""


class UnknownVertex(GraphError, KeyError):
    """Raised when a query names a vertex that is not in the graph."""

    def __init__(self, vertex):
        super().__init__(vertex)
        self.vertex = vertex

    def __str__(self):
        return f"vertex {self.vertex!r} not found"


class UnknownEdge(GraphError, KeyError):
    """Raised when a query names an edge that is not in the graph."""

    def __init__(self, u, v):
        super().__init__((u, v))
        self.edge = (u, v)

    def __str__(self):
        return f"edge {self.edge!r} not found"


class TypeMismatch(GraphError, TypeError):
    """Raised when a vertex cannot be represented in the graph's vertex type."""


class InvalidSize(GraphError, ValueError):
    """Raised when a size argument is out of range (e.g. a cycle on 2 vertices)."""


class NotBipartite(GraphError, ValueError):
    """Raised when a two-coloring is requested for a graph with an odd cycle."""


__all__ = [
    "GraphError",
    "UnknownVertex",
    "UnknownEdge",
    "TypeMismatch",
    "InvalidSize",
    "NotBipartite",
]
