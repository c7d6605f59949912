from enum import Enum
from typing import Any, Protocol, runtime_checkable


class EdgeType(str, Enum):
    """Edge type (DIRECTED, UNDIRECTED).

    Attributes:
        DIRECTED: Arcs are ordered (tail, head) pairs
        UNDIRECTED: Edges are unordered pairs of distinct vertices
    """

    DIRECTED = "directed"
    UNDIRECTED = "undirected"


@runtime_checkable
class VertexStore(Protocol):
    """Vocabulary shared by the undirected and directed stores.

    Each store implements it independently; nothing here is inherited.
    """

    edge_type: EdgeType

    @property
    def vertex_type(self) -> Any: ...

    def has_vertex(self, v) -> bool: ...

    def has_edge(self, u, w) -> bool: ...

    def vertex_list(self) -> list: ...

    def edge_list(self) -> list: ...

    def degree(self, v=...): ...

    def number_of_vertices(self) -> int: ...

    def number_of_edges(self) -> int: ...


__all__ = ["EdgeType", "VertexStore"]
