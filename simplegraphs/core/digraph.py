from __future__ import annotations

from ..errors import InvalidSize, UnknownVertex
from ..utils.validation import coerce_vertex, sorted_if_possible, type_name
from ._state import _State
from .graph import _ALL, Graph
from .structure import EdgeType


class DiGraph:
    """Simple directed graph with an optional loop permission.

    Each vertex owns two adjacency entries, its out-neighbors and its
    in-neighbors, so removing a vertex only visits its own neighborhoods.
    At most one arc runs from a given tail to a given head.

    Parameters
    ----------
    vertex_type : type or tuple of types, optional
        Fixed vertex type for the lifetime of the digraph.
    loops : bool, default True
        Whether self-arcs ``(v, v)`` may be added.
    history : bool, default True
        Record mutations in the in-memory history log.

    """

    edge_type = EdgeType.DIRECTED

    _MUTATORS = (
        "add_vertex",
        "add_edge",
        "remove_vertex",
        "remove_edge",
        "allow_loops",
        "forbid_loops",
        "remove_loops",
    )

    def __init__(self, vertex_type=None, *, loops: bool = True, history: bool = True):
        self._vertex_type = vertex_type
        self._out = {}  # tail -> {head: None}
        self._in = {}  # head -> {tail: None}
        self._looped = bool(loops)
        self._state = _State(history=history)
        self._state.install_hooks(self, self._MUTATORS)

    @classmethod
    def from_edges(cls, edges, vertices=(), **config) -> DiGraph:
        """Build a digraph from an iterable of ``(tail, head)`` pairs."""
        D = cls(**config)
        D.add_vertices(vertices)
        D.add_edges(edges)
        return D

    @classmethod
    def integer_graph(cls, n: int, **config) -> DiGraph:
        """Arcless digraph on the vertices ``1..n`` with ``vertex_type=int``."""
        if n < 0:
            raise InvalidSize(f"number of vertices must be nonnegative, got {n}")
        config.setdefault("vertex_type", int)
        D = cls(**config)
        D.add_vertices(range(1, n + 1))
        return D

    @property
    def vertex_type(self):
        return self._vertex_type

    # Loop permission

    @property
    def is_looped(self) -> bool:
        return self._looped

    def allow_loops(self):
        self._looped = True

    def remove_loops(self):
        """Delete every self-arc; the loop permission is left as it is."""
        for v in self.loops():
            self.remove_edge(v, v)

    def forbid_loops(self):
        """Delete every self-arc and refuse new ones."""
        self.remove_loops()
        self._looped = False

    def loops(self) -> list:
        """Vertices carrying a self-arc, sorted when orderable."""
        return sorted_if_possible(v for v, heads in self._out.items() if v in heads)

    # Mutation

    def add_vertex(self, v) -> bool:
        v = coerce_vertex(v, self._vertex_type)
        if v in self._out:
            return False
        self._out[v] = {}
        self._in[v] = {}
        return True

    def add_vertices(self, vertices) -> int:
        return sum(1 for v in vertices if self.add_vertex(v))

    def add_edge(self, u, w) -> bool:
        """Add the arc ``u -> w``.

        Parameters
        ----------
        u : hashable
            Tail.
        w : hashable
            Head.

        Returns
        -------
        bool
            False if the arc exists already, or if it is a loop and loops are
            forbidden.

        """
        u = coerce_vertex(u, self._vertex_type)
        w = coerce_vertex(w, self._vertex_type)
        if (u == w and not self._looped) or self.has_edge(u, w):
            return False
        if u not in self._out:
            self.add_vertex(u)
        if w not in self._out:
            self.add_vertex(w)
        self._out[u][w] = None
        self._in[w][u] = None
        return True

    def add_edges(self, edges) -> int:
        return sum(1 for u, w in edges if self.add_edge(u, w))

    def remove_edge(self, u, w) -> bool:
        if not self.has_edge(u, w):
            return False
        del self._out[u][w]
        del self._in[w][u]
        return True

    def remove_vertex(self, v) -> bool:
        """Remove ``v`` with all arcs entering or leaving it; False if absent."""
        if v not in self._out:
            return False
        for w in list(self._out[v]):
            self.remove_edge(v, w)
        for u in list(self._in[v]):
            self.remove_edge(u, v)
        del self._out[v]
        del self._in[v]
        return True

    # Queries

    def has_vertex(self, v) -> bool:
        return v in self._out

    def has_edge(self, u, w) -> bool:
        return u in self._out and w in self._out[u]

    def _require(self, v):
        if v not in self._out:
            raise UnknownVertex(v)

    def out_neighbors(self, v) -> list:
        self._require(v)
        return sorted_if_possible(self._out[v])

    def in_neighbors(self, v) -> list:
        self._require(v)
        return sorted_if_possible(self._in[v])

    def out_degree(self, v) -> int:
        self._require(v)
        return len(self._out[v])

    def in_degree(self, v) -> int:
        self._require(v)
        return len(self._in[v])

    def degree(self, v=_ALL):
        """In-degree plus out-degree of ``v`` (a loop counts twice).

        Without ``v``, return the degree sequence in descending order.
        """
        if v is _ALL:
            return sorted(
                (len(self._out[x]) + len(self._in[x]) for x in self._out), reverse=True
            )
        self._require(v)
        return len(self._out[v]) + len(self._in[v])

    def vertex_list(self) -> list:
        return sorted_if_possible(self._out)

    def edge_list(self) -> list[tuple]:
        """All arcs as ``(tail, head)`` pairs, sorted when orderable."""
        return sorted_if_possible((u, w) for u, heads in self._out.items() for w in heads)

    def vertex_index(self) -> dict:
        return {v: i for i, v in enumerate(self.vertex_list())}

    def number_of_vertices(self) -> int:
        return len(self._out)

    def number_of_edges(self) -> int:
        return sum(len(heads) for heads in self._out.values())

    @property
    def V(self) -> list:
        return self.vertex_list()

    @property
    def E(self) -> list[tuple]:
        return self.edge_list()

    # Copy / comparison

    def copy(self) -> DiGraph:
        D = type(self)(self._vertex_type, loops=self._looped, history=self._state.history_enabled)
        D._out = {v: dict(heads) for v, heads in self._out.items()}
        D._in = {v: dict(tails) for v, tails in self._in.items()}
        return D

    def __deepcopy__(self, memo):
        return self.copy()

    def __eq__(self, other):
        if not isinstance(other, DiGraph):
            return NotImplemented
        if self._out.keys() != other._out.keys():
            return False
        if self.number_of_edges() != other.number_of_edges():
            return False
        return all(other.has_edge(u, w) for u, heads in self._out.items() for w in heads)

    def __hash__(self) -> int:
        arcs = frozenset((u, w) for u, heads in self._out.items() for w in heads)
        return hash((frozenset(self._out), arcs))

    def __len__(self) -> int:
        return len(self._out)

    def __contains__(self, v) -> bool:
        return v in self._out

    def __iter__(self):
        return iter(self.vertex_list())

    def __repr__(self) -> str:
        return (
            f"DiGraph(n={len(self._out)}, m={self.number_of_edges()}, "
            f"vertex_type={type_name(self._vertex_type)}, loops={self._looped})"
        )

    # Exclusive access / history

    def exclusive(self):
        """Context manager holding this digraph's re-entrant lock."""
        return self._state.exclusive()

    @property
    def version(self) -> int:
        return self._state.version

    def history(self, as_df: bool = False):
        """Mutation history as a list of dicts or a Polars DF [DataFrame]."""
        return self._state.as_frame() if as_df else list(self._state.events)

    def export_history(self, path: str) -> int:
        return self._state.export(path)

    def enable_history(self, flag: bool = True):
        self._state.history_enabled = bool(flag)

    def clear_history(self):
        self._state.events.clear()

    def mark(self, label: str):
        self._state.log_event("mark", label=label)


def simplify(D: DiGraph) -> Graph:
    """Forget arc directions.

    Returns an undirected graph on the same vertices with one edge for every
    pair joined by at least one arc. Loops are dropped.
    """
    G = Graph(D.vertex_type)
    G.add_vertices(D.vertex_list())
    G.add_edges(D.edge_list())
    return G
