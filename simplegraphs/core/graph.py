from __future__ import annotations

from ..errors import InvalidSize, UnknownVertex
from ..utils.validation import (
    canonical_pair,
    coerce_vertex,
    is_orderable,
    sorted_if_possible,
    type_name,
)
from ._state import _State
from .structure import EdgeType

_ALL = object()  # degree() without a vertex


class Graph:
    """Simple undirected graph over hashable vertices.

    Vertices live in an insertion-ordered set, edges in a set of endpoint
    pairs. Loops and parallel edges are refused. An optional fast-neighbor
    index (vertex -> neighbor set) is kept in step with the edge set by every
    mutator; it only changes the cost of queries, never their results.

    Parameters
    ----------
    vertex_type : type or tuple of types, optional
        Fixed vertex type for the lifetime of the graph. ``None`` accepts any
        hashable value.
    fast_index : bool, default True
        Start with the fast-neighbor index enabled.
    history : bool, default True
        Record mutations in the in-memory history log.

    Notes
    -----
    - When the vertices are mutually comparable, each edge is stored with its
      lesser endpoint first; listings come back sorted and equality compares
      the edge sets directly. Otherwise edges keep the orientation they were
      inserted with and equality falls back to a per-edge lookup.
    - Two values that compare equal (``1`` and ``1.0``) are the same vertex.
      Fix a single ``vertex_type`` to keep such mixtures out.

    See Also
    --------
    DiGraph, simplify

    """

    edge_type = EdgeType.UNDIRECTED

    # Mutating methods recorded in the history log.
    _MUTATORS = (
        "add_vertex",
        "add_edge",
        "remove_vertex",
        "remove_edge",
        "contract",
        "set_fast_index",
    )

    # Construction

    def __init__(self, vertex_type=None, *, fast_index: bool = True, history: bool = True):
        self._vertex_type = vertex_type
        self._V = {}  # vertex -> None (ordered set)
        self._E = {}  # (u, w) -> None, lesser endpoint first when orderable
        self._N = {} if fast_index else None  # vertex -> {neighbor: None}
        self._state = _State(history=history)
        self._state.install_hooks(self, self._MUTATORS)

    @classmethod
    def from_edges(cls, edges, vertices=(), **config) -> Graph:
        """Build a graph from an iterable of vertex pairs.

        Parameters
        ----------
        edges : iterable of (u, w)
        vertices : iterable, optional
            Extra vertices, e.g. isolated ones.
        **config
            Forwarded to the constructor.

        Returns
        -------
        Graph

        """
        G = cls(**config)
        G.add_vertices(vertices)
        G.add_edges(edges)
        return G

    @classmethod
    def integer_graph(cls, n: int, **config) -> Graph:
        """Edgeless graph on the vertices ``1..n`` with ``vertex_type=int``."""
        if n < 0:
            raise InvalidSize(f"number of vertices must be nonnegative, got {n}")
        config.setdefault("vertex_type", int)
        G = cls(**config)
        G.add_vertices(range(1, n + 1))
        return G

    # Configuration

    @property
    def vertex_type(self):
        return self._vertex_type

    @property
    def has_fast_index(self) -> bool:
        return self._N is not None

    def set_fast_index(self, enabled: bool = True):
        """Turn the fast-neighbor index on (rebuilt from the edge set) or off.

        Parameters
        ----------
        enabled : bool, default True

        Returns
        -------
        None

        """
        if not enabled:
            self._N = None
            return
        if self._N is not None:
            return
        N = {v: {} for v in self._V}
        for u, w in self._E:
            N[u][w] = None
            N[w][u] = None
        self._N = N

    # Mutation

    def add_vertex(self, v) -> bool:
        """Add a vertex.

        Parameters
        ----------
        v : hashable

        Returns
        -------
        bool
            True if ``v`` was new, False if it was already present.

        Raises
        ------
        TypeMismatch
            If ``v`` cannot be represented in ``vertex_type``.

        """
        v = coerce_vertex(v, self._vertex_type)
        if v in self._V:
            return False
        self._V[v] = None
        if self._N is not None:
            self._N[v] = {}
        return True

    def add_vertices(self, vertices) -> int:
        """Add several vertices; return how many were new."""
        return sum(1 for v in vertices if self.add_vertex(v))

    def add_edge(self, u, w) -> bool:
        """Add the edge ``{u, w}``, adding missing endpoints first.

        Parameters
        ----------
        u, w : hashable

        Returns
        -------
        bool
            True only if the edge is new. Loops (``u == w``) and existing
            edges are refused without changing the graph.

        Raises
        ------
        TypeMismatch
            If an endpoint cannot be represented in ``vertex_type``.

        """
        u = coerce_vertex(u, self._vertex_type)
        w = coerce_vertex(w, self._vertex_type)
        if u == w or self.has_edge(u, w):
            return False
        if u not in self._V:
            self.add_vertex(u)
        if w not in self._V:
            self.add_vertex(w)
        self._E[canonical_pair(u, w)] = None
        if self._N is not None:
            self._N[u][w] = None
            self._N[w][u] = None
        return True

    def add_edges(self, edges) -> int:
        """Add several edges; return how many were new."""
        return sum(1 for u, w in edges if self.add_edge(u, w))

    def remove_edge(self, u, w) -> bool:
        """Remove the edge ``{u, w}``; False if there is no such edge."""
        key = self._edge_key(u, w)
        if key is None:
            return False
        del self._E[key]
        if self._N is not None:
            del self._N[u][w]
            del self._N[w][u]
        return True

    def remove_vertex(self, v) -> bool:
        """Remove a vertex and every edge incident with it.

        Parameters
        ----------
        v : hashable

        Returns
        -------
        bool
            False if ``v`` was not a vertex.

        """
        if v not in self._V:
            return False
        for w in self.neighbors(v):
            self.remove_edge(v, w)
        del self._V[v]
        if self._N is not None:
            del self._N[v]
        return True

    def contract(self, u, v) -> bool:
        """Merge ``v`` into ``u``.

        Every neighbor of ``v`` becomes a neighbor of ``u``, then ``v`` is
        deleted. The edge ``{u, v}`` need not be present; if it is missing
        this is the same as adding it and then contracting it.

        Parameters
        ----------
        u : hashable
            Surviving vertex.
        v : hashable
            Vertex merged away.

        Returns
        -------
        bool
            False if either vertex is absent or ``u == v``.

        """
        if u not in self._V or v not in self._V or u == v:
            return False
        for x in self.neighbors(v):
            if x != u:
                self.add_edge(u, x)
        self.remove_vertex(v)
        return True

    # Queries

    def has_vertex(self, v) -> bool:
        return v in self._V

    def has_edge(self, u, w) -> bool:
        return (u, w) in self._E or (w, u) in self._E

    def _edge_key(self, u, w):
        if (u, w) in self._E:
            return (u, w)
        if (w, u) in self._E:
            return (w, u)
        return None

    def neighbors(self, v) -> list:
        """Neighbors of ``v``, ascending when the vertices are orderable.

        Raises
        ------
        UnknownVertex
            If ``v`` is not a vertex.

        """
        if v not in self._V:
            raise UnknownVertex(v)
        if self._N is not None:
            return sorted_if_possible(self._N[v])
        # Slow path: scan the edge set
        nbrs = []
        for a, b in self._E:
            if a == v:
                nbrs.append(b)
            elif b == v:
                nbrs.append(a)
        return sorted_if_possible(nbrs)

    def degree(self, v=_ALL):
        """Degree of ``v``, or the degree sequence of the graph.

        Parameters
        ----------
        v : hashable, optional
            When omitted, return every vertex degree in descending order.

        Returns
        -------
        int or list[int]

        Raises
        ------
        UnknownVertex
            If ``v`` is given and is not a vertex.

        """
        if v is _ALL:
            return sorted((self._degree(x) for x in self._V), reverse=True)
        if v not in self._V:
            raise UnknownVertex(v)
        return self._degree(v)

    def _degree(self, v) -> int:
        if self._N is not None:
            return len(self._N[v])
        return sum(1 for a, b in self._E if a == v or b == v)

    def vertex_list(self) -> list:
        """All vertices, sorted when orderable, else in insertion order."""
        return sorted_if_possible(self._V)

    def edge_list(self) -> list[tuple]:
        """All edges as ``(u, w)`` pairs, sorted when orderable."""
        return sorted_if_possible(self._E)

    def vertex_index(self) -> dict:
        """Map each vertex to its position in :meth:`vertex_list`."""
        return {v: i for i, v in enumerate(self.vertex_list())}

    def number_of_vertices(self) -> int:
        return len(self._V)

    def number_of_edges(self) -> int:
        return len(self._E)

    @property
    def V(self) -> list:
        return self.vertex_list()

    @property
    def E(self) -> list[tuple]:
        return self.edge_list()

    # Copy / comparison

    def copy(self) -> Graph:
        """Independent deep copy (same configuration, empty history)."""
        G = type(self)(
            self._vertex_type,
            fast_index=self.has_fast_index,
            history=self._state.history_enabled,
        )
        G._V = dict(self._V)
        G._E = dict(self._E)
        if self._N is not None:
            G._N = {v: dict(nbrs) for v, nbrs in self._N.items()}
        return G

    def __deepcopy__(self, memo):
        return self.copy()

    def __eq__(self, other):
        if not isinstance(other, Graph):
            return NotImplemented
        if self._V.keys() != other._V.keys() or len(self._E) != len(other._E):
            return False
        if is_orderable(self._V):
            return self._E.keys() == other._E.keys()
        # Slow path: incomparable vertices, orientations may differ
        return all(other.has_edge(u, w) for u, w in self._E)

    def __hash__(self) -> int:
        return hash((frozenset(self._V), frozenset(frozenset(e) for e in self._E)))

    def __len__(self) -> int:
        return len(self._V)

    def __contains__(self, v) -> bool:
        return v in self._V

    def __iter__(self):
        return iter(self.vertex_list())

    def __repr__(self) -> str:
        return (
            f"Graph(n={len(self._V)}, m={len(self._E)}, "
            f"vertex_type={type_name(self._vertex_type)})"
        )

    # Exclusive access

    def exclusive(self):
        """Context manager holding this graph's re-entrant lock.

        The graph does not lock its own operations; callers sharing a graph
        between threads wrap both mutations and traversals in it.
        """
        return self._state.exclusive()

    # History

    @property
    def version(self) -> int:
        """Counter bumped by every mutating call and marker."""
        return self._state.version

    def history(self, as_df: bool = False):
        """Return the append-only mutation history.

        Parameters
        ----------
        as_df : bool, default False
            If True, return a Polars DF [DataFrame]; otherwise a list of dicts.

        Returns
        -------
        list[dict] or polars.DataFrame
            Each event includes 'version', 'ts_utc', 'mono_ns', 'op', the
            call arguments and 'result'.

        """
        return self._state.as_frame() if as_df else list(self._state.events)

    def export_history(self, path: str) -> int:
        """Write the history to ``.parquet``, ``.ndjson``/``.jsonl``, ``.json`` or ``.csv``.

        Returns the number of events written (0 if the history is empty).
        """
        return self._state.export(path)

    def enable_history(self, flag: bool = True):
        self._state.history_enabled = bool(flag)

    def clear_history(self):
        self._state.events.clear()

    def mark(self, label: str):
        """Insert a manual marker event into the history."""
        self._state.log_event("mark", label=label)
