from __future__ import annotations

from ..errors import UnknownVertex
from .connectivity import _require_undirected, components

_AUTO = object()  # start or end not given


def _edge_bearing_connected(G) -> bool:
    """True iff the vertices of positive degree lie in a single component."""
    return sum(1 for comp in components(G) if len(comp) > 1) <= 1


def _odd_vertices(G) -> list:
    return [v for v in G.vertex_list() if G.degree(v) % 2 == 1]


def euler_trail(G, start=_AUTO, end=_AUTO) -> list:
    """Eulerian trail from ``start`` to ``end``.

    Parameters
    ----------
    G : Graph
    start : hashable, optional
        First vertex of the trail. When omitted a feasible start is chosen:
        any vertex of positive degree if a circuit exists, else the lesser of
        the two odd-degree vertices.
    end : hashable, optional
        Last vertex of the trail. Defaults to ``start`` (a circuit).

    Returns
    -------
    list
        ``len == number_of_edges() + 1`` vertices, beginning with ``start``
        and ending with ``end``, walking every edge exactly once. Empty when
        no such trail exists, and also for a graph without vertices.
        A graph without edges yields ``[start]`` for a circuit request.

    Raises
    ------
    UnknownVertex
        If ``start`` or ``end`` is given and is not a vertex.

    Notes
    -----
    Isolated vertices do not affect feasibility. The walk follows
    :meth:`Graph.neighbors` order, so the result is deterministic.

    """
    _require_undirected(G)
    if start is _AUTO:
        return _auto_trail(G)
    if end is _AUTO:
        end = start
    for v in (start, end):
        if not G.has_vertex(v):
            raise UnknownVertex(v)

    if G.number_of_edges() == 0:
        return [start] if start == end else []
    if G.degree(start) == 0 or G.degree(end) == 0:
        return []
    if not _edge_bearing_connected(G):
        return []

    odd = _odd_vertices(G)
    if start == end:
        if odd:
            return []
    elif len(odd) != 2 or set(odd) != {start, end}:
        return []

    return _hierholzer(G, start)


def _auto_trail(G) -> list:
    verts = G.vertex_list()
    if not verts:
        return []
    odd = _odd_vertices(G)
    if not odd:
        start = next((v for v in verts if G.degree(v) > 0), verts[0])
        return euler_trail(G, start, start)
    if len(odd) == 2:
        return euler_trail(G, odd[0], odd[1])
    return []


def _hierholzer(G, start) -> list:
    # Working copy of the adjacency; G itself is left untouched.
    adj = {v: dict.fromkeys(G.neighbors(v)) for v in G.vertex_list()}
    stack = [start]
    trail = []
    while stack:
        v = stack[-1]
        if adj[v]:
            w = next(iter(adj[v]))
            del adj[v][w]
            del adj[w][v]
            stack.append(w)
        else:
            trail.append(stack.pop())
    trail.reverse()
    return trail
