"""Connectivity and unweighted distances on undirected graphs.

All functions only read the graph through its public queries, except
:func:`is_cut_edge`, which removes one edge for the duration of a probe and
puts it back before returning.

Unreachable pairs are reported as ``-1`` by :func:`distance`,
:func:`all_distances` and :func:`distance_matrix`; :func:`distances` simply
leaves them out.
"""

from __future__ import annotations

from collections import deque
from contextlib import contextmanager

import numpy as np

from ..core.graph import Graph
from ..core.structure import EdgeType
from ..errors import UnknownEdge, UnknownVertex
from ..utils.validation import canonical_pair, sorted_if_possible

UNREACHABLE = -1

# Private markers; None is a legal vertex.
_NO_TARGET = object()
_ROOT = object()  # parent of a search root


def _require_undirected(G):
    if getattr(G, "edge_type", None) is EdgeType.DIRECTED:
        raise TypeError("expected an undirected graph; convert with simplify(D) first")


def _require_vertex(G, v):
    if not G.has_vertex(v):
        raise UnknownVertex(v)


def _bfs(G, source, target=_NO_TARGET):
    """Breadth-first search from ``source``.

    Returns ``(parent, depth)`` dicts in discovery order. Stops as soon as
    ``target`` is discovered when one is given.
    """
    parent = {source: _ROOT}
    depth = {source: 0}
    queue = deque([source])
    while queue:
        v = queue.popleft()
        if target is not _NO_TARGET and v == target:
            break
        for w in G.neighbors(v):
            if w not in depth:
                parent[w] = v
                depth[w] = depth[v] + 1
                queue.append(w)
    return parent, depth


def _distance(G, u, v) -> int | None:
    _, depth = _bfs(G, u, v)
    return depth.get(v)


# Components


def components(G) -> set[frozenset]:
    """Partition the vertex set into connected components.

    Returns
    -------
    set[frozenset]
        Every vertex lies in exactly one component; isolated vertices form
        singletons.

    """
    _require_undirected(G)
    seen = set()
    result = set()
    for v in G.vertex_list():
        if v in seen:
            continue
        _, depth = _bfs(G, v)
        comp = frozenset(depth)
        seen |= comp
        result.add(comp)
    return result


def num_components(G) -> int:
    return len(components(G))


def is_connected(G) -> bool:
    """True iff the graph has exactly one component (the empty graph has none)."""
    return num_components(G) == 1


def spanning_forest(G) -> Graph:
    """Breadth-first spanning forest on the same vertex set."""
    _require_undirected(G)
    F = Graph(G.vertex_type)
    F.add_vertices(G.vertex_list())
    for v in G.vertex_list():
        if F.degree(v) > 0:
            continue
        parent, _ = _bfs(G, v)
        for w, p in parent.items():
            if p is not _ROOT:
                F.add_edge(p, w)
    return F


# Distances


def shortest_path(G, u, v) -> list:
    """A shortest ``u``-``v`` path as a vertex list.

    Returns
    -------
    list
        ``[u, ..., v]``; ``[u]`` when ``u == v``; empty when ``v`` cannot be
        reached. Among equally short paths the one found first by the
        breadth-first search (following :meth:`Graph.neighbors` order) wins.

    Raises
    ------
    UnknownVertex
        If ``u`` or ``v`` is not a vertex.

    """
    _require_undirected(G)
    _require_vertex(G, u)
    _require_vertex(G, v)
    parent, _ = _bfs(G, u, v)
    if v not in parent:
        return []
    path = [v]
    while parent[path[-1]] is not _ROOT:
        path.append(parent[path[-1]])
    path.reverse()
    return path


def distances(G, u) -> dict:
    """Map each vertex reachable from ``u`` to its distance; others are omitted."""
    _require_undirected(G)
    _require_vertex(G, u)
    _, depth = _bfs(G, u)
    return depth


def distance(G, u, v) -> int:
    """Length of a shortest ``u``-``v`` path, or ``-1`` if there is none."""
    _require_undirected(G)
    _require_vertex(G, u)
    _require_vertex(G, v)
    d = _distance(G, u, v)
    return UNREACHABLE if d is None else d


def all_distances(G) -> dict:
    """All-pairs distances as ``{u: {v: d}}`` with ``-1`` for unreachable pairs."""
    _require_undirected(G)
    verts = G.vertex_list()
    table = {}
    for u in verts:
        _, depth = _bfs(G, u)
        table[u] = {v: depth.get(v, UNREACHABLE) for v in verts}
    return table


def distance_matrix(G) -> np.ndarray:
    """All-pairs distances as an ``n x n`` integer array.

    Rows and columns follow :meth:`Graph.vertex_list`; ``-1`` marks an
    unreachable pair and the diagonal is ``0``.
    """
    _require_undirected(G)
    index = G.vertex_index()
    n = len(index)
    M = np.full((n, n), UNREACHABLE, dtype=np.int64)
    for u, i in index.items():
        _, depth = _bfs(G, u)
        for v, d in depth.items():
            M[i, index[v]] = d
    return M


def diameter(G) -> int:
    """Largest distance between two vertices; ``-1`` if the graph is not connected."""
    _require_undirected(G)
    if not is_connected(G):
        return UNREACHABLE
    return max(max(_bfs(G, u)[1].values()) for u in G.vertex_list())


# Cut edges


@contextmanager
def _without_edge(G, u, v):
    G.remove_edge(u, v)
    try:
        yield
    finally:
        G.add_edge(u, v)


def is_cut_edge(G, u, v) -> bool:
    """Whether deleting the edge ``{u, v}`` disconnects ``u`` from ``v``.

    The edge is removed for the probe and restored on every exit path, all
    while holding the graph's exclusive lock.

    Raises
    ------
    UnknownEdge
        If ``{u, v}`` is not an edge.

    """
    _require_undirected(G)
    if not G.has_edge(u, v):
        raise UnknownEdge(u, v)
    with G.exclusive(), _without_edge(G, u, v):
        return _distance(G, u, v) is None


def cut_edges(G) -> list[tuple]:
    """Every cut edge (bridge) of the graph.

    Uses an iterative low-link depth-first search, so the graph is never
    modified. Edges come back lesser endpoint first and sorted when the
    vertices are orderable.
    """
    _require_undirected(G)
    disc = {}
    low = {}
    bridges = []
    counter = 0
    for root in G.vertex_list():
        if root in disc:
            continue
        disc[root] = low[root] = counter
        counter += 1
        stack = [(root, _ROOT, iter(G.neighbors(root)))]
        while stack:
            v, parent, nbrs = stack[-1]
            for w in nbrs:
                if w == parent:
                    continue
                if w in disc:
                    low[v] = min(low[v], disc[w])
                else:
                    disc[w] = low[w] = counter
                    counter += 1
                    stack.append((w, v, iter(G.neighbors(w))))
                    break
            else:
                stack.pop()
                if parent is not _ROOT:
                    low[parent] = min(low[parent], low[v])
                    if low[v] > disc[parent]:
                        bridges.append(canonical_pair(parent, v))
    return sorted_if_possible(bridges)
