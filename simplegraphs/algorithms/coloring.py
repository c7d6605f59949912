"""Two-coloring and greedy vertex coloring of undirected graphs.

Colors are positive integers starting at 1.
"""

from __future__ import annotations

from collections import deque

import numpy as np

from ..errors import NotBipartite
from ..utils.validation import sorted_if_possible
from .connectivity import _require_undirected, components


def two_color(G) -> dict:
    """Proper coloring with colors ``{1, 2}``.

    Each component is seeded with color 1 at an arbitrary vertex and the
    opposite color is pushed outwards breadth-first.

    Raises
    ------
    NotBipartite
        As soon as an edge with equally colored ends is found.

    """
    _require_undirected(G)
    color = {}
    for comp in components(G):
        seed = sorted_if_possible(comp)[0]
        color[seed] = 1
        queue = deque([seed])
        while queue:
            v = queue.popleft()
            for w in G.neighbors(v):
                if w not in color:
                    color[w] = 3 - color[v]
                    queue.append(w)
                elif color[w] == color[v]:
                    raise NotBipartite(f"edge ({v!r}, {w!r}) closes an odd cycle")
    return color


def bipartition(G) -> set[frozenset]:
    """The two color classes of :func:`two_color` as a set ``{X, Y}``.

    Both classes are empty for an empty graph, so the set then holds a
    single element.
    """
    color = two_color(G)
    X = frozenset(v for v, c in color.items() if c == 1)
    Y = frozenset(v for v, c in color.items() if c == 2)
    return {X, Y}


def _degree_order(G) -> list:
    # Stable sort: equal degrees keep vertex_list order.
    return sorted(G.vertex_list(), key=G.degree, reverse=True)


def greedy_color(G, order=None) -> dict:
    """Greedy coloring visiting the vertices in ``order``.

    Parameters
    ----------
    G : Graph
    order : sequence, optional
        A permutation of the vertex set; this is not checked. Defaults to the
        vertices by descending degree.

    Returns
    -------
    dict
        vertex -> color in ``1..k``. Each vertex takes the smallest color not
        already used by one of its neighbors, so ``k <= max degree + 1``.

    """
    _require_undirected(G)
    if order is None:
        order = _degree_order(G)
    color = {}
    ncolors = 0
    for v in order:
        used = {color[w] for w in G.neighbors(v) if w in color}
        c = next((k for k in range(1, ncolors + 1) if k not in used), None)
        if c is None:
            ncolors += 1
            c = ncolors
        color[v] = c
    return color


def chromatic_bound(coloring: dict) -> int:
    """Number of colors used by ``coloring``."""
    return max(coloring.values(), default=0)


def random_greedy_color(G, reps: int = 1, seed=None) -> dict:
    """Best of the degree-ordered greedy coloring and ``reps`` random orders.

    Parameters
    ----------
    G : Graph
    reps : int, default 1
        Number of random vertex permutations to try.
    seed : int or numpy.random.Generator, optional
        Seed for ``numpy.random.default_rng``.

    Returns
    -------
    dict
        The coloring using the fewest colors; the earliest one wins ties.

    """
    _require_undirected(G)
    rng = np.random.default_rng(seed)
    best = greedy_color(G)
    best_k = chromatic_bound(best)
    verts = G.vertex_list()
    for _ in range(reps):
        order = [verts[i] for i in rng.permutation(len(verts))]
        f = greedy_color(G, order)
        k = chromatic_bound(f)
        if k < best_k:
            best, best_k = f, k
    return best
