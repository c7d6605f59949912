"""Graph families and checks shared by the tests (built with add_vertex/add_edge only)."""
from itertools import combinations

import networkx as nx

from simplegraphs import Graph


def path_graph(n, start=1, **config) -> Graph:
    G = Graph(int, **config)
    G.add_vertices(range(start, start + n))
    for v in range(start, start + n - 1):
        G.add_edge(v, v + 1)
    return G


def cycle_graph(n, start=0, **config) -> Graph:
    G = path_graph(n, start=start, **config)
    G.add_edge(start + n - 1, start)
    return G


def complete_graph(n, **config) -> Graph:
    G = Graph(int, **config)
    G.add_vertices(range(1, n + 1))
    for u in range(1, n + 1):
        for w in range(u + 1, n + 1):
            G.add_edge(u, w)
    return G


def petersen_graph(**config) -> Graph:
    G = Graph(int, **config)
    for i in range(5):
        G.add_edge(i, (i + 1) % 5)  # outer 5-cycle
        G.add_edge(i, i + 5)  # spokes
        G.add_edge(i + 5, (i + 2) % 5 + 5)  # inner pentagram
    return G


def kneser_graph(n, k, **config) -> Graph:
    """Kneser graph: k-subsets of 1..n as frozensets, adjacent when disjoint."""
    G = Graph(frozenset, **config)
    subsets = [frozenset(c) for c in combinations(range(1, n + 1), k)]
    G.add_vertices(subsets)
    for A, B in combinations(subsets, 2):
        if not A & B:
            G.add_edge(A, B)
    return G


def to_nx(G) -> nx.Graph:
    H = nx.Graph()
    H.add_nodes_from(G.vertex_list())
    H.add_edges_from(G.edge_list())
    return H


def assert_is_trail(testcase, G, trail, start, end):
    """Check that ``trail`` walks every edge of ``G`` exactly once from start to end."""
    testcase.assertEqual(len(trail), G.number_of_edges() + 1)
    testcase.assertEqual(trail[0], start)
    testcase.assertEqual(trail[-1], end)
    used = set()
    for a, b in zip(trail, trail[1:]):
        testcase.assertTrue(G.has_edge(a, b), f"{a}-{b} is not an edge")
        key = frozenset((a, b))
        testcase.assertNotIn(key, used, f"{a}-{b} used twice")
        used.add(key)
    testcase.assertEqual(used, {frozenset(e) for e in G.edge_list()})


def assert_proper(testcase, G, coloring):
    testcase.assertEqual(set(coloring), set(G.vertex_list()))
    for u, w in G.edge_list():
        testcase.assertNotEqual(coloring[u], coloring[w], f"edge {u}-{w} is monochromatic")
