# tests/test_euler.py
import unittest

from simplegraphs import Graph, UnknownVertex, euler_trail

from .helpers import assert_is_trail, complete_graph, cycle_graph, kneser_graph, path_graph


class TestEulerTrail(unittest.TestCase):
    def test_two_vertex_path(self):
        G = path_graph(2)
        self.assertEqual(euler_trail(G), [1, 2])
        self.assertEqual(euler_trail(G, 2, 1), [2, 1])

    def test_circuit_on_cycle(self):
        G = cycle_graph(6)
        trail = euler_trail(G)
        assert_is_trail(self, G, trail, trail[0], trail[0])
        trail = euler_trail(G, 3)
        assert_is_trail(self, G, trail, 3, 3)

    def test_circuit_on_complete_graph(self):
        G = complete_graph(5)  # every degree is 4
        before = G.copy()
        trail = euler_trail(G)
        self.assertEqual(len(trail), G.number_of_edges() + 1)
        assert_is_trail(self, G, trail, 1, 1)
        self.assertEqual(G, before)

    def test_open_trail(self):
        G = path_graph(4)
        assert_is_trail(self, G, euler_trail(G, 1, 4), 1, 4)
        assert_is_trail(self, G, euler_trail(G, 4, 1), 4, 1)
        self.assertEqual(euler_trail(G, 1, 3), [])
        self.assertEqual(euler_trail(G, 1), [])

    def test_open_trail_with_detours(self):
        # Two triangles sharing vertex 3 plus a pendant edge; odd vertices are 3 and 6.
        G = Graph.from_edges([(1, 2), (2, 3), (3, 1), (3, 4), (4, 5), (5, 3), (3, 6)])
        trail = euler_trail(G)
        assert_is_trail(self, G, trail, 3, 6)
        assert_is_trail(self, G, euler_trail(G, 6, 3), 6, 3)

    def test_infeasible(self):
        self.assertEqual(euler_trail(complete_graph(4)), [])  # four odd vertices
        G = Graph.from_edges([(1, 2), (2, 3), (3, 1), (4, 5), (5, 6), (6, 4)])
        self.assertEqual(euler_trail(G), [])  # two edge-bearing components

    def test_isolated_vertices_ignored(self):
        G = cycle_graph(4)
        G.add_vertex(99)
        trail = euler_trail(G)
        assert_is_trail(self, G, trail, 0, 0)
        self.assertEqual(euler_trail(G, 99), [])

    def test_no_edges(self):
        G = Graph.integer_graph(3)
        self.assertEqual(euler_trail(G, 2), [2])
        self.assertEqual(euler_trail(G, 2, 2), [2])
        self.assertEqual(euler_trail(G, 1, 2), [])
        self.assertEqual(euler_trail(G), [1])
        self.assertEqual(euler_trail(Graph()), [])

    def test_none_as_start_vertex(self):
        G = Graph.from_edges([(None, 1), (1, 2), (2, None)])
        trail = euler_trail(G, None)
        assert_is_trail(self, G, trail, None, None)
        P = Graph.from_edges([("a", None), (None, "b")])
        self.assertEqual(euler_trail(P), ["a", None, "b"])
        self.assertEqual(euler_trail(P, "b", "a"), ["b", None, "a"])
        self.assertEqual(euler_trail(P, None), [])

    def test_every_vertex_odd(self):
        self.assertEqual(euler_trail(kneser_graph(5, 2)), [])

    def test_unknown_vertex(self):
        G = path_graph(3)
        with self.assertRaises(UnknownVertex):
            euler_trail(G, 7)
        with self.assertRaises(UnknownVertex):
            euler_trail(G, 1, 7)


if __name__ == "__main__":
    unittest.main()
