# tests/test_history.py
import json
import shutil
import tempfile
import unittest
from pathlib import Path

import polars as pl

from simplegraphs import DiGraph, Graph, is_cut_edge


class TestMutationHistory(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmpdir, ignore_errors=True)

    def test_events_record_nested_mutations(self):
        G = Graph(int)
        G.add_edge(1, 2)
        ops = [e["op"] for e in G.history()]
        self.assertEqual(ops, ["add_vertex", "add_vertex", "add_edge"])
        last = G.history()[-1]
        self.assertEqual((last["u"], last["w"], last["result"]), (1, 2, True))
        self.assertEqual([e["version"] for e in G.history()], [1, 2, 3])
        self.assertTrue(last["ts_utc"].endswith("Z"))

    def test_noop_calls_are_logged_with_result(self):
        G = Graph()
        G.add_vertex("A")
        G.add_vertex("A")
        self.assertEqual([e["result"] for e in G.history()], [True, False])

    def test_disable_and_clear(self):
        G = Graph()
        G.enable_history(False)
        G.add_edge("A", "B")
        self.assertEqual(G.history(), [])
        self.assertEqual(G.version, 3)
        G.enable_history(True)
        G.remove_edge("A", "B")
        self.assertEqual(len(G.history()), 1)
        G.clear_history()
        self.assertEqual(G.history(), [])

    def test_mark(self):
        G = Graph()
        G.mark("start")
        self.assertEqual(G.history()[0]["op"], "mark")
        self.assertEqual(G.history()[0]["label"], "start")

    def test_cut_edge_check_is_visible_in_history(self):
        G = Graph.from_edges([(1, 2)], history=False)
        G.enable_history(True)
        is_cut_edge(G, 1, 2)
        self.assertEqual([e["op"] for e in G.history()], ["remove_edge", "add_edge"])

    def test_history_as_dataframe(self):
        G = Graph(int)
        G.add_edges([(1, 2), (2, 3)])
        df = G.history(as_df=True)
        self.assertIsInstance(df, pl.DataFrame)
        self.assertEqual(df.height, len(G.history()))
        self.assertIn("op", df.columns)

    def test_export_formats(self):
        G = Graph(int)
        G.add_edges([(1, 2), (2, 3)])
        n = len(G.history())
        for name in ("h.parquet", "h.ndjson", "h.json", "h.csv"):
            path = Path(self.tmpdir) / name
            self.assertEqual(G.export_history(str(path)), n)
            self.assertTrue(path.exists())
        with open(Path(self.tmpdir) / "h.json", encoding="utf-8") as f:
            self.assertEqual(len(json.load(f)), n)
        self.assertEqual(pl.read_parquet(Path(self.tmpdir) / "h.parquet").height, n)
        self.assertEqual(Graph().export_history(str(Path(self.tmpdir) / "empty.json")), 0)

    def test_copy_starts_with_empty_history(self):
        G = Graph.from_edges([(1, 2)])
        self.assertEqual(G.copy().history(), [])

    def test_digraph_history(self):
        D = DiGraph(int)
        D.add_edge(1, 1)
        D.forbid_loops()
        ops = [e["op"] for e in D.history()]
        self.assertEqual(ops, ["add_vertex", "add_edge", "remove_edge", "remove_loops", "forbid_loops"])


if __name__ == "__main__":
    unittest.main()
