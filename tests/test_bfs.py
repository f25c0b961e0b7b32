"""Tests for idxgraph/bfs.py"""

import io
import json

import networkx as nx
import pytest

from idxgraph import Graph, InputError, StdLogger, format_path, to_networkx
from idxgraph.bfs import bfs_distances, shortest_path
from idxgraph.generators import random_graph


def is_walk(g, path):
    return all(v in g.neighbors(u) for u, v in zip(path, path[1:]))


class TestShortestPath:
    def test_example_graph(self, bfs_graph):
        path = shortest_path(bfs_graph, 10, 5)
        assert path == [10, 9, 0, 7, 6, 5]
        assert format_path(path) == "[10->9->0->7->6->5]"
        assert is_walk(bfs_graph, path)

    def test_source_equals_target(self, bfs_graph):
        assert shortest_path(bfs_graph, 4, 4) == [4]

    def test_single_vertex(self):
        assert shortest_path(Graph(1), 0, 0) == [0]

    def test_unreachable(self):
        g = Graph.from_edges(3, [(0, 1, 1.0)])
        assert shortest_path(g, 0, 2) is None
        assert shortest_path(g, 1, 0) is None

    def test_weights_ignored(self):
        g = Graph.from_edges(3, [(0, 2, 100.0), (0, 1, 1.0), (1, 2, 1.0)])
        assert shortest_path(g, 0, 2) == [0, 2]

    def test_first_discovered_tie_wins(self):
        g = Graph.from_edges(4, [(0, 2, 1), (0, 1, 1), (1, 3, 1), (2, 3, 1)])
        assert shortest_path(g, 0, 3) == [0, 2, 3]

    @pytest.mark.parametrize("source,target", [(-1, 0), (0, 13), (13, 0)])
    def test_bad_vertices(self, bfs_graph, source, target):
        with pytest.raises(InputError):
            shortest_path(bfs_graph, source, target)

    def test_logs_done_event(self, bfs_graph):
        buf = io.StringIO()
        shortest_path(bfs_graph, 10, 5, logger=StdLogger(level="debug", json_fmt=True, stream=buf))
        rec = json.loads(buf.getvalue().strip())
        assert rec["event"] == "bfs.done"
        assert rec["found"] is True
        assert rec["reached"] == 13
        assert rec["arcs_scanned"] == 30

    @pytest.mark.parametrize("directed", [True, False])
    def test_matches_networkx_hop_counts(self, rng, directed):
        for seed in range(5):
            g = random_graph(25, 40, seed=rng.randrange(10**6) + seed, directed=directed)
            ref = nx.single_source_shortest_path_length(to_networkx(g), 0)
            for t in range(g.n):
                path = shortest_path(g, 0, t)
                if t in ref:
                    assert path is not None
                    assert len(path) - 1 == ref[t]
                    assert path[0] == 0 and path[-1] == t
                    assert is_walk(g, path)
                else:
                    assert path is None


class TestDistances:
    def test_example_graph(self, bfs_graph):
        hops = bfs_distances(bfs_graph, 10)
        assert hops[10] == 0
        assert hops[5] == 5
        assert hops[1] == hops[9] == 1

    def test_unreached_is_none(self):
        g = Graph.from_edges(3, [(0, 1, 1.0)])
        assert bfs_distances(g, 0) == [0, 1, None]
