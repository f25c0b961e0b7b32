"""Tests for idxgraph/dijkstra.py"""

import io
import math

import networkx as nx
import numpy as np
import pytest

from idxgraph import (
    AlgorithmError,
    ConfigError,
    Graph,
    InputError,
    NegativeWeightError,
    StdLogger,
    path_weight,
    to_networkx,
)
from idxgraph.dijkstra import (
    DijkstraConfig,
    DijkstraSolver,
    compare_distances,
    dijkstra_reference,
    shortest_path,
)
from idxgraph.generators import grid_graph, random_graph


def assert_edge_condition(g, dist, eps=1e-6):
    for u, v, w in g.arcs():
        if dist[u] < math.inf:
            assert dist[v] <= dist[u] + w + eps


class TestConfig:
    def test_defaults(self):
        cfg = DijkstraConfig()
        assert cfg.degree == 2
        assert cfg.eps == 1e-6
        assert cfg.stop_at_target is False

    @pytest.mark.parametrize(
        "kwargs",
        [{"degree": 1}, {"degree": True}, {"eps": -1.0}, {"eps": math.inf}, {"eps": "x"}],
    )
    def test_invalid(self, kwargs):
        with pytest.raises(ConfigError):
            DijkstraConfig(**kwargs)

    def test_frozen(self):
        cfg = DijkstraConfig()
        with pytest.raises(AttributeError):
            cfg.degree = 4  # type: ignore[misc]


class TestCompareDistances:
    def test_tolerance(self):
        assert compare_distances(1.0, 1.0 + 1e-7) == 0
        assert compare_distances(1.0, 1.1) == -1
        assert compare_distances(2.0, 1.0) == 1

    def test_infinities(self):
        assert compare_distances(math.inf, math.inf) == 0
        assert compare_distances(3.0, math.inf) == -1
        assert compare_distances(math.inf, 3.0) == 1

    def test_zero_eps_is_exact(self):
        assert compare_distances(1.0, 1.0 + 1e-9, eps=0.0) == -1


class TestShortestPath:
    def test_example_graph(self, dijkstra_graph):
        dist, path = shortest_path(dijkstra_graph, 0, 4)
        assert dist == [0.0, 3.0, 1.0, 4.0, 7.0]
        assert path == [0, 2, 1, 3, 4]
        assert path_weight(dijkstra_graph, path) == dist[4]

    def test_single_vertex(self):
        dist, path = shortest_path(Graph(1), 0, 0)
        assert dist == [0.0]
        assert path == [0]

    def test_unreachable(self):
        g = Graph.from_edges(3, [(0, 1, 2.0)])
        dist, path = shortest_path(g, 0, 2)
        assert dist == [0.0, 2.0, math.inf]
        assert path is None

    def test_parallel_edges_take_minimum(self):
        g = Graph.from_edges(2, [(0, 1, 9.0), (0, 1, 2.5), (0, 1, 4.0)])
        dist, path = shortest_path(g, 0, 1)
        assert dist[1] == 2.5
        assert path == [0, 1]

    def test_self_loop_does_not_shorten(self):
        g = Graph.from_edges(2, [(0, 0, 5.0), (0, 1, 2.0), (1, 1, 0.0)])
        dist, _ = shortest_path(g, 0, 1)
        assert dist == [0.0, 2.0]

    def test_zero_weights(self):
        g = Graph.from_edges(3, [(0, 1, 0.0), (1, 2, 0.0)])
        dist, path = shortest_path(g, 0, 2)
        assert dist == [0.0, 0.0, 0.0]
        assert path == [0, 1, 2]

    def test_negative_weight_rejected(self):
        g = Graph.from_edges(3, [(0, 1, 1.0), (1, 2, -0.5)])
        with pytest.raises(NegativeWeightError, match="negative weight"):
            shortest_path(g, 0, 2)

    def test_unscanned_negative_weight_not_reported(self):
        g = Graph.from_edges(3, [(0, 1, 1.0), (2, 0, -1.0)])
        dist, _ = shortest_path(g, 0, 1)
        assert dist[:2] == [0.0, 1.0]

    def test_negative_weight_is_input_error(self):
        assert issubclass(NegativeWeightError, InputError)
        assert issubclass(NegativeWeightError, ValueError)

    @pytest.mark.parametrize("source,target", [(-1, 0), (5, 0), (0, 5)])
    def test_bad_vertices(self, dijkstra_graph, source, target):
        with pytest.raises(InputError):
            shortest_path(dijkstra_graph, source, target)

    def test_undirected_grid_is_manhattan(self):
        g = grid_graph(4, 5)
        dist, path = shortest_path(g, 0, 19)
        for v in range(g.n):
            r, c = g.vertex_payload(v)
            assert dist[v] == r + c
        assert len(path) == 3 + 4 + 1


class TestSolver:
    def test_counters(self, dijkstra_graph):
        solver = DijkstraSolver(dijkstra_graph, 0)
        solver.solve()
        assert solver.summary() == {
            "settled": 5,
            "stale_skips": 0,
            "arcs_scanned": 6,
            "edges_relaxed": 7,
            "pq_inserts": 5,
            "pq_decreases": 2,
        }

    def test_summary_is_copy(self, dijkstra_graph):
        solver = DijkstraSolver(dijkstra_graph, 0)
        solver.solve()
        solver.summary()["settled"] = 0
        assert solver.counters["settled"] == 5

    def test_path_before_solve(self, dijkstra_graph):
        with pytest.raises(AlgorithmError):
            DijkstraSolver(dijkstra_graph, 0).path(4)

    def test_resolve_resets_counters(self, dijkstra_graph):
        solver = DijkstraSolver(dijkstra_graph, 0)
        solver.solve()
        solver.solve()
        assert solver.summary()["settled"] == 5

    def test_stop_at_target(self, dijkstra_graph):
        solver = DijkstraSolver(dijkstra_graph, 0, config=DijkstraConfig(stop_at_target=True))
        res = solver.solve(target=2)
        assert res.distances[2] == 1.0
        assert solver.path(2) == [0, 2]
        assert res.distances[1] == 4.0
        assert res.distances[3] == math.inf
        assert solver.summary()["settled"] == 2

    def test_near_equal_distance_does_not_relax(self):
        # 0.1 + 0.2 and 0.3 + 0.0 differ only by rounding
        g = Graph.from_edges(4, [(0, 2, 0.3), (0, 1, 0.1), (1, 3, 0.2), (2, 3, 0.0)])
        solver = DijkstraSolver(g, 0)
        solver.solve()
        assert solver.path(3) == [0, 1, 3]
        assert solver.summary()["pq_decreases"] == 0

        exact = DijkstraSolver(g, 0, config=DijkstraConfig(eps=0.0))
        exact.solve()
        assert exact.path(3) == [0, 2, 3]
        assert exact.summary()["pq_decreases"] == 1

    def test_numpy_integer_source_and_target(self, dijkstra_graph):
        dist, path = shortest_path(dijkstra_graph, np.int64(0), np.int64(4))
        assert path == [0, 2, 1, 3, 4]
        assert all(type(v) is int for v in path)

    def test_stop_at_target_off_drains(self, dijkstra_graph):
        solver = DijkstraSolver(dijkstra_graph, 0)
        res = solver.solve(target=2)
        assert res.distances == [0.0, 3.0, 1.0, 4.0, 7.0]

    def test_logs_counters(self, dijkstra_graph):
        buf = io.StringIO()
        shortest_path(dijkstra_graph, 0, 4, logger=StdLogger(level="debug", stream=buf))
        line = buf.getvalue().strip()
        assert line.startswith("debug dijkstra.done source=0 n=5 settled=5")
        assert "pq_decreases=2" in line

    def test_quiet_at_default_level(self, dijkstra_graph):
        buf = io.StringIO()
        shortest_path(dijkstra_graph, 0, 4, logger=StdLogger(stream=buf))
        assert buf.getvalue() == ""


class TestAgainstReferences:
    @pytest.mark.parametrize("degree", [2, 3, 4, 8])
    @pytest.mark.parametrize("directed", [True, False])
    def test_random_graphs(self, rng, degree, directed):
        cfg = DijkstraConfig(degree=degree)
        for _ in range(4):
            g = random_graph(30, 90, seed=rng.randrange(10**6), directed=directed)
            source = rng.randrange(g.n)
            solver = DijkstraSolver(g, source, config=cfg)
            res = solver.solve()
            ref = dijkstra_reference(g, source)
            nx_len = nx.single_source_dijkstra_path_length(to_networkx(g), source, weight="weight")
            for v in range(g.n):
                assert res.distances[v] == pytest.approx(ref.distances[v], abs=1e-5)
                if v in nx_len:
                    assert res.distances[v] == pytest.approx(nx_len[v], abs=1e-5)
                else:
                    assert res.distances[v] == math.inf
                    assert solver.path(v) is None
            assert_edge_condition(g, res.distances)
            for t in rng.sample(range(g.n), 5):
                path = solver.path(t)
                if path is not None:
                    assert path[0] == source and path[-1] == t
                    assert path_weight(g, path) == pytest.approx(res.distances[t], abs=1e-5)

    def test_reference_rejects_negative(self):
        g = Graph.from_edges(2, [(0, 1, -1.0)])
        with pytest.raises(NegativeWeightError):
            dijkstra_reference(g, 0)
