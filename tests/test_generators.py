"""Tests for idxgraph/generators.py"""

import pytest

from idxgraph import ConfigError, InputError
from idxgraph.generators import dag_graph, generate_graph, grid_graph, random_graph


class TestRandomGraph:
    def test_size_and_weights(self):
        g = random_graph(10, 25, seed=3, w_min=1.0, w_max=2.0)
        assert g.n == 10
        assert g.logical_edge_count() == 25
        assert all(1.0 <= w <= 2.0 for _, _, w in g.arcs())

    def test_deterministic(self):
        a = random_graph(8, 12, seed=42)
        b = random_graph(8, 12, seed=42)
        assert list(a.arcs()) == list(b.arcs())

    def test_undirected(self):
        g = random_graph(6, 10, seed=1, directed=False)
        assert g.directed is False
        assert g.logical_edge_count() == 10

    def test_no_self_loops(self):
        g = random_graph(4, 30, seed=7, allow_self_loops=False)
        assert all(u != v for u, v, _ in g.arcs())

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"n": 0, "m": 1},
            {"n": 3, "m": -1},
            {"n": 1, "m": 2, "allow_self_loops": False},
            {"n": 3, "m": 2, "w_min": 5.0, "w_max": 1.0},
        ],
    )
    def test_invalid(self, kwargs):
        with pytest.raises(InputError):
            random_graph(**kwargs)


class TestDagGraph:
    def test_edges_point_upward(self):
        g = dag_graph(12, 30, seed=5)
        assert g.logical_edge_count() == 30
        assert all(u < v for u, v, _ in g.arcs())

    def test_no_duplicate_pairs(self):
        g = dag_graph(6, 100, seed=2)
        pairs = [(u, v) for u, v, _ in g.arcs()]
        assert len(pairs) == len(set(pairs)) == 15

    def test_invalid(self):
        with pytest.raises(InputError):
            dag_graph(0, 1)


class TestGridGraph:
    def test_shape(self):
        g = grid_graph(3, 4)
        assert g.n == 12
        assert g.directed is False
        assert g.logical_edge_count() == 3 * 3 + 2 * 4
        assert g.vertex_payload(6) == (1, 2)
        assert sorted(g.neighbors(5)) == [1, 4, 6, 9]

    def test_invalid(self):
        with pytest.raises(InputError):
            grid_graph(0, 3)


class TestGenerateGraph:
    def test_dispatch(self):
        assert generate_graph("random", 5, 7).logical_edge_count() == 7
        assert all(u < v for u, v, _ in generate_graph("dag", 6, 8, seed=1).arcs())

    def test_grid_holds_at_least_n_cells(self):
        g = generate_graph("grid", 10, 0)
        assert g.n >= 10
        assert g.vertex_payload(0) == (0, 0)

    def test_unknown_family(self):
        with pytest.raises(ConfigError, match="unknown graph family"):
            generate_graph("ring", 5, 5)  # type: ignore[arg-type]
