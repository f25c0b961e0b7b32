"""Shared fixtures: the literal example graphs and a seeded RNG."""

import os
import random

import pytest

from idxgraph import Graph, deprecation


@pytest.fixture
def rng() -> random.Random:
    """Deterministic RNG; override the seed with ``TEST_RNG_SEED``."""
    return random.Random(int(os.environ.get("TEST_RNG_SEED", "0")))


@pytest.fixture
def dfs_graph() -> Graph:
    """Directed, five vertices, vertex 4 disconnected, self-loop on 2."""
    return Graph.from_edges(
        5, [(0, 1, 1), (0, 2, 1), (1, 2, 1), (1, 3, 1), (2, 3, 1), (2, 2, 1)]
    )


@pytest.fixture
def ancestor_graph() -> Graph:
    """Directed, five vertices: 0->4, 4->1, 4->3, 1->2."""
    return Graph.from_edges(5, [(0, 4, 1), (4, 1, 1), (4, 3, 1), (1, 2, 1)])


BFS_PAIRS = [
    (0, 7), (0, 9), (0, 11), (7, 11), (7, 6), (7, 3), (6, 5), (3, 4),
    (2, 3), (2, 12), (12, 8), (8, 1), (1, 10), (10, 9), (9, 8),
]


@pytest.fixture
def bfs_graph() -> Graph:
    """Undirected, thirteen vertices."""
    return Graph.from_edges(13, [(u, v, 1) for u, v in BFS_PAIRS], directed=False)


@pytest.fixture
def dijkstra_graph() -> Graph:
    """Directed, five vertices, non-negative weights."""
    return Graph.from_edges(
        5, [(0, 1, 4), (0, 2, 1), (1, 3, 1), (2, 1, 2), (2, 3, 5), (3, 4, 3)]
    )


@pytest.fixture(autouse=True)
def fresh_deprecations():
    """Let every test see the first emission of each deprecation warning."""
    deprecation._warned.clear()
    yield
    deprecation._warned.clear()
