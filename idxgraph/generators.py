"""Deterministic graph builders for demos, tests and quick experiments.

All builders take a ``seed`` where randomness is involved and produce the
same graph for the same arguments.
"""

from __future__ import annotations

import math
import random
from typing import Literal, Set, Tuple

from .exceptions import ConfigError, InputError
from .graph import Graph

Family = Literal["random", "dag", "grid"]


def _check_weights(w_min: float, w_max: float) -> None:
    if w_max < w_min:
        raise InputError("w_max must be >= w_min.")


def random_graph(
    n: int,
    m: int,
    *,
    seed: int = 0,
    directed: bool = True,
    w_min: float = 0.0,
    w_max: float = 10.0,
    allow_self_loops: bool = True,
) -> Graph:
    """Generate ``m`` uniformly random edges over ``n`` vertices.

    Parallel edges may occur; self-loops only when ``allow_self_loops``.
    Weights are drawn uniformly from ``[w_min, w_max]``.
    """
    if n <= 0:
        raise InputError("n must be > 0.")
    if m < 0:
        raise InputError("m must be >= 0.")
    if n == 1 and m > 0 and not allow_self_loops:
        raise InputError("a single vertex needs self-loops to hold edges.")
    _check_weights(w_min, w_max)

    rnd = random.Random(seed)
    g = Graph(n, directed)
    while g.logical_edge_count() < m:
        u = rnd.randrange(n)
        v = rnd.randrange(n)
        if u == v and not allow_self_loops:
            continue
        g.add_edge(u, v, weight=rnd.uniform(w_min, w_max))
    return g


def dag_graph(
    n: int,
    m: int,
    *,
    seed: int = 0,
    w_min: float = 0.0,
    w_max: float = 10.0,
) -> Graph:
    """Generate a directed acyclic graph; every edge goes from a lower to a higher id.

    Duplicate ``(u, v)`` pairs are skipped, so ``m`` is capped at
    ``n * (n - 1) / 2``.
    """
    if n <= 0:
        raise InputError("n must be > 0.")
    if m < 0:
        raise InputError("m must be >= 0.")
    _check_weights(w_min, w_max)

    rnd = random.Random(seed)
    target_m = min(m, n * (n - 1) // 2)
    seen: Set[Tuple[int, int]] = set()
    g = Graph(n, directed=True)
    while len(seen) < target_m:
        u = rnd.randrange(n)
        v = rnd.randrange(n)
        if u == v:
            continue
        if u > v:
            u, v = v, u
        if (u, v) in seen:
            continue
        seen.add((u, v))
        g.add_edge(u, v, weight=rnd.uniform(w_min, w_max))
    return g


def grid_graph(rows: int, cols: int, *, weight: float = 1.0) -> Graph:
    """Build an undirected 4-neighbour grid with vertex ``r * cols + c``.

    Vertex payloads are the ``(row, col)`` coordinates.
    """
    if rows <= 0 or cols <= 0:
        raise InputError("rows and cols must be > 0.")
    g = Graph(rows * cols, directed=False)

    def idx(r: int, c: int) -> int:
        return r * cols + c

    for r in range(rows):
        for c in range(cols):
            g.add_vertex(idx(r, c), (r, c))
            if c + 1 < cols:
                g.add_edge(idx(r, c), idx(r, c + 1), weight=weight)
            if r + 1 < rows:
                g.add_edge(idx(r, c), idx(r + 1, c), weight=weight)
    return g


def generate_graph(family: Family, n: int, m: int, *, seed: int = 0, directed: bool = True) -> Graph:
    """Dispatch to a builder by family name.

    For ``"grid"`` the grid is the smallest near-square one with at least
    ``n`` cells and ``m`` is ignored.

    Raises:
        ConfigError: If ``family`` is unknown.
    """
    if family == "random":
        return random_graph(n, m, seed=seed, directed=directed)
    if family == "dag":
        return dag_graph(n, m, seed=seed)
    if family == "grid":
        if n <= 0:
            raise InputError("n must be > 0.")
        rows = max(1, math.isqrt(n))
        cols = (n + rows - 1) // rows
        return grid_graph(rows, cols)
    raise ConfigError(f"unknown graph family {family!r}")


__all__ = ["dag_graph", "generate_graph", "grid_graph", "random_graph"]
