"""Dijkstra single-source shortest paths over non-negative weights."""

from __future__ import annotations

import heapq
import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .exceptions import AlgorithmError, ConfigError, NegativeWeightError
from .graph import Float, Graph, Vertex
from .logger import Logger, NoopLogger
from .path import reconstruct_path
from .pqueue import IndexedDaryMinPQ

DEFAULT_EPS = 1e-6


def compare_distances(a: Float, b: Float, eps: float = DEFAULT_EPS) -> int:
    """Three-way comparison of two distances, treating ``|a - b| < eps`` as equal.

    Infinite distances compare equal to each other.
    """
    if abs(a - b) < eps:
        return 0
    if a > b:
        return 1
    if a < b:
        return -1
    return 0


@dataclass(frozen=True)
class DijkstraConfig:
    """Configuration knobs for the solver.

    Attributes:
        degree: Branching factor of the indexed priority queue.
        eps: Distances closer than this compare equal; ``0`` compares
            exactly.
        stop_at_target: If ``True``, stop as soon as the target is settled.
            Distances of vertices not yet settled are then only upper
            bounds.
    """

    degree: int = 2
    eps: float = DEFAULT_EPS
    stop_at_target: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.degree, bool) or not isinstance(self.degree, int) or self.degree < 2:
            raise ConfigError(f"degree must be an integer >= 2, got {self.degree!r}")
        if not isinstance(self.eps, (int, float)) or not (0 <= self.eps < math.inf):
            raise ConfigError(f"eps must be a finite non-negative number, got {self.eps!r}")


@dataclass(frozen=True)
class DijkstraResult:
    """Distances and predecessors produced by the solver."""

    distances: List[Float]
    predecessors: List[Optional[Vertex]]


class DijkstraSolver:
    """Dijkstra's algorithm driven by an indexed D-ary min priority queue.

    Each vertex is settled at most once. When a shorter tentative distance
    is found for a vertex already queued, its entry is lowered in place with
    :meth:`~idxgraph.pqueue.IndexedDaryMinPQ.decrease` instead of pushing a
    duplicate.

    Args:
        G: Input graph. Its arcs must have non-negative weights.
        source: Source vertex identifier.
        config: Optional solver configuration.
        logger: Optional logger receiving a ``dijkstra.done`` debug event.

    Raises:
        InputError: If ``source`` is not a valid vertex id.
    """

    def __init__(
        self,
        G: Graph,
        source: Vertex,
        config: Optional[DijkstraConfig] = None,
        logger: Logger | None = None,
    ) -> None:
        source = G.check_vertex(source, "source")
        self.G = G
        self.source = source
        self.cfg = config or DijkstraConfig()
        self.logger = logger or NoopLogger()

        self.counters: Dict[str, int] = {
            "settled": 0,
            "stale_skips": 0,
            "arcs_scanned": 0,
            "edges_relaxed": 0,
            "pq_inserts": 0,
            "pq_decreases": 0,
        }
        self.dist: List[Float] = [math.inf] * G.n
        self.pred: List[Optional[Vertex]] = [None] * G.n
        self._solved = False

    def _compare(self, a: Float, b: Float) -> int:
        return compare_distances(a, b, self.cfg.eps)

    def solve(self, target: Optional[Vertex] = None) -> DijkstraResult:
        """Compute distances and predecessors from the source.

        Args:
            target: Vertex whose settlement ends the search early when
                ``config.stop_at_target`` is set. Ignored otherwise.

        Returns:
            Distances (``inf`` for unreachable vertices) and predecessors.

        Raises:
            NegativeWeightError: If a negative arc is scanned.
        """
        G = self.G
        if target is not None:
            target = G.check_vertex(target, "target")
        n = G.n
        dist: List[Float] = [math.inf] * n
        pred: List[Optional[Vertex]] = [None] * n
        visited = [False] * n
        for key in self.counters:
            self.counters[key] = 0

        dist[self.source] = 0.0
        with IndexedDaryMinPQ(self.cfg.degree, n, compare=self._compare) as pq:
            pq.insert(self.source, 0.0)
            self.counters["pq_inserts"] += 1
            while pq:
                u = pq.peek_key_index()
                du = pq.extract()
                visited[u] = True

                # Entry superseded by a shorter distance found later.
                if self._compare(du, dist[u]) > 0:
                    self.counters["stale_skips"] += 1
                    continue
                self.counters["settled"] += 1
                if self.cfg.stop_at_target and u == target:
                    break

                for v, w, _ in G.adj[u]:
                    self.counters["arcs_scanned"] += 1
                    if w < 0:
                        raise NegativeWeightError(f"negative weight {w} on edge ({u}, {v})")
                    if visited[v]:
                        continue
                    nd = dist[u] + w
                    if self._compare(nd, dist[v]) < 0:
                        dist[v] = nd
                        pred[v] = u
                        self.counters["edges_relaxed"] += 1
                        if not pq.contains(v):
                            pq.insert(v, nd)
                            self.counters["pq_inserts"] += 1
                        else:
                            pq.decrease(v, nd)
                            self.counters["pq_decreases"] += 1

        self.dist = dist
        self.pred = pred
        self._solved = True
        self.logger.debug("dijkstra.done", source=self.source, n=n, **self.counters)
        return DijkstraResult(distances=dist, predecessors=pred)

    def path(self, target: Vertex) -> Optional[List[Vertex]]:
        """Return a shortest path from the source to ``target``.

        Returns:
            Vertex ids from source to target inclusive, or ``None`` if the
            target is unreachable. :meth:`solve` must be called beforehand.
        """
        if not self._solved:
            raise AlgorithmError("Call solve() before requesting paths.")
        target = self.G.check_vertex(target, "target")
        return reconstruct_path(self.pred, self.source, target)

    def summary(self) -> Dict[str, int]:
        """Return a copy of internal counter values."""
        return dict(self.counters)


def shortest_path(
    G: Graph,
    source: Vertex,
    target: Vertex,
    *,
    config: Optional[DijkstraConfig] = None,
    logger: Logger | None = None,
) -> Tuple[List[Float], Optional[List[Vertex]]]:
    """Return the distance vector from ``source`` and a shortest path to ``target``.

    Args:
        G: Graph with non-negative edge weights.
        source: Source vertex.
        target: Target vertex.
        config: Optional solver configuration.
        logger: Optional structured logger.

    Returns:
        ``(dist, path)`` where ``dist[v]`` is ``inf`` for unreachable
        vertices and ``path`` is ``None`` when ``target`` is unreachable.

    Examples:
        ```python
        >>> g = Graph.from_edges(3, [(0, 1, 4.0), (0, 2, 1.0), (2, 1, 2.0)])
        >>> shortest_path(g, 0, 1)
        ([0.0, 3.0, 1.0], [0, 2, 1])
        ```
    """
    target = G.check_vertex(target, "target")
    solver = DijkstraSolver(G, source, config=config, logger=logger)
    res = solver.solve(target=target)
    return res.distances, solver.path(target)


def dijkstra_reference(G: Graph, source: Vertex) -> DijkstraResult:
    """Run Dijkstra with :mod:`heapq` and lazy deletion.

    Superseded heap entries are left in place and skipped when popped. Used
    as an independent check of :class:`DijkstraSolver`.

    Args:
        G: Input graph with non-negative edge weights.
        source: Source vertex identifier.

    Returns:
        Distances and predecessors from running Dijkstra.
    """
    source = G.check_vertex(source, "source")
    n = G.n
    dist: List[Float] = [math.inf] * n
    pred: List[Optional[Vertex]] = [None] * n
    dist[source] = 0.0
    pq: List[Tuple[Float, Vertex]] = [(0.0, source)]
    seen = [False] * n
    while pq:
        d, u = heapq.heappop(pq)
        if d > dist[u] or seen[u]:
            continue
        seen[u] = True
        for v, w, _ in G.adj[u]:
            if w < 0:
                raise NegativeWeightError(f"negative weight {w} on edge ({u}, {v})")
            nd = d + w
            if nd < dist[v]:
                dist[v] = nd
                pred[v] = u
                heapq.heappush(pq, (nd, v))
    return DijkstraResult(distances=dist, predecessors=pred)


__all__ = [
    "DEFAULT_EPS",
    "DijkstraConfig",
    "DijkstraResult",
    "DijkstraSolver",
    "compare_distances",
    "dijkstra_reference",
    "shortest_path",
]
