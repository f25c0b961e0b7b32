"""Breadth-first search shortest paths on unweighted graphs."""

from __future__ import annotations

from collections import deque
from typing import Deque, List, Optional, Tuple

from .graph import Graph, Vertex
from .logger import Logger, NoopLogger
from .path import reconstruct_path


def _bfs(G: Graph, source: Vertex) -> Tuple[List[Optional[Vertex]], List[Optional[int]], int]:
    """Run BFS from ``source``; return predecessors, hop counts and arcs scanned.

    Neighbours are discovered in adjacency insertion order, so among equal
    length paths the first one discovered wins.
    """
    source = G.check_vertex(source, "source")
    prev: List[Optional[Vertex]] = [None] * G.n
    hops: List[Optional[int]] = [None] * G.n
    visited = [False] * G.n

    queue: Deque[Vertex] = deque([source])
    visited[source] = True
    hops[source] = 0
    scanned = 0
    while queue:
        u = queue.popleft()
        for v, _w, _ in G.adj[u]:
            scanned += 1
            if not visited[v]:
                visited[v] = True
                prev[v] = u
                hops[v] = hops[u] + 1  # type: ignore[operator]
                queue.append(v)
    return prev, hops, scanned


def shortest_path(
    G: Graph,
    source: Vertex,
    target: Vertex,
    *,
    logger: Logger | None = None,
) -> Optional[List[Vertex]]:
    """Return a fewest-edges path from ``source`` to ``target``.

    Edge weights are ignored.

    Args:
        G: Input graph.
        source: Start vertex.
        target: End vertex.
        logger: Optional logger receiving a ``bfs.done`` debug event.

    Returns:
        Vertices from ``source`` to ``target`` inclusive, or ``None`` if
        ``target`` is unreachable.

    Raises:
        InputError: If ``source`` or ``target`` is not a vertex id.

    Examples:
        ```python
        >>> g = Graph.from_edges(3, [(0, 1, 1.0), (1, 2, 1.0)])
        >>> shortest_path(g, 0, 2)
        [0, 1, 2]
        ```
    """
    target = G.check_vertex(target, "target")
    source = G.check_vertex(source, "source")
    log = logger or NoopLogger()
    prev, hops, scanned = _bfs(G, source)
    path = reconstruct_path(prev, source, target)
    log.debug(
        "bfs.done",
        source=source,
        target=target,
        reached=sum(h is not None for h in hops),
        arcs_scanned=scanned,
        found=path is not None,
    )
    return path


def bfs_distances(G: Graph, source: Vertex) -> List[Optional[int]]:
    """Return the hop count from ``source`` to every vertex (``None`` if unreachable)."""
    _prev, hops, _scanned = _bfs(G, source)
    return hops


__all__ = ["bfs_distances", "shortest_path"]
