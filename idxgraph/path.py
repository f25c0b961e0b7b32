"""Utilities for reconstructing and inspecting paths from predecessor arrays."""

from __future__ import annotations

import math
from typing import List, Optional, Sequence, Tuple

from .exceptions import InputError
from .graph import Float, Graph, Vertex


def reconstruct_path(
    predecessors: Sequence[Optional[Vertex]],
    source: Vertex,
    target: Vertex,
) -> Optional[List[Vertex]]:
    """Return the path from ``source`` to ``target`` using a predecessor array.

    The walk starts at ``target`` and follows ``predecessors`` until it hits
    a vertex without one; the reversed walk is a path only if it begins at
    ``source``.

    Args:
        predecessors: Predecessor of each vertex or ``None`` for the root
            and for unreached vertices.
        source: Source vertex identifier.
        target: Target vertex identifier.

    Returns:
        Vertices from source to target (inclusive), or ``None`` if
        ``target`` was not reached from ``source``.

    Raises:
        InputError: If ``source`` or ``target`` is out of range.
    """
    n = len(predecessors)
    if not (0 <= source < n and 0 <= target < n):
        raise InputError("source/target out of range.")

    chain: List[Vertex] = []
    cur: Optional[Vertex] = target
    while cur is not None:
        chain.append(cur)
        if len(chain) > n:
            raise InputError("predecessor array contains a cycle.")
        cur = predecessors[cur]
    chain.reverse()
    if chain[0] != source:
        return None
    return chain


def format_path(path: Optional[Sequence[Vertex]]) -> str:
    """Render a path as ``[4->7->3->2]``; a missing path renders as ``[]``."""
    if not path:
        return "[]"
    return "[" + "->".join(str(v) for v in path) + "]"


def path_weight(G: Graph, path: Sequence[Vertex]) -> Float:
    """Return the total weight of ``path`` using the cheapest parallel arc.

    Raises:
        InputError: If two consecutive vertices are not joined by an arc.
    """
    total = 0.0
    for u, v in zip(path, path[1:]):
        G.check_vertex(u)
        best = math.inf
        for head, w, _ in G.adj[u]:
            if head == v and w < best:
                best = w
        if best == math.inf:
            raise InputError(f"no arc from {u} to {v} on path.")
        total += best
    return total


def shortest_path_dag(
    G: Graph, distances: Sequence[Float], eps: float = 1e-9
) -> List[Tuple[Vertex, Vertex]]:
    """Return arcs of the shortest-path DAG.

    Args:
        G: Graph the distances were computed on.
        distances: Distance of every vertex (``inf`` when unreachable).
        eps: Numerical tolerance.

    Returns:
        Arcs ``(u, v)`` with ``d[v] == d[u] + w(u, v)`` within ``eps``.
    """
    dag: List[Tuple[Vertex, Vertex]] = []
    for u in range(G.n):
        du = distances[u]
        if not (du < math.inf):
            continue
        for v, w, _ in G.adj[u]:
            dv = distances[v]
            if dv < math.inf and abs(dv - (du + w)) <= eps:
                dag.append((u, v))
    return dag


__all__ = ["format_path", "path_weight", "reconstruct_path", "shortest_path_dag"]
