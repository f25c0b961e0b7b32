"""Depth-first reachability counts and ancestor enumeration."""

from __future__ import annotations

from typing import List, Sequence

from .graph import Graph, Vertex
from .logger import Logger, NoopLogger


def count_reachable_recursive(
    G: Graph, source: Vertex, *, logger: Logger | None = None
) -> int:
    """Count the vertices reachable from ``source`` with a recursive DFS.

    ``source`` itself is counted. For an undirected graph this is the size
    of its connected component. Recursion depth grows with the longest
    DFS chain, so very deep graphs raise :class:`RecursionError`; use
    :func:`count_reachable_iterative` for those.

    Raises:
        InputError: If ``source`` is not a vertex id.
    """
    source = G.check_vertex(source, "source")
    visited = [False] * G.n

    def visit(u: Vertex) -> int:
        visited[u] = True
        count = 1
        for v, _w, _ in G.adj[u]:
            if not visited[v]:
                count += visit(v)
        return count

    count = visit(source)
    (logger or NoopLogger()).debug("dfs.count", mode="recursive", source=source, count=count)
    return count


def count_reachable_iterative(
    G: Graph, source: Vertex, *, logger: Logger | None = None
) -> int:
    """Count the vertices reachable from ``source`` using an explicit stack.

    A vertex may be pushed once per incoming arc; it is counted only the
    first time it is popped. The stack is a Python list and grows as needed.

    Raises:
        InputError: If ``source`` is not a vertex id.
    """
    source = G.check_vertex(source, "source")
    visited = [False] * G.n
    stack: List[Vertex] = [source]
    count = 0
    peak = 1
    while stack:
        u = stack.pop()
        if visited[u]:
            continue
        visited[u] = True
        count += 1
        for v, _w, _ in G.adj[u]:
            stack.append(v)
        if len(stack) > peak:
            peak = len(stack)
    (logger or NoopLogger()).debug(
        "dfs.count", mode="iterative", source=source, count=count, peak_stack=peak
    )
    return count


def reachable(G: Graph, source: Vertex) -> List[bool]:
    """Return a flag per vertex telling whether it is reachable from ``source``."""
    source = G.check_vertex(source, "source")
    seen = [False] * G.n
    seen[source] = True
    stack: List[Vertex] = [source]
    while stack:
        u = stack.pop()
        for v, _w, _ in G.adj[u]:
            if not seen[v]:
                seen[v] = True
                stack.append(v)
    return seen


def find_ancestors(G: Graph, *, logger: Logger | None = None) -> List[List[Vertex]]:
    """Return, for every vertex ``v``, the sorted vertices with a path to ``v``.

    The graph is reversed once; a reachability scan from ``v`` in the
    reversed graph then visits exactly the ancestors of ``v`` in ``G``.
    ``v`` is never listed as its own ancestor, even on a cycle. Runs in
    ``O(V * (V + E))``.

    Examples:
        ```python
        >>> g = Graph.from_edges(3, [(0, 1, 1.0), (1, 2, 1.0)])
        >>> find_ancestors(g)
        [[], [0], [0, 1]]
        ```
    """
    rev = G.copy(reverse=True)
    result: List[List[Vertex]] = []
    for v in range(G.n):
        seen = reachable(rev, v)
        result.append([u for u in range(G.n) if seen[u] and u != v])
    (logger or NoopLogger()).debug(
        "dfs.ancestors", n=G.n, total=sum(len(a) for a in result)
    )
    return result


def format_ancestors(ancestors: Sequence[Sequence[Vertex]]) -> str:
    """Render ancestor lists as ``[i] -> [a] -> [b] -> NULL`` lines."""
    lines: List[str] = []
    for i, anc in enumerate(ancestors):
        parts = [f"[{i}]"] + [f"[{a}]" for a in anc] + ["NULL"]
        lines.append(" -> ".join(parts))
    return "\n".join(lines)


__all__ = [
    "count_reachable_iterative",
    "count_reachable_recursive",
    "find_ancestors",
    "format_ancestors",
    "reachable",
]
