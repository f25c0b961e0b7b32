"""Adjacency-list graph over dense vertex indices."""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, List, NamedTuple, Tuple, Union

from .exceptions import InputError

Vertex = int
Float = float
EdgeSpec = Union[Tuple[Vertex, Vertex, Float], Tuple[Vertex, Vertex, Float, Any]]


@dataclass(frozen=True)
class Edge:
    """One logical edge, stored once even when the graph is undirected."""

    tail: Vertex
    head: Vertex
    weight: Float
    payload: Any = None


class Arc(NamedTuple):
    """Adjacency entry: the vertex reached, the weight and the owning edge."""

    head: Vertex
    weight: Float
    edge: int


@dataclass
class Graph:
    """Directed or undirected weighted multigraph over ``0 .. n-1``.

    Each call to :meth:`add_edge` stores a single :class:`Edge` record in
    :attr:`edges` and appends arcs to the adjacency lists. An undirected
    edge yields two arcs, ``tail -> head`` and ``head -> tail``, that point
    at the same record, so its payload is shared rather than duplicated.

    Adjacency lists keep insertion order. Parallel edges and self-loops
    are accepted; nothing is ever removed.

    Attributes:
        n: Number of vertices in the range ``0`` .. ``n-1``.
        directed: ``False`` for an undirected graph.
        adj: Outgoing arcs of every vertex.
        edges: Logical edge records in insertion order.
    """

    n: int
    directed: bool = True
    adj: List[List[Arc]] = field(init=False, repr=False)
    edges: List[Edge] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate vertex count and initialize adjacency lists."""
        msg = "Graph.n must be a non-negative integer."
        if isinstance(self.n, bool):
            raise InputError(msg)
        try:
            self.n = operator.index(self.n)
        except TypeError:
            raise InputError(msg) from None
        if self.n < 0:
            raise InputError(msg)
        self.directed = bool(self.directed)
        self.adj = [[] for _ in range(self.n)]
        self.edges = []
        self._payloads: List[Any] = [None] * self.n
        self.arc_count = 0

    # ---------- validation ------------------------------------------------

    def check_vertex(self, u: Vertex, name: str = "vertex") -> Vertex:
        """Return ``u`` as a plain ``int`` vertex id in ``[0, n)``.

        Any integer type is accepted, numpy integers included; ``bool`` is
        not.

        Raises:
            InputError: If ``u`` is not an integer in ``[0, n)``.
        """
        msg = f"{name} {u!r} is not a vertex id in [0, {self.n})."
        if isinstance(u, bool):
            raise InputError(msg)
        try:
            i = operator.index(u)
        except TypeError:
            raise InputError(msg) from None
        if not (0 <= i < self.n):
            raise InputError(msg)
        return i

    # ---------- construction ----------------------------------------------

    def add_vertex(self, i: Vertex, payload: Any) -> None:
        """Attach ``payload`` to vertex ``i``, replacing any previous one.

        Raises:
            InputError: If ``i`` is out of range.
        """
        i = self.check_vertex(i)
        self._payloads[i] = payload

    def add_edge(self, u: Vertex, v: Vertex, payload: Any = None, weight: Float = 1.0) -> int:
        """Add an edge from ``u`` to ``v`` and return its index in :attr:`edges`.

        For an undirected graph the reverse arc ``v -> u`` is added too.

        Args:
            u: Tail vertex.
            v: Head vertex.
            payload: Opaque value attached to the edge.
            weight: Finite edge weight.

        Raises:
            InputError: If ``u`` or ``v`` are out of range or ``weight`` is
                not a finite number.

        Examples:
            ```python
            >>> g = Graph(2)
            >>> g.add_edge(0, 1, weight=1.5)
            0
            >>> g.adj
            [[Arc(head=1, weight=1.5, edge=0)], []]
            ```
        """
        u = self.check_vertex(u, "tail")
        v = self.check_vertex(v, "head")
        if isinstance(weight, bool) or not isinstance(weight, (int, float)):
            raise InputError(f"non-numeric weight {weight!r} on edge ({u}, {v})")
        if not math.isfinite(weight):
            raise InputError(f"non-finite weight {weight} on edge ({u}, {v})")
        w = float(weight)
        idx = len(self.edges)
        self.edges.append(Edge(u, v, w, payload))
        self.adj[u].append(Arc(v, w, idx))
        self.arc_count += 1
        if not self.directed:
            self.adj[v].append(Arc(u, w, idx))
            self.arc_count += 1
        return idx

    @classmethod
    def from_edges(cls, n: int, edges: Iterable[EdgeSpec], directed: bool = True) -> "Graph":
        """Create a graph from ``(u, v, w)`` or ``(u, v, w, payload)`` tuples.

        Args:
            n: Number of vertices.
            edges: Iterable of edge tuples.
            directed: Kind of the new graph.

        Returns:
            A graph populated with the provided edges.
        """
        g = cls(n, directed)
        for spec in edges:
            if len(spec) == 3:
                u, v, w = spec  # type: ignore[misc]
                g.add_edge(int(u), int(v), weight=float(w))
            else:
                u, v, w, payload = spec  # type: ignore[misc]
                g.add_edge(int(u), int(v), payload, float(w))
        return g

    def copy(self, reverse: bool = False) -> "Graph":
        """Return a new graph with the same vertices, kind and payloads.

        Edges are re-added in their original order; with ``reverse=True``
        every edge has its endpoints swapped. Payload objects are shared
        with the source graph, not cloned.
        """
        g = Graph(self.n, self.directed)
        g._payloads = list(self._payloads)
        for e in self.edges:
            if reverse:
                g.add_edge(e.head, e.tail, e.payload, e.weight)
            else:
                g.add_edge(e.tail, e.head, e.payload, e.weight)
        return g

    # ---------- queries ---------------------------------------------------

    @property
    def is_directed(self) -> bool:
        """Whether edges have a direction."""
        return self.directed

    def logical_edge_count(self) -> int:
        """Return the number of :meth:`add_edge` calls made so far.

        This is :attr:`arc_count` for a directed graph and half of it for
        an undirected one.
        """
        return len(self.edges)

    def vertex_payload(self, i: Vertex) -> Any:
        """Return the payload attached to vertex ``i`` (``None`` if unset)."""
        i = self.check_vertex(i)
        return self._payloads[i]

    def edge_payload(self, edge: int) -> Any:
        """Return the payload of the edge record at index ``edge``."""
        if not (0 <= edge < len(self.edges)):
            raise InputError(f"edge index {edge!r} out of range.")
        return self.edges[edge].payload

    def out_degree(self, u: Vertex) -> int:
        """Return the number of arcs leaving vertex ``u``."""
        u = self.check_vertex(u)
        return len(self.adj[u])

    def neighbors(self, u: Vertex) -> List[Vertex]:
        """Return the heads of ``u``'s arcs in insertion order."""
        u = self.check_vertex(u)
        return [a.head for a in self.adj[u]]

    def arcs(self) -> Iterator[Tuple[Vertex, Vertex, Float]]:
        """Iterate over every arc as ``(tail, head, weight)``."""
        for u in range(self.n):
            for v, w, _ in self.adj[u]:
                yield u, v, w

    def describe(self, payloads: bool = False) -> str:
        """Render the adjacency lists, one vertex per line.

        Example line: ``0: 1 -> 2 -> 2``. With ``payloads=True`` the vertex
        payload follows the index in parentheses when set.
        """
        lines: List[str] = []
        for u in range(self.n):
            head = f"{u}"
            if payloads and self._payloads[u] is not None:
                head += f" ({self._payloads[u]!r})"
            tails = " -> ".join(str(a.head) for a in self.adj[u])
            lines.append(f"{head}: {tails}".rstrip())
        return "\n".join(lines)

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return f"Graph(n={self.n}, {kind}, edges={len(self.edges)}, arcs={self.arc_count})"


__all__ = ["Arc", "Edge", "Graph", "Vertex", "Float"]
