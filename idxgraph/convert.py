"""NumPy array views and NetworkX interop for :class:`~idxgraph.graph.Graph`."""

from __future__ import annotations

import math
from typing import Tuple, Union

import networkx as nx
import numpy as np
import numpy.typing as npt

from .graph import Graph


def to_csr(
    G: Graph,
) -> Tuple[npt.NDArray[np.int64], npt.NDArray[np.int64], npt.NDArray[np.float64]]:
    """Return the adjacency lists in compressed sparse row form.

    Returns:
        ``(indptr, indices, weights)`` where the arcs of vertex ``u`` are
        ``indices[indptr[u]:indptr[u + 1]]`` in insertion order, with
        matching ``weights``.
    """
    indptr = np.zeros(G.n + 1, dtype=np.int64)
    for u in range(G.n):
        indptr[u + 1] = indptr[u] + len(G.adj[u])
    indices = np.empty(G.arc_count, dtype=np.int64)
    weights = np.empty(G.arc_count, dtype=np.float64)
    k = 0
    for u in range(G.n):
        for v, w, _ in G.adj[u]:
            indices[k] = v
            weights[k] = w
            k += 1
    return indptr, indices, weights


def to_dense(G: Graph, missing: float = math.inf) -> npt.NDArray[np.float64]:
    """Return the ``n x n`` matrix of the cheapest arc weight per vertex pair.

    Pairs without an arc hold ``missing``.
    """
    mat = np.full((G.n, G.n), missing, dtype=np.float64)
    has = np.zeros((G.n, G.n), dtype=bool)
    for u, v, w in G.arcs():
        if not has[u, v] or w < mat[u, v]:
            mat[u, v] = w
            has[u, v] = True
    return mat


def to_networkx(G: Graph) -> Union[nx.MultiDiGraph, nx.MultiGraph]:
    """Return a NetworkX multigraph with the same vertices and edges.

    Each edge carries ``weight`` and ``payload`` attributes and is keyed by
    its index in :attr:`Graph.edges`; vertices carry ``payload``.
    """
    H: Union[nx.MultiDiGraph, nx.MultiGraph] = nx.MultiDiGraph() if G.directed else nx.MultiGraph()
    for i in range(G.n):
        H.add_node(i, payload=G.vertex_payload(i))
    for idx, e in enumerate(G.edges):
        H.add_edge(e.tail, e.head, key=idx, weight=e.weight, payload=e.payload)
    return H


__all__ = ["to_csr", "to_dense", "to_networkx"]
