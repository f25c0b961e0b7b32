"""Public package exports for :mod:`idxgraph`."""

from __future__ import annotations

from . import bfs, dfs, dijkstra
from .convert import to_csr, to_dense, to_networkx
from .dfs import (
    count_reachable_iterative,
    count_reachable_recursive,
    find_ancestors,
    format_ancestors,
    reachable,
)
from .dijkstra import (
    DijkstraConfig,
    DijkstraResult,
    DijkstraSolver,
    compare_distances,
    dijkstra_reference,
)
from .exceptions import (
    AlgorithmError,
    ConfigError,
    DuplicateKeyError,
    IdxGraphError,
    InputError,
    KeyIndexError,
    MissingKeyError,
    NegativeWeightError,
    NullValueError,
    QueueEmptyError,
    QueueError,
)
from .generators import dag_graph, generate_graph, grid_graph, random_graph
from .graph import Arc, Edge, Graph
from .logger import Logger, NoopLogger, StdLogger
from .path import format_path, path_weight, reconstruct_path, shortest_path_dag
from .pqueue import IndexedBinaryMinPQ, IndexedDaryMinPQ, natural_compare

__version__ = "0.2.0"

bfs_shortest_path = bfs.shortest_path
dijkstra_shortest_path = dijkstra.shortest_path

__all__ = [
    "Arc",
    "Edge",
    "Graph",
    "IndexedDaryMinPQ",
    "IndexedBinaryMinPQ",
    "natural_compare",
    "bfs",
    "dfs",
    "dijkstra",
    "bfs_shortest_path",
    "dijkstra_shortest_path",
    "DijkstraConfig",
    "DijkstraResult",
    "DijkstraSolver",
    "compare_distances",
    "dijkstra_reference",
    "count_reachable_recursive",
    "count_reachable_iterative",
    "find_ancestors",
    "format_ancestors",
    "reachable",
    "reconstruct_path",
    "format_path",
    "path_weight",
    "shortest_path_dag",
    "random_graph",
    "dag_graph",
    "grid_graph",
    "generate_graph",
    "to_csr",
    "to_dense",
    "to_networkx",
    "Logger",
    "NoopLogger",
    "StdLogger",
    "IdxGraphError",
    "InputError",
    "NegativeWeightError",
    "ConfigError",
    "QueueError",
    "KeyIndexError",
    "DuplicateKeyError",
    "MissingKeyError",
    "QueueEmptyError",
    "NullValueError",
    "AlgorithmError",
]
