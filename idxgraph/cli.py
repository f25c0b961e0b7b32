"""Command-line demonstrator for the graph algorithms and the indexed queue."""

from __future__ import annotations

import argparse
import json
import math
import sys
import traceback
from typing import Any, Callable, Dict, List, Optional

from . import bfs, dfs, dijkstra
from .exceptions import ConfigError, IdxGraphError, InputError
from .generators import generate_graph
from .graph import Graph
from .logger import Logger, StdLogger
from .path import format_path
from .pqueue import IndexedDaryMinPQ

EXIT_OK = 0
EXIT_USAGE = 64
EXIT_INTERNAL = 70


def _dist_json(dist: List[float]) -> List[Optional[float]]:
    """JSON has no infinity; unreachable distances become ``null``."""
    return [d if d < math.inf else None for d in dist]


# ---------- seed scenarios --------------------------------------------------


def scenario_dfs_count(logger: Logger) -> Dict[str, Any]:
    g = Graph.from_edges(5, [(0, 1, 1), (0, 2, 1), (1, 2, 1), (1, 3, 1), (2, 3, 1), (2, 2, 1)])
    return {
        "recursive": {s: dfs.count_reachable_recursive(g, s, logger=logger) for s in (0, 4)},
        "iterative": {s: dfs.count_reachable_iterative(g, s, logger=logger) for s in (0, 4)},
    }


def scenario_ancestors(logger: Logger) -> Dict[str, Any]:
    g = Graph.from_edges(5, [(0, 4, 1), (4, 1, 1), (4, 3, 1), (1, 2, 1)])
    anc = dfs.find_ancestors(g, logger=logger)
    return {"ancestors": anc, "text": dfs.format_ancestors(anc)}


def scenario_bfs(logger: Logger) -> Dict[str, Any]:
    pairs = [
        (0, 7), (0, 9), (0, 11), (7, 11), (7, 6), (7, 3), (6, 5), (3, 4),
        (2, 3), (2, 12), (12, 8), (8, 1), (1, 10), (10, 9), (9, 8),
    ]
    g = Graph.from_edges(13, [(u, v, 1) for u, v in pairs], directed=False)
    path = bfs.shortest_path(g, 10, 5, logger=logger)
    return {"source": 10, "target": 5, "path": path, "text": format_path(path)}


def scenario_dijkstra(logger: Logger) -> Dict[str, Any]:
    g = Graph.from_edges(
        5, [(0, 1, 4), (0, 2, 1), (1, 3, 1), (2, 1, 2), (2, 3, 5), (3, 4, 3)]
    )
    dist, path = dijkstra.shortest_path(g, 0, 4, logger=logger)
    return {"source": 0, "target": 4, "distances": _dist_json(dist), "path": path}


def scenario_pq_sort(logger: Logger) -> Dict[str, Any]:
    pq: IndexedDaryMinPQ[int] = IndexedDaryMinPQ(3, 10)
    for ki, v in [(0, 7), (1, 2), (2, 9), (3, 2), (4, 5)]:
        pq.insert(ki, v)
    out = []
    while pq:
        out.append(pq.extract())
    logger.debug("pq.sort", degree=3, extracted=len(out))
    return {"extracted": out}


def scenario_pq_decrease(logger: Logger) -> Dict[str, Any]:
    pq: IndexedDaryMinPQ[int] = IndexedDaryMinPQ(2, 5)
    for ki, v in [(0, 10), (1, 20), (2, 30)]:
        pq.insert(ki, v)
    pq.decrease(2, 5)
    top = pq.peek_key_index()
    value = pq.extract()
    nxt = pq.peek_key_index()
    logger.debug("pq.decrease", top=top, value=value, next=nxt)
    return {"top_after_decrease": top, "extracted": value, "next_top": nxt}


SCENARIOS: Dict[str, Callable[[Logger], Dict[str, Any]]] = {
    "dfs": scenario_dfs_count,
    "ancestors": scenario_ancestors,
    "bfs": scenario_bfs,
    "dijkstra": scenario_dijkstra,
    "pq-sort": scenario_pq_sort,
    "pq-decrease": scenario_pq_decrease,
}


# ---------- generated graphs ------------------------------------------------


def _run_algo(args: argparse.Namespace, G: Graph, logger: Logger) -> Dict[str, Any]:
    out: Dict[str, Any] = {"n": G.n, "edges": G.logical_edge_count(), "algo": args.algo}
    target = args.target if args.target is not None else G.n - 1
    if args.algo == "bfs":
        path = bfs.shortest_path(G, args.source, target, logger=logger)
        out.update(source=args.source, target=target, path=path)
    elif args.algo == "dijkstra":
        cfg = dijkstra.DijkstraConfig(degree=args.degree)
        dist, path = dijkstra.shortest_path(G, args.source, target, config=cfg, logger=logger)
        out.update(source=args.source, target=target, distances=_dist_json(dist), path=path)
    elif args.algo == "dfs":
        out.update(
            source=args.source,
            count=dfs.count_reachable_iterative(G, args.source, logger=logger),
        )
    else:
        out.update(ancestors=dfs.find_ancestors(G, logger=logger))
    return out


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``idxgraph`` command-line tool."""
    examples = (
        "Examples:\n"
        "  idxgraph --scenario all\n"
        "  idxgraph --scenario dijkstra --log-level debug\n"
        "  idxgraph --random --n 100 --m 500 --algo dijkstra --source 0 --target 42\n"
    )
    p = argparse.ArgumentParser(
        prog="idxgraph",
        description="Indexed priority queue and graph algorithm demonstrator",
        epilog=examples,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    p.add_argument("--verbose", action="store_true", help="Show full tracebacks")
    p.add_argument("--log-json", action="store_true", help="Emit structured log lines")
    p.add_argument(
        "--log-level",
        choices=["debug", "info", "warning"],
        default="warning",
        help="Log verbosity",
    )
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument(
        "--scenario",
        choices=sorted(SCENARIOS) + ["all"],
        help="Run a built-in example",
    )
    src.add_argument("--random", action="store_true", help="Use a generated graph")

    p.add_argument(
        "--family",
        choices=["random", "dag", "grid"],
        default="random",
        help="Generator family (random mode)",
    )
    p.add_argument("--n", type=int, default=10, help="Vertices (random mode)")
    p.add_argument("--m", type=int, default=20, help="Edges (random mode)")
    p.add_argument("--seed", type=int, default=0, help="Seed controlling graph generation")
    p.add_argument("--undirected", action="store_true", help="Generate an undirected graph")
    p.add_argument(
        "--algo",
        choices=["bfs", "dijkstra", "dfs", "ancestors"],
        default="dijkstra",
        help="Algorithm to run (random mode)",
    )
    p.add_argument("--source", type=int, default=0, help="Source vertex id")
    p.add_argument("--target", type=int, default=None, help="Target vertex id (default n-1)")
    p.add_argument("--degree", type=int, default=2, help="Priority queue branching factor")

    args = p.parse_args(argv)

    stream = sys.stdout if args.log_json else sys.stderr
    level = "info" if args.log_json and args.log_level == "warning" else args.log_level
    logger = StdLogger(level=level, json_fmt=args.log_json, stream=stream)

    try:
        if args.scenario is not None:
            names = sorted(SCENARIOS) if args.scenario == "all" else [args.scenario]
            out: Dict[str, Any] = {}
            for name in names:
                out[name] = SCENARIOS[name](logger.bind(scenario=name))
            logger.info("run", mode="scenario", scenarios=",".join(names))
        else:
            if args.undirected and args.family == "dag":
                raise ConfigError("dag graphs are always directed")
            G = generate_graph(
                args.family, args.n, args.m, seed=args.seed, directed=not args.undirected
            )
            if args.verbose and not args.log_json:
                sys.stderr.write(
                    f"config: family={args.family} n={G.n} m={G.logical_edge_count()} "
                    f"seed={args.seed} algo={args.algo}\n"
                )
            out = _run_algo(args, G, logger.bind(algo=args.algo))
            logger.info("run", mode="random", family=args.family, n=G.n, seed=args.seed)

        if args.log_json:
            logger.info("result", **out)
        else:
            print(json.dumps(out))
        return EXIT_OK

    except (InputError, ConfigError) as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"error: {exc}\n")
        return EXIT_USAGE
    except IdxGraphError as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"internal error: {exc}\n")
        return EXIT_INTERNAL


if __name__ == "__main__":
    sys.exit(main())
