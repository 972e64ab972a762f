import argparse
import random
from typing import List, Optional, Set, FrozenSet

import pandas as pd

from smallworld.common.config import (
    DEFAULT_CLUSTERING_EXPONENT,
    DEFAULT_GRID_SIZE,
    DEFAULT_RANDOM_NODES,
    DEFAULT_RANDOM_P,
    DEFAULT_STEP_DELAY_MS,
    DEFAULT_WS_K,
    DEFAULT_WS_NODES,
    DEFAULT_WS_P,
)
from smallworld.common.errors import SmallWorldError
from smallworld.generators.kleinberg import generate_kleinberg_grid
from smallworld.generators.random_graph import generate_random_graph
from smallworld.generators.watts_strogatz import generate_watts_strogatz_graph
from smallworld.link_prediction.adamic_adar import calculate_adamic_adar
from smallworld.model.types import Edge, Graph, PlainNode
from smallworld.navigation.greedy import NavigationStatus, animated_navigate, navigate
from smallworld.network_analysis.shortest_paths import find_shortest_path
from smallworld.network_analysis.small_world import calculate_small_world_metrics


def load_graph_from_edges_csv(edges_path: str) -> Graph:
    """
    Load an undirected graph from a CSV with at least the columns
    sourceId, targetId. Self-loops and repeated pairs are dropped.
    """
    df = pd.read_csv(edges_path)

    required_cols = {"sourceId", "targetId"}
    missing_cols = required_cols - set(df.columns)
    if missing_cols:
        raise ValueError(f"Missing required columns in CSV: {missing_cols}")

    node_ids: List[str] = []
    known: Set[str] = set()
    edges: List[Edge] = []
    seen: Set[FrozenSet[str]] = set()
    for source, target in zip(df["sourceId"].astype(str), df["targetId"].astype(str)):
        for nid in (source, target):
            if nid not in known:
                known.add(nid)
                node_ids.append(nid)
        key = frozenset((source, target))
        if source == target or key in seen:
            continue
        seen.add(key)
        edges.append(Edge(source, target))

    return Graph(tuple(PlainNode(nid) for nid in node_ids), tuple(edges))


def _rng(seed: Optional[int]) -> random.Random:
    return random.Random(seed)


def cmd_shortest_path(args: argparse.Namespace) -> None:
    print(f"Finding shortest path from '{args.source}' to '{args.target}'...")
    g = load_graph_from_edges_csv(args.edges_path)
    result = find_shortest_path(g.nodes, g.edges, args.source, args.target)
    if not result.reachable:
        print(f"No path between '{args.source}' and '{args.target}'.")
        return
    print("Shortest path (in hops):")
    print(" -> ".join(str(p) for p in result.path))
    print(f"Steps: {result.distance}")


def cmd_watts_strogatz(args: argparse.Namespace) -> None:
    g = generate_watts_strogatz_graph(args.n, args.k, args.p, rng=_rng(args.seed))
    m = calculate_small_world_metrics(g, args.p)
    print(f"=== WATTS-STROGATZ n={args.n} k={args.k} p={args.p} ===")
    print(f"Regime: {m.regime}")
    print(f"Clustering coefficient C: {m.clustering_coefficient:.4f}")
    print(f"Average path length L: {m.average_path_length:.4f}")
    print(f"Rewired edges: {m.rewired_edges}/{m.total_edges}")


def cmd_kleinberg(args: argparse.Namespace) -> None:
    grid = generate_kleinberg_grid(args.grid_size, args.r, rng=_rng(args.seed), show_progress=True)
    start, target = grid.start_node(), grid.target_node()
    print(f"=== KLEINBERG 3D grid={args.grid_size} r={args.r} ===")
    print(f"Lattice links: {len(grid.lattice_links)}, shortcuts: {len(grid.shortcut_links)}")

    if args.animate:

        def on_step(path, step, remaining, status):
            print(f"  > step {step}: at {path[-1].id}, remaining {remaining} [{status.value}]")

        path = animated_navigate(start, target, on_step, delay_ms=args.delay_ms)
        print(f"Hops: {len(path) - 1}")
        return

    final = navigate(start, target)
    print(f"Status: {final.status.value}, hops: {final.step}, remaining: {final.remaining_distance}")
    if final.status is NavigationStatus.SUCCESS:
        print(" -> ".join(str(n.id) for n in final.path))


def cmd_adamic_adar(args: argparse.Namespace) -> None:
    g = generate_random_graph(args.n, args.p, rng=_rng(args.seed))
    source = args.source or g.nodes[0].id
    target = args.target or g.nodes[-1].id
    result = calculate_adamic_adar(g.nodes, g.edges, source, target)
    print(f"Adamic-Adar({source}, {target}) = {result.score}")
    for nb in result.neighbors:
        print(f"  - {nb.id}: degree={nb.degree}, contribution={nb.contribution:.4f}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Small-world network demos.")
    sub = parser.add_subparsers(dest="command", required=True)

    sp = sub.add_parser("shortest-path", help="BFS shortest path on an edges CSV.")
    sp.add_argument("--edges-path", required=True, help="CSV with sourceId,targetId columns.")
    sp.add_argument("--source", required=True)
    sp.add_argument("--target", required=True)
    sp.set_defaults(func=cmd_shortest_path)

    ws = sub.add_parser("watts-strogatz", help="Clustering / path length of a Watts-Strogatz graph.")
    ws.add_argument("--n", type=int, default=DEFAULT_WS_NODES)
    ws.add_argument("--k", type=int, default=DEFAULT_WS_K)
    ws.add_argument("--p", type=float, default=DEFAULT_WS_P)
    ws.add_argument("--seed", type=int, default=None)
    ws.set_defaults(func=cmd_watts_strogatz)

    kl = sub.add_parser("kleinberg", help="Greedy navigation on a Kleinberg 3D lattice.")
    kl.add_argument("--grid-size", type=int, default=DEFAULT_GRID_SIZE)
    kl.add_argument("--r", type=float, default=DEFAULT_CLUSTERING_EXPONENT)
    kl.add_argument("--seed", type=int, default=None)
    kl.add_argument("--animate", action="store_true", help="Print every step, pausing between hops.")
    kl.add_argument("--delay-ms", type=float, default=DEFAULT_STEP_DELAY_MS)
    kl.set_defaults(func=cmd_kleinberg)

    aa = sub.add_parser("adamic-adar", help="Adamic-Adar index on a random graph.")
    aa.add_argument("--n", type=int, default=DEFAULT_RANDOM_NODES)
    aa.add_argument("--p", type=float, default=DEFAULT_RANDOM_P)
    aa.add_argument("--seed", type=int, default=None)
    aa.add_argument("--source", default=None, help="Defaults to the first node.")
    aa.add_argument("--target", default=None, help="Defaults to the last node.")
    aa.set_defaults(func=cmd_adamic_adar)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    try:
        args.func(args)
    except FileNotFoundError as e:
        print(f"Missing input file: {e}")
    except (SmallWorldError, ValueError) as e:
        print(f"Error: {e}")


if __name__ == "__main__":
    main()
