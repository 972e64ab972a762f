"""
Average path length (L), path-length histogram, eccentricity, radius and
diameter. In small-world networks L grows like log(N).
"""

import math
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Tuple

from tqdm import tqdm

from smallworld.model.adjacency import ordered_adjacency
from smallworld.model.types import NodeId, node_id
from smallworld.network_analysis.shortest_paths import bfs_distances


@dataclass(frozen=True)
class AveragePathLength:
    average: float
    path_count: int
    unreachable_pairs: int
    disconnected: bool
    total_possible_pairs: int


@dataclass(frozen=True)
class GraphMetrics:
    eccentricities: Dict[NodeId, int]
    radius: int
    diameter: int
    central_nodes: List[NodeId] = field(default_factory=list)
    peripheral_nodes: List[NodeId] = field(default_factory=list)


def calculate_average_path_length(
    nodes: Sequence[Any],
    edges: Sequence[Any],
    show_progress: bool = False,
) -> AveragePathLength:
    """
    Mean BFS distance over unordered node pairs that can reach each other.

    Unreachable pairs are counted in `unreachable_pairs` and left out of the
    mean. If no pair is reachable the average is inf; with fewer than two
    nodes it is 0.
    """
    n = len(nodes)
    if n < 2:
        return AveragePathLength(
            average=0.0, path_count=0, unreachable_pairs=0, disconnected=False, total_possible_pairs=0
        )

    adj = ordered_adjacency(nodes, edges)
    ids = [node_id(v) for v in nodes]

    total_distance = 0
    path_count = 0
    unreachable = 0
    for i in tqdm(range(n), desc="BFS from every node", disable=not show_progress):
        dists = bfs_distances(adj, ids[i])
        for j in range(i + 1, n):
            d = dists.get(ids[j])
            if d is None:
                unreachable += 1
            else:
                total_distance += d
                path_count += 1

    return AveragePathLength(
        average=total_distance / path_count if path_count > 0 else math.inf,
        path_count=path_count,
        unreachable_pairs=unreachable,
        disconnected=unreachable > 0,
        total_possible_pairs=n * (n - 1) // 2,
    )


def get_path_length_distribution(nodes: Sequence[Any], edges: Sequence[Any]) -> List[Tuple[int, int]]:
    """
    Histogram of shortest-path lengths over reachable unordered pairs, as
    (length, count) for every length from 1 to the longest one seen.
    """
    adj = ordered_adjacency(nodes, edges)
    ids = [node_id(v) for v in nodes]

    counts: Counter = Counter()
    for i, src in enumerate(ids):
        dists = bfs_distances(adj, src)
        for tgt in ids[i + 1:]:
            if tgt in dists:
                counts[dists[tgt]] += 1

    if not counts:
        return []
    return [(length, counts[length]) for length in range(1, max(counts) + 1)]


def calculate_graph_metrics(nodes: Sequence[Any], edges: Sequence[Any]) -> GraphMetrics:
    """
    Eccentricity of every node, plus radius / diameter.

    Eccentricity is the largest finite distance from a node; unreachable
    nodes are ignored, so an isolated node has eccentricity 0.

    Radius is the smallest eccentricity among nodes with at least one
    neighbour; central and peripheral nodes are picked from the same set.
    A graph without edges gets radius = diameter = 0.
    """
    adj = ordered_adjacency(nodes, edges)
    ecc = {nid: max(bfs_distances(adj, nid).values()) for nid in adj}

    linked = [nid for nid in adj if adj[nid]]
    if not linked:
        return GraphMetrics(eccentricities=ecc, radius=0, diameter=0)

    radius = min(ecc[nid] for nid in linked)
    diameter = max(ecc.values())
    return GraphMetrics(
        eccentricities=ecc,
        radius=radius,
        diameter=diameter,
        central_nodes=[nid for nid in linked if ecc[nid] == radius],
        peripheral_nodes=[nid for nid in linked if ecc[nid] == diameter],
    )
