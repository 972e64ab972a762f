from itertools import combinations
from typing import Any, Dict, Sequence

from smallworld.model.adjacency import build_adjacency
from smallworld.model.types import NodeId, node_id


def calculate_local_clustering(nodes: Sequence[Any], edges: Sequence[Any]) -> Dict[NodeId, float]:
    """
    C(v) = 2 * links among N(v) / (k(v) * (k(v) - 1)) for every node of
    degree >= 2. Lower-degree nodes have no entry.
    """
    adj = build_adjacency(nodes, edges)
    local: Dict[NodeId, float] = {}
    for n in nodes:
        nid = node_id(n)
        neighbors = adj[nid]
        k = len(neighbors)
        if k < 2:
            continue
        links = sum(1 for a, b in combinations(neighbors, 2) if b in adj[a])
        local[nid] = 2 * links / (k * (k - 1))
    return local


def calculate_clustering_coefficient(nodes: Sequence[Any], edges: Sequence[Any]) -> float:
    """Average of C(v) over nodes where it is defined; 0 if none is."""
    local = calculate_local_clustering(nodes, edges)
    if not local:
        return 0.0
    return sum(local.values()) / len(local)


def ring_lattice_clustering(k: int) -> float:
    """
    Clustering of a ring lattice where every node has k neighbours:
    3(k - 2) / (4(k - 1)). Holds while k < 2n/3.
    """
    if k < 2:
        return 0.0
    return 3 * (k - 2) / (4 * (k - 1))
