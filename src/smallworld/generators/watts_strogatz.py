"""
Watts-Strogatz small-world model.

Start from a ring lattice (each node linked to k/2 neighbours on each side),
then redraw the target of every edge with probability p. p = 0 keeps the
regular lattice (high clustering, long paths); p = 1 approaches a random
graph (low clustering, short paths). Small p already gives short paths while
keeping most of the clustering.
"""

import random
from typing import FrozenSet, List, Optional, Set

from smallworld.common.config import (
    DEFAULT_WS_K,
    DEFAULT_WS_NODES,
    DEFAULT_WS_P,
    REWIRE_ATTEMPT_FACTOR,
)
from smallworld.common.errors import InvalidParameter, require_at_least, require_probability
from smallworld.generators.random_graph import make_nodes
from smallworld.model.types import Edge, PlainNode, WattsStrogatzGraph


def build_ring_lattice(nodes: List[PlainNode], half_k: int) -> List[Edge]:
    """Link node i to i+1 .. i+half_k (mod n), skipping self-loops and repeated pairs."""
    n = len(nodes)
    edges: List[Edge] = []
    seen: Set[FrozenSet[str]] = set()
    for i in range(n):
        for offset in range(1, half_k + 1):
            j = (i + offset) % n
            if i == j:
                continue
            edge = Edge(nodes[i].id, nodes[j].id)
            if edge.key in seen:
                continue
            seen.add(edge.key)
            edges.append(edge)
    return edges


def rewire_edges(
    nodes: List[PlainNode],
    lattice: List[Edge],
    p: float,
    rng: random.Random,
    attempt_factor: int = REWIRE_ATTEMPT_FACTOR,
) -> List[Edge]:
    """
    Return a new edge list in which each lattice edge, with probability p,
    has its target replaced by a random node.

    The new target may be neither the edge's source nor a node already linked
    to the source. After attempt_factor * n rejected draws the edge is kept
    as it is.
    """
    n = len(nodes)
    seen: Set[FrozenSet[str]] = {e.key for e in lattice}
    result: List[Edge] = []

    for edge in lattice:
        if rng.random() >= p:
            result.append(edge)
            continue

        replacement = edge
        for _ in range(attempt_factor * n):
            candidate = nodes[rng.randrange(n)].id
            new_key = frozenset((edge.source_id, candidate))
            if candidate != edge.source_id and new_key not in seen:
                seen.discard(edge.key)
                seen.add(new_key)
                replacement = Edge(edge.source, candidate, rewired=True)
                break
        result.append(replacement)

    return result


def generate_watts_strogatz_graph(
    n: int = DEFAULT_WS_NODES,
    k: int = DEFAULT_WS_K,
    p: float = DEFAULT_WS_P,
    rng: Optional[random.Random] = None,
) -> WattsStrogatzGraph:
    """
    Generate a Watts-Strogatz graph.

    Parameters
    ----------
    n : int
        Number of nodes ("Node 1" ... "Node n").
    k : int
        Ring neighbours per node; an odd k is truncated to k - 1.
    p : float
        Rewiring probability in [0, 1].
    rng : random.Random, optional
        Random source; a fresh unseeded one if omitted.
    """
    require_at_least("n", n, 1)
    if k < 0:
        raise InvalidParameter(f"k must be >= 0, got {k}")
    require_probability("p", p)
    rng = rng or random.Random()

    nodes = make_nodes(n)
    lattice = build_ring_lattice(nodes, k // 2)
    edges = rewire_edges(nodes, lattice, p, rng)
    rewired_count = sum(1 for e in edges if e.rewired)

    return WattsStrogatzGraph(
        nodes=tuple(nodes),
        edges=tuple(edges),
        rewired_count=rewired_count,
        total_edges=len(edges),
    )
