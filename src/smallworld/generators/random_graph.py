import random
from typing import List, Optional, Set, FrozenSet

from smallworld.common.config import DEFAULT_APL_NODES, DEFAULT_RANDOM_NODES, DEFAULT_RANDOM_P
from smallworld.common.errors import require_at_least, require_probability
from smallworld.model.types import Edge, Graph, PlainNode


def make_nodes(n: int) -> List[PlainNode]:
    """Nodes named "Node 1" ... "Node n"."""
    return [PlainNode(f"Node {i + 1}") for i in range(n)]


def generate_random_graph(
    n: int = DEFAULT_RANDOM_NODES,
    p: float = DEFAULT_RANDOM_P,
    rng: Optional[random.Random] = None,
) -> Graph:
    """
    Erdos-Renyi G(n, p): every unordered pair is linked independently with
    probability p. No connectivity guarantee.
    """
    require_at_least("n", n, 1)
    require_probability("p", p)
    rng = rng or random.Random()

    nodes = make_nodes(n)
    edges: List[Edge] = []
    for i in range(n):
        for j in range(i + 1, n):
            if rng.random() < p:
                edges.append(Edge(nodes[i].id, nodes[j].id))
    return Graph(tuple(nodes), tuple(edges))


def generate_connected_random_graph(
    n: int = DEFAULT_APL_NODES,
    p: float = DEFAULT_RANDOM_P,
    rng: Optional[random.Random] = None,
) -> Graph:
    """
    Random graph that is always connected.

    A random spanning tree is laid first (node i attaches to a uniformly
    chosen earlier node), then every remaining pair is added with
    probability p.
    """
    require_at_least("n", n, 1)
    require_probability("p", p)
    rng = rng or random.Random()

    nodes = make_nodes(n)
    edges: List[Edge] = []
    seen: Set[FrozenSet[str]] = set()

    for i in range(1, n):
        j = rng.randrange(i)
        edge = Edge(nodes[i].id, nodes[j].id)
        seen.add(edge.key)
        edges.append(edge)

    for i in range(n):
        for j in range(i + 1, n):
            key = frozenset((nodes[i].id, nodes[j].id))
            if key not in seen and rng.random() < p:
                seen.add(key)
                edges.append(Edge(nodes[i].id, nodes[j].id))

    return Graph(tuple(nodes), tuple(edges))
