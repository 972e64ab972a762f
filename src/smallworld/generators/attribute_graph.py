import random
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from smallworld.common.config import (
    ATTRIBUTE_CATEGORIES,
    DEFAULT_ATTRIBUTE_NODES,
    SECOND_ATTRIBUTE_PROBABILITY,
    SIMILARITY_LINK_THRESHOLD,
)
from smallworld.common.errors import require_at_least
from smallworld.link_prediction.attribute_similarity import attribute_frequencies, similarity_from_frequencies
from smallworld.model.types import AttributeNode, Edge, Graph


def random_attributes(
    rng: random.Random,
    categories: Mapping[str, Sequence[str]] = ATTRIBUTE_CATEGORIES,
) -> Dict[str, Tuple[str, ...]]:
    """One value per category, two with probability 0.3 (so nodes overlap)."""
    attrs: Dict[str, Tuple[str, ...]] = {}
    for cat, options in categories.items():
        count = 2 if rng.random() < SECOND_ATTRIBUTE_PROBABILITY else 1
        attrs[cat] = tuple(rng.sample(list(options), min(count, len(options))))
    return attrs


def generate_attribute_graph(
    n: int = DEFAULT_ATTRIBUTE_NODES,
    rng: Optional[random.Random] = None,
    categories: Mapping[str, Sequence[str]] = ATTRIBUTE_CATEGORIES,
    link_threshold: float = SIMILARITY_LINK_THRESHOLD,
) -> Graph:
    """
    Nodes "Node 1" ... "Node n" with random attributes.

    Edges are only a display aid: a pair is linked when its similarity score
    exceeds `link_threshold`.
    """
    require_at_least("n", n, 1)
    rng = rng or random.Random()

    nodes = [AttributeNode(f"Node {i + 1}", random_attributes(rng, categories)) for i in range(n)]

    frequencies = attribute_frequencies(nodes)
    edges: List[Edge] = []
    for i in range(n):
        for j in range(i + 1, n):
            sim = similarity_from_frequencies(nodes[i], nodes[j], frequencies).score
            if sim > link_threshold:
                edges.append(Edge(nodes[i].id, nodes[j].id))

    return Graph(tuple(nodes), tuple(edges))
