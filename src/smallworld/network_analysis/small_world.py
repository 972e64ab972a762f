from dataclasses import dataclass

from smallworld.common.config import (
    RANDOM_REGIME_P,
    REGIME_LATTICE,
    REGIME_RANDOM,
    REGIME_SMALL_WORLD,
    SMALL_WORLD_REGIME_P,
)
from smallworld.model.types import WattsStrogatzGraph
from smallworld.network_analysis.clustering import calculate_clustering_coefficient
from smallworld.network_analysis.path_length import calculate_average_path_length


@dataclass(frozen=True)
class SmallWorldMetrics:
    clustering_coefficient: float
    average_path_length: float
    rewired_edges: int
    total_edges: int
    regime: str
    rewiring_probability: float


def classify_regime(p: float) -> str:
    if p > RANDOM_REGIME_P:
        return REGIME_RANDOM
    if p > SMALL_WORLD_REGIME_P:
        return REGIME_SMALL_WORLD
    return REGIME_LATTICE


def calculate_small_world_metrics(graph: WattsStrogatzGraph, p: float) -> SmallWorldMetrics:
    """Clustering, average path length and rewiring stats of a Watts-Strogatz graph."""
    return SmallWorldMetrics(
        clustering_coefficient=calculate_clustering_coefficient(graph.nodes, graph.edges),
        average_path_length=calculate_average_path_length(graph.nodes, graph.edges).average,
        rewired_edges=graph.rewired_count,
        total_edges=graph.total_edges,
        regime=classify_regime(p),
        rewiring_probability=p,
    )
