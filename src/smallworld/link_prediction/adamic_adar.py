import math
from dataclasses import dataclass, field
from typing import Any, List, Sequence

from smallworld.common.config import SCORE_DECIMALS
from smallworld.common.errors import UnknownNodeReference
from smallworld.model.adjacency import build_adjacency, edge_degrees
from smallworld.model.types import NodeId, node_id


@dataclass(frozen=True)
class NeighborContribution:
    id: NodeId
    degree: int
    contribution: float


@dataclass(frozen=True)
class AdamicAdarResult:
    score: float
    neighbors: List[NeighborContribution] = field(default_factory=list)


def calculate_adamic_adar(
    nodes: Sequence[Any],
    edges: Sequence[Any],
    source_id: NodeId,
    target_id: NodeId,
) -> AdamicAdarResult:
    """
    Adamic-Adar index of a node pair:

        AA(x, y) = sum over u in N(x) & N(y) of 1 / log10(deg(u))

    A common neighbour of degree 1 contributes 0 (log10(1) = 0). The score is
    rounded to 4 decimals; `neighbors` lists the common neighbours in node
    order with their degree and contribution. A node paired with itself
    scores 0.
    """
    adj = build_adjacency(nodes, edges)
    for nid in (source_id, target_id):
        if nid not in adj:
            raise UnknownNodeReference(nid)
    if source_id == target_id:
        return AdamicAdarResult(score=0.0)

    source_neighbors = adj[source_id]
    target_neighbors = adj[target_id]
    degrees = edge_degrees(edges)

    score = 0.0
    details: List[NeighborContribution] = []
    for n in nodes:
        nid = node_id(n)
        if nid not in source_neighbors or nid not in target_neighbors:
            continue
        degree = degrees[nid]
        contribution = 1 / math.log10(degree) if degree > 1 else 0.0
        score += contribution
        details.append(NeighborContribution(nid, degree, contribution))

    return AdamicAdarResult(score=round(score, SCORE_DECIMALS), neighbors=details)
