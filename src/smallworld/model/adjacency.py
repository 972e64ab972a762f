from collections import Counter
from typing import Any, Dict, Iterable, List, Sequence, Set, Tuple

from smallworld.common.errors import InvalidParameter, UnknownNodeReference
from smallworld.model.types import Edge, NodeId, node_id


def edge_endpoints(edge: Any) -> Tuple[NodeId, NodeId]:
    """
    Return (source_id, target_id) for an edge given as an Edge, a
    {"source": ..., "target": ...} record or a 2-tuple.
    Endpoints may be ids or node objects.
    """
    if isinstance(edge, Edge):
        return edge.source_id, edge.target_id
    if isinstance(edge, dict):
        return node_id(edge["source"]), node_id(edge["target"])
    source, target = edge
    return node_id(source), node_id(target)


def build_adjacency(nodes: Sequence[Any], edges: Iterable[Any]) -> Dict[NodeId, Set[NodeId]]:
    """
    Build the undirected adjacency index node_id -> set(neighbour ids).

    Every node gets an entry, isolated ones included. Raises
    UnknownNodeReference for an edge touching a node outside `nodes` and
    InvalidParameter for a self-loop.
    """
    adj: Dict[NodeId, Set[NodeId]] = {node_id(n): set() for n in nodes}
    for edge in edges:
        s, t = edge_endpoints(edge)
        if s not in adj:
            raise UnknownNodeReference(s, f"edge {s!r} - {t!r}")
        if t not in adj:
            raise UnknownNodeReference(t, f"edge {s!r} - {t!r}")
        if s == t:
            raise InvalidParameter(f"Self-loop on node {s!r}")
        adj[s].add(t)
        adj[t].add(s)
    return adj


def edge_degrees(edges: Iterable[Any]) -> Counter:
    """Number of edges touching each node id (counts every edge record)."""
    degrees: Counter = Counter()
    for edge in edges:
        s, t = edge_endpoints(edge)
        degrees[s] += 1
        degrees[t] += 1
    return degrees


def highlight_path(edges: Iterable[Any], path: Sequence[Any]) -> List[Edge]:
    """
    Return a new edge list where edges joining consecutive nodes of `path`
    are marked highlighted. Other edges are copied with highlighted=False.
    """
    ids = [node_id(p) for p in path]
    on_path = {frozenset(pair) for pair in zip(ids, ids[1:])}

    result: List[Edge] = []
    for edge in edges:
        if isinstance(edge, Edge):
            base = edge
        else:
            s, t = edge_endpoints(edge)
            base = Edge(s, t)
        result.append(
            Edge(base.source, base.target, rewired=base.rewired, highlighted=base.key in on_path)
        )
    return result


def ordered_adjacency(nodes: Sequence[Any], edges: Iterable[Any]) -> Dict[NodeId, List[NodeId]]:
    """
    Same as build_adjacency, but each neighbour list follows node order so
    that traversals visit neighbours deterministically.
    """
    adj = build_adjacency(nodes, edges)
    order = {node_id(n): i for i, n in enumerate(nodes)}
    return {nid: sorted(neigh, key=order.__getitem__) for nid, neigh in adj.items()}
