import math
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Union

from smallworld.common.errors import UnknownNodeReference
from smallworld.model.adjacency import ordered_adjacency
from smallworld.model.types import NodeId


@dataclass(frozen=True)
class ShortestPath:
    """BFS result: hop count and node ids from source to target (inclusive)."""

    distance: Union[int, float]
    path: List[NodeId] = field(default_factory=list)

    @property
    def reachable(self) -> bool:
        return not math.isinf(self.distance)


def bfs_parents(adj: Dict[NodeId, List[NodeId]], source: NodeId) -> Dict[NodeId, NodeId]:
    """
    BFS from one source. Returns parent pointers for every reached node
    (the source maps to itself).
    """
    parents: Dict[NodeId, NodeId] = {source: source}
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for v in adj[u]:
            if v not in parents:
                parents[v] = u
                queue.append(v)
    return parents


def bfs_distances(adj: Dict[NodeId, List[NodeId]], source: NodeId) -> Dict[NodeId, int]:
    """BFS from one source, returning hop distances of every reachable node."""
    dist: Dict[NodeId, int] = {source: 0}
    queue = deque([source])
    while queue:
        u = queue.popleft()
        d = dist[u]
        for v in adj[u]:
            if v not in dist:
                dist[v] = d + 1
                queue.append(v)
    return dist


def _trace(parents: Dict[NodeId, NodeId], target: NodeId) -> List[NodeId]:
    path = [target]
    while parents[path[-1]] != path[-1]:
        path.append(parents[path[-1]])
    path.reverse()
    return path


def _check_known(adj: Dict[NodeId, List[NodeId]], *ids: NodeId) -> None:
    for nid in ids:
        if nid not in adj:
            raise UnknownNodeReference(nid)


def find_shortest_path(
    nodes: Sequence[Any],
    edges: Sequence[Any],
    source_id: NodeId,
    target_id: NodeId,
) -> ShortestPath:
    """
    Unweighted shortest path between two nodes.

    Returns distance 0 and [source] when source == target, and
    distance = inf with an empty path when target is unreachable.
    """
    adj = ordered_adjacency(nodes, edges)
    _check_known(adj, source_id, target_id)
    if source_id == target_id:
        return ShortestPath(distance=0, path=[source_id])

    parents = bfs_parents(adj, source_id)
    if target_id not in parents:
        return ShortestPath(distance=math.inf, path=[])
    path = _trace(parents, target_id)
    return ShortestPath(distance=len(path) - 1, path=path)


def find_all_shortest_paths(
    nodes: Sequence[Any],
    edges: Sequence[Any],
    source_id: NodeId,
) -> Dict[NodeId, ShortestPath]:
    """Shortest path from `source_id` to every reachable node (source included)."""
    adj = ordered_adjacency(nodes, edges)
    _check_known(adj, source_id)

    parents = bfs_parents(adj, source_id)
    results: Dict[NodeId, ShortestPath] = {}
    for nid in parents:
        path = _trace(parents, nid)
        results[nid] = ShortestPath(distance=len(path) - 1, path=path)
    return results
