from typing import Any, Sequence

import networkx as nx

from smallworld.model.adjacency import edge_endpoints
from smallworld.model.types import Edge, node_id


def to_networkx(nodes: Sequence[Any], edges: Sequence[Any]) -> nx.Graph:
    """
    Copy nodes + edges into an undirected networkx graph.

    Node order is preserved; each edge carries a `rewired` attribute
    (False for anything that is not a rewired Watts-Strogatz edge).
    """
    g = nx.Graph()
    g.add_nodes_from(node_id(n) for n in nodes)
    for edge in edges:
        s, t = edge_endpoints(edge)
        rewired = edge.rewired if isinstance(edge, Edge) else False
        g.add_edge(s, t, rewired=rewired)
    return g
