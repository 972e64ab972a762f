import math
from typing import Any, Sequence

import pandas as pd
from tqdm import tqdm

from smallworld.model.adjacency import build_adjacency
from smallworld.model.types import node_id
from smallworld.network_analysis.clustering import calculate_local_clustering
from smallworld.network_analysis.path_length import calculate_graph_metrics


def node_metrics_frame(
    nodes: Sequence[Any],
    edges: Sequence[Any],
    show_progress: bool = False,
) -> pd.DataFrame:
    """
    One row per node (in node order), indexed by node id:
      degree       - number of distinct neighbours
      clustering   - local clustering coefficient, NaN below degree 2
      eccentricity - largest finite distance to another node.
    """
    adj = build_adjacency(nodes, edges)
    local = calculate_local_clustering(nodes, edges)
    ecc = calculate_graph_metrics(nodes, edges).eccentricities

    rows = []
    for n in tqdm(nodes, desc="Building node report", disable=not show_progress):
        nid = node_id(n)
        rows.append(
            {
                "node": nid,
                "degree": len(adj[nid]),
                "clustering": local.get(nid, math.nan),
                "eccentricity": ecc[nid],
            }
        )

    return pd.DataFrame(rows, columns=["node", "degree", "clustering", "eccentricity"]).set_index("node")
