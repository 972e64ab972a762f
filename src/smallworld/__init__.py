"""
smallworld: network-science algorithms on small in-memory graphs.

Generators (random, Watts-Strogatz, Kleinberg 3D, attribute graphs), graph
metrics (shortest paths, average path length, diameter/radius, clustering),
Adamic-Adar link prediction and greedy decentralized navigation.
"""

from smallworld.common.errors import InvalidParameter, SmallWorldError, UnknownNodeReference
from smallworld.generators.attribute_graph import generate_attribute_graph
from smallworld.generators.kleinberg import generate_kleinberg_grid
from smallworld.generators.random_graph import generate_connected_random_graph, generate_random_graph
from smallworld.generators.watts_strogatz import generate_watts_strogatz_graph
from smallworld.link_prediction.adamic_adar import calculate_adamic_adar
from smallworld.link_prediction.attribute_similarity import calculate_similarity
from smallworld.model.adjacency import build_adjacency, highlight_path
from smallworld.model.interop import to_networkx
from smallworld.model.types import (
    AttributeNode,
    Edge,
    Graph,
    KleinbergGrid,
    LatticeNode,
    PlainNode,
    WattsStrogatzGraph,
)
from smallworld.navigation.greedy import (
    NavigationStatus,
    NavigationStep,
    animated_navigate,
    animated_navigate_async,
    greedy_navigate,
    iter_navigation,
    navigate,
)
from smallworld.network_analysis.clustering import (
    calculate_clustering_coefficient,
    calculate_local_clustering,
    ring_lattice_clustering,
)
from smallworld.network_analysis.distance import manhattan_distance
from smallworld.network_analysis.path_length import (
    calculate_average_path_length,
    calculate_graph_metrics,
    get_path_length_distribution,
)
from smallworld.network_analysis.reports import node_metrics_frame
from smallworld.network_analysis.shortest_paths import find_all_shortest_paths, find_shortest_path
from smallworld.network_analysis.small_world import calculate_small_world_metrics

__version__ = "0.1.0"
