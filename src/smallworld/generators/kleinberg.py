"""
Kleinberg small-world lattice in 3D.

Nodes sit on a gridSize^3 cube, linked to their axis neighbours (+-x, +-y,
+-z). Each node also gets one long-range shortcut, drawn with probability
proportional to d^-r where d is the Manhattan distance:
  r = 0  -> uniform shortcuts
  r = 3  -> matches the dimension, greedy search is efficient
  r >> 3 -> shortcuts stay local, greedy search degrades to lattice walking.
"""

import random
from typing import List, Optional, Tuple

from tqdm import tqdm

from smallworld.common.config import DEFAULT_CLUSTERING_EXPONENT, DEFAULT_GRID_SIZE
from smallworld.common.errors import InvalidParameter, require_at_least
from smallworld.model.types import Edge, KleinbergGrid, LatticeNode
from smallworld.network_analysis.distance import manhattan_distance

# Positive directions first on each axis; only those emit lattice links.
DIRECTIONS = [
    (1, 0, 0), (-1, 0, 0),
    (0, 1, 0), (0, -1, 0),
    (0, 0, 1), (0, 0, -1),
]


def build_lattice(grid_size: int) -> Tuple[List[LatticeNode], List[Edge]]:
    """Create the grid nodes (x-major order) and the axis-aligned links."""
    n = grid_size
    nodes = [
        LatticeNode(x, y, z)
        for x in range(n)
        for y in range(n)
        for z in range(n)
    ]

    def at(x: int, y: int, z: int) -> LatticeNode:
        return nodes[(x * n + y) * n + z]

    lattice_links: List[Edge] = []
    for node in nodes:
        for dx, dy, dz in DIRECTIONS:
            nx_, ny_, nz_ = node.x + dx, node.y + dy, node.z + dz
            if 0 <= nx_ < n and 0 <= ny_ < n and 0 <= nz_ < n:
                neighbour = at(nx_, ny_, nz_)
                node.adjacency.append(neighbour)
                if dx > 0 or dy > 0 or dz > 0:
                    lattice_links.append(Edge(node, neighbour))
    return nodes, lattice_links


def draw_shortcut(
    node: LatticeNode,
    nodes: List[LatticeNode],
    r: float,
    rng: random.Random,
) -> LatticeNode:
    """
    Draw one shortcut target for `node` with P(v) ~ d(node, v)^-r.

    First pass accumulates the total weight, second pass walks a running
    threshold down until it crosses zero.
    """
    candidates = [v for v in nodes if v is not node]
    weights = [manhattan_distance(node, v) ** (-r) for v in candidates]
    total = sum(weights)

    threshold = rng.random() * total
    for target, weight in zip(candidates, weights):
        threshold -= weight
        if threshold <= 0:
            return target
    # floating point residue: the threshold never reached zero
    return candidates[-1]


def generate_kleinberg_grid(
    grid_size: int = DEFAULT_GRID_SIZE,
    r: float = DEFAULT_CLUSTERING_EXPONENT,
    rng: Optional[random.Random] = None,
    show_progress: bool = False,
) -> KleinbergGrid:
    """
    Build a Kleinberg 3D lattice.

    Every node ends up with exactly one shortcut (never itself), appended
    after its lattice neighbours in `adjacency`. Shortcut sampling is
    O(n^2) in the node count n = grid_size^3.
    """
    require_at_least("grid_size", grid_size, 2)
    if r < 0:
        raise InvalidParameter(f"r must be >= 0, got {r}")
    rng = rng or random.Random()

    nodes, lattice_links = build_lattice(grid_size)

    shortcut_links: List[Edge] = []
    for node in tqdm(nodes, desc="Sampling shortcuts", disable=not show_progress):
        target = draw_shortcut(node, nodes, r, rng)
        node.shortcut = target
        node.adjacency.append(target)
        shortcut_links.append(Edge(node, target))

    return KleinbergGrid(
        nodes=nodes,
        lattice_links=lattice_links,
        shortcut_links=shortcut_links,
        grid_size=grid_size,
    )
