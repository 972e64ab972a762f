from typing import Tuple, Union

from smallworld.model.types import LatticeNode

Coordinate = Tuple[int, int, int]


def manhattan_distance(
    a: Union[LatticeNode, Coordinate],
    b: Union[LatticeNode, Coordinate],
) -> int:
    """|dx| + |dy| + |dz| between two lattice nodes or (x, y, z) tuples."""
    ax, ay, az = a.id if isinstance(a, LatticeNode) else a
    bx, by, bz = b.id if isinstance(b, LatticeNode) else b
    return abs(ax - bx) + abs(ay - by) + abs(az - bz)
