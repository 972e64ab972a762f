from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterator, List, Mapping, Optional, Tuple, Union

from smallworld.common.errors import UnknownNodeReference

NodeId = Union[str, Tuple[int, int, int]]


def node_id(ref: Any) -> NodeId:
    """
    Return the identifier of a node reference.

    Edges may hold raw ids, node objects or {"id": ...} records; everything
    that indexes edges goes through here first.
    """
    if isinstance(ref, Mapping):
        return ref["id"]
    return ref.id if hasattr(ref, "id") else ref


@dataclass(frozen=True)
class PlainNode:
    id: str


@dataclass(frozen=True)
class AttributeNode:
    """
    Node carrying categorized attributes, e.g.
    {"Interests": ("Music", "Art"), "Location": ("Paris",)}.
    """

    id: str
    attributes: Dict[str, Tuple[str, ...]] = field(default_factory=dict, hash=False)

    def attribute_tokens(self) -> List[str]:
        """Flatten attributes into "category:value" tokens, in category order."""
        return [f"{cat}:{val}" for cat, values in self.attributes.items() for val in values]


@dataclass(eq=False)
class LatticeNode:
    """
    Node of the 3D Kleinberg lattice.

    `adjacency` holds the lattice neighbours followed by the shortcut target,
    i.e. everything greedy navigation may step to. Lattice nodes compare by
    identity, like the objects the generator links together.
    """

    x: int
    y: int
    z: int
    adjacency: List["LatticeNode"] = field(default_factory=list, repr=False)
    shortcut: Optional["LatticeNode"] = field(default=None, repr=False)

    @property
    def id(self) -> Tuple[int, int, int]:
        return (self.x, self.y, self.z)


Node = Union[PlainNode, AttributeNode, LatticeNode]


@dataclass(frozen=True)
class Edge:
    """
    Undirected edge. `source` / `target` are node ids or node objects.

    `rewired` marks Watts-Strogatz edges whose target was redrawn;
    `highlighted` is a display annotation (see highlight_path).
    """

    source: Any
    target: Any
    rewired: bool = False
    highlighted: bool = False

    @property
    def source_id(self) -> NodeId:
        return node_id(self.source)

    @property
    def target_id(self) -> NodeId:
        return node_id(self.target)

    @property
    def key(self) -> FrozenSet[NodeId]:
        return frozenset((self.source_id, self.target_id))


@dataclass(frozen=True)
class Graph:
    nodes: Tuple[Node, ...]
    edges: Tuple[Edge, ...]

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def node_ids(self) -> List[NodeId]:
        return [n.id for n in self.nodes]

    def get_node(self, nid: NodeId) -> Node:
        for n in self.nodes:
            if n.id == nid:
                return n
        raise UnknownNodeReference(nid)


@dataclass(frozen=True)
class WattsStrogatzGraph(Graph):
    rewired_count: int = 0
    total_edges: int = 0


@dataclass
class KleinbergGrid:
    """
    Output of generate_kleinberg_grid.

    `nodes` is in x-major order, so the node at (x, y, z) sits at index
    (x * grid_size + y) * grid_size + z.
    """

    nodes: List[LatticeNode]
    lattice_links: List[Edge]
    shortcut_links: List[Edge]
    grid_size: int

    def node_at(self, x: int, y: int, z: int) -> LatticeNode:
        n = self.grid_size
        if not (0 <= x < n and 0 <= y < n and 0 <= z < n):
            raise UnknownNodeReference((x, y, z), f"grid size {n}")
        return self.nodes[(x * n + y) * n + z]

    def start_node(self) -> LatticeNode:
        return self.node_at(0, 0, 0)

    def target_node(self) -> LatticeNode:
        last = self.grid_size - 1
        return self.node_at(last, last, last)
