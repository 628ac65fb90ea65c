"""Routing graph over warehouse tiles, plus edge scorers.

Nodes are keyed by ``node_id(x, y)`` (``"x,y"``), so the same tile always
gets the same id across builds and runs.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Iterable, Mapping, Protocol, TypeVar

from .constants import NODE_ID_SEPARATOR
from .errors import NodeNotFoundError

if TYPE_CHECKING:
    from .models import Tile


def node_id(x: int, y: int) -> str:
    """Return the graph id for the tile at ``(x, y)``."""
    return f"{x}{NODE_ID_SEPARATOR}{y}"


def parse_node_id(nid: str) -> tuple[int, int]:
    """Inverse of :func:`node_id`."""
    parts = nid.split(NODE_ID_SEPARATOR)
    if len(parts) != 2:
        raise ValueError(f"malformed node id {nid!r}")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise ValueError(f"malformed node id {nid!r}") from None


class TileNode:
    """A graph node wrapping one tile; equal to any node with the same id."""

    __slots__ = ("tile", "id")

    def __init__(self, tile: Tile) -> None:
        self.tile = tile
        self.id = node_id(tile.x, tile.y)

    @property
    def x(self) -> int:
        return self.tile.x

    @property
    def y(self) -> int:
        return self.tile.y

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TileNode):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"TileNode({self.id})"


class Graph:
    """An immutable set of nodes plus ``{node_id: {neighbour ids}}``."""

    def __init__(
        self,
        nodes: Iterable[TileNode],
        connections: Mapping[str, Iterable[str]],
    ) -> None:
        node_map: dict[str, TileNode] = {}
        for node in nodes:
            if node.id in node_map:
                raise ValueError(f"duplicate node id {node.id!r}")
            node_map[node.id] = node
        self._nodes = MappingProxyType(node_map)
        self._connections = MappingProxyType({
            nid: frozenset(connections.get(nid, ())) for nid in node_map
        })

    @property
    def nodes(self) -> frozenset[TileNode]:
        return frozenset(self._nodes.values())

    @property
    def node_ids(self) -> list[str]:
        return sorted(self._nodes)

    @property
    def edge_count(self) -> int:
        """Number of directed edges (each undirected link counts twice)."""
        return sum(len(v) for v in self._connections.values())

    def get_node(self, nid: str) -> TileNode:
        try:
            return self._nodes[nid]
        except KeyError:
            raise NodeNotFoundError(nid) from None

    def neighbor_ids(self, nid: str) -> frozenset[str]:
        try:
            return self._connections[nid]
        except KeyError:
            raise NodeNotFoundError(nid) from None

    def get_connections(self, node: TileNode) -> set[TileNode]:
        """Resolve *node*'s adjacency into nodes.

        Raises ``NodeNotFoundError`` if *node* or any neighbour id is unknown.
        """
        return {self.get_node(nid) for nid in self.neighbor_ids(node.id)}

    def __contains__(self, nid: object) -> bool:
        return nid in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self._nodes)}, edges={self.edge_count})"


# ============================================================
# SCORERS
# ============================================================

N = TypeVar("N", contravariant=True)


class Scorer(Protocol[N]):
    """Edge cost function for a path search. Must be pure."""

    def compute_cost(self, from_node: N, to_node: N) -> float: ...


class UniformScorer:
    """Every step costs the same."""

    def __init__(self, cost: float = 1.0) -> None:
        self.cost = cost

    def compute_cost(self, from_node: TileNode, to_node: TileNode) -> float:
        return self.cost


class ManhattanScorer:
    """Grid distance between two tiles.

    Only a safe A* estimate when every step costs at least 1.
    """

    def compute_cost(self, from_node: TileNode, to_node: TileNode) -> float:
        return float(abs(from_node.x - to_node.x) + abs(from_node.y - to_node.y))
