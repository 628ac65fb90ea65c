"""Exceptions raised by the warehouse core."""

from __future__ import annotations


class WarehouseError(Exception):
    """Base class for warehouse errors."""


class TileOutOfBoundsError(WarehouseError, IndexError):
    """A coordinate falls outside ``[0, width) x [0, height)``."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(
            f"tile ({x}, {y}) is out of bounds for a {width}x{height} warehouse"
        )
        self.x = x
        self.y = y
        self.width = width
        self.height = height


class NodeNotFoundError(WarehouseError, LookupError):
    """A graph was asked for a node id it does not contain.

    Ids are derived from live tiles, so this means the graph is stale and
    must be rebuilt.
    """

    def __init__(self, node_id: str) -> None:
        super().__init__(f"no node found with id {node_id!r}")
        self.node_id = node_id


class StorageCapacityError(WarehouseError, ValueError):
    """A storage unit cannot hold or release the requested quantity."""
