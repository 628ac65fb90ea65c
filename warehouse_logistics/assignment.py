"""Storage assignment policies.

A policy picks the tile an item should be stored on. It is any callable
``policy(item, warehouse)`` that returns a tile of the kind it manages with
room for the item, or ``None`` when every such tile is full. Policies only
look at the warehouse; they never store anything themselves.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from .enums import TileKind

if TYPE_CHECKING:
    from .models import Item, Tile
    from .warehouse import Warehouse

logger = logging.getLogger(__name__)


class AssignmentPolicy(Protocol):
    """Chooses a destination tile for an item, or ``None`` on exhaustion."""

    def __call__(self, item: Item, warehouse: Warehouse) -> Tile | None: ...


def _candidates(item: Item, warehouse: Warehouse, kind: TileKind) -> list[Tile]:
    """Tiles of *kind* whose storage unit can take one more *item*, in scan order."""
    return [
        tile for tile in warehouse.iter_tiles(kind)
        if tile.storage_unit is not None and tile.storage_unit.can_accept(item)
    ]


class BasicAssignmentPolicy:
    """First tile of *kind* with free capacity, scanning rows then columns."""

    def __init__(self, kind: TileKind) -> None:
        if kind == TileKind.EMPTY:
            raise ValueError("empty tiles have no storage to assign")
        self.kind = kind

    def assign(self, item: Item, warehouse: Warehouse) -> Tile | None:
        for tile in warehouse.iter_tiles(self.kind):
            unit = tile.storage_unit
            if unit is not None and unit.can_accept(item):
                logger.debug("Assigned %s to %s", item, tile)
                return tile
        logger.debug("No %s has room for %s", self.kind.value, item)
        return None

    __call__ = assign

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind.name})"


class NearestAssignmentPolicy(BasicAssignmentPolicy):
    """Closest tile of *kind* to *origin* by Manhattan distance."""

    def __init__(self, kind: TileKind, origin: tuple[int, int]) -> None:
        super().__init__(kind)
        self.origin = origin

    def assign(self, item: Item, warehouse: Warehouse) -> Tile | None:
        ox, oy = self.origin
        best: Tile | None = None
        best_dist = float("inf")
        for tile in _candidates(item, warehouse, self.kind):
            dist = abs(tile.x - ox) + abs(tile.y - oy)
            if dist < best_dist:
                best_dist = dist
                best = tile
        if best is None:
            logger.debug("No %s has room for %s", self.kind.value, item)
        return best

    __call__ = assign


class LeastLoadedAssignmentPolicy(BasicAssignmentPolicy):
    """Tile of *kind* with the most free capacity; ties go to scan order."""

    def assign(self, item: Item, warehouse: Warehouse) -> Tile | None:
        best: Tile | None = None
        best_free = 0
        for tile in _candidates(item, warehouse, self.kind):
            free = tile.storage_unit.free_capacity
            if free > best_free:
                best_free = free
                best = tile
        if best is None:
            logger.debug("No %s has room for %s", self.kind.value, item)
        return best

    __call__ = assign


def basic_receive_depot_policy() -> BasicAssignmentPolicy:
    return BasicAssignmentPolicy(TileKind.RECEIVE_DEPOT)


def basic_ship_depot_policy() -> BasicAssignmentPolicy:
    return BasicAssignmentPolicy(TileKind.SHIP_DEPOT)


def basic_rack_policy() -> BasicAssignmentPolicy:
    return BasicAssignmentPolicy(TileKind.RACK)
