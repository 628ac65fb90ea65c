"""WarehouseController: the intake and orchestration point."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .assignment import (
    basic_rack_policy, basic_receive_depot_policy, basic_ship_depot_policy,
)
from .map_builder import build_graph
from .models import PartCatalogue
from .orders import OrderQueue, PlaceOrder

if TYPE_CHECKING:
    from .assignment import AssignmentPolicy
    from .graph import Graph
    from .models import Item, StorageUnit, Tile
    from .orders import Order
    from .warehouse import Warehouse

logger = logging.getLogger(__name__)


class WarehouseController:
    """Receives items into a warehouse and queues the resulting work.

    One assignment policy is held per tile family; any left out falls back
    to the basic first-fit policy for that family.
    """

    def __init__(
        self,
        warehouse: Warehouse,
        part_catalogue: PartCatalogue | None = None,
        receive_depot_policy: AssignmentPolicy | None = None,
        ship_depot_policy: AssignmentPolicy | None = None,
        rack_policy: AssignmentPolicy | None = None,
        order_queue: OrderQueue | None = None,
    ) -> None:
        self.warehouse: Warehouse = warehouse
        self.part_catalogue: PartCatalogue = (
            part_catalogue if part_catalogue is not None else PartCatalogue()
        )
        self.receive_depot_policy: AssignmentPolicy = (
            receive_depot_policy or basic_receive_depot_policy()
        )
        self.ship_depot_policy: AssignmentPolicy = (
            ship_depot_policy or basic_ship_depot_policy()
        )
        self.rack_policy: AssignmentPolicy = rack_policy or basic_rack_policy()
        self.order_queue: OrderQueue = (
            order_queue if order_queue is not None else OrderQueue()
        )

    # -- Intake ---------------------------------------------------------

    def receive_item(self, item: Item) -> PlaceOrder | None:
        """Put *item* into a receive depot and queue an order to store it.

        Returns ``None``, changing nothing, if no depot has room.
        """
        depot = self.receive_depot_policy(item, self.warehouse)
        if depot is None:
            logger.info("Rejected %s: no receive depot has room", item)
            return None
        depot.storage_unit.add(item)
        order = PlaceOrder(depot, item)
        self.order_queue.add_order(order)
        logger.info(
            "[Order #%d] %s received at (%d, %d)",
            order.order_id, item, depot.x, depot.y,
        )
        return order

    # -- Execution ------------------------------------------------------

    def complete_order(self) -> Item | None:
        """Complete the oldest pending order; ``None`` if there is none."""
        return self.order_queue.complete_order()

    def complete_next(self) -> Order | None:
        return self.order_queue.complete_next()

    def storage_destination(self, item: Item) -> Tile | None:
        """Rack that *item* should be put away on, or ``None`` if racks are full."""
        return self.rack_policy(item, self.warehouse)

    def shipping_destination(self, item: Item) -> Tile | None:
        """Ship depot that *item* should leave from, or ``None`` if all are full."""
        return self.ship_depot_policy(item, self.warehouse)

    def transfer(self, item: Item, source: Tile, destination: Tile) -> None:
        """Move one unit of *item* between two storage tiles.

        Raises ``StorageCapacityError``, changing nothing, if the destination
        is full.
        """
        if source.storage_unit is None or destination.storage_unit is None:
            raise ValueError(
                f"transfer needs two storage tiles, got {source!r} -> {destination!r}"
            )
        if item not in source.storage_unit:
            raise ValueError(f"{item} is not stored at {source!r}")
        destination.storage_unit.add(item)
        source.storage_unit.remove(item)
        logger.debug("Moved %s %r -> %r", item, source, destination)

    # -- Inspection -----------------------------------------------------

    def pending_orders(self) -> list[Order]:
        return list(self.order_queue)

    def storage_unit_at(self, x: int, y: int) -> StorageUnit | None:
        """Storage unit on the tile at ``(x, y)``; ``None`` for empty floor."""
        return self.warehouse.get_tile_at(x, y).storage_unit

    def inventory(self) -> dict[Item, int]:
        """Total quantity of every item held anywhere in the warehouse."""
        totals: dict[Item, int] = {}
        for tile in self.warehouse.storage_tiles():
            for item, quantity in tile.storage_unit.items():
                totals[item] = totals.get(item, 0) + quantity
        return totals

    # -- Routing --------------------------------------------------------

    def build_routing_graph(self) -> Graph:
        """Snapshot the current floor plan for path search."""
        return build_graph(self.warehouse)
