"""Headless intake -> order queue -> routing run."""

from __future__ import annotations

import logging
import random
import time as _time
from typing import Iterable

from .constants import DEFAULT_LAYOUT, DEFAULT_NUM_ITEMS, DEFAULT_STORAGE_CAPACITY
from .controller import WarehouseController
from .graph import Graph, TileNode, UniformScorer
from .map_builder import access_nodes, build_layout, verify_graph
from .models import Item, Part, PartCatalogue, Tile
from .orders import Order
from .pathfinding import astar
from .warehouse import Warehouse

logger = logging.getLogger(__name__)

DEMO_PARTS = [
    Part("Cucumber", "A vegetable"),
    Part("Banana", "A fruit"),
    Part("Bolt", "M8 hex bolt"),
    Part("Pallet", "Euro pallet"),
]


def _reset_id_counters() -> None:
    """Number orders from 1 again for every run."""
    Order._next_id = 1


def _shortest_route(
    graph: Graph,
    warehouse: Warehouse,
    source: Tile,
    destination: Tile,
) -> list[TileNode] | None:
    """Shortest route between any access node of *source* and of *destination*."""
    scorer = UniformScorer()
    best: list[TileNode] | None = None
    for start in access_nodes(graph, warehouse, source):
        for goal in access_nodes(graph, warehouse, destination):
            path = astar(graph, start.id, goal.id, scorer)
            if path is not None and (best is None or len(path) < len(best)):
                best = path
    return best


def run_headless(
    layout: Iterable[str] = DEFAULT_LAYOUT,
    num_items: int = DEFAULT_NUM_ITEMS,
    capacity: int = DEFAULT_STORAGE_CAPACITY,
    seed: int | None = 0,
) -> dict:
    """Receive *num_items* items, then work the queue until it is empty.

    Each completed order moves its item from the receive depot to a rack
    and is routed across the open floor. Returns a dict of run metrics.
    """
    _reset_id_counters()
    wall_start = _time.monotonic()
    rng = random.Random(seed)

    warehouse = build_layout(layout, capacity=capacity)
    controller = WarehouseController(warehouse, PartCatalogue(DEMO_PARTS))

    received = rejected = 0
    for i in range(num_items):
        part = rng.choice(list(controller.part_catalogue))
        item = Item(part, {"serial": i + 1})
        if controller.receive_item(item) is None:
            rejected += 1
        else:
            received += 1

    graph = controller.build_routing_graph()
    graph_edges = verify_graph(graph)

    completed = stored = unstored = routed = unroutable = 0
    total_route_length = 0
    while True:
        order = controller.complete_next()
        if order is None:
            break
        completed += 1

        rack = controller.storage_destination(order.item)
        if rack is None:
            logger.info("[Order #%d] no rack has room for %s", order.order_id, order.item)
            unstored += 1
            continue
        controller.transfer(order.item, order.source, rack)
        stored += 1

        path = _shortest_route(graph, warehouse, order.source, rack)
        if path is None:
            logger.info(
                "[Order #%d] no route from (%d, %d) to (%d, %d)",
                order.order_id, order.source.x, order.source.y, rack.x, rack.y,
            )
            unroutable += 1
            continue
        routed += 1
        total_route_length += len(path) - 1
        logger.debug(
            "[Order #%d] %s -> (%d, %d) via %d tiles",
            order.order_id, order.item, rack.x, rack.y, len(path),
        )

    wall_elapsed = _time.monotonic() - wall_start

    return {
        "received": received,
        "rejected": rejected,
        "completed": completed,
        "stored": stored,
        "unstored": unstored,
        "routed": routed,
        "unroutable": unroutable,
        "total_route_length": total_route_length,
        "graph_nodes": len(graph),
        "graph_edges": graph_edges,
        "wall_clock_seconds": wall_elapsed,
    }
