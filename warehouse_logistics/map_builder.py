"""Layout and routing-graph builders for the warehouse."""

from __future__ import annotations

import logging
from typing import Iterable

from .enums import TileKind
from .constants import (
    DEFAULT_STORAGE_CAPACITY, LAYOUT_SYMBOLS, NEIGHBOR_OFFSETS, TRAVERSABLE_KINDS,
)
from .graph import Graph, TileNode, node_id
from .models import Tile, StorageUnit
from .warehouse import Warehouse

logger = logging.getLogger(__name__)


def build_layout(
    rows: Iterable[str],
    capacity: int = DEFAULT_STORAGE_CAPACITY,
) -> Warehouse:
    """Create a warehouse from ASCII rows.

    Row index is y, column index is x. Symbols are listed in
    ``LAYOUT_SYMBOLS``; every storage tile gets a unit of *capacity*.
    """
    rows = [row.rstrip("\n") for row in rows if row.strip()]
    if not rows:
        raise ValueError("layout has no rows")
    width = len(rows[0])
    for y, row in enumerate(rows):
        if len(row) != width:
            raise ValueError(
                f"layout row {y} has {len(row)} columns, expected {width}"
            )

    warehouse = Warehouse(width, len(rows))
    for y, row in enumerate(rows):
        for x, symbol in enumerate(row):
            try:
                kind = LAYOUT_SYMBOLS[symbol]
            except KeyError:
                raise ValueError(
                    f"unknown layout symbol {symbol!r} at ({x}, {y})"
                ) from None
            if kind != TileKind.EMPTY:
                warehouse.set_tile(Tile(x, y, kind, StorageUnit(capacity)))
    logger.debug("Layout built: %r", warehouse)
    return warehouse


def _neighbors(
    warehouse: Warehouse,
    tile: Tile,
    traversable: frozenset[TileKind],
) -> set[str]:
    """Ids of the in-bounds traversable tiles orthogonally next to *tile*."""
    ids: set[str] = set()
    for dx, dy in NEIGHBOR_OFFSETS:
        nx, ny = tile.x + dx, tile.y + dy
        if warehouse.in_bounds(nx, ny) and warehouse.get_tile_at(nx, ny).kind in traversable:
            ids.add(node_id(nx, ny))
    return ids


def build_graph(
    warehouse: Warehouse,
    traversable: frozenset[TileKind] = TRAVERSABLE_KINDS,
) -> Graph:
    """Snapshot the traversable tiles of *warehouse* as a 4-connected graph.

    The graph does not follow later changes to the warehouse; build a new
    one after any ``set_tile``.
    """
    nodes: list[TileNode] = []
    connections: dict[str, set[str]] = {}
    for tile in warehouse.iter_tiles():
        if tile.kind not in traversable:
            continue
        node = TileNode(tile)
        nodes.append(node)
        connections[node.id] = _neighbors(warehouse, tile, traversable)

    graph = Graph(nodes, connections)
    logger.info("Routing graph built: %r", graph)
    return graph


def access_nodes(
    graph: Graph,
    warehouse: Warehouse,
    tile: Tile,
    traversable: frozenset[TileKind] = TRAVERSABLE_KINDS,
) -> list[TileNode]:
    """Graph nodes from which *tile* can be reached, sorted by id.

    Storage tiles are not part of the graph, so routes start and end on the
    open floor next to them. A traversable *tile* is its own access node.
    Pass the same *traversable* kinds the graph was built with.
    """
    tid = node_id(tile.x, tile.y)
    if tid in graph:
        return [graph.get_node(tid)]
    ids = [
        nid for nid in _neighbors(warehouse, tile, traversable)
        if nid in graph
    ]
    return [graph.get_node(nid) for nid in sorted(ids)]


def verify_graph(graph: Graph) -> int:
    """Log graph stats and check every link is two-way. Returns the edge count."""
    logger.info("--- Graph verification ---")
    logger.info("Graph nodes: %d", len(graph))
    total_edges = graph.edge_count
    logger.info("Graph edges: %d", total_edges)
    for nid in graph.node_ids:
        for other in graph.neighbor_ids(nid):
            if nid not in graph.neighbor_ids(other):
                raise AssertionError(f"one-way edge {nid} -> {other}")
    logger.info("--- End verification ---")
    return total_edges
