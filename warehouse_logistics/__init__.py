"""
Warehouse logistics core.

Tile grid, storage assignment, order queue and routing graphs.
"""

from .enums import TileKind, OrderStatus
from .constants import *  # noqa: F401,F403
from .errors import (
    WarehouseError, TileOutOfBoundsError, NodeNotFoundError, StorageCapacityError,
)
from .models import Part, PartCatalogue, Item, StorageUnit, Tile
from .warehouse import Warehouse
from .assignment import (
    AssignmentPolicy, BasicAssignmentPolicy, NearestAssignmentPolicy,
    LeastLoadedAssignmentPolicy,
    basic_receive_depot_policy, basic_ship_depot_policy, basic_rack_policy,
)
from .orders import Order, PlaceOrder, OrderQueue
from .controller import WarehouseController
from .graph import (
    node_id, parse_node_id, TileNode, Graph, Scorer, UniformScorer, ManhattanScorer,
)
from .map_builder import build_layout, build_graph, access_nodes, verify_graph
from .pathfinding import astar
from .headless import run_headless

__version__ = "0.1.0"

__all__ = [
    "TileKind", "OrderStatus",
    "WarehouseError", "TileOutOfBoundsError", "NodeNotFoundError", "StorageCapacityError",
    "Part", "PartCatalogue", "Item", "StorageUnit", "Tile",
    "Warehouse",
    "AssignmentPolicy", "BasicAssignmentPolicy", "NearestAssignmentPolicy",
    "LeastLoadedAssignmentPolicy",
    "basic_receive_depot_policy", "basic_ship_depot_policy", "basic_rack_policy",
    "Order", "PlaceOrder", "OrderQueue",
    "WarehouseController",
    "node_id", "parse_node_id", "TileNode", "Graph", "Scorer",
    "UniformScorer", "ManhattanScorer",
    "build_layout", "build_graph", "access_nodes", "verify_graph",
    "astar",
    "run_headless",
]
