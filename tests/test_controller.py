"""
Tests for the WarehouseController intake, execution and inspection paths.
"""

import logging

import pytest

from warehouse_logistics import (
    Item, LeastLoadedAssignmentPolicy, OrderStatus, Part, PartCatalogue,
    PlaceOrder, Tile, TileKind, TileOutOfBoundsError, Warehouse,
    WarehouseController, build_layout,
)


# -- Helpers ----------------------------------------------------------

def _item(name="Cucumber"):
    return Item(Part(name, "test part"))


def _single_depot_controller(capacity=1):
    wh = Warehouse(1, 1)
    wh.set_tile(Tile.receive_depot(0, 0, capacity=capacity))
    return WarehouseController(wh)


# -- Intake -----------------------------------------------------------

def test_receive_item_until_depot_is_full():
    controller = _single_depot_controller(capacity=1)
    first = _item()
    order = controller.receive_item(first)
    assert isinstance(order, PlaceOrder)
    assert order.source.pos == (0, 0)
    assert order.item is first
    assert order.status == OrderStatus.PENDING
    assert controller.order_queue.size() == 1

    assert controller.receive_item(_item("Banana")) is None
    assert controller.order_queue.size() == 1


def test_receive_item_stores_item_in_depot():
    controller = _single_depot_controller(capacity=2)
    item = _item()
    controller.receive_item(item)
    assert controller.storage_unit_at(0, 0).quantity_of(item) == 1


def test_rejected_item_changes_nothing():
    wh = build_layout(["..R", "..."])
    controller = WarehouseController(wh)
    assert controller.receive_item(_item()) is None
    assert controller.order_queue.is_empty()
    assert controller.inventory() == {}


def test_custom_receive_policy_is_used():
    wh = build_layout(["I.I"], capacity=3)
    wh.get_tile_at(0, 0).storage_unit.add(_item())
    controller = WarehouseController(
        wh, receive_depot_policy=LeastLoadedAssignmentPolicy(TileKind.RECEIVE_DEPOT),
    )
    assert controller.receive_item(_item()).source.pos == (2, 0)


def test_default_part_catalogue():
    controller = _single_depot_controller()
    assert isinstance(controller.part_catalogue, PartCatalogue)
    assert len(controller.part_catalogue) == 0


# -- Execution --------------------------------------------------------

def test_complete_order_returns_oldest_item():
    controller = _single_depot_controller(capacity=3)
    first, second = _item("A"), _item("B")
    controller.receive_item(first)
    controller.receive_item(second)
    assert controller.complete_order() is first
    assert controller.complete_order() is second
    assert controller.complete_order() is None


def test_storage_and_shipping_destinations():
    wh = build_layout(["I.R", "..O"])
    controller = WarehouseController(wh)
    item = _item()
    assert controller.storage_destination(item).pos == (2, 0)
    assert controller.shipping_destination(item).pos == (2, 1)


def test_transfer_moves_one_unit():
    wh = build_layout(["I.R"], capacity=2)
    controller = WarehouseController(wh)
    item = _item()
    order = controller.receive_item(item)
    rack = controller.storage_destination(item)
    controller.transfer(item, order.source, rack)
    assert item not in order.source.storage_unit
    assert rack.storage_unit.quantity_of(item) == 1
    assert controller.inventory() == {item: 1}


def test_transfer_requires_stored_item_and_storage_tiles():
    wh = build_layout(["I.R"])
    controller = WarehouseController(wh)
    depot, floor, rack = (wh.get_tile_at(x, 0) for x in range(3))
    with pytest.raises(ValueError):
        controller.transfer(_item(), depot, rack)
    with pytest.raises(ValueError):
        controller.transfer(_item(), depot, floor)


# -- Inspection -------------------------------------------------------

def test_storage_unit_at():
    wh = build_layout(["I."])
    controller = WarehouseController(wh)
    assert controller.storage_unit_at(0, 0) is not None
    assert controller.storage_unit_at(1, 0) is None
    with pytest.raises(TileOutOfBoundsError):
        controller.storage_unit_at(2, 0)


def test_inventory_sums_across_tiles_and_pending_orders():
    wh = build_layout(["II"], capacity=1)
    controller = WarehouseController(wh)
    a, b = _item("A"), _item("B")
    controller.receive_item(a)
    controller.receive_item(b)
    assert controller.inventory() == {a: 1, b: 1}
    assert [o.item for o in controller.pending_orders()] == [a, b]


def test_routing_graph_reflects_current_floor():
    wh = build_layout(["I..", "..."])
    controller = WarehouseController(wh)
    assert len(controller.build_routing_graph()) == 5
    wh.set_tile(Tile.rack(2, 1))
    assert len(controller.build_routing_graph()) == 4


def test_intake_is_logged_at_info(caplog):
    controller = _single_depot_controller(capacity=1)
    with caplog.at_level(logging.INFO, logger="warehouse_logistics.controller"):
        controller.receive_item(_item())
        controller.receive_item(_item("Banana"))
    assert "received at (0, 0)" in caplog.text
    assert "Rejected Banana" in caplog.text
