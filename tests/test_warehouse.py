"""
Tests for the tile grid, tile variants and storage units.
"""

import pytest

from warehouse_logistics import (
    Item, Part, PartCatalogue, StorageCapacityError, StorageUnit, Tile,
    TileKind, TileOutOfBoundsError, Warehouse,
)


# -- Helpers ----------------------------------------------------------

def _item(name="Cucumber"):
    return Item(Part(name, "test part"))


# -- Warehouse --------------------------------------------------------

def test_new_warehouse_is_empty_floor():
    wh = Warehouse(4, 3)
    assert wh.width == 4
    assert wh.height == 3
    assert len(wh) == 12
    assert all(t.kind == TileKind.EMPTY for t in wh)


@pytest.mark.parametrize("width,height", [(0, 3), (3, 0), (-1, 2)])
def test_warehouse_rejects_non_positive_dimensions(width, height):
    with pytest.raises(ValueError):
        Warehouse(width, height)


def test_set_then_get_returns_tile_at_same_coordinates():
    wh = Warehouse(3, 3)
    for x in range(3):
        for y in range(3):
            wh.set_tile(Tile.rack(x, y))
            tile = wh.get_tile_at(x, y)
            assert (tile.x, tile.y) == (x, y)
            assert tile.kind == TileKind.RACK


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (3, 0), (0, 2), (5, 5)])
def test_out_of_bounds_get_and_set(x, y):
    wh = Warehouse(3, 2)
    with pytest.raises(TileOutOfBoundsError) as exc:
        wh.get_tile_at(x, y)
    assert (exc.value.x, exc.value.y) == (x, y)
    with pytest.raises(TileOutOfBoundsError):
        wh.set_tile(Tile.rack(x, y))


def test_out_of_bounds_is_an_index_error():
    with pytest.raises(IndexError):
        Warehouse(1, 1).get_tile_at(1, 0)


def test_set_tile_discards_previous_storage():
    wh = Warehouse(2, 1)
    rack = Tile.rack(1, 0, capacity=2)
    rack.storage_unit.add(_item())
    wh.set_tile(rack)
    wh.set_tile(Tile.rack(1, 0, capacity=2))
    assert wh.get_tile_at(1, 0).storage_unit.total_quantity == 0
    wh.set_tile(Tile.empty(1, 0))
    assert wh.get_tile_at(1, 0).storage_unit is None


def test_iter_tiles_is_row_major_and_filters_by_kind():
    wh = Warehouse(2, 2)
    wh.set_tile(Tile.rack(1, 0))
    wh.set_tile(Tile.rack(0, 1))
    assert [t.pos for t in wh.iter_tiles()] == [(0, 0), (1, 0), (0, 1), (1, 1)]
    assert [t.pos for t in wh.iter_tiles(TileKind.RACK)] == [(1, 0), (0, 1)]
    assert [t.pos for t in wh.storage_tiles()] == [(1, 0), (0, 1)]


# -- Tiles ------------------------------------------------------------

def test_storage_tiles_always_own_a_unit():
    for kind in (TileKind.RACK, TileKind.RECEIVE_DEPOT, TileKind.SHIP_DEPOT):
        assert Tile(0, 0, kind).storage_unit is not None
    assert Tile(0, 0).storage_unit is None
    assert Tile.empty(0, 0).is_traversable()
    assert not Tile.receive_depot(0, 0).is_traversable()


def test_empty_tile_cannot_hold_storage():
    with pytest.raises(ValueError):
        Tile(0, 0, TileKind.EMPTY, StorageUnit(1))


def test_tile_coordinates_and_kind_are_read_only():
    tile = Tile.ship_depot(2, 3)
    with pytest.raises(AttributeError):
        tile.x = 5
    with pytest.raises(AttributeError):
        tile.kind = TileKind.RACK
    assert tile.pos == (2, 3)


# -- Storage units ----------------------------------------------------

def test_storage_unit_never_exceeds_capacity():
    unit = StorageUnit(2)
    a, b = _item(), _item("Banana")
    unit.add(a)
    unit.add(b)
    assert unit.free_capacity == 0
    assert not unit.can_accept(a)
    with pytest.raises(StorageCapacityError):
        unit.add(a)
    assert unit.total_quantity == 2


def test_storage_unit_capacity_is_read_only():
    unit = StorageUnit(2)
    unit.add(_item(), 2)
    with pytest.raises(AttributeError):
        unit.capacity = 1
    assert unit.capacity == 2
    assert unit.free_capacity == 0


def test_storage_unit_remove():
    unit = StorageUnit(5)
    a = _item()
    unit.add(a, 3)
    unit.remove(a, 2)
    assert unit.quantity_of(a) == 1
    unit.remove(a)
    assert a not in unit
    assert len(unit) == 0
    with pytest.raises(StorageCapacityError):
        unit.remove(a)


def test_storage_unit_rejects_bad_quantities():
    with pytest.raises(ValueError):
        StorageUnit(0)
    unit = StorageUnit(1)
    with pytest.raises(ValueError):
        unit.add(_item(), 0)


def test_items_of_the_same_part_are_distinct():
    part = Part("Bolt")
    a, b = Item(part), Item(part)
    assert a != b
    unit = StorageUnit(4)
    unit.add(a)
    unit.add(b)
    assert len(unit) == 2


def test_item_is_immutable():
    item = Item(Part("Bolt"), {"lot": 7})
    with pytest.raises(AttributeError):
        item.part = Part("Nut")
    with pytest.raises(TypeError):
        item.metadata["lot"] = 8
    assert item.metadata["lot"] == 7


def test_part_catalogue():
    catalogue = PartCatalogue([Part("Bolt")])
    catalogue.add(Part("Nut"))
    assert "Nut" in catalogue
    assert catalogue.get("Bolt").name == "Bolt"
    assert len(catalogue) == 2
    with pytest.raises(ValueError):
        catalogue.add(Part("Bolt"))
    with pytest.raises(KeyError):
        catalogue.get("Washer")
