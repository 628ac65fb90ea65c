"""Data models: Part, PartCatalogue, Item, StorageUnit and Tile."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterator, Mapping

from .enums import TileKind
from .constants import DEFAULT_STORAGE_CAPACITY, STORAGE_KINDS, TRAVERSABLE_KINDS
from .errors import StorageCapacityError


@dataclass(frozen=True)
class Part:
    """A kind of thing the warehouse can hold."""

    name: str
    description: str = ""


class PartCatalogue:
    """Named parts serviced by the warehouse."""

    def __init__(self, parts: list[Part] | None = None) -> None:
        self._parts: dict[str, Part] = {}
        for part in parts or []:
            self.add(part)

    def add(self, part: Part) -> None:
        if part.name in self._parts:
            raise ValueError(f"part {part.name!r} is already catalogued")
        self._parts[part.name] = part

    def get(self, name: str) -> Part:
        try:
            return self._parts[name]
        except KeyError:
            raise KeyError(f"no part named {name!r}") from None

    def __contains__(self, name: object) -> bool:
        return name in self._parts

    def __iter__(self) -> Iterator[Part]:
        return iter(self._parts.values())

    def __len__(self) -> int:
        return len(self._parts)


@dataclass(frozen=True, eq=False)
class Item:
    """One physical item of a Part.

    Items compare by identity: two items of the same part are distinct.
    """

    part: Part
    metadata: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    def __str__(self) -> str:
        return self.part.name


class StorageUnit:
    """A capacity-bounded container mapping items to quantities."""

    def __init__(self, capacity: int = DEFAULT_STORAGE_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._contents: dict[Item, int] = {}

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def total_quantity(self) -> int:
        return sum(self._contents.values())

    @property
    def free_capacity(self) -> int:
        return self._capacity - self.total_quantity

    def can_accept(self, item: Item, quantity: int = 1) -> bool:
        """Return ``True`` if *quantity* more units fit."""
        return 0 < quantity <= self.free_capacity

    def quantity_of(self, item: Item) -> int:
        return self._contents.get(item, 0)

    def add(self, item: Item, quantity: int = 1) -> None:
        """Store *quantity* units of *item*.

        Raises ``StorageCapacityError`` if the unit would overflow.
        """
        if quantity <= 0:
            raise ValueError(f"quantity must be positive, got {quantity}")
        if quantity > self.free_capacity:
            raise StorageCapacityError(
                f"cannot add {quantity} x {item}: only {self.free_capacity} "
                f"of {self.capacity} free"
            )
        self._contents[item] = self._contents.get(item, 0) + quantity

    def remove(self, item: Item, quantity: int = 1) -> None:
        """Release *quantity* units of *item*; drop the entry when it hits zero."""
        if quantity <= 0:
            raise ValueError(f"quantity must be positive, got {quantity}")
        held = self._contents.get(item, 0)
        if quantity > held:
            raise StorageCapacityError(
                f"cannot remove {quantity} x {item}: only {held} stored"
            )
        if held == quantity:
            del self._contents[item]
        else:
            self._contents[item] = held - quantity

    def items(self) -> list[tuple[Item, int]]:
        return list(self._contents.items())

    def __contains__(self, item: object) -> bool:
        return item in self._contents

    def __len__(self) -> int:
        return len(self._contents)

    def __str__(self) -> str:
        lines = [f"StorageUnit {self.total_quantity}/{self.capacity}"]
        for item, quantity in self._contents.items():
            lines.append(f"- {item} x{quantity}")
        return "\n".join(lines)


class Tile:
    """One square on the warehouse grid.

    A tile's coordinates and kind never change; replacing the tile in the
    warehouse is the only way to change what sits at a coordinate. EMPTY
    tiles carry no storage, every other kind owns a ``StorageUnit``.
    """

    def __init__(
        self,
        x: int,
        y: int,
        kind: TileKind = TileKind.EMPTY,
        storage_unit: StorageUnit | None = None,
    ) -> None:
        if kind in STORAGE_KINDS:
            if storage_unit is None:
                storage_unit = StorageUnit()
        elif storage_unit is not None:
            raise ValueError(f"{kind.value} tile cannot hold a storage unit")
        self._x = x
        self._y = y
        self._kind = kind
        self.storage_unit: StorageUnit | None = storage_unit

    @classmethod
    def empty(cls, x: int, y: int) -> Tile:
        return cls(x, y, TileKind.EMPTY)

    @classmethod
    def rack(cls, x: int, y: int, capacity: int = DEFAULT_STORAGE_CAPACITY) -> Tile:
        return cls(x, y, TileKind.RACK, StorageUnit(capacity))

    @classmethod
    def receive_depot(
        cls, x: int, y: int, capacity: int = DEFAULT_STORAGE_CAPACITY,
    ) -> Tile:
        return cls(x, y, TileKind.RECEIVE_DEPOT, StorageUnit(capacity))

    @classmethod
    def ship_depot(
        cls, x: int, y: int, capacity: int = DEFAULT_STORAGE_CAPACITY,
    ) -> Tile:
        return cls(x, y, TileKind.SHIP_DEPOT, StorageUnit(capacity))

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def pos(self) -> tuple[int, int]:
        return (self._x, self._y)

    @property
    def kind(self) -> TileKind:
        return self._kind

    def is_traversable(self) -> bool:
        return self._kind in TRAVERSABLE_KINDS

    def __repr__(self) -> str:
        return f"Tile({self._x}, {self._y}, {self._kind.name})"
