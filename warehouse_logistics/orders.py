"""Orders and the order queue."""

from __future__ import annotations

import heapq
import itertools
import logging
import time
from typing import TYPE_CHECKING, Iterator

from .enums import OrderStatus

if TYPE_CHECKING:
    from .models import Item, Tile

logger = logging.getLogger(__name__)


class Order:
    """A unit of pending movement work for one item."""

    _next_id: int = 1

    def __init__(
        self,
        item: Item,
        tile: Tile | None = None,
        created_at: float | None = None,
    ) -> None:
        self.order_id: int = Order._next_id
        Order._next_id += 1
        self.item: Item = item
        self.tile: Tile | None = tile
        self.created_at: float = time.time() if created_at is None else created_at
        self.status: OrderStatus = OrderStatus.PENDING

    def complete(self) -> None:
        """Mark the order complete. Completing twice is a no-op."""
        self.status = OrderStatus.COMPLETE

    def is_complete(self) -> bool:
        return self.status == OrderStatus.COMPLETE

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(#{self.order_id}, {self.item}, "
            f"tile={self.tile}, status={self.status.value})"
        )


class PlaceOrder(Order):
    """Move an item out of a receive depot into storage."""

    def __init__(
        self,
        source: Tile,
        item: Item,
        created_at: float | None = None,
    ) -> None:
        super().__init__(item, source, created_at)

    @property
    def source(self) -> Tile:
        return self.tile


class OrderQueue:
    """Pending orders, oldest first.

    Orders are heap-ordered by ``created_at``; orders with the same timestamp
    come out in the order they were added.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[float, int, Order]] = []
        self._sequence = itertools.count()

    def add_order(self, order: Order) -> None:
        heapq.heappush(self._heap, (order.created_at, next(self._sequence), order))
        logger.debug("Queued %r (%d pending)", order, len(self._heap))

    def complete_next(self) -> Order | None:
        """Pop the oldest order, mark it complete and return it.

        Returns ``None`` if nothing is pending.
        """
        if not self._heap:
            logger.debug("complete requested on an empty order queue")
            return None
        _, _, order = heapq.heappop(self._heap)
        order.complete()
        return order

    def complete_order(self) -> Item | None:
        """Complete the oldest order and return its item, or ``None`` if empty."""
        order = self.complete_next()
        return order.item if order is not None else None

    def peek(self) -> Order | None:
        return self._heap[0][2] if self._heap else None

    def is_empty(self) -> bool:
        return not self._heap

    empty_queue = is_empty

    def size(self) -> int:
        return len(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def __iter__(self) -> Iterator[Order]:
        """Iterate pending orders in the order they would be completed."""
        return (entry[2] for entry in sorted(self._heap, key=lambda e: e[:2]))
