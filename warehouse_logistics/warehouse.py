"""The warehouse tile grid."""

from __future__ import annotations

import logging
from typing import Iterator

from .enums import TileKind
from .errors import TileOutOfBoundsError
from .models import Tile

logger = logging.getLogger(__name__)


class Warehouse:
    """A fixed-size grid of tiles, ``{(x, y): Tile}``.

    Every in-range coordinate always maps to exactly one tile; new
    warehouses start out as empty floor.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(
                f"warehouse dimensions must be positive, got {width}x{height}"
            )
        self._width = width
        self._height = height
        self._tiles: dict[tuple[int, int], Tile] = {
            (x, y): Tile.empty(x, y)
            for y in range(height)
            for x in range(width)
        }

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def _check_bounds(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise TileOutOfBoundsError(x, y, self._width, self._height)

    def get_tile_at(self, x: int, y: int) -> Tile:
        """Return the tile at ``(x, y)`` or raise ``TileOutOfBoundsError``."""
        self._check_bounds(x, y)
        return self._tiles[(x, y)]

    def set_tile(self, tile: Tile) -> None:
        """Replace the tile at *tile*'s coordinates.

        Whatever storage unit the previous tile owned is discarded with it.
        """
        self._check_bounds(tile.x, tile.y)
        previous = self._tiles[tile.pos]
        self._tiles[tile.pos] = tile
        logger.debug(
            "Tile (%d, %d): %s -> %s",
            tile.x, tile.y, previous.kind.value, tile.kind.value,
        )

    def iter_tiles(self, kind: TileKind | None = None) -> Iterator[Tile]:
        """Yield tiles row by row (increasing y, then x), optionally of one *kind*."""
        for y in range(self._height):
            for x in range(self._width):
                tile = self._tiles[(x, y)]
                if kind is None or tile.kind == kind:
                    yield tile

    def storage_tiles(self) -> list[Tile]:
        """Return every tile that owns a storage unit, in scan order."""
        return [t for t in self.iter_tiles() if t.storage_unit is not None]

    def __iter__(self) -> Iterator[Tile]:
        return self.iter_tiles()

    def __len__(self) -> int:
        return len(self._tiles)

    def __repr__(self) -> str:
        return f"Warehouse({self._width}x{self._height})"
