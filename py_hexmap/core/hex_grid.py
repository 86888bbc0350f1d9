"""
Hex grid storage and screen coordinates.

The grid is laid out flat-top with offset columns: odd columns sit half a
hex lower than even ones and neighbouring columns overlap by a quarter of
a hex width.
"""

import math
import operator
from typing import Iterator, Optional, Tuple

import numpy as np
import structlog

from ..config import ConfigurationError
from .tiles import TileKind

logger = structlog.get_logger()

# Marker for cells without a tile
EMPTY_TILE = -1

# Horizontal distance between column anchors, as a fraction of hex width
COLUMN_SPACING = 0.75


class GridFrozenError(RuntimeError):
    """Raised when writing into a grid after generation has finished."""


def _require_positive(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float, np.integer, np.floating)):
        raise ConfigurationError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value) or value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {value!r}")


class HexGrid:
    """
    Rectangular grid of terrain tiles with hex screen placement.

    Tiles are stored row-major in a (map_height, map_width) int16 array;
    EMPTY_TILE marks cells that have not been assigned yet.
    """

    def __init__(self, map_width: int, map_height: int, hex_width: float, hex_height: float):
        """
        Create an empty grid.

        Args:
            map_width: Number of hex columns
            map_height: Number of hex rows
            hex_width: Width of one hex in pixels
            hex_height: Height of one hex in pixels

        Raises:
            ConfigurationError: if any dimension is not a positive number
                or a cell count is not an integer
        """
        for name, value in (("map_width", map_width), ("map_height", map_height)):
            _require_positive(name, value)
            if int(value) != value:
                raise ConfigurationError(f"{name} must be an integer, got {value!r}")
        _require_positive("hex_width", hex_width)
        _require_positive("hex_height", hex_height)

        self.map_width = int(map_width)
        self.map_height = int(map_height)
        self.hex_width = hex_width
        self.hex_height = hex_height
        self.tiles = np.full((self.map_height, self.map_width), EMPTY_TILE, dtype=np.int16)
        self._frozen = False

    @property
    def shape(self) -> Tuple[int, int]:
        return self.tiles.shape

    @property
    def frozen(self) -> bool:
        return self._frozen

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.map_width and 0 <= y < self.map_height

    def set_tile(self, x: int, y: int, tile: TileKind) -> None:
        """
        Place a tile at column x, row y.

        Coordinates outside the grid are ignored so generation passes can
        write around the edges without checks.

        Raises:
            TypeError: if a coordinate is not an integer
            GridFrozenError: if the grid has been frozen
        """
        x, y = operator.index(x), operator.index(y)
        if not self.in_bounds(x, y):
            return
        if self._frozen:
            raise GridFrozenError("Cannot modify a frozen hex grid")
        self.tiles[y, x] = TileKind(tile)

    def apply(self, mask: np.ndarray, tiles) -> int:
        """
        Write tiles into every cell selected by a boolean mask.

        Args:
            mask: Boolean array shaped like the grid
            tiles: A single tile or an array of tile values shaped like the grid

        Returns:
            Number of cells whose tile actually changed

        Raises:
            GridFrozenError: if the grid has been frozen
            ValueError: if mask does not match the grid shape
        """
        if self._frozen:
            raise GridFrozenError("Cannot modify a frozen hex grid")
        mask = np.asarray(mask, dtype=bool)
        if mask.shape != self.tiles.shape:
            raise ValueError(f"Mask shape {mask.shape} does not match grid {self.tiles.shape}")

        values = np.broadcast_to(np.asarray(tiles, dtype=np.int16), self.tiles.shape)
        changed = int(np.count_nonzero(mask & (self.tiles != values)))
        self.tiles[mask] = values[mask]
        return changed

    def get_tile(self, x: int, y: int) -> Optional[TileKind]:
        """Tile at column x, row y, or None if empty or outside the grid."""
        if not self.in_bounds(x, y):
            return None
        value = int(self.tiles[y, x])
        if value == EMPTY_TILE:
            return None
        return TileKind(value)

    def is_complete(self) -> bool:
        """True when every cell holds a tile."""
        return not bool(np.any(self.tiles == EMPTY_TILE))

    def freeze(self) -> None:
        """Make the grid read-only."""
        self.tiles.flags.writeable = False
        self._frozen = True

    def iter_tiles(self) -> Iterator[Tuple[int, int, TileKind]]:
        """Yield (row, column, tile) for every populated cell, row by row."""
        rows, cols = np.nonzero(self.tiles != EMPTY_TILE)
        for r, c in zip(rows.tolist(), cols.tolist()):
            yield r, c, TileKind(int(self.tiles[r, c]))

    def screen_position(
        self,
        row: int,
        column: int,
        tile_offset_x: float = 0,
        tile_offset_y: float = 0,
    ) -> Tuple[float, float]:
        """
        Pixel anchor of the hex at (row, column).

        Args:
            row: Row in the map grid
            column: Column in the map grid
            tile_offset_x: Sprite registration offset added to x
            tile_offset_y: Sprite registration offset added to y

        Returns:
            (x, y) of the sprite's top-left corner
        """
        hex_width = self.hex_width
        hex_height = self.hex_height
        row_offset = hex_height / 2 if column % 2 == 1 else 0

        x = column * hex_width * COLUMN_SPACING - hex_width / 2 + tile_offset_x
        y = row * hex_height + row_offset - hex_height / 2 + tile_offset_y
        return x, y

    def pixel_size(
        self,
        sprite_width: int,
        sprite_height: int,
        tile_offset_x: float = 0,
        tile_offset_y: float = 0,
    ) -> Tuple[int, int]:
        """Canvas size that fits the bottom-right sprites of the map."""
        last_col = self.map_width - 1
        last_row = self.map_height - 1
        # the last odd column reaches lowest
        lowest_col = last_col if last_col % 2 == 1 else max(0, last_col - 1)

        right, _ = self.screen_position(0, last_col, tile_offset_x, tile_offset_y)
        _, bottom = self.screen_position(last_row, lowest_col, tile_offset_x, tile_offset_y)
        return (
            max(1, int(math.ceil(right + sprite_width))),
            max(1, int(math.ceil(bottom + sprite_height))),
        )

    def __repr__(self) -> str:
        return (
            f"HexGrid({self.map_width}x{self.map_height}, "
            f"hex={self.hex_width}x{self.hex_height}, frozen={self._frozen})"
        )
