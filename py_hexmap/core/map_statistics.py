"""Summary counts for generated hex maps."""

from typing import Dict, List, Tuple

import numpy as np

from .hex_grid import EMPTY_TILE, HexGrid
from .tiles import TILE_FAMILIES, BiomeFamily, TileKind


def tile_counts(grid: HexGrid) -> Dict[TileKind, int]:
    """Number of cells holding each tile kind present on the map."""
    values, counts = np.unique(grid.tiles, return_counts=True)
    return {
        TileKind(int(value)): int(count)
        for value, count in zip(values, counts)
        if value != EMPTY_TILE
    }


def family_counts(grid: HexGrid) -> Dict[BiomeFamily, int]:
    """Number of cells per biome family."""
    result: Dict[BiomeFamily, int] = {}
    for kind, count in tile_counts(grid).items():
        family = TILE_FAMILIES[kind]
        result[family] = result.get(family, 0) + count
    return result


def settlement_cells(grid: HexGrid) -> List[Tuple[int, int, TileKind]]:
    """(row, column, tile) of every settlement, row by row."""
    return [
        (row, column, kind)
        for row, column, kind in grid.iter_tiles()
        if TILE_FAMILIES[kind] == BiomeFamily.SETTLEMENT
    ]


def summarize(grid: HexGrid) -> Dict[str, object]:
    """Plain-dict summary suitable for structured logging."""
    total = grid.map_width * grid.map_height
    families = family_counts(grid)
    return {
        "cells": total,
        "empty": int(np.count_nonzero(grid.tiles == EMPTY_TILE)),
        "families": {family.name.lower(): count for family, count in families.items()},
        "settlements": families.get(BiomeFamily.SETTLEMENT, 0),
    }
