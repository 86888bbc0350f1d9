"""
Terrain tile catalog.

This module defines:
- TileKind, the fixed set of terrain identifiers
- The atlas (row, column) location of every kind's sprite
- BiomeFamily tags used by the generator to ask "is this grass/water"
"""

from enum import IntEnum
from typing import Dict, FrozenSet, Tuple


class TileKind(IntEnum):
    """Terrain tiles available in the low resolution fantasy hex atlas."""

    GRASS = 0
    GRASS_LIGHT_FOREST = 1
    GRASS_FOREST = 2
    GRASS_HILLS = 3
    GRASS_FOREST_HILLS = 4
    MOUNTAIN = 5
    WATER = 6
    OCEAN = 7
    GRASS_VILLAGE = 8
    GRASS_TOWN = 9
    GRASS_CITY = 10
    FARM = 11
    TREE_SWAMP = 12
    LIGHT_BOG = 13
    BOG = 14
    SWAMP = 15
    SNOW = 16
    SNOW_LIGHT_FOREST = 17
    SNOW_FOREST = 18
    SNOW_HILLS = 19
    SNOW_FOREST_HILLS = 20
    SNOW_WATER = 21
    SNOW_TOWN = 22
    SNOW_CASTLE = 23


class BiomeFamily(IntEnum):
    """Coarse biome tags shared by several tile kinds."""

    WATER = 0
    GRASS = 1
    MOUNTAIN = 2
    SNOW = 3
    SWAMP = 4
    SETTLEMENT = 5


# Sprite location (atlas row, atlas column) for each tile
TILE_ATLAS_POSITIONS: Dict[TileKind, Tuple[int, int]] = {
    TileKind.GRASS: (0, 0),
    TileKind.GRASS_LIGHT_FOREST: (0, 1),
    TileKind.GRASS_FOREST: (0, 2),
    TileKind.GRASS_HILLS: (0, 3),
    TileKind.GRASS_FOREST_HILLS: (0, 4),
    TileKind.MOUNTAIN: (0, 5),
    TileKind.WATER: (0, 6),
    TileKind.OCEAN: (0, 7),
    TileKind.GRASS_VILLAGE: (1, 0),
    TileKind.GRASS_TOWN: (1, 1),
    TileKind.GRASS_CITY: (1, 2),
    TileKind.FARM: (1, 3),
    TileKind.TREE_SWAMP: (1, 4),
    TileKind.LIGHT_BOG: (1, 5),
    TileKind.BOG: (1, 6),
    TileKind.SWAMP: (1, 7),
    TileKind.SNOW: (2, 0),
    TileKind.SNOW_LIGHT_FOREST: (2, 1),
    TileKind.SNOW_FOREST: (2, 2),
    TileKind.SNOW_HILLS: (2, 3),
    TileKind.SNOW_FOREST_HILLS: (2, 4),
    TileKind.SNOW_WATER: (2, 5),
    TileKind.SNOW_TOWN: (2, 6),
    TileKind.SNOW_CASTLE: (2, 7),
}

# Tile names for display
TILE_NAMES: Dict[TileKind, str] = {
    TileKind.GRASS: "Grass",
    TileKind.GRASS_LIGHT_FOREST: "Light Forest",
    TileKind.GRASS_FOREST: "Forest",
    TileKind.GRASS_HILLS: "Hills",
    TileKind.GRASS_FOREST_HILLS: "Forest Hills",
    TileKind.MOUNTAIN: "Mountain",
    TileKind.WATER: "Water",
    TileKind.OCEAN: "Ocean",
    TileKind.GRASS_VILLAGE: "Village",
    TileKind.GRASS_TOWN: "Town",
    TileKind.GRASS_CITY: "City",
    TileKind.FARM: "Farm",
    TileKind.TREE_SWAMP: "Tree Swamp",
    TileKind.LIGHT_BOG: "Light Bog",
    TileKind.BOG: "Bog",
    TileKind.SWAMP: "Swamp",
    TileKind.SNOW: "Snow",
    TileKind.SNOW_LIGHT_FOREST: "Snow Light Forest",
    TileKind.SNOW_FOREST: "Snow Forest",
    TileKind.SNOW_HILLS: "Snow Hills",
    TileKind.SNOW_FOREST_HILLS: "Snow Forest Hills",
    TileKind.SNOW_WATER: "Frozen Water",
    TileKind.SNOW_TOWN: "Snow Town",
    TileKind.SNOW_CASTLE: "Snow Castle",
}

TILE_FAMILIES: Dict[TileKind, BiomeFamily] = {
    TileKind.GRASS: BiomeFamily.GRASS,
    TileKind.GRASS_LIGHT_FOREST: BiomeFamily.GRASS,
    TileKind.GRASS_FOREST: BiomeFamily.GRASS,
    TileKind.GRASS_HILLS: BiomeFamily.GRASS,
    TileKind.GRASS_FOREST_HILLS: BiomeFamily.GRASS,
    TileKind.FARM: BiomeFamily.GRASS,
    TileKind.MOUNTAIN: BiomeFamily.MOUNTAIN,
    TileKind.WATER: BiomeFamily.WATER,
    TileKind.OCEAN: BiomeFamily.WATER,
    TileKind.SNOW_WATER: BiomeFamily.WATER,
    TileKind.GRASS_VILLAGE: BiomeFamily.SETTLEMENT,
    TileKind.GRASS_TOWN: BiomeFamily.SETTLEMENT,
    TileKind.GRASS_CITY: BiomeFamily.SETTLEMENT,
    TileKind.SNOW_TOWN: BiomeFamily.SETTLEMENT,
    TileKind.SNOW_CASTLE: BiomeFamily.SETTLEMENT,
    TileKind.TREE_SWAMP: BiomeFamily.SWAMP,
    TileKind.LIGHT_BOG: BiomeFamily.SWAMP,
    TileKind.BOG: BiomeFamily.SWAMP,
    TileKind.SWAMP: BiomeFamily.SWAMP,
    TileKind.SNOW: BiomeFamily.SNOW,
    TileKind.SNOW_LIGHT_FOREST: BiomeFamily.SNOW,
    TileKind.SNOW_FOREST: BiomeFamily.SNOW,
    TileKind.SNOW_HILLS: BiomeFamily.SNOW,
    TileKind.SNOW_FOREST_HILLS: BiomeFamily.SNOW,
}

WATER_TILES: FrozenSet[TileKind] = frozenset(
    kind for kind, family in TILE_FAMILIES.items() if family == BiomeFamily.WATER
)

# Cells a settlement may be founded on
SETTLEMENT_SITES: FrozenSet[TileKind] = frozenset(
    {TileKind.GRASS, TileKind.GRASS_LIGHT_FOREST, TileKind.GRASS_FOREST}
)

# Cells that can turn into bog or swamp
SWAMP_SITES: FrozenSet[TileKind] = frozenset({TileKind.GRASS, TileKind.GRASS_LIGHT_FOREST})


def atlas_position(kind: TileKind) -> Tuple[int, int]:
    """Return the (row, column) of a tile's sprite in the atlas."""
    return TILE_ATLAS_POSITIONS[TileKind(kind)]


def family_of(kind: TileKind) -> BiomeFamily:
    return TILE_FAMILIES[TileKind(kind)]


def is_water(kind: TileKind) -> bool:
    return TileKind(kind) in WATER_TILES
