"""
Procedural terrain generation for hex maps.

This module implements four ordered passes over a HexGrid:
- Base terrain from a low frequency fBm field, with a snowy northern band
- Sparse settlements on grass, light forest and forest
- Thin rivers carved from a second fBm band, leaving existing water alone
- Bogs and swamps in a low-lying band

Every pass reads the grid as left by the previous one and only ever
looks at the cell it is writing; neighbours matter only through the
continuity of the noise.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
import structlog

from ..utils.random import resolve_seed
from .hex_grid import GridFrozenError, HexGrid
from .noise import NoiseField
from .tiles import SETTLEMENT_SITES, SWAMP_SITES, WATER_TILES, TileKind

logger = structlog.get_logger()


@dataclass
class TerrainOptions:
    """Terrain generation thresholds and noise scales."""

    # Base terrain
    terrain_scale: float = 50.0  # Cells per noise lattice unit
    terrain_octaves: int = 4
    ocean_level: float = 0.15
    water_level: float = 0.3
    mountain_level: float = 0.45
    forest_level: float = 0.55  # Above this it is open grass
    forest_frequency: float = 3.0  # Forest detail relative to terrain
    forest_octaves: int = 2
    dense_forest_cut: float = 0.3
    light_forest_cut: float = 0.6
    snow_band: float = 0.2  # Fraction of rows at the top that are snowy

    # Settlements
    settlement_density: float = 0.015
    village_cut: float = 0.5
    town_cut: float = 0.8

    # Rivers
    river_scale: float = 30.0
    river_octaves: int = 3
    river_low: float = 0.65
    river_high: float = 0.75

    # Swamps
    swamp_scale: float = 25.0
    swamp_octaves: int = 2
    swamp_terrain_low: float = 0.28
    swamp_terrain_high: float = 0.42
    swamp_noise_cut: float = 0.6
    bog_cut: float = 0.4
    light_bog_cut: float = 0.7


class TerrainGenerator:
    """Fills a HexGrid with terrain tiles from a single noise seed."""

    def __init__(self, seed: Optional[float] = None, options: Optional[TerrainOptions] = None):
        """
        Initialize the terrain generator.

        Args:
            seed: Noise seed; a fresh random seed is drawn when omitted
            options: Generation thresholds

        Raises:
            ConfigurationError: if the seed is not a finite number
        """
        self.seed = resolve_seed(seed)
        self.options = options or TerrainOptions()
        self.noise = NoiseField(self.seed)

    def _coordinates(self, grid: HexGrid) -> Tuple[np.ndarray, np.ndarray]:
        """Column (x) and row (y) index of every cell as float arrays."""
        ys, xs = np.mgrid[0 : grid.map_height, 0 : grid.map_width]
        return xs.astype(np.float64), ys.astype(np.float64)

    def _terrain_field(self, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
        opts = self.options
        return self.noise.fbm_field(xs / opts.terrain_scale, ys / opts.terrain_scale, opts.terrain_octaves)

    def generate(self, grid: HexGrid) -> HexGrid:
        """
        Run all passes on the grid and freeze it.

        Args:
            grid: Grid to populate

        Returns:
            The same grid, fully populated and read-only

        Raises:
            GridFrozenError: if the grid was already frozen
        """
        if grid.frozen:
            raise GridFrozenError("Cannot generate terrain into a frozen hex grid")

        logger.info(
            "Generating terrain",
            width=grid.map_width,
            height=grid.map_height,
            seed=self.seed,
        )

        self.generate_base_terrain(grid)
        self.place_settlements(grid)
        self.carve_rivers(grid)
        self.add_swamps(grid)

        if not grid.is_complete():
            raise RuntimeError("Terrain generation left empty cells")

        grid.freeze()
        logger.info("Terrain generation complete", seed=self.seed)
        return grid

    def generate_base_terrain(self, grid: HexGrid) -> int:
        """Classify every cell from the terrain field; returns cells written."""
        opts = self.options
        xs, ys = self._coordinates(grid)
        nx = xs / opts.terrain_scale
        ny = ys / opts.terrain_scale

        terrain = self.noise.fbm_field(nx, ny, opts.terrain_octaves)
        forest = self.noise.fbm_field(nx * opts.forest_frequency, ny * opts.forest_frequency, opts.forest_octaves)

        grass_forest = np.select(
            [forest < opts.dense_forest_cut, forest < opts.light_forest_cut],
            [TileKind.GRASS_FOREST, TileKind.GRASS_LIGHT_FOREST],
            default=TileKind.GRASS,
        )
        tiles = np.select(
            [
                terrain < opts.ocean_level,
                terrain < opts.water_level,
                terrain < opts.mountain_level,
                terrain < opts.forest_level,
            ],
            [TileKind.OCEAN, TileKind.WATER, TileKind.MOUNTAIN, grass_forest],
            default=TileKind.GRASS,
        )

        # Snow in the north (top rows of the map), never on water
        snow_forest = np.select(
            [forest < opts.dense_forest_cut, forest < opts.light_forest_cut],
            [TileKind.SNOW_FOREST, TileKind.SNOW_LIGHT_FOREST],
            default=TileKind.SNOW,
        )
        snow_tiles = np.select(
            [terrain < opts.mountain_level, terrain < opts.forest_level],
            [TileKind.SNOW_HILLS, snow_forest],
            default=TileKind.SNOW,
        )
        snowy = (ys < grid.map_height * opts.snow_band) & (terrain > opts.water_level)
        tiles = np.where(snowy, snow_tiles, tiles)

        written = grid.apply(np.ones(grid.shape, dtype=bool), tiles)
        logger.info(
            "Base terrain generated",
            ocean=int(np.count_nonzero(tiles == TileKind.OCEAN)),
            water=int(np.count_nonzero(tiles == TileKind.WATER)),
            mountain=int(np.count_nonzero(tiles == TileKind.MOUNTAIN)),
            snow=int(np.count_nonzero(snowy)),
        )
        return written

    def place_settlements(self, grid: HexGrid) -> int:
        """Found villages, towns and cities on grass and forest cells."""
        opts = self.options
        xs, ys = self._coordinates(grid)

        eligible = np.isin(grid.tiles, [int(kind) for kind in SETTLEMENT_SITES])
        roll = self.noise.hash_field(xs * 7, ys * 11)
        settle = eligible & (roll < opts.settlement_density)

        kind_roll = self.noise.hash_field(xs * 13, ys * 17)
        settlements = np.select(
            [kind_roll < opts.village_cut, kind_roll < opts.town_cut],
            [TileKind.GRASS_VILLAGE, TileKind.GRASS_TOWN],
            default=TileKind.GRASS_CITY,
        )

        placed = grid.apply(settle, settlements)
        logger.info("Settlements placed", count=placed, candidates=int(np.count_nonzero(eligible)))
        return placed

    def carve_rivers(self, grid: HexGrid) -> int:
        """Turn a narrow noise band into water, skipping the border and existing water."""
        opts = self.options
        xs, ys = self._coordinates(grid)

        interior = np.zeros(grid.shape, dtype=bool)
        interior[1:-1, 1:-1] = True

        water_noise = self.noise.fbm_field(xs / opts.river_scale, ys / opts.river_scale, opts.river_octaves)
        already_water = np.isin(grid.tiles, [int(kind) for kind in WATER_TILES])
        river = interior & (water_noise > opts.river_low) & (water_noise < opts.river_high) & ~already_water

        carved = grid.apply(river, TileKind.WATER)
        logger.info("Rivers carved", cells=carved)
        return carved

    def add_swamps(self, grid: HexGrid) -> int:
        """Replace grass and light forest in the low-lying band with bog or swamp."""
        opts = self.options
        xs, ys = self._coordinates(grid)

        terrain = self._terrain_field(xs, ys)
        swamp_noise = self.noise.fbm_field(xs / opts.swamp_scale, ys / opts.swamp_scale, opts.swamp_octaves)
        eligible = np.isin(grid.tiles, [int(kind) for kind in SWAMP_SITES])
        swampy = (
            (terrain > opts.swamp_terrain_low)
            & (terrain < opts.swamp_terrain_high)
            & (swamp_noise > opts.swamp_noise_cut)
            & eligible
        )

        variant = self.noise.hash_field(xs * 19, ys * 23)
        swamps = np.select(
            [variant < opts.bog_cut, variant < opts.light_bog_cut],
            [TileKind.BOG, TileKind.LIGHT_BOG],
            default=TileKind.SWAMP,
        )

        added = grid.apply(swampy, swamps)
        logger.info("Swamps added", cells=added)
        return added


def generate_map(
    map_width: int,
    map_height: int,
    hex_width: float = 32,
    hex_height: float = 30,
    seed: Optional[float] = None,
    options: Optional[TerrainOptions] = None,
) -> HexGrid:
    """Create a grid and populate it in one step."""
    grid = HexGrid(map_width, map_height, hex_width, hex_height)
    return TerrainGenerator(seed, options).generate(grid)
