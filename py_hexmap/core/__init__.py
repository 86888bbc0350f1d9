"""
Core hex map generation functionality.
"""

from .noise import NoiseField, fbm, hash_2d, smooth, value_noise
from .tiles import TileKind, BiomeFamily, TILE_ATLAS_POSITIONS, TILE_NAMES, TILE_FAMILIES
from .atlas import AtlasDescriptor, SpriteRect, TileAtlas, LOW_RES_ATLAS
from .hex_grid import HexGrid, GridFrozenError, EMPTY_TILE
from .terrain_generator import TerrainGenerator, TerrainOptions, generate_map

__all__ = ['NoiseField', 'fbm', 'hash_2d', 'smooth', 'value_noise',
           'TileKind', 'BiomeFamily', 'TILE_ATLAS_POSITIONS', 'TILE_NAMES', 'TILE_FAMILIES',
           'AtlasDescriptor', 'SpriteRect', 'TileAtlas', 'LOW_RES_ATLAS',
           'HexGrid', 'GridFrozenError', 'EMPTY_TILE',
           'TerrainGenerator', 'TerrainOptions', 'generate_map']
