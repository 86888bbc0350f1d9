"""
Procedural hex tile map generation and rendering.
"""

from .config import ConfigurationError, Settings, load_settings
from .core import HexGrid, TerrainGenerator, TerrainOptions, TileKind, generate_map

__version__ = "0.1.0"

__all__ = ['ConfigurationError', 'Settings', 'load_settings',
           'HexGrid', 'TerrainGenerator', 'TerrainOptions', 'TileKind', 'generate_map']
