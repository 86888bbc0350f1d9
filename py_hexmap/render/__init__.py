"""
Rendering of generated hex maps.
"""

from .renderer import HexMapRenderer, BACKGROUND_COLOR

__all__ = ['HexMapRenderer', 'BACKGROUND_COLOR']
