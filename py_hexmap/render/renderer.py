"""
Sprite renderer for generated hex maps.

Draws every populated cell of a frozen HexGrid onto a Pillow canvas,
one sprite per cell, using the grid's screen placement and the atlas'
registration offset.
"""

import math
from typing import Callable, Optional, Tuple

import structlog
from PIL import Image

from ..core.atlas import TileAtlas
from ..core.hex_grid import HexGrid

logger = structlog.get_logger()

BACKGROUND_COLOR = (34, 34, 34, 255)  # #222


class HexMapRenderer:
    """Renders a HexGrid with sprites from a TileAtlas."""

    def __init__(self, grid: HexGrid, atlas: TileAtlas, background=BACKGROUND_COLOR):
        self.grid = grid
        self.atlas = atlas
        self.background = background
        self.frames_rendered = 0

    def canvas_size(self) -> Tuple[int, int]:
        d = self.atlas.descriptor
        return self.grid.pixel_size(d.sprite_width, d.sprite_height, d.offset_x, d.offset_y)

    def new_canvas(self) -> Image.Image:
        return Image.new("RGBA", self.canvas_size(), self.background)

    def render(self, canvas: Optional[Image.Image] = None) -> Image.Image:
        """
        Draw one frame.

        The canvas is cleared to the background colour first. Cells without
        a tile are skipped, and nothing is drawn while the atlas is not ready.

        Args:
            canvas: RGBA image to draw into; a correctly sized one is created if omitted

        Returns:
            The canvas that was drawn on
        """
        if canvas is None:
            canvas = self.new_canvas()
        else:
            canvas.paste(self.background, (0, 0, canvas.width, canvas.height))

        self.frames_rendered += 1
        if not self.atlas.is_ready():
            return canvas

        offset_x = self.atlas.descriptor.offset_x
        offset_y = self.atlas.descriptor.offset_y
        drawn = 0
        for row, column, kind in self.grid.iter_tiles():
            x, y = self.grid.screen_position(row, column, offset_x, offset_y)
            sprite = self.atlas.sprite(kind)
            # paste clips sprites hanging off the canvas edges
            canvas.paste(sprite, (int(math.floor(x)), int(math.floor(y))), sprite)
            drawn += 1

        if self.frames_rendered == 1:
            logger.info("First frame rendered", sprites=drawn, size=canvas.size)
        return canvas

    def animate(
        self,
        on_frame: Callable[[Image.Image], Optional[bool]],
        max_frames: Optional[int] = None,
        canvas: Optional[Image.Image] = None,
    ) -> int:
        """
        Render frames until on_frame returns False or max_frames is reached.

        The same canvas is redrawn every frame.

        Returns:
            Number of frames rendered
        """
        if canvas is None:
            canvas = self.new_canvas()
        frames = 0
        while max_frames is None or frames < max_frames:
            self.render(canvas)
            frames += 1
            if on_frame(canvas) is False:
                break
        return frames
