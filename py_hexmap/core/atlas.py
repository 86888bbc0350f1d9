"""
Sprite atlas description and loading.

The generator never touches images; only the renderer needs pixels.
Decoding is left to Pillow, and the rest of the package only asks the
atlas whether it is_ready() before drawing.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, NamedTuple, Optional

import structlog
from PIL import Image

from .tiles import TileKind, atlas_position

logger = structlog.get_logger()


class SpriteRect(NamedTuple):
    """Source rectangle of one sprite inside the atlas image."""

    x: int
    y: int
    width: int
    height: int

    @property
    def box(self):
        """Pillow crop box (left, upper, right, lower)."""
        return (self.x, self.y, self.x + self.width, self.y + self.height)


@dataclass(frozen=True)
class AtlasDescriptor:
    """Sprite sheet layout."""

    image_path: str
    sprite_width: int  # Pixel width of one sprite
    sprite_height: int  # Pixel height of one sprite
    rows: int
    columns: int
    offset_x: int = 0  # Sprite registration offset relative to the hex anchor
    offset_y: int = 0

    def sprite_rect(self, row: int, column: int) -> SpriteRect:
        """Locate the sprite at (row, column) in the sheet."""
        return SpriteRect(
            x=column * self.sprite_width,
            y=row * self.sprite_height,
            width=self.sprite_width,
            height=self.sprite_height,
        )

    def tile_rect(self, kind: TileKind) -> SpriteRect:
        return self.sprite_rect(*atlas_position(kind))

    @property
    def image_size(self):
        return (self.columns * self.sprite_width, self.rows * self.sprite_height)


# Sprites are 48px tall on 30px hexes and extend 16px upwards
LOW_RES_ATLAS = AtlasDescriptor(
    image_path="img/fantasyhextiles_v3.png",
    sprite_width=32,
    sprite_height=48,
    rows=6,
    columns=8,
    offset_x=0,
    offset_y=-16,
)


class TileAtlas:
    """A descriptor plus the decoded sheet, once it is available."""

    def __init__(self, descriptor: AtlasDescriptor = LOW_RES_ATLAS):
        self.descriptor = descriptor
        self.image: Optional[Image.Image] = None
        self._sprites: Dict[TileKind, Image.Image] = {}

    @classmethod
    def from_image(cls, descriptor: AtlasDescriptor, image: Image.Image) -> "TileAtlas":
        """Wrap an image that has already been decoded."""
        atlas = cls(descriptor)
        atlas.image = image.convert("RGBA")
        return atlas

    def load(self, path: Optional[str] = None) -> bool:
        """
        Decode the sheet from disk.

        A missing or unreadable file leaves the atlas not ready; callers
        surface that to the user, it is not an error here.

        Returns:
            True if the image was loaded
        """
        p = Path(path or self.descriptor.image_path)
        try:
            with Image.open(p) as img:
                self.image = img.convert("RGBA")
        except OSError as e:  # includes FileNotFoundError and UnidentifiedImageError
            logger.warning("Tile atlas could not be loaded", path=str(p), error=str(e))
            self.image = None
            return False

        self._sprites.clear()
        if self.image.size != self.descriptor.image_size:
            logger.warning(
                "Tile atlas size does not match descriptor",
                path=str(p),
                actual=self.image.size,
                expected=self.descriptor.image_size,
            )
        logger.info("Tile atlas loaded", path=str(p), size=self.image.size)
        return True

    def is_ready(self) -> bool:
        return self.image is not None

    def sprite(self, kind: TileKind) -> Image.Image:
        """Cropped sprite for a tile kind; the atlas must be ready."""
        if self.image is None:
            raise RuntimeError("Tile atlas image is not loaded")
        kind = TileKind(kind)
        sprite = self._sprites.get(kind)
        if sprite is None:
            sprite = self.image.crop(self.descriptor.tile_rect(kind).box)
            self._sprites[kind] = sprite
        return sprite
