"""
Command line entry point: generate a hex map and render it to PNG.

Usage:
    py-hexmap [--width 64] [--height 48] [--seed 1234.5] [--output map.png]

Options not given on the command line fall back to HEXMAP_* environment
variables and then to the defaults in py_hexmap.config.
"""

import argparse
import logging
import sys
from typing import List, Optional

import structlog

from .config import ConfigurationError, Settings, load_settings
from .core.atlas import LOW_RES_ATLAS, TileAtlas
from .core.hex_grid import HexGrid
from .core.map_statistics import summarize
from .core.terrain_generator import TerrainGenerator
from .render.renderer import HexMapRenderer

logger = structlog.get_logger()


def configure_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Route structlog through stdlib logging with the chosen renderer."""
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level.upper())
    renderer = (
        structlog.processors.JSONRenderer()
        if fmt == "json"
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate and render a procedural hex map")
    parser.add_argument("--width", type=int, dest="map_width", help="Map width in hex cells")
    parser.add_argument("--height", type=int, dest="map_height", help="Map height in hex cells")
    parser.add_argument("--hex-width", type=int, help="Hex width in pixels")
    parser.add_argument("--hex-height", type=int, help="Hex height in pixels")
    parser.add_argument("--seed", type=float, help="Noise seed (random if omitted)")
    parser.add_argument("--atlas", dest="atlas_path", help="Path to the tile sprite atlas")
    parser.add_argument("--output", dest="output_path", help="Where to write the rendered PNG")
    parser.add_argument("--log-level", help="Logging level")
    parser.add_argument("--log-format", choices=["plain", "json"], help="Logging format")
    return parser


def run(settings: Settings) -> HexGrid:
    """Generate, summarize and render one map according to settings."""
    grid = HexGrid(settings.map_width, settings.map_height, settings.hex_width, settings.hex_height)
    generator = TerrainGenerator(seed=settings.seed)
    generator.generate(grid)
    logger.info("Map summary", seed=generator.seed, **summarize(grid))

    atlas = TileAtlas(LOW_RES_ATLAS)
    if not atlas.load(settings.atlas_path):
        logger.warning("Rendering without tiles, atlas is not ready", path=settings.atlas_path)

    frame = HexMapRenderer(grid, atlas).render()
    frame.save(settings.output_path)
    logger.info("Map rendered", output=settings.output_path, size=frame.size)
    return grid


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(**vars(args))
    except ConfigurationError as e:
        configure_logging()
        logger.error("Invalid configuration", error=str(e))
        return 2

    configure_logging(settings.log_level, settings.log_format)

    try:
        run(settings)
    except ConfigurationError as e:
        logger.error("Invalid configuration", error=str(e))
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
