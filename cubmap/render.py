"""Loading wall textures and drawing the map and background."""

from __future__ import annotations

from typing import Sequence

from cubmap.config import TILE_SIZE, Config
from cubmap.image import Canvas, Image
from cubmap.xpm import XpmError, xpm_file_to_image

SKY_COLOR = 0xFFFFFF
GROUND_COLOR = 0x000000
_WALL = "1"


def load_textures(config: Config) -> list[Image]:
    """Load the north, south, west and east textures, in that order."""
    textures = []
    for path in (config.no_path, config.so_path, config.we_path, config.ea_path):
        if path is None:
            raise XpmError("load failed: texture path missing")
        try:
            textures.append(xpm_file_to_image(path))
        except XpmError as err:
            raise XpmError(f"load failed: {path}") from err
    return textures


def draw_tile(canvas: Canvas, x: int, y: int, image: Image) -> None:
    """Draw ``image`` on the map cell at column ``x``, row ``y``."""
    canvas.put_image(image, x * TILE_SIZE, y * TILE_SIZE)


def render_map(canvas: Canvas, grid: Sequence[str], texture: Image) -> None:
    """Draw ``texture`` on every wall cell of ``grid``."""
    for y, row in enumerate(grid):
        for x, tile in enumerate(row):
            if tile == _WALL:
                draw_tile(canvas, x, y, texture)


def paint_background(canvas: Canvas) -> Canvas:
    """Fill the upper half (and the middle row) white and the rest black."""
    horizon = canvas.height // 2
    for y in range(canvas.height):
        color = GROUND_COLOR if y > horizon else SKY_COLOR
        for x in range(canvas.width):
            canvas.pixel_put(x, y, color)
    return canvas