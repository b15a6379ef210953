from __future__ import annotations

import logging
import random
from typing import Sequence, Union

from PIL import Image

from ..config import BLACK, BUILTIN_PALETTE, WHITE, Color
from .luminance import BT709, LuminanceWeights, luminance
from .palette import nearest_palette_index, resolve_palette

logger = logging.getLogger(__name__)

BAYER_8X8 = (
    (0, 48, 12, 60, 3, 51, 15, 63),
    (32, 16, 44, 28, 35, 19, 47, 31),
    (8, 56, 4, 52, 11, 59, 7, 55),
    (40, 24, 36, 20, 43, 27, 39, 23),
    (2, 50, 14, 62, 1, 49, 13, 61),
    (34, 18, 46, 30, 33, 17, 45, 29),
    (10, 58, 6, 54, 9, 57, 5, 53),
    (42, 26, 38, 22, 41, 25, 37, 21),
)

# Bayer indices 0..63 spread over 0..255.
BAYER_THRESHOLDS = tuple(tuple(int((value + 0.5) * 4) for value in row) for row in BAYER_8X8)

THRESHOLD = 128


def threshold(
    img: Image.Image,
    light: Color = WHITE,
    dark: Color = BLACK,
    weights: LuminanceWeights = BT709,
) -> Image.Image:
    src = img.convert("RGB")
    width, height = src.size
    out = Image.new("RGB", (width, height))
    src_pixels = src.load()
    dst_pixels = out.load()
    for y in range(height):
        for x in range(width):
            dst_pixels[x, y] = light if luminance(src_pixels[x, y], weights) >= THRESHOLD else dark
    return out


def palette_quantize(
    img: Image.Image,
    n_colors: int,
    palette: Sequence[Color] = BUILTIN_PALETTE,
) -> Image.Image:
    colors = resolve_palette(n_colors, palette)
    src = img.convert("RGB")
    width, height = src.size
    out = Image.new("RGB", (width, height))
    src_pixels = src.load()
    dst_pixels = out.load()
    # Flat images repeat colors heavily; remember each lookup.
    cache = {}
    for y in range(height):
        for x in range(width):
            rgb = src_pixels[x, y]
            index = cache.get(rgb)
            if index is None:
                index = cache[rgb] = nearest_palette_index(rgb, colors)
            dst_pixels[x, y] = colors[index]
    logger.debug("palette quantize %dx%d onto %d colors", width, height, len(colors))
    return out


def ordered_bayer(
    img: Image.Image,
    light: Color = WHITE,
    dark: Color = BLACK,
    weights: LuminanceWeights = BT709,
) -> Image.Image:
    """Black/white ordered dither against the tiled 8x8 Bayer matrix."""
    src = img.convert("RGB")
    width, height = src.size
    out = Image.new("RGB", (width, height))
    src_pixels = src.load()
    dst_pixels = out.load()
    for y in range(height):
        row = BAYER_THRESHOLDS[y % 8]
        for x in range(width):
            dst_pixels[x, y] = light if luminance(src_pixels[x, y], weights) > row[x % 8] else dark
    return out


def random_dither(
    img: Image.Image,
    seuil: float = 1.0,
    rng: Union[random.Random, int, None] = None,
    light: Color = WHITE,
    dark: Color = BLACK,
    weights: LuminanceWeights = BT709,
) -> Image.Image:
    """Per-pixel random threshold.

    A pixel turns ``light`` when its luminance, normalised to [0, 1], exceeds
    one uniform draw scaled by ``seuil``. ``rng`` may be a ``random.Random``,
    a seed, or ``None`` for a fresh stream.
    """
    if not 0.0 <= seuil <= 1.0:
        raise ValueError(f"seuil must be within [0, 1], got {seuil}")
    if not isinstance(rng, random.Random):
        rng = random.Random(rng)

    src = img.convert("RGB")
    width, height = src.size
    out = Image.new("RGB", (width, height))
    src_pixels = src.load()
    dst_pixels = out.load()
    draw = rng.random
    for y in range(height):
        for x in range(width):
            level = luminance(src_pixels[x, y], weights) / 255.0
            dst_pixels[x, y] = light if level > draw() * seuil else dark
    return out

