from __future__ import annotations

import logging
from typing import Callable, List, Sequence, Tuple

from PIL import Image

from ..config import BLACK, BUILTIN_PALETTE, WHITE, Color
from .kernels import FLOYD_STEINBERG, HALF_RIGHT_HALF_DOWN, Kernel, Taps, total_weight
from .luminance import BT709, LuminanceWeights, luminance_float
from .palette import nearest_color, resolve_palette

logger = logging.getLogger(__name__)

Channels = Tuple[float, float, float]
Quantizer = Callable[[Channels], Color]


class ErrorBuffer:
    """Per-pixel RGB error not yet applied, one accumulator per raster cell."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._cells: List[List[float]] = [[0.0, 0.0, 0.0] for _ in range(width * height)]

    def get(self, x: int, y: int) -> Channels:
        cell = self._cells[y * self.width + x]
        return cell[0], cell[1], cell[2]

    def deposit(self, x: int, y: int, error: Channels, weight: float) -> bool:
        if not (0 <= x < self.width and 0 <= y < self.height):
            return False
        cell = self._cells[y * self.width + x]
        cell[0] += error[0] * weight
        cell[1] += error[1] * weight
        cell[2] += error[2] * weight
        return True

    def spread(self, x: int, y: int, error: Channels, taps: Taps) -> float:
        """Distribute ``error`` from ``(x, y)`` and return the weight that stayed in bounds.

        Taps falling outside the raster are dropped, so edge pixels lose part
        of their error.
        """
        kept = 0.0
        for dx, dy, weight in taps:
            if self.deposit(x + dx, y + dy, error, weight):
                kept += weight
        return kept


def _clamp(value: float) -> float:
    return 0.0 if value < 0.0 else 255.0 if value > 255.0 else value


def diffuse(img: Image.Image, quantize: Quantizer, taps: Taps) -> Image.Image:
    """Error-diffuse ``img`` in raster order.

    Every tap must point forward in scan order (``dy > 0``, or ``dy == 0``
    with ``dx > 0``) so a pixel's error is complete before it is visited.
    """
    src = img.convert("RGB")
    width, height = src.size
    out = Image.new("RGB", (width, height))
    src_pixels = src.load()
    dst_pixels = out.load()
    errors = ErrorBuffer(width, height)

    for y in range(height):
        for x in range(width):
            r, g, b = src_pixels[x, y]
            er, eg, eb = errors.get(x, y)
            corrected = (_clamp(r + er), _clamp(g + eg), _clamp(b + eb))
            new = quantize(corrected)
            error = (
                corrected[0] - new[0],
                corrected[1] - new[1],
                corrected[2] - new[2],
            )
            errors.spread(x, y, error, taps)
            dst_pixels[x, y] = new

    logger.debug(
        "diffused %dx%d over %d taps carrying %.3f of each error",
        width,
        height,
        len(taps),
        total_weight(taps),
    )
    return out


def _palette_quantizer(colors: Sequence[Color]) -> Quantizer:
    def quantize(rgb: Channels) -> Color:
        return nearest_color(rgb, colors)

    return quantize


def binary_diffusion(
    img: Image.Image,
    light: Color = WHITE,
    dark: Color = BLACK,
    weights: LuminanceWeights = BT709,
) -> Image.Image:
    """Two-level diffusion with half the error going right and half going down."""

    def quantize(rgb: Channels) -> Color:
        return light if luminance_float(rgb, weights) / 255.0 > 0.5 else dark

    return diffuse(img, quantize, HALF_RIGHT_HALF_DOWN)


def palette_diffusion(
    img: Image.Image,
    n_colors: int,
    palette: Sequence[Color] = BUILTIN_PALETTE,
) -> Image.Image:
    colors = resolve_palette(n_colors, palette)
    return diffuse(img, _palette_quantizer(colors), HALF_RIGHT_HALF_DOWN)


def floyd_steinberg(
    img: Image.Image,
    n_colors: int,
    palette: Sequence[Color] = BUILTIN_PALETTE,
) -> Image.Image:
    colors = resolve_palette(n_colors, palette)
    return diffuse(img, _palette_quantizer(colors), FLOYD_STEINBERG)


def kernel_diffusion(
    img: Image.Image,
    n_colors: int,
    kernel: Kernel | str | None = Kernel.FLOYD,
    palette: Sequence[Color] = BUILTIN_PALETTE,
) -> Image.Image:
    """Palette diffusion with a kernel chosen by name or ``Kernel`` member.

    Unrecognised names fall back to Floyd-Steinberg.
    """
    if not isinstance(kernel, Kernel):
        kernel = Kernel.from_name(kernel)
    colors = resolve_palette(n_colors, palette)
    logger.debug("kernel diffusion with %s", kernel.value)
    return diffuse(img, _palette_quantizer(colors), kernel.taps)
