from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Union

from PIL import Image

from ..config import BLACK, BUILTIN_PALETTE, WHITE, Color
from .diffusion import binary_diffusion, floyd_steinberg, kernel_diffusion, palette_diffusion
from .dither import ordered_bayer, palette_quantize, random_dither, threshold
from .kernels import Kernel
from .luminance import BT709, LuminanceWeights

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Threshold:
    light: Color = WHITE
    dark: Color = BLACK


@dataclass(frozen=True)
class PaletteQuantize:
    n_colors: int


@dataclass(frozen=True)
class Ordered:
    pass


@dataclass(frozen=True)
class RandomDither:
    seuil: float = 1.0
    seed: Optional[int] = None


@dataclass(frozen=True)
class BinaryDiffusion:
    light: Color = WHITE
    dark: Color = BLACK


@dataclass(frozen=True)
class PaletteDiffusion:
    n_colors: int


@dataclass(frozen=True)
class FloydSteinberg:
    n_colors: int


@dataclass(frozen=True)
class KernelDiffusion:
    n_colors: int
    kernel: Kernel = Kernel.FLOYD


Transform = Union[
    Threshold,
    PaletteQuantize,
    Ordered,
    RandomDither,
    BinaryDiffusion,
    PaletteDiffusion,
    FloydSteinberg,
    KernelDiffusion,
]


def apply_transform(
    img: Image.Image,
    transform: Transform,
    palette: Sequence[Color] = BUILTIN_PALETTE,
    weights: LuminanceWeights = BT709,
) -> Image.Image:
    """Run exactly one dithering strategy over ``img`` and return the result."""
    logger.debug("applying %r to %dx%d raster", transform, img.size[0], img.size[1])

    if isinstance(transform, Threshold):
        return threshold(img, transform.light, transform.dark, weights=weights)
    if isinstance(transform, PaletteQuantize):
        return palette_quantize(img, transform.n_colors, palette)
    if isinstance(transform, Ordered):
        return ordered_bayer(img, weights=weights)
    if isinstance(transform, RandomDither):
        return random_dither(img, transform.seuil, transform.seed, weights=weights)
    if isinstance(transform, BinaryDiffusion):
        return binary_diffusion(img, transform.light, transform.dark, weights=weights)
    if isinstance(transform, PaletteDiffusion):
        return palette_diffusion(img, transform.n_colors, palette)
    if isinstance(transform, FloydSteinberg):
        return floyd_steinberg(img, transform.n_colors, palette)
    if isinstance(transform, KernelDiffusion):
        return kernel_diffusion(img, transform.n_colors, transform.kernel, palette)
    raise TypeError(f"Unsupported transform: {transform!r}")
