"""Pixel transforms: thresholding, ordered and random dithering, error diffusion."""

from .diffusion import (
    ErrorBuffer,
    binary_diffusion,
    diffuse,
    floyd_steinberg,
    kernel_diffusion,
    palette_diffusion,
)
from .dither import BAYER_8X8, ordered_bayer, palette_quantize, random_dither, threshold
from .kernels import Kernel
from .luminance import BT601, BT709, LuminanceWeights, luminance
from .palette import color_distance, nearest_color, nearest_palette_index, resolve_palette
from .pipeline import (
    BinaryDiffusion,
    FloydSteinberg,
    KernelDiffusion,
    Ordered,
    PaletteDiffusion,
    PaletteQuantize,
    RandomDither,
    Threshold,
    Transform,
    apply_transform,
)

__all__ = [
    "ErrorBuffer",
    "binary_diffusion",
    "diffuse",
    "floyd_steinberg",
    "kernel_diffusion",
    "palette_diffusion",
    "BAYER_8X8",
    "ordered_bayer",
    "palette_quantize",
    "random_dither",
    "threshold",
    "Kernel",
    "BT601",
    "BT709",
    "LuminanceWeights",
    "luminance",
    "color_distance",
    "nearest_color",
    "nearest_palette_index",
    "resolve_palette",
    "BinaryDiffusion",
    "FloydSteinberg",
    "KernelDiffusion",
    "Ordered",
    "PaletteDiffusion",
    "PaletteQuantize",
    "RandomDither",
    "Threshold",
    "Transform",
    "apply_transform",
]
