"""Turn query-string text into validated transform parameters."""

from __future__ import annotations

from typing import Mapping, Optional

from .config import BLACK, SETTINGS, WHITE, Color, DitherSettings
from .processing.kernels import Kernel
from .processing.pipeline import (
    BinaryDiffusion,
    FloydSteinberg,
    KernelDiffusion,
    Ordered,
    PaletteDiffusion,
    PaletteQuantize,
    RandomDither,
    Threshold,
    Transform,
)

MODES = (
    "threshold",
    "palette",
    "ordered",
    "random",
    "diffusion",
    "palette-diffusion",
    "floyd",
    "kernel",
)


class ParameterError(ValueError):
    """Raised when a request parameter cannot be turned into a valid value."""


def parse_color(text: str) -> Color:
    """Parse ``"R,G,B"`` into a color tuple."""
    parts = [part.strip() for part in text.split(",")]
    if len(parts) != 3:
        raise ParameterError(f"Expected R,G,B but got {text!r}")
    try:
        channels = tuple(int(part) for part in parts)
    except ValueError:
        raise ParameterError(f"Color channels must be integers: {text!r}") from None
    if any(channel < 0 or channel > 255 for channel in channels):
        raise ParameterError(f"Color channels must be within 0-255: {text!r}")
    return channels  # type: ignore[return-value]


def parse_n_colors(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise ParameterError(f"Palette size must be an integer: {text!r}") from None
    if value < 1:
        raise ParameterError(f"Palette size must be at least 1: {text!r}")
    return value


def parse_seuil(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise ParameterError(f"Noise scale must be a number: {text!r}") from None
    if not 0.0 <= value <= 1.0:
        raise ParameterError(f"Noise scale must be within [0, 1]: {text!r}")
    return value


def parse_seed(text: Optional[str]) -> Optional[int]:
    if text is None or text == "":
        return None
    try:
        return int(text)
    except ValueError:
        raise ParameterError(f"Seed must be an integer: {text!r}") from None


def parse_mode(text: Optional[str], settings: DitherSettings = SETTINGS) -> str:
    mode = (text or settings.default_mode).strip().lower()
    if mode not in MODES:
        raise ParameterError(f"Unknown mode {mode!r}; expected one of {', '.join(MODES)}")
    return mode


def build_transform(args: Mapping[str, str], settings: DitherSettings = SETTINGS) -> Transform:
    """Build the transform described by request ``args``.

    Missing values fall back to ``settings``. Kernel names are never rejected:
    unknown names select Floyd-Steinberg.
    """
    mode = parse_mode(args.get("mode"), settings)

    if mode in ("threshold", "diffusion"):
        light = parse_color(args["light"]) if args.get("light") else WHITE
        dark = parse_color(args["dark"]) if args.get("dark") else BLACK
        return Threshold(light, dark) if mode == "threshold" else BinaryDiffusion(light, dark)
    if mode == "ordered":
        return Ordered()
    if mode == "random":
        seuil = parse_seuil(args["seuil"]) if args.get("seuil") else settings.default_seuil
        return RandomDither(seuil, parse_seed(args.get("seed")))

    n_colors = parse_n_colors(args["colors"]) if args.get("colors") else settings.default_colors
    if mode == "palette":
        return PaletteQuantize(n_colors)
    if mode == "palette-diffusion":
        return PaletteDiffusion(n_colors)
    if mode == "floyd":
        return FloydSteinberg(n_colors)
    return KernelDiffusion(n_colors, Kernel.from_name(args.get("kernel") or settings.default_kernel))


def check_settings(settings: DitherSettings) -> None:
    """Reject defaults that would make every defaulted request fail."""
    parse_mode(None, settings)
    if settings.default_colors < 1:
        raise ParameterError(f"DEFAULT_COLORS must be at least 1, got {settings.default_colors}")
    if not 0.0 <= settings.default_seuil <= 1.0:
        raise ParameterError(f"DEFAULT_SEUIL must be within [0, 1], got {settings.default_seuil}")
    if settings.max_pixels < 1:
        raise ParameterError(f"MAX_PIXELS must be at least 1, got {settings.max_pixels}")
