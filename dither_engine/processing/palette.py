from __future__ import annotations

from typing import Sequence, Tuple

from ..config import BUILTIN_PALETTE, Color

Channels = Tuple[float, float, float]


def color_distance(a: Channels, b: Channels) -> float:
    """Squared Euclidean distance in RGB space."""
    dr = a[0] - b[0]
    dg = a[1] - b[1]
    db = a[2] - b[2]
    return dr * dr + dg * dg + db * db


def nearest_palette_index(rgb: Channels, palette: Sequence[Color]) -> int:
    """Index of the palette entry closest to ``rgb``; ties go to the earliest entry."""
    if not palette:
        raise ValueError("Cannot search an empty palette")

    best_index = 0
    best_distance = float("inf")
    for index, entry in enumerate(palette):
        distance = color_distance(rgb, entry)
        if distance < best_distance:
            best_distance = distance
            best_index = index
    return best_index


def nearest_color(rgb: Channels, palette: Sequence[Color]) -> Color:
    return tuple(palette[nearest_palette_index(rgb, palette)])


def resolve_palette(n_colors: int, palette: Sequence[Color] = BUILTIN_PALETTE) -> Tuple[Color, ...]:
    """Return the first ``n_colors`` entries of ``palette``.

    Oversized requests are clamped to the palette length. A request for fewer
    than one color, or an empty palette, is a caller error.
    """
    if n_colors < 1:
        raise ValueError(f"Palette size must be at least 1, got {n_colors}")
    if not palette:
        raise ValueError("Palette must contain at least one color")
    return tuple(tuple(color) for color in palette[: min(n_colors, len(palette))])
