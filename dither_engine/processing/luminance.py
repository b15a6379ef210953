from __future__ import annotations

from typing import NamedTuple, Tuple


class LuminanceWeights(NamedTuple):
    red: float
    green: float
    blue: float


# ITU-R BT.709, the default. BT.601 is the older broadcast weighting.
BT709 = LuminanceWeights(0.2126, 0.7152, 0.0722)
BT601 = LuminanceWeights(0.299, 0.587, 0.114)

WEIGHTS_BY_NAME = {
    "bt709": BT709,
    "bt601": BT601,
}


def luminance_float(rgb: Tuple[float, float, float], weights: LuminanceWeights = BT709) -> float:
    r, g, b = rgb
    return weights.red * r + weights.green * g + weights.blue * b


def luminance(rgb: Tuple[int, int, int], weights: LuminanceWeights = BT709) -> int:
    """Return the 8-bit brightness of ``rgb``, truncated toward zero."""
    # Round away float noise first so pure white stays 255.
    return int(round(luminance_float(rgb, weights), 6))


def weights_for(name: str) -> LuminanceWeights:
    try:
        return WEIGHTS_BY_NAME[name.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown luminance model: {name!r}") from None
