from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple

# (dx, dy, weight) relative to the pixel being quantized.
Tap = Tuple[int, int, float]
Taps = Tuple[Tap, ...]


HALF_RIGHT_HALF_DOWN: Taps = (
    (1, 0, 0.5),
    (0, 1, 0.5),
)

#         *   7
#     3   5   1      (/16)
FLOYD_STEINBERG: Taps = (
    (1, 0, 7 / 16),
    (-1, 1, 3 / 16),
    (0, 1, 5 / 16),
    (1, 1, 1 / 16),
)

#             *   7   5
#     3   5   7   5   3
#     1   3   5   3   1  (/48)
JARVIS_JUDICE_NINKE: Taps = (
    (1, 0, 7 / 48),
    (2, 0, 5 / 48),
    (-2, 1, 3 / 48),
    (-1, 1, 5 / 48),
    (0, 1, 7 / 48),
    (1, 1, 5 / 48),
    (2, 1, 3 / 48),
    (-2, 2, 1 / 48),
    (-1, 2, 3 / 48),
    (0, 2, 5 / 48),
    (1, 2, 3 / 48),
    (2, 2, 1 / 48),
)

# Only 6/8 of the error is passed on.
ATKINSON: Taps = (
    (1, 0, 1 / 8),
    (2, 0, 1 / 8),
    (-1, 1, 1 / 8),
    (0, 1, 1 / 8),
    (1, 1, 1 / 8),
    (0, 2, 1 / 8),
)


class Kernel(str, Enum):
    FLOYD = "floyd"
    JARVIS = "jarvis"
    ATKINSON = "atkinson"

    @property
    def taps(self) -> Taps:
        return _TAPS[self]

    @classmethod
    def from_name(cls, name: Optional[str]) -> "Kernel":
        """Look up a kernel by name; anything unrecognised means Floyd-Steinberg."""
        if name is None:
            return cls.FLOYD
        try:
            return cls(name.strip().lower())
        except ValueError:
            return cls.FLOYD


_TAPS = {
    Kernel.FLOYD: FLOYD_STEINBERG,
    Kernel.JARVIS: JARVIS_JUDICE_NINKE,
    Kernel.ATKINSON: ATKINSON,
}


def total_weight(taps: Taps) -> float:
    return sum(weight for _, _, weight in taps)
