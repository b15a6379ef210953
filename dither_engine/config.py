import logging
import os
from dataclasses import dataclass
from typing import Tuple

Color = Tuple[int, int, int]


@dataclass(frozen=True)
class DitherSettings:
    port: int
    log_level: str
    luminance: str
    default_mode: str
    default_colors: int
    default_kernel: str
    default_seuil: float
    max_pixels: int

    @classmethod
    def from_env(cls) -> "DitherSettings":
        return cls(
            port=int(os.getenv("PORT", "5600")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            luminance=os.getenv("LUMINANCE", "bt709").lower(),
            default_mode=os.getenv("DEFAULT_MODE", "floyd").lower(),
            default_colors=int(os.getenv("DEFAULT_COLORS", "8")),
            default_kernel=os.getenv("DEFAULT_KERNEL", "floyd").lower(),
            default_seuil=float(os.getenv("DEFAULT_SEUIL", "1.0")),
            max_pixels=int(os.getenv("MAX_PIXELS", "4000000")),
        )


SETTINGS = DitherSettings.from_env()


BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)

# Order matters: requests for N colors take the first N entries.
BUILTIN_PALETTE: Tuple[Color, ...] = (
    BLACK,
    WHITE,
    (255, 0, 0),
    (0, 255, 0),
    (0, 0, 255),
    (255, 255, 0),
    (0, 255, 255),
    (255, 0, 255),
)


def configure_logging() -> logging.Logger:
    logging.basicConfig(level=SETTINGS.log_level)
    return logging.getLogger("dither-engine")
