"""Classical dithering and palette quantization for RGB rasters."""

from .app import APP_VERSION, create_app
from . import processing

__version__ = APP_VERSION

__all__ = ["APP_VERSION", "__version__", "create_app", "processing"]
