from __future__ import annotations

import io
from dataclasses import asdict

from flask import Flask, jsonify, request
from PIL import Image, UnidentifiedImageError

from .config import BUILTIN_PALETTE, SETTINGS, DitherSettings, configure_logging
from .params import MODES, ParameterError, build_transform, check_settings
from .processing.kernels import Kernel
from .processing.luminance import weights_for
from .processing.pipeline import apply_transform
from .responses import send_png

APP_VERSION = "1.0.0"


class RasterTooLarge(Exception):
    """Raised when an upload declares more pixels than the service accepts."""


def read_upload(max_pixels: int) -> Image.Image:
    """Decode the uploaded image from the ``image`` form field or the raw body.

    The declared size is checked before any pixel data is decoded.
    """
    upload = request.files.get("image")
    data = upload.read() if upload is not None else request.get_data()
    if not data:
        raise ParameterError("No image supplied")
    try:
        img = Image.open(io.BytesIO(data))
    except Image.DecompressionBombError as exc:
        raise RasterTooLarge(str(exc)) from None
    except (UnidentifiedImageError, OSError) as exc:
        raise ParameterError(f"Could not decode image: {exc}") from None

    width, height = img.size
    if width * height > max_pixels:
        raise RasterTooLarge(f"Image too large: {width}x{height}")

    try:
        img.load()
    except OSError as exc:
        raise ParameterError(f"Could not decode image: {exc}") from None
    return img.convert("RGB")


def create_app(settings: DitherSettings = SETTINGS) -> Flask:
    logger = configure_logging()
    weights = weights_for(settings.luminance)
    check_settings(settings)
    app = Flask(__name__)

    @app.route("/dither", methods=["POST"])
    def dither():
        try:
            transform = build_transform(request.args, settings)
            src = read_upload(settings.max_pixels)
        except ParameterError as exc:
            logger.warning("rejected request: %s", exc)
            return (str(exc), 400)
        except RasterTooLarge as exc:
            logger.warning("rejected raster above %d pixels: %s", settings.max_pixels, exc)
            return (str(exc), 413)

        width, height = src.size
        logger.info("dithering %dx%d with %r", width, height, transform)
        out = apply_transform(src, transform, palette=BUILTIN_PALETTE, weights=weights)
        return send_png(out)

    @app.route("/modes")
    def modes():
        return jsonify(modes=list(MODES), kernels=[kernel.value for kernel in Kernel])

    @app.route("/health")
    def health():
        return jsonify(ok=True, version=APP_VERSION, luminance=settings.luminance)

    @app.route("/settings")
    def settings_view():
        return jsonify(asdict(settings))

    return app
