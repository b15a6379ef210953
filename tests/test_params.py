import dataclasses

import pytest

from dither_engine.config import BLACK, WHITE, DitherSettings
from dither_engine.params import (
    ParameterError,
    build_transform,
    check_settings,
    parse_color,
    parse_mode,
    parse_n_colors,
    parse_seed,
    parse_seuil,
)
from dither_engine.processing.kernels import Kernel
from dither_engine.processing.pipeline import (
    BinaryDiffusion,
    FloydSteinberg,
    KernelDiffusion,
    Ordered,
    PaletteDiffusion,
    PaletteQuantize,
    RandomDither,
    Threshold,
)

SETTINGS = DitherSettings(
    port=0,
    log_level="INFO",
    luminance="bt709",
    default_mode="floyd",
    default_colors=8,
    default_kernel="jarvis",
    default_seuil=0.75,
    max_pixels=1000,
)


def test_parse_color_accepts_spaces() -> None:
    assert parse_color("10, 20,30") == (10, 20, 30)


@pytest.mark.parametrize("text", ["1,2", "1,2,3,4", "a,b,c", "0,0,256", "-1,0,0", ""])
def test_parse_color_rejects_malformed(text: str) -> None:
    with pytest.raises(ParameterError):
        parse_color(text)


def test_parse_n_colors() -> None:
    assert parse_n_colors("12") == 12
    with pytest.raises(ParameterError):
        parse_n_colors("0")
    with pytest.raises(ParameterError):
        parse_n_colors("many")


def test_parse_seuil_bounds() -> None:
    assert parse_seuil("0") == 0.0
    assert parse_seuil("1") == 1.0
    with pytest.raises(ParameterError):
        parse_seuil("1.01")
    with pytest.raises(ParameterError):
        parse_seuil("x")


def test_parse_seed() -> None:
    assert parse_seed(None) is None
    assert parse_seed("") is None
    assert parse_seed("42") == 42
    with pytest.raises(ParameterError):
        parse_seed("4.2")


def test_parse_mode_defaults_and_rejects() -> None:
    assert parse_mode(None, SETTINGS) == "floyd"
    assert parse_mode(" Ordered ", SETTINGS) == "ordered"
    with pytest.raises(ParameterError):
        parse_mode("sepia", SETTINGS)


def test_parameter_error_is_value_error() -> None:
    assert issubclass(ParameterError, ValueError)


@pytest.mark.parametrize(
    "args, expected",
    [
        ({"mode": "threshold"}, Threshold(WHITE, BLACK)),
        ({"mode": "threshold", "light": "255,255,0", "dark": "0,0,128"}, Threshold((255, 255, 0), (0, 0, 128))),
        ({"mode": "diffusion"}, BinaryDiffusion()),
        ({"mode": "ordered"}, Ordered()),
        ({"mode": "random"}, RandomDither(0.75, None)),
        ({"mode": "random", "seuil": "0.5", "seed": "9"}, RandomDither(0.5, 9)),
        ({"mode": "palette", "colors": "3"}, PaletteQuantize(3)),
        ({"mode": "palette-diffusion"}, PaletteDiffusion(8)),
        ({}, FloydSteinberg(8)),
        ({"mode": "kernel", "colors": "4"}, KernelDiffusion(4, Kernel.JARVIS)),
        ({"mode": "kernel", "kernel": "atkinson"}, KernelDiffusion(8, Kernel.ATKINSON)),
        ({"mode": "kernel", "kernel": "bogus"}, KernelDiffusion(8, Kernel.FLOYD)),
    ],
)
def test_build_transform(args, expected) -> None:
    assert build_transform(args, SETTINGS) == expected


def test_build_transform_surfaces_bad_color() -> None:
    with pytest.raises(ParameterError):
        build_transform({"mode": "threshold", "light": "white"}, SETTINGS)


def test_check_settings_accepts_sane_defaults() -> None:
    check_settings(SETTINGS)


@pytest.mark.parametrize(
    "overrides",
    [{"default_colors": 0}, {"default_seuil": -0.1}, {"default_mode": "x"}, {"max_pixels": 0}],
)
def test_check_settings_rejects_bad_defaults(overrides) -> None:
    with pytest.raises(ParameterError):
        check_settings(dataclasses.replace(SETTINGS, **overrides))
