import pytest

from dither_engine.processing.kernels import (
    ATKINSON,
    FLOYD_STEINBERG,
    HALF_RIGHT_HALF_DOWN,
    JARVIS_JUDICE_NINKE,
    Kernel,
    total_weight,
)


@pytest.mark.parametrize(
    "taps", [HALF_RIGHT_HALF_DOWN, FLOYD_STEINBERG, JARVIS_JUDICE_NINKE, ATKINSON]
)
def test_taps_only_point_forward_in_scan_order(taps) -> None:
    for dx, dy, _ in taps:
        assert dy > 0 or (dy == 0 and dx > 0)


def test_conserving_kernels_sum_to_one() -> None:
    assert total_weight(HALF_RIGHT_HALF_DOWN) == pytest.approx(1.0)
    assert total_weight(FLOYD_STEINBERG) == pytest.approx(1.0)
    assert total_weight(JARVIS_JUDICE_NINKE) == pytest.approx(1.0)


def test_atkinson_drops_a_quarter() -> None:
    assert len(ATKINSON) == 6
    assert total_weight(ATKINSON) == pytest.approx(0.75)


def test_jarvis_spans_two_rows_and_columns() -> None:
    assert len(JARVIS_JUDICE_NINKE) == 12
    assert {dy for _, dy, _ in JARVIS_JUDICE_NINKE} == {0, 1, 2}
    assert {dx for dx, _, _ in JARVIS_JUDICE_NINKE} == {-2, -1, 0, 1, 2}


@pytest.mark.parametrize(
    "name, expected",
    [
        ("floyd", Kernel.FLOYD),
        ("jarvis", Kernel.JARVIS),
        ("Atkinson ", Kernel.ATKINSON),
        ("stucki", Kernel.FLOYD),
        ("", Kernel.FLOYD),
        (None, Kernel.FLOYD),
    ],
)
def test_kernel_from_name(name, expected) -> None:
    assert Kernel.from_name(name) is expected


def test_kernel_members_expose_their_taps() -> None:
    assert Kernel.FLOYD.taps is FLOYD_STEINBERG
    assert Kernel.JARVIS.taps is JARVIS_JUDICE_NINKE
    assert Kernel.ATKINSON.taps is ATKINSON
