from __future__ import annotations

import pytest

from aetherbox_ui.viewport_geometry import is_out_of_bounds

VIEWPORT = (1920.0, 1080.0)


@pytest.mark.parametrize(
    "top_left, size",
    [
        ((1.0, 1.0), (300.0, 500.0)),
        ((100.0, 100.0), (300.0, 500.0)),
        ((1619.0, 579.0), (300.0, 500.0)),
    ],
)
def test_window_fully_inside_viewport_is_in_bounds(top_left, size) -> None:
    assert is_out_of_bounds(top_left, size, VIEWPORT, False) is False


@pytest.mark.parametrize(
    "top_left, size",
    [
        ((0.0, 100.0), (300.0, 500.0)),  # touching left edge
        ((100.0, 0.0), (300.0, 500.0)),  # touching top edge
        ((-50.0, 100.0), (300.0, 500.0)),
        ((1620.0, 100.0), (300.0, 500.0)),  # right edge lands exactly on the viewport width
        ((100.0, 580.0), (300.0, 500.0)),  # bottom edge lands exactly on the viewport height
        ((1800.0, 900.0), (300.0, 500.0)),
    ],
)
def test_window_touching_or_crossing_an_edge_is_out_of_bounds(top_left, size) -> None:
    assert is_out_of_bounds(top_left, size, VIEWPORT, False) is True


@pytest.mark.parametrize(
    "top_left",
    [(-500.0, -500.0), (0.0, 0.0), (100.0, 100.0), (5000.0, 5000.0)],
)
def test_multi_viewport_mode_is_always_in_bounds(top_left) -> None:
    assert is_out_of_bounds(top_left, (300.0, 500.0), VIEWPORT, True) is False
