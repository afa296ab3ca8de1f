from __future__ import annotations

import pytest

from aetherbox_ui.layout_engine import (
    CLOSE_BUTTON_OFFSET_X,
    NAV_PANEL_WIDTH,
    compute_bottom_control_position,
    compute_centered_offset,
    compute_close_control,
    compute_columns,
    compute_header_size,
)


def test_header_height_is_clamped_and_width_recomputed() -> None:
    assert compute_header_size(300, 2.0, 100) == (200, 100)


def test_header_fits_width_when_under_max_height() -> None:
    assert compute_header_size(100, 2.0, 100) == (100, 50)


def test_header_exactly_at_max_height_is_not_clamped() -> None:
    size = compute_header_size(200, 2.0, 100)

    assert size.width == pytest.approx(200)
    assert size.height == pytest.approx(100)


@pytest.mark.parametrize("aspect_ratio", [0.0, -1.5])
def test_header_rejects_non_positive_aspect_ratio(aspect_ratio: float) -> None:
    with pytest.raises(ValueError):
        compute_header_size(100, aspect_ratio, 100)


def test_centered_offset() -> None:
    assert compute_centered_offset(150, 50) == pytest.approx(50)
    assert compute_centered_offset(40, 50) == pytest.approx(-5)


def test_centered_offset_rejects_negative_widths() -> None:
    with pytest.raises(ValueError):
        compute_centered_offset(-1, 10)
    with pytest.raises(ValueError):
        compute_centered_offset(10, -1)


def test_bottom_control_position() -> None:
    assert compute_bottom_control_position(500, 50, 8) == 442


def test_columns_use_scaled_nav_width_and_give_rest_to_body() -> None:
    columns = compute_columns((8.0, 8.0, 584.0, 484.0), 1.0, 8.0)

    assert columns.nav == (8.0, 8.0, NAV_PANEL_WIDTH, 484.0)
    assert columns.body == (166.0, 8.0, 426.0, 484.0)


def test_columns_scale_and_never_go_negative() -> None:
    columns = compute_columns((8.0, 8.0, 200.0, 300.0), 2.0, 8.0)

    assert columns.nav[2] == pytest.approx(200.0)
    assert columns.body[2] == 0.0


def test_close_control_is_centered_with_offset_and_bottom_anchored() -> None:
    placement = compute_close_control(150.0, 500.0, 1.0, 4.0)

    assert placement.size == pytest.approx(50.0)
    assert placement.x == pytest.approx(50.0 + CLOSE_BUTTON_OFFSET_X)
    assert placement.y == pytest.approx(446.0)


def test_close_control_scales_with_global_scale() -> None:
    placement = compute_close_control(300.0, 1000.0, 2.0, 8.0)

    assert placement.size == pytest.approx(100.0)
    assert placement.x == pytest.approx(100.0 + CLOSE_BUTTON_OFFSET_X)
    assert placement.y == pytest.approx(892.0)
