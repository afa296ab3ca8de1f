"""Layout arithmetic for the main window.

All helpers are pure and frame-local. Sizes given in unscaled pixels are
multiplied by the host's global UI scale by the caller or by the column/close
helpers below.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Tuple

Rect = Tuple[float, float, float, float]

NAV_PANEL_WIDTH = 150.0
MAX_HEADER_HEIGHT = 100.0
CLOSE_BUTTON_SIZE = 50.0
# Horizontal nudge for the close button; the toolkit's cursor origin includes
# the window padding, which the centred offset does not.
CLOSE_BUTTON_OFFSET_X = 9.5

DEFAULT_WINDOW_SIZE = (300, 500)
MIN_WINDOW_SIZE = (250, 300)
MAX_WINDOW_SIZE = (5000, 5000)


class HeaderSize(NamedTuple):
    width: float
    height: float


class ControlPlacement(NamedTuple):
    x: float
    y: float
    size: float


@dataclass(frozen=True)
class ColumnRegions:
    nav: Rect
    body: Rect


def compute_header_size(available_width: float, aspect_ratio: float, max_height: float) -> HeaderSize:
    """Fit the header image to ``available_width``, then clamp its height."""
    if aspect_ratio <= 0:
        raise ValueError(f"aspect_ratio must be positive, got {aspect_ratio!r}")
    if available_width < 0:
        raise ValueError(f"available_width must be non-negative, got {available_width!r}")
    width = float(available_width)
    height = width / aspect_ratio
    if height > max_height:
        height = float(max_height)
        width = height * aspect_ratio
    return HeaderSize(width, height)


def compute_centered_offset(container_width: float, element_width: float) -> float:
    if container_width < 0 or element_width < 0:
        raise ValueError(f"widths must be non-negative, got container={container_width!r} element={element_width!r}")
    return (container_width - element_width) / 2


def compute_bottom_control_position(window_height: float, control_size: float, item_spacing: float) -> float:
    return window_height - control_size - item_spacing


def compute_columns(content_rect: Rect, global_scale: float, item_spacing_x: float) -> ColumnRegions:
    """Split the content area into the fixed nav column and the flexible body."""
    x, y, width, height = content_rect
    nav_width = min(NAV_PANEL_WIDTH * global_scale, width)
    body_x = x + nav_width + item_spacing_x
    body_width = max(0.0, width - nav_width - item_spacing_x)
    return ColumnRegions(
        nav=(x, y, nav_width, height),
        body=(body_x, y, body_width, height),
    )


def compute_close_control(
    column_width: float,
    window_height: float,
    global_scale: float,
    item_spacing_y: float,
) -> ControlPlacement:
    size = CLOSE_BUTTON_SIZE * global_scale
    x = compute_centered_offset(column_width, size) + CLOSE_BUTTON_OFFSET_X
    y = compute_bottom_control_position(window_height, size, item_spacing_y)
    return ControlPlacement(x, y, size)
