"""Viewport containment check that gates the main window's render branch."""
from __future__ import annotations

from typing import Tuple

Vec2 = Tuple[float, float]


def is_out_of_bounds(
    window_top_left: Vec2,
    window_size: Vec2,
    viewport_size: Vec2,
    viewports_enabled: bool,
) -> bool:
    """Return True when the window touches or crosses a main-viewport edge.

    With the host's multi-viewport feature enabled windows may legitimately
    live outside the main viewport, so the check always passes.
    """
    if viewports_enabled:
        return False
    left, top = window_top_left
    right = left + window_size[0]
    bottom = top + window_size[1]
    return left <= 0 or top <= 0 or right >= viewport_size[0] or bottom >= viewport_size[1]
