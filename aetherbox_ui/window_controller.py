"""Main window controller: per-frame orchestration of the AetherBox menu.

This module stays free of Qt types. Hosts build a ``FrameInput`` each frame,
call ``draw`` and paint the returned commands; textures arrive as opaque
handles exposing ``width``, ``height`` and ``release()``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional

from aetherbox_ui import category_selection
from aetherbox_ui.category_selection import Category, new_open_flags
from aetherbox_ui.frame import DrawCommand, FrameBuilder, FrameInput
from aetherbox_ui.layout_engine import (
    MAX_HEADER_HEIGHT,
    ColumnRegions,
    compute_centered_offset,
    compute_close_control,
    compute_columns,
    compute_header_size,
)
from aetherbox_ui.section_renderer import (
    ContentProvider,
    SectionResult,
    render,
    render_section,
    report_failures,
)
from aetherbox_ui.viewport_geometry import is_out_of_bounds

_LOGGER = logging.getLogger("AetherBox.UI")

WINDOW_TITLE = "AetherBox Menu"
MOVE_WARNING_TEXT = "Move Screen!"
MOVE_WARNING_REPEAT = 150
MOVE_WARNING_POINT_SIZE = 24.0
MOVE_WARNING_COLOR = "#FFFF66"
CLOSE_BUTTON_ID = "close"


@dataclass
class WindowState:
    is_open: bool = False
    active_category: Optional[Category] = None
    category_open_flags: Dict[Category, bool] = field(default_factory=new_open_flags)


class WindowController:
    """Owns ``WindowState`` and turns it into draw commands once per frame."""

    def __init__(
        self,
        *,
        header_image: Optional[Any],
        close_image: Optional[Any],
        save_config_fn: Callable[[], None],
        providers: Mapping[Category, ContentProvider],
        show_tooltips_fn: Callable[[], bool] = lambda: True,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._header_image = header_image
        self._close_image = close_image
        self._save_config = save_config_fn
        self._providers = dict(providers)
        self._show_tooltips = show_tooltips_fn
        self._logger = logger or _LOGGER
        self._state = WindowState()
        self._disposed = False
        self.last_results: List[SectionResult] = []
        if close_image is None:
            self._logger.debug("Close texture unavailable; close control will be omitted")

    # Visibility ----------------------------------------------------------

    @property
    def state(self) -> WindowState:
        return self._state

    def is_open(self) -> bool:
        return self._state.is_open

    def set_open(self, value: bool) -> None:
        """Show or hide the window; closing persists the configuration once."""
        value = bool(value)
        if value == self._state.is_open:
            return
        if not value:
            self._save_config()
        self._state.is_open = value

    def toggle_open(self) -> bool:
        self.set_open(not self._state.is_open)
        return self._state.is_open

    def dispose(self) -> None:
        if self._disposed:
            return
        self._disposed = True
        for image in (self._header_image, self._close_image):
            if image is not None:
                image.release()
        self._header_image = None
        self._close_image = None

    # Frame ------------------------------------------------------------------

    def draw(self, frame_input: FrameInput) -> List[DrawCommand]:
        if self._disposed:
            raise RuntimeError("WindowController.draw called after dispose()")
        self.last_results = []
        if not self._state.is_open:
            return []
        frame = FrameBuilder(frame_input)
        if is_out_of_bounds(
            frame_input.window_top_left(),
            frame_input.window_size,
            frame_input.viewport_size,
            frame_input.viewports_enabled,
        ):
            self._draw_move_warning(frame)
            return frame.finish()

        results: List[SectionResult] = []
        content = frame_input.content_rect()
        split: List[ColumnRegions] = []

        def _split_columns(_frame: FrameBuilder) -> None:
            split.append(compute_columns(content, frame_input.global_scale, frame_input.item_spacing[0]))

        results.append(render_section("column layout", _split_columns, frame))
        # Without a split the nav column takes the whole content area.
        columns = split[0] if split else ColumnRegions(
            nav=content,
            body=(content[0] + content[2], content[1], 0.0, content[3]),
        )

        frame.begin_region(columns.nav)
        results.append(render_section("header", self._draw_header, frame))
        frame.spacing()
        frame.separator()
        frame.spacing()
        results.append(render_section("navigation panel", self._draw_navigation_panel, frame))
        results.append(render_section("close control", self._draw_close_control, frame))

        frame.begin_region(columns.body)
        body = render(self._state.active_category, self._providers, frame)
        if body is not None:
            results.append(body)

        report_failures(results, self._logger)
        self.last_results = results
        return frame.finish()

    def _draw_move_warning(self, frame: FrameBuilder) -> None:
        frame.text_wrapped(
            MOVE_WARNING_TEXT * MOVE_WARNING_REPEAT,
            color=MOVE_WARNING_COLOR,
            point_size=MOVE_WARNING_POINT_SIZE,
        )

    def _draw_header(self, frame: FrameBuilder) -> None:
        image = self._header_image
        if image is None:
            return
        available_width = frame.content_region_avail()[0]
        size = compute_header_size(available_width, image.width / image.height, MAX_HEADER_HEIGHT * frame.scale)
        frame.set_cursor_pos(x=frame.cursor_pos()[0] + compute_centered_offset(available_width, size.width))
        frame.image(image, (size.width, size.height))

    def _draw_navigation_panel(self, frame: FrameBuilder) -> None:
        for category in Category:
            selected = self._state.category_open_flags.get(category, False)
            if frame.selectable(category.label, selected):
                category_selection.toggle(self._state, category)
            if frame.is_item_hovered() and self._show_tooltips():
                frame.tooltip(category.tooltip)

    def _draw_close_control(self, frame: FrameBuilder) -> None:
        if self._close_image is None:
            return
        placement = compute_close_control(
            frame.content_region_avail()[0],
            frame.input.window_size[1],
            frame.scale,
            frame.input.item_spacing[1],
        )
        frame.set_cursor_pos(placement.x, placement.y)
        if frame.image_button(CLOSE_BUTTON_ID, self._close_image, (placement.size, placement.size)):
            self._close_from_control()

    def _close_from_control(self) -> None:
        self._save_config()
        self._logger.info("Settings have been saved.")
        self._state.is_open = False
