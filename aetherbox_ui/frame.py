"""Immediate-mode frame surface: per-frame input, draw commands and the recorder.

The window core never touches a GUI toolkit directly. Each frame it receives a
``FrameInput`` sample (geometry plus the pointer state resolved by the host) and
describes the whole window into a ``FrameBuilder``. The builder keeps an
ImGui-style layout cursor, records plain draw commands, and answers the
hover/click questions by hit-testing the pointer against the rectangle of the
item being recorded. Hosts paint the resulting command list however they like
(see ``aetherbox_ui.qt_painter`` for the PyQt6 painter).
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

Vec2 = Tuple[float, float]
Rect = Tuple[float, float, float, float]

DEFAULT_TEXT_COLOR = "#FFFFFF"
DEFAULT_POINT_SIZE = 13.0
LINE_HEIGHT_FACTOR = 1.4
CHAR_WIDTH_FACTOR = 0.55
TOOLTIP_MIN_WIDTH = 150.0
TOOLTIP_PADDING = 6.0
CHECKBOX_LABEL_GAP = 6.0


@dataclass(frozen=True)
class FrameInput:
    """Geometry sample and pointer state for a single frame.

    Positions are in screen pixels except ``mouse_pos``, which is window-local.
    """

    window_pos: Vec2
    window_size: Vec2
    viewport_size: Vec2
    content_origin: Vec2 = (8.0, 8.0)
    viewports_enabled: bool = False
    global_scale: float = 1.0
    item_spacing: Vec2 = (8.0, 4.0)
    mouse_pos: Optional[Vec2] = None
    mouse_clicked: bool = False

    def window_top_left(self) -> Vec2:
        return (
            self.window_pos[0] + self.content_origin[0],
            self.window_pos[1] + self.content_origin[1],
        )

    def content_rect(self) -> Rect:
        origin_x, origin_y = self.content_origin
        width, height = self.window_size
        return (
            origin_x,
            origin_y,
            max(0.0, width - 2 * origin_x),
            max(0.0, height - 2 * origin_y),
        )


@dataclass
class DrawCommand:
    rect: Rect


@dataclass
class TextCommand(DrawCommand):
    text: str = ""
    color: str = DEFAULT_TEXT_COLOR
    point_size: float = DEFAULT_POINT_SIZE
    wrap: bool = False


@dataclass
class ImageCommand(DrawCommand):
    image: Any = None


@dataclass
class SelectableCommand(DrawCommand):
    label: str = ""
    selected: bool = False
    hovered: bool = False
    point_size: float = DEFAULT_POINT_SIZE


@dataclass
class ImageButtonCommand(DrawCommand):
    item_id: str = ""
    image: Any = None
    hovered: bool = False


@dataclass
class CheckboxCommand(DrawCommand):
    label: str = ""
    checked: bool = False
    hovered: bool = False
    point_size: float = DEFAULT_POINT_SIZE


@dataclass
class SeparatorCommand(DrawCommand):
    pass


@dataclass
class TooltipCommand(DrawCommand):
    text: str = ""
    point_size: float = DEFAULT_POINT_SIZE


@dataclass(frozen=True)
class FrameCheckpoint:
    command_count: int
    overlay_count: int
    cursor: Vec2
    region: Rect
    last_item_hovered: bool


def rect_contains(rect: Rect, point: Optional[Vec2]) -> bool:
    if point is None:
        return False
    x, y, width, height = rect
    px, py = point
    return x <= px < x + width and y <= py < y + height


@dataclass
class FrameBuilder:
    """Records one frame of draw commands while tracking the layout cursor."""

    input: FrameInput
    commands: List[DrawCommand] = field(default_factory=list)
    # Floating items (tooltips) paint after everything else.
    overlays: List[DrawCommand] = field(default_factory=list)

    def __post_init__(self) -> None:
        self._region: Rect = self.input.content_rect()
        self._cursor: Vec2 = (self._region[0], self._region[1])
        self._last_item_hovered = False

    # Layout cursor -------------------------------------------------------

    @property
    def scale(self) -> float:
        return self.input.global_scale

    @property
    def region(self) -> Rect:
        return self._region

    def begin_region(self, region: Rect) -> None:
        """Redirect subsequent items into ``region`` (a table column)."""
        self._region = region
        self._cursor = (region[0], region[1])
        self._last_item_hovered = False

    def cursor_pos(self) -> Vec2:
        return self._cursor

    def set_cursor_pos(self, x: Optional[float] = None, y: Optional[float] = None) -> None:
        """Move the cursor in window-local coordinates, like ImGui.SetCursorPos."""
        current_x, current_y = self._cursor
        self._cursor = (current_x if x is None else float(x), current_y if y is None else float(y))

    def content_region_avail(self) -> Vec2:
        x, y, width, height = self._region
        return (
            max(0.0, x + width - self._cursor[0]),
            max(0.0, y + height - self._cursor[1]),
        )

    def line_height(self, point_size: float = DEFAULT_POINT_SIZE) -> float:
        return point_size * LINE_HEIGHT_FACTOR * self.scale

    def _advance(self, height: float) -> None:
        self._cursor = (self._region[0], self._cursor[1] + height + self.input.item_spacing[1])

    def _item_rect(self, width: float, height: float) -> Rect:
        return (self._cursor[0], self._cursor[1], width, height)

    def _interact(self, rect: Rect) -> Tuple[bool, bool]:
        hovered = rect_contains(rect, self.input.mouse_pos)
        self._last_item_hovered = hovered
        return hovered, hovered and self.input.mouse_clicked

    # Failure isolation -----------------------------------------------------

    def checkpoint(self) -> FrameCheckpoint:
        return FrameCheckpoint(
            command_count=len(self.commands),
            overlay_count=len(self.overlays),
            cursor=self._cursor,
            region=self._region,
            last_item_hovered=self._last_item_hovered,
        )

    def rollback(self, checkpoint: FrameCheckpoint) -> None:
        """Discard everything recorded after ``checkpoint``."""
        del self.commands[checkpoint.command_count:]
        del self.overlays[checkpoint.overlay_count:]
        self._cursor = checkpoint.cursor
        self._region = checkpoint.region
        self._last_item_hovered = checkpoint.last_item_hovered

    # Items -----------------------------------------------------------------

    def spacing(self) -> None:
        self._advance(0.0)

    def separator(self) -> None:
        rect = (self._region[0], self._cursor[1], self._region[2], 1.0)
        self.commands.append(SeparatorCommand(rect=rect))
        self._advance(1.0)

    def text(self, text: str, *, color: str = DEFAULT_TEXT_COLOR, point_size: float = DEFAULT_POINT_SIZE) -> None:
        width = len(text) * point_size * CHAR_WIDTH_FACTOR * self.scale
        height = self.line_height(point_size)
        rect = self._item_rect(width, height)
        self.commands.append(TextCommand(rect=rect, text=text, color=color, point_size=point_size))
        self._last_item_hovered = rect_contains(rect, self.input.mouse_pos)
        self._advance(height)

    def text_wrapped(
        self,
        text: str,
        *,
        color: str = DEFAULT_TEXT_COLOR,
        point_size: float = DEFAULT_POINT_SIZE,
    ) -> None:
        width = self.content_region_avail()[0]
        char_width = point_size * CHAR_WIDTH_FACTOR * self.scale
        chars_per_line = max(1, int(width // char_width)) if char_width > 0 else max(1, len(text))
        lines = max(1, math.ceil(len(text) / chars_per_line))
        height = lines * self.line_height(point_size)
        rect = self._item_rect(width, height)
        self.commands.append(TextCommand(rect=rect, text=text, color=color, point_size=point_size, wrap=True))
        self._last_item_hovered = rect_contains(rect, self.input.mouse_pos)
        self._advance(height)

    def image(self, image: Any, size: Vec2) -> None:
        rect = self._item_rect(size[0], size[1])
        self.commands.append(ImageCommand(rect=rect, image=image))
        self._last_item_hovered = rect_contains(rect, self.input.mouse_pos)
        self._advance(size[1])

    def selectable(self, label: str, selected: bool, *, point_size: float = DEFAULT_POINT_SIZE) -> bool:
        """Full-width selectable row; returns True when clicked this frame."""
        rect = self._item_rect(self.content_region_avail()[0], self.line_height(point_size))
        hovered, clicked = self._interact(rect)
        self.commands.append(
            SelectableCommand(rect=rect, label=label, selected=selected, hovered=hovered, point_size=point_size)
        )
        self._advance(rect[3])
        return clicked

    def image_button(self, item_id: str, image: Any, size: Vec2) -> bool:
        rect = self._item_rect(size[0], size[1])
        hovered, clicked = self._interact(rect)
        self.commands.append(ImageButtonCommand(rect=rect, item_id=item_id, image=image, hovered=hovered))
        self._advance(size[1])
        return clicked

    def checkbox(self, label: str, checked: bool, *, point_size: float = DEFAULT_POINT_SIZE) -> bool:
        """Checkbox row; returns True when clicked (the caller flips its value)."""
        height = self.line_height(point_size)
        width = height + CHECKBOX_LABEL_GAP + len(label) * point_size * CHAR_WIDTH_FACTOR * self.scale
        rect = self._item_rect(min(width, self.content_region_avail()[0]), height)
        hovered, clicked = self._interact(rect)
        self.commands.append(
            CheckboxCommand(rect=rect, label=label, checked=checked, hovered=hovered, point_size=point_size)
        )
        self._advance(height)
        return clicked

    def is_item_hovered(self) -> bool:
        return self._last_item_hovered

    def tooltip(self, text: str, *, point_size: float = DEFAULT_POINT_SIZE) -> None:
        """Float a tooltip at the pointer; does not move the layout cursor."""
        if not text or self.input.mouse_pos is None:
            return
        char_width = point_size * CHAR_WIDTH_FACTOR * self.scale
        width = max(TOOLTIP_MIN_WIDTH * self.scale, len(text) * char_width + 2 * TOOLTIP_PADDING)
        height = self.line_height(point_size) + 2 * TOOLTIP_PADDING
        mouse_x, mouse_y = self.input.mouse_pos
        self.overlays.append(TooltipCommand(rect=(mouse_x, mouse_y, width, height), text=text, point_size=point_size))

    def finish(self) -> List[DrawCommand]:
        return self.commands + self.overlays
