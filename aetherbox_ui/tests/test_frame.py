from __future__ import annotations

import pytest

from aetherbox_ui.frame import (
    FrameBuilder,
    FrameInput,
    ImageButtonCommand,
    SelectableCommand,
    SeparatorCommand,
    TextCommand,
    TooltipCommand,
    rect_contains,
)


def _input(**overrides) -> FrameInput:
    values = dict(window_pos=(100.0, 100.0), window_size=(300.0, 200.0), viewport_size=(1920.0, 1080.0))
    values.update(overrides)
    return FrameInput(**values)


def test_frame_input_geometry_helpers() -> None:
    frame_input = _input(content_origin=(10.0, 6.0))

    assert frame_input.window_top_left() == (110.0, 106.0)
    assert frame_input.content_rect() == (10.0, 6.0, 280.0, 188.0)


def test_rect_contains_is_half_open() -> None:
    rect = (10.0, 10.0, 20.0, 5.0)

    assert rect_contains(rect, (10.0, 10.0))
    assert not rect_contains(rect, (30.0, 12.0))
    assert not rect_contains(rect, None)


def test_items_stack_vertically_with_item_spacing() -> None:
    frame = FrameBuilder(_input(item_spacing=(8.0, 4.0)))

    frame.text("one", point_size=10.0)
    frame.separator()
    frame.text("two", point_size=10.0)

    first, separator, second = frame.commands
    assert isinstance(first, TextCommand) and first.rect[1] == pytest.approx(8.0)
    assert isinstance(separator, SeparatorCommand) and separator.rect[1] == pytest.approx(8.0 + 14.0 + 4.0)
    assert second.rect[1] == pytest.approx(separator.rect[1] + 1.0 + 4.0)


def test_selectable_reports_click_only_when_pointer_is_inside() -> None:
    miss = FrameBuilder(_input(mouse_pos=(5.0, 5.0), mouse_clicked=True))
    assert miss.selectable("Info", False) is False

    hit = FrameBuilder(_input(mouse_pos=(20.0, 12.0), mouse_clicked=True))
    assert hit.selectable("Info", False) is True
    command = hit.commands[0]
    assert isinstance(command, SelectableCommand)
    assert command.hovered is True
    assert hit.is_item_hovered() is True


def test_hover_without_click_does_not_activate() -> None:
    frame = FrameBuilder(_input(mouse_pos=(20.0, 12.0), mouse_clicked=False))

    assert frame.selectable("Info", True) is False
    assert frame.is_item_hovered() is True


def test_set_cursor_pos_positions_image_button() -> None:
    frame = FrameBuilder(_input(mouse_pos=(60.0, 150.0), mouse_clicked=True))

    frame.set_cursor_pos(50.0, 140.0)
    clicked = frame.image_button("close", object(), (20.0, 20.0))

    assert clicked is True
    command = frame.commands[0]
    assert isinstance(command, ImageButtonCommand)
    assert command.rect == (50.0, 140.0, 20.0, 20.0)


def test_begin_region_resets_cursor_and_available_width() -> None:
    frame = FrameBuilder(_input())

    frame.begin_region((160.0, 8.0, 100.0, 150.0))

    assert frame.cursor_pos() == (160.0, 8.0)
    assert frame.content_region_avail() == (100.0, 150.0)


def test_rollback_discards_partial_section_output() -> None:
    frame = FrameBuilder(_input(mouse_pos=(20.0, 12.0)))
    frame.text("kept")
    checkpoint = frame.checkpoint()

    frame.text("dropped")
    frame.tooltip("dropped tooltip")
    frame.rollback(checkpoint)

    assert [command.text for command in frame.commands] == ["kept"]
    assert frame.overlays == []
    assert frame.cursor_pos() == checkpoint.cursor


def test_tooltips_paint_after_regular_commands() -> None:
    frame = FrameBuilder(_input(mouse_pos=(20.0, 12.0)))

    frame.selectable("Info", False)
    frame.tooltip("About")
    frame.text("body")

    commands = frame.finish()
    assert isinstance(commands[-1], TooltipCommand)
    assert commands[-1].rect[:2] == (20.0, 12.0)


def test_tooltip_requires_pointer_and_text() -> None:
    frame = FrameBuilder(_input())

    frame.tooltip("About")
    frame.tooltip("")

    assert frame.overlays == []


def test_wrapped_text_grows_with_content() -> None:
    frame = FrameBuilder(_input())

    frame.text_wrapped("x" * 400, point_size=10.0)

    command = frame.commands[0]
    assert command.wrap is True
    assert command.rect[2] == pytest.approx(284.0)
    assert command.rect[3] > frame.line_height(10.0)
