"""Qt painter adapter that renders a frame's draw commands."""
from __future__ import annotations

from typing import Callable, Dict, Iterable, Optional, Type

from PyQt6.QtCore import QPointF, QRectF, Qt
from PyQt6.QtGui import QBrush, QColor, QFont, QImage, QPainter, QPen

from aetherbox_ui.frame import (
    CheckboxCommand,
    DrawCommand,
    ImageButtonCommand,
    ImageCommand,
    SelectableCommand,
    SeparatorCommand,
    TextCommand,
    TooltipCommand,
)

WINDOW_BACKGROUND = QColor(20, 20, 24, 240)
SELECTED_FILL = QColor(66, 150, 250, 140)
HOVER_FILL = QColor(66, 150, 250, 80)
SEPARATOR_COLOR = QColor(110, 110, 128, 128)
TOOLTIP_BACKGROUND = QColor(15, 15, 15, 255)
TOOLTIP_BORDER = QColor("white")
TEXT_COLOR = QColor("white")


def _rect(command: DrawCommand) -> QRectF:
    x, y, width, height = command.rect
    return QRectF(x, y, width, height)


def _flags(*members: object) -> int:
    value = 0
    for member in members:
        value |= int(getattr(member, "value", member))
    return value


def _qimage(handle: object) -> Optional[QImage]:
    image = getattr(handle, "image", None)
    if isinstance(image, QImage) and not image.isNull():
        return image
    return None


class QtCommandPainter:
    """Paints ``DrawCommand`` lists with a ``QPainter`` owned by the caller."""

    def __init__(self, painter: QPainter, *, font_family: Optional[str] = None) -> None:
        self._painter = painter
        self._font_family = font_family
        self._handlers: Dict[Type[DrawCommand], Callable[[DrawCommand], None]] = {
            TextCommand: self._paint_text,
            ImageCommand: self._paint_image,
            SelectableCommand: self._paint_selectable,
            ImageButtonCommand: self._paint_image_button,
            CheckboxCommand: self._paint_checkbox,
            SeparatorCommand: self._paint_separator,
            TooltipCommand: self._paint_tooltip,
        }

    def paint_background(self, width: int, height: int) -> None:
        self._painter.fillRect(QRectF(0, 0, width, height), WINDOW_BACKGROUND)

    def paint(self, commands: Iterable[DrawCommand]) -> int:
        painted = 0
        for command in commands:
            handler = self._handlers.get(type(command))
            if handler is None:
                continue
            handler(command)
            painted += 1
        return painted

    def _set_font(self, point_size: float) -> None:
        font = QFont(self._font_family) if self._font_family else QFont(self._painter.font())
        font.setPointSizeF(point_size)
        font.setWeight(QFont.Weight.Normal)
        self._painter.setFont(font)

    def _paint_text(self, command: TextCommand) -> None:
        self._set_font(command.point_size)
        color = QColor(command.color)
        self._painter.setPen(color if color.isValid() else TEXT_COLOR)
        members = [Qt.AlignmentFlag.AlignLeft, Qt.AlignmentFlag.AlignTop]
        if command.wrap:
            members.append(Qt.TextFlag.TextWrapAnywhere)
        self._painter.drawText(_rect(command), _flags(*members), command.text)

    def _paint_image(self, command: ImageCommand) -> None:
        image = _qimage(command.image)
        if image is not None:
            self._painter.drawImage(_rect(command), image)

    def _paint_selectable(self, command: SelectableCommand) -> None:
        rect = _rect(command)
        if command.selected:
            self._painter.fillRect(rect, SELECTED_FILL)
        elif command.hovered:
            self._painter.fillRect(rect, HOVER_FILL)
        self._set_font(command.point_size)
        self._painter.setPen(TEXT_COLOR)
        self._painter.drawText(rect, _flags(Qt.AlignmentFlag.AlignCenter), command.label)

    def _paint_image_button(self, command: ImageButtonCommand) -> None:
        rect = _rect(command)
        image = _qimage(command.image)
        if image is not None:
            self._painter.drawImage(rect, image)
        if command.hovered:
            self._painter.fillRect(rect, HOVER_FILL)

    def _paint_checkbox(self, command: CheckboxCommand) -> None:
        rect = _rect(command)
        box = QRectF(rect.x(), rect.y(), rect.height(), rect.height()).adjusted(2, 2, -2, -2)
        self._painter.setPen(QPen(TEXT_COLOR))
        self._painter.setBrush(QBrush(HOVER_FILL) if command.hovered else Qt.BrushStyle.NoBrush)
        self._painter.drawRect(box)
        if command.checked:
            pen = QPen(TEXT_COLOR)
            pen.setWidth(2)
            self._painter.setPen(pen)
            self._painter.drawLine(
                QPointF(box.left() + box.width() * 0.2, box.center().y()),
                QPointF(box.left() + box.width() * 0.45, box.bottom() - box.height() * 0.2),
            )
            self._painter.drawLine(
                QPointF(box.left() + box.width() * 0.45, box.bottom() - box.height() * 0.2),
                QPointF(box.right() - box.width() * 0.15, box.top() + box.height() * 0.2),
            )
        self._set_font(command.point_size)
        self._painter.setPen(TEXT_COLOR)
        label_rect = QRectF(box.right() + 6, rect.y(), max(0.0, rect.right() - box.right() - 6), rect.height())
        self._painter.drawText(label_rect, _flags(Qt.AlignmentFlag.AlignVCenter, Qt.AlignmentFlag.AlignLeft), command.label)

    def _paint_separator(self, command: SeparatorCommand) -> None:
        rect = _rect(command)
        self._painter.setPen(QPen(SEPARATOR_COLOR))
        self._painter.drawLine(QPointF(rect.left(), rect.top()), QPointF(rect.right(), rect.top()))

    def _paint_tooltip(self, command: TooltipCommand) -> None:
        rect = _rect(command)
        self._painter.setPen(QPen(TOOLTIP_BORDER))
        self._painter.setBrush(QBrush(TOOLTIP_BACKGROUND))
        self._painter.drawRect(rect)
        self._set_font(command.point_size)
        self._painter.setPen(TEXT_COLOR)
        self._painter.drawText(rect, _flags(Qt.AlignmentFlag.AlignCenter), command.text)
