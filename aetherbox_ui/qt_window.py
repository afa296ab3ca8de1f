"""PyQt6 host widget that drives a ``WindowController`` once per frame."""
from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtGui import QPainter
from PyQt6.QtWidgets import QWidget

from aetherbox_ui.frame import DrawCommand, FrameInput
from aetherbox_ui.layout_engine import DEFAULT_WINDOW_SIZE, MAX_WINDOW_SIZE, MIN_WINDOW_SIZE
from aetherbox_ui.qt_painter import QtCommandPainter
from aetherbox_ui.window_controller import WINDOW_TITLE, WindowController

_LOGGER = logging.getLogger("AetherBox.UI")

FRAME_INTERVAL_MS = 33


class MainWindowWidget(QWidget):
    """Top-level window hosting the immediate-mode main menu."""

    def __init__(
        self,
        controller: WindowController,
        *,
        draw_fn: Optional[Callable[[FrameInput], List[DrawCommand]]] = None,
        viewports_enabled_fn: Callable[[], bool] = lambda: False,
        global_scale: float = 1.0,
        frame_interval_ms: int = FRAME_INTERVAL_MS,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._controller = controller
        self._draw = draw_fn or controller.draw
        self._viewports_enabled = viewports_enabled_fn
        self._global_scale = global_scale
        self._commands: List[DrawCommand] = []
        self._mouse_pos: Optional[Tuple[float, float]] = None
        self._pending_click = False
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(*DEFAULT_WINDOW_SIZE)
        self.setMinimumSize(*MIN_WINDOW_SIZE)
        self.setMaximumSize(*MAX_WINDOW_SIZE)
        self.setMouseTracking(True)
        self._frame_timer = QTimer(self)
        self._frame_timer.setInterval(frame_interval_ms)
        self._frame_timer.timeout.connect(self.tick)
        self._frame_timer.start()

    def build_frame_input(self) -> FrameInput:
        geometry = self.geometry()
        screen = self.screen()
        if screen is not None:
            screen_rect = screen.geometry()
            viewport = (float(screen_rect.width()), float(screen_rect.height()))
        else:
            viewport = (float(MAX_WINDOW_SIZE[0]), float(MAX_WINDOW_SIZE[1]))
        return FrameInput(
            window_pos=(float(geometry.x()), float(geometry.y())),
            window_size=(float(geometry.width()), float(geometry.height())),
            viewport_size=viewport,
            viewports_enabled=bool(self._viewports_enabled()),
            global_scale=self._global_scale,
            mouse_pos=self._mouse_pos,
            mouse_clicked=self._pending_click,
        )

    def tick(self) -> None:
        """Host "draw now" signal: run one frame and schedule a repaint."""
        if not self._controller.is_open():
            if self.isVisible():
                self.hide()
            self._commands = []
            return
        if not self.isVisible():
            self.show()
        frame_input = self.build_frame_input()
        self._pending_click = False
        try:
            self._commands = self._draw(frame_input)
        except Exception as exc:
            # Exceptions must not escape a Qt slot.
            _LOGGER.warning("Something wrong with main window: %s", exc, exc_info=exc)
            self._commands = []
        self.update()

    # Qt events ---------------------------------------------------------------

    def paintEvent(self, event) -> None:  # type: ignore[override]
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        command_painter = QtCommandPainter(painter)
        command_painter.paint_background(self.width(), self.height())
        command_painter.paint(self._commands)
        painter.end()
        super().paintEvent(event)

    def mouseMoveEvent(self, event) -> None:  # type: ignore[override]
        position = event.position()
        self._mouse_pos = (position.x(), position.y())
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event) -> None:  # type: ignore[override]
        if event.button() == Qt.MouseButton.LeftButton:
            position = event.position()
            self._mouse_pos = (position.x(), position.y())
            self._pending_click = True
            event.accept()
            return
        super().mouseReleaseEvent(event)

    def leaveEvent(self, event) -> None:  # type: ignore[override]
        self._mouse_pos = None
        super().leaveEvent(event)

    def closeEvent(self, event) -> None:  # type: ignore[override]
        # Window-manager close: route through the controller so config is saved once.
        if self._controller.is_open():
            _LOGGER.debug("Main window closed by the window manager")
            try:
                self._controller.set_open(False)
            except Exception as exc:
                _LOGGER.warning("Failed to save settings on close: %s", exc, exc_info=exc)
                event.ignore()
                return
        super().closeEvent(event)
