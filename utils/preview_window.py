#!/usr/bin/env python3
"""Launch the AetherBox main window in a standalone Qt application for local testing."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from PyQt6.QtCore import QTimer  # noqa: E402
from PyQt6.QtWidgets import QApplication  # noqa: E402

import load  # noqa: E402
from aetherbox_ui.qt_window import MainWindowWidget  # noqa: E402


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Open the AetherBox main menu outside the host application.",
    )
    parser.add_argument(
        "--plugin-dir",
        default=str(PROJECT_ROOT),
        help="Directory holding Images/ and aetherbox_settings.json (default: %(default)s)",
    )
    parser.add_argument(
        "--scale",
        type=float,
        default=1.0,
        help="Global UI scale applied to fixed widths and button sizes (default: %(default)s)",
    )
    parser.add_argument(
        "--viewports",
        action="store_true",
        help="Pretend the host's multi-viewport feature is enabled (skips the bounds warning).",
    )
    parser.add_argument(
        "--x",
        type=int,
        default=None,
        help="Optional X (left) screen offset in pixels",
    )
    parser.add_argument(
        "--y",
        type=int,
        default=None,
        help="Optional Y (top) screen offset in pixels",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def main(argv: list[str]) -> int:
    args = build_parser().parse_args(argv)
    app = QApplication(sys.argv[:1])
    load.plugin_start3(args.plugin_dir)
    if args.debug:
        logging.getLogger(load.LOGGER_NAME).setLevel(logging.DEBUG)
    runtime = load.plugin_runtime()
    if runtime is None or runtime.main_window is None:
        print("AetherBox failed to start; see log output.", file=sys.stderr)
        return 1

    runtime.set_main_window_open(True)
    widget = MainWindowWidget(
        runtime.main_window,
        draw_fn=load.plugin_draw,
        viewports_enabled_fn=lambda: bool(args.viewports),
        global_scale=args.scale,
    )
    if args.x is not None or args.y is not None:
        widget.move(args.x if args.x is not None else widget.x(), args.y if args.y is not None else widget.y())
    widget.show()
    app.setQuitOnLastWindowClosed(False)

    def _quit_when_closed() -> None:
        if runtime.main_window is None or not runtime.main_window.is_open():
            app.quit()

    # The controller hides the window itself, so poll for the closed state.
    watcher = QTimer()
    watcher.setInterval(250)
    watcher.timeout.connect(_quit_when_closed)
    watcher.start()
    try:
        return app.exec()
    finally:
        load.plugin_stop()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main(sys.argv[1:]))
