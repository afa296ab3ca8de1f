"""Primary entry point for the AetherBox plugin."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Optional

from aetherbox_plugin.commands import COMMAND_NAME, HELP_MESSAGE, build_command_helper
from aetherbox_plugin.images import CLOSE_IMAGE, HEADER_IMAGE, ImageLoader
from aetherbox_plugin.lifecycle import LifecycleTracker
from aetherbox_plugin.logging_utils import build_rotating_file_handler, resolve_log_level, resolve_logs_dir
from aetherbox_plugin.preferences import PluginConfig
from aetherbox_ui.frame import DrawCommand, FrameInput
from aetherbox_ui.sections import LinkDescription, build_default_providers
from aetherbox_ui.window_controller import WindowController
from version import __version__ as AETHERBOX_VERSION

PLUGIN_NAME = "AetherBox"
PLUGIN_VERSION = AETHERBOX_VERSION
PLUGIN_DESCRIPTION = "A toolbox of quality-of-life helpers."
LOGGER_NAME = "AetherBox"
LOG_TAG = "AetherBox"


def _configure_logger() -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    if logger.level == logging.NOTSET:
        logger.setLevel(logging.INFO)
    if not any(getattr(handler, "_aetherbox_handler", False) for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler._aetherbox_handler = True  # type: ignore[attr-defined]
        formatter = logging.Formatter(f"[%(asctime)s] [{LOG_TAG}] %(message)s", "%H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.propagate = False
    return logger


LOGGER = _configure_logger()


class _PluginRuntime:
    """Single owner of the plugin's window, resources and command handler."""

    def __init__(self, plugin_dir: str, config: PluginConfig) -> None:
        self.plugin_dir = Path(plugin_dir)
        self.config = config
        self.lifecycle = LifecycleTracker(LOGGER)
        self.images = ImageLoader(self.plugin_dir)
        self.main_window: Optional[WindowController] = None
        self.commands = build_command_helper(self, LOGGER)
        self._running = False

    def start(self) -> str:
        if self._running:
            return PLUGIN_NAME
        LOGGER.setLevel(resolve_log_level(self.config.debug_logging))
        self._attach_file_logging()
        links = [LinkDescription(link["url"], link.get("description", "")) for link in self.config.links]
        self.main_window = WindowController(
            header_image=self.images.load_image(HEADER_IMAGE),
            close_image=self.images.load_image(CLOSE_IMAGE),
            save_config_fn=self.config.save,
            providers=build_default_providers(
                PLUGIN_NAME,
                PLUGIN_VERSION,
                self.config,
                description=PLUGIN_DESCRIPTION,
                links=links,
            ),
            show_tooltips_fn=lambda: bool(self.config.show_tooltips),
            logger=logging.getLogger(f"{LOGGER_NAME}.UI"),
        )
        self.lifecycle.track_handle(self.main_window, name="main window")
        self._running = True
        LOGGER.debug("Registered %s (%s)", COMMAND_NAME, HELP_MESSAGE)
        return PLUGIN_NAME

    def stop(self) -> None:
        if not self._running:
            return
        is_open = self.main_window.is_open() if self.main_window else False
        LOGGER.debug("%s used %s Mainwindow is now %s", PLUGIN_NAME, COMMAND_NAME, is_open)
        self.lifecycle.log_state("before stop")
        self.lifecycle.dispose_all()
        self.main_window = None
        self._running = False

    def _attach_file_logging(self) -> None:
        try:
            handler = build_rotating_file_handler(
                resolve_logs_dir(),
                retention=self.config.log_retention,
                formatter=logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"),
            )
        except OSError as exc:
            LOGGER.warning("File logging unavailable: %s", exc)
            return
        LOGGER.addHandler(handler)

        def _detach() -> None:
            LOGGER.removeHandler(handler)
            handler.close()

        self.lifecycle.track_handle(handler, name="log file", release=_detach)

    # Host-facing actions -------------------------------------------------

    def handle_command(self, command: str, args: str) -> bool:
        return self.commands.handle_command(command, args)

    def toggle_main_window(self) -> bool:
        if self.main_window is None:
            return False
        return self.main_window.toggle_open()

    def set_main_window_open(self, value: bool) -> None:
        if self.main_window is not None:
            self.main_window.set_open(value)

    def draw(self, frame_input: FrameInput) -> List[DrawCommand]:
        if self.main_window is None:
            return []
        return self.main_window.draw(frame_input)


_plugin: Optional[_PluginRuntime] = None
_config: Optional[PluginConfig] = None


def plugin_start3(plugin_dir: str) -> str:
    global _plugin, _config
    if _plugin is not None:
        return PLUGIN_NAME
    LOGGER.info("Initialising %s %s from %s", PLUGIN_NAME, PLUGIN_VERSION, plugin_dir)
    _config = PluginConfig(Path(plugin_dir))
    _plugin = _PluginRuntime(plugin_dir, _config)
    return _plugin.start()


def plugin_stop() -> None:
    global _plugin, _config
    if _plugin:
        try:
            _plugin.stop()
        finally:
            _plugin = None
    _config = None


def plugin_command(command: str, args: str = "") -> bool:
    if _plugin is None:
        return False
    try:
        return _plugin.handle_command(command, args)
    except Exception as exc:
        LOGGER.exception("Failed to handle command %s %s: %s", command, args, exc)
        return True


def plugin_open_main_ui() -> None:
    if _plugin is None:
        return
    try:
        _plugin.toggle_main_window()
    except Exception as exc:
        LOGGER.exception("Failed to toggle main window: %s", exc)


def plugin_draw(frame_input: FrameInput) -> List[DrawCommand]:
    if _plugin is None:
        return []
    try:
        return _plugin.draw(frame_input)
    except Exception as exc:
        LOGGER.warning("Something wrong with main window: %s", exc, exc_info=exc)
        return []


def plugin_runtime() -> Optional[Any]:
    return _plugin


# Metadata expected by some plugin loaders
name = PLUGIN_NAME
version = PLUGIN_VERSION
