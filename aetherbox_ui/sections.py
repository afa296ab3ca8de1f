"""Content providers for the main window's categories."""
from __future__ import annotations

import logging
import webbrowser
from dataclasses import dataclass
from typing import Any, Callable, Dict, Sequence

from aetherbox_ui.category_selection import Category
from aetherbox_ui.frame import FrameBuilder
from aetherbox_ui.section_renderer import ContentProvider

_LOGGER = logging.getLogger("AetherBox.UI")

HEADING_POINT_SIZE = 16.0
MUTED_TEXT_COLOR = "#A0A0A0"
LINK_TEXT_COLOR = "#7FB2FF"


@dataclass(frozen=True)
class LinkDescription:
    url: str
    description: str = ""


DEFAULT_LINKS: Sequence[LinkDescription] = ()


class PluginInfoSection:
    """Info category: plugin identity, description and clickable links."""

    def __init__(
        self,
        plugin_name: str,
        version: str,
        *,
        description: str = "",
        links: Sequence[LinkDescription] = DEFAULT_LINKS,
        open_url_fn: Callable[[str], Any] = webbrowser.open,
    ) -> None:
        self._plugin_name = plugin_name
        self._version = version
        self._description = description
        self._links = tuple(links)
        self._open_url = open_url_fn

    def __call__(self, frame: FrameBuilder) -> None:
        frame.text(self._plugin_name, point_size=HEADING_POINT_SIZE)
        frame.text(f"Version {self._version}", color=MUTED_TEXT_COLOR)
        if self._description:
            frame.spacing()
            frame.text_wrapped(self._description)
        if not self._links:
            return
        frame.spacing()
        frame.separator()
        for link in self._links:
            if frame.selectable(link.description or link.url, False):
                _LOGGER.debug("Opening link %s", link.url)
                self._open_url(link.url)
            if frame.is_item_hovered():
                frame.tooltip(link.url)


class PluginSettingsSection:
    """Settings category: toggles bound to the plugin configuration."""

    def __init__(self, config: Any) -> None:
        self._config = config

    def __call__(self, frame: FrameBuilder) -> None:
        config = self._config
        frame.text("Settings", point_size=HEADING_POINT_SIZE)
        frame.spacing()
        if frame.checkbox("Show navigation tooltips", bool(config.show_tooltips)):
            config.show_tooltips = not config.show_tooltips
        if frame.checkbox("Debug logging", bool(config.debug_logging)):
            config.debug_logging = not config.debug_logging
        frame.spacing()
        frame.text(f"Configuration version {int(config.version)}", color=MUTED_TEXT_COLOR)
        frame.text("Changes are saved when the window closes.", color=MUTED_TEXT_COLOR)


def build_default_providers(
    plugin_name: str,
    version: str,
    config: Any,
    *,
    description: str = "",
    links: Sequence[LinkDescription] = DEFAULT_LINKS,
) -> Dict[Category, ContentProvider]:
    return {
        Category.INFO: PluginInfoSection(plugin_name, version, description=description, links=links),
        Category.SETTINGS: PluginSettingsSection(config),
    }
