"""Exclusive category selection for the navigation sidebar."""
from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Dict, Optional

if TYPE_CHECKING:
    from aetherbox_ui.window_controller import WindowState

_LOGGER = logging.getLogger("AetherBox.UI")


class Category(Enum):
    INFO = "Info"
    SETTINGS = "Settings"

    @property
    def label(self) -> str:
        return self.value

    @property
    def tooltip(self) -> str:
        return _TOOLTIPS.get(self, "")


_TOOLTIPS: Dict[Category, str] = {
    Category.INFO: "About AetherBox and useful links",
    Category.SETTINGS: "Plugin settings",
}


def new_open_flags() -> Dict[Category, bool]:
    return {category: False for category in Category}


def toggle(state: "WindowState", category: Category) -> Optional[Category]:
    """Apply a nav click to ``state`` and return the resulting active category.

    Clicking the active category clears the selection; clicking any other
    category makes it the only one flagged open.
    """
    if not isinstance(category, Category):
        raise ValueError(f"Unknown category: {category!r}")
    flags = state.category_open_flags
    if flags.get(category, False):
        flags[category] = False
        if state.active_category is category:
            state.active_category = None
    else:
        for other in flags:
            flags[other] = False
        flags[category] = True
        state.active_category = category
    _LOGGER.debug(
        "Category %s toggled; active=%s",
        category.label,
        state.active_category.label if state.active_category else None,
    )
    return state.active_category
