"""Chat command handling for the ``/atb`` command.

The host hands every registered command string to the plugin together with
its argument tail. Only the main window toggle and a few aliases live here;
keeping the parsing out of :mod:`load` gives it a focused, testable surface.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional


_LOGGER = logging.getLogger("AetherBox.Commands")

COMMAND_NAME = "/atb"
HELP_MESSAGE = "Opens Main Menu"


@dataclass
class _CommandContext:
    """Lightweight indirection that exposes just the callbacks we need."""

    toggle_main_window: Callable[[], bool]
    set_main_window_open: Callable[[bool], None]
    send_message: Callable[[str], None]


class CommandHelper:
    """Parse ``/atb`` invocations and dispatch main window actions."""

    _HELP_TEXT = "AetherBox commands: /atb (toggle main menu), /atb open, /atb close, /atb help"

    def __init__(self, context: _CommandContext) -> None:
        self._ctx = context

    # Public API ---------------------------------------------------------

    def handle_command(self, command: str, args: Optional[str] = "") -> bool:
        """Handle one command invocation.

        Returns ``True`` when ``command`` belongs to this plugin.
        """

        if (command or "").strip().lower() != COMMAND_NAME:
            return False
        tokens = (args or "").split()
        if not tokens:
            is_open = self._ctx.toggle_main_window()
            _LOGGER.debug("%s -> Mainwindow: %s", COMMAND_NAME, is_open)
            return True

        action = tokens[0].lower()
        if action in {"open", "show"}:
            self._ctx.set_main_window_open(True)
        elif action in {"close", "hide"}:
            self._ctx.set_main_window_open(False)
        elif action in {"help", "?"}:
            self._ctx.send_message(self._HELP_TEXT)
        else:
            self._ctx.send_message(f"Unknown AetherBox command: {action}. Try {COMMAND_NAME} help.")
        return True


def build_command_helper(plugin_runtime: object, logger: Optional[logging.Logger] = None) -> CommandHelper:
    """Construct a :class:`CommandHelper` for the active plugin runtime."""

    log = logger or _LOGGER

    context = _CommandContext(
        toggle_main_window=getattr(plugin_runtime, "toggle_main_window"),
        set_main_window_open=getattr(plugin_runtime, "set_main_window_open"),
        send_message=log.info,
    )
    return CommandHelper(context)
