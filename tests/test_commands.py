from __future__ import annotations

import pytest

from aetherbox_plugin.commands import COMMAND_NAME, CommandHelper, _CommandContext, build_command_helper


class DummyRuntime:
    def __init__(self) -> None:
        self.is_open = False
        self.calls = []

    def toggle_main_window(self) -> bool:
        self.is_open = not self.is_open
        self.calls.append("toggle")
        return self.is_open

    def set_main_window_open(self, value: bool) -> None:
        self.is_open = value
        self.calls.append(("set", value))


def _helper():
    runtime = DummyRuntime()
    messages = []
    context = _CommandContext(
        toggle_main_window=runtime.toggle_main_window,
        set_main_window_open=runtime.set_main_window_open,
        send_message=messages.append,
    )
    return CommandHelper(context), runtime, messages


def test_foreign_command_is_ignored():
    helper, runtime, _messages = _helper()

    assert helper.handle_command("/other", "") is False
    assert runtime.calls == []


def test_bare_command_toggles_main_window():
    helper, runtime, _messages = _helper()

    assert helper.handle_command(COMMAND_NAME, "") is True
    assert runtime.is_open is True
    assert helper.handle_command(COMMAND_NAME.upper(), None) is True
    assert runtime.is_open is False
    assert runtime.calls == ["toggle", "toggle"]


@pytest.mark.parametrize(
    "args, expected",
    [
        ("open", ("set", True)),
        ("SHOW", ("set", True)),
        ("close", ("set", False)),
        ("hide now", ("set", False)),
    ],
)
def test_explicit_actions(args, expected):
    helper, runtime, _messages = _helper()

    assert helper.handle_command(COMMAND_NAME, args) is True
    assert runtime.calls == [expected]


def test_help_and_unknown_actions_reply():
    helper, runtime, messages = _helper()

    helper.handle_command(COMMAND_NAME, "help")
    helper.handle_command(COMMAND_NAME, "frobnicate")

    assert runtime.calls == []
    assert messages[0].startswith("AetherBox commands")
    assert "frobnicate" in messages[1]


def test_build_command_helper_binds_runtime():
    runtime = DummyRuntime()
    helper = build_command_helper(runtime)

    helper.handle_command(COMMAND_NAME, "open")

    assert runtime.is_open is True
