from __future__ import annotations

import logging

import pytest

from aetherbox_plugin.lifecycle import LifecycleTracker


class DummyHandle:
    def __init__(self, log, name):
        self._log = log
        self._name = name

    def dispose(self):
        self._log.append(self._name)


def _tracker():
    return LifecycleTracker(logging.getLogger("test-lifecycle"))


def test_dispose_all_releases_newest_first_once():
    released = []
    tracker = _tracker()
    first = DummyHandle(released, "first")
    second = DummyHandle(released, "second")
    tracker.track_handle(first)
    tracker.track_handle(second)
    tracker.track_handle(first)

    assert tracker.dispose_all() == 2
    assert released == ["second", "first"]
    assert tracker.dispose_all() == 0
    assert released == ["second", "first"]


def test_custom_release_callback_is_used():
    released = []
    tracker = _tracker()
    tracker.track_handle(object(), name="raw", release=lambda: released.append("raw"))

    assert tracker.dispose_all() == 1
    assert released == ["raw"]


def test_handle_without_dispose_is_rejected():
    tracker = _tracker()

    with pytest.raises(TypeError):
        tracker.track_handle(object())
    tracker.track_handle(None)

    assert tracker.dispose_all() == 0


def test_failing_release_does_not_stop_teardown():
    released = []
    tracker = _tracker()

    def _boom():
        raise RuntimeError("boom")

    tracker.track_handle(DummyHandle(released, "kept"))
    tracker.track_handle(object(), name="broken", release=_boom)

    assert tracker.dispose_all() == 1
    assert released == ["kept"]
