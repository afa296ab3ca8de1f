from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Dict, List, Optional, Tuple


class LifecycleTracker:
    """Tracks disposable handles and releases each exactly once on teardown."""

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger
        self._lock = threading.Lock()
        self._handles: Dict[int, Tuple[str, Any, Callable[[], Any]]] = {}
        self._order: List[int] = []

    def track_handle(self, handle: Any, *, name: Optional[str] = None, release: Optional[Callable[[], Any]] = None) -> None:
        if handle is None:
            return
        release_fn = release or getattr(handle, "dispose", None)
        if not callable(release_fn):
            raise TypeError(f"{handle!r} has no dispose() and no release callback was given")
        key = id(handle)
        with self._lock:
            if key in self._handles:
                return
            self._handles[key] = (name or type(handle).__name__, handle, release_fn)
            self._order.append(key)

    def dispose_all(self) -> int:
        """Release tracked handles newest-first; returns how many were released."""
        with self._lock:
            entries = [self._handles[key] for key in reversed(self._order)]
            self._handles.clear()
            self._order.clear()
        released = 0
        for name, _handle, release_fn in entries:
            try:
                release_fn()
            except Exception as exc:
                self._logger.warning("Failed to dispose %s: %s", name, exc, exc_info=exc)
                continue
            released += 1
        return released

    def log_state(self, label: str) -> None:
        with self._lock:
            names = [self._handles[key][0] for key in self._order]
        if names:
            self._logger.debug("Tracked resources %s: handles=%s", label, names)
