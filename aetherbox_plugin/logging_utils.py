"""Log file placement and level helpers for the AetherBox plugin."""
from __future__ import annotations

import logging
import os
import tempfile
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Iterator, Optional

LOG_DIR_ENV_VAR = "AETHERBOX_LOG_DIR"
LOG_FILENAME = "aetherbox.log"
LOG_MAX_BYTES = 512 * 1024


def _candidate_log_dirs(log_dir_name: str) -> Iterator[Path]:
    override = os.environ.get(LOG_DIR_ENV_VAR)
    if override:
        yield Path(override).expanduser()
    for env_var, default in (
        ("XDG_STATE_HOME", Path.home() / ".local" / "state"),
        ("XDG_CACHE_HOME", Path.home() / ".cache"),
    ):
        yield Path(os.environ.get(env_var, default)) / "AetherBox" / "logs" / log_dir_name
    yield Path.cwd() / "logs" / log_dir_name


def resolve_logs_dir(log_dir_name: str = "AetherBox") -> Path:
    """
    Return the first writable log directory, creating it as needed.

    ``AETHERBOX_LOG_DIR`` wins when set and is used as-is. Otherwise the XDG
    state and cache homes are tried, then ``./logs``, and finally the system
    temp directory. The plugin folder itself is never used.
    """
    for candidate in _candidate_log_dirs(log_dir_name):
        try:
            candidate.mkdir(parents=True, exist_ok=True)
        except OSError:
            continue
        return candidate
    fallback = Path(tempfile.gettempdir()) / log_dir_name
    fallback.mkdir(parents=True, exist_ok=True)
    return fallback


def _backup_count(retention: int) -> int:
    # ``retention`` counts the live file too.
    return max(1, retention) - 1


def build_rotating_file_handler(
    log_dir: Path,
    filename: str = LOG_FILENAME,
    *,
    retention: int = 5,
    max_bytes: int = LOG_MAX_BYTES,
    formatter: Optional[logging.Formatter] = None,
) -> logging.Handler:
    """Create ``log_dir`` if needed and return a size-rotated handler keeping ``retention`` files."""
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_dir / filename,
        maxBytes=max_bytes,
        backupCount=_backup_count(retention),
        encoding="utf-8",
    )
    if formatter is not None:
        handler.setFormatter(formatter)
    return handler


def resolve_log_level(debug_enabled: bool) -> int:
    """Map the ``debug_logging`` preference onto a ``logging`` level."""
    return logging.DEBUG if debug_enabled else logging.INFO
