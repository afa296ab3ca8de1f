"""JSON-backed configuration for the AetherBox plugin."""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List


PREFERENCES_FILE = "aetherbox_settings.json"
LOG_RETENTION_DEFAULT = 5
LOG_RETENTION_MAX = 50


@dataclass
class PluginConfig:
    """Simple JSON-backed configuration store."""

    plugin_dir: Path
    version: int = 0
    show_tooltips: bool = True
    debug_logging: bool = False
    log_retention: int = LOG_RETENTION_DEFAULT
    links: List[Dict[str, str]] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.plugin_dir = Path(self.plugin_dir)
        self._path = self.plugin_dir / PREFERENCES_FILE
        self._load()

    @property
    def path(self) -> Path:
        return self._path

    # Persistence ---------------------------------------------------------

    def _load(self) -> None:
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return
        except json.JSONDecodeError:
            return
        if not isinstance(data, dict):
            return
        try:
            self.version = max(0, int(data.get("version", 0)))
        except (TypeError, ValueError):
            self.version = 0
        self.show_tooltips = bool(data.get("show_tooltips", True))
        self.debug_logging = bool(data.get("debug_logging", False))
        try:
            retention = int(data.get("log_retention", LOG_RETENTION_DEFAULT))
        except (TypeError, ValueError):
            retention = LOG_RETENTION_DEFAULT
        self.log_retention = max(1, min(retention, LOG_RETENTION_MAX))
        raw_links = data.get("links")
        links: List[Dict[str, str]] = []
        if isinstance(raw_links, list):
            for entry in raw_links:
                if not isinstance(entry, dict):
                    continue
                url = entry.get("url")
                if not isinstance(url, str) or not url.strip():
                    continue
                description = entry.get("description")
                links.append(
                    {
                        "url": url.strip(),
                        "description": description.strip() if isinstance(description, str) else "",
                    }
                )
        self.links = links

    def save(self) -> None:
        payload: Dict[str, Any] = {
            "version": int(self.version),
            "show_tooltips": bool(self.show_tooltips),
            "debug_logging": bool(self.debug_logging),
            "log_retention": int(self.log_retention),
            "links": [dict(link) for link in self.links],
        }
        self.plugin_dir.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
