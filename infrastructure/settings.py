"""Settings access helpers for JSON-based configuration."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

DEFAULT_SETTINGS_PATH = Path.home() / ".photo-prefixer" / "settings.json"


class JsonSettings:
    """Lightweight JSON settings reader with dotted-key access."""

    def __init__(self, settings_path: str | Path | None = None) -> None:
        self._data: dict[str, Any] = {}
        self._path = Path(settings_path) if settings_path is not None else None
        if self._path is None:
            return
        if not self._path.exists():
            raise FileNotFoundError(f"settings.json not found: {self._path}")
        with self._path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"settings file must hold a JSON object: {self._path}")
        self._data = data

    @classmethod
    def load_default(cls, settings_path: str | Path | None = None) -> JsonSettings:
        """Load `settings_path`, else the per-user file if it exists, else empty."""
        if settings_path is not None:
            return cls(settings_path)
        if DEFAULT_SETTINGS_PATH.exists():
            return cls(DEFAULT_SETTINGS_PATH)
        return cls()

    @property
    def path(self) -> Path | None:
        """Path the settings were read from, if any."""
        return self._path

    def get(self, key: str, default: Any | None = None) -> Any:
        """Return value for dotted `key`, or `default` if not present."""
        parts = key.split(".")
        node: Any = self._data
        for part in parts:
            if isinstance(node, dict) and part in node:
                node = node[part]
            else:
                return default
        return node
