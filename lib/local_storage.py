# =============================================================================
# lib/local_storage.py - File-backed Key-Value Storage
# =============================================================================
# A tiny localStorage-like store for the local CMS workspace:
# - The file holds one JSON object mapping keys to JSON-encoded strings
# - get() decodes a value, falling back to a default when the key is missing
#   or its value can't be decoded
# - set() encodes a value and rewrites the file atomically (temp -> rename)
#
# Usage:
#   from lib.local_storage import KeyValueStorage
#   storage = KeyValueStorage("local_cms.json")
#   storage.set("theme", True)
#   dark = storage.get("theme", False)
# =============================================================================

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

_MISSING = object()


class KeyValueStorage:
    """
    Key-value storage persisted to a single JSON file.

    Values are stored JSON-encoded, one string per key, the same way a
    browser's localStorage holds them.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _read_all(self) -> dict[str, str]:
        if not self.path.exists():
            return {}

        try:
            data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable storage file {self.path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Ignoring storage file {self.path}: not a JSON object")
            return {}
        return data

    def _write_all(self, data: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)

        temp_path = None
        try:
            with tempfile.NamedTemporaryFile(
                mode="w",
                dir=self.path.parent,
                suffix=".tmp",
                delete=False,
                encoding="utf-8",
            ) as f:
                temp_path = f.name
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(temp_path, self.path)
            temp_path = None
        finally:
            if temp_path is not None and os.path.exists(temp_path):
                os.unlink(temp_path)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Return the decoded value stored under key.

        Missing keys, null values and values that fail to decode all return
        default.
        """
        raw = self._read_all().get(key, _MISSING)
        if raw is _MISSING or not isinstance(raw, str):
            return default

        try:
            value = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning(f"Ignoring corrupt value for key {key!r}")
            return default

        return default if value is None else value

    def set(self, key: str, value: Any) -> None:
        """Encode value as JSON and store it under key."""
        data = self._read_all()
        data[key] = json.dumps(value, ensure_ascii=False)
        self._write_all(data)

    def remove(self, key: str) -> None:
        """Delete key if present."""
        data = self._read_all()
        if data.pop(key, None) is not None:
            self._write_all(data)

    def keys(self) -> list[str]:
        return sorted(self._read_all())
