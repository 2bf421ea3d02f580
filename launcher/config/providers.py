# launcher/config/providers.py
from __future__ import annotations
import copy
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import json5

from launcher.core.fs import atomicWriteText
from .types import PreferenceProvider

logger = logging.getLogger(__name__)

__all__ = ["MemoryProvider", "FileProvider"]

# ----------------------------------------------
#          MemoryProvider (in-memory)
# ----------------------------------------------

class MemoryProvider(PreferenceProvider):
    """
    Volatile, writable provider (never saved to disk). Used for headless runs and tests.
    """
    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = copy.deepcopy(dict(data or {}))

    def get(self, key: str) -> Any | None:
        return copy.deepcopy(self._data.get(key))

    def set(self, key: str, value: Any) -> None:
        if value is None:
            self._data.pop(key, None)
            return
        self._data[key] = copy.deepcopy(value)

    def has(self, key: str) -> bool:
        return key in self._data

    def delete(self, key: str) -> bool:
        return self._data.pop(key, None) is not None

    def to_dict(self) -> dict[str, Any]:
        return copy.deepcopy(self._data)

    def save(self) -> None:
        return # Nothing to do


# ----------------------------------------------
#        File-backed provider JSON/JSON5
# ----------------------------------------------

class FileProvider(PreferenceProvider):
    """
    Writable preference provider that persists to a .json or .json5 file.

    Every mutation is saved immediately with an atomic replace, so the file on
    disk always matches what get() returns.

    Behavior:
        • Missing file → starts with empty dict
        • Parse error → logs warning and starts empty dict
        • Non-object JSON → raises TypeError
    """
    def __init__(self, path: str | Path, *, autoSave: bool = True) -> None:
        self.path = Path(path)
        self.autoSave = autoSave
        self._data: dict[str, Any] = {}
        self._load()

    def _load(self) -> None:
        self._data.clear()

        if not self.path.exists():
            logger.debug("%s: '%s' is missing → starting as empty dict", type(self).__name__, self.path)
            return

        if not self.path.is_file():
            raise IsADirectoryError(f"{type(self).__name__}: '{self.path}' exists but is not a file")

        text = self.path.read_text(encoding="utf-8")
        try:
            parsed = json5.loads(text) if text.strip() else {}
        except ValueError as err:
            logger.warning("%s: parse failed for '%s': %s", type(self).__name__, self.path, err)
            logger.debug("%s: starting as empty dict", type(self).__name__)
            parsed = {}

        if parsed is None:
            parsed = {}

        if not isinstance(parsed, Mapping):
            raise TypeError(f"{type(self).__name__}: file content must be a JSON object, not '{type(parsed).__name__}'")

        self._data = dict(parsed)

    def get(self, key: str) -> Any | None:
        return copy.deepcopy(self._data.get(key))

    def set(self, key: str, value: Any) -> None:
        if value is None:
            self._data.pop(key, None)
        else:
            self._data[key] = copy.deepcopy(value)
        if self.autoSave:
            self.save()

    def has(self, key: str) -> bool:
        return key in self._data

    def delete(self, key: str) -> bool:
        existed = self._data.pop(key, None) is not None
        if existed and self.autoSave:
            self.save()
        return existed

    def to_dict(self) -> dict[str, Any]:
        return copy.deepcopy(self._data)

    def save(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        out = json5.dumps(self._data, indent=2, quote_keys=True)
        if not out.endswith("\n"):
            out += "\n"
        atomicWriteText(self.path, out)
        logger.debug("%s: saved %d keys to '%s'", type(self).__name__, len(self._data), self.path)
