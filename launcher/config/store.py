# launcher/config/store.py
from __future__ import annotations
import json
import logging
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any

from .keys import PreferenceKey
from .types import PreferenceProvider

logger = logging.getLogger(__name__)

__all__ = ["PreferenceStore", "PreferenceDefault"]

KeyLike = PreferenceKey | str



@dataclass(frozen=True, slots=True)
class PreferenceDefault:
    """Default value for a preference plus an optional check of the current value."""
    value: Any
    validate: Callable[[], Awaitable[bool]] | None = None



def _keyName(key: KeyLike) -> str:
    return key.value if isinstance(key, PreferenceKey) else str(key)



class PreferenceStore:
    """
    Generic key-value user preference store (get/set/has/delete by string key).

    The persistence layer is a PreferenceProvider passed in by the bootstrap.
    """

    def __init__(self, provider: PreferenceProvider) -> None:
        self._provider = provider

    def get(self, key: KeyLike, default: Any = None) -> Any:
        value = self._provider.get(_keyName(key))
        return default if value is None else value

    def has(self, key: KeyLike) -> bool:
        return self._provider.has(_keyName(key))

    def set(self, key: KeyLike, value: Any) -> None:
        name = _keyName(key)
        if isinstance(value, (dict, list)):
            logger.debug("Setting preference %s to %s", name, json.dumps(value, default=str))
        else:
            logger.debug("Setting preference %s to %s", name, value)
        self._provider.set(name, value)

    def delete(self, key: KeyLike) -> bool:
        name = _keyName(key)
        logger.debug("Deleting preference: %s", name)
        return self._provider.delete(name)

    def snapshot(self) -> dict[str, Any]:
        return self._provider.to_dict()

    async def setDefaultPreferences(self, defaults: Mapping[KeyLike, PreferenceDefault]) -> None:
        """
        Set each default whose key doesn't exist yet or whose current value fails validation.
        """
        logger.debug("Setting default user preferences")
        logger.debug("Current preferences: %s", self.snapshot())
        for key, default in defaults.items():
            name = _keyName(key)
            valid = await default.validate() if default.validate is not None else True
            if not valid:
                logger.warning("Current %s preference is invalid. Setting to default: %s", name, default.value)
            if (not self.has(name) or not valid) and default.value is not None:
                self.set(name, default.value)
        logger.debug("New preferences: %s", self.snapshot())
