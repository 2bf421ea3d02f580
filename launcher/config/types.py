# launcher/config/types.py
from __future__ import annotations
from typing import Any, Protocol

__all__ = ["PreferenceProvider"]



class PreferenceProvider(Protocol):
    """Flat key-value persistence layer behind PreferenceStore."""

    def get(self, key: str) -> Any | None: ...

    def set(self, key: str, value: Any) -> None: ...

    def has(self, key: str) -> bool: ...

    def delete(self, key: str) -> bool: ...

    def to_dict(self) -> dict[str, Any]: ...

    def save(self) -> None: ...
