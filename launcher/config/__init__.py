# launcher/config/__init__.py
from .keys import PreferenceKey
from .providers import FileProvider, MemoryProvider
from .store import PreferenceStore, PreferenceDefault

__all__ = [
    "PreferenceKey",
    "FileProvider",
    "MemoryProvider",
    "PreferenceStore",
    "PreferenceDefault",
]
