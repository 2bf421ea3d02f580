# launcher/config/keys.py
from __future__ import annotations
from enum import Enum

__all__ = ["PreferenceKey"]



class PreferenceKey(str, Enum):
    MOD_DIRECTORY = "modDirectory"
    PRESET = "preset"
    GRAPHICS = "graphics"
    ENB_PROFILE = "enbProfile"
    PREVIOUS_ENB_PROFILE = "previousEnbProfile"
    RESOLUTION = "resolution"
    SHOW_HIDDEN_PROFILE = "showHiddenProfile"
    CHECK_PREREQUISITES = "checkPrerequisites"

    def __str__(self) -> str:
        return self.value
