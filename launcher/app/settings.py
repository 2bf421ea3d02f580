# launcher/app/settings.py
from __future__ import annotations
import copy
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import json5
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from launcher.core.errors import SettingsError

logger = logging.getLogger(__name__)

__all__ = [
    "USER_SETTINGS_PATH", "DEFAULT_SETTINGS",
    "PathSettings", "RegistrySettings", "ModpackSettings",
    "DisplaySettings", "LoggingSettings", "LauncherSettings",
    "loadSettings", "loadUserSettings", "deepMerge",
]


USER_SETTINGS_PATH = Path("~/.modpack-launcher/launcher.json5")

DEFAULT_SETTINGS: dict[str, Any] = {
    "paths": {
        "appDataDir": None,       # LOCALAPPDATA, else ~/AppData/Local
        "configDir": None,        # CONFIG_PATH, else ~/.modpack-launcher
        "logDirectory": None,     # <configDir>/logs
        "resourceDir": None,      # <package>/resources
    },
    "registry": {
        "installerDirname": "Wabbajack",
        "legacyFilename": "installed_modlists.json",
        "currentDirname": "saved_settings",
        "settingsPrefix": "install-settings",
    },
    "modpack": {
        "name": "Wildlander",
        "graphicsSettingsFile": "SKSE/Plugins/SSEDisplayTweaks.ini",
    },
    "display": {
        "enumeratorRelativePath": "tools/QRes.exe",
        "enumeratorArgs": ["/L"],
        "timeoutSeconds": 10.0,
        "disableUltraWidescreen": False,
    },
    "logging": {
        "devMode": False,
        "filename": "launcher.log",
    },
}



class _Section(BaseModel):
    model_config = ConfigDict(extra="forbid")



class PathSettings(_Section):
    appDataDir: Path | None = None
    configDir: Path | None = None
    logDirectory: Path | None = None
    resourceDir: Path | None = None



class RegistrySettings(_Section):
    installerDirname: str
    legacyFilename: str
    currentDirname: str
    settingsPrefix: str



class ModpackSettings(_Section):
    name: str
    graphicsSettingsFile: str



class DisplaySettings(_Section):
    enumeratorRelativePath: str
    enumeratorArgs: list[str] = Field(default_factory=list)
    timeoutSeconds: float = Field(gt=0)
    disableUltraWidescreen: bool = False



class LoggingSettings(_Section):
    devMode: bool = False
    filename: str = "launcher.log"



class LauncherSettings(_Section):
    """Validated launcher settings: shipped defaults merged with the user's file and environment."""
    paths: PathSettings
    registry: RegistrySettings
    modpack: ModpackSettings
    display: DisplaySettings
    logging: LoggingSettings



def deepMerge(first: Any, second: Any) -> Any:
    """
    Returns a new value where keys from `second` override/extend `first`.
    Only merges recursively when BOTH sides are dicts; otherwise `second` wins.
    """
    if isinstance(first, Mapping) and isinstance(second, Mapping):
        out: dict[str, Any] = {key: copy.deepcopy(value) for key, value in first.items()}
        for key, value in second.items():
            out[key] = deepMerge(out[key], value) if key in out else copy.deepcopy(value)
        return out
    return copy.deepcopy(second)



def loadUserSettings(path: Path | str | None = None) -> dict[str, Any]:
    filePath = Path(path).expanduser() if path is not None else USER_SETTINGS_PATH.expanduser()
    if not filePath.exists():
        logger.debug("No user settings at '%s'", filePath)
        return {}
    try:
        parsed = json5.loads(filePath.read_text(encoding="utf-8"))
    except ValueError as err:
        raise SettingsError(f"Failed to parse '{filePath}': {err}") from err
    if not isinstance(parsed, Mapping):
        raise SettingsError(f"'{filePath}' must contain an object, not '{type(parsed).__name__}'")
    return dict(parsed)



def _applyEnvironment(raw: dict[str, Any], env: Mapping[str, str]) -> dict[str, Any]:
    paths = raw.setdefault("paths", {})
    if env.get("CONFIG_PATH"):
        paths["configDir"] = env["CONFIG_PATH"]
    if not paths.get("appDataDir"):
        paths["appDataDir"] = env.get("LOCALAPPDATA") or str(Path("~/AppData/Local").expanduser())
    if not paths.get("configDir"):
        paths["configDir"] = str(USER_SETTINGS_PATH.expanduser().parent)
    if not paths.get("logDirectory"):
        paths["logDirectory"] = str(Path(paths["configDir"]) / "logs")
    if not paths.get("resourceDir"):
        paths["resourceDir"] = str(Path(__file__).resolve().parent.parent / "resources")
    return raw



def loadSettings(
    path: Path | str | None = None,
    *,
    env: Mapping[str, str] | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> LauncherSettings:
    """
    Build LauncherSettings from shipped defaults, the user settings file,
    explicit overrides and the environment (CONFIG_PATH, LOCALAPPDATA).
    """
    merged = deepMerge(DEFAULT_SETTINGS, loadUserSettings(path))
    if overrides:
        merged = deepMerge(merged, overrides)
    merged = _applyEnvironment(merged, os.environ if env is None else env)
    try:
        return LauncherSettings.model_validate(merged)
    except ValidationError as err:
        raise SettingsError(f"Invalid launcher settings: {err}") from err
