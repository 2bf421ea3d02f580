# tests/launcher/app/test_settings.py
from __future__ import annotations

from pathlib import Path

import pytest

from launcher.app.settings import DEFAULT_SETTINGS, deepMerge, loadSettings, loadUserSettings
from launcher.core.errors import SettingsError


def test_defaults_areShipped(tmp_path: Path) -> None:
    settings = loadSettings(tmp_path / "absent.json5", env={"LOCALAPPDATA": str(tmp_path / "Local")})

    assert settings.modpack.name == "Wildlander"
    assert settings.registry.installerDirname == "Wabbajack"
    assert settings.registry.settingsPrefix == "install-settings"
    assert settings.display.enumeratorArgs == ["/L"]
    assert settings.display.timeoutSeconds == 10.0
    assert settings.display.disableUltraWidescreen is False
    assert settings.paths.appDataDir == tmp_path / "Local"
    assert settings.paths.logDirectory == settings.paths.configDir / "logs"
    assert settings.paths.resourceDir is not None and settings.paths.resourceDir.name == "resources"


def test_userFile_mergesOverDefaults(tmp_path: Path) -> None:
    userFile = tmp_path / "launcher.json5"
    userFile.write_text(
        "{\n  // hand edited\n  modpack: { name: 'Other Pack' },\n  display: { disableUltraWidescreen: true },\n}\n",
        encoding="utf-8",
    )

    settings = loadSettings(userFile, env={"CONFIG_PATH": str(tmp_path / "cfg")})

    assert settings.modpack.name == "Other Pack"
    assert settings.modpack.graphicsSettingsFile == "SKSE/Plugins/SSEDisplayTweaks.ini"
    assert settings.display.disableUltraWidescreen is True
    assert settings.paths.configDir == tmp_path / "cfg"


def test_configPathEnv_winsOverOverrides(tmp_path: Path) -> None:
    settings = loadSettings(
        tmp_path / "absent.json5",
        env={"CONFIG_PATH": str(tmp_path / "fromEnv")},
        overrides={"paths": {"configDir": str(tmp_path / "fromOverride")}},
    )

    assert settings.paths.configDir == tmp_path / "fromEnv"


def test_unknownKey_raisesSettingsError(tmp_path: Path) -> None:
    userFile = tmp_path / "launcher.json5"
    userFile.write_text("{ display: { refreshRate: 60 } }", encoding="utf-8")

    with pytest.raises(SettingsError):
        loadSettings(userFile, env={})


def test_nonPositiveTimeout_raisesSettingsError(tmp_path: Path) -> None:
    with pytest.raises(SettingsError):
        loadSettings(tmp_path / "absent.json5", env={}, overrides={"display": {"timeoutSeconds": 0}})


def test_loadUserSettings_errors(tmp_path: Path) -> None:
    assert loadUserSettings(tmp_path / "absent.json5") == {}

    broken = tmp_path / "broken.json5"
    broken.write_text("{ nope", encoding="utf-8")
    with pytest.raises(SettingsError):
        loadUserSettings(broken)

    listFile = tmp_path / "list.json5"
    listFile.write_text("[1]", encoding="utf-8")
    with pytest.raises(SettingsError):
        loadUserSettings(listFile)


def test_deepMerge_doesNotMutateInputs() -> None:
    before = deepMerge(DEFAULT_SETTINGS, {})

    merged = deepMerge(DEFAULT_SETTINGS, {"display": {"enumeratorArgs": ["/S"]}, "extra": 1})

    assert merged["display"]["enumeratorArgs"] == ["/S"]
    assert merged["display"]["timeoutSeconds"] == 10.0
    assert merged["extra"] == 1
    assert DEFAULT_SETTINGS == before
