# tests/launcher/app/test_bootstrap.py
from __future__ import annotations

from pathlib import Path

import pytest

from launcher.app.bootstrap import buildServices
from launcher.app.paths import LauncherPaths
from launcher.config.keys import PreferenceKey
from launcher.config.providers import FileProvider, MemoryProvider
from launcher.display.enumerator import ResolutionEnumerator
from launcher.display.models import Resolution
from launcher.display.screen import StaticDisplayReader


# ----------------------------
# LauncherPaths
# ----------------------------

def test_paths_registryLocations(settings, store) -> None:
    paths = LauncherPaths(settings, store)

    assert paths.installerDirectory() == settings.paths.appDataDir / "Wabbajack"
    assert paths.legacyRegistryPath().name == "installed_modlists.json"
    assert paths.currentRegistryDir() == paths.installerDirectory() / "saved_settings"
    assert paths.preferencesPath() == settings.paths.configDir / "userPreferences.json"
    assert paths.enumeratorPath() == settings.paths.resourceDir / "tools" / "QRes.exe"
    assert paths.logDirectory() == settings.paths.configDir / "logs"


def test_paths_modDirectoryDerived(settings, store, tmp_path: Path) -> None:
    paths = LauncherPaths(settings, store)
    assert paths.modDirectory() is None
    assert paths.backupsExist() is False
    with pytest.raises(LookupError):
        paths.graphicsSettingsPath()

    modDir = tmp_path / "Wildlander"
    store.set(PreferenceKey.MOD_DIRECTORY, str(modDir))

    assert paths.modDirectorySetting() == str(modDir)
    assert paths.gameDirectory() == modDir / "Stock Game"
    assert paths.backupDirectory() == modDir / "launcher" / "_backups"
    assert paths.graphicsSettingsPath() == modDir / "mods" / "Wildlander" / "SKSE" / "Plugins" / "SSEDisplayTweaks.ini"
    assert paths.backupsExist() is False

    paths.backupDirectory().mkdir(parents=True)
    assert paths.backupsExist() is True


# ----------------------------
# buildServices
# ----------------------------

def test_buildServices_defaultsToFileProviderAndBundledTool(settings) -> None:
    services = buildServices(settings, displayReader=StaticDisplayReader(Resolution(1920, 1080)))

    services.store.set(PreferenceKey.PRESET, "quality")

    assert (settings.paths.configDir / "userPreferences.json").is_file()
    enumerator = services.resolutions._enumerator
    assert isinstance(enumerator, ResolutionEnumerator)
    assert enumerator.executable == str(settings.paths.resourceDir / "tools" / "QRes.exe")
    assert enumerator.args == ["/L"]


@pytest.mark.asyncio
async def test_buildServices_headlessWiring(settings, tmp_path: Path) -> None:
    modDir = tmp_path / "Wildlander"
    iniPath = modDir / "mods" / "Wildlander" / "SKSE" / "Plugins" / "SSEDisplayTweaks.ini"
    iniPath.parent.mkdir(parents=True)
    iniPath.write_text("[Render]\nResolution=1920x1080\n", encoding="utf-8")

    provider = MemoryProvider({"modDirectory": str(modDir)})
    services = buildServices(
        settings,
        provider=provider,
        displayReader=StaticDisplayReader(Resolution(2560, 1440)),
        platform="linux",
    )

    assert await services.packages.currentProductVersion() == "unknown"
    resolutions = await services.resolutions.getResolutions()
    assert Resolution(2560, 1440) in resolutions

    await services.resolutions.setResolution(Resolution(2560, 1440))

    assert iniPath.read_text(encoding="utf-8") == "[Render]\nResolution=2560x1440\nBorderlessUpscale=true\n"
    assert provider.get("resolution") == {"width": 2560, "height": 1440}


def test_buildServices_fileProviderIsShared(settings) -> None:
    provider = FileProvider(settings.paths.configDir / "prefs.json")

    services = buildServices(settings, provider=provider, displayReader=StaticDisplayReader(Resolution(800, 600)))

    services.store.set(PreferenceKey.MOD_DIRECTORY, "C:\\WL")
    assert services.paths.modDirectorySetting() == "C:\\WL"
    assert provider.get("modDirectory") == "C:\\WL"
