# launcher/app/paths.py
from __future__ import annotations
from pathlib import Path

from launcher.app.settings import LauncherSettings
from launcher.config.keys import PreferenceKey
from launcher.config.store import PreferenceStore

__all__ = ["PACKAGE_DIR", "LauncherPaths"]


PACKAGE_DIR = Path(__file__).resolve().parent.parent # launcher/



class LauncherPaths:
    """
    Directory layout derived from settings and the user's mod directory preference.

    Everything that depends on the mod directory is computed on each call, so a
    preference change is picked up without rebuilding services.
    """

    def __init__(self, settings: LauncherSettings, store: PreferenceStore) -> None:
        self._settings = settings
        self._store = store

    # ----- Installer registries -----

    def installerDirectory(self) -> Path:
        appData = self._settings.paths.appDataDir
        assert appData is not None, "appDataDir is filled in by loadSettings()"
        return appData / self._settings.registry.installerDirname

    def legacyRegistryPath(self) -> Path:
        return self.installerDirectory() / self._settings.registry.legacyFilename

    def currentRegistryDir(self) -> Path:
        return self.installerDirectory() / self._settings.registry.currentDirname

    # ----- Mod directory -----

    def modDirectorySetting(self) -> str | None:
        """The mod directory exactly as stored; installers key their records by this string."""
        value = self._store.get(PreferenceKey.MOD_DIRECTORY)
        return str(value) if value else None

    def modDirectory(self) -> Path | None:
        value = self.modDirectorySetting()
        return Path(value) if value else None

    def _requireModDirectory(self) -> Path:
        modDir = self.modDirectory()
        if modDir is None:
            raise LookupError(f"Preference '{PreferenceKey.MOD_DIRECTORY}' is not set")
        return modDir

    def gameDirectory(self) -> Path:
        return self._requireModDirectory() / "Stock Game"

    def launcherDirectory(self) -> Path:
        return self._requireModDirectory() / "launcher"

    def backupDirectory(self) -> Path:
        return self.launcherDirectory() / "_backups"

    def backupsExist(self) -> bool:
        return self.modDirectory() is not None and self.backupDirectory().exists()

    def graphicsSettingsPath(self) -> Path:
        modpack = self._settings.modpack
        return self._requireModDirectory() / "mods" / modpack.name / modpack.graphicsSettingsFile

    # ----- Launcher-owned -----

    def resourceDirectory(self) -> Path:
        return self._settings.paths.resourceDir or PACKAGE_DIR / "resources"

    def enumeratorPath(self) -> Path:
        return self.resourceDirectory() / self._settings.display.enumeratorRelativePath

    def configDirectory(self) -> Path:
        configDir = self._settings.paths.configDir
        assert configDir is not None, "configDir is filled in by loadSettings()"
        return configDir

    def preferencesPath(self) -> Path:
        return self.configDirectory() / "userPreferences.json"

    def logDirectory(self) -> Path:
        return self._settings.paths.logDirectory or self.configDirectory() / "logs"
