# launcher/registry/service.py
from __future__ import annotations
import logging
from pathlib import Path

from launcher.app.paths import LauncherPaths
from launcher.app.settings import LauncherSettings
from launcher.core.errors import LauncherError
from .models import PackageRecord
from .reconcile import reconcilePackages
from .sources import readCurrentRegistry, readLegacyRegistry

logger = logging.getLogger(__name__)

__all__ = ["UNKNOWN_VERSION", "InstalledPackagesService"]


UNKNOWN_VERSION = "unknown"



class InstalledPackagesService:
    """
    Query facade over the installer registries.

    Nothing is cached: every query re-reads both sources and reconciles them,
    so an install finished while the launcher is open shows up immediately.
    """

    def __init__(self, settings: LauncherSettings, paths: LauncherPaths) -> None:
        self._settings = settings
        self._paths = paths

    @property
    def productName(self) -> str:
        return self._settings.modpack.name

    async def installedPackages(self) -> dict[str, PackageRecord] | None:
        """All known installs keyed by install path, or None when no source yields a record."""
        legacy = await readLegacyRegistry(self._paths.legacyRegistryPath())
        current = await readCurrentRegistry(
            self._paths.currentRegistryDir(),
            self._settings.registry.settingsPrefix,
        )
        merged = reconcilePackages(legacy, current)
        logger.info(
            "Found %d candidate install(s) (%d legacy, %d current record(s))",
            len(merged), len(legacy), len(current),
        )
        return merged or None

    async def packagesMatchingCurrentProduct(self) -> list[str]:
        packages = await self.installedPackages()
        matches = [
            installPath
            for installPath, record in (packages or {}).items()
            if record.title == self.productName
        ]
        logger.info(
            "Discovered %d %s modpack installation(s) in %s",
            len(matches), self.productName, self._paths.installerDirectory(),
        )
        logger.debug("%s", matches)
        return matches

    async def metadataAtPath(self, path: Path | str) -> PackageRecord | None:
        packages = await self.installedPackages()
        if not packages:
            return None
        return packages.get(str(path))

    async def currentProductMetadata(self) -> PackageRecord | None:
        modDirectory = self._paths.modDirectorySetting()
        if modDirectory is None:
            logger.debug("No mod directory preference; current product metadata unavailable")
            return None
        return await self.metadataAtPath(modDirectory)

    async def currentProductVersion(self) -> str:
        """Version of the install in the mod directory; "unknown" instead of any failure."""
        try:
            record = await self.currentProductMetadata()
        except (LauncherError, OSError):
            logger.exception("Could not resolve the installed %s version", self.productName)
            return UNKNOWN_VERSION
        if record is None or not record.version:
            return UNKNOWN_VERSION
        return record.version
