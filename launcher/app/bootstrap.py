# launcher/app/bootstrap.py
from __future__ import annotations
import logging
from dataclasses import dataclass

from launcher.app.paths import LauncherPaths
from launcher.app.settings import LauncherSettings
from launcher.config.providers import FileProvider
from launcher.config.store import PreferenceStore
from launcher.config.types import PreferenceProvider
from launcher.display.enumerator import ResolutionEnumerator
from launcher.display.projector import ResolutionProjector
from launcher.display.screen import DisplayReader, QtDisplayReader
from launcher.display.service import ResolutionService
from launcher.registry.service import InstalledPackagesService

logger = logging.getLogger(__name__)

__all__ = ["LauncherServices", "buildServices"]



@dataclass(frozen=True, slots=True)
class LauncherServices:
    """Everything a shell needs, wired once at startup. No module-level singletons."""
    settings: LauncherSettings
    store: PreferenceStore
    paths: LauncherPaths
    packages: InstalledPackagesService
    resolutions: ResolutionService



def buildServices(
    settings: LauncherSettings,
    *,
    provider: PreferenceProvider | None = None,
    displayReader: DisplayReader | None = None,
    enumerator: ResolutionEnumerator | None = None,
    platform: str | None = None,
) -> LauncherServices:
    """
    Construct and connect the launcher services.

    Collaborators default to the real ones (preference file under the config
    directory, Qt primary screen, the bundled enumeration tool); pass
    replacements to run headless.
    """
    if provider is None:
        assert settings.paths.configDir is not None, "configDir is filled in by loadSettings()"
        provider = FileProvider(settings.paths.configDir / "userPreferences.json")
    store = PreferenceStore(provider)
    paths = LauncherPaths(settings, store)

    if displayReader is None:
        displayReader = QtDisplayReader()
    if enumerator is None:
        enumerator = ResolutionEnumerator(
            paths.enumeratorPath(),
            settings.display.enumeratorArgs,
            timeoutSeconds=settings.display.timeoutSeconds,
        )

    projector = ResolutionProjector(store, displayReader, paths.graphicsSettingsPath)
    resolutions = ResolutionService(
        store,
        displayReader,
        enumerator,
        projector,
        platform=platform,
        disableUltraWidescreen=settings.display.disableUltraWidescreen,
    )
    packages = InstalledPackagesService(settings, paths)

    logger.debug("Launcher services ready (config: %s)", paths.configDirectory())
    return LauncherServices(
        settings=settings,
        store=store,
        paths=paths,
        packages=packages,
        resolutions=resolutions,
    )
