# launcher/display/projector.py
from __future__ import annotations
import logging
from collections.abc import Callable
from pathlib import Path

from launcher.config.keys import PreferenceKey
from launcher.config.store import PreferenceStore
from launcher.core.errors import GraphicsConfigError, IniParseError, InvalidResolutionError
from launcher.core.fs import atomicWriteTextAsync, readTextAsync
from .ini import IniDocument
from .models import Resolution, isUltraWide
from .screen import DisplayReader

logger = logging.getLogger(__name__)

__all__ = ["RENDER_SECTION", "RESOLUTION_KEY", "BORDERLESS_UPSCALE_KEY", "ResolutionProjector"]


RENDER_SECTION = "Render"
RESOLUTION_KEY = "Resolution"
BORDERLESS_UPSCALE_KEY = "BorderlessUpscale"



class ResolutionProjector:
    """
    Writes the chosen resolution into the game's display-tweaks INI.

    The preference store is the single source of truth: the selected value is
    saved first and the file is written from what the store then holds.
    """

    def __init__(
        self,
        store: PreferenceStore,
        displayReader: DisplayReader,
        settingsPath: Callable[[], Path],
    ) -> None:
        self._store = store
        self._displayReader = displayReader
        self._settingsPath = settingsPath

    def _savedPreference(self, path: Path) -> Resolution:
        raw = self._store.get(PreferenceKey.RESOLUTION)
        try:
            return Resolution.fromMapping(raw)
        except InvalidResolutionError as err:
            raise GraphicsConfigError(path, f"saved resolution preference is invalid: {err}") from err

    async def _readDocument(self, path: Path) -> IniDocument:
        if not path.is_file():
            raise GraphicsConfigError(path, "file not found; run the game's configuration once to create it")
        try:
            text = await readTextAsync(path)
        except OSError as err:
            raise GraphicsConfigError(path, f"cannot read file: {err}") from err
        try:
            document = IniDocument.parse(text)
        except IniParseError as err:
            raise GraphicsConfigError(path, f"cannot parse file: {err}") from err
        if not document.hasSection(RENDER_SECTION):
            raise GraphicsConfigError(path, f"missing [{RENDER_SECTION}] section")
        return document

    async def apply(self, selected: Resolution) -> Path:
        """Persist `selected` and project it into the graphics settings file. Returns the file path."""
        self._store.set(PreferenceKey.RESOLUTION, selected.toMapping())

        try:
            path = self._settingsPath()
        except LookupError as err:
            raise GraphicsConfigError("<unset>", f"graphics settings location unknown: {err}") from err
        preference = self._savedPreference(path)
        logger.info("Setting resolution in %s to %s", path, preference)
        document = await self._readDocument(path)

        document.set(RENDER_SECTION, RESOLUTION_KEY, str(preference))

        # Follows the physical monitor, not the selected mode
        current = self._displayReader.currentResolution()
        borderlessUpscale = not isUltraWide(current)
        logger.debug("Setting borderless upscale for %s: %s", current, borderlessUpscale)
        document.set(RENDER_SECTION, BORDERLESS_UPSCALE_KEY, borderlessUpscale)

        await atomicWriteTextAsync(path, document.dumps())
        return path
