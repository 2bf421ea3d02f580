# launcher/display/service.py
from __future__ import annotations
import asyncio
import logging
import sys
from pathlib import Path

from launcher.config.keys import PreferenceKey
from launcher.config.store import PreferenceStore
from launcher.core.errors import EnumerationTimeout, InvalidResolutionError
from .enumerator import ResolutionEnumerator
from .models import Resolution, isUltraWide
from .projector import ResolutionProjector
from .reconcile import reconcileResolutions
from .screen import DisplayReader

logger = logging.getLogger(__name__)

__all__ = ["SUPPORTED_PLATFORMS", "ResolutionService"]


# The enumeration tool is a Windows executable
SUPPORTED_PLATFORMS = frozenset({"win32"})



class ResolutionService:
    """
    Query facade for display resolutions.

    The selectable list is computed at most once per service lifetime. The
    first caller runs the enumeration tool while holding a lock; callers that
    arrive meanwhile wait and then get the same cached tuple.
    """

    def __init__(
        self,
        store: PreferenceStore,
        displayReader: DisplayReader,
        enumerator: ResolutionEnumerator,
        projector: ResolutionProjector,
        *,
        platform: str | None = None,
        disableUltraWidescreen: bool = False,
    ) -> None:
        self._store = store
        self._displayReader = displayReader
        self._enumerator = enumerator
        self._projector = projector
        self.platform = platform if platform is not None else sys.platform
        self.disableUltraWidescreen = disableUltraWidescreen
        self._cache: tuple[Resolution, ...] | None = None
        self._lock = asyncio.Lock()

    # ----- Sources -----

    @property
    def platformIsSupported(self) -> bool:
        return self.platform in SUPPORTED_PLATFORMS

    def currentResolution(self) -> Resolution:
        return self._displayReader.currentResolution()

    def hasResolutionPreference(self) -> bool:
        return self.resolutionPreference() is not None

    def resolutionPreference(self) -> Resolution | None:
        if not self._store.has(PreferenceKey.RESOLUTION):
            return None
        raw = self._store.get(PreferenceKey.RESOLUTION)
        try:
            return Resolution.fromMapping(raw)
        except InvalidResolutionError as err:
            logger.warning("Ignoring invalid saved resolution preference %r: %s", raw, err)
            return None

    def activeResolution(self) -> Resolution:
        """The saved preference, or the current display mode when none is saved."""
        return self.resolutionPreference() or self.currentResolution()

    # ----- Classification -----

    def isUltraWide(self, resolution: Resolution) -> bool:
        return isUltraWide(resolution)

    def isUnsupportedResolution(self, resolution: Resolution) -> bool:
        return self.disableUltraWidescreen and isUltraWide(resolution)

    # ----- Canonical list -----

    async def getResolutions(self) -> tuple[Resolution, ...]:
        logger.info("Getting resolutions")
        if self._cache is not None:
            logger.debug("Resolutions cached %s", [str(res) for res in self._cache])
            return self._cache

        async with self._lock:
            if self._cache is None:
                self._cache = tuple(await self._computeResolutions())
                logger.debug("Resolutions: %s", ",".join(str(res) for res in self._cache))
        return self._cache

    async def _computeResolutions(self) -> list[Resolution]:
        current = self.currentResolution()
        saved = self.resolutionPreference()

        supported = self.platformIsSupported
        enumerated: list[Resolution] | None = None
        if not supported:
            logger.warning("Resolution enumeration is not supported on '%s'; using fallback list", self.platform)
        else:
            try:
                enumerated = await self._enumerator.listResolutions()
            except EnumerationTimeout as err:
                logger.warning("%s; using fallback list", err)
                supported = False

        return reconcileResolutions(supported, enumerated, current, saved)

    # ----- Selection -----

    async def setResolution(self, resolution: Resolution) -> Path:
        return await self._projector.apply(resolution)
