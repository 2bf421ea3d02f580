# launcher/display/screen.py
from __future__ import annotations
import logging
from typing import Protocol

from launcher.core.errors import DisplayQueryError
from .models import Resolution

logger = logging.getLogger(__name__)

__all__ = ["DisplayReader", "StaticDisplayReader", "QtDisplayReader"]



class DisplayReader(Protocol):
    def currentResolution(self) -> Resolution: ...



class StaticDisplayReader:
    """Reports a fixed resolution. For headless hosts and tests."""
    def __init__(self, resolution: Resolution) -> None:
        self.resolution = resolution

    def currentResolution(self) -> Resolution:
        return self.resolution



class QtDisplayReader:
    """
    Primary screen resolution in physical pixels via PyQt6.

    Qt reports logical size; multiplying by the device pixel ratio gives
    what the game will actually render at.
    """

    def __init__(self) -> None:
        self._app = None

    def _ensureApp(self):
        try:
            from PyQt6.QtGui import QGuiApplication
        except ImportError as err:
            raise DisplayQueryError(
                "PyQt6 is required to read the current display; install modpack-launcher[gui]"
            ) from err

        app = QGuiApplication.instance()
        if app is None:
            # Keep a reference; Qt tears the screen list down with the app
            self._app = QGuiApplication([])
            app = self._app
        return app

    def currentResolution(self) -> Resolution:
        app = self._ensureApp()
        screen = app.primaryScreen()
        if screen is None:
            raise DisplayQueryError("Qt reports no primary screen")
        size = screen.size()
        scaleFactor = screen.devicePixelRatio()
        resolution = Resolution(round(size.width() * scaleFactor), round(size.height() * scaleFactor))
        logger.debug(
            "Primary screen %s: %dx%d @ %.2f → %s",
            screen.name(), size.width(), size.height(), scaleFactor, resolution,
        )
        return resolution
