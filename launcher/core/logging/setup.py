# launcher/core/logging/setup.py
from __future__ import annotations
import logging
import logging.handlers
from pathlib import Path
from typing import TYPE_CHECKING

from .formatters import DevFormatter, JsonFormatter

if TYPE_CHECKING:
    from launcher.app.settings import LoggingSettings

__all__ = [
    "NO_PROPAGATE",
    "configureLogging",
    "getLogger",
]



# Library loggers that should not reach the root handlers
NO_PROPAGATE = ["asyncio", "PyQt6"]



def configureLogging(settings: LoggingSettings, logDirectory: Path | None = None) -> Path | None:
    """
    Install the process-wide logging configuration.

    Dev:
      - Console pretty logs (DEBUG)
      - JSON file log (DEBUG)

    Prod:
      - Console INFO
      - JSON file logs INFO with rotation

    Returns the log file path, or None when file logging is disabled.
    """
    rootLevel = logging.DEBUG if settings.devMode else logging.INFO

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(rootLevel)

    for name in NO_PROPAGATE:
        logging.getLogger(name).propagate = False

    consoleHandler = logging.StreamHandler()
    consoleHandler.setLevel(rootLevel)
    consoleHandler.setFormatter(DevFormatter())
    root.addHandler(consoleHandler)

    if logDirectory is None:
        return None

    logDirectory.mkdir(parents=True, exist_ok=True)
    logFile = logDirectory / settings.filename
    fileHandler = logging.handlers.RotatingFileHandler(
        logFile,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    fileHandler.setLevel(rootLevel)
    fileHandler.setFormatter(JsonFormatter())
    root.addHandler(fileHandler)

    logging.getLogger(__name__).debug("Logging to '%s' at %s", logFile, logging.getLevelName(rootLevel))
    return logFile



def getLogger(name: str, side: str = "") -> logging.Logger:
    return logging.getLogger(f"{str(side).strip()}.{str(name).strip()}" if str(side).strip() else str(name).strip())
