# launcher/core/errors.py
from __future__ import annotations
from pathlib import Path

__all__ = [
    "LauncherError", "SettingsError", "RegistryParseError",
    "EnumerationError", "EnumerationTimeout", "GraphicsConfigError", "DisplayQueryError",
    "IniParseError", "InvalidResolutionError",
]



class LauncherError(Exception):
    """Base class for failures the launcher surfaces to its caller."""
    pass



class SettingsError(LauncherError):
    pass



class RegistryParseError(LauncherError):
    """An installer registry file exists but could not be parsed or validated."""
    def __init__(self, path: Path | str, reason: str):
        super().__init__(f"Failed to parse installer registry '{path}': {reason}")
        self.path = Path(path)
        self.reason = reason



class EnumerationError(LauncherError):
    """The external resolution enumeration tool reported a failure."""
    def __init__(self, message: str, *, stderr: str = ""):
        super().__init__(message)
        self.stderr = stderr



class EnumerationTimeout(EnumerationError):
    pass



class DisplayQueryError(LauncherError):
    """The current display mode could not be read (no Qt, no screen)."""
    pass



class GraphicsConfigError(LauncherError):
    def __init__(self, path: Path | str, reason: str):
        super().__init__(f"Graphics settings '{path}': {reason}")
        self.path = Path(path)
        self.reason = reason



class IniParseError(ValueError):
    def __init__(self, lineNo: int, line: str, reason: str):
        super().__init__(f"line {lineNo}: {reason}: {line!r}")
        self.lineNo = lineNo
        self.line = line



class InvalidResolutionError(ValueError):
    pass
