# launcher/display/models.py
from __future__ import annotations
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from launcher.core.errors import InvalidResolutionError

__all__ = ["ULTRA_WIDE_THRESHOLD", "Resolution", "isUltraWide"]


# Most 16:9 modes are 1.7777...; some legacy modes are not quite 16:9.
ULTRA_WIDE_THRESHOLD = 1.78

_TOKEN_RE = re.compile(r"^\s*(\d+)\s*x\s*(\d+)\s*$", re.IGNORECASE)



@dataclass(frozen=True, slots=True)
class Resolution:
    """A display mode in physical pixels. Equality and hashing use (width, height)."""
    width: int
    height: int

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidResolutionError(f"{name} must be an integer, got {value!r}")
            if value <= 0:
                raise InvalidResolutionError(f"{name} must be > 0, got {value}")

    @classmethod
    def parse(cls, token: str) -> Resolution:
        """Parse a "<width>x<height>" token, e.g. "1920x1080"."""
        match = _TOKEN_RE.match(token or "")
        if match is None:
            raise InvalidResolutionError(f"Expected '<width>x<height>', got {token!r}")
        return cls(int(match.group(1)), int(match.group(2)))

    @classmethod
    def fromMapping(cls, data: Mapping[str, Any]) -> Resolution:
        if not isinstance(data, Mapping):
            raise InvalidResolutionError(f"Expected a mapping with width/height, got {type(data).__name__}")
        try:
            return cls(data["width"], data["height"])
        except KeyError as err:
            raise InvalidResolutionError(f"Missing resolution field {err}") from None

    def toMapping(self) -> dict[str, int]:
        return {"width": self.width, "height": self.height}

    @property
    def aspectRatio(self) -> float:
        return self.width / self.height

    @property
    def isUltraWide(self) -> bool:
        return isUltraWide(self)

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"



def isUltraWide(resolution: Resolution) -> bool:
    """Anything strictly wider than ULTRA_WIDE_THRESHOLD is ultra-wide."""
    return resolution.width / resolution.height > ULTRA_WIDE_THRESHOLD
