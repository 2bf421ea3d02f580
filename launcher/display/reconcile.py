# launcher/display/reconcile.py
from __future__ import annotations
import logging
from collections.abc import Iterable, Sequence

from .models import Resolution

logger = logging.getLogger(__name__)

__all__ = [
    "FALLBACK_RESOLUTIONS", "ULTRA_WIDE_SAMPLE",
    "resolutionSortKey", "sortResolutions", "dedupeResolutions",
    "appendIfMissing", "fallbackResolutions", "reconcileResolutions",
]


ULTRA_WIDE_SAMPLE = Resolution(3440, 1440)

# Offered when the enumeration tool cannot run on this host
FALLBACK_RESOLUTIONS: tuple[Resolution, ...] = (
    Resolution(7680, 4320),
    ULTRA_WIDE_SAMPLE,
    Resolution(1920, 1080),
)



def resolutionSortKey(resolution: Resolution) -> tuple[int, int]:
    # Larger first: width, then height
    return (-resolution.width, -resolution.height)



def sortResolutions(resolutions: Iterable[Resolution]) -> list[Resolution]:
    return sorted(resolutions, key=resolutionSortKey)



def dedupeResolutions(resolutions: Iterable[Resolution]) -> list[Resolution]:
    """Drop exact (width, height) repeats, keeping first occurrences in order."""
    seen: set[Resolution] = set()
    out: list[Resolution] = []
    for resolution in resolutions:
        if resolution not in seen:
            seen.add(resolution)
            out.append(resolution)
    return out



def appendIfMissing(resolutions: list[Resolution], resolution: Resolution) -> bool:
    if resolution in resolutions:
        return False
    resolutions.append(resolution)
    return True



def fallbackResolutions(current: Resolution, saved: Resolution | None = None) -> list[Resolution]:
    out = [current, *FALLBACK_RESOLUTIONS]
    if saved is not None:
        out.append(saved)
    return sortResolutions(dedupeResolutions(out))



def reconcileResolutions(
    platformIsSupported: bool,
    enumerated: Sequence[Resolution] | None,
    current: Resolution,
    saved: Resolution | None = None,
) -> list[Resolution]:
    """
    Build the canonical, sorted list of selectable resolutions.

    The result has no duplicate (width, height) pairs and always contains
    `current` and, when given, `saved`.
    """
    if not platformIsSupported or enumerated is None:
        return fallbackResolutions(current, saved)

    resolutions = dedupeResolutions(enumerated)
    logger.debug("Supported resolutions: %s", [str(res) for res in resolutions])

    # The enumerator sometimes misses the native mode
    if appendIfMissing(resolutions, current):
        logger.debug("Native resolution (%s) not found. Adding to the list.", current)

    # A hand-edited preference may name a mode the enumerator never reported
    if saved is not None and appendIfMissing(resolutions, saved):
        logger.debug("Preferred resolution (%s) not found. Adding to the list.", saved)

    return sortResolutions(resolutions)
