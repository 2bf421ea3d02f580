# launcher/display/__init__.py
from .enumerator import ResolutionEnumerator, parseEnumeratorOutput
from .ini import IniDocument
from .models import Resolution, isUltraWide, ULTRA_WIDE_THRESHOLD
from .projector import ResolutionProjector
from .reconcile import reconcileResolutions, sortResolutions
from .screen import DisplayReader, QtDisplayReader, StaticDisplayReader
from .service import ResolutionService

__all__ = [
    "ResolutionEnumerator",
    "parseEnumeratorOutput",
    "IniDocument",
    "Resolution",
    "isUltraWide",
    "ULTRA_WIDE_THRESHOLD",
    "ResolutionProjector",
    "reconcileResolutions",
    "sortResolutions",
    "DisplayReader",
    "QtDisplayReader",
    "StaticDisplayReader",
    "ResolutionService",
]
