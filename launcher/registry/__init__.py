# launcher/registry/__init__.py
from .models import PackageRecord
from .reconcile import reconcilePackages, shouldReplace
from .service import InstalledPackagesService, UNKNOWN_VERSION
from .sources import readCurrentRegistry, readLegacyRegistry

__all__ = [
    "PackageRecord",
    "reconcilePackages",
    "shouldReplace",
    "InstalledPackagesService",
    "UNKNOWN_VERSION",
    "readCurrentRegistry",
    "readLegacyRegistry",
]
