# launcher/registry/models.py
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime

from pydantic import BaseModel, ConfigDict

__all__ = [
    "PackageRecord",
    "LegacyModList", "LegacyInstallEntry",
    "InstallMetadata", "InstallSettings",
]



@dataclass(frozen=True, slots=True)
class PackageRecord:
    """
    One row of the canonical installed-package registry.
    """
    installPath: str                    # Unique key; absolute path as the installer wrote it
    title: str | None = None
    version: str | None = None
    lastUpdated: datetime | None = None # Only sources with a file mtime carry this


# ----------------------------------------------
#      Legacy registry (installed_modlists.json)
# ----------------------------------------------

class LegacyModList(BaseModel):
    model_config = ConfigDict(extra="ignore")

    Name: str | None = None
    Version: str | None = None



class LegacyInstallEntry(BaseModel):
    """One value of the legacy registry object (every key except "$type")."""
    model_config = ConfigDict(extra="ignore")

    InstallationPath: str
    ModList: LegacyModList


# ----------------------------------------------
#   Current registry (saved_settings/install-settings*)
# ----------------------------------------------

class InstallMetadata(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: str | None = None
    version: str | None = None



class InstallSettings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    InstallLocation: str
    Metadata: InstallMetadata | None = None
