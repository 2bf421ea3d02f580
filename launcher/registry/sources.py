# launcher/registry/sources.py
from __future__ import annotations
import asyncio
import json
import logging
from collections.abc import Mapping
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from launcher.core.errors import RegistryParseError
from launcher.core.fs import readTextAsync
from .models import InstallSettings, LegacyInstallEntry, PackageRecord

logger = logging.getLogger(__name__)

__all__ = [
    "LEGACY_TYPE_KEY", "DEFAULT_SETTINGS_PREFIX",
    "readLegacyRegistry", "readCurrentRegistry", "listInstallSettingsFiles",
]


LEGACY_TYPE_KEY = "$type"
DEFAULT_SETTINGS_PREFIX = "install-settings"



async def _readJsonObject(path: Path) -> Mapping[str, Any]:
    try:
        text = await readTextAsync(path)
    except (OSError, UnicodeDecodeError) as err:
        raise RegistryParseError(path, f"cannot read file ({err})") from err
    try:
        parsed = json.loads(text)
    except ValueError as err:
        raise RegistryParseError(path, f"malformed JSON ({err})") from err
    if not isinstance(parsed, Mapping):
        raise RegistryParseError(path, f"expected a JSON object, got '{type(parsed).__name__}'")
    return parsed



async def readLegacyRegistry(path: Path | str) -> list[PackageRecord]:
    """
    Read the older installer's single-file registry.

    Returns [] (with a warning) when the file does not exist. Records carry no
    timestamp because this source has none.
    """
    path = Path(path)
    if not path.exists():
        logger.warning("%s does not exist.", path)
        return []

    document = await _readJsonObject(path)
    records: list[PackageRecord] = []
    for key, raw in document.items():
        if key == LEGACY_TYPE_KEY:
            continue
        try:
            entry = LegacyInstallEntry.model_validate(raw)
        except ValidationError as err:
            raise RegistryParseError(path, f"entry '{key}' is invalid: {err}") from err
        records.append(PackageRecord(
            installPath=entry.InstallationPath,
            title=entry.ModList.Name,
            version=entry.ModList.Version,
        ))
    logger.debug("Read %d record(s) from legacy registry '%s'", len(records), path)
    return records



def _statMtime(path: Path) -> datetime:
    return datetime.fromtimestamp(path.lstat().st_mtime, tz=timezone.utc)



def listInstallSettingsFiles(directory: Path, prefix: str = DEFAULT_SETTINGS_PREFIX) -> list[Path]:
    """Files in `directory` whose name starts with `prefix`, in filename order."""
    return sorted(
        (entry for entry in directory.iterdir() if entry.name.startswith(prefix) and entry.is_file()),
        key=lambda entry: entry.name,
    )



async def readCurrentRegistry(directory: Path | str, prefix: str = DEFAULT_SETTINGS_PREFIX) -> list[PackageRecord]:
    """
    Read the newer installer's per-install marker files.

    Each file becomes one record stamped with the file's modification time.
    Several files may describe the same install location; they are returned
    as-is and left to the reconciler.
    """
    directory = Path(directory)
    if not directory.exists():
        logger.warning("%s does not exist.", directory)
        return []
    if not directory.is_dir():
        logger.warning("%s is not a directory.", directory)
        return []

    try:
        files = await asyncio.to_thread(listInstallSettingsFiles, directory, prefix)
    except OSError as err:
        raise RegistryParseError(directory, f"cannot list directory ({err})") from err
    records: list[PackageRecord] = []
    for filePath in files:
        document = await _readJsonObject(filePath)
        try:
            settings = InstallSettings.model_validate(document)
        except ValidationError as err:
            raise RegistryParseError(filePath, f"invalid install settings: {err}") from err
        metadata = settings.Metadata
        records.append(PackageRecord(
            installPath=settings.InstallLocation,
            title=metadata.title if metadata else None,
            version=metadata.version if metadata else None,
            lastUpdated=await asyncio.to_thread(_statMtime, filePath),
        ))
    logger.debug("Read %d record(s) from %d file(s) in '%s'", len(records), len(files), directory)
    return records
