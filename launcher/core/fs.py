# launcher/core/fs.py
from __future__ import annotations
import asyncio
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

__all__ = ["readTextAsync", "atomicWriteText", "atomicWriteTextAsync"]



def _readText(path: Path) -> str:
    # newline="" keeps "\r\n" intact so rewritten files keep their line endings
    with open(path, "r", encoding="utf-8-sig", newline="") as fl:
        return fl.read()



async def readTextAsync(path: Path | str) -> str:
    return await asyncio.to_thread(_readText, Path(path))



def atomicWriteText(path: Path | str, text: str) -> None:
    """
    Replaces `path` with `text` via a sibling temp file and os.replace().

    A crash mid-write leaves either the old file or the new one, never a
    truncated mix. The temp file is removed if writing fails.
    """
    path = Path(path)
    tmpPath = path.with_suffix(path.suffix + ".tmp")
    try:
        with open(tmpPath, "w", encoding="utf-8", newline="") as fl:
            fl.write(text)
            fl.flush()
            os.fsync(fl.fileno())
        os.replace(tmpPath, path)
    except BaseException:
        tmpPath.unlink(missing_ok=True)
        raise
    logger.debug("Atomically replaced '%s' (%d chars)", path, len(text))



async def atomicWriteTextAsync(path: Path | str, text: str) -> None:
    await asyncio.to_thread(atomicWriteText, path, text)
