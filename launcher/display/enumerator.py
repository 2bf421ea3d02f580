# launcher/display/enumerator.py
from __future__ import annotations
import asyncio
import logging
import re
from collections.abc import Sequence
from pathlib import Path

from launcher.core.errors import EnumerationError, EnumerationTimeout, InvalidResolutionError
from .models import Resolution

logger = logging.getLogger(__name__)

__all__ = [
    "BANNER_LINES", "parseEnumeratorOutput", "parseResolutionTokens",
    "ResolutionEnumerator",
]


# The tool prints copyright and version information before the mode list
BANNER_LINES = 2

_LINE_SPLIT_RE = re.compile(r"\r*\n")



def parseEnumeratorOutput(output: str) -> list[str]:
    """
    Extract "<width>x<height>" tokens from the tool's listing.

    Output looks like:
        <banner>
        <version>
        640x480, 32 bits @ 60 Hz.
        720x480, 32 bits @ 60 Hz.

    Refresh rate and colour depth are dropped; only the text before the first
    comma of each non-empty line is kept.
    """
    lines = _LINE_SPLIT_RE.split(output)[BANNER_LINES:]
    return [line.split(",", 1)[0] for line in lines if line != ""]



def parseResolutionTokens(tokens: Sequence[str]) -> list[Resolution]:
    """Parse tokens in order; a malformed token fails the whole listing."""
    out: list[Resolution] = []
    for token in tokens:
        try:
            out.append(Resolution.parse(token))
        except InvalidResolutionError as err:
            raise EnumerationError(f"Unexpected resolution token from enumerator: {token!r}") from err
    return out



class ResolutionEnumerator:
    """
    Runs the external mode-listing tool (e.g. `QRes.exe /L`) and parses its output.

    Any text on stderr or a non-zero exit code is a failure. A run that exceeds
    `timeoutSeconds` is killed and reported as EnumerationTimeout.
    """

    def __init__(
        self,
        executable: Path | str,
        args: Sequence[str] = ("/L",),
        *,
        timeoutSeconds: float = 10.0,
    ) -> None:
        self.executable = str(executable)
        self.args = list(args)
        self.timeoutSeconds = timeoutSeconds

    async def run(self) -> tuple[str, str, int]:
        """Run the tool once and return (stdout, stderr, returncode)."""
        try:
            proc = await asyncio.create_subprocess_exec(
                self.executable,
                *self.args,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as err:
            raise EnumerationError(f"Failed to start '{self.executable}': {err}", stderr=str(err)) from err

        try:
            stdoutB, stderrB = await asyncio.wait_for(proc.communicate(), timeout=self.timeoutSeconds)
        except asyncio.TimeoutError:
            proc.kill()
            await proc.wait()
            raise EnumerationTimeout(
                f"'{self.executable}' did not finish within {self.timeoutSeconds:g}s"
            ) from None

        return (
            stdoutB.decode("utf-8", errors="replace"),
            stderrB.decode("utf-8", errors="replace"),
            proc.returncode if proc.returncode is not None else 0,
        )

    async def listTokens(self) -> list[str]:
        stdout, stderr, returncode = await self.run()
        if stderr:
            logger.error("Error getting resolutions %r", stderr)
            raise EnumerationError(stderr.strip() or f"'{self.executable}' wrote to stderr: {stderr!r}", stderr=stderr)
        if returncode != 0:
            logger.error("'%s' exited with code %d", self.executable, returncode)
            raise EnumerationError(f"'{self.executable}' exited with code {returncode}")
        return parseEnumeratorOutput(stdout)

    async def listResolutions(self) -> list[Resolution]:
        return parseResolutionTokens(await self.listTokens())
