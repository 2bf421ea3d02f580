# launcher/__main__.py
from __future__ import annotations
import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence

from launcher.app.bootstrap import LauncherServices, buildServices
from launcher.app.settings import loadSettings
from launcher.core.errors import LauncherError
from launcher.core.logging import configureLogging
from launcher.display.models import Resolution

logger = logging.getLogger(__name__)



def buildParser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="launcher", description="Modpack launcher backend queries")
    parser.add_argument("--settings", default=None, help="Path to a launcher.json5 settings file")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("packages", help="List reconciled installed modpacks")
    sub.add_parser("version", help="Print the installed modpack version")
    sub.add_parser("resolutions", help="List selectable display resolutions")
    setRes = sub.add_parser("set-resolution", help="Save a resolution and write it to the graphics settings")
    setRes.add_argument("resolution", type=Resolution.parse, help="<width>x<height>")
    return parser



async def runCommand(services: LauncherServices, args: argparse.Namespace) -> int:
    if args.command == "packages":
        packages = await services.packages.installedPackages() or {}
        for installPath, record in sorted(packages.items()):
            print(f"{record.title or '?'}\t{record.version or '?'}\t{installPath}")
        return 0
    if args.command == "version":
        print(await services.packages.currentProductVersion())
        return 0
    if args.command == "resolutions":
        active = services.resolutions.activeResolution()
        for resolution in await services.resolutions.getResolutions():
            flags = []
            if resolution == active:
                flags.append("active")
            if resolution.isUltraWide:
                flags.append("ultra-wide")
            if services.resolutions.isUnsupportedResolution(resolution):
                flags.append("unsupported")
            print(f"{resolution}\t{','.join(flags)}")
        return 0
    if args.command == "set-resolution":
        path = await services.resolutions.setResolution(args.resolution)
        print(f"{args.resolution} written to {path}")
        return 0
    raise ValueError(f"Unknown command: {args.command}")



def main(argv: Sequence[str] | None = None) -> int:
    args = buildParser().parse_args(argv)
    try:
        settings = loadSettings(args.settings)
    except LauncherError as err:
        print(f"launcher: {err}", file=sys.stderr)
        return 2
    configureLogging(settings.logging, settings.paths.logDirectory)
    services = buildServices(settings)
    try:
        return asyncio.run(runCommand(services, args))
    except LauncherError as err:
        logger.error("%s", err)
        return 1



if __name__ == "__main__":
    sys.exit(main())
