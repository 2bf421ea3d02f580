# tests/launcher/display/test_projector.py
from pathlib import Path

import pytest

from launcher.config.keys import PreferenceKey
from launcher.core.errors import GraphicsConfigError
from launcher.display.ini import IniDocument
from launcher.display.models import Resolution
from launcher.display.projector import ResolutionProjector
from launcher.display.screen import StaticDisplayReader


INI = """\
[Render]
; keep this comment
Resolution=1920x1080
BorderlessUpscale=false
Fullscreen=false
"""


@pytest.fixture()
def iniPath(tmp_path) -> Path:
    path = tmp_path / "mods" / "Wildlander" / "SKSE" / "Plugins" / "SSEDisplayTweaks.ini"
    path.parent.mkdir(parents=True)
    path.write_text(INI, encoding="utf-8")
    return path


def makeProjector(store, path: Path, current: Resolution) -> ResolutionProjector:
    return ResolutionProjector(store, StaticDisplayReader(current), lambda: path)


@pytest.mark.asyncio
async def test_apply_writesResolutionAndUpscale(store, iniPath):
    projector = makeProjector(store, iniPath, Resolution(2560, 1440))

    written = await projector.apply(Resolution(2560, 1440))

    assert written == iniPath
    doc = IniDocument.parse(iniPath.read_text(encoding="utf-8"))
    assert doc.get("Render", "Resolution") == "2560x1440"
    assert doc.getBool("Render", "BorderlessUpscale") is True
    assert doc.get("Render", "Fullscreen") == "false"
    assert "; keep this comment" in iniPath.read_text(encoding="utf-8")
    assert store.get(PreferenceKey.RESOLUTION) == {"width": 2560, "height": 1440}


@pytest.mark.asyncio
async def test_apply_upscaleFollowsPhysicalDisplayNotSelection(store, iniPath):
    projector = makeProjector(store, iniPath, Resolution(3440, 1440))

    await projector.apply(Resolution(1920, 1080))

    doc = IniDocument.parse(iniPath.read_text(encoding="utf-8"))
    assert doc.get("Render", "Resolution") == "1920x1080"
    assert doc.getBool("Render", "BorderlessUpscale") is False


@pytest.mark.asyncio
async def test_apply_missingKeysAreAdded(store, tmp_path):
    path = tmp_path / "SSEDisplayTweaks.ini"
    path.write_text("[Render]\nFullscreen=false\n", encoding="utf-8")
    projector = makeProjector(store, path, Resolution(1920, 1080))

    await projector.apply(Resolution(1280, 720))

    assert path.read_text(encoding="utf-8") == (
        "[Render]\nFullscreen=false\nResolution=1280x720\nBorderlessUpscale=true\n"
    )


@pytest.mark.asyncio
async def test_apply_leavesNoTempFile(store, iniPath):
    projector = makeProjector(store, iniPath, Resolution(1920, 1080))

    await projector.apply(Resolution(1920, 1080))

    assert sorted(p.name for p in iniPath.parent.iterdir()) == ["SSEDisplayTweaks.ini"]


@pytest.mark.asyncio
async def test_apply_missingFile_raisesButKeepsPreference(store, tmp_path):
    projector = makeProjector(store, tmp_path / "absent.ini", Resolution(1920, 1080))

    with pytest.raises(GraphicsConfigError):
        await projector.apply(Resolution(1600, 900))
    assert store.get(PreferenceKey.RESOLUTION) == {"width": 1600, "height": 900}


@pytest.mark.asyncio
async def test_apply_missingRenderSection_raises(store, tmp_path):
    path = tmp_path / "SSEDisplayTweaks.ini"
    path.write_text("[Framerate]\nEnableVSync=true\n", encoding="utf-8")
    projector = makeProjector(store, path, Resolution(1920, 1080))

    with pytest.raises(GraphicsConfigError):
        await projector.apply(Resolution(1920, 1080))
    assert path.read_text(encoding="utf-8") == "[Framerate]\nEnableVSync=true\n"


@pytest.mark.asyncio
async def test_apply_unknownLocation_raises(store):
    def noModDirectory() -> Path:
        raise LookupError("mod directory is not set")

    projector = ResolutionProjector(store, StaticDisplayReader(Resolution(1920, 1080)), noModDirectory)

    with pytest.raises(GraphicsConfigError):
        await projector.apply(Resolution(1920, 1080))
