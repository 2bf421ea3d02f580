import sys
from pathlib import Path

import pytest

from launcher.app.settings import LauncherSettings, loadSettings
from launcher.config.providers import MemoryProvider
from launcher.config.store import PreferenceStore



def pytest_configure(config: pytest.Config) -> None:
    if sys.flags.optimize:
        raise RuntimeError("Assertions are disabled (optimize > 0)")



@pytest.fixture()
def settings(tmp_path: Path) -> LauncherSettings:
    """Settings rooted entirely inside tmp_path; ignores the real home directory and environment."""
    return loadSettings(
        tmp_path / "no-user-settings.json5",
        env={},
        overrides={
            "paths": {
                "appDataDir": str(tmp_path / "AppData" / "Local"),
                "configDir": str(tmp_path / "config"),
                "resourceDir": str(tmp_path / "resources"),
            },
        },
    )



@pytest.fixture()
def store() -> PreferenceStore:
    return PreferenceStore(MemoryProvider())
