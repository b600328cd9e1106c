"""Shared fixtures: a fake mount parent laid out like WSL's /mnt."""

from pathlib import Path
from typing import Any

import pytest

from wslcd.load_config import load_config


@pytest.fixture
def mount_parent(tmp_path: Path) -> Path:
    """Provide an empty mount parent directory."""
    parent = tmp_path / "mnt"
    parent.mkdir()
    return parent


@pytest.fixture
def drive_c(mount_parent: Path) -> Path:
    """Provide the mount root for drive C."""
    root = mount_parent / "c"
    root.mkdir()
    return root


@pytest.fixture
def config(mount_parent: Path) -> dict[str, Any]:
    """Provide the default configuration pointed at the fake mount parent."""
    cfg = load_config(None)
    cfg["mount"]["parent"] = str(mount_parent)
    return cfg
