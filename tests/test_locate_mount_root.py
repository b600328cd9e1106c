"""Tests for locating the mount directory of a drive letter."""

from pathlib import Path

import pytest

from wslcd import locate_mount_root as locate_module
from wslcd.errors import MountNotFoundError
from wslcd.locate_mount_root import locate_mount_root


def test_single_match(mount_parent: Path) -> None:
    """Verify that the only matching entry is returned."""
    (mount_parent / "c").mkdir()
    (mount_parent / "d").mkdir()
    assert locate_mount_root(str(mount_parent), "c") == "c"


def test_uppercase_mount_matches(mount_parent: Path) -> None:
    """Verify that the drive letter matches regardless of case."""
    (mount_parent / "C").mkdir()
    assert locate_mount_root(str(mount_parent), "c") == "C"


def test_prefers_exact_case(mount_parent: Path) -> None:
    """Verify that the higher case score wins among colliding entries."""
    (mount_parent / "C").mkdir()
    (mount_parent / "c").mkdir()
    assert locate_mount_root(str(mount_parent), "c") == "c"


def test_missing_drive(mount_parent: Path) -> None:
    """Verify that an absent drive raises with the drive letter in the message."""
    (mount_parent / "c").mkdir()
    with pytest.raises(MountNotFoundError, match="no match for e") as info:
        locate_mount_root(str(mount_parent), "e")
    assert info.value.drive == "e"
    assert f"{mount_parent}/e" in str(info.value)


def test_direct_probe_fallback(
    mount_parent: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Verify that a lowercase entry missing from the listing is still found."""
    (mount_parent / "c").mkdir()
    monkeypatch.setattr(locate_module, "list_entries", lambda _path: [])
    assert locate_mount_root(str(mount_parent), "c") == "c"


def test_direct_probe_rejects_files(
    mount_parent: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Verify that the direct probe only accepts directories."""
    (mount_parent / "c").write_text("not a mount")
    monkeypatch.setattr(locate_module, "list_entries", lambda _path: [])
    with pytest.raises(MountNotFoundError):
        locate_mount_root(str(mount_parent), "c")


def test_unreadable_mount_parent(tmp_path: Path) -> None:
    """Verify that a mount parent that cannot be listed is fatal."""
    with pytest.raises(MountNotFoundError, match="cannot read directory"):
        locate_mount_root(str(tmp_path / "missing"), "c")
