"""Tests for the command-line interface."""

import runpy
from pathlib import Path

import pytest
import yaml

from wslcd.cli import SHELL_FUNCTION, main


@pytest.fixture
def config_file(tmp_path: Path, mount_parent: Path) -> Path:
    """Provide a config file pointing at the fake mount parent."""
    path = tmp_path / "wslcd.yml"
    path.write_text(yaml.dump({"mount": {"parent": str(mount_parent)}}))
    return path


def test_prints_resolved_path(
    drive_c: Path, config_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Verify that only the resolved path is written to stdout."""
    (drive_c / "Users" / "Me").mkdir(parents=True)
    code = main(["C:\\USERS\\me", "--config", str(config_file)])
    out = capsys.readouterr().out
    assert code == 0
    assert out == f"{drive_c / 'Users' / 'Me'}\n"


def test_config_from_environment(
    drive_c: Path,
    config_file: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Verify that the config path falls back to the environment."""
    monkeypatch.setenv("WSLCD_CONFIG", str(config_file))
    assert main(["c:/"]) == 0
    assert capsys.readouterr().out.strip() == str(drive_c)


def test_resolution_failure_exits(drive_c: Path, config_file: Path) -> None:
    """Verify that failures exit non-zero with an error message."""
    with pytest.raises(SystemExit) as info:
        main(["C:/Nowhere", "--config", str(config_file)])
    assert str(info.value.code).startswith("error: path does not exist")


def test_bad_config_exits(tmp_path: Path) -> None:
    """Verify that a broken config file is reported before resolving."""
    with pytest.raises(SystemExit) as info:
        main(["/", "--config", str(tmp_path / "absent.yml")])
    assert str(info.value.code).startswith("error: cannot read config")


def test_native_path_uses_process_cwd(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Verify that relative paths are resolved against the working directory."""
    (tmp_path / "src").mkdir()
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("WSLCD_CONFIG", raising=False)
    assert main(["src"]) == 0
    assert capsys.readouterr().out.strip() == str(tmp_path.resolve() / "src")


def test_shell_init(capsys: pytest.CaptureFixture[str]) -> None:
    """Verify that the wrapper function is printed."""
    assert main(["--shell-init"]) == 0
    assert capsys.readouterr().out.strip() == SHELL_FUNCTION


def test_missing_argument() -> None:
    """Verify that a missing path is a usage error."""
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2


def test_module_entry_point(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Verify that running the module exits with the status from main."""
    monkeypatch.setattr("sys.argv", ["wslcd", "--shell-init"])
    with pytest.raises(SystemExit) as info:
        runpy.run_module("wslcd.cli", run_name="__main__")
    assert info.value.code == 0
    assert capsys.readouterr().out.strip() == SHELL_FUNCTION
