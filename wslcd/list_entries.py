"""Filesystem primitives shared by the resolution strategies."""

import os
import stat
from pathlib import Path

from wslcd.errors import NotDirectoryError, SegmentNotFoundError


def list_entries(path: str) -> list[os.DirEntry[str]]:
    """List a directory, closing the handle before returning.

    Raises OSError if the directory cannot be read.
    """
    with os.scandir(path) as it:
        return list(it)


def is_directory(entry: os.DirEntry[str]) -> bool:
    """Check if an entry is a directory, following a symbolic link."""
    try:
        return entry.is_dir()
    except OSError:
        return False


def verify_directory(path: str) -> str:
    """Return path if it currently exists and is a directory."""
    try:
        st = Path(path).stat()
    except FileNotFoundError as exc:
        raise SegmentNotFoundError(f"no such directory: {path}") from exc
    except OSError as exc:
        raise SegmentNotFoundError(f"cannot access {path}: {exc.strerror}") from exc
    if not stat.S_ISDIR(st.st_mode):
        raise NotDirectoryError(path)
    return path
