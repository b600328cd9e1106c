"""Resolve Linux-style arguments: absolute, relative and home-relative."""

import os
from pathlib import Path

from wslcd.errors import HomeNotSetError
from wslcd.list_entries import verify_directory
from wslcd.resolution import STRATEGY_NATIVE, Resolution


def resolve_native_path(arg: str, cwd: str, home: str) -> Resolution:
    """Expand ``~``, anchor relative paths at cwd and clean the result."""
    if arg == "~" or arg.startswith("~/"):
        if not home:
            raise HomeNotSetError
        path = Path(home, arg[2:])
    elif arg.startswith("/"):
        path = Path(arg)
    else:
        path = Path(cwd, arg)
    return Resolution(verify_directory(os.path.normpath(path)), STRATEGY_NATIVE)
