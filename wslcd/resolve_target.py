"""Entry point resolving any supported argument to an existing directory."""

import logging
from typing import Any

from wslcd.classify_input import InputKind, classify_input
from wslcd.errors import SegmentNotFoundError
from wslcd.resolution import Resolution
from wslcd.resolve_drive_path import resolve_drive_path
from wslcd.resolve_native_path import resolve_native_path

logger = logging.getLogger(__name__)


def resolve_target(
    arg: str, cwd: str, home: str, config: dict[str, Any]
) -> Resolution:
    """Resolve arg to an absolute directory path.

    Args:
        arg: The path as typed, Linux-style or Windows drive-style.
        cwd: Directory relative Linux paths are anchored at.
        home: Expansion of "~"; may be empty.
        config: Loaded configuration (see load_config).

    Raises:
        ResolutionError: The argument does not name an existing directory.
    """
    arg = arg.strip()
    if not arg:
        msg = "missing target directory"
        raise SegmentNotFoundError(msg)

    kind = classify_input(arg)
    if kind is InputKind.NATIVE:
        result = resolve_native_path(arg, cwd, home)
    else:
        result = resolve_drive_path(arg, kind, config)

    logger.info(
        "Resolved %r to %s (%s, score %d)",
        arg,
        result.path,
        result.strategy,
        result.score,
    )
    return result
