"""Resolve ``X:...`` arguments to directories under the drive mount."""

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from wslcd.candidate import Candidate
from wslcd.classify_input import InputKind
from wslcd.explore_candidates import explore_candidates
from wslcd.list_entries import verify_directory
from wslcd.locate_mount_root import locate_mount_root
from wslcd.match_collapsed import match_collapsed
from wslcd.resolution import (
    STRATEGY_COLLAPSED,
    STRATEGY_MOUNT_ROOT,
    STRATEGY_SEGMENTED,
    Resolution,
)
from wslcd.select_candidate import select_candidate
from wslcd.split_segments import split_segments

logger = logging.getLogger(__name__)


def _resolve_segmented(root: str, arg: str, config: dict[str, Any]) -> Resolution:
    segments = split_segments(arg[2:])
    if not segments:
        return Resolution(verify_directory(root), STRATEGY_MOUNT_ROOT, 0)

    candidates = explore_candidates(root, segments)
    if len(candidates) > 1:
        logger.debug(
            "%d candidates for %s: %s",
            len(candidates),
            arg,
            ", ".join(f"{c.full_path} ({c.score})" for c in candidates),
        )
    best = select_candidate(candidates, arg)
    return Resolution(best.full_path, STRATEGY_SEGMENTED, best.score)


def _resolve_collapsed(root: str, arg: str, config: dict[str, Any]) -> Resolution:
    head_limit = config["display"]["tail_head_limit"]
    found: Candidate = match_collapsed(root, arg[2:], head_limit)
    return Resolution(found.full_path, STRATEGY_COLLAPSED, found.score)


STRATEGIES: dict[InputKind, Callable[[str, str, dict[str, Any]], Resolution]] = {
    InputKind.DRIVE_SEPARATED: _resolve_segmented,
    InputKind.DRIVE_COLLAPSED: _resolve_collapsed,
}


def resolve_drive_path(
    arg: str, kind: InputKind, config: dict[str, Any]
) -> Resolution:
    """Resolve a drive-letter argument using the strategy for its kind.

    The drive mount is located once, then the rest of the argument is
    matched below it either segment by segment or, when the separators were
    lost, greedily.
    """
    strategy = STRATEGIES.get(kind)
    if strategy is None:
        msg = f"not a drive path: {arg}"
        raise ValueError(msg)

    mount_parent = config["mount"]["parent"]
    drive = arg[0].lower()
    root = str(Path(mount_parent, locate_mount_root(mount_parent, drive)))
    return strategy(root, arg, config)
