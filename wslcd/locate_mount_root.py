"""Find the mount directory that backs a drive letter."""

import logging
from pathlib import Path

from wslcd.case_score import case_score
from wslcd.errors import MountNotFoundError
from wslcd.fold_equal import fold_equal
from wslcd.list_entries import list_entries

logger = logging.getLogger(__name__)


def locate_mount_root(mount_parent: str, drive: str) -> str:
    """Return the name of the entry under mount_parent for the drive letter.

    Entries matching the letter in any case are ranked by case score, then
    by name. If the listing has no match, a lowercase entry is probed
    directly before giving up.
    """
    try:
        entries = list_entries(mount_parent)
    except OSError as exc:
        reason = f"cannot read directory {mount_parent}: {exc.strerror or exc}"
        raise MountNotFoundError(drive, mount_parent, reason) from exc

    matches = [
        (case_score(drive, e.name), e.name)
        for e in entries
        if fold_equal(e.name, drive)
    ]
    if not matches:
        wanted = drive.lower()
        if Path(mount_parent, wanted).is_dir():
            logger.debug("Mount %s found by direct probe", wanted)
            return wanted
        raise MountNotFoundError(drive, mount_parent)

    matches.sort(key=lambda m: (-m[0], m[1]))
    name = matches[0][1]
    if len(matches) > 1:
        logger.debug("Drive %s matched %d mounts, chose %s", drive, len(matches), name)
    return name
