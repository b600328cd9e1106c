"""Greedy matching for drive paths whose separators were eaten by the shell.

Typing ``cd C:\\Work\\Repo`` in a POSIX shell without quotes leaves
``C:WorkRepo``. The tail is split back into segments by walking the real
tree one level at a time and consuming the longest entry name that is a
case-insensitive prefix of what is left.
"""

import logging
from pathlib import Path

from wslcd.candidate import Candidate
from wslcd.case_score import case_score
from wslcd.errors import CannotSegmentError, UnreadableDirectoryError
from wslcd.fold_equal import fold_equal
from wslcd.list_entries import is_directory, list_entries, verify_directory

logger = logging.getLogger(__name__)

SEPARATORS = "\\/"
DEFAULT_HEAD_LIMIT = 16


def match_collapsed(
    root: str, tail: str, head_limit: int = DEFAULT_HEAD_LIMIT
) -> Candidate:
    """Resolve a separator-less tail against the directories under root.

    At each level the matching entry with the longest name wins, then the
    higher case score, then the smaller name. The choice is final: there is
    no backtracking if a later level fails.

    Raises:
        UnreadableDirectoryError: A directory on the way cannot be listed.
        CannotSegmentError: No entry is a prefix of the remaining tail.
    """
    current = root
    score = 0
    while True:
        tail = tail.lstrip(SEPARATORS)
        if not tail:
            return Candidate(verify_directory(current), score)

        try:
            entries = list_entries(current)
        except OSError as exc:
            raise UnreadableDirectoryError(current, exc.strerror or exc) from exc

        matches: list[tuple[int, int, str]] = []
        for entry in entries:
            name = entry.name
            size = len(name)
            if size > len(tail) or not fold_equal(tail[:size], name):
                continue
            if not is_directory(entry):
                continue
            matches.append((size, case_score(tail[:size], name), name))

        if not matches:
            raise CannotSegmentError(tail, _head(tail, head_limit), current)

        size, step_score, name = min(matches, key=lambda m: (-m[0], -m[1], m[2]))
        logger.debug("Consumed %r as %s under %s", tail[:size], name, current)
        current = str(Path(current, name))
        tail = tail[size:]
        score += step_score


def _head(text: str, limit: int) -> str:
    if len(text) > limit:
        return text[:limit] + "..."
    return text
