"""Exhaustive search for every directory path matching a list of segments."""

import logging
from pathlib import Path

from wslcd.candidate import Candidate
from wslcd.case_score import case_score
from wslcd.errors import ResolutionError
from wslcd.fold_equal import fold_equal
from wslcd.list_entries import is_directory, list_entries, verify_directory

logger = logging.getLogger(__name__)


def explore_candidates(root: str, segments: list[str]) -> list[Candidate]:
    """Return every existing directory under root that matches the segments.

    Each segment is compared case-insensitively with the entries of the
    current directory. Every matching subdirectory is followed, so sibling
    names that collide ignoring case ("Foo" and "foo") each produce their
    own branch. A branch whose directory cannot be listed is dropped; the
    search never raises because of a single branch.

    Args:
        root: The directory the first segment is looked up in.
        segments: Path components, already cleaned of "." and "..".

    Returns:
        Candidates with the sum of per-segment case scores, in discovery
        order. Empty if nothing matched.
    """
    results: list[Candidate] = []
    _explore(root, segments, 0, 0, results)
    return results


def _explore(
    directory: str,
    segments: list[str],
    idx: int,
    score: int,
    results: list[Candidate],
) -> None:
    if idx == len(segments):
        try:
            verify_directory(directory)
        except ResolutionError:
            logger.debug("Dropping %s: no longer a directory", directory)
            return
        results.append(Candidate(directory, score))
        return

    segment = segments[idx]
    try:
        entries = list_entries(directory)
    except OSError as exc:
        logger.debug("Pruning branch %s: %s", directory, exc)
        return

    for entry in entries:
        if not fold_equal(entry.name, segment) or not is_directory(entry):
            continue
        _explore(
            str(Path(directory, entry.name)),
            segments,
            idx + 1,
            score + case_score(segment, entry.name),
            results,
        )
