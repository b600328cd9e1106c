"""Pick the best candidate produced by the explorer."""

from wslcd.candidate import Candidate
from wslcd.errors import SegmentNotFoundError


def select_candidate(candidates: list[Candidate], requested: str) -> Candidate:
    """Return the highest scoring candidate, ties broken by path order.

    Raises SegmentNotFoundError naming the requested input when there are no
    candidates.
    """
    if not candidates:
        raise SegmentNotFoundError(
            f"path does not exist (no case-insensitive match): {requested}"
        )
    return min(candidates, key=lambda c: (-c.score, c.full_path))
