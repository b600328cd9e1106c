"""Split the part of a drive path after ``X:`` into clean segments."""

import re

SEPARATOR_RE = re.compile(r"[\\/]")


def split_segments(rest: str) -> list[str]:
    """Split on either separator, dropping empty and "." segments.

    ".." pops the previous segment; at the start it is ignored.
    """
    segments: list[str] = []
    for part in SEPARATOR_RE.split(rest):
        if not part or part == ".":
            continue
        if part == "..":
            if segments:
                segments.pop()
            continue
        segments.append(part)
    return segments
