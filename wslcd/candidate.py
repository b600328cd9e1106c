"""Data model for a scored directory match."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Candidate:
    """A full directory path that matched the requested segments."""

    full_path: str
    score: int  # sum of per-segment case_score values
