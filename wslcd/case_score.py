"""Positional case-sensitive similarity between a requested name and a real one."""


def case_score(requested: str, actual: str) -> int:
    """Count positions where both strings hold the exact same character.

    Only the common prefix length is compared; any extra characters on the
    longer string are ignored.
    """
    return sum(1 for a, b in zip(requested, actual) if a == b)
