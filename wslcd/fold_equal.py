"""Case-insensitive comparison of directory entry names."""


def fold_equal(a: str, b: str) -> bool:
    """Check if two names are equal ignoring case.

    Characters are folded one at a time, so names only match when each
    position holds the same letter in some case. Folding the whole string
    would pair "ßs" with "sß" since both become "sss".
    """
    return len(a) == len(b) and all(
        x.casefold() == y.casefold() for x, y in zip(a, b)
    )
