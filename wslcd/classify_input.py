"""Decide how a target argument should be resolved from its shape alone."""

import enum
import string

DRIVE_LETTERS = frozenset(string.ascii_letters)


class InputKind(enum.Enum):
    """The resolution strategy an argument calls for."""

    NATIVE = "native"
    DRIVE_SEPARATED = "drive_separated"  # C:\Users or C:/Users
    DRIVE_COLLAPSED = "drive_collapsed"  # C:Users, separators lost


def classify_input(arg: str) -> InputKind:
    """Classify an argument as a native path or one of the drive-path forms."""
    if len(arg) < 3 or arg[0] not in DRIVE_LETTERS or arg[1] != ":":
        return InputKind.NATIVE
    if arg[2] in "\\/":
        return InputKind.DRIVE_SEPARATED
    return InputKind.DRIVE_COLLAPSED
