"""Data model for the outcome of resolving a target argument."""

from dataclasses import dataclass

STRATEGY_NATIVE = "native"
STRATEGY_MOUNT_ROOT = "mount_root"
STRATEGY_SEGMENTED = "segmented"
STRATEGY_COLLAPSED = "collapsed"


@dataclass(frozen=True)
class Resolution:
    """Represents the directory a target argument resolved to."""

    path: str
    strategy: str
    score: int = 0
