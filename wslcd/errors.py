"""Exceptions raised while resolving a target directory.

Every failure that should end a resolution call derives from
``ResolutionError``; the CLI turns any of them into a one-line message and a
non-zero exit status.
"""


class WslcdError(Exception):
    """Base class for all errors raised by this package."""


class ConfigError(WslcdError):
    """Raised when a configuration file cannot be loaded or is malformed."""


class ResolutionError(WslcdError):
    """Raised when a target argument cannot be resolved to a directory."""


class MountNotFoundError(ResolutionError):
    """Raised when no mount entry matches the requested drive letter."""

    def __init__(self, drive: str, mount_parent: str, reason: str = ""):
        reason = reason or f"no match for {drive} in {mount_parent}"
        super().__init__(
            f"cannot locate {mount_parent.rstrip('/')}/{drive} (drive mapping): "
            f"{reason}"
        )
        self.drive = drive
        self.mount_parent = mount_parent


class SegmentNotFoundError(ResolutionError):
    """Raised when the requested path has no existing case-insensitive match."""


class CannotSegmentError(SegmentNotFoundError):
    """Raised when a separator-less tail cannot be split into real directories.

    Attributes:
        tail: The unconsumed remainder of the input.
        directory: The directory whose entries were searched.
    """

    def __init__(self, tail: str, head: str, directory: str):
        super().__init__(
            f"cannot segment '{tail}' at '{head}' under {directory}\n"
            "Hint: quote the Windows path or use forward slashes (e.g., C:/...)"
        )
        self.tail = tail
        self.directory = directory


class NotDirectoryError(ResolutionError):
    """Raised when the resolved path exists but is not a directory."""

    def __init__(self, path: str):
        super().__init__(f"not a directory: {path}")
        self.path = path


class UnreadableDirectoryError(ResolutionError):
    """Raised when a directory listing fails where no other branch exists."""

    def __init__(self, path: str, reason: object):
        super().__init__(f"cannot read directory {path}: {reason}")
        self.path = path


class HomeNotSetError(ResolutionError):
    """Raised when a ``~`` path is requested without a home directory."""

    def __init__(self) -> None:
        super().__init__("HOME is not set")
