"""Error types raised by the browser core.

Both kinds are recoverable: the failing operation leaves listing, selection,
and search state untouched and the caller shows ``str(exc)`` on the command
line.
"""

from __future__ import annotations

from pathlib import Path


class LazyCdError(Exception):
    """Base class for all errors surfaced to the command line."""


class FilesystemError(LazyCdError):
    """Directory contents or metadata could not be read."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"cannot read `{path}` ({reason})")
        self.path = path
        self.reason = reason


class NavigationError(LazyCdError):
    """Selected target cannot be changed into."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"cannot change directory to `{path}` ({reason})")
        self.path = path
        self.reason = reason


def describe_os_error(exc: OSError) -> str:
    """Return the human part of an ``OSError`` without the path suffix."""
    return exc.strerror or exc.__class__.__name__


__all__ = [
    "LazyCdError",
    "FilesystemError",
    "NavigationError",
    "describe_os_error",
]
