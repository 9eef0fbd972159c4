"""Current-directory listing, selection cursor, and traversal.

Rows are logical: row 0 ascends to the parent, row 1 reloads the current
directory, and real entries start at row 2. The view owns its
``current_path`` explicitly and never touches the process working directory.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from pathlib import Path

from .errors import FilesystemError, NavigationError, describe_os_error
from .listing import Entry, read_listing

logger = logging.getLogger(__name__)

ASCEND_ROW = 0
REFRESH_ROW = 1
FIRST_ENTRY_ROW = 2
ASCEND_LABEL = "../"
REFRESH_LABEL = "./"

# Failures that mean "this target cannot be entered" rather than "the
# filesystem is broken".
_NAVIGATION_ERRORS = (NotADirectoryError, PermissionError, FileNotFoundError)


def _normalized(path: Path) -> Path:
    """Absolute path with `.` and `..` segments collapsed lexically."""
    return Path(os.path.abspath(path))


class DirectoryView:
    """Logical row list of one directory plus a clamped selection."""

    def __init__(
        self,
        current_path: Path,
        listing: tuple[Entry, ...] = (),
        *,
        show_hidden: bool = True,
        reader: Callable[[Path, bool], tuple[Entry, ...]] = read_listing,
    ) -> None:
        self.current_path = Path(current_path)
        self.listing: tuple[Entry, ...] = tuple(listing)
        self.show_hidden = show_hidden
        self.selected: int | None = ASCEND_ROW
        self._reader = reader
        self._refresh_listeners: list[Callable[[], None]] = []

    @classmethod
    def open(cls, path: Path, *, show_hidden: bool = True) -> DirectoryView:
        """Build a view for ``path``, raising ``FilesystemError`` if unreadable."""
        view = cls(_normalized(path), show_hidden=show_hidden)
        view.refresh()
        return view

    @property
    def row_count(self) -> int:
        return FIRST_ENTRY_ROW + len(self.listing)

    def add_refresh_listener(self, listener: Callable[[], None]) -> None:
        """Register a callback run after every successful listing replacement."""
        self._refresh_listeners.append(listener)

    def entry_for_row(self, row: int) -> Entry | None:
        """Return the entry shown at ``row``; synthetic rows have none."""
        if row < FIRST_ENTRY_ROW:
            return None
        idx = row - FIRST_ENTRY_ROW
        if idx >= len(self.listing):
            return None
        return self.listing[idx]

    def row_labels(self) -> list[str]:
        """Return the display label of every logical row."""
        return [ASCEND_LABEL, REFRESH_LABEL, *(entry.label for entry in self.listing)]

    def _clamp(self, row: int) -> int:
        return max(0, min(row, self.row_count - 1))

    def select(self, row: int | None) -> None:
        """Set the selection, clamped into the valid row range."""
        self.selected = None if row is None else self._clamp(row)

    def move_selection_down(self) -> None:
        """Advance one row, stopping at the last row."""
        current = self.selected if self.selected is not None else -1
        self.selected = self._clamp(current + 1)

    def move_selection_up(self) -> None:
        """Retreat one row, stopping at row 0."""
        current = self.selected if self.selected is not None else 0
        self.selected = self._clamp(current - 1)

    def _read(self, directory: Path) -> tuple[Entry, ...]:
        return self._reader(directory, self.show_hidden)

    def _replace_listing(self, listing: tuple[Entry, ...]) -> None:
        self.listing = listing
        if self.selected is not None:
            self.selected = self._clamp(self.selected)
        for listener in self._refresh_listeners:
            listener()

    def refresh(self) -> None:
        """Re-read ``current_path``; on failure nothing changes."""
        try:
            listing = self._read(self.current_path)
        except OSError as exc:
            logger.warning("refresh of %s failed: %s", self.current_path, exc)
            raise FilesystemError(self.current_path, describe_os_error(exc)) from exc
        self._replace_listing(listing)

    def _change_directory(self, target: Path) -> None:
        target = _normalized(target)
        try:
            listing = self._read(target)
        except _NAVIGATION_ERRORS as exc:
            logger.warning("cannot enter %s: %s", target, exc)
            raise NavigationError(target, describe_os_error(exc)) from exc
        except OSError as exc:
            logger.warning("cannot read %s: %s", target, exc)
            raise FilesystemError(target, describe_os_error(exc)) from exc
        logger.debug("changed directory %s -> %s", self.current_path, target)
        self.current_path = target
        self.selected = ASCEND_ROW
        self._replace_listing(listing)

    def enter(self) -> None:
        """Act on the selected row: ascend, refresh, or descend.

        Raises ``NavigationError`` when the target cannot be entered and
        ``FilesystemError`` when a directory cannot be read. The new listing is
        read before any state is committed, so a failure leaves the view
        exactly as it was.
        """
        row = self.selected
        if row is None:
            return
        if row == ASCEND_ROW:
            self._change_directory(self.current_path.parent)
        elif row == REFRESH_ROW:
            self.refresh()
        else:
            entry = self.entry_for_row(row)
            if entry is None:
                return
            self._change_directory(entry.path)


__all__ = [
    "ASCEND_ROW",
    "REFRESH_ROW",
    "FIRST_ENTRY_ROW",
    "ASCEND_LABEL",
    "REFRESH_LABEL",
    "DirectoryView",
]
