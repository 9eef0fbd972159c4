"""Incremental substring search over the directory listing.

The controller keeps the typed keyword, the rows whose names match it, and
the selection captured when search began. Targets are recomputed from scratch
on every keyword change and after every listing refresh.
"""

from __future__ import annotations

from .directory_view import FIRST_ENTRY_ROW, DirectoryView


def matching_rows(names: list[str], keyword: str | None) -> tuple[int, ...]:
    """Return logical rows whose name contains ``keyword`` case-insensitively.

    An empty or missing keyword matches nothing.
    """
    if not keyword:
        return ()
    needle = keyword.lower()
    return tuple(
        idx + FIRST_ENTRY_ROW
        for idx, name in enumerate(names)
        if needle in name.lower()
    )


class SearchController:
    """Search lifecycle and target cycling coupled to a ``DirectoryView``."""

    def __init__(self, view: DirectoryView) -> None:
        self.view = view
        self.keyword: str | None = None
        self.targets: tuple[int, ...] = ()
        self.recover_point: int | None = None
        view.add_refresh_listener(self.rematch)

    @property
    def active(self) -> bool:
        return self.keyword is not None

    def _recompute(self) -> None:
        names = [entry.name for entry in self.view.listing]
        self.targets = matching_rows(names, self.keyword)

    def rematch(self) -> None:
        """Re-run the active keyword against the current listing."""
        if self.keyword is not None:
            self._recompute()

    def enter_search_mode(self) -> None:
        self.recover_point = self.view.selected
        self.keyword = None
        self.targets = ()

    def append_char(self, char: str) -> None:
        self.keyword = (self.keyword or "") + char
        self._recompute()

    def remove_last_char(self) -> bool:
        """Pop one keyword character.

        Returns ``True`` when the keyword was already empty, meaning the
        caller should cancel search instead.
        """
        if not self.keyword:
            return True
        self.keyword = self.keyword[:-1]
        self._recompute()
        return False

    def recover_selection(self) -> None:
        if self.recover_point is not None:
            self.view.select(self.recover_point)

    def jump_to_nearest_target_from_anchor(self) -> None:
        """Select the first target at or after the anchor, wrapping around.

        The anchor is the recover point, falling back to the current
        selection. Without targets the selection returns to the recover point.
        """
        if not self.targets:
            self.recover_selection()
            return
        if self.recover_point is not None:
            anchor = self.recover_point
        else:
            anchor = self.view.selected if self.view.selected is not None else 0
        for target in self.targets:
            if target >= anchor:
                self.view.select(target)
                return
        self.view.select(self.targets[0])

    def select_next_target(self) -> None:
        if not self.targets:
            return
        current = self.view.selected if self.view.selected is not None else 0
        for target in self.targets:
            if target > current:
                self.view.select(target)
                return
        self.view.select(self.targets[0])

    def select_previous_target(self) -> None:
        if not self.targets:
            return
        current = self.view.selected if self.view.selected is not None else 0
        for target in reversed(self.targets):
            if target < current:
                self.view.select(target)
                return
        self.view.select(self.targets[-1])

    def clear_search(self) -> None:
        """Drop keyword and targets, keeping the recover point."""
        self.keyword = None
        self.targets = ()

    def cancel_search(self) -> None:
        """Restore the pre-search selection and reset all search state."""
        self.recover_selection()
        self.clear_search()
        self.recover_point = None

    def commit_search(self) -> None:
        """Keep keyword, targets, and recover point for ``n``/``N`` cycling."""

    def match_position(self, row: int) -> int:
        """Return the 1-based index of the first target at or after ``row``.

        Falls back to the target count when every target lies before ``row``.
        """
        for idx, target in enumerate(self.targets):
            if target >= row:
                return idx + 1
        return len(self.targets)


__all__ = ["SearchController", "matching_rows"]
