"""Mode dispatch tying key presses to the directory view and search.

``Browser`` is the single mutable session object read by the renderer: it
owns the view, the search controller, the current mode, the command-line
message, and the exit request.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .directory_view import DirectoryView
from .errors import LazyCdError
from .key_registry import KeyBinding, KeyRegistry
from .mode import Mode
from .search import SearchController

logger = logging.getLogger(__name__)

STAY_PATH = "."


@dataclass
class CommandLine:
    """Bottom-row text; ``is_error`` selects the error style."""

    text: str = ""
    is_error: bool = False

    def show(self, text: str, *, is_error: bool = False) -> None:
        self.text = text
        self.is_error = is_error

    def reset(self) -> None:
        self.show("")


class Browser:
    """Route keys by mode and keep the status/command state for rendering."""

    def __init__(self, view: DirectoryView, initial_message: str | None = None) -> None:
        self.view = view
        self.search = SearchController(view)
        self.mode = Mode.NORMAL
        self.command = CommandLine()
        if initial_message:
            self.command.show(initial_message, is_error=True)
        self.exit_requested = False
        self.exit_path: str | None = None
        self._normal_keys = KeyRegistry().register_bindings(
            KeyBinding(("w",), self.quit_here),
            KeyBinding(("q", "CTRL_C"), self.quit_stay),
            KeyBinding(("j", "DOWN"), self.view.move_selection_down),
            KeyBinding(("k", "UP"), self.view.move_selection_up),
            KeyBinding(("/",), self.start_search),
            KeyBinding(("n",), self.search.select_next_target),
            KeyBinding(("N",), self.search.select_previous_target),
            KeyBinding(("ENTER",), self.enter_selected),
            KeyBinding(("ESC",), self.dismiss_filter),
        )

    @property
    def current_path(self) -> Path:
        return self.view.current_path

    def handle_key(self, key: str) -> bool:
        """Apply one key press; return whether it was consumed."""
        if self.mode is Mode.NORMAL:
            return self._normal_keys.dispatch(key)
        if self.mode is Mode.SEARCH:
            return self._handle_search_key(key)
        raise AssertionError(f"unhandled mode: {self.mode!r}")

    def quit_here(self) -> None:
        self.exit_path = str(self.view.current_path)
        self.exit_requested = True

    def quit_stay(self) -> None:
        self.exit_path = STAY_PATH
        self.exit_requested = True

    def start_search(self) -> None:
        self.mode = Mode.SEARCH
        self.search.enter_search_mode()
        self.command.show("/")

    def enter_selected(self) -> None:
        try:
            self.view.enter()
        except LazyCdError as exc:
            logger.debug("enter failed: %s", exc)
            self.command.show(f"Error: {exc}", is_error=True)

    def dismiss_filter(self) -> None:
        if self.search.active:
            self.search.clear_search()
            self.command.reset()

    def _show_keyword(self) -> None:
        self.command.show("/" + (self.search.keyword or ""))

    def _leave_search(self) -> None:
        self.search.cancel_search()
        self.command.reset()
        self.mode = Mode.NORMAL

    def _handle_search_key(self, key: str) -> bool:
        if key == "ENTER":
            self.search.commit_search()
            self.mode = Mode.NORMAL
            return True
        if key in {"ESC", "CTRL_C"}:
            self._leave_search()
            return True
        if key == "BACKSPACE":
            if self.search.remove_last_char():
                self._leave_search()
                return True
            self._show_keyword()
            self.search.recover_selection()
            self.search.jump_to_nearest_target_from_anchor()
            return True
        if len(key) == 1 and key.isprintable():
            self.search.append_char(key)
            self._show_keyword()
            self.search.jump_to_nearest_target_from_anchor()
            return True
        return False

    def ruler(self) -> str:
        """Status-line position text: ``row`` or ``match/total row``."""
        row = self.view.selected if self.view.selected is not None else 0
        targets = self.search.targets
        if not targets:
            return f"{row + 1}"
        return f"{self.search.match_position(row)}/{len(targets)} {row}"


__all__ = ["Browser", "CommandLine", "STAY_PATH"]
