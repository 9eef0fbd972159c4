"""Frame composition for the browser screen.

Reads browser state without mutating it and returns a complete ANSI frame:
the listing on top, then a status row (mode, directory, ruler) and a command
row.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .ansi import clip_text, clip_text_left, display_width, fit_text, printable
from .browser import Browser
from .directory_view import FIRST_ENTRY_ROW
from .listing import Entry
from .mode import Mode
from .ui_theme import UITheme

CLEAR_AND_HOME = "\033[H"
CLEAR_TO_END = "\033[J"
CHROME_ROWS = 2


@dataclass(frozen=True)
class RenderContext:
    """Snapshot of everything one frame needs."""

    labels: list[str]
    entries: tuple[Entry, ...]
    selected: int | None
    targets: frozenset[int]
    mode: Mode
    current_path: Path
    ruler: str
    command_text: str
    command_is_error: bool
    width: int
    height: int
    list_start: int = 0

    @classmethod
    def from_browser(cls, browser: Browser, width: int, height: int, list_start: int = 0) -> RenderContext:
        return cls(
            labels=browser.view.row_labels(),
            entries=browser.view.listing,
            selected=browser.view.selected,
            targets=frozenset(browser.search.targets),
            mode=browser.mode,
            current_path=browser.current_path,
            ruler=browser.ruler(),
            command_text=browser.command.text,
            command_is_error=browser.command.is_error,
            width=width,
            height=height,
            list_start=list_start,
        )

    @property
    def list_rows(self) -> int:
        return max(1, self.height - CHROME_ROWS)


def scroll_start_for_selection(selected: int | None, start: int, visible_rows: int, total_rows: int) -> int:
    """Return a list offset that keeps ``selected`` inside the viewport."""
    if selected is not None:
        if selected < start:
            start = selected
        elif selected >= start + visible_rows:
            start = selected - visible_rows + 1
    return max(0, min(start, max(0, total_rows - visible_rows)))


def _row_style(context: RenderContext, row: int, theme: UITheme) -> str:
    if row < FIRST_ENTRY_ROW:
        return theme.synthetic
    entry = context.entries[row - FIRST_ENTRY_ROW]
    if entry.is_dir:
        return theme.directory
    if entry.is_symlink:
        return theme.symlink
    return theme.file


def render_list_row(context: RenderContext, row: int, theme: UITheme) -> str:
    text = fit_text(printable(context.labels[row]), context.width)
    if row == context.selected:
        style = theme.selected
    elif row in context.targets:
        style = theme.search_target + _row_style(context, row, theme)
    else:
        style = _row_style(context, row, theme)
    if not style:
        return text
    return f"{style}{text}{theme.reset}"


def build_status_line(context: RenderContext, theme: UITheme) -> str:
    """Compose ``[ mode ][ path ... ][ ruler ]`` filling the full width."""
    width = context.width
    mode_style = theme.mode_search if context.mode is Mode.SEARCH else theme.mode_normal
    mode_block = clip_text(f" {context.mode} ", width)
    ruler_block = f" {context.ruler} "
    remaining = width - display_width(mode_block)
    if display_width(ruler_block) > remaining:
        ruler_block = ""
    path_cols = max(0, remaining - display_width(ruler_block))
    path_text = clip_text_left(printable(str(context.current_path)), max(0, path_cols - 2))
    path_block = fit_text(f" {path_text} ", path_cols)
    return (
        f"{mode_style}{mode_block}{theme.reset}"
        f"{theme.status_path}{path_block}{theme.reset}"
        f"{mode_style}{ruler_block}{theme.reset}"
    )


def build_command_line(context: RenderContext, theme: UITheme) -> str:
    text = fit_text(printable(context.command_text), context.width)
    style = theme.command_error if context.command_is_error else theme.command_text
    if not style:
        return text
    return f"{style}{text}{theme.reset}"


def render_frame(context: RenderContext, theme: UITheme) -> str:
    """Return a full-screen frame for ``context``."""
    lines: list[str] = []
    total = len(context.labels)
    for offset in range(context.list_rows):
        row = context.list_start + offset
        if row < total:
            lines.append(render_list_row(context, row, theme))
        else:
            lines.append(" " * context.width)
    lines.append(build_status_line(context, theme))
    lines.append(build_command_line(context, theme))
    return CLEAR_AND_HOME + "\r\n".join(lines) + CLEAR_TO_END


__all__ = [
    "RenderContext",
    "build_command_line",
    "build_status_line",
    "render_frame",
    "render_list_row",
    "scroll_start_for_selection",
]
