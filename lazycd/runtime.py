"""Main interactive event loop for the terminal UI.

One blocking key read per iteration, handled to completion before the next
read; redraws happen only when state or terminal size changed.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from .browser import Browser
from .input import read_key
from .render import RenderContext, render_frame, scroll_start_for_selection
from .terminal import TerminalController
from .ui_theme import UITheme

RESIZE_POLL_MS = 250


@dataclass
class LoopState:
    """Per-session bookkeeping owned by the loop, not by the browser."""

    list_start: int = 0
    last_size: tuple[int, int] | None = None
    dirty: bool = True


def run_main_loop(
    browser: Browser,
    terminal: TerminalController,
    stdin_fd: int,
    theme: UITheme,
    *,
    poll_ms: int = RESIZE_POLL_MS,
) -> str | None:
    """Run until the browser requests exit; return the chosen exit path."""
    loop = LoopState()
    with terminal.raw_mode():
        while not browser.exit_requested:
            size = terminal.size()
            width, height = max(1, size.columns), max(1, size.lines)
            if (width, height) != loop.last_size:
                loop.last_size = (width, height)
                loop.dirty = True

            if loop.dirty:
                context = RenderContext.from_browser(browser, width, height)
                loop.list_start = scroll_start_for_selection(
                    browser.view.selected,
                    loop.list_start,
                    context.list_rows,
                    len(context.labels),
                )
                context = replace(context, list_start=loop.list_start)
                terminal.write_frame(render_frame(context, theme))
                loop.dirty = False

            key = read_key(stdin_fd, timeout_ms=poll_ms)
            if not key:
                continue
            if key == "EOF":
                browser.quit_stay()
                break
            if browser.handle_key(key):
                loop.dirty = True
    return browser.exit_path


__all__ = ["LoopState", "run_main_loop"]
