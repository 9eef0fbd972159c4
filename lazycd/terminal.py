"""Terminal control helpers for the TUI session.

Owns raw-mode lifecycle and alternate-screen switching. The UI is drawn on a
separate descriptor (stderr) so stdout stays free for the exit path.
"""

from __future__ import annotations

import contextlib
import os
import shutil
import termios
import tty


class TerminalController:
    """Manage terminal mode transitions and frame output."""

    def __init__(self, stdin_fd: int, ui_fd: int) -> None:
        """Capture tty state and bind the input/output descriptors."""
        self.stdin_fd = stdin_fd
        self.ui_fd = ui_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with the cursor hidden."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.ui_fd, b"\x1b[?1049h\x1b[?25l")

    def disable_tui_mode(self) -> None:
        """Show the cursor, leave the alternate screen, restore tty state."""
        os.write(self.ui_fd, b"\x1b[?25h\x1b[?1049l")
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def size(self) -> os.terminal_size:
        try:
            return os.get_terminal_size(self.ui_fd)
        except OSError:
            return shutil.get_terminal_size((80, 24))

    def write_frame(self, frame: str) -> None:
        data = frame.encode("utf-8", errors="replace")
        while data:
            written = os.write(self.ui_fd, data)
            data = data[written:]

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()


__all__ = ["TerminalController"]
