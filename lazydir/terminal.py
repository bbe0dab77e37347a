"""Terminal control helpers for the browser session.

Owns raw-mode lifecycle and alternate-screen switching. ``raw_mode`` is the
only supported way to enter the TUI: it restores the saved tty state on every
exit path, including exceptions raised inside the loop.
"""

from __future__ import annotations

import contextlib
import os
import termios
import tty

from .errors import TerminalError


class TerminalController:
    """Manage terminal mode transitions for one stdin/stdout pair."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        try:
            self._saved_tty_state = termios.tcgetattr(stdin_fd)
        except termios.error as exc:
            raise TerminalError(f"stdin is not a terminal: {exc}") from exc

    def write(self, text: str) -> None:
        """Write ``text`` to the terminal output."""
        try:
            os.write(self.stdout_fd, text.encode("utf-8", errors="replace"))
        except OSError as exc:
            raise TerminalError(f"terminal write failed: {exc}") from exc

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with the cursor hidden."""
        try:
            tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        except termios.error as exc:
            raise TerminalError(f"cannot enable raw mode: {exc}") from exc
        # Enter alternate screen and hide cursor.
        self.write("\x1b[?1049h\x1b[?25l")

    def disable_tui_mode(self) -> None:
        """Restore normal terminal state."""
        try:
            # Reset colors, show cursor, and restore the main screen buffer.
            self.write("\x1b[0m\x1b[?25h\x1b[?1049l")
        finally:
            try:
                termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)
            except termios.error as exc:
                raise TerminalError(f"cannot restore terminal: {exc}") from exc

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()
