"""Main interactive loop for the browser.

Renders the navigator, blocks for one key, dispatches it, and repeats until
quit. Directory access failures raised by a command are shown on a status line
and leave the navigator unchanged; everything else propagates so the caller's
``raw_mode`` block restores the terminal.
"""

from __future__ import annotations

import shutil
from collections.abc import Callable

from loguru import logger

from .errors import DirectoryAccessError
from .input import read_key
from .keys import QUIT_KEY, KeyRegistry, navigator_bindings
from .navigator import Navigator
from .render import HEADER_ROWS, compose_frame, format_lines, frame_text, viewport_start
from .terminal import TerminalController


def _terminal_height() -> int:
    return shutil.get_terminal_size((80, 24)).lines


def _terminal_width() -> int:
    return shutil.get_terminal_size((80, 24)).columns


def run_main_loop(
    navigator: Navigator,
    terminal: TerminalController,
    stdin_fd: int,
    key_reader: Callable[[int], str] = read_key,
    terminal_height: Callable[[], int] = _terminal_height,
    terminal_width: Callable[[], int] = _terminal_width,
    registry: KeyRegistry | None = None,
) -> None:
    """Run the browser until the quit key (or end of input) is read."""
    bindings = registry if registry is not None else navigator_bindings(navigator)
    start = 0
    status = ""

    while True:
        height = terminal_height()
        rows = max(1, height - HEADER_ROWS - (1 if status else 0))
        start = viewport_start(navigator.cursor, len(navigator.listing), rows, start)
        lines = format_lines(navigator.directory, navigator.listing, navigator.cursor)
        terminal.write(frame_text(compose_frame(lines, height, start, status, width=terminal_width())))

        key = key_reader(stdin_fd)
        if key in {"", QUIT_KEY}:
            return

        previous_directory = navigator.directory
        status = ""
        try:
            bindings.dispatch(key)
        except DirectoryAccessError as exc:
            logger.warning("Command {!r} failed: {}", key, exc)
            status = f"error: {exc}"
        if navigator.directory != previous_directory:
            start = 0


def run_browser(navigator: Navigator, terminal: TerminalController, stdin_fd: int) -> None:
    """Enter TUI mode, run the loop, and always restore the terminal."""
    logger.info("Session started in {}", navigator.directory)
    with terminal.raw_mode():
        run_main_loop(navigator, terminal, stdin_fd)
    logger.info("Session ended in {}", navigator.directory)
