"""Exception types raised across the browser.

Filesystem failures keep ``OSError`` semantics so callers can treat them as
ordinary I/O errors; terminal failures are kept separate because they are
never recoverable inside the loop.
"""

from __future__ import annotations

from pathlib import Path


class LazydirError(Exception):
    """Base class for all lazydir errors."""


class DirectoryAccessError(LazydirError, OSError):
    """A directory could not be listed or entered."""

    def __init__(self, path: Path, cause: OSError) -> None:
        reason = cause.strerror or str(cause)
        super().__init__(f"{path}: {reason}")
        self.errno = cause.errno
        self.path = path
        self.cause = cause


class TerminalError(LazydirError):
    """Raw-mode setup, teardown, or drawing failed."""
