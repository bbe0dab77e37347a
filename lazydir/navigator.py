"""Navigation state machine for the directory browser.

``Navigator`` owns the current directory, its listing, the cursor, and the
hidden-file policy. Every command is applied atomically: anything that needs a
fresh listing fetches it first and only then commits the new state, so a failed
listing leaves the navigator exactly as it was.

Cursor restoration uses a one-shot hint. Ascending records the name of the
directory just left and selects that row in the parent; any later command
clears the hint.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from .listing import DirectoryEntry, Listing, index_of_name, list_directory

Lister = Callable[[Path, bool], Listing]


def clamp_cursor(cursor: int, listing: Listing) -> int:
    """Clamp ``cursor`` into ``[0, len(listing) - 1]``."""
    return max(0, min(cursor, max(1, len(listing)) - 1))


@dataclass
class NavigatorState:
    directory: Path
    listing: Listing
    cursor: int = 0
    show_hidden: bool = False
    pending_hint: str | None = None


class Navigator:
    """Apply browser commands to a ``NavigatorState``."""

    def __init__(
        self,
        directory: Path,
        show_hidden: bool = False,
        lister: Lister = list_directory,
    ) -> None:
        """Create a navigator rooted at ``directory`` and list it immediately."""
        self._lister = lister
        directory = Path(os.path.abspath(directory))
        self.state = NavigatorState(
            directory=directory,
            listing=self._lister(directory, show_hidden),
            show_hidden=show_hidden,
        )

    @property
    def directory(self) -> Path:
        return self.state.directory

    @property
    def listing(self) -> Listing:
        return self.state.listing

    @property
    def cursor(self) -> int:
        return self.state.cursor

    @property
    def selected(self) -> DirectoryEntry:
        """Return the entry under the cursor."""
        return self.state.listing[self.state.cursor]

    def move_down(self) -> None:
        self.state.pending_hint = None
        self.state.cursor = min(self.state.cursor + 1, len(self.state.listing) - 1)

    def move_up(self) -> None:
        self.state.pending_hint = None
        self.state.cursor = max(self.state.cursor - 1, 0)

    def move_top(self) -> None:
        self.state.pending_hint = None
        self.state.cursor = 0

    def move_bottom(self) -> None:
        self.state.pending_hint = None
        self.state.cursor = len(self.state.listing) - 1

    def toggle_hidden(self) -> None:
        """Flip dotfile visibility and re-list, clamping the cursor by index."""
        show_hidden = not self.state.show_hidden
        listing = self._lister(self.state.directory, show_hidden)
        self.state.show_hidden = show_hidden
        self.state.listing = listing
        self.state.cursor = clamp_cursor(self.state.cursor, listing)
        self.state.pending_hint = None

    def move_into(self) -> bool:
        """Descend into the selected directory.

        Files and the placeholder row are ignored. Returns whether the
        directory changed.
        """
        entry = self.selected
        if entry.is_placeholder or not entry.is_directory:
            self.state.pending_hint = None
            return False
        self._enter(entry.path, hint=None)
        return True

    def move_out(self) -> bool:
        """Ascend to the parent, selecting the directory just left.

        Does nothing at the filesystem root. Returns whether the directory
        changed.
        """
        current = self.state.directory
        parent = current.parent
        if parent == current:
            self.state.pending_hint = None
            return False
        self._enter(parent, hint=current.name)
        return True

    def _hinted_cursor(self) -> int:
        """Return the row named by the pending hint, or row 0."""
        hint = self.state.pending_hint
        if hint is None:
            return 0
        found = index_of_name(self.state.listing, hint)
        return found if found is not None else 0

    def _enter(self, directory: Path, hint: str | None) -> None:
        listing = self._lister(directory, self.state.show_hidden)
        self.state.directory = directory
        self.state.listing = listing
        self.state.pending_hint = hint
        self.state.cursor = self._hinted_cursor()
        logger.debug("Entering {} (cursor {})", directory, self.state.cursor)
