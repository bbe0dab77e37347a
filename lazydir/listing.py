"""Directory listing for the browser.

Produces the flat, sorted child list for one directory snapshot. Ordering is
plain code-point comparison of the full path string, so upper-case names sort
before lower-case ones and directories are interleaved with files.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from .errors import DirectoryAccessError

PLACEHOLDER_NAME = ".."


@dataclass(frozen=True)
class DirectoryEntry:
    """One visible row of a listing."""

    path: Path
    name: str
    is_directory: bool
    is_placeholder: bool = False


Listing = tuple[DirectoryEntry, ...]


def placeholder_entry(directory: Path) -> DirectoryEntry:
    """Return the synthetic row shown in place of an empty directory."""
    return DirectoryEntry(
        path=directory / PLACEHOLDER_NAME,
        name=PLACEHOLDER_NAME,
        is_directory=False,
        is_placeholder=True,
    )


def _entry_is_directory(child: os.DirEntry) -> bool:
    try:
        return child.is_dir()
    except OSError:
        return False


def list_directory(directory: Path, show_hidden: bool) -> Listing:
    """List direct children of ``directory``.

    Dot-named entries are skipped unless ``show_hidden`` is set. An empty
    result is replaced by a single placeholder entry so the listing is never
    empty. Raises ``DirectoryAccessError`` when the directory cannot be read.
    """
    entries: list[DirectoryEntry] = []
    try:
        with os.scandir(directory) as children:
            for child in children:
                name = child.name
                if not show_hidden and name.startswith("."):
                    continue
                entries.append(
                    DirectoryEntry(
                        path=directory / name,
                        name=name,
                        is_directory=_entry_is_directory(child),
                    )
                )
    except OSError as exc:
        logger.warning("Cannot list {}: {}", directory, exc)
        raise DirectoryAccessError(directory, exc) from exc

    if not entries:
        return (placeholder_entry(directory),)
    entries.sort(key=lambda entry: str(entry.path))
    return tuple(entries)


def index_of_name(listing: Listing, name: str) -> int | None:
    """Return the index of the real entry called ``name``, if present."""
    for idx, entry in enumerate(listing):
        if not entry.is_placeholder and entry.name == name:
            return idx
    return None
