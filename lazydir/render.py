"""Screen-line formatting and frame output.

``format_lines`` is the pure model-to-text step. The remaining helpers fit
those lines to the terminal height and build the redraw text for one frame.
"""

from __future__ import annotations

from pathlib import Path

from .listing import DirectoryEntry, Listing

HEADER_ROWS = 2
ROW_INDENT = "   "
SELECTED_MARKER = " > "


def format_entry(entry: DirectoryEntry) -> str:
    """Render one listing row without selection marker."""
    if entry.is_placeholder or entry.is_directory:
        return f"{ROW_INDENT}{entry.name}/"
    return f"{ROW_INDENT}{entry.name}"


def format_lines(directory: Path, listing: Listing, cursor: int) -> list[str]:
    """Build the display lines for one navigator snapshot.

    Line 0 is the directory path, line 1 is blank, and each entry follows.
    The row at ``cursor`` swaps its indentation for the selection marker.
    """
    lines = [str(directory), ""]
    lines.extend(format_entry(entry) for entry in listing)
    selected = HEADER_ROWS + cursor
    if HEADER_ROWS <= selected < len(lines):
        lines[selected] = SELECTED_MARKER + lines[selected].lstrip()
    return lines


def viewport_start(cursor: int, count: int, rows: int, start: int = 0) -> int:
    """Return the first visible entry index that keeps ``cursor`` on screen."""
    rows = max(1, rows)
    if cursor < start:
        start = cursor
    elif cursor >= start + rows:
        start = cursor - rows + 1
    return max(0, min(start, max(0, count - rows)))


def compose_frame(
    lines: list[str],
    height: int,
    start: int = 0,
    status: str = "",
    width: int | None = None,
) -> list[str]:
    """Crop entry rows to fit ``height`` terminal rows.

    The header rows always stay visible. A non-empty ``status`` takes the
    last row. When ``width`` is given every row is cut to that many columns
    so raw-mode output never wraps.
    """
    header, body = lines[:HEADER_ROWS], lines[HEADER_ROWS:]
    rows = max(1, height - HEADER_ROWS - (1 if status else 0))
    frame = header + body[start:start + rows]
    if status:
        frame.append(status)
    if width is not None:
        frame = [line[:max(1, width)] for line in frame]
    return frame


def frame_text(lines: list[str]) -> str:
    """Return the escape-prefixed text that redraws ``lines`` from the origin."""
    return "\033[H\033[J" + "\r\n".join(lines)
