"""Command-line front door for lazydir.

Parses CLI options, resolves the starting directory, and sets up logging.
Then dispatches into the interactive browser loop, or prints one listing and
exits when ``--print`` is given.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from loguru import logger

from . import config
from .errors import DirectoryAccessError, TerminalError
from .log import setup_logging
from .loop import run_browser
from .navigator import Navigator
from .render import format_lines
from .terminal import TerminalController


def _log_level(value: str) -> str:
    """argparse type for loguru level names."""
    level = value.strip().upper()
    if not config.is_known_log_level(level):
        raise argparse.ArgumentTypeError(f"unknown log level: {value!r}")
    return level


def _write_stdout(text: str) -> None:
    """Write ``text`` as UTF-8, replacing undecodable filename bytes."""
    sys.stdout.flush()
    sys.stdout.buffer.write(text.encode("utf-8", errors="replace"))
    sys.stdout.buffer.flush()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Browse directories in a full-screen terminal list.")
    parser.add_argument("path", nargs="?", default=None, help="Directory to start in. Defaults to current directory.")
    parser.add_argument(
        "--show-hidden",
        action="store_true",
        default=None,
        help="Show dotfiles at startup (toggle with '.').",
    )
    parser.add_argument("--print", dest="print_only", action="store_true", help="Print the listing and exit.")
    parser.add_argument("--log-level", type=_log_level, default=None, help="Log level for the session log file.")
    return parser


def main(argv: list[str] | None = None, default_path: Path | None = None) -> None:
    """Parse CLI arguments and launch the browser.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    args = build_parser().parse_args(argv)

    log_level = args.log_level or config.load_log_level()
    setup_logging(log_level, to_stderr=args.print_only)

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path or default_path).expanduser().resolve()
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    if not path.is_dir():
        raise SystemExit(f"Not a directory: {path}")

    show_hidden = args.show_hidden if args.show_hidden is not None else config.load_show_hidden()
    try:
        navigator = Navigator(path, show_hidden=show_hidden)
    except DirectoryAccessError as exc:
        raise SystemExit(f"Cannot list directory: {exc}") from exc

    if args.print_only:
        lines = format_lines(navigator.directory, navigator.listing, navigator.cursor)
        _write_stdout("\n".join(lines) + "\n")
        return

    try:
        terminal = TerminalController(sys.stdin.fileno(), sys.stdout.fileno())
        run_browser(navigator, terminal, sys.stdin.fileno())
    except TerminalError as exc:
        logger.error("Terminal failure: {}", exc)
        raise SystemExit(f"Terminal error: {exc}") from exc


if __name__ == "__main__":
    main()
