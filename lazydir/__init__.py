"""lazydir: a full-screen terminal directory browser.

``main`` runs the command-line browser; ``Navigator`` and ``list_directory``
are the state machine and lister it drives, for use without a terminal.
"""

from __future__ import annotations

from .listing import DirectoryEntry, list_directory
from .navigator import Navigator

__version__ = "0.1.0"


def main(argv: list[str] | None = None) -> None:
    """Run the browser CLI with ``argv`` (defaults to ``sys.argv[1:]``)."""
    from .cli import main as cli_main

    cli_main(argv)


__all__ = ["DirectoryEntry", "Navigator", "__version__", "list_directory", "main"]
