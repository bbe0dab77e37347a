"""Module entrypoint for ``python -m lazydir``."""

from .cli import main


if __name__ == "__main__":
    main()
