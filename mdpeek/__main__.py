"""Module entrypoint for ``python -m mdpeek``."""

from .cli import main


if __name__ == "__main__":
    main()
