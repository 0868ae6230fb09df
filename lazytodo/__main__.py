"""Module entrypoint for ``python -m lazytodo``."""

from .cli import main


if __name__ == "__main__":
    main()
