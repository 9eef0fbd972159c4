"""Module entrypoint for ``python -m lazycd``."""

from .cli import main


if __name__ == "__main__":
    main()
