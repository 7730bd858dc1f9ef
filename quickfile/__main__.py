"""Module entrypoint for ``python -m quickfile``."""

from .cli import main


if __name__ == "__main__":
    main()
