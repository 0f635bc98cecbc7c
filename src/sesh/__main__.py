"""Entry point for ``python -m sesh``."""

from sesh.cli import main

if __name__ == "__main__":
    main()
