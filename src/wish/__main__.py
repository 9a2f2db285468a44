"""Run the shell with ``python -m wish``."""

from wish.cli import app

if __name__ == "__main__":
    app()
