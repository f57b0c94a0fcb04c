"""Allow running tash with ``python -m tash``."""

from tash.cli import app

if __name__ == "__main__":
    app()
