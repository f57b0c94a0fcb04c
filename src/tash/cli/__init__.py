"""Command-line entry point for tash."""

from .app import app

__all__ = ["app"]
