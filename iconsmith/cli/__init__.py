"""Command-line interface for iconsmith."""

from .app import app

__all__ = ["app"]
