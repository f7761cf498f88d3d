"""Command-line interface for insureai."""

from .app import app, main

__all__ = ["app", "main"]
