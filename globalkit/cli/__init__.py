"""Command-line interfaces for globalkit."""

from .main import app, run

__all__ = ["app", "run"]
