"""Root CLI entry point for globalkit."""
from __future__ import annotations

import typer

from . import distance as distance_cli
from . import hashes as hashes_cli
from . import trim as trim_cli
from . import uid as uid_cli

app = typer.Typer(add_completion=False, help="globalkit command line interface")
app.command("distance", help="Levenshtein distance between two strings")(distance_cli.distance)
app.command("hash", help="Combine integer hash codes")(hashes_cli.combine)
app.command("uid", help="Generate a unique identifier")(uid_cli.uid)
app.command("trim", help="Trim characters from a string")(trim_cli.trim)


def run() -> None:
    """Execute the root CLI."""

    app()


__all__ = ["app", "run"]
