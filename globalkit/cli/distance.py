"""CLI for computing the edit distance between two strings."""
from __future__ import annotations

import typer

from globalkit.distance.levenshtein import levenshtein, rolling_edit_distance

app = typer.Typer(add_completion=False, help="Print the Levenshtein distance between two strings.")


@app.command()
def distance(
    a: str = typer.Argument(..., help="Source string"),
    b: str = typer.Argument(..., help="Target string"),
    rolling: bool = typer.Option(False, "--rolling", help="Use the two-row variant (same result, less memory)"),
) -> None:
    """Print the distance between ``a`` and ``b`` counted in UTF-16 code units."""

    result = rolling_edit_distance(a, b) if rolling else levenshtein(a, b)
    typer.echo(str(result))


def run() -> None:
    """Entrypoint for ``python -m globalkit.cli.distance`` usage."""

    app()


__all__ = ["app", "distance", "run"]
