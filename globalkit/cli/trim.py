"""CLI for trimming characters from a string."""
from __future__ import annotations

from typing import Optional

import typer

from globalkit.utils.text import ltrim, rtrim, trim as trim_both

app = typer.Typer(add_completion=False, help="Trim characters from a string.")

_TRIMMERS = {"both": trim_both, "left": ltrim, "right": rtrim}


@app.command()
def trim(
    text: str = typer.Argument(..., help="String to trim"),
    chars: Optional[str] = typer.Option(None, "--chars", help="Characters to strip (default whitespace)"),
    side: str = typer.Option("both", "--side", help="Which end to trim: both, left or right"),
) -> None:
    """Trim ``text`` and print the result."""

    trimmer = _TRIMMERS.get(side)
    if trimmer is None:
        typer.secho(f"[ERROR] Unknown side '{side}'. Expected one of: both, left, right", fg=typer.colors.RED)
        raise typer.Exit(code=1)
    typer.echo(trimmer(text, chars))


__all__ = ["app", "trim"]
