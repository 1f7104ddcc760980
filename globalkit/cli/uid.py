"""CLI for generating unique identifiers."""
from __future__ import annotations

import typer

from globalkit.utils.uid import create_uid

app = typer.Typer(add_completion=False, help="Print a new unique identifier.")


@app.command()
def uid(
    plain: bool = typer.Option(False, "--plain", help="Emit the bare hex UUID instead of its base64 form"),
) -> None:
    typer.echo(create_uid(base64_encoded=False if plain else None))


__all__ = ["app", "uid"]
