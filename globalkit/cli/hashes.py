"""CLI for combining integer hash codes."""
from __future__ import annotations

from typing import List, Optional

import typer

from globalkit.hashing.combine import HashCombiner, default_combiner

app = typer.Typer(add_completion=False, help="Fold integer hash codes into one combined hash.")


@app.command()
def combine(
    values: Optional[List[int]] = typer.Argument(
        None,
        help="Hash codes in folding order; put '--' before the first negative value",
    ),
    word_bits: Optional[int] = typer.Option(
        None,
        "--word-bits",
        help="Word size of the mixer (32 or 64); defaults to the configured size",
    ),
) -> None:
    """Print the combined hash of ``values`` in the order given."""

    if word_bits is None:
        combiner = default_combiner
    else:
        try:
            combiner = HashCombiner(word_bits)
        except ValueError as exc:
            typer.secho(f"[ERROR] {exc}", fg=typer.colors.RED)
            raise typer.Exit(code=1) from exc
    typer.echo(str(combiner.combine_all(values or [])))


def run() -> None:
    """Entrypoint for ``python -m globalkit.cli.hashes`` usage."""

    app()


__all__ = ["app", "combine", "run"]
