"""Command: compute bounding boxes for a local task file."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

import click

from circlebox.commands._base import BoxCommand

if TYPE_CHECKING:
    from circlebox.commands._context import AppContext


@click.command(
    cls=BoxCommand,
    examples="""\
  circlebox bbox tasks.json
  echo '[[{"x": 0, "y": 0, "radius": 5}]]' | circlebox bbox -
  circlebox -q bbox tasks.json""",
)
@click.argument("source", type=click.File("rb"))
@click.pass_obj
def bbox(app: AppContext, source: IO[bytes]) -> None:
    """Compute boxes for SOURCE, a JSON array of circle arrays ('-' for stdin)."""
    from circlebox.services.solve import SolveService

    app.emit(SolveService.solve_json(source.read()))
