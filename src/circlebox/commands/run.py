"""Command: fetch tasks, compute bounding boxes, submit for checking."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from circlebox.commands._base import BoxCommand

if TYPE_CHECKING:
    from circlebox.commands._context import AppContext


@click.command(
    cls=BoxCommand,
    examples="""\
  circlebox run
  circlebox --json run
  circlebox -q run
  CIRCLEBOX_API__KEY=... circlebox run""",
)
@click.pass_obj
def run(app: AppContext) -> None:
    """Solve every task from the API and print the verdict per test."""
    from circlebox.services.solve import SolveService

    with app.open_client("run") as client:
        app.emit(SolveService(client).run())
