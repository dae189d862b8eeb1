"""Command: fetch tasks and preview their bounding boxes."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from circlebox.commands._base import BoxCommand

if TYPE_CHECKING:
    from circlebox.commands._context import AppContext


@click.command(
    cls=BoxCommand,
    examples="""\
  circlebox tasks
  circlebox --json tasks
  circlebox -q tasks""",
)
@click.pass_obj
def tasks(app: AppContext) -> None:
    """Fetch tasks and show each bounding box without submitting."""
    from circlebox.services.solve import SolveService

    with app.open_client("tasks") as client:
        app.emit(SolveService(client).preview())
