"""Subcommand modules for circlebox.

Provides register_commands() which uses deferred imports to keep
``circlebox --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from circlebox.commands.bbox import bbox
    from circlebox.commands.run import run
    from circlebox.commands.tasks import tasks

    cli.add_command(run)
    cli.add_command(tasks)
    cli.add_command(bbox)
