"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Builds the API client on demand and centralizes
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from circlebox.output.formatters import OutputSettings, format_result
from circlebox.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from circlebox.config.settings import CircleboxSettings
    from circlebox.infrastructure.client import ContestClient


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.  No HTTP session is
    created until a command asks for a client, so ``--help`` and local
    commands never need an API key.
    """

    def __init__(self, settings: CircleboxSettings) -> None:
        self.settings = settings

        from circlebox.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def open_client(self, op: str) -> ContestClient:
        """Return a client for the configured endpoint.

        Emits a ``CONFIG_ERROR`` result (exit code 1) when no API key is set.
        """
        api = self.settings.api
        if not api.has_key:
            self.emit(
                ServiceResult(
                    ok=False,
                    op=op,
                    error=ServiceError(
                        code="CONFIG_ERROR",
                        message=(
                            "No API key configured; set [api] key in circlebox.toml "
                            "or the CIRCLEBOX_API__KEY environment variable"
                        ),
                    ),
                )
            )

        from circlebox.infrastructure.client import ContestClient

        return ContestClient(api.url, api.key, timeout=api.timeout)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
