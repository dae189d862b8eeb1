"""Output mode dispatch.

The CLI renders ServiceResult for humans (Rich), for scripts (--quiet)
or for machines (--json).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from circlebox.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from circlebox.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output-related global flags."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output flags; defaults to human-readable output.
    """
    if settings is None:
        settings = OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
