"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from circlebox.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from circlebox.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if "results" in result.data:
        return f"passed {result.data.get('passed', 0)}/{result.data.get('total', 0)}"

    boxes = result.data.get("boxes")
    if boxes is None and "items" in result.data:
        boxes = [item["box"] for item in result.data["items"]]
    if boxes is not None:
        return "\n".join(_box_line(box) for box in boxes)

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _num(value: float) -> str:
    return f"{value:g}"


def _point(point: dict[str, float]) -> str:
    return f"({_num(point['x'])}, {_num(point['y'])})"


def _box_line(box: dict[str, Any]) -> str:
    lb, rt = box["left_bottom"], box["right_top"]
    return " ".join(_num(v) for v in (lb["x"], lb["y"], rt["x"], rt["y"]))


def _verdict_line(number: int, passed: bool) -> Text:
    # Booleans are printed as they appear on the wire.
    style = "box.pass" if passed else "box.fail"
    return Text(f"Test {number} passed: {str(passed).lower()}", style=style)


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    console.print(Text.assemble(("OK", "box.ok"), (f"  {result.op}", "box.op")))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    console.print(Text.assemble((f"  {key}: ", "box.key"), str(value)), soft_wrap=True)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    line = Text.assemble(("ERROR", "box.error"), (f"  {result.op}", "box.op"), " — ", msg)
    console.print(line, soft_wrap=True)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_verdicts(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render run/check_results: one line per test, then a summary."""
    _status_line(console, result)
    for entry in result.data.get("results", []):
        console.print(_verdict_line(entry["test"], entry["passed"]))

    passed = result.data.get("passed", 0)
    total = result.data.get("total", 0)
    style = "box.ok" if passed == total else "box.warning"
    console.print(Text(f"{passed}/{total} passed", style=style))

    if verbose and result.data.get("boxes"):
        console.print()
        console.print(_box_table(result.data["boxes"]))


def _box_table(boxes: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", justify="right")
    table.add_column("Left bottom", style="box.coord")
    table.add_column("Right top", style="box.coord")
    for number, box in enumerate(boxes, start=1):
        table.add_row(str(number), _point(box["left_bottom"]), _point(box["right_top"]))
    return table


def _render_boxes(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render solve: a table of computed boxes."""
    _status_line(console, result)
    boxes = result.data.get("boxes", [])
    if not boxes:
        console.print("  No tasks.")
        return
    console.print(_box_table(boxes))


def _render_tasks(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render tasks: circle count and bounding box per fetched task."""
    _status_line(console, result)
    items = result.data.get("items", [])
    if not items:
        console.print("  No tasks.")
        return

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", justify="right")
    table.add_column("Circles", justify="right")
    table.add_column("Left bottom", style="box.coord")
    table.add_column("Right top", style="box.coord")
    for item in items:
        box = item["box"]
        table.add_row(
            str(item["task"]),
            str(item["circles"]),
            _point(box["left_bottom"]),
            _point(box["right_top"]),
        )
    console.print(table)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "run": _render_verdicts,
    "check_results": _render_verdicts,
    "solve": _render_boxes,
    "tasks": _render_tasks,
}
