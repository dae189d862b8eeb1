"""SolveService — fetch tasks, compute bounding boxes, submit for checking.

The pipeline is strictly sequential: every task is fetched before any box
is computed, and every box is computed before anything is submitted. The
first failure ends the run.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError

from circlebox.domain.geometry import Circle, Rectangle, bounding_box, bounding_boxes
from circlebox.infrastructure.envelope import TASKS_ADAPTER
from circlebox.infrastructure.errors import ContestError
from circlebox.services.base import BaseService
from circlebox.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


def _tally(verdicts: Sequence[Any], expected: int) -> tuple[list[dict[str, Any]], list[str]]:
    """Number verdicts from 1 in array order, skipping non-boolean entries."""
    results: list[dict[str, Any]] = []
    warnings: list[str] = []
    if len(verdicts) != expected:
        warnings.append(f"Server returned {len(verdicts)} verdicts for {expected} tasks")
    for number, verdict in enumerate(verdicts, start=1):
        if not isinstance(verdict, bool):
            warnings.append(f"Test {number}: ignoring non-boolean verdict {verdict!r}")
            continue
        results.append({"test": number, "passed": verdict})
    return results, warnings


def _summary(results: list[dict[str, Any]]) -> dict[str, int]:
    passed = sum(1 for r in results if r["passed"])
    return {"passed": passed, "failed": len(results) - passed, "total": len(results)}


def _dump_boxes(boxes: Sequence[Rectangle]) -> list[dict[str, Any]]:
    return [box.model_dump(mode="json") for box in boxes]


class SolveService(BaseService):
    """Bounding-box pipeline against the contest API."""

    def fetch_tasks(self) -> ServiceResult:
        """Fetch the task list without computing anything."""
        try:
            tasks = self._client.get_tasks()
        except ContestError as exc:
            return self._failure("fetch_tasks", exc, step="fetch")
        logger.debug("Fetched %d tasks", len(tasks))
        return ServiceResult(
            ok=True,
            op="fetch_tasks",
            data={
                "tasks": [[c.model_dump(mode="json") for c in task] for task in tasks],
                "count": len(tasks),
            },
        )

    @staticmethod
    def solve(tasks: Sequence[Sequence[Circle]]) -> ServiceResult:
        """Compute one bounding box per task. Pure; never touches the network."""
        boxes = bounding_boxes(tasks)
        return ServiceResult(
            ok=True,
            op="solve",
            data={"boxes": _dump_boxes(boxes), "count": len(boxes)},
        )

    @staticmethod
    def solve_json(raw: str | bytes) -> ServiceResult:
        """Decode a local ``GetTasks``-shaped JSON document and solve it."""
        try:
            tasks = TASKS_ADAPTER.validate_json(raw)
        except ValidationError as exc:
            err = exc.errors()[0]
            loc = ".".join(str(part) for part in err["loc"]) or "document"
            return ServiceResult(
                ok=False,
                op="solve",
                error=ServiceError(
                    code="INPUT_ERROR",
                    message=f"Invalid task file: {loc}: {err['msg']}",
                    detail={"errors": exc.error_count()},
                ),
            )
        return SolveService.solve(tasks)

    def check(self, boxes: Sequence[Rectangle]) -> ServiceResult:
        """Submit *boxes* and report a verdict per test."""
        try:
            verdicts = self._client.check_results(boxes)
        except ContestError as exc:
            return self._failure("check_results", exc, step="submit")
        results, warnings = _tally(verdicts, len(boxes))
        return ServiceResult(
            ok=True,
            op="check_results",
            data={"results": results, **_summary(results)},
            warnings=warnings,
        )

    def preview(self) -> ServiceResult:
        """Fetch tasks and show each task's bounding box without submitting."""
        try:
            tasks = self._client.get_tasks()
        except ContestError as exc:
            return self._failure("tasks", exc, step="fetch")
        items = [
            {
                "task": number,
                "circles": len(task),
                "box": bounding_box(task).model_dump(mode="json"),
            }
            for number, task in enumerate(tasks, start=1)
        ]
        return ServiceResult(ok=True, op="tasks", data={"items": items, "count": len(items)})

    def run(self) -> ServiceResult:
        """Fetch, compute and submit; stop at the first failure."""
        try:
            tasks = self._client.get_tasks()
        except ContestError as exc:
            return self._failure("run", exc, step="fetch")
        logger.debug("Fetched %d tasks", len(tasks))

        boxes = bounding_boxes(tasks)

        try:
            verdicts = self._client.check_results(boxes)
        except ContestError as exc:
            return self._failure("run", exc, step="submit")

        results, warnings = _tally(verdicts, len(boxes))
        summary = _summary(results)
        logger.debug("Checked %d results: %d passed", summary["total"], summary["passed"])
        return ServiceResult(
            ok=True,
            op="run",
            data={
                "boxes": _dump_boxes(boxes),
                "results": results,
                **summary,
            },
            warnings=warnings,
        )
