"""BaseService — foundation for circlebox services.

Every service receives a :class:`ContestClient` at construction time and
reports failures as ``ServiceResult(ok=False)`` instead of raising.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from circlebox.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from circlebox.infrastructure.client import ContestClient
    from circlebox.infrastructure.errors import ContestError

logger = logging.getLogger(__name__)

_STEP_LABELS = {
    "fetch": "Error getting tasks",
    "submit": "Error checking results",
}


class BaseService:
    """Base for service-layer classes that talk to the contest API.

    Usage::

        class SolveService(BaseService):
            def fetch_tasks(self) -> ServiceResult:
                try:
                    tasks = self._client.get_tasks()
                except ContestError as exc:
                    return self._failure("fetch_tasks", exc, step="fetch")
                ...
    """

    def __init__(self, client: ContestClient) -> None:
        self._client = client

    @staticmethod
    def _failure(op: str, exc: ContestError, *, step: str) -> ServiceResult:
        """Log *exc* and wrap it in a failed ServiceResult."""
        detail: dict[str, Any] = {"step": step}
        api_code = getattr(exc, "api_code", None)
        if api_code is not None:
            detail["api_code"] = api_code
        message = f"{_STEP_LABELS.get(step, 'Error')}: {exc}"
        logger.debug("%s failed at %s: %s (%s)", op, step, exc, exc.code)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=exc.code, message=message, detail=detail),
        )
