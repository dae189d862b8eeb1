"""HTTP client for the contest endpoint.

One POST per call; the response is closed as soon as its body has been
read. The client owns a ``requests.Session`` and closes it on exit.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import requests
import structlog

from circlebox.domain.geometry import Circle, Rectangle
from circlebox.infrastructure.envelope import (
    CHECK_ADAPTER,
    TASKS_ADAPTER,
    ApiMethod,
    ApiRequest,
    decode_response,
)
from circlebox.infrastructure.errors import TransportError

log = structlog.get_logger(__name__)


class ContestClient:
    """Authenticated JSON-over-POST client for ``GetTasks``/``CheckResults``.

    Usage::

        with ContestClient(url, key) as client:
            tasks = client.get_tasks()
            verdicts = client.check_results(boxes)
    """

    def __init__(
        self,
        url: str,
        key: str,
        *,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.url = url
        self._key = key
        self.timeout = timeout
        self._session = session if session is not None else requests.Session()

    def __enter__(self) -> ContestClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._session.close()

    def _post(self, method: ApiMethod, params: Any) -> tuple[int, bytes]:
        request = ApiRequest(key=self._key, method=method, params=params)
        log.debug("api.request", method=str(method), url=self.url)
        try:
            with self._session.post(
                self.url,
                json=request.model_dump(mode="json"),
                timeout=self.timeout,
            ) as response:
                status, body = response.status_code, response.content
        except requests.RequestException as exc:
            raise TransportError(f"{method} request to {self.url} failed: {exc}") from exc
        log.debug("api.response", method=str(method), status=status, size=len(body))
        return status, body

    def get_tasks(self) -> list[list[Circle]]:
        """Fetch the task list: one list of circles per task.

        Raises:
            TransportError: The request did not complete.
            ApiCallError: The API returned an error object.
            DecodeError: The result is not an array of circle arrays.
        """
        status, body = self._post(ApiMethod.GET_TASKS, None)
        envelope = decode_response(body, status=status)
        return envelope.unwrap(TASKS_ADAPTER, method=ApiMethod.GET_TASKS)

    def check_results(self, boxes: Sequence[Rectangle]) -> list[Any]:
        """Submit one rectangle per task and return the raw verdict array.

        Entries are expected to be booleans in task order; the caller
        decides what to do with anything else.
        """
        params = [box.model_dump(mode="json") for box in boxes]
        status, body = self._post(ApiMethod.CHECK_RESULTS, params)
        envelope = decode_response(body, status=status)
        return envelope.unwrap(CHECK_ADAPTER, method=ApiMethod.CHECK_RESULTS)
