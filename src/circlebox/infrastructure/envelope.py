"""Typed request/response envelopes for the contest JSON API.

Requests are ``{key, method, params}``. Responses are
``{result, error}``: when ``error`` is present the call failed and
``result`` is ignored, otherwise ``result`` is validated against the
payload type the method declares.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Any, TypeVar

from pydantic import BaseModel, BeforeValidator, TypeAdapter, ValidationError

from circlebox.domain.geometry import Circle
from circlebox.infrastructure.errors import ApiCallError, DecodeError

T = TypeVar("T")

_BODY_PREVIEW = 200


class ApiMethod(StrEnum):
    """Remote methods exposed by the contest endpoint."""

    GET_TASKS = "GetTasks"
    CHECK_RESULTS = "CheckResults"


class ApiRequest(BaseModel):
    """Outgoing envelope."""

    model_config = {"frozen": True}

    key: str
    method: ApiMethod
    params: Any = None


class ApiError(BaseModel):
    """Error object carried by a failed response."""

    model_config = {"frozen": True}

    code: int = 0
    message: str = ""


class ApiResponse(BaseModel):
    """Incoming envelope, discriminated by the presence of ``error``."""

    model_config = {"frozen": True}

    result: Any = None
    error: ApiError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self, adapter: TypeAdapter[T], *, method: str) -> T:
        """Return the typed result, or raise the matching ContestError."""
        if self.error is not None:
            raise ApiCallError(self.error.code, self.error.message)
        try:
            return adapter.validate_python(self.result)
        except ValidationError as exc:
            msg = f"invalid response format for {method}: {_first_error(exc)}"
            raise DecodeError(msg) from exc


def _null_task(value: Any) -> Any:
    return [] if value is None else value


# A JSON ``null`` task is the empty task.
TaskList = list[Annotated[list[Circle], BeforeValidator(_null_task)]]

TASKS_ADAPTER: TypeAdapter[list[list[Circle]]] = TypeAdapter(TaskList)
CHECK_ADAPTER: TypeAdapter[list[Any]] = TypeAdapter(list[Any])


def decode_response(body: bytes, *, status: int | None = None) -> ApiResponse:
    """Parse a raw response body into an :class:`ApiResponse`.

    Raises:
        DecodeError: The body is not JSON or not an envelope object.
    """
    try:
        return ApiResponse.model_validate_json(body)
    except ValidationError as exc:
        preview = body[:_BODY_PREVIEW].decode("utf-8", errors="replace")
        where = f" (HTTP {status})" if status is not None else ""
        msg = f"malformed response body{where}: {preview!r}"
        raise DecodeError(msg) from exc


def _first_error(exc: ValidationError) -> str:
    err = exc.errors()[0]
    loc = ".".join(str(part) for part in err["loc"]) or "result"
    return f"{loc}: {err['msg']}"
