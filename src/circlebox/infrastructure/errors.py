"""Error kinds raised by the contest API client.

Every failure is terminal for the current run; the service layer turns
these into ServiceError payloads and never retries.
"""

from __future__ import annotations


class ContestError(Exception):
    """Base class for contest API failures."""

    code = "CONTEST_ERROR"


class TransportError(ContestError):
    """The HTTP request could not be completed (connect, DNS, timeout...)."""

    code = "TRANSPORT_ERROR"


class DecodeError(ContestError):
    """The response body is not JSON or does not have the expected shape."""

    code = "DECODE_ERROR"


class ApiCallError(ContestError):
    """The API answered with an explicit error object."""

    code = "API_ERROR"

    def __init__(self, api_code: int, message: str) -> None:
        super().__init__(f"API error: {message}")
        self.api_code = api_code
        self.message = message
