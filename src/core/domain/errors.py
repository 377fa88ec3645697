"""Failure taxonomy of the request gateway.

Every call through the gateway either returns the decoded JSON body or
raises one of these. `UnauthorizedError` is special: by the time a caller
sees it the session has already been torn down centrally.
"""

from __future__ import annotations


class GatewayError(RuntimeError):
    """Base class for every gateway failure."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NetworkError(GatewayError):
    """No response was obtained (connection refused, DNS, timeout...)."""


class UnauthorizedError(GatewayError):
    """The server answered 401; session state has been cleared."""

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message)


class MalformedResponseError(GatewayError):
    """The response body is not valid JSON or not the expected shape."""


class RequestError(GatewayError):
    """Any other non-2xx answer.

    `message` is the server-supplied `error` field when present, else the
    HTTP reason phrase.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
