"""Request gateway: the single chokepoint for calls to the vault API.

Responsibility:
- Attach the session token and JSON headers, serialize bodies.
- Classify every response into a decoded body or a `GatewayError`.
- React to 401 once, centrally: clear the session and hand control to the
  host's session-invalidated callback (redirect to login), whatever
  endpoint triggered it.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

import httpx
from pydantic_core import to_json

from adapters.http_client import JSON_MEDIA_TYPE, build_async_client
from core.config import AppSettings
from core.domain.errors import (
    MalformedResponseError,
    NetworkError,
    RequestError,
    UnauthorizedError,
)
from core.interfaces.dispatcher import Endpoint
from core.services.session_store import SessionStore

logger = logging.getLogger("vault_client.gateway")


def _error_message(response: httpx.Response, data: Any) -> str:
    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, str) and error:
            return error
    return response.reason_phrase or f"HTTP {response.status_code}"


class RequestGateway:
    """Issues requests on behalf of domain endpoints.

    `on_session_invalidated` is called after the session store has been
    cleared in response to a 401. It must be safe to call several times:
    concurrent requests can observe the same 401.
    """

    def __init__(
        self,
        session_store: SessionStore,
        *,
        settings: AppSettings | None = None,
        on_session_invalidated: Callable[[], None] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._session_store = session_store
        self._on_session_invalidated = on_session_invalidated
        self._client = build_async_client(settings, transport=transport)

    async def __aenter__(self) -> "RequestGateway":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    def _build_headers(self, overrides: Mapping[str, str] | None) -> httpx.Headers:
        headers = httpx.Headers({"Content-Type": JSON_MEDIA_TYPE})
        token = self._session_store.token
        if token:
            headers["Authorization"] = f"Bearer {token}"
        if overrides:
            headers.update(overrides)
        return headers

    def _invalidate_session(self) -> None:
        self._session_store.logout()
        if self._on_session_invalidated is not None:
            self._on_session_invalidated()

    async def dispatch(
        self,
        path: str,
        *,
        method: str = "GET",
        params: Mapping[str, str] | None = None,
        body: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Send one request and return the decoded JSON body.

        Raises:
            NetworkError: no response was received.
            UnauthorizedError: the server answered 401 (session already cleared).
            MalformedResponseError: the body is not valid JSON.
            RequestError: any other non-2xx status.
        """

        method = method.upper()
        content = to_json(body) if body is not None else None

        try:
            response = await self._client.request(
                method,
                path,
                params=dict(params) if params else None,
                content=content,
                headers=self._build_headers(headers),
            )
        except httpx.TransportError as exc:
            logger.warning("%s %s failed without response: %s", method, path, type(exc).__name__)
            raise NetworkError(str(exc) or type(exc).__name__) from exc

        logger.debug("%s %s -> %d", method, path, response.status_code)

        if response.status_code == httpx.codes.UNAUTHORIZED:
            logger.info("%s %s answered 401; clearing session", method, path)
            self._invalidate_session()
            raise UnauthorizedError()

        try:
            data = response.json()
        except ValueError as exc:
            raise MalformedResponseError(
                f"{method} {path} returned a body that is not valid JSON"
            ) from exc

        if response.is_success:
            return data
        raise RequestError(_error_message(response, data), status_code=response.status_code)

    async def send(self, endpoint: Endpoint) -> Any:
        return await self.dispatch(
            endpoint.path,
            method=endpoint.method,
            params=endpoint.params,
            body=endpoint.body,
        )
