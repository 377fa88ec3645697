"""Pytest configuration and fixtures for vault-client tests."""

from __future__ import annotations

from typing import Any

import httpx
import pytest
import pytest_asyncio

from adapters.credential_store import MemoryCredentialStore
from adapters.gateway import RequestGateway
from core.config import AppSettings
from core.services.session_store import SessionStore

BASE_URL = "http://vault.test/api/v1"
API_PREFIX = "/api/v1"


class FakeServer:
    """Answers requests from a (method, path) table and records them."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[tuple[str, str], tuple[int, dict[str, Any]]] = {}

    def add(
        self,
        method: str,
        path: str,
        status: int = 200,
        *,
        json: Any = None,
        content: bytes | None = None,
    ) -> None:
        body = {"content": content} if content is not None else {"json": json}
        self._routes[(method.upper(), API_PREFIX + path)] = (status, body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self._routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"error": "not found"})
        status, body = route
        return httpx.Response(status, **body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def settings(tmp_path):
    """Settings isolated from the developer's .env files."""
    return AppSettings(
        _env_file=None,
        api_base_url=BASE_URL,
        credentials_path=tmp_path / "credentials.json",
    )


@pytest.fixture
def credentials():
    return MemoryCredentialStore()


@pytest.fixture
def session_store(credentials):
    return SessionStore(credentials)


@pytest.fixture
def server():
    return FakeServer()


@pytest.fixture
def invalidations():
    """Records calls of the gateway's session-invalidated callback."""
    return []


@pytest_asyncio.fixture
async def gateway(session_store, settings, server, invalidations):
    gw = RequestGateway(
        session_store,
        settings=settings,
        on_session_invalidated=lambda: invalidations.append("login"),
        transport=server.transport,
    )
    yield gw
    await gw.aclose()
