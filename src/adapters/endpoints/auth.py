"""Authentication endpoints (`/auth`)."""

from __future__ import annotations

from typing import Any

from adapters.endpoints.base import EndpointGroup, parse_as
from core.domain.models import Credentials, LoginResponse, UserProfile
from core.interfaces.dispatcher import Endpoint


class AuthApi(EndpointGroup):
    async def register(self, credentials: Credentials) -> Any:
        return await self._dispatcher.send(
            Endpoint("/auth/register", method="POST", body=credentials)
        )

    async def login(self, credentials: Credentials) -> LoginResponse:
        payload = await self._dispatcher.send(
            Endpoint("/auth/login", method="POST", body=credentials)
        )
        return parse_as(LoginResponse, payload)

    async def get_profile(self) -> UserProfile:
        """Profile of the user the current token belongs to."""

        payload = await self._dispatcher.send(Endpoint("/auth/me"))
        return parse_as(UserProfile, payload)

    async def request_deletion(self, email: str) -> Any:
        return await self._dispatcher.send(
            Endpoint("/auth/request-deletion", method="POST", body={"email": email})
        )
