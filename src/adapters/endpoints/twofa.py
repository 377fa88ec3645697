"""Two-factor endpoints (`/2fa`). Verification rules are server-side."""

from __future__ import annotations

from typing import Any

from adapters.endpoints.base import EndpointGroup
from core.interfaces.dispatcher import Endpoint


class TwoFactorApi(EndpointGroup):
    async def enable(self, master_password: str) -> Any:
        return await self._dispatcher.send(
            Endpoint("/2fa/enable", method="POST", body={"master_password": master_password})
        )

    async def verify_and_enable(self, token: str) -> Any:
        return await self._dispatcher.send(
            Endpoint("/2fa/verify-and-enable", method="POST", body={"token": token})
        )

    async def verify(self, token: str) -> Any:
        return await self._dispatcher.send(
            Endpoint("/2fa/verify", method="POST", body={"token": token})
        )

    async def disable(self, master_password: str) -> Any:
        return await self._dispatcher.send(
            Endpoint("/2fa/disable", method="POST", body={"master_password": master_password})
        )
