"""Password health endpoints. Scoring and breach logic live server-side."""

from __future__ import annotations

from typing import Any

from adapters.endpoints.base import EndpointGroup
from core.interfaces.dispatcher import Endpoint


class HealthApi(EndpointGroup):
    async def get_report(self) -> Any:
        return await self._dispatcher.send(Endpoint("/health/report"))

    async def analyze_password(self, password: str) -> Any:
        return await self._dispatcher.send(
            Endpoint("/health/analyze", method="POST", body={"password": password})
        )

    async def check_breach(self, password: str) -> Any:
        return await self._dispatcher.send(
            Endpoint("/password/check-breach", method="POST", body={"password": password})
        )
