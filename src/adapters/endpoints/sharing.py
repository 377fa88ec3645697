"""Sharing endpoints (`/share`, `/shared`)."""

from __future__ import annotations

from typing import Any

from adapters.endpoints.base import EndpointGroup, segment
from core.interfaces.dispatcher import Endpoint


class SharingApi(EndpointGroup):
    async def share(self, vault_id: str, email: str, **options: Any) -> Any:
        """Share an entry; `options` (expiry, share password...) are passed through."""

        body = {"vault_id": vault_id, "recipient_email": email, **options}
        return await self._dispatcher.send(Endpoint("/share", method="POST", body=body))

    async def list_shares(self) -> Any:
        return await self._dispatcher.send(Endpoint("/shared"))

    async def get_shared_password(self, token: str, share_password: str | None = None) -> Any:
        params = {"share_password": share_password} if share_password else {}
        return await self._dispatcher.send(
            Endpoint(f"/shared/{segment(token)}", params=params)
        )

    async def revoke_share(self, token: str) -> Any:
        return await self._dispatcher.send(
            Endpoint(f"/shared/{segment(token)}/revoke", method="POST")
        )
