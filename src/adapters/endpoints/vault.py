"""Vault endpoints (`/vault`)."""

from __future__ import annotations

from typing import Any

from adapters.endpoints.base import EndpointGroup, parse_as, parse_list_as, segment
from core.domain.models import GeneratedPassword, VaultItem, VaultItemInput, VaultSecret
from core.interfaces.dispatcher import Endpoint


class VaultApi(EndpointGroup):
    async def list_items(self) -> list[VaultItem]:
        payload = await self._dispatcher.send(Endpoint("/vault"))
        return parse_list_as(VaultItem, payload)

    async def get(self, item_id: str, master_password: str) -> VaultSecret:
        """Read one entry with its secret decrypted server-side."""

        payload = await self._dispatcher.send(
            Endpoint(
                f"/vault/{segment(item_id)}",
                params={"master_password": master_password},
            )
        )
        return parse_as(VaultSecret, payload)

    async def create(self, data: VaultItemInput) -> VaultItem:
        payload = await self._dispatcher.send(Endpoint("/vault", method="POST", body=data))
        return parse_as(VaultItem, payload)

    async def update(self, item_id: str, data: VaultItemInput) -> VaultItem:
        payload = await self._dispatcher.send(
            Endpoint(f"/vault/{segment(item_id)}", method="PUT", body=data)
        )
        return parse_as(VaultItem, payload)

    async def delete(self, item_id: str) -> Any:
        return await self._dispatcher.send(
            Endpoint(f"/vault/{segment(item_id)}", method="DELETE")
        )

    async def generate_password(self, length: int = 20, use_special: bool = True) -> str:
        payload = await self._dispatcher.send(
            Endpoint(
                "/vault/generate-password",
                method="POST",
                params={
                    "length": str(length),
                    "use_special": "true" if use_special else "false",
                },
            )
        )
        return parse_as(GeneratedPassword, payload).password

    async def scan_all(self) -> Any:
        return await self._dispatcher.send(Endpoint("/vault/scan-all", method="POST"))
