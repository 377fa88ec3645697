"""Vault write operations.

Every mutation is confirmed by the server first; the cache is reconciled
only with what the server returned. A failed call leaves the cache as it
was and the error propagates to the caller.
"""

from __future__ import annotations

from adapters.endpoints.vault import VaultApi
from core.domain.models import VaultItem, VaultItemInput, VaultSecret
from core.services.vault_cache import VaultCache


class VaultService:
    def __init__(self, vault_api: VaultApi, cache: VaultCache) -> None:
        self._api = vault_api
        self._cache = cache

    @property
    def cache(self) -> VaultCache:
        return self._cache

    async def refresh(self) -> None:
        await self._cache.refresh()

    async def create(self, data: VaultItemInput) -> VaultItem:
        item = await self._api.create(data)
        self._cache.add_local(item)
        return item

    async def update(self, item_id: str, data: VaultItemInput) -> VaultItem:
        item = await self._api.update(item_id, data)
        self._cache.update_local(item)
        return item

    async def delete(self, item_id: str) -> None:
        await self._api.delete(item_id)
        self._cache.remove_local(item_id)

    async def reveal(self, item_id: str, master_password: str) -> VaultSecret:
        """Fetch the decrypted secret. Never stored in the cache."""

        return await self._api.get(item_id, master_password)

    async def generate_password(self, length: int = 20, use_special: bool = True) -> str:
        return await self._api.generate_password(length=length, use_special=use_special)
