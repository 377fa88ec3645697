"""Client-side mirror of the user's vault.

The cache never talks to the server on mutation: callers confirm a write
through the gateway first and reconcile here afterwards. Only `refresh`
reads from the server, replacing the list wholesale.
"""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Iterable, Sequence

from core.domain.errors import GatewayError
from core.domain.models import CollectionState, VaultItem
from core.services.observable import Observable

logger = logging.getLogger("vault_client.vault")

DEFAULT_REFRESH_ERROR = "Failed to fetch vault items"

Fetcher = Callable[[], Awaitable[Sequence[VaultItem]]]


def _unique(items: Iterable[VaultItem]) -> tuple[VaultItem, ...]:
    seen: set[str] = set()
    out: list[VaultItem] = []
    for item in items:
        if item.id in seen:
            continue
        seen.add(item.id)
        out.append(item)
    return tuple(out)


class VaultCache(Observable[CollectionState]):
    def __init__(self, fetch: Fetcher) -> None:
        super().__init__()
        self._fetch = fetch
        self._state = CollectionState()
        self._pending = 0
        # Bumped by clear(); items fetched under an older value are discarded.
        self._generation = 0

    @property
    def state(self) -> CollectionState:
        return self._state

    @property
    def items(self) -> tuple[VaultItem, ...]:
        return self._state.items

    @property
    def loading(self) -> bool:
        return self._state.loading

    @property
    def error(self) -> str | None:
        return self._state.error

    def _commit(self, **changes: Any) -> None:
        self._state = self._state.model_copy(update=changes)
        self._publish(self._state)

    async def refresh(self) -> None:
        """Replace the items with the server's list.

        Gateway failures end up in `error`; they are not re-raised.
        """

        generation = self._generation
        self._pending += 1
        self._commit(loading=True, error=None)
        try:
            items = await self._fetch()
        except GatewayError as exc:
            # A failed fetch is always reported, even when a 401 cleared the mirror meanwhile.
            logger.warning("Vault refresh failed: %s", type(exc).__name__)
            self._commit(error=exc.message or DEFAULT_REFRESH_ERROR)
        else:
            if generation == self._generation:
                self._commit(items=_unique(items))
                logger.debug("Vault refreshed with %d item(s)", len(self._state.items))
        finally:
            self._pending -= 1
            self._commit(loading=self._pending > 0)

    def add_local(self, item: VaultItem) -> None:
        """Prepend an item the server already persisted."""

        rest = tuple(i for i in self._state.items if i.id != item.id)
        self._commit(items=(item, *rest))

    def update_local(self, item: VaultItem) -> None:
        """Replace the item with the same id; no-op when absent."""

        if not any(i.id == item.id for i in self._state.items):
            return
        self._commit(items=tuple(item if i.id == item.id else i for i in self._state.items))

    def remove_local(self, item_id: str) -> None:
        self._commit(items=tuple(i for i in self._state.items if i.id != item_id))

    def clear(self) -> None:
        """Drop every item and discard the items of in-flight refreshes."""

        self._generation += 1
        self._commit(items=(), error=None, loading=self._pending > 0)
