"""Contract for durable session persistence.

A Protocol lets the file-backed store and the in-memory store used by
tests stay interchangeable without inheritance.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Protocol, runtime_checkable

TOKEN_KEY = "token"
USER_KEY = "user"


@runtime_checkable
class CredentialStore(Protocol):
    """String key/value storage that outlives the running process.

    Design rules:
    - Entries are read independently (`get`).
    - Writes and deletes take several keys so related entries change together.
    """

    def get(self, key: str) -> str | None:
        """Return the stored value, or None when the key is absent."""

        ...

    def set_many(self, values: Mapping[str, str]) -> None:
        """Store all `values` in a single write."""

        ...

    def delete_many(self, keys: Iterable[str]) -> None:
        """Remove `keys`; missing keys are ignored."""

        ...
