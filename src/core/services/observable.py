"""Minimal subscription primitive shared by the client-side stores.

Stores publish an immutable snapshot after every committed transition, so
observers always see the latest value and never a half-applied one.
"""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

T = TypeVar("T")

Listener = Callable[[T], None]


class Observable(Generic[T]):
    def __init__(self) -> None:
        self._listeners: list[Listener[T]] = []

    def subscribe(self, listener: Listener[T]) -> Callable[[], None]:
        """Register `listener`; returns a callable that unsubscribes it."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self, snapshot: T) -> None:
        # Copy: a listener may unsubscribe while being notified.
        for listener in list(self._listeners):
            listener(snapshot)
