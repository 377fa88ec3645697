"""Contract between domain endpoints and the request gateway.

Endpoints only describe *what* to call; whatever implements `Dispatcher`
decides *how* it is sent.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol, runtime_checkable


@dataclass(frozen=True)
class Endpoint:
    """Declarative description of one server operation."""

    path: str
    method: str = "GET"
    body: Any = None
    params: Mapping[str, str] = field(default_factory=dict)


@runtime_checkable
class Dispatcher(Protocol):
    async def send(self, endpoint: Endpoint) -> Any:
        """Issue `endpoint` and return the decoded JSON body."""

        ...
