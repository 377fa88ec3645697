"""Import endpoints (`/import`). File formats are parsed server-side."""

from __future__ import annotations

from typing import Any

from adapters.endpoints.base import EndpointGroup, segment
from core.interfaces.dispatcher import Endpoint


class ImportApi(EndpointGroup):
    async def supported_formats(self) -> Any:
        return await self._dispatcher.send(Endpoint("/import/supported-formats"))

    async def upload(self, content: str, filename: str, source: str) -> Any:
        return await self._dispatcher.send(
            Endpoint(
                "/import/upload",
                method="POST",
                body={"content": content, "filename": filename, "source": source},
            )
        )

    async def confirm(self, session_id: str, master_password: str, merge_strategy: str = "skip") -> Any:
        return await self._dispatcher.send(
            Endpoint(
                f"/import/confirm/{segment(session_id)}",
                method="POST",
                body={"master_password": master_password, "merge_strategy": merge_strategy},
            )
        )
