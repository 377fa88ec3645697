"""Login lifecycle actions.

Bridges the auth endpoints and the session store: the endpoint confirms
the credentials, then the store transitions. Forced logouts (401) are not
handled here; the gateway owns those.
"""

from __future__ import annotations

import logging
from typing import Any

from adapters.endpoints.auth import AuthApi
from core.domain.errors import UnauthorizedError
from core.domain.models import Credentials, Session
from core.services.session_store import SessionStore

logger = logging.getLogger("vault_client.session")


class AuthService:
    def __init__(self, auth_api: AuthApi, session_store: SessionStore) -> None:
        self._api = auth_api
        self._session_store = session_store

    async def login(self, email: str, master_password: str) -> Session:
        response = await self._api.login(
            Credentials(email=email, master_password=master_password)
        )
        return self._session_store.login(response.user, response.access_token)

    async def register(self, email: str, master_password: str) -> Any:
        return await self._api.register(
            Credentials(email=email, master_password=master_password)
        )

    def logout(self) -> Session:
        return self._session_store.logout()

    async def validate_session(self) -> bool:
        """Check the stored token against `GET /auth/me`.

        Refreshes the stored profile on success. Returns False when there
        is no session or the server rejected the token (the gateway has
        then already cleared it). Other gateway errors propagate.
        """

        if not self._session_store.is_authenticated:
            return False
        try:
            profile = await self._api.get_profile()
        except UnauthorizedError:
            return False
        token = self._session_store.token
        if token is None:
            # Logged out while the probe was in flight.
            return False
        self._session_store.login(profile, token)
        logger.debug("Stored session validated")
        return True
