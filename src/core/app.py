"""Composition root.

Builds the per-process services once and wires them together: credential
store → session store → router / gateway → endpoints → vault cache. Hosts
(the CLI, tests) hold the resulting `VaultClient` and pass its parts around
instead of reaching for module-level globals.
"""

from __future__ import annotations

import httpx

from adapters.credential_store import FileCredentialStore
from adapters.endpoints import AuthApi, HealthApi, ImportApi, SharingApi, TwoFactorApi, VaultApi
from adapters.gateway import RequestGateway
from core.config import AppSettings
from core.domain.models import Session
from core.interfaces.credential_store import CredentialStore
from core.services.auth_service import AuthService
from core.services.navigation import Router
from core.services.session_store import SessionStore
from core.services.vault_cache import VaultCache
from core.services.vault_service import VaultService


class VaultClient:
    """Every service of one running client, wired together."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        credentials: CredentialStore | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings or AppSettings()
        self.credentials = credentials or FileCredentialStore(self.settings.credentials_path)
        self.session_store = SessionStore(self.credentials)
        self.router = Router(
            self.session_store,
            login_path=self.settings.login_path,
            home_path=self.settings.home_path,
        )
        self.gateway = RequestGateway(
            self.session_store,
            settings=self.settings,
            on_session_invalidated=self._on_session_invalidated,
            transport=transport,
        )

        self.auth_api = AuthApi(self.gateway)
        self.vault_api = VaultApi(self.gateway)
        self.health_api = HealthApi(self.gateway)
        self.sharing_api = SharingApi(self.gateway)
        self.twofa_api = TwoFactorApi(self.gateway)
        self.import_api = ImportApi(self.gateway)

        self.vault_cache = VaultCache(self.vault_api.list_items)
        self.auth = AuthService(self.auth_api, self.session_store)
        self.vault = VaultService(self.vault_api, self.vault_cache)

        self.session_store.subscribe(self._on_session_changed)

    def _on_session_invalidated(self) -> None:
        self.router.force(self.router.login_path)

    def _on_session_changed(self, session: Session) -> None:
        # The vault mirror is empty whenever the session is anonymous.
        if not session.is_authenticated:
            self.vault_cache.clear()

    async def __aenter__(self) -> "VaultClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.gateway.aclose()
