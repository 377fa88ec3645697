"""Session store: single source of truth for "is the user logged in".

Two states, `Anonymous` and `Authenticated(token, user)`, represented by an
immutable `Session` snapshot. The store mirrors every transition to the
credential store and performs no network I/O.
"""

from __future__ import annotations

import json
import logging

from pydantic import ValidationError

from core.domain.models import Session, UserProfile
from core.interfaces.credential_store import TOKEN_KEY, USER_KEY, CredentialStore
from core.services.observable import Observable

logger = logging.getLogger("vault_client.session")


def _load_user(raw: str | None) -> UserProfile | None:
    if raw is None:
        return None
    try:
        return UserProfile.model_validate(json.loads(raw))
    except (json.JSONDecodeError, ValidationError) as exc:
        logger.warning("Ignoring unreadable persisted user profile: %s", type(exc).__name__)
        return None


class SessionStore(Observable[Session]):
    """Holds the current `Session` and persists it.

    Readers use `session` / `is_authenticated` / `token` without locking;
    each transition replaces the snapshot in one assignment.
    """

    def __init__(self, credentials: CredentialStore) -> None:
        super().__init__()
        self._credentials = credentials
        self._session = self._restore()

    def _restore(self) -> Session:
        token = self._credentials.get(TOKEN_KEY)
        if not token:
            return Session.anonymous()
        user = _load_user(self._credentials.get(USER_KEY))
        logger.debug("Restored persisted session (user present: %s)", user is not None)
        return Session.authenticated(token, user)

    @property
    def session(self) -> Session:
        return self._session

    @property
    def is_authenticated(self) -> bool:
        return self._session.is_authenticated

    @property
    def token(self) -> str | None:
        return self._session.token

    @property
    def user(self) -> UserProfile | None:
        return self._session.user

    def login(self, user: UserProfile, token: str) -> Session:
        """Move to `Authenticated(token, user)` from any state."""

        session = Session.authenticated(token, user)
        self._credentials.set_many(
            {
                TOKEN_KEY: token,
                USER_KEY: user.model_dump_json(),
            }
        )
        self._session = session
        logger.info("Session authenticated")
        self._publish(session)
        return session

    def logout(self) -> Session:
        """Move to `Anonymous` from any state. Safe to call repeatedly."""

        self._credentials.delete_many((TOKEN_KEY, USER_KEY))
        if not self._session.is_authenticated:
            return self._session
        self._session = Session.anonymous()
        logger.info("Session cleared")
        self._publish(self._session)
        return self._session
