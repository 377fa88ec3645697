"""Navigation guard and the router that hosts it.

`decide` is the pure access rule. `Router` is the host: it resolves a path
to a declared route, asks the guard before every transition and records
where the client ended up.
"""

from __future__ import annotations

import logging
from typing import Iterable

from core.domain.routing import (
    NavigationDecision,
    Route,
    RouteRequirement,
    UnknownRouteError,
    default_routes,
)
from core.services.session_store import SessionStore

logger = logging.getLogger("vault_client.navigation")


def decide(
    requirement: RouteRequirement,
    is_authenticated: bool,
    *,
    login_path: str,
    home_path: str,
) -> NavigationDecision:
    """Decide whether a transition to a route with `requirement` may proceed."""

    if requirement is RouteRequirement.REQUIRES_AUTH and not is_authenticated:
        return NavigationDecision.redirect(login_path)
    if requirement is RouteRequirement.GUEST_ONLY and is_authenticated:
        return NavigationDecision.redirect(home_path)
    return NavigationDecision.allow()


class Router:
    """Route table plus current location, guarded by the session store."""

    def __init__(
        self,
        session_store: SessionStore,
        routes: Iterable[Route] | None = None,
        *,
        login_path: str = "/login",
        home_path: str = "/",
    ) -> None:
        self._session_store = session_store
        self._login_path = login_path
        self._home_path = home_path
        self._routes = tuple(routes) if routes is not None else default_routes(
            login_path=login_path, home_path=home_path
        )
        self._current: str | None = None

    @property
    def current(self) -> str | None:
        return self._current

    @property
    def login_path(self) -> str:
        return self._login_path

    @property
    def home_path(self) -> str:
        return self._home_path

    def resolve(self, path: str) -> tuple[Route, dict[str, str]]:
        for route in self._routes:
            params = route.match(path)
            if params is not None:
                return route, params
        raise UnknownRouteError(path)

    def check(self, path: str) -> NavigationDecision:
        """Evaluate the guard for `path` without moving."""

        route, _ = self.resolve(path)
        return decide(
            route.requirement,
            self._session_store.is_authenticated,
            login_path=self._login_path,
            home_path=self._home_path,
        )

    def navigate(self, path: str) -> str:
        """Move to `path`, or to wherever the guard redirects. Returns the new location."""

        decision = self.check(path)
        target = decision.redirect_to or path
        if target != path:
            logger.debug("Navigation to %s redirected to %s", path, target)
        self._current = target
        return target

    def force(self, path: str) -> None:
        """Move to `path` without consulting the guard."""

        self._current = path
