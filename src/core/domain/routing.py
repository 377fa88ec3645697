"""Route declarations and navigation outcomes.

Kept in the domain layer so the CLI host, the router and the gateway's
unauthorized handler share one vocabulary without import cycles.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum


class RouteRequirement(str, Enum):
    """Access requirement a route declares."""

    REQUIRES_AUTH = "auth"
    GUEST_ONLY = "guest"
    UNRESTRICTED = "any"


@dataclass(frozen=True)
class NavigationDecision:
    """Outcome of the guard: either allow, or redirect somewhere else."""

    redirect_to: str | None = None

    @property
    def allowed(self) -> bool:
        return self.redirect_to is None

    @classmethod
    def allow(cls) -> "NavigationDecision":
        return cls()

    @classmethod
    def redirect(cls, path: str) -> "NavigationDecision":
        return cls(redirect_to=path)


_PARAM_RE = re.compile(r":([A-Za-z_][A-Za-z0-9_]*)")


@dataclass(frozen=True)
class Route:
    """A declared route. `path` may contain `:name` segments."""

    path: str
    name: str
    requirement: RouteRequirement = RouteRequirement.UNRESTRICTED
    _pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        parts = []
        for segment in self.path.strip("/").split("/"):
            if not segment:
                continue
            match = _PARAM_RE.fullmatch(segment)
            if match:
                parts.append(f"(?P<{match.group(1)}>[^/]+)")
            else:
                parts.append(re.escape(segment))
        object.__setattr__(self, "_pattern", re.compile("^/" + "/".join(parts) + "/?$"))

    def match(self, path: str) -> dict[str, str] | None:
        """Return the path parameters if `path` matches this route."""

        found = self._pattern.match(path.split("?", 1)[0])
        if found is None:
            return None
        return found.groupdict()


class UnknownRouteError(LookupError):
    """No declared route matches the requested path."""


def default_routes(*, login_path: str = "/login", home_path: str = "/") -> tuple[Route, ...]:
    """Routes of the vault application."""

    return (
        Route(login_path, "login", RouteRequirement.GUEST_ONLY),
        Route("/register", "register", RouteRequirement.GUEST_ONLY),
        Route(home_path, "home", RouteRequirement.REQUIRES_AUTH),
        Route("/shared/:token", "shared-item", RouteRequirement.REQUIRES_AUTH),
    )
