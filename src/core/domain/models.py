"""Domain models (Pydantic v2).

These models describe *what* the client holds (session, vault items,
cache state), not *how* it is fetched. They carry no HTTP or storage
knowledge.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict


class UserProfile(BaseModel):
    """Server-owned profile of the logged-in user.

    The client treats it as an opaque, immutable snapshot: unknown fields
    are kept as-is and the whole object is replaced on each login.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    id: str | None = Field(
        default=None,
        description="Server identifier of the user.",
    )
    email: str | None = Field(
        default=None,
        description="Login e-mail of the user.",
    )
    two_factor_enabled: bool = Field(
        default=False,
        description="Whether the account requires a second factor.",
    )


class Session(BaseModel):
    """Authenticated identity currently held by the client.

    `is_authenticated` always mirrors the presence of `token`, and `user`
    can only be set on an authenticated session.
    """

    model_config = ConfigDict(frozen=True)

    is_authenticated: bool = Field(
        default=False,
        description="True iff a session token is held.",
    )
    token: str | None = Field(
        default=None,
        min_length=1,
        description="Opaque bearer token issued by the server.",
    )
    user: UserProfile | None = Field(
        default=None,
        description="Profile snapshot taken at login time.",
    )

    @model_validator(mode="after")
    def check_consistency(self) -> "Session":
        if self.is_authenticated != (self.token is not None):
            raise ValueError("is_authenticated must match the presence of a token")
        if self.user is not None and not self.is_authenticated:
            raise ValueError("an anonymous session cannot carry a user")
        return self

    @classmethod
    def anonymous(cls) -> "Session":
        return cls()

    @classmethod
    def authenticated(cls, token: str, user: UserProfile | None) -> "Session":
        return cls(is_authenticated=True, token=token, user=user)


class VaultItem(BaseModel):
    """One entry of the user's vault as listed by the server.

    Identity is `id`. Secret material (password, notes) is never part of the
    listing; it is only returned by the per-item read endpoint.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    id: str = Field(
        ...,
        min_length=1,
        description="Unique, server-assigned identifier.",
    )
    title: str = Field(
        default="",
        description="Display name of the entry.",
    )
    website: str | None = Field(default=None)
    username: str | None = Field(default=None)
    folder: str | None = Field(default=None)
    favorite: bool = Field(default=False)
    created_at: datetime | None = Field(default=None)
    updated_at: datetime | None = Field(default=None)


class CollectionState(BaseModel):
    """Snapshot of the client-side vault mirror."""

    model_config = ConfigDict(frozen=True)

    items: tuple[VaultItem, ...] = Field(
        default=(),
        description="Materialized items, most recently added first.",
    )
    loading: bool = Field(
        default=False,
        description="True only while a refresh is in flight.",
    )
    error: str | None = Field(
        default=None,
        description="Failure message of the last refresh, if it failed.",
    )


class Credentials(BaseModel):
    """Login/registration payload."""

    email: str = Field(..., min_length=3)
    master_password: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    access_token: str = Field(..., min_length=1)
    token_type: str = Field(default="Bearer")
    user: UserProfile = Field(default_factory=UserProfile)


class VaultItemInput(BaseModel):
    """Body of `POST /vault` and `PUT /vault/{id}`.

    Updates replace the entry wholesale, so both carry the full record.
    """

    title: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    master_password: str = Field(..., min_length=1)
    website: str | None = None
    username: str | None = None
    notes: str | None = None
    folder: str | None = None


class VaultSecret(BaseModel):
    """Decrypted view of one entry (`GET /vault/{id}`)."""

    model_config = ConfigDict(extra="allow")

    id: str | None = None
    title: str | None = None
    password: str = Field(..., description="Decrypted secret.")
    notes: str | None = None


class GeneratedPassword(BaseModel):
    password: str = Field(..., min_length=1)

