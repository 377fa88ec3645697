"""Client configuration.

Responsibility:
- Centralize environment variables (pydantic-settings) away from the CLI.
- Give adapters (HTTP, credential storage) one consistent view of config.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "vault-client"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "vault-client"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "vault-client"
    return Path.home() / ".config" / "vault-client"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str], *, env_path: Path | None = None) -> Path:
    """Write/update variables in the user's global .env."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        try:
            existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError):
            existing = {}

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# vault-client user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Central client configuration.

    Values come from `VAULT_CLIENT_*` environment variables, then the
    project `.env`, then the user-level `.env`.
    """

    model_config = SettingsConfigDict(
        env_prefix="VAULT_CLIENT_",
        extra="ignore",
        case_sensitive=False,
        # Project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_base_url: str = Field(
        default="http://localhost:8000/api/v1",
        min_length=8,
        description="Base address every endpoint path is appended to.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Transport timeout per request (seconds).",
    )
    user_agent: str = Field(
        default="vault-client/0.1",
        min_length=1,
        description="User-Agent sent with every request.",
    )
    credentials_path: Path = Field(
        default_factory=lambda: get_user_config_dir() / "credentials.json",
        description="File holding the persisted session token and user profile.",
    )
    login_path: str = Field(
        default="/login",
        min_length=1,
        description="Unauthenticated entry point of the application.",
    )
    home_path: str = Field(
        default="/",
        min_length=1,
        description="Route authenticated users land on.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level for the `vault_client` loggers.",
    )

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        # Endpoint paths always start with "/".
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unsupported log level: {v}")
        return level
