"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.app import VaultClient
from core.config import AppSettings, write_user_env_vars
from core.domain.errors import GatewayError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get("/vault")
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc) or type(exc).__name__


async def _check_session(settings: AppSettings) -> tuple[str, str]:
    async with VaultClient(settings) as client:
        if not client.session_store.is_authenticated:
            return "OPTIONAL", "No stored session -> run `vault-client login`"
        try:
            valid = await client.auth.validate_session()
        except GatewayError as exc:
            return "FAIL", exc.message
    if valid:
        return "OK", "Stored token accepted by the server"
    return "FAIL", "Stored token rejected; session cleared"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="vault-client Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("API base_url", "OK", settings.api_base_url)
    table.add_row("Credentials file", "OK", str(settings.credentials_path))

    # Connectivity (best-effort)
    ok_http, detail_http = asyncio.run(_check_http(settings))
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    if ok_http:
        status, detail = asyncio.run(_check_session(settings))
        table.add_row("Session", status, detail)

    _console.print(table)

    if not ok_http:
        _console.print(
            "\n[yellow]Note:[/yellow] set VAULT_CLIENT_API_BASE_URL or run `vault-client doctor configure`."
        )


@app.command()
def configure() -> None:
    """Interactive setup (stores config in the user config .env)."""

    current = AppSettings()
    base_url = typer.prompt("API base URL", default=current.api_base_url, show_default=True).strip()
    timeout = typer.prompt(
        "HTTP timeout (seconds)", default=str(current.http_timeout_seconds), show_default=True
    ).strip()

    if not base_url:
        raise typer.BadParameter("base_url is required")

    env_path = write_user_env_vars(
        {
            "VAULT_CLIENT_API_BASE_URL": base_url,
            "VAULT_CLIENT_HTTP_TIMEOUT_SECONDS": timeout,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
