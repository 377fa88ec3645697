"""vault-client command line.

Every command builds one `VaultClient`, runs a single coroutine with
`asyncio.run` and renders the result with Rich. Gateway failures are shown
as a red message and exit code 1.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, TypeVar

import typer
from rich.console import Console
from rich.logging import RichHandler

from cli import doctor
from cli.ui_components import build_session_panel, build_vault_table, print_banner
from core.app import VaultClient
from core.config import AppSettings
from core.domain.errors import GatewayError
from core.domain.models import VaultItemInput

T = TypeVar("T")

app = typer.Typer(no_args_is_help=True, help="Session-aware access to your password vault.")
vault_app = typer.Typer(no_args_is_help=True, help="List and edit vault entries.")
app.add_typer(vault_app, name="vault")
app.add_typer(doctor.app, name="doctor")

_console = Console()


def configure_logging(level: str) -> None:
    """Route the `vault_client.*` loggers to stderr through Rich."""

    logger = logging.getLogger("vault_client")
    logger.setLevel(level)
    if not logger.handlers:
        handler = RichHandler(console=Console(stderr=True), show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)


def _run(action: Callable[[VaultClient], Awaitable[T]]) -> T:
    async def runner() -> T:
        async with VaultClient() as client:
            return await action(client)

    try:
        return asyncio.run(runner())
    except GatewayError as exc:
        _console.print(f"[red]Error:[/red] {exc.message}")
        raise typer.Exit(code=1) from exc


def _require_login(client: VaultClient) -> None:
    """Guard a command behind the home route, like the app's router does."""

    location = client.router.navigate(client.router.home_path)
    if location != client.router.home_path:
        _console.print("[yellow]Not logged in.[/yellow] Run `vault-client login` first.")
        raise typer.Exit(code=1)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging to stderr."),
) -> None:
    configure_logging("DEBUG" if verbose else AppSettings().log_level)


@app.command()
def login(
    email: str | None = typer.Option(None, "--email", "-e", help="Account e-mail."),
    master_password: str | None = typer.Option(None, "--master-password", help="Master password."),
) -> None:
    """Log in and store the session token."""

    async def action(client: VaultClient) -> Any:
        location = client.router.navigate(client.router.login_path)
        if location != client.router.login_path:
            _console.print("[yellow]Already logged in.[/yellow] Run `vault-client logout` first.")
            raise typer.Exit(code=1)
        await client.auth.login(
            email or typer.prompt("Email"),
            master_password or typer.prompt("Master password", hide_input=True),
        )
        client.router.navigate(client.router.home_path)
        return client.session_store.session

    session = _run(action)
    print_banner(_console)
    _console.print(build_session_panel(session))


@app.command()
def register(
    email: str = typer.Option(..., "--email", "-e", prompt=True, help="Account e-mail."),
    master_password: str = typer.Option(
        ..., prompt=True, hide_input=True, confirmation_prompt=True
    ),
) -> None:
    """Create an account."""

    async def action(client: VaultClient) -> Any:
        return await client.auth.register(email, master_password)

    _run(action)
    _console.print("[green]Account created.[/green] You can now run `vault-client login`.")


@app.command()
def logout() -> None:
    """Forget the stored session."""

    async def action(client: VaultClient) -> None:
        client.auth.logout()

    _run(action)
    _console.print("[green]Logged out.[/green]")


@app.command()
def status(
    check: bool = typer.Option(False, "--check", help="Validate the token against the server."),
) -> None:
    """Show the stored session."""

    async def action(client: VaultClient) -> Any:
        if check:
            await client.auth.validate_session()
        return client.session_store.session

    _console.print(build_session_panel(_run(action)))


@app.command(name="generate-password")
def generate_password(
    length: int = typer.Option(20, "--length", "-l", min=8, max=128),
    special: bool = typer.Option(True, "--special/--no-special", help="Include symbols."),
) -> None:
    """Ask the server for a random password."""

    async def action(client: VaultClient) -> str:
        _require_login(client)
        return await client.vault.generate_password(length=length, use_special=special)

    _console.print(_run(action), highlight=False)


@vault_app.command("list")
def vault_list() -> None:
    """List vault entries."""

    async def action(client: VaultClient) -> Any:
        _require_login(client)
        await client.vault.refresh()
        return client.vault_cache.state

    state = _run(action)
    if state.error:
        _console.print(f"[red]Error:[/red] {state.error}")
        raise typer.Exit(code=1)
    _console.print(build_vault_table(state.items))


@vault_app.command("add")
def vault_add(
    title: str = typer.Option(..., "--title", "-t", prompt=True),
    website: str | None = typer.Option(None, "--website"),
    username: str | None = typer.Option(None, "--username", "-u"),
    folder: str | None = typer.Option(None, "--folder"),
    notes: str | None = typer.Option(None, "--notes"),
    generate: bool = typer.Option(False, "--generate", help="Use a server-generated password."),
) -> None:
    """Store a new entry."""

    password = None if generate else typer.prompt("Password", hide_input=True)
    master_password = typer.prompt("Master password", hide_input=True)

    async def action(client: VaultClient) -> Any:
        _require_login(client)
        secret = password or await client.vault.generate_password()
        return await client.vault.create(
            VaultItemInput(
                title=title,
                password=secret,
                master_password=master_password,
                website=website,
                username=username,
                folder=folder,
                notes=notes,
            )
        )

    item = _run(action)
    _console.print(f"[green]Stored[/green] {item.title} ({item.id})")


@vault_app.command("show")
def vault_show(item_id: str = typer.Argument(..., help="Entry id.")) -> None:
    """Reveal the secret of one entry."""

    master_password = typer.prompt("Master password", hide_input=True)

    async def action(client: VaultClient) -> Any:
        _require_login(client)
        return await client.vault.reveal(item_id, master_password)

    secret = _run(action)
    _console.print(f"[cyan]{secret.title or item_id}[/cyan]")
    _console.print(secret.password, highlight=False)
    if secret.notes:
        _console.print(secret.notes, style="dim")


@vault_app.command("remove")
def vault_remove(
    item_id: str = typer.Argument(..., help="Entry id."),
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation."),
) -> None:
    """Delete an entry."""

    if not yes:
        typer.confirm(f"Delete {item_id}?", abort=True)

    async def action(client: VaultClient) -> None:
        _require_login(client)
        await client.vault.delete(item_id)

    _run(action)
    _console.print(f"[green]Deleted[/green] {item_id}")


def run() -> None:
    app()
