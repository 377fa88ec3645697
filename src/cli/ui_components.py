"""Rich UI components for the CLI.

Keeps command logic apart from rendering details so tables and panels can
be reused across commands.
"""

from __future__ import annotations

from typing import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import Session, VaultItem


def print_banner(console: Console) -> None:
    title = Text("vault-client", style="bold cyan")
    subtitle = Text("Session-aware access to your password vault", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_vault_table(items: Iterable[VaultItem]) -> Table:
    """Table of vault entries. Secrets are never part of a listing."""

    table = Table(title="Vault")
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Title", style="cyan")
    table.add_column("Website", style="magenta")
    table.add_column("Username", style="white")
    table.add_column("Folder", style="green")
    table.add_column("★", justify="center")
    for item in items:
        table.add_row(
            item.id,
            item.title,
            item.website or "",
            item.username or "",
            item.folder or "",
            "★" if item.favorite else "",
        )
    return table


def build_session_panel(session: Session) -> Panel:
    body = Text()
    if not session.is_authenticated:
        body.append("Not logged in", style="yellow")
        return Panel(body, title="Session", border_style="yellow")

    user = session.user
    body.append("Logged in", style="bold green")
    if user is not None:
        if user.email:
            body.append(f"\nUser: {user.email}")
        if user.id:
            body.append(f"\nID: {user.id}", style="dim")
        body.append(f"\n2FA: {'enabled' if user.two_factor_enabled else 'disabled'}")
    return Panel(body, title="Session", border_style="green")
