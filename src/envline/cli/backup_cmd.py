# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envline backups list`` and ``envline backups prune`` commands."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import click
from rich.table import Table

from envline.cli import _get_backups, cli, console


@cli.group()
def backups() -> None:
    """Inspect and prune backups of the .env file."""


@backups.command("list")
@click.pass_context
def list_backups(ctx: click.Context) -> None:
    """List backups of the current file, newest first."""
    name = Path(ctx.obj["path"]).name
    manager = _get_backups(ctx)
    found = manager.list_backups(name)
    if not found:
        console.print(f"[yellow]No backups of {name} in {manager.directory}[/yellow]")
        return
    table = Table(title=f"Backups of {name}")
    table.add_column("File", style="white")
    table.add_column("Modified", style="cyan")
    for backup in found:
        modified = datetime.fromtimestamp(backup.stat().st_mtime).strftime("%Y-%m-%d %H:%M:%S")
        table.add_row(backup.name, modified)
    console.print(table)


@backups.command("prune")
@click.pass_context
def prune_backups(ctx: click.Context) -> None:
    """Delete backups older than the configured retention window."""
    name = Path(ctx.obj["path"]).name
    removed = _get_backups(ctx).prune(name)
    console.print(f"[green]Pruned {len(removed)} backup(s) of {name}[/green]")
