# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envline format`` command."""

from __future__ import annotations

import click

from envline.cli import _get_manager, cli, console
from envline.storage import EnvWriteError


@cli.command("format")
@click.option("--check", is_flag=True, help="Exit with status 1 if the file is not normalized.")
@click.option("--write", "-w", is_flag=True, help="Rewrite the file in normalized form.")
@click.pass_context
def format_file(ctx: click.Context, check: bool, write: bool) -> None:
    """Print the file re-rendered with the standard quoting and spacing rules."""
    manager = _get_manager(ctx)
    current = manager.read_raw()
    normalized = manager.content
    if check:
        if current != normalized:
            console.print(f"[yellow]Would be reformatted: {manager.path}[/yellow]")
            ctx.exit(1)
        console.print(f"[green]Already formatted: {manager.path}[/green]")
        return
    if write:
        if current == normalized:
            console.print(f"[green]Unchanged: {manager.path}[/green]")
            return
        try:
            manager.save()
        except EnvWriteError as e:
            raise click.ClickException(str(e))
        console.print(f"[green]Reformatted {manager.path}[/green]")
        return
    click.echo(normalized, nl=False)
