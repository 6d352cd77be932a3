# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envline list`` and ``envline export`` commands."""

from __future__ import annotations

import json

import click
from rich.table import Table

from envline.cli import HAS_YAML, _get_manager, _mask, cli, console
from envline.env_file import values
from envline.formatter import quote_value

if HAS_YAML:
    import yaml


@cli.command("list")
@click.option("--show-values", is_flag=True, help="Show values instead of masking them.")
@click.pass_context
def list_keys(ctx: click.Context, show_values: bool) -> None:
    """List variables in file order."""
    manager = _get_manager(ctx)
    table = Table(title=f"Variables ({manager.path})")
    table.add_column("Key", style="white")
    table.add_column("Value" if show_values else "Value (masked)", style="dim")
    table.add_column("Export", style="cyan")
    table.add_column("Comment", style="dim")
    variables = list(manager.editor.variables())
    if not variables:
        table.add_row("(empty)", "(empty)", "", "")
    for var in variables:
        shown = var.value if show_values else _mask(var.value)
        table.add_row(var.key, shown, "yes" if var.exported else "", var.inline_comment or "")
    console.print(table)


@cli.command("export")
@click.option(
    "--format", "fmt",
    type=click.Choice(["dotenv", "json", "yaml"]),
    default="dotenv",
    help="Output format: dotenv (default, KEY=value without comments), json, yaml.",
)
@click.pass_context
def export(ctx: click.Context, fmt: str) -> None:
    """Print the key/value pairs of the file to stdout (first occurrence wins)."""
    pairs = values(_get_manager(ctx).document)
    if fmt == "json":
        click.echo(json.dumps(pairs, indent=2))
    elif fmt == "yaml":
        if not HAS_YAML:
            raise click.ClickException("PyYAML is not installed. Install with: pip install envline[yaml]")
        click.echo(yaml.safe_dump(pairs, default_flow_style=False, sort_keys=False), nl=False)
    else:
        for key, value in pairs.items():
            click.echo(f"{key}={quote_value(value)}")
