# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envline get``, ``envline set``, ``envline unset`` commands."""

from __future__ import annotations

import click

from envline.cli import _get_manager, cli, console
from envline.storage import EnvWriteError


@cli.command()
@click.argument("key")
@click.option("--default", default=None, help="Value to print when KEY is not set.")
@click.pass_context
def get(ctx: click.Context, key: str, default: str | None) -> None:
    """Print the value of KEY."""
    value = _get_manager(ctx).get(key, default)
    if value is None:
        raise click.ClickException(f"Key '{key}' not found.")
    click.echo(value)


@cli.command("set")
@click.argument("key")
@click.argument("value")
@click.option("--comment", "-c", default=None, help="Inline comment (use \"\" to remove it).")
@click.option(
    "--comment-above", "-a", "comments_above", multiple=True,
    help="Comment line above the variable (repeatable). A leading '# ' is added when missing.",
)
@click.option("--export/--no-export", "exported", default=None, help="Prefix the line with 'export'.")
@click.pass_context
def set_key(
    ctx: click.Context,
    key: str,
    value: str,
    comment: str | None,
    comments_above: tuple[str, ...],
    exported: bool | None,
) -> None:
    """Create or update KEY, keeping everything else in the file as is."""
    manager = _get_manager(ctx)
    created = not manager.has(key)
    batch = manager.batch()
    batch.set(
        key,
        value,
        inline_comment=comment,
        comments_above=[_as_comment(c) for c in comments_above] or None,
        exported=exported,
    )
    try:
        batch.save()
    except ValueError as e:
        raise click.UsageError(str(e))
    except EnvWriteError as e:
        raise click.ClickException(str(e))
    verb = "Added" if created else "Updated"
    console.print(f"[green]{verb} {key}[/green]")


@cli.command()
@click.argument("key")
@click.pass_context
def unset(ctx: click.Context, key: str) -> None:
    """Remove KEY (first occurrence) from the file."""
    manager = _get_manager(ctx)
    if not manager.has(key):
        raise click.ClickException(f"Key '{key}' not found.")
    try:
        manager.remove(key).save()
    except EnvWriteError as e:
        raise click.ClickException(str(e))
    console.print(f"[green]Removed {key}[/green]")


def _as_comment(text: str) -> str:
    return text if text.lstrip().startswith("#") else f"# {text}"
