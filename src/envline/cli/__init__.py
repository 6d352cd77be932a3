# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Envline CLI -- edit .env files without losing comments or layout.

The CLI is split into per-command modules under this package.  The ``cli``
click group and shared helpers (``console``, ``_get_manager``, ``_mask``)
live here so every command module can import them.
"""

from __future__ import annotations

import dataclasses
import os

import click
from rich.console import Console

from envline import __version__
from envline.backup import BackupManager
from envline.config import EnvlineConfig, load_config
from envline.logging_setup import configure_logging
from envline.manager import EnvManager

try:
    import yaml
    HAS_YAML = True
except ImportError:
    HAS_YAML = False

console = Console(stderr=True)


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

def _get_config(ctx: click.Context) -> EnvlineConfig:
    return ctx.obj["config"]


def _get_manager(ctx: click.Context) -> EnvManager:
    """Return a manager for the file selected by --file / ENVLINE_FILE / config."""
    return EnvManager(_get_config(ctx), path=ctx.obj["path"])


def _get_backups(ctx: click.Context) -> BackupManager:
    return BackupManager.from_config(_get_config(ctx))


def _mask(value: str) -> str:
    if len(value) <= 6:
        return "****"
    return value[:3] + "****" + value[-3:]


# ---------------------------------------------------------------------------
# Top-level click group
# ---------------------------------------------------------------------------

@click.group()
@click.option("--file", "-f", "path", default=None, help="Path to the .env file (default: ENVLINE_FILE, config, else .env).")
@click.option("--no-backup", is_flag=True, help="Do not back up the file before writing.")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output.")
@click.version_option(__version__)
@click.pass_context
def cli(ctx: click.Context, path: str | None, no_backup: bool, verbose: bool) -> None:
    """Edit .env files while keeping comments, blank lines and quoting intact."""
    configure_logging(verbose)
    cfg = load_config()
    if no_backup or os.environ.get("ENVLINE_NO_BACKUP"):
        cfg = dataclasses.replace(cfg, backup=dataclasses.replace(cfg.backup, enabled=False))
    ctx.ensure_object(dict)
    ctx.obj["config"] = cfg
    ctx.obj["path"] = path or os.environ.get("ENVLINE_FILE") or cfg.resolve_env_path()
    ctx.obj["verbose"] = verbose


# ---------------------------------------------------------------------------
# Register all command modules (import triggers @cli.command registration)
# ---------------------------------------------------------------------------

from envline.cli import (  # noqa: E402, F401
    backup_cmd,
    crud_cmd,
    format_cmd,
    list_cmd,
)
