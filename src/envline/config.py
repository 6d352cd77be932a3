# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

""".envline.toml configuration loading.

Searches upward from cwd for ``.envline.toml``.  Relative paths in the file
are resolved against the directory that holds it.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from envline.backup import DEFAULT_RETENTION_DAYS

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

CONFIG_FILENAME = ".envline.toml"


@dataclass
class BackupConfig:
    """Backup settings from the ``[envline.backup]`` table."""

    enabled: bool = True
    path: str = ".env_backups"
    retention_days: int | None = DEFAULT_RETENTION_DAYS


@dataclass
class EnvlineConfig:
    """Resolved configuration passed to :class:`envline.manager.EnvManager`."""

    env_file: str = ".env"
    backup: BackupConfig = field(default_factory=BackupConfig)
    config_path: Path | None = None

    @property
    def base_dir(self) -> Path:
        """Directory that relative paths are resolved against."""
        if self.config_path is not None:
            return self.config_path.parent
        return Path.cwd()

    def resolve_env_path(self) -> Path:
        return self.base_dir / Path(self.env_file).expanduser()

    def resolve_backup_path(self) -> Path:
        return self.base_dir / Path(self.backup.path).expanduser()


def find_config_file(start: Path | None = None) -> Path | None:
    """Walk upward from *start* (default cwd) looking for ``.envline.toml``."""
    cur = (start or Path.cwd()).resolve()
    while True:
        candidate = cur / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if cur.parent == cur:
            return None
        cur = cur.parent


def load_config(path: Path | None = None) -> EnvlineConfig:
    """Load and return config.  Returns defaults if no file found."""
    if path is None:
        path = find_config_file()
    if path is None:
        return EnvlineConfig()

    raw: dict[str, Any] = tomllib.loads(path.read_text())
    section = raw.get("envline", {})
    backup = section.get("backup", {})

    return EnvlineConfig(
        env_file=section.get("env_file", ".env"),
        backup=BackupConfig(
            enabled=bool(backup.get("enabled", True)),
            path=backup.get("path", ".env_backups"),
            retention_days=backup.get("retention_days", DEFAULT_RETENTION_DAYS),
        ),
        config_path=path,
    )
