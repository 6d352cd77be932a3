# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Timestamped .env backups with a retention window.

Backups are written as ``<name>.backup_<YYYYmmdd_HHMMSS>_<random>`` in the
backup directory.  Every new backup prunes copies of the same file that are
older than ``retention_days``.
"""

from __future__ import annotations

import logging
import secrets
import shutil
import string
import time
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from envline.config import EnvlineConfig

logger = logging.getLogger(__name__)

DEFAULT_RETENTION_DAYS: int = 7

_BACKUP_MARKER = ".backup_"
_RANDOM_ALPHABET = string.ascii_letters + string.digits


class BackupManager:
    """Create and prune backups of .env files in one directory."""

    def __init__(self, directory: str | Path, retention_days: int | None = DEFAULT_RETENTION_DAYS) -> None:
        self.directory = Path(directory)
        self.retention_days = retention_days

    @classmethod
    def from_config(cls, config: EnvlineConfig) -> BackupManager:
        return cls(config.resolve_backup_path(), config.backup.retention_days)

    def create(self, path: str | Path) -> Path | None:
        """Copy *path* into the backup directory and prune old copies.

        Returns the backup location, or ``None`` when *path* does not exist.
        """
        source = Path(path)
        if not source.is_file():
            return None
        self.directory.mkdir(parents=True, exist_ok=True)
        target = self.directory / self._backup_name(source.name)
        shutil.copy2(source, target)
        logger.info("Backed up %s to %s", source, target)
        self.prune(source.name)
        return target

    def prune(self, original_filename: str) -> list[Path]:
        """Delete backups of *original_filename* older than the retention window."""
        if not self.directory.is_dir() or not self.retention_days or self.retention_days <= 0:
            return []
        cutoff = time.time() - self.retention_days * 86400
        removed: list[Path] = []
        for backup in self._matching(original_filename):
            if backup.stat().st_mtime < cutoff:
                backup.unlink()
                removed.append(backup)
        if removed:
            logger.info("Pruned %d old backup(s) of %s", len(removed), original_filename)
        return removed

    def list_backups(self, original_filename: str) -> list[Path]:
        """Return backups of *original_filename*, newest first."""
        if not self.directory.is_dir():
            return []
        return sorted(self._matching(original_filename), key=lambda p: p.stat().st_mtime, reverse=True)

    def _matching(self, original_filename: str) -> list[Path]:
        prefix = original_filename + _BACKUP_MARKER
        return [p for p in self.directory.iterdir() if p.is_file() and p.name.startswith(prefix)]

    @staticmethod
    def _backup_name(filename: str) -> str:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        suffix = "".join(secrets.choice(_RANDOM_ALPHABET) for _ in range(8))
        return f"{filename}{_BACKUP_MARKER}{timestamp}_{suffix}"
