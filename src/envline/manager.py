# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""EnvManager -- load, edit and save one .env file.

Ties together storage, the parser, the editor, the formatter and backups::

    manager = EnvManager(load_config())
    manager.set("APP_ENV", "production").comment_line("set by deploy").save()

    batch = manager.batch()
    batch.set("DB_HOST", "db.internal").comments_above(["# Database"])
    batch.set("DB_PORT", "5432")
    batch.save()
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from pathlib import Path

from envline.backup import BackupManager
from envline.config import EnvlineConfig
from envline.editor import EnvEditor
from envline.env_file import parse
from envline.formatter import format_document
from envline.lines import Document
from envline.storage import EnvStorage, FileStorage

logger = logging.getLogger(__name__)


class BatchUsageError(RuntimeError):
    """A batch method was called out of order (e.g. a comment before any ``set``)."""


class EnvManager:
    """Coordinate read -> parse -> edit -> format -> backup -> write for one file.

    Parameters
    ----------
    config : EnvlineConfig, optional
        Resolved configuration. Defaults to :class:`EnvlineConfig` defaults.
    path : str or Path, optional
        Explicit .env path; overrides ``config.env_file``.
    storage : EnvStorage, optional
        Storage backend. Defaults to :class:`FileStorage`.
    backups : BackupManager, optional
        Backup policy. Defaults to one built from ``config`` when
        ``config.backup.enabled`` is true, otherwise backups are off.
    """

    def __init__(
        self,
        config: EnvlineConfig | None = None,
        *,
        path: str | Path | None = None,
        storage: EnvStorage | None = None,
        backups: BackupManager | None = None,
    ) -> None:
        self.config = config or EnvlineConfig()
        self.path = Path(path) if path is not None else self.config.resolve_env_path()
        self._storage = storage or FileStorage()
        if backups is None and self.config.backup.enabled:
            backups = BackupManager.from_config(self.config)
        self._backups = backups
        self._editor = EnvEditor()
        self.load()

    @property
    def backups_enabled(self) -> bool:
        return self._backups is not None

    @property
    def editor(self) -> EnvEditor:
        return self._editor

    @property
    def document(self) -> Document:
        """The live list of line records being edited."""
        return self._editor.lines

    @property
    def content(self) -> str:
        """The current document formatted as .env text."""
        return format_document(self._editor.lines)

    def load(self) -> EnvManager:
        """(Re)read the file and replace the in-memory document."""
        self._editor.lines = parse(self.read_raw())
        logger.debug("Loaded %d line record(s) from %s", len(self._editor.lines), self.path)
        return self

    def read_raw(self) -> str:
        """Return the file text as stored right now, without parsing it."""
        return self._storage.read(self.path)

    def has(self, key: str) -> bool:
        return self._editor.has(key)

    def get(self, key: str, default: str | None = None) -> str | None:
        return self._editor.get(key, default)

    def set(self, key: str, value: str) -> VariableSetter:
        """Set *key* to *value* now and return a fluent setter for its comments."""
        return VariableSetter(self, key, value)

    def batch(self) -> EnvBatch:
        """Start a batch of pending ``set`` operations."""
        return EnvBatch(self)

    def remove(self, key: str) -> EnvManager:
        self._editor.remove(key)
        return self

    def save(self) -> Path | None:
        """Format the document and write it, backing up the old file first.

        Returns the backup location, or ``None`` if no backup was made.
        Raises :class:`envline.storage.EnvWriteError` if the write fails.
        """
        return self._write(self.content)

    def write_content(self, content: str) -> Path | None:
        """Write raw *content* to the file (with backup) and reload from it."""
        backup = self._write(content)
        self.load()
        return backup

    def _write(self, content: str) -> Path | None:
        backup = self._backups.create(self.path) if self._backups is not None else None
        self._storage.write(self.path, content)
        logger.info("Saved %s", self.path)
        return backup


class VariableSetter:
    """Fluent follow-up for :meth:`EnvManager.set`.

    The value is applied as soon as the setter is created; each chained call
    updates the same variable in place.  Call :meth:`save` to write the file.
    """

    def __init__(self, manager: EnvManager, key: str, value: str) -> None:
        self._manager = manager
        self.key = key
        self.value = value
        manager.editor.set(key, value)

    def comment_line(self, text: str | None) -> VariableSetter:
        """Set the inline comment; ``None`` or ``""`` removes it."""
        self._manager.editor.set(self.key, self.value, inline_comment=text or "")
        return self

    def comments_above(self, lines: list[str] | None) -> VariableSetter:
        """Replace the comment block above the variable; ``None`` removes it."""
        self._manager.editor.set(self.key, self.value, comments_above=list(lines or []))
        return self

    def export(self, flag: bool = True) -> VariableSetter:
        self._manager.editor.set(self.key, self.value, exported=flag)
        return self

    def save(self) -> Path | None:
        return self._manager.save()


@dataclass
class PendingSet:
    """One queued ``set``; ``None`` fields leave the existing value unchanged."""

    key: str
    value: str
    inline_comment: str | None = None
    comments_above: list[str] | None = None
    exported: bool | None = None


class EnvBatch:
    """Collect several ``set`` operations and apply them together.

    Comment and export modifiers apply to the most recently added operation.
    Nothing touches the document until :meth:`apply` or :meth:`save`.
    """

    def __init__(self, manager: EnvManager) -> None:
        self._manager = manager
        self._operations: list[PendingSet] = []

    @property
    def pending(self) -> list[PendingSet]:
        """A copy of the queued operations, in order."""
        return copy.deepcopy(self._operations)

    def set(
        self,
        key: str,
        value: str,
        *,
        inline_comment: str | None = None,
        comments_above: list[str] | None = None,
        exported: bool | None = None,
    ) -> EnvBatch:
        self._operations.append(
            PendingSet(
                key=key,
                value=value,
                inline_comment=inline_comment,
                comments_above=list(comments_above) if comments_above is not None else None,
                exported=exported,
            )
        )
        return self

    def comment_line(self, text: str | None) -> EnvBatch:
        """Set the inline comment of the last queued variable; ``None`` removes it."""
        self._current("comment_line").inline_comment = text or ""
        return self

    def comments_above(self, lines: list[str] | None) -> EnvBatch:
        self._current("comments_above").comments_above = list(lines or [])
        return self

    def export(self, flag: bool = True) -> EnvBatch:
        self._current("export").exported = flag
        return self

    def apply(self) -> None:
        """Apply every queued operation to the document, in order, and clear the queue."""
        editor = self._manager.editor
        for op in self._operations:
            editor.set(op.key, op.value, op.inline_comment, op.comments_above, op.exported)
        logger.debug("Applied %d batched set(s)", len(self._operations))
        self._operations = []

    def save(self) -> Path | None:
        self.apply()
        return self._manager.save()

    def _current(self, method: str) -> PendingSet:
        if not self._operations:
            raise BatchUsageError(f"set() must be called before {method}().")
        return self._operations[-1]
