# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Storage backends for reading and writing .env text."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path

logger = logging.getLogger(__name__)


class EnvWriteError(OSError):
    """Raised when .env content could not be written."""


class EnvStorage(ABC):
    """Backend for reading/writing the text of a .env file.

    Implementations must return an empty string from :meth:`read` when the
    target does not exist, and raise :class:`EnvWriteError` from
    :meth:`write` instead of failing silently.
    """

    @abstractmethod
    def read(self, path: str | Path) -> str:
        """Return the content at *path*, or ``""`` if it does not exist."""

    @abstractmethod
    def write(self, path: str | Path, content: str) -> None:
        """Replace the content at *path* with *content*."""


class FileStorage(EnvStorage):
    """Read/write .env text on the local filesystem (UTF-8)."""

    def read(self, path: str | Path) -> str:
        p = Path(path)
        if not p.is_file():
            logger.debug("No env file at %s, starting empty", p)
            return ""
        # newline="" keeps \r\n and \r intact for the parser.
        with p.open(encoding="utf-8", newline="") as f:
            return f.read()

    def write(self, path: str | Path, content: str) -> None:
        p = Path(path)
        try:
            p.parent.mkdir(parents=True, exist_ok=True)
            with p.open("w", encoding="utf-8", newline="") as f:
                f.write(content)
        except OSError as e:
            raise EnvWriteError(f"Could not write to .env file: {p}") from e
        logger.debug("Wrote %d bytes to %s", len(content), p)
