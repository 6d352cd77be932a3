# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging configuration for the envline CLI."""

from __future__ import annotations

import logging
import os
from typing import Final

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["configure_logging"]

_LOG_LEVEL_ENV: Final[str] = "ENVLINE_LOG_LEVEL"
_DEFAULT_LEVEL_NAME: Final[str] = "WARNING"

_console = Console(stderr=True)


def _resolve_level(verbose: bool) -> int:
    if verbose:
        return logging.DEBUG
    level_name = os.getenv(_LOG_LEVEL_ENV, _DEFAULT_LEVEL_NAME).upper()
    level = getattr(logging, level_name, logging.WARNING)
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(verbose: bool = False) -> None:
    """Attach one Rich handler to the root logger and set the level.

    Safe to call repeatedly; the handler is only added once.
    """
    root_logger = logging.getLogger()
    managed = [h for h in root_logger.handlers if getattr(h, "_envline_managed", False)]
    if not managed:
        handler = RichHandler(console=_console, rich_tracebacks=True, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        handler._envline_managed = True  # type: ignore[attr-defined]
        root_logger.addHandler(handler)
    root_logger.setLevel(_resolve_level(verbose))
