# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Envline -- parse, edit and re-format .env files without losing their layout."""

__version__ = "0.1.0"

from envline.editor import EnvEditor  # noqa: E402
from envline.env_file import parse, parse_env_file  # noqa: E402
from envline.formatter import format_document  # noqa: E402
from envline.lines import Comment, Document, Empty, Variable  # noqa: E402
from envline.manager import EnvManager  # noqa: E402

__all__ = [
    "__version__",
    "Comment",
    "Document",
    "Empty",
    "EnvEditor",
    "EnvManager",
    "Variable",
    "format_document",
    "parse",
    "parse_env_file",
]
