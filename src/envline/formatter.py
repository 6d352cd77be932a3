# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Serialize line records back into .env text."""

from __future__ import annotations

import re

from envline.lines import Comment, Document, Empty, Variable

_QUOTE_TRIGGERS = frozenset(" #=\"'")
_RESERVED_WORDS = frozenset({"true", "false", "null"})

# A backslash the parser would read as an escape: before a backslash or a
# quote, or closing the value.
_AMBIGUOUS_BACKSLASH_RE = re.compile(r"""\\(?=[\\"']|\Z)""")


def quote_value(value: str) -> str:
    """Format a value for .env: double-quote it if needed.

    Empty values, values containing a space, ``#``, ``=`` or a quote, and the
    words ``true`` / ``false`` / ``null`` (any case) are quoted so they read
    back as the same plain string.

    Inside quotes ``"`` becomes ``\\"``.  A backslash is doubled only where
    the parser would otherwise take it as an escape; sequences such as
    ``\\n`` are written unchanged.
    """
    if (
        not value
        or any(ch in _QUOTE_TRIGGERS for ch in value)
        or value.lower() in _RESERVED_WORDS
    ):
        escaped = _AMBIGUOUS_BACKSLASH_RE.sub(r"\\\\", value).replace('"', '\\"')
        return f'"{escaped}"'
    return value


def format_variable(line: Variable) -> str:
    """Render a variable, its comments above, and its inline comment."""
    out = "".join(f"{comment}\n" for comment in line.comments_above)
    prefix = "export " if line.exported else ""
    out += f"{prefix}{line.key}={quote_value(line.value)}"
    if line.inline_comment:
        out += f" # {line.inline_comment}"
    return out + "\n"


def format_document(document: Document) -> str:
    """Build .env text from *document*.

    Non-empty output always ends with exactly one line break.
    """
    chunks: list[str] = []
    for line in document:
        if isinstance(line, Empty):
            chunks.append("\n")
        elif isinstance(line, Comment):
            chunks.append(f"{line.text}\n")
        elif isinstance(line, Variable):
            chunks.append(format_variable(line))
        else:
            raise TypeError(f"Not a line record: {line!r}")
    content = "".join(chunks)
    return content.rstrip("\n") + "\n" if content else ""
