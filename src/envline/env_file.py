# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Parse .env text into an ordered list of line records.

Handles:
  - blank lines and ``#`` comments (comments directly above a variable are
    attached to it)
  - ``export KEY=VALUE`` prefix
  - double- and single-quoted values (``\\"``, ``\\'`` and ``\\\\`` unescaped)
  - inline comments after unquoted values and after the closing quote
  - values with ``=`` in them (only first ``=`` splits)
  - unrecognized lines, which are kept verbatim as comments
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import cast

from envline.lines import KEY_PATTERN, Comment, Document, Empty, Line, Variable

logger = logging.getLogger(__name__)

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")

_LINE_RE = re.compile(
    rf"""
    ^\s*
    (?P<export>export\s+)?  # optional export prefix
    (?P<key>{KEY_PATTERN})  # key
    \s*=\s*                 # separator
    (?P<raw>.*)             # raw value (parsed below)
    $
    """,
    re.VERBOSE,
)

# A quoted value ends at the first unescaped matching quote; only whitespace
# and an optional comment may follow it.
_QUOTED_RES = {
    quote: re.compile(
        rf"{quote}(?P<value>(?:\\.|[^\\{quote}])*){quote}\s*(?:#\s*(?P<comment>.*))?\Z"
    )
    for quote in ('"', "'")
}

_UNQUOTED_RE = re.compile(r"(?P<value>(?:\\.?|[^\\#])*)(?:#\s*(?P<comment>.*))?\Z")

_ESCAPE_RE = re.compile(r"""\\([\\"'])""")


def parse(content: str) -> Document:
    """Parse .env *content* into a list of line records.

    Comment lines are buffered until the next line decides what they belong
    to: a variable adopts them as ``comments_above``, anything else flushes
    them as standalone :class:`Comment` records first.
    """
    if content == "":
        return []

    raw_lines = _LINE_BREAK_RE.split(content)
    if raw_lines[-1] == "":
        # A line break terminates the last line; it does not open a new one.
        raw_lines.pop()

    lines: Document = []
    pending: list[str] = []

    for raw_line in raw_lines:
        stripped = raw_line.strip()
        if not stripped:
            _flush(lines, pending)
            lines.append(Empty())
        elif stripped.startswith("#"):
            pending.append(raw_line)
        else:
            variable = _parse_variable(stripped)
            if variable is None:
                logger.debug("Keeping unrecognized line verbatim: %r", raw_line)
                _flush(lines, pending)
                lines.append(Comment(raw_line))
            else:
                variable.comments_above = pending
                pending = []
                lines.append(variable)

    _flush(lines, pending)

    # Blank lines after the last content are not kept; formatting would drop them.
    while lines and isinstance(lines[-1], Empty):
        lines.pop()
    if not lines:
        return [Empty()]
    return lines


def _flush(lines: list[Line], pending: list[str]) -> None:
    lines.extend(Comment(text) for text in pending)
    pending.clear()


def _parse_variable(line: str) -> Variable | None:
    """Parse a stripped ``[export ]KEY=value`` line, or return ``None``."""
    m = _LINE_RE.match(line)
    if m is None:
        return None
    value, comment = _parse_value(m.group("raw"))
    return Variable(
        key=m.group("key"),
        value=value,
        inline_comment=comment,
        exported=m.group("export") is not None,
    )


def _parse_value(raw: str) -> tuple[str, str | None]:
    """Split a raw value into ``(value, inline_comment)``.

    Tries a double-quoted value, then a single-quoted one, then falls back to
    an unquoted value that runs up to the first unescaped ``#``.
    """
    for quote, pattern in _QUOTED_RES.items():
        if not raw.startswith(quote):
            continue
        m = pattern.match(raw)
        if m is not None:
            return _ESCAPE_RE.sub(r"\1", m.group("value")), _clean_comment(m.group("comment"))

    # Every string matches the unquoted form.
    m = cast("re.Match[str]", _UNQUOTED_RE.match(raw))
    return m.group("value").rstrip(), _clean_comment(m.group("comment"))


def _clean_comment(comment: str | None) -> str | None:
    if comment is None:
        return None
    return comment.strip() or None


def values(document: Document) -> dict[str, str]:
    """Return the key/value view of *document* in file order.

    When a key appears more than once the first occurrence wins, matching
    :meth:`envline.editor.EnvEditor.get`.
    """
    result: dict[str, str] = {}
    for line in document:
        if isinstance(line, Variable) and line.key not in result:
            result[line.key] = line.value
    return result


def parse_env_file(path: str | Path) -> dict[str, str]:
    """Read a .env file and return an ordered dict of key-value pairs."""
    return values(parse(Path(path).read_text(encoding="utf-8")))
