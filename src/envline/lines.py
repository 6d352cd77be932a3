# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Line records that make up a parsed .env document.

A document is a plain ``list`` of records, in file order.  Each record is one
of three variants:

  - :class:`Empty` -- a blank line
  - :class:`Comment` -- a standalone comment (or an unparseable line kept verbatim)
  - :class:`Variable` -- a ``KEY=value`` assignment with its attached comments
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Union

# Canonical key grammar: letters, digits and underscore, never a leading digit.
KEY_PATTERN = r"[A-Za-z_][A-Za-z0-9_]*"

_KEY_RE = re.compile(KEY_PATTERN)


def is_valid_key(key: str) -> bool:
    """Return ``True`` if *key* can be written and read back as a variable name."""
    return _KEY_RE.fullmatch(key) is not None


@dataclass
class Empty:
    """A blank line."""


@dataclass
class Comment:
    """A standalone line, kept exactly as it appeared (``#`` and indentation included)."""

    text: str


@dataclass
class Variable:
    """A key/value assignment.

    ``value`` is the logical value (quotes removed, escapes resolved).
    ``comments_above`` holds the raw comment lines directly above the
    assignment; ``inline_comment`` is the trailing comment without its ``#``.
    """

    key: str
    value: str
    inline_comment: str | None = None
    comments_above: list[str] = field(default_factory=list)
    exported: bool = False


Line = Union[Empty, Comment, Variable]
Document = list[Line]
