# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""In-memory editing of a parsed .env document.

:class:`EnvEditor` owns a list of line records and changes it in place while
keeping comments, blank lines and ``export`` prefixes of untouched variables
intact.  Lookups go to the first variable with a matching key.

The editor does no locking; callers sharing one instance across threads must
serialize access themselves.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from envline.lines import Document, Empty, Line, Variable, is_valid_key


class EnvEditor:
    """Get, set and remove variables in a document of line records."""

    def __init__(self, lines: Iterable[Line] | None = None) -> None:
        self._lines: Document = list(lines) if lines is not None else []

    @property
    def lines(self) -> Document:
        """The live list of line records."""
        return self._lines

    @lines.setter
    def lines(self, lines: Iterable[Line]) -> None:
        self._lines = list(lines)

    def variables(self) -> Iterator[Variable]:
        """Yield every variable record in file order."""
        for line in self._lines:
            if isinstance(line, Variable):
                yield line

    def keys(self) -> list[str]:
        """Return variable keys in file order, without duplicates."""
        return list(dict.fromkeys(v.key for v in self.variables()))

    def has(self, key: str) -> bool:
        return self._find(key) is not None

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the value of the first *key* assignment, or *default*."""
        found = self._find(key)
        if found is None:
            return default
        return found[1].value

    def set(
        self,
        key: str,
        value: str,
        inline_comment: str | None = None,
        comments_above: list[str] | None = None,
        exported: bool | None = None,
    ) -> None:
        """Create or update *key*.

        For an existing key only *value* and the fields passed explicitly are
        changed: ``None`` leaves a field as it is, ``inline_comment=""``
        clears the inline comment and ``comments_above=[]`` clears the block
        comment.

        A new key is appended at the end of the document.  A blank line is
        inserted first when the document does not already end with one,
        unless *comments_above* is given.  Trailing blank lines of a file are
        not kept by the parser, so after ``parse("A=1\\n")`` a new key with
        *comments_above* sits directly under ``A=1`` with no blank line
        between them.
        """
        if not is_valid_key(key):
            raise ValueError(f"Invalid variable name {key!r}.")

        found = self._find(key)
        if found is not None:
            line = found[1]
            line.value = value
            if inline_comment is not None:
                line.inline_comment = inline_comment or None
            if comments_above is not None:
                line.comments_above = list(comments_above)
            if exported is not None:
                line.exported = exported
            return

        if self._lines and not isinstance(self._lines[-1], Empty) and not comments_above:
            self._lines.append(Empty())
        self._lines.append(
            Variable(
                key=key,
                value=value,
                inline_comment=inline_comment or None,
                comments_above=list(comments_above or []),
                exported=bool(exported),
            )
        )

    def remove(self, key: str) -> None:
        """Delete the first *key* assignment and collapse blank-line runs.

        Removing a key that is not present leaves the document untouched.
        """
        found = self._find(key)
        if found is None:
            return
        del self._lines[found[0]]
        self._lines[:] = collapse_empty_lines(self._lines)

    def _find(self, key: str) -> tuple[int, Variable] | None:
        for index, line in enumerate(self._lines):
            if isinstance(line, Variable) and line.key == key:
                return index, line
        return None


def collapse_empty_lines(lines: Iterable[Line]) -> Document:
    """Return *lines* with every run of blank lines reduced to one."""
    result: Document = []
    for line in lines:
        if isinstance(line, Empty) and result and isinstance(result[-1], Empty):
            continue
        result.append(line)
    return result
