# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Compute buffer ranges from loose line, column and length input."""

from __future__ import annotations

import math
import re
from typing import Final, Protocol, runtime_checkable

from .errors import InvalidArgumentError, RangeError
from .models import TextRange

_LINE_BREAK: Final[re.Pattern[str]] = re.compile(r"\r\n|\r|\n")
_INDENTATION: Final[re.Pattern[str]] = re.compile(r"\s+")


@runtime_checkable
class TextBuffer(Protocol):
    """Minimal read-only view of an editor buffer."""

    def get_line_count(self) -> int:
        """Return the number of rows in the buffer."""
        ...

    def line_for_row(self, row: int) -> str:
        """Return the text of ``row`` without its line ending."""
        ...

    def line_length_for_row(self, row: int) -> int:
        """Return the length of ``row`` without its line ending."""
        ...


class StringBuffer:
    """In-memory :class:`TextBuffer` over a string.

    A trailing newline produces a final empty row, as editors display it.
    """

    def __init__(self, text: str) -> None:
        self._lines = _LINE_BREAK.split(text)

    def get_line_count(self) -> int:
        return len(self._lines)

    def line_for_row(self, row: int) -> str:
        return self._lines[row]

    def line_length_for_row(self, row: int) -> int:
        return len(self._lines[row])


def _coerce_position(value: object) -> int | None:
    """Return ``value`` as a non-negative int, or ``None`` when it is unusable."""

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if value < 0:
        return None
    return int(value)


def range_from_line_number(
    buffer: TextBuffer,
    line: int | float | None,
    column: int | float | None = None,
    length: int | float | None = None,
) -> TextRange:
    """Return a single-line range anchored at ``line`` and ``column``.

    Args:
        buffer: Buffer the range refers to.
        line: Zero-based row; missing, negative or non-finite values mean row 0.
        column: Zero-based start column; when unusable the range starts after
            the row's leading whitespace.
        length: Span length; when unusable the range runs to the end of the row.

    Returns:
        TextRange: ``((line, start), (line, start + length))``.

    Raises:
        InvalidArgumentError: If ``buffer`` does not implement :class:`TextBuffer`.
        RangeError: If ``line`` is past the last row or ``column`` past the end of the row.
    """

    if not isinstance(buffer, TextBuffer):
        raise InvalidArgumentError("Invalid or no `buffer` provided")

    line_number = _coerce_position(line) or 0
    line_max = buffer.get_line_count() - 1
    if line_number > line_max:
        raise RangeError(f"Line number ({line_number}) greater than maximum line ({line_max})")

    col_start = _coerce_position(column)
    if col_start is None:
        indentation = _INDENTATION.match(buffer.line_for_row(line_number))
        col_start = indentation.end() if indentation else 0

    line_length = buffer.line_length_for_row(line_number)
    if col_start > line_length:
        raise RangeError(f"Column start ({col_start}) greater than line length ({line_length})")

    span = _coerce_position(length)
    if span is None:
        span = line_length - col_start

    return ((line_number, col_start), (line_number, col_start + span))


__all__ = ["StringBuffer", "TextBuffer", "range_from_line_number"]
