# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve diagnostic fields from named groups and normalise coordinates."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final

from ..models import TextRange

GroupMap = Mapping[str, str | None]

# Ordered alias chains; the first group holding a non-empty capture wins.
FIELD_ALIASES: Final[Mapping[str, tuple[str, ...]]] = MappingProxyType(
    {
        "type": ("type",),
        "message": ("message",),
        "file": ("file",),
        "line_start": ("lineStart", "line"),
        "col_start": ("colStart", "col"),
        "line_end": ("lineEnd", "line"),
        "col_end": ("colEnd", "col"),
    }
)

_INTEGER_TEXT: Final[re.Pattern[str]] = re.compile(r"\s*[+-]?[0-9]+\s*")


@dataclass(frozen=True, slots=True)
class MatchFields:
    """Semantic fields pulled out of a single match, coordinates still raw."""

    type: str | None
    message: str | None
    file_path: str | None
    line_start: str | None
    col_start: str | None
    line_end: str | None
    col_end: str | None


def resolve_alias(groups: GroupMap, names: tuple[str, ...]) -> str | None:
    """Return the first non-empty capture among ``names``.

    Args:
        groups: Named captures of one match; unmatched groups map to ``None``.
        names: Group names tried in priority order.

    Returns:
        str | None: The winning capture, or ``None`` when every alias is absent or empty.
    """

    for name in names:
        value = groups.get(name)
        if value:
            return value
    return None


def extract_fields(groups: GroupMap, default_file_path: str | None = None) -> MatchFields:
    """Build :class:`MatchFields` from the named captures of one match.

    ``type`` and ``message`` keep whatever the group captured, including an
    empty string; only an unmatched group yields ``None``. The file path falls
    back to ``default_file_path`` when the ``file`` group is absent or empty.
    """

    file_path = resolve_alias(groups, FIELD_ALIASES["file"]) or default_file_path or None
    return MatchFields(
        type=groups.get("type"),
        message=groups.get("message"),
        file_path=file_path,
        line_start=resolve_alias(groups, FIELD_ALIASES["line_start"]),
        col_start=resolve_alias(groups, FIELD_ALIASES["col_start"]),
        line_end=resolve_alias(groups, FIELD_ALIASES["line_end"]),
        col_end=resolve_alias(groups, FIELD_ALIASES["col_end"]),
    )


def _coerce_integer(raw: str | int | None) -> int | None:
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str) and _INTEGER_TEXT.fullmatch(raw):
        return int(raw)
    return None


def normalize_coordinate(raw: str | int | None) -> int:
    """Convert a one-based coordinate into its zero-based equivalent.

    Positive values drop by one. Zero, negative, missing and non-numeric
    values all collapse to ``0``.
    """

    value = _coerce_integer(raw)
    if value is None or value <= 0:
        return 0
    return value - 1


def normalize_range(fields: MatchFields) -> TextRange:
    """Return the zero-based ``((line, col), (line, col))`` span for ``fields``.

    Start and end are normalised independently; an end before the start is
    passed through unchanged.
    """

    return (
        (normalize_coordinate(fields.line_start), normalize_coordinate(fields.col_start)),
        (normalize_coordinate(fields.line_end), normalize_coordinate(fields.col_end)),
    )


__all__ = [
    "FIELD_ALIASES",
    "GroupMap",
    "MatchFields",
    "extract_fields",
    "normalize_coordinate",
    "normalize_range",
    "resolve_alias",
]
