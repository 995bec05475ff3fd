# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for named-group field resolution and coordinate normalisation."""

from __future__ import annotations

import pytest

from linterkit.parsing import extract_fields, normalize_coordinate, normalize_range, resolve_alias


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("1", 0),
        ("5", 4),
        (" 7 ", 6),
        ("+3", 2),
        (12, 11),
        ("0", 0),
        (0, 0),
        (None, 0),
        ("", 0),
        ("-3", 0),
        (-3, 0),
        ("abc", 0),
        ("3.5", 0),
        (True, 0),
    ],
)
def test_normalize_coordinate(raw: object, expected: int) -> None:
    assert normalize_coordinate(raw) == expected  # type: ignore[arg-type]


def test_resolve_alias_skips_empty_and_missing() -> None:
    groups = {"lineStart": "", "line": "4"}

    assert resolve_alias(groups, ("lineStart", "line")) == "4"
    assert resolve_alias(groups, ("colStart", "col")) is None


def test_resolve_alias_prefers_first_present_name() -> None:
    assert resolve_alias({"lineStart": "2", "line": "9"}, ("lineStart", "line")) == "2"


def test_extract_fields_alias_table() -> None:
    fields = extract_fields(
        {"type": "warning", "message": "msg", "line": "8", "col": "3", "colEnd": "9", "file": None},
        "default.py",
    )

    assert fields.type == "warning"
    assert fields.message == "msg"
    assert fields.file_path == "default.py"
    assert (fields.line_start, fields.col_start) == ("8", "3")
    assert (fields.line_end, fields.col_end) == ("8", "9")
    assert normalize_range(fields) == ((7, 2), (7, 8))


def test_extract_fields_prefers_matched_file() -> None:
    fields = extract_fields({"file": "lib.rs", "message": "m"}, "default.rs")

    assert fields.file_path == "lib.rs"


def test_extract_fields_without_any_groups() -> None:
    fields = extract_fields({}, None)

    assert fields.type is None
    assert fields.message is None
    assert fields.file_path is None
    assert normalize_range(fields) == ((0, 0), (0, 0))


def test_extract_fields_empty_default_file_is_none() -> None:
    assert extract_fields({}, "").file_path is None
