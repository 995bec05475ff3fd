# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for pattern compilation and match iteration."""

from __future__ import annotations

import re

import pytest

from linterkit import InvalidPatternError
from linterkit.parsing import PatternCompiler, normalize_flags, translate_named_groups


@pytest.mark.parametrize(
    ("flags", "expected"),
    [("", "g"), ("m", "mg"), ("g", "g"), ("igm", "igm")],
)
def test_normalize_flags_appends_global(flags: str, expected: str) -> None:
    assert normalize_flags(flags) == expected


@pytest.mark.parametrize(
    ("pattern", "expected"),
    [
        (r"(?<line>\d+)", r"(?P<line>\d+)"),
        (r"(?<=a)b(?<!c)", r"(?<=a)b(?<!c)"),
        (r"\(?<a>", r"\(?<a>"),
        (r"[(?<a>]", r"[(?<a>]"),
        (r"[]](?<a>x)", r"[]](?P<a>x)"),
        (r"[^\]](?<a>x)", r"[^\]](?P<a>x)"),
        (r"(?P<kept>x)", r"(?P<kept>x)"),
    ],
)
def test_translate_named_groups(pattern: str, expected: str) -> None:
    assert translate_named_groups(pattern) == expected


def test_compile_maps_flag_characters() -> None:
    compiled = PatternCompiler().compile(r"(?<message>abc)", "imsx")

    assert compiled.flags == "imsxg"
    assert compiled.regex.flags & re.IGNORECASE
    assert compiled.regex.flags & re.MULTILINE
    assert compiled.regex.flags & re.DOTALL
    assert compiled.regex.flags & re.VERBOSE
    assert not compiled.sticky
    assert compiled.group_names == ("message",)


def test_compile_sticky_flag() -> None:
    compiled = PatternCompiler().compile(r"\d", "y")

    assert compiled.sticky
    assert compiled.find_next("a1", 0) is None
    match = compiled.find_next("a1", 1)
    assert match is not None
    assert match.group() == "1"


def test_shorthand_classes_are_ascii_without_unicode_flag() -> None:
    ascii_only = PatternCompiler().compile(r"(?<message>\w+)")
    unicode_aware = PatternCompiler().compile(r"(?<message>\w+)", "u")

    assert ascii_only.regex.flags & re.ASCII
    assert not unicode_aware.regex.flags & re.ASCII
    assert [match.group() for match in ascii_only.iter_matches("café")] == ["caf"]
    assert [match.group() for match in unicode_aware.iter_matches("café")] == ["café"]


def test_digit_class_ignores_non_ascii_digits() -> None:
    compiled = PatternCompiler().compile(r"(?<line>\d+)")

    assert list(compiled.iter_matches("١٢")) == []


def test_compile_error_carries_configuration() -> None:
    with pytest.raises(InvalidPatternError) as excinfo:
        PatternCompiler().compile("(unclosed", "i")

    assert excinfo.value.pattern == "(unclosed"
    assert excinfo.value.flags == "i"
    assert isinstance(excinfo.value.__cause__, re.error)


def test_iter_matches_keeps_state_per_iteration() -> None:
    compiled = PatternCompiler().compile(r"(?<line>\d)")
    first = compiled.iter_matches("123")
    second = compiled.iter_matches("456")

    assert next(first).group() == "1"
    assert next(second).group() == "4"
    assert next(first).group() == "2"
    assert [match.group() for match in second] == ["5", "6"]
    assert [match.group() for match in first] == ["3"]


def test_iter_matches_respects_line_anchors() -> None:
    compiled = PatternCompiler().compile(r"^(?<message>\w+)", "m")

    assert [match["message"] for match in compiled.iter_matches("one\ntwo\n three")] == ["one", "two"]
