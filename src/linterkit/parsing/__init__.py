# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Regex driven conversion of tool output into diagnostic records."""

from __future__ import annotations

from .collector import DEFAULT_COLLECTOR, DiagnosticCollector, coerce_options, parse
from .fields import (
    FIELD_ALIASES,
    MatchFields,
    extract_fields,
    normalize_coordinate,
    normalize_range,
    resolve_alias,
)
from .patterns import (
    DEFAULT_COMPILER,
    CompiledPattern,
    PatternCompiler,
    normalize_flags,
    translate_named_groups,
)

__all__ = [
    "DEFAULT_COLLECTOR",
    "DEFAULT_COMPILER",
    "FIELD_ALIASES",
    "CompiledPattern",
    "DiagnosticCollector",
    "MatchFields",
    "PatternCompiler",
    "coerce_options",
    "extract_fields",
    "normalize_coordinate",
    "normalize_flags",
    "normalize_range",
    "parse",
    "resolve_alias",
    "translate_named_groups",
]
