# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Helpers for editor linter integrations: output parsing, file lookup, temp files and ranges."""

from __future__ import annotations

from importlib import metadata

from .errors import (
    ConfigError,
    InvalidArgumentError,
    InvalidPatternError,
    LinterKitError,
    RangeError,
    SubprocessExecutionError,
)
from .finder import FIND_CACHE, FindCache, find, find_async, find_cached, find_cached_async
from .models import Diagnostic, ParseOptions, TempFileSpec
from .parsing import parse
from .process import ExecResult, exec_command, exec_node
from .ranges import StringBuffer, TextBuffer, range_from_line_number
from .tempfiles import temp_file, temp_file_async, temp_files, temp_files_async, temporary_files

try:
    __version__ = metadata.version("linterkit")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"

__all__ = [
    "FIND_CACHE",
    "ConfigError",
    "Diagnostic",
    "ExecResult",
    "FindCache",
    "InvalidArgumentError",
    "InvalidPatternError",
    "LinterKitError",
    "ParseOptions",
    "RangeError",
    "StringBuffer",
    "SubprocessExecutionError",
    "TempFileSpec",
    "TextBuffer",
    "__version__",
    "exec_command",
    "exec_node",
    "find",
    "find_async",
    "find_cached",
    "find_cached_async",
    "parse",
    "range_from_line_number",
    "temp_file",
    "temp_file_async",
    "temp_files",
    "temp_files_async",
    "temporary_files",
]
