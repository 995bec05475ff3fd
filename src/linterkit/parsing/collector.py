# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Drive a compiled pattern over tool output and collect diagnostics."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from pydantic import ValidationError

from ..errors import InvalidArgumentError
from ..models import Diagnostic, ParseOptions
from .fields import extract_fields, normalize_range
from .patterns import DEFAULT_COMPILER, PatternCompiler

LOGGER = logging.getLogger(__name__)

OptionsInput = ParseOptions | Mapping[str, object] | None


def coerce_options(options: OptionsInput) -> ParseOptions:
    """Return ``options`` as a validated :class:`ParseOptions` instance.

    Raises:
        InvalidArgumentError: If ``options`` is not a mapping or holds values of the wrong type.
    """

    if options is None:
        return ParseOptions()
    if isinstance(options, ParseOptions):
        return options
    if not isinstance(options, Mapping):
        raise InvalidArgumentError(f"Invalid or no `options` provided: {type(options).__name__}")
    try:
        return ParseOptions.model_validate(dict(options))
    except ValidationError as exc:
        raise InvalidArgumentError(f"Invalid `options` provided: {exc}") from exc


class DiagnosticCollector:
    """Turn raw tool output into :class:`Diagnostic` records via named groups."""

    def __init__(self, compiler: PatternCompiler = DEFAULT_COMPILER) -> None:
        self._compiler = compiler

    def collect(self, data: str, pattern: str, options: OptionsInput = None) -> list[Diagnostic]:
        """Return one diagnostic per match of ``pattern`` in ``data``.

        Args:
            data: Text emitted by a tool, typically stdout or stderr.
            pattern: Regular expression using the ``type``, ``message``, ``file``,
                ``line``/``col`` and ``lineStart``/``colStart``/``lineEnd``/``colEnd``
                named groups.
            options: ``flags`` and default ``filePath``, as a mapping or
                :class:`ParseOptions`.

        Returns:
            list[Diagnostic]: Diagnostics in the order their matches occur.

        Raises:
            InvalidArgumentError: If ``data``, ``pattern`` or ``options`` has the wrong type.
            InvalidPatternError: If ``pattern`` or its flags cannot be compiled.
        """

        if not isinstance(data, str):
            raise InvalidArgumentError("Invalid or no `data` provided")
        if not isinstance(pattern, str):
            raise InvalidArgumentError("Invalid or no `regex` provided")
        resolved = coerce_options(options)

        compiled = self._compiler.compile(pattern, resolved.flags)
        diagnostics: list[Diagnostic] = []
        for match in compiled.iter_matches(data):
            fields = extract_fields(match.groupdict(), resolved.file_path)
            diagnostics.append(
                Diagnostic(
                    type=fields.type,
                    text=fields.message,
                    file_path=fields.file_path,
                    range=normalize_range(fields),
                )
            )
        LOGGER.debug("pattern %r produced %d diagnostic(s)", pattern, len(diagnostics))
        return diagnostics


DEFAULT_COLLECTOR = DiagnosticCollector()


def parse(data: str, pattern: str, options: OptionsInput = None) -> list[Diagnostic]:
    """Parse ``data`` into diagnostics with the shared :class:`DiagnosticCollector`."""

    return DEFAULT_COLLECTOR.collect(data, pattern, options)


__all__ = ["DEFAULT_COLLECTOR", "DiagnosticCollector", "OptionsInput", "coerce_options", "parse"]
