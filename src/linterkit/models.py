# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the linterkit package."""

from __future__ import annotations

import os
from pathlib import PurePath
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, field_validator

Point = tuple[NonNegativeInt, NonNegativeInt]
TextRange = tuple[Point, Point]


class Diagnostic(BaseModel):
    """Structured diagnostic built from one match over tool output."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: str | None = None
    text: str | None = None
    file_path: str | None = Field(default=None, alias="filePath")
    range: TextRange = ((0, 0), (0, 0))

    @property
    def start(self) -> Point:
        """Return the zero-based ``(line, column)`` where the diagnostic starts."""
        return self.range[0]

    @property
    def end(self) -> Point:
        """Return the zero-based ``(line, column)`` where the diagnostic ends."""
        return self.range[1]

    def to_dict(self) -> dict[str, Any]:
        """Return the plain mapping consumed by editor integrations."""

        (line_start, col_start), (line_end, col_end) = self.range
        return {
            "type": self.type,
            "text": self.text,
            "filePath": self.file_path,
            "range": [[line_start, col_start], [line_end, col_end]],
        }


class ParseOptions(BaseModel):
    """Per-call options accepted by :func:`linterkit.parsing.parse`."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    flags: str = ""
    file_path: str | None = Field(default=None, alias="filePath")

    @field_validator("flags", mode="before")
    @classmethod
    def _require_flag_text(cls, value: object) -> object:
        if value is None:
            return ""
        if not isinstance(value, str):
            raise ValueError("flags must be a string")
        return value

    @field_validator("file_path", mode="before")
    @classmethod
    def _coerce_file_path(cls, value: object) -> object:
        """Accept path objects while rejecting anything that is not path-like."""
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, os.PathLike):
            return os.fspath(value)
        raise ValueError("filePath must be a string or path-like object")


class TempFileSpec(BaseModel):
    """Name and text contents of one file written into a scoped temp directory."""

    model_config = ConfigDict(frozen=True, strict=True)

    name: str = Field(min_length=1)
    contents: str

    @field_validator("name")
    @classmethod
    def _stay_inside_directory(cls, value: str) -> str:
        """Reject names that would land outside the scoped temp directory."""
        pure = PurePath(value)
        if pure.anchor or not pure.parts or ".." in pure.parts:
            raise ValueError(f"file name {value!r} must be a relative path inside the temp directory")
        return value


__all__ = ["Diagnostic", "ParseOptions", "Point", "TempFileSpec", "TextRange"]
