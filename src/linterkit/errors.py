# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy shared by every linterkit module."""

from __future__ import annotations

from collections.abc import Sequence


class LinterKitError(Exception):
    """Base class for all errors raised by linterkit."""


class InvalidArgumentError(LinterKitError, TypeError):
    """Raised when a public operation receives an argument of the wrong kind."""


class InvalidPatternError(LinterKitError, ValueError):
    """Raised when a diagnostic pattern or its flag string cannot be compiled."""

    def __init__(self, message: str, *, pattern: str, flags: str) -> None:
        """Initialise the error with the offending pattern configuration.

        Args:
            message: Human readable description of the compilation failure.
            pattern: Pattern text supplied by the caller.
            flags: Flag string supplied by the caller.
        """

        super().__init__(message)
        self.pattern = pattern
        self.flags = flags


class RangeError(LinterKitError, ValueError):
    """Raised when a line or column lies outside the text buffer."""


class ConfigError(LinterKitError):
    """Raised when configuration input is invalid."""


class SubprocessExecutionError(LinterKitError, RuntimeError):
    """Raised when a spawned tool fails or writes to stderr unexpectedly."""

    def __init__(
        self,
        command: Sequence[str],
        returncode: int,
        stdout: str | None,
        stderr: str | None,
    ) -> None:
        """Initialise the error with captured subprocess metadata.

        Args:
            command: Normalised command sequence that was executed.
            returncode: Exit status reported by the subprocess.
            stdout: Captured standard output stream.
            stderr: Captured standard error stream.
        """

        super().__init__(
            f"Command '{command[0]}' exited with status {returncode}. stderr: {stderr or '<none>'}",
        )
        self.command = tuple(command)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


__all__ = [
    "ConfigError",
    "InvalidArgumentError",
    "InvalidPatternError",
    "LinterKitError",
    "RangeError",
    "SubprocessExecutionError",
]
