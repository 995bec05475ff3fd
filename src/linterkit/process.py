# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe wrappers around ``subprocess`` execution of linter tools."""

from __future__ import annotations

import logging
import os
import shlex
import shutil

# Bandit: subprocess usage is intentional; arguments are passed as a list and
# ``shell=True`` is never used.
import subprocess  # nosec B404
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Final, Literal

from .config import get_settings
from .errors import InvalidArgumentError, SubprocessExecutionError

LOGGER = logging.getLogger(__name__)

Stream = Literal["stdout", "stderr", "both"]

_STREAMS: Final[frozenset[str]] = frozenset({"stdout", "stderr", "both"})
_TIMEOUT_EXIT_CODE: Final[int] = 124
NODE_EXECUTABLE: Final[str] = "node"


@dataclass(frozen=True, slots=True)
class ExecResult:
    """Both output streams and the exit status of a finished command."""

    stdout: str
    stderr: str
    exit_code: int


def _ensure_text(value: str | bytes | None) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return value.decode("utf-8", errors="replace")


def _normalize_args(args: Sequence[str]) -> list[str]:
    """Resolve the executable in ``args`` against ``PATH``.

    Raises:
        ValueError: If no arguments are provided.
        FileNotFoundError: If the executable cannot be found.
    """

    if not args:
        msg = "subprocess command requires at least one argument"
        raise ValueError(msg)

    head, *rest = args
    head_path = Path(head)
    if head_path.is_absolute():
        return [str(head_path), *rest]

    resolved = shutil.which(head)
    if resolved is None:
        msg = f"Executable '{head}' was not found on PATH"
        raise FileNotFoundError(msg)
    return [resolved, *rest]


def _validate_exec(command: object, args: object, stream: object) -> list[str]:
    if not isinstance(command, str) or not command:
        raise InvalidArgumentError("Invalid or no `command` provided")
    if isinstance(args, (str, bytes)) or not isinstance(args, Sequence):
        raise InvalidArgumentError("Invalid `args` provided")
    if not all(isinstance(arg, str) for arg in args):
        raise InvalidArgumentError("Every entry in `args` must be a string")
    if stream not in _STREAMS:
        raise InvalidArgumentError(f"Invalid `stream` provided: {stream!r}")
    return [command, *args]


def _run(
    normalized: list[str],
    *,
    stdin: str | None,
    cwd: str | Path | None,
    env: Mapping[str, str] | None,
    timeout: float | None,
) -> ExecResult:
    merged_env = {**os.environ, **env} if env is not None else None
    input_options: dict[str, object] = {"stdin": subprocess.DEVNULL} if stdin is None else {"input": stdin}
    LOGGER.debug("running %s", shlex.join(normalized))
    try:
        completed = subprocess.run(  # nosec B603 - argument list, no shell
            normalized,
            cwd=str(cwd) if cwd is not None else None,
            env=merged_env,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
            check=False,
            **input_options,
        )
    except subprocess.TimeoutExpired as exc:
        stderr = _ensure_text(exc.stderr)
        timeout_msg = f"Command timed out after {timeout:.1f}s" if timeout is not None else "Command timed out"
        return ExecResult(
            stdout=_ensure_text(exc.stdout),
            stderr=f"{stderr}\n{timeout_msg}" if stderr else timeout_msg,
            exit_code=_TIMEOUT_EXIT_CODE,
        )
    return ExecResult(
        stdout=_ensure_text(completed.stdout),
        stderr=_ensure_text(completed.stderr),
        exit_code=completed.returncode,
    )


def exec_command(
    command: str,
    args: Sequence[str] = (),
    *,
    stdin: str | None = None,
    stream: Stream = "stdout",
    cwd: str | Path | None = None,
    env: Mapping[str, str] | None = None,
    timeout: float | None = None,
    ignore_exit_code: bool = False,
) -> str | ExecResult:
    """Run ``command`` with ``args`` and return the requested output stream.

    Args:
        command: Executable name or absolute path.
        args: Arguments passed to the executable.
        stdin: Text written to the process' standard input.
        stream: ``"stdout"`` or ``"stderr"`` return that stream as text;
            ``"both"`` returns an :class:`ExecResult`.
        cwd: Working directory for the process.
        env: Variables layered over the current environment.
        timeout: Seconds before the process is killed; defaults to
            :attr:`~linterkit.config.Settings.exec_timeout`.
        ignore_exit_code: Return stdout even when the process failed or wrote to stderr.

    Returns:
        str | ExecResult: Captured output as selected by ``stream``.

    Raises:
        InvalidArgumentError: If the command, arguments or stream are malformed.
        FileNotFoundError: If the executable cannot be resolved on ``PATH``.
        SubprocessExecutionError: When ``stream`` is ``"stdout"`` and the process
            exited non-zero or wrote to stderr, unless ``ignore_exit_code`` is set.
    """

    normalized = _normalize_args(_validate_exec(command, args, stream))
    effective_timeout = timeout if timeout is not None else get_settings().exec_timeout
    result = _run(normalized, stdin=stdin, cwd=cwd, env=env, timeout=effective_timeout)

    if stream == "both":
        return result
    if stream == "stderr":
        return result.stderr
    if not ignore_exit_code and (result.exit_code != 0 or result.stderr.strip()):
        raise SubprocessExecutionError(normalized, result.exit_code, result.stdout, result.stderr)
    return result.stdout


def exec_node(
    script: str | Path,
    args: Sequence[str] = (),
    *,
    stdin: str | None = None,
    stream: Stream = "stdout",
    cwd: str | Path | None = None,
    env: Mapping[str, str] | None = None,
    timeout: float | None = None,
    ignore_exit_code: bool = False,
) -> str | ExecResult:
    """Run a JavaScript file with the ``node`` executable found on ``PATH``.

    Accepts the same keyword options as :func:`exec_command`.
    """

    if isinstance(args, (str, bytes)) or not isinstance(args, Sequence):
        raise InvalidArgumentError("Invalid `args` provided")
    return exec_command(
        NODE_EXECUTABLE,
        [str(script), *args],
        stdin=stdin,
        stream=stream,
        cwd=cwd,
        env=env,
        timeout=timeout,
        ignore_exit_code=ignore_exit_code,
    )


__all__ = ["ExecResult", "NODE_EXECUTABLE", "Stream", "exec_command", "exec_node"]
