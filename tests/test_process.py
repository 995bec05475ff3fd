# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the subprocess helpers."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from linterkit import ExecResult, InvalidArgumentError, SubprocessExecutionError, exec_command, exec_node
from linterkit import process as process_module
from linterkit.config import ENV_EXEC_TIMEOUT, reset_settings

PYTHON = sys.executable


def test_exec_command_returns_stdout() -> None:
    assert exec_command(PYTHON, ["-c", "print('hello')"]) == "hello\n"


def test_exec_command_feeds_stdin() -> None:
    output = exec_command(PYTHON, ["-c", "import sys; print(sys.stdin.read().upper())"], stdin="abc")

    assert output == "ABC\n"


def test_exec_command_layers_environment() -> None:
    output = exec_command(
        PYTHON,
        ["-c", "import os; print(os.environ['LINTERKIT_PROBE'], 'PATH' in os.environ)"],
        env={"LINTERKIT_PROBE": "value"},
    )

    assert output == "value True\n"


def test_exec_command_runs_in_cwd(tmp_path: Path) -> None:
    output = exec_command(PYTHON, ["-c", "import os; print(os.getcwd())"], cwd=tmp_path)

    assert Path(output.strip()).resolve() == tmp_path.resolve()


def test_exec_command_raises_on_stderr() -> None:
    with pytest.raises(SubprocessExecutionError) as excinfo:
        exec_command(PYTHON, ["-c", "import sys; sys.stderr.write('oops')"])

    assert excinfo.value.returncode == 0
    assert excinfo.value.stderr == "oops"


def test_exec_command_raises_on_failure() -> None:
    with pytest.raises(SubprocessExecutionError) as excinfo:
        exec_command(PYTHON, ["-c", "print('partial'); raise SystemExit(3)"])

    assert excinfo.value.returncode == 3
    assert excinfo.value.stdout == "partial\n"


def test_exec_command_ignore_exit_code_returns_stdout() -> None:
    output = exec_command(
        PYTHON,
        ["-c", "import sys; print('out'); sys.stderr.write('err'); raise SystemExit(1)"],
        ignore_exit_code=True,
    )

    assert output == "out\n"


def test_exec_command_stderr_stream() -> None:
    output = exec_command(PYTHON, ["-c", "import sys; sys.stderr.write('lint: bad')"], stream="stderr")

    assert output == "lint: bad"


def test_exec_command_both_streams() -> None:
    result = exec_command(
        PYTHON,
        ["-c", "import sys; print('o'); sys.stderr.write('e'); raise SystemExit(2)"],
        stream="both",
    )

    assert result == ExecResult(stdout="o\n", stderr="e", exit_code=2)


def test_exec_command_replaces_undecodable_output() -> None:
    script = "import sys; sys.stdout.buffer.write(b'x\\xff\\n'); sys.stderr.buffer.write(b'\\xfe')"
    result = exec_command(PYTHON, ["-c", script], stream="both")

    assert isinstance(result, ExecResult)
    assert result.stdout == "x�\n"
    assert result.stderr == "�"
    assert result.exit_code == 0


def test_exec_command_stdout_tolerates_undecodable_bytes() -> None:
    script = "import sys; sys.stdout.buffer.write(b'a.c:1:1: bad \\xff byte\\n')"

    assert exec_command(PYTHON, ["-c", script]) == "a.c:1:1: bad � byte\n"


def test_exec_command_timeout_reports_exit_code() -> None:
    result = exec_command(PYTHON, ["-c", "import time; time.sleep(5)"], stream="both", timeout=0.2)

    assert isinstance(result, ExecResult)
    assert result.exit_code == 124
    assert "timed out" in result.stderr


def test_exec_command_timeout_defaults_to_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(ENV_EXEC_TIMEOUT, "0.2")
    reset_settings()

    with pytest.raises(SubprocessExecutionError) as excinfo:
        exec_command(PYTHON, ["-c", "import time; time.sleep(5)"])

    assert excinfo.value.returncode == 124


def test_exec_command_missing_executable() -> None:
    with pytest.raises(FileNotFoundError):
        exec_command("linterkit-definitely-not-installed")


@pytest.mark.parametrize(
    ("command", "args", "stream"),
    [("", (), "stdout"), (None, (), "stdout"), (PYTHON, "-V", "stdout"), (PYTHON, [1], "stdout"), (PYTHON, (), "x")],
)
def test_exec_command_rejects_invalid_arguments(command: object, args: object, stream: object) -> None:
    with pytest.raises(InvalidArgumentError):
        exec_command(command, args, stream=stream)  # type: ignore[arg-type]


def test_exec_node_runs_script_with_node(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    script = tmp_path / "tool.py"
    script.write_text("import sys; print('args', sys.argv[1:])\n", encoding="utf-8")
    requested: list[str] = []

    def _which(name: str) -> str:
        requested.append(name)
        return PYTHON

    monkeypatch.setattr(process_module.shutil, "which", _which)

    assert exec_node(script, ["--fix"]) == "args ['--fix']\n"
    assert requested == ["node"]


def test_exec_node_without_node_installed(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(process_module.shutil, "which", lambda _name: None)

    with pytest.raises(FileNotFoundError):
        exec_node("tool.js")
