# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing console helpers with optional colour and emoji support."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Literal

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .models import Diagnostic

SEVERITY_STYLES = {
    "error": "bold red",
    "warning": "yellow",
    "info": "cyan",
    "note": "cyan",
}


def detect_tty() -> bool:
    """Return ``True`` when stdout appears to be backed by a terminal."""

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


def get_console(*, color: bool, emoji: bool) -> Console:
    """Return a Rich console configured for ``color`` and ``emoji`` preferences.

    Args:
        color: ``True`` when ANSI colour output should be enabled.
        emoji: ``True`` when Rich should render emoji glyphs.

    Returns:
        Console: Console writing to the current ``sys.stdout``.
    """

    tty = detect_tty()
    color_system: Literal["auto"] | None = "auto" if color and tty else None
    return Console(
        color_system=color_system,
        force_terminal=tty,
        no_color=not (color and tty),
        emoji=emoji,
        soft_wrap=True,
    )


def _print_line(msg: str, *, style: str | None, use_emoji: bool, use_color: bool | None = None) -> None:
    color_enabled = detect_tty() if use_color is None else use_color
    console = get_console(color=color_enabled, emoji=use_emoji)
    text = Text(msg)
    if style and color_enabled:
        text.stylize(style)
    console.print(text)


def info(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an informational message."""

    prefix = "ℹ️ " if use_emoji else ""
    _print_line(f"{prefix}{msg}", style="cyan", use_emoji=use_emoji, use_color=use_color)


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit a success message."""

    prefix = "✅ " if use_emoji else ""
    _print_line(f"{prefix}{msg}", style="green", use_emoji=use_emoji, use_color=use_color)


def warn(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit a warning message."""

    prefix = "⚠️ " if use_emoji else ""
    _print_line(f"{prefix}{msg}", style="yellow", use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an error message."""

    prefix = "❌ " if use_emoji else ""
    _print_line(f"{prefix}{msg}", style="red", use_emoji=use_emoji, use_color=use_color)


def render_diagnostics(diagnostics: Sequence[Diagnostic], *, use_color: bool | None = None) -> None:
    """Print ``diagnostics`` as a table with one-based positions.

    Args:
        diagnostics: Records produced by :func:`linterkit.parsing.parse`.
        use_color: Optional explicit colour flag overriding TTY detection.
    """

    color_enabled = detect_tty() if use_color is None else use_color
    console = get_console(color=color_enabled, emoji=False)
    table = Table(box=None, header_style="bold" if color_enabled else None, expand=False)
    table.add_column("Location", no_wrap=True)
    table.add_column("Type", no_wrap=True)
    table.add_column("Message")
    for diagnostic in diagnostics:
        (line, column), _ = diagnostic.range
        location = f"{diagnostic.file_path or '-'}:{line + 1}:{column + 1}"
        severity = diagnostic.type or ""
        style = SEVERITY_STYLES.get(severity.lower()) if color_enabled else None
        table.add_row(location, Text(severity, style=style or ""), diagnostic.text or "")
    console.print(table)


__all__ = ["detect_tty", "fail", "get_console", "info", "ok", "render_diagnostics", "warn"]
