# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command line entry point for parsing tool output and locating config files."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from ..console import fail, ok, render_diagnostics
from ..errors import InvalidPatternError
from ..finder import find, find_cached
from ..parsing import parse

app = typer.Typer(
    name="linterkit",
    help="Turn linter output into diagnostics and locate project configuration.",
    no_args_is_help=True,
    add_completion=False,
)

PATTERN_ERROR_EXIT_CODE = 2


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug details to stderr."),
) -> None:
    """Configure logging for every sub-command."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command("parse")
def parse_command(
    pattern: str = typer.Argument(..., help="Regular expression with named groups."),
    source: Path | None = typer.Argument(
        None,
        metavar="[FILE]",
        help="File holding tool output; read from stdin when omitted.",
    ),
    flags: str = typer.Option("", "--flags", help="Regex flag characters, e.g. 'im'."),
    file_path: str | None = typer.Option(None, "--file-path", help="File path for matches without a file group."),
    as_json: bool = typer.Option(False, "--json", help="Print diagnostics as JSON."),
    use_color: bool = typer.Option(True, "--color/--no-color", help="Colourise the table output."),
    use_emoji: bool = typer.Option(True, "--emoji/--no-emoji", help="Prefix status lines with emoji."),
) -> None:
    """Parse tool output into diagnostics; exits 1 when any are found."""
    if source is not None:
        resolved = source.expanduser().resolve()
        if not resolved.is_file():
            raise typer.BadParameter(f"Tool output file not found: {source}")
        data = resolved.read_text(encoding="utf-8", errors="replace")
    else:
        data = typer.get_binary_stream("stdin").read().decode("utf-8", errors="replace")

    try:
        diagnostics = parse(data, pattern, {"flags": flags, "filePath": file_path})
    except InvalidPatternError as exc:
        fail(str(exc), use_emoji=use_emoji, use_color=use_color)
        raise typer.Exit(code=PATTERN_ERROR_EXIT_CODE) from exc

    if as_json:
        typer.echo(json.dumps([diagnostic.to_dict() for diagnostic in diagnostics], indent=2))
    elif diagnostics:
        render_diagnostics(diagnostics, use_color=use_color)
    else:
        ok("No diagnostics found", use_emoji=use_emoji, use_color=use_color)
    raise typer.Exit(code=1 if diagnostics else 0)


@app.command("find")
def find_command(
    directory: Path = typer.Argument(..., help="Directory where the upward search starts."),
    names: list[str] = typer.Argument(..., help="File names tried in order in each directory."),
    no_cache: bool = typer.Option(False, "--no-cache", help="Skip the lookup cache."),
    use_emoji: bool = typer.Option(True, "--emoji/--no-emoji", help="Prefix status lines with emoji."),
) -> None:
    """Print the nearest ancestor file matching one of NAMES."""
    finder = find if no_cache else find_cached
    found = finder(directory, names)
    if found is None:
        fail(f"None of {', '.join(names)} found above {directory}", use_emoji=use_emoji)
        raise typer.Exit(code=1)
    typer.echo(found)


__all__ = ["app"]
