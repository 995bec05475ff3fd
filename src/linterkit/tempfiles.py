# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Scoped temporary files handed to a callback and always cleaned up."""

from __future__ import annotations

import asyncio
import logging
import shutil
import tempfile
from collections.abc import Awaitable, Callable, Iterator, Mapping, Sequence
from contextlib import contextmanager
from functools import partial
from pathlib import Path
from typing import TypeVar

from pydantic import ValidationError

from .config import get_settings
from .errors import InvalidArgumentError
from .models import TempFileSpec

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

FileInput = TempFileSpec | Mapping[str, object]


def _coerce_specs(files: Sequence[FileInput]) -> list[TempFileSpec]:
    """Validate ``files`` and return them as :class:`TempFileSpec` instances.

    Raises:
        InvalidArgumentError: If ``files`` is not a sequence of file specs.
    """

    if isinstance(files, (str, bytes, bytearray)) or not isinstance(files, Sequence):
        raise InvalidArgumentError("Invalid or no `files` provided")
    specs: list[TempFileSpec] = []
    for entry in files:
        if isinstance(entry, TempFileSpec):
            specs.append(entry)
            continue
        if not isinstance(entry, Mapping):
            raise InvalidArgumentError(f"Invalid file entry: {entry!r}")
        try:
            specs.append(TempFileSpec.model_validate(dict(entry)))
        except ValidationError as exc:
            raise InvalidArgumentError(f"Invalid file entry: {exc}") from exc
    return specs


def _require_callable(callback: object) -> None:
    if not callable(callback):
        raise InvalidArgumentError("Invalid or no `callback` provided")


def _write_files(directory: Path, specs: Sequence[TempFileSpec]) -> list[str]:
    paths: list[str] = []
    for spec in specs:
        target = directory / spec.name
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(spec.contents, encoding="utf-8")
        paths.append(str(target))
    return paths


@contextmanager
def temporary_files(files: Sequence[FileInput]) -> Iterator[list[str]]:
    """Write ``files`` into a fresh temp directory and yield their paths.

    The directory and everything inside it are removed when the block exits,
    whether it finished normally or raised.

    Args:
        files: File specs, either :class:`TempFileSpec` or ``{"name", "contents"}`` mappings.

    Yields:
        list[str]: Paths of the written files, in the order given.

    Raises:
        InvalidArgumentError: If ``files`` is malformed.
    """

    specs = _coerce_specs(files)
    with tempfile.TemporaryDirectory(prefix=get_settings().temp_prefix) as directory:
        LOGGER.debug("created temp directory %s for %d file(s)", directory, len(specs))
        try:
            yield _write_files(Path(directory), specs)
        finally:
            LOGGER.debug("removing temp directory %s", directory)


def temp_files(files: Sequence[FileInput], callback: Callable[[list[str]], T]) -> T:
    """Run ``callback`` with the paths of ``files`` written to a scoped temp directory.

    Returns:
        T: Whatever ``callback`` returned. Exceptions raised by ``callback``
        propagate after the temp directory has been removed.

    Raises:
        InvalidArgumentError: If ``files`` or ``callback`` is malformed.
    """

    specs = _coerce_specs(files)
    _require_callable(callback)
    with temporary_files(specs) as paths:
        return callback(paths)


async def temp_files_async(
    files: Sequence[FileInput],
    callback: Callable[[list[str]], Awaitable[T]],
) -> T:
    """Coroutine form of :func:`temp_files` awaiting ``callback``.

    The temp directory is created, filled and removed in worker threads.
    """

    specs = _coerce_specs(files)
    _require_callable(callback)
    directory = await asyncio.to_thread(tempfile.mkdtemp, prefix=get_settings().temp_prefix)
    LOGGER.debug("created temp directory %s for %d file(s)", directory, len(specs))
    try:
        paths = await asyncio.to_thread(_write_files, Path(directory), specs)
        return await callback(paths)
    finally:
        LOGGER.debug("removing temp directory %s", directory)
        await asyncio.to_thread(shutil.rmtree, directory)


def _validate_single(file_name: object, file_contents: object, callback: object) -> None:
    if not isinstance(file_name, str):
        raise InvalidArgumentError("Invalid or no `fileName` provided")
    if not isinstance(file_contents, str):
        raise InvalidArgumentError("Invalid or no `fileContents` provided")
    _require_callable(callback)


def _call_with_first(callback: Callable[[str], T], paths: list[str]) -> T:
    return callback(paths[0])


def temp_file(file_name: str, file_contents: str, callback: Callable[[str], T]) -> T:
    """Single-file form of :func:`temp_files`; ``callback`` receives one path."""

    _validate_single(file_name, file_contents, callback)
    spec = {"name": file_name, "contents": file_contents}
    return temp_files([spec], partial(_call_with_first, callback))


async def temp_file_async(
    file_name: str,
    file_contents: str,
    callback: Callable[[str], Awaitable[T]],
) -> T:
    """Coroutine form of :func:`temp_file`."""

    _validate_single(file_name, file_contents, callback)
    spec = {"name": file_name, "contents": file_contents}
    return await temp_files_async([spec], partial(_call_with_first, callback))


__all__ = [
    "FileInput",
    "temp_file",
    "temp_file_async",
    "temp_files",
    "temp_files_async",
    "temporary_files",
]
