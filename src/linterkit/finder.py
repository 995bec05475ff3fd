# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Locate configuration or marker files by walking up a directory ancestry."""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Iterator, Sequence
from pathlib import Path
from threading import Lock
from typing import Final

from .config import get_settings
from .errors import InvalidArgumentError

LOGGER = logging.getLogger(__name__)

NameInput = str | Sequence[str]
PathInput = str | os.PathLike[str]


class FindCache:
    """Thread-safe map from a search key to the path it last resolved to.

    Entries are only dropped when they go stale (the cached file is no longer
    readable) or when the cache is cleared explicitly.
    """

    def __init__(self) -> None:
        self._store: dict[str, str] = {}
        self._lock = Lock()

    @staticmethod
    def key_for(directory: str, names: Sequence[str]) -> str:
        """Return the cache key for a search of ``names`` from ``directory``."""
        return f"{directory}:{','.join(names)}"

    def get(self, key: str) -> str | None:
        with self._lock:
            return self._store.get(key)

    def set(self, key: str, path: str) -> None:
        with self._lock:
            self._store[key] = path

    def invalidate(self, key: str) -> None:
        """Drop ``key`` if present."""
        with self._lock:
            self._store.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._store.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._store


FIND_CACHE: Final[FindCache] = FindCache()


def _validate_find(directory: PathInput, names: NameInput) -> tuple[str, tuple[str, ...]]:
    """Return ``directory`` as text and ``names`` as a tuple, rejecting bad input.

    Raises:
        InvalidArgumentError: If ``directory`` is empty or not path-like, or
            ``names`` is empty or holds anything but non-empty strings.
    """

    if isinstance(directory, os.PathLike):
        directory = os.fspath(directory)
    if not isinstance(directory, str) or not directory:
        raise InvalidArgumentError("Invalid or no `directory` provided")

    if isinstance(names, str):
        candidates: tuple[object, ...] = (names,)
    elif isinstance(names, Sequence) and not isinstance(names, (bytes, bytearray)):
        candidates = tuple(names)
    else:
        raise InvalidArgumentError("Invalid or no `name` provided")
    if not candidates or not all(isinstance(name, str) and name for name in candidates):
        raise InvalidArgumentError("Invalid or no `name` provided")
    return directory, tuple(str(name) for name in candidates)


def _iter_search_dirs(directory: str) -> Iterator[Path]:
    start = Path(directory).absolute()
    yield start
    yield from start.parents


def _is_readable(path: str | Path) -> bool:
    return os.access(path, os.R_OK)


def _search(directory: str, names: tuple[str, ...]) -> str | None:
    for current in _iter_search_dirs(directory):
        for name in names:
            candidate = current / name
            if _is_readable(candidate):
                return str(candidate)
    return None


def find(directory: PathInput, names: NameInput) -> str | None:
    """Return the nearest readable ``names`` entry in ``directory`` or its ancestors.

    Args:
        directory: Directory where the search starts.
        names: One file name, or several tried in order within each directory.

    Returns:
        str | None: Absolute path of the first match, ``None`` when the root is
        reached without one.

    Raises:
        InvalidArgumentError: If ``directory`` or ``names`` is malformed.
    """

    start, candidates = _validate_find(directory, names)
    return _search(start, candidates)


def find_cached(directory: PathInput, names: NameInput, *, cache: FindCache = FIND_CACHE) -> str | None:
    """Behave like :func:`find` while remembering successful lookups.

    A remembered path is reused as long as it stays readable; a stale entry is
    invalidated and the search runs again. Disabling the cache through
    :class:`~linterkit.config.Settings` turns this into a plain :func:`find`.
    """

    start, candidates = _validate_find(directory, names)
    if not get_settings().find_cache_enabled:
        return _search(start, candidates)

    key = FindCache.key_for(start, candidates)
    cached = cache.get(key)
    if cached is not None:
        if _is_readable(cached):
            LOGGER.debug("find cache hit for %s -> %s", key, cached)
            return cached
        LOGGER.debug("find cache entry for %s went stale: %s", key, cached)
        cache.invalidate(key)

    found = _search(start, candidates)
    if found is not None:
        cache.set(key, found)
    return found


async def find_async(directory: PathInput, names: NameInput) -> str | None:
    """Coroutine form of :func:`find`; filesystem probes run in a worker thread."""

    start, candidates = _validate_find(directory, names)
    return await asyncio.to_thread(_search, start, candidates)


async def find_cached_async(
    directory: PathInput,
    names: NameInput,
    *,
    cache: FindCache = FIND_CACHE,
) -> str | None:
    """Coroutine form of :func:`find_cached`."""

    _validate_find(directory, names)
    return await asyncio.to_thread(find_cached, directory, names, cache=cache)


__all__ = [
    "FIND_CACHE",
    "FindCache",
    "find",
    "find_async",
    "find_cached",
    "find_cached_async",
]
