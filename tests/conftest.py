# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from linterkit.config import ENV_EXEC_TIMEOUT, ENV_FIND_CACHE, ENV_TEMP_PREFIX, reset_settings
from linterkit.finder import FIND_CACHE


@pytest.fixture(autouse=True)
def isolated_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start every test with default settings and an empty find cache."""
    for name in (ENV_TEMP_PREFIX, ENV_EXEC_TIMEOUT, ENV_FIND_CACHE):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    FIND_CACHE.clear()
    yield
    reset_settings()
    FIND_CACHE.clear()
