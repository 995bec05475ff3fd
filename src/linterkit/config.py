# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Library-wide settings loaded from the process environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from threading import Lock
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError

ENV_TEMP_PREFIX: Final[str] = "LINTERKIT_TEMP_PREFIX"
ENV_EXEC_TIMEOUT: Final[str] = "LINTERKIT_EXEC_TIMEOUT"
ENV_FIND_CACHE: Final[str] = "LINTERKIT_FIND_CACHE"

TRUTHY_LITERALS: Final[set[str]] = {"1", "true", "yes", "on"}
FALSY_LITERALS: Final[set[str]] = {"0", "false", "no", "off"}


def coerce_bool_literal(value: str) -> bool:
    """Return the boolean represented by ``value`` or raise ``ValueError``.

    Args:
        value: Raw string containing a boolean literal.

    Returns:
        bool: ``True`` for truthy literals, ``False`` for falsy literals.

    Raises:
        ValueError: If ``value`` does not match a known boolean literal.
    """

    normalized = value.strip().lower()
    if normalized in TRUTHY_LITERALS:
        return True
    if normalized in FALSY_LITERALS:
        return False
    raise ValueError(f"Unsupported boolean literal: {value!r}")


class Settings(BaseModel):
    """Tunables shared by the finder, temp file and process helpers."""

    model_config = ConfigDict(frozen=True)

    temp_prefix: str = Field(default="linterkit_", min_length=1)
    exec_timeout: float | None = Field(default=None, ge=0)
    find_cache_enabled: bool = True

    @field_validator("temp_prefix")
    @classmethod
    def _reject_separators(cls, value: str) -> str:
        """Keep the prefix a plain name so temp directories stay in the temp root."""
        if os.sep in value or (os.altsep and os.altsep in value):
            raise ValueError("temp_prefix must not contain path separators")
        return value


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build :class:`Settings` from environment variables.

    Args:
        environ: Mapping used instead of :data:`os.environ` when provided.

    Returns:
        Settings: Validated settings; unset variables keep their defaults.

    Raises:
        ConfigError: If a variable holds a value that cannot be interpreted.
    """

    env = os.environ if environ is None else environ
    values: dict[str, object] = {}

    prefix = env.get(ENV_TEMP_PREFIX)
    if prefix is not None:
        values["temp_prefix"] = prefix

    timeout = env.get(ENV_EXEC_TIMEOUT, "").strip()
    if timeout:
        try:
            values["exec_timeout"] = float(timeout)
        except ValueError as exc:
            raise ConfigError(f"{ENV_EXEC_TIMEOUT} must be a number, got {timeout!r}") from exc

    cache_flag = env.get(ENV_FIND_CACHE, "").strip()
    if cache_flag:
        try:
            values["find_cache_enabled"] = coerce_bool_literal(cache_flag)
        except ValueError as exc:
            raise ConfigError(f"{ENV_FIND_CACHE}: {exc}") from exc

    try:
        return Settings.model_validate(values)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


_SETTINGS: Settings | None = None
_SETTINGS_LOCK = Lock()


def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first access."""

    global _SETTINGS
    with _SETTINGS_LOCK:
        if _SETTINGS is None:
            _SETTINGS = load_settings()
        return _SETTINGS


def reset_settings() -> None:
    """Forget the cached settings so the next access reloads the environment."""

    global _SETTINGS
    with _SETTINGS_LOCK:
        _SETTINGS = None


__all__ = [
    "ENV_EXEC_TIMEOUT",
    "ENV_FIND_CACHE",
    "ENV_TEMP_PREFIX",
    "Settings",
    "coerce_bool_literal",
    "get_settings",
    "load_settings",
    "reset_settings",
]
