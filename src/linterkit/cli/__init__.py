# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typer application exposing linterkit on the command line."""

from __future__ import annotations

from .app import app

__all__ = ["app"]
