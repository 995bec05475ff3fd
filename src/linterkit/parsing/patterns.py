# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
r"""Compile caller supplied diagnostic patterns into reusable global matchers.

Patterns are written with the regex flag alphabet editors commonly expose
(``g``, ``i``, ``m``, ``s``, ``u``, ``x``, ``y``) and may spell named groups as
either ``(?P<name>...)`` or ``(?<name>...)``. Global matching is always on:
callers cannot opt out of receiving every match. Without ``u`` the shorthand
classes (``\d``, ``\w``, ``\s``, ``\b``) match ASCII only.

Only the flags and the group syntax are translated; everything else keeps
Python ``re`` semantics. In particular ``$`` without ``m`` also matches just
before a trailing newline, so anchor with ``\Z`` to require the very end.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final

from ..errors import InvalidPatternError

GLOBAL_FLAG: Final[str] = "g"
STICKY_FLAG: Final[str] = "y"
UNICODE_FLAG: Final[str] = "u"

FLAG_BITS: Final[Mapping[str, re.RegexFlag]] = MappingProxyType(
    {
        GLOBAL_FLAG: re.NOFLAG,
        "i": re.IGNORECASE,
        "m": re.MULTILINE,
        "s": re.DOTALL,
        UNICODE_FLAG: re.UNICODE,
        "x": re.VERBOSE,
        STICKY_FLAG: re.NOFLAG,
    }
)

# Escapes and character classes are consumed whole so ``\(?<`` and ``[(?<]``
# never look like a group opener.
_NAMED_GROUP_TOKENS: Final[re.Pattern[str]] = re.compile(
    r"\\.|\[\^?\]?(?:\\.|[^\]\\])*\]|\(\?<(?![=!])",
    re.DOTALL,
)
_NAMED_GROUP_OPENER: Final[str] = "(?<"


def normalize_flags(flags: str) -> str:
    """Return ``flags`` with global matching appended when it is missing."""

    return flags if GLOBAL_FLAG in flags else f"{flags}{GLOBAL_FLAG}"


def translate_named_groups(pattern: str) -> str:
    """Rewrite ``(?<name>...)`` group openers to Python's ``(?P<name>...)`` form.

    Lookbehind assertions, escaped parentheses and character class contents
    pass through untouched.
    """

    return _NAMED_GROUP_TOKENS.sub(_rewrite_group_token, pattern)


def _rewrite_group_token(match: re.Match[str]) -> str:
    token = match.group()
    return "(?P<" if token == _NAMED_GROUP_OPENER else token


def _flag_bits(pattern: str, flags: str) -> tuple[re.RegexFlag, bool]:
    """Translate ``flags`` into ``re`` flag bits and the sticky marker.

    Raises:
        InvalidPatternError: If ``flags`` holds an unknown or repeated character.
    """

    bits = re.NOFLAG
    seen: set[str] = set()
    for char in flags:
        if char not in FLAG_BITS:
            raise InvalidPatternError(f"Invalid regex flag {char!r} in {flags!r}", pattern=pattern, flags=flags)
        if char in seen:
            raise InvalidPatternError(f"Duplicate regex flag {char!r} in {flags!r}", pattern=pattern, flags=flags)
        seen.add(char)
        bits |= FLAG_BITS[char]
    if UNICODE_FLAG not in seen:
        bits |= re.ASCII
    return bits, STICKY_FLAG in seen


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """Compiled matcher that walks every non-overlapping match in a text."""

    source: str
    flags: str
    regex: re.Pattern[str]
    sticky: bool = False

    @property
    def group_names(self) -> tuple[str, ...]:
        """Return the named groups declared by the pattern, in declaration order."""
        return tuple(self.regex.groupindex)

    def find_next(self, data: str, position: int) -> re.Match[str] | None:
        """Return the first match at or after ``position``.

        Sticky patterns only match when the match begins exactly at ``position``.
        """

        if self.sticky:
            return self.regex.match(data, position)
        return self.regex.search(data, position)

    def iter_matches(self, data: str) -> Iterator[re.Match[str]]:
        """Yield matches from left to right until the text is exhausted.

        Each call keeps its own search position. An empty match moves the
        position forward by one character.
        """

        position = 0
        limit = len(data)
        while position <= limit:
            match = self.find_next(data, position)
            if match is None:
                return
            yield match
            start, end = match.span()
            position = end + 1 if end == start else end


class PatternCompiler:
    """Turn pattern text plus a flag string into a :class:`CompiledPattern`."""

    def compile(self, pattern: str, flags: str = "") -> CompiledPattern:
        """Compile ``pattern`` with global matching forced on.

        Args:
            pattern: Regular expression with named capture groups.
            flags: Flag characters requested by the caller.

        Returns:
            CompiledPattern: Matcher ready to iterate over tool output.

        Raises:
            InvalidPatternError: If the flags are invalid or the pattern does not compile.
        """

        normalized = normalize_flags(flags)
        bits, sticky = _flag_bits(pattern, normalized)
        try:
            regex = re.compile(translate_named_groups(pattern), bits)
        except re.error as exc:
            raise InvalidPatternError(
                f"Invalid pattern {pattern!r}: {exc}",
                pattern=pattern,
                flags=flags,
            ) from exc
        return CompiledPattern(source=pattern, flags=normalized, regex=regex, sticky=sticky)


DEFAULT_COMPILER: Final[PatternCompiler] = PatternCompiler()


__all__ = [
    "DEFAULT_COMPILER",
    "FLAG_BITS",
    "CompiledPattern",
    "PatternCompiler",
    "normalize_flags",
    "translate_named_groups",
]
