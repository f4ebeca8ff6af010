# SPDX-License-Identifier: MIT
"""Regular grammar for Semantic Versioning 2.0.0 strings.

All patterns are meant to be used with ``fullmatch``; none of them are
anchored themselves so they can be composed into larger expressions.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

VERSION_SEPARATOR = "."
IDENTIFIER_SEPARATOR = "."
PRERELEASE_SEPARATOR = "-"
BUILD_SEPARATOR = "+"

# Non-negative decimal integer without leading zeros
NUMERIC_REGEX = r"0|[1-9][0-9]*"

# Numeric identifier, or an alphanumeric identifier with at least one non-digit.
# Hyphens are allowed after the first non-digit too (SemVer 2.0.0 accepts "x-y-z").
IDENTIFIER_REGEX = rf"(?:{NUMERIC_REGEX})|(?:[0-9]*[A-Za-z-][0-9A-Za-z-]*)"

IDENTIFIER_LIST_REGEX = rf"(?:{IDENTIFIER_REGEX})(?:\.(?:{IDENTIFIER_REGEX}))*"

NUMERIC_PATTERN = re.compile(NUMERIC_REGEX)
IDENTIFIER_PATTERN = re.compile(IDENTIFIER_REGEX)

# Groups: major, minor, patch, prerelease, build. The prerelease and build
# groups never include their leading "-" / "+".
SEMVER_PATTERN = re.compile(
    rf"(?P<major>{NUMERIC_REGEX})"
    rf"\.(?P<minor>{NUMERIC_REGEX})"
    rf"\.(?P<patch>{NUMERIC_REGEX})"
    rf"(?:-(?P<prerelease>{IDENTIFIER_LIST_REGEX}))?"
    rf"(?:\+(?P<build>{IDENTIFIER_LIST_REGEX}))?"
)


def is_numeric_identifier(identifier: str) -> bool:
    """Return True if ``identifier`` is a numeric identifier (no leading zeros)."""
    return NUMERIC_PATTERN.fullmatch(identifier) is not None


def is_valid_identifier(identifier: str) -> bool:
    """Return True if ``identifier`` is a valid prerelease or build identifier."""
    if not isinstance(identifier, str):
        return False
    return IDENTIFIER_PATTERN.fullmatch(identifier) is not None


def split_identifiers(value: str) -> list[str]:
    """Split a dot-separated identifier string.

    No validation is done; ``"alpha..1"`` yields an empty identifier which
    the Version constructor will later reject.
    """
    return value.split(IDENTIFIER_SEPARATOR)


def join_identifiers(identifiers: Iterable[str]) -> str:
    return IDENTIFIER_SEPARATOR.join(identifiers)
