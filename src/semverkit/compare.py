# SPDX-License-Identifier: MIT
"""Version precedence following SemVer 2.0.0 section 11.

Numeric identifiers have lower precedence than alphanumeric ones.
Build metadata is ignored in comparisons.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from .grammar import is_numeric_identifier

if TYPE_CHECKING:
    from .semver import Version


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def compare_identifiers(id1: str, id2: str) -> int:
    """Compare two prerelease identifiers.

    Returns:
        -1 if id1 < id2
        0 if id1 == id2
        1 if id1 > id2
    """
    is_num1 = is_numeric_identifier(id1)
    is_num2 = is_numeric_identifier(id2)

    if is_num1 and is_num2:
        return _sign(int(id1) - int(id2))
    if is_num1:
        # Numeric < alphanumeric regardless of value
        return -1
    if is_num2:
        return 1
    # Python str comparison is by code point, i.e. ASCII order here
    return (id1 > id2) - (id1 < id2)


def compare_prerelease(pre1: Sequence[str], pre2: Sequence[str]) -> int:
    """Compare two prerelease identifier sequences.

    An empty sequence means "no prerelease", which has higher precedence
    than any prerelease (1.0.0 > 1.0.0-alpha).
    """
    if not pre1 and not pre2:
        return 0
    if not pre1:
        return 1
    if not pre2:
        return -1

    for id1, id2 in zip(pre1, pre2):
        result = compare_identifiers(id1, id2)
        if result:
            return result

    # All compared identifiers equal - longer sequence has higher precedence
    return _sign(len(pre1) - len(pre2))


def compare_precedence(v1: Version, v2: Version) -> int:
    """Compare two versions by SemVer precedence.

    Returns:
        -1 if v1 < v2
        0 if v1 == v2
        1 if v1 > v2
    """
    for attr in ("major", "minor", "patch"):
        val1 = getattr(v1, attr)
        val2 = getattr(v2, attr)
        if val1 != val2:
            return -1 if val1 < val2 else 1

    return compare_prerelease(v1.prerelease, v2.prerelease)


def precedence_key(v: Version) -> tuple:
    """Return a tuple that orders exactly like ``compare_precedence``.

    Numeric identifiers map to ``(0, n, "")`` and alphanumeric ones to
    ``(1, 0, s)`` so that tuple ordering reproduces identifier precedence,
    and a shorter prefix sorts first.
    """
    if not v.prerelease:
        prerelease_key: tuple = (1,)
    else:
        parts = []
        for identifier in v.prerelease:
            if is_numeric_identifier(identifier):
                parts.append((0, int(identifier), ""))
            else:
                parts.append((1, 0, identifier))
        prerelease_key = (0, tuple(parts))

    return (v.major, v.minor, v.patch, prerelease_key)
