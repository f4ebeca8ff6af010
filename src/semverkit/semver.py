# SPDX-License-Identifier: MIT
"""Semantic version parsing and the immutable Version value.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -0.3.7, -x.7.z.92
- Build metadata: +build, +build.123, +20240101

Equality and ordering follow SemVer precedence, so build metadata never
affects ``==``, ``<`` or ``hash()``.
"""

from __future__ import annotations

import hashlib
from collections.abc import Iterable
from dataclasses import dataclass
from functools import cached_property, total_ordering
from typing import Optional, Union

from .compare import compare_precedence, precedence_key
from .grammar import (
    BUILD_SEPARATOR,
    PRERELEASE_SEPARATOR,
    SEMVER_PATTERN,
    VERSION_SEPARATOR,
    is_valid_identifier,
    join_identifiers,
    split_identifiers,
)

IdentifiersInput = Union[str, Iterable[str], None]


class VersionFormatError(ValueError):
    """Raised when a version string does not follow semantic versioning."""

    def __init__(self, version: Optional[str], message: str = ""):
        self.version = version
        self.message = message or f"Invalid semantic version: {version!r}"
        super().__init__(self.message)


class MissingVersionError(VersionFormatError):
    """Raised when no version string was given at all."""

    def __init__(self, message: str = "Version string is missing"):
        super().__init__(None, message)


class InvalidVersionError(ValueError):
    """Raised when a Version is constructed from out-of-range fields."""

    def __init__(self, field: str, value: object, message: str = ""):
        self.field = field
        self.value = value
        self.message = message or f"Invalid {field} for a semantic version: {value!r}"
        super().__init__(self.message)


def _check_number(field: str, value: object) -> int:
    # bool is an int subclass but never a meaningful version number
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidVersionError(field, value, f"{field} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise InvalidVersionError(field, value, f"{field} must not be negative, got {value}")
    return value


def _check_identifiers(field: str, value: IdentifiersInput) -> tuple[str, ...]:
    if value is None:
        return ()
    identifiers = split_identifiers(value) if isinstance(value, str) else list(value)
    for identifier in identifiers:
        if not is_valid_identifier(identifier):
            raise InvalidVersionError(field, identifier)
    return tuple(identifiers)


@total_ordering
@dataclass(frozen=True, eq=False)
class Version:
    """Represents a semantic version.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release identifiers, e.g. ("alpha", "1"); empty for a release
        build: Build metadata identifiers, e.g. ("build", "123")

    ``prerelease`` and ``build`` may also be given as a dot-separated string
    or ``None``; they are always stored as tuples.

    Raises:
        InvalidVersionError: If a number is negative or an identifier is invalid
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...] = ()
    build: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        for attr in ("major", "minor", "patch"):
            _check_number(attr, getattr(self, attr))
        object.__setattr__(self, "prerelease", _check_identifiers("prerelease", self.prerelease))
        object.__setattr__(self, "build", _check_identifiers("build", self.build))

    @cached_property
    def prerelease_string(self) -> str:
        """Dot-separated pre-release identifiers without the leading '-'."""
        return join_identifiers(self.prerelease)

    @cached_property
    def build_string(self) -> str:
        """Dot-separated build identifiers without the leading '+'."""
        return join_identifiers(self.build)

    @cached_property
    def _canonical(self) -> str:
        version = self.base_version
        if self.prerelease:
            version += PRERELEASE_SEPARATOR + self.prerelease_string
        if self.build:
            version += BUILD_SEPARATOR + self.build_string
        return version

    @cached_property
    def _prerelease_digest(self) -> int:
        digest = hashlib.sha256(self.prerelease_string.encode("ascii")).digest()
        return int.from_bytes(digest[:8], "big")

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        return self._canonical

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_precedence(self, other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_precedence(self, other) < 0

    def __hash__(self) -> int:
        # Precedence-equal versions have identical prerelease identifiers, and
        # hashing only ints keeps the value stable across interpreter runs.
        return hash((self.major, self.minor, self.patch, self._prerelease_digest))

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def has_build(self) -> bool:
        """Return True if this version carries build metadata."""
        return bool(self.build)

    @property
    def is_stable(self) -> bool:
        """Return True if this version denotes a stable public API.

        Versions below 1.0.0 and pre-releases may change at any time.
        """
        return self.major >= 1 and not self.prerelease

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return VERSION_SEPARATOR.join(str(n) for n in (self.major, self.minor, self.patch))


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    The whole string must match; surrounding whitespace is not accepted.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build])

    Returns:
        A Version object with parsed components

    Raises:
        MissingVersionError: If ``version_string`` is None
        VersionFormatError: If the string does not follow semantic versioning

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease=(), build=())

        >>> parse_version("1.0.0-alpha.1")
        Version(major=1, minor=0, patch=0, prerelease=('alpha', '1'), build=())

        >>> str(parse_version("2.0.0-rc.1+build.456"))
        '2.0.0-rc.1+build.456'
    """
    if version_string is None:
        raise MissingVersionError()
    if not isinstance(version_string, str):
        raise VersionFormatError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    match = SEMVER_PATTERN.fullmatch(version_string)
    if not match:
        raise VersionFormatError(version_string)

    return Version(
        major=int(match.group("major")),
        minor=int(match.group("minor")),
        patch=int(match.group("patch")),
        prerelease=match.group("prerelease"),
        build=match.group("build"),
    )


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("1.0.0-01")
        False
    """
    if not isinstance(version_string, str):
        return False
    return SEMVER_PATTERN.fullmatch(version_string) is not None


def _coerce(version: Union[str, Version]) -> Version:
    return version if isinstance(version, Version) else parse_version(version)


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two semantic versions by precedence.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        VersionFormatError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0-alpha", "1.0.0-alpha.1")
        -1
        >>> compare_versions("1.0.0-1", "1.0.0-alpha")
        -1
        >>> compare_versions("1.0.0+build.1", "1.0.0")
        0
    """
    return compare_precedence(_coerce(version1), _coerce(version2))


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    Examples:
        >>> sorted(["1.0.0", "1.0.0-beta.11", "1.0.0-beta.2"], key=version_key)
        ['1.0.0-beta.2', '1.0.0-beta.11', '1.0.0']
    """
    return precedence_key(_coerce(version))


# The revision of the Semantic Versioning specification implemented here
SEMVER_VERSION = parse_version("2.0.0")
