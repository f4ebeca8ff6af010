# SPDX-License-Identifier: MIT
"""Incremental construction of Version objects.

Example:
    >>> from semverkit import VersionBuilder, parse_version
    >>> builder = VersionBuilder.from_version(parse_version("1.2.3-beta"))
    >>> str(builder.bump_minor().clear_prerelease().build())
    '1.3.0'
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Union

from .grammar import split_identifiers
from .semver import Version


def _identifier_list(value: Union[str, Iterable[str], None]) -> list[str]:
    # A plain string is dot-separated, as for the Version constructor
    if value is None:
        return []
    if isinstance(value, str):
        return split_identifiers(value)
    return list(value)


class VersionBuilder:
    """Mutable scratch space for producing Version objects.

    Setters and append methods do not validate their input. Invalid state
    only surfaces when ``build()`` constructs the Version, which raises
    InvalidVersionError.

    Every mutator returns the builder so calls can be chained. A builder is
    never consumed by ``build()``; it may be built repeatedly and keeps
    changing independently of the versions it produced.
    """

    def __init__(
        self,
        major: int = 0,
        minor: int = 0,
        patch: int = 0,
        prerelease: Union[str, Iterable[str], None] = None,
        build: Union[str, Iterable[str], None] = None,
    ):
        self.major = major
        self.minor = minor
        self.patch = patch
        self.prerelease: list[str] = _identifier_list(prerelease)
        self.build_metadata: list[str] = _identifier_list(build)

    @classmethod
    def from_version(cls, version: Version) -> VersionBuilder:
        """Create a builder holding the fields of ``version``."""
        return cls(version.major, version.minor, version.patch, version.prerelease, version.build)

    @classmethod
    def from_builder(cls, builder: VersionBuilder) -> VersionBuilder:
        """Create an independent copy of ``builder``."""
        return cls(builder.major, builder.minor, builder.patch, builder.prerelease, builder.build_metadata)

    def copy(self) -> VersionBuilder:
        return self.from_builder(self)

    __copy__ = copy

    def __repr__(self) -> str:
        return (
            f"VersionBuilder(major={self.major!r}, minor={self.minor!r}, patch={self.patch!r}, "
            f"prerelease={self.prerelease!r}, build={self.build_metadata!r})"
        )

    # Numbers

    def set_major(self, major: int) -> VersionBuilder:
        self.major = major
        return self

    def set_minor(self, minor: int) -> VersionBuilder:
        self.minor = minor
        return self

    def set_patch(self, patch: int) -> VersionBuilder:
        self.patch = patch
        return self

    def bump_major(self) -> VersionBuilder:
        """Increment major and reset minor and patch to zero.

        Pre-release and build identifiers are left untouched.
        """
        self.major += 1
        self.minor = 0
        self.patch = 0
        return self

    def bump_minor(self) -> VersionBuilder:
        """Increment minor and reset patch to zero.

        Pre-release and build identifiers are left untouched.
        """
        self.minor += 1
        self.patch = 0
        return self

    def bump_patch(self) -> VersionBuilder:
        """Increment patch. Pre-release and build identifiers are left untouched."""
        self.patch += 1
        return self

    # Identifiers

    def add_prerelease(self, *values: str) -> VersionBuilder:
        """Append pre-release identifiers, splitting each value on '.'.

        ``add_prerelease("alpha.1")`` appends ``"alpha"`` and ``"1"``.
        """
        for value in values:
            self.prerelease.extend(split_identifiers(value))
        return self

    def add_prereleases(self, identifiers: Iterable[str]) -> VersionBuilder:
        """Append pre-release identifiers as given, without splitting."""
        self.prerelease.extend(identifiers)
        return self

    def clear_prerelease(self) -> VersionBuilder:
        self.prerelease.clear()
        return self

    def add_build(self, *values: str) -> VersionBuilder:
        """Append build identifiers, splitting each value on '.'."""
        for value in values:
            self.build_metadata.extend(split_identifiers(value))
        return self

    def add_builds(self, identifiers: Iterable[str]) -> VersionBuilder:
        """Append build identifiers as given, without splitting."""
        self.build_metadata.extend(identifiers)
        return self

    def clear_build(self) -> VersionBuilder:
        self.build_metadata.clear()
        return self

    def build(self) -> Version:
        """Return a new Version reflecting the builder's current state.

        Raises:
            InvalidVersionError: If any field is out of range
        """
        return Version(self.major, self.minor, self.patch, tuple(self.prerelease), tuple(self.build_metadata))
