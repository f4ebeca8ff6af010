# SPDX-License-Identifier: MIT
"""Semantic Versioning 2.0.0 parsing, precedence and construction.

Example:
    >>> from semverkit import parse_version, compare_versions, VersionBuilder
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease
    ('alpha', '1')
    >>>
    >>> compare_versions("1.0.0-1", "1.0.0-alpha")
    -1
    >>>
    >>> str(VersionBuilder.from_version(version).bump_patch().build())
    '1.2.4-alpha.1+build.456'
"""

__version__ = "0.1.0"

from .semver import (
    Version,
    parse_version,
    is_valid_semver,
    compare_versions,
    version_key,
    VersionFormatError,
    MissingVersionError,
    InvalidVersionError,
    SEMVER_VERSION,
)
from .grammar import (
    SEMVER_PATTERN,
    IDENTIFIER_PATTERN,
    NUMERIC_PATTERN,
)
from .compare import (
    compare_identifiers,
    compare_prerelease,
    compare_precedence,
)
from .builder import VersionBuilder
from .config import LookupConfig
from .lookup import (
    VersionSource,
    MetadataVersionSource,
    get_version,
)
from .serial import serial

__all__ = [
    # Version parsing
    "Version",
    "parse_version",
    "is_valid_semver",
    "VersionFormatError",
    "MissingVersionError",
    "InvalidVersionError",
    "SEMVER_VERSION",
    "SEMVER_PATTERN",
    "IDENTIFIER_PATTERN",
    "NUMERIC_PATTERN",
    # Version comparison
    "compare_versions",
    "version_key",
    "compare_identifiers",
    "compare_prerelease",
    "compare_precedence",
    # Construction
    "VersionBuilder",
    # Package metadata
    "LookupConfig",
    "VersionSource",
    "MetadataVersionSource",
    "get_version",
    "serial",
]
