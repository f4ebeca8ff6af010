# SPDX-License-Identifier: MIT
"""Tests for serialization identifiers."""

import hashlib

import pytest

from semverkit import Version, VersionBuilder, parse_version, serial


class Unversioned:
    pass


class TestSerial:
    """Tests for serial()."""

    def test_deterministic(self):
        assert serial(Version) == serial(Version)

    def test_known_value(self):
        """Test that the id only depends on the package version and the name."""
        name_digest = int.from_bytes(
            hashlib.sha256(b"semverkit.semver.Version").digest()[:8], "big"
        )
        expected = (hash(parse_version("0.1.0")) * name_digest) % (2**63 - 1)
        assert serial(Version) == expected

    def test_differs_per_class(self):
        assert serial(Version) != serial(VersionBuilder)

    def test_fits_signed_64_bits(self):
        assert 0 <= serial(Version) < 2**63

    def test_unversioned_package(self):
        with pytest.raises(LookupError):
            serial(Unversioned)
