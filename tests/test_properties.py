# SPDX-License-Identifier: MIT
"""Property-based tests for parsing and precedence.

These tests verify that:
- Canonical strings round-trip through the parser
- Precedence is a total order that ignores build metadata
- version_key sorts exactly like the comparator
- Equal versions hash equal
"""

from __future__ import annotations

from hypothesis import given, settings, strategies as st

from semverkit import (
    Version,
    VersionBuilder,
    compare_versions,
    is_valid_semver,
    parse_version,
    version_key,
)
from semverkit.compare import compare_precedence


# =============================================================================
# Strategies for generating test data
# =============================================================================

numbers = st.integers(min_value=0, max_value=10**20)

numeric_identifiers = st.integers(min_value=0, max_value=10**20).map(str)

alphanumeric_identifiers = st.from_regex(r"[0-9]{0,3}[A-Za-z-][0-9A-Za-z-]{0,6}", fullmatch=True)

identifiers = st.one_of(numeric_identifiers, alphanumeric_identifiers)

# Small alphabet so that shared prefixes and ties actually occur
tie_prone_identifiers = st.sampled_from(["0", "1", "2", "10", "a", "b", "alpha", "beta", "rc"])


@st.composite
def versions(draw, identifier_strategy=identifiers, number_strategy=numbers):
    """Generate a valid Version."""
    return Version(
        draw(number_strategy),
        draw(number_strategy),
        draw(number_strategy),
        draw(st.lists(identifier_strategy, max_size=4)),
        draw(st.lists(identifiers, max_size=3)),
    )


small_numbers = st.integers(min_value=0, max_value=2)
tie_prone_versions = versions(identifier_strategy=tie_prone_identifiers, number_strategy=small_numbers)


# =============================================================================
# Round trip
# =============================================================================


@given(versions())
@settings(max_examples=200)
def test_canonical_string_round_trips(version):
    text = str(version)
    assert is_valid_semver(text)
    parsed = parse_version(text)
    assert parsed == version
    assert parsed.prerelease == version.prerelease
    assert parsed.build == version.build
    assert str(parsed) == text


@given(numbers, numbers, numbers, st.lists(identifiers, max_size=4), st.lists(identifiers, max_size=3))
def test_builder_round_trips(major, minor, patch, prerelease, build):
    version = VersionBuilder(major, minor, patch).add_prereleases(prerelease).add_builds(build).build()
    assert compare_versions(parse_version(str(version)), version) == 0


# =============================================================================
# Total order
# =============================================================================


@given(tie_prone_versions)
def test_reflexive(a):
    assert compare_precedence(a, a) == 0
    assert a == a


@given(tie_prone_versions, tie_prone_versions)
@settings(max_examples=300)
def test_antisymmetric(a, b):
    assert compare_precedence(a, b) == -compare_precedence(b, a)
    assert compare_precedence(a, b) in (-1, 0, 1)


@given(tie_prone_versions, tie_prone_versions, tie_prone_versions)
@settings(max_examples=300)
def test_transitive(a, b, c):
    ab = compare_precedence(a, b)
    bc = compare_precedence(b, c)
    if ab <= 0 and bc <= 0:
        assert compare_precedence(a, c) <= 0
    if ab >= 0 and bc >= 0:
        assert compare_precedence(a, c) >= 0


@given(tie_prone_versions, tie_prone_versions)
@settings(max_examples=300)
def test_version_key_agrees_with_comparator(a, b):
    key_a, key_b = version_key(a), version_key(b)
    expected = (key_a > key_b) - (key_a < key_b)
    assert compare_precedence(a, b) == expected


# =============================================================================
# Build metadata
# =============================================================================


@given(tie_prone_versions, st.lists(identifiers, max_size=3))
def test_build_metadata_ignored(a, build):
    b = Version(a.major, a.minor, a.patch, a.prerelease, build)
    assert a == b
    assert hash(a) == hash(b)
    assert not a < b and not b < a


@given(tie_prone_versions, tie_prone_versions)
def test_equal_implies_equal_hash(a, b):
    if a == b:
        assert hash(a) == hash(b)


@given(tie_prone_versions)
def test_prerelease_is_lower_than_release(a):
    release = Version(a.major, a.minor, a.patch)
    if a.prerelease:
        assert a < release
    else:
        assert a == release
