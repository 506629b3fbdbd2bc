"""
Tests for semverkit.versioning.compare module.

Tests precedence ordering including:
- Major/minor/patch ordering
- Pre-release chains from the SemVer 2.0.0 document
- Natural ordering of identifiers sharing a prefix
- Build metadata irrelevance
"""

from __future__ import annotations

import random

import pytest

from semverkit.versioning import compare_identifiers, compare_versions, parse_version


def _cmp(a: str, b: str) -> int:
    return compare_versions(parse_version(a), parse_version(b))


class TestCoreOrdering:
    """Tests for major.minor.patch ordering."""

    @pytest.mark.parametrize(
        "lower, higher",
        [
            ("1.1.9", "1.2.0"),
            ("1.9.9", "2.0.0"),
            ("1.9.0", "1.10.0"),
            ("1.0.9", "1.0.10"),
            ("0.0.0", "0.0.1"),
        ],
    )
    def test_numeric_components(self, lower, higher):
        """Test that components compare as integers, not text."""
        assert _cmp(lower, higher) == -1
        assert _cmp(higher, lower) == 1

    def test_equal_versions(self):
        """Test that identical versions compare equal."""
        assert _cmp("1.2.3-rc.1", "1.2.3-rc.1") == 0


class TestPrereleaseOrdering:
    """Tests for pre-release precedence."""

    def test_release_outranks_prerelease(self):
        """Test that 1.0.0-rc.1 < 1.0.0."""
        assert _cmp("1.0.0-rc.1", "1.0.0") == -1
        assert _cmp("1.0.0", "1.0.0-rc.1") == 1

    def test_semver_precedence_chain(self):
        """Test the example chain from the SemVer document."""
        chain = [
            "1.0.0-alpha",
            "1.0.0-alpha.1",
            "1.0.0-alpha.beta",
            "1.0.0-beta",
            "1.0.0-beta.2",
            "1.0.0-beta.11",
            "1.0.0-rc.1",
            "1.0.0",
        ]
        for lower, higher in zip(chain, chain[1:]):
            assert _cmp(lower, higher) == -1, f"{lower} < {higher}"
            assert _cmp(higher, lower) == 1, f"{higher} > {lower}"

    def test_shorter_prerelease_is_lower(self):
        """Test that a prefix of identifiers sorts first."""
        assert _cmp("1.0.0-alpha", "1.0.0-alpha.0") == -1

    def test_numeric_identifier_below_alphanumeric(self):
        """Test that numeric identifiers sort below alphanumeric ones."""
        assert _cmp("1.0.0-1", "1.0.0-alpha") == -1

    @pytest.mark.parametrize(
        "numeric, alphanumeric",
        [("10", "2a"), ("2", "10a"), ("1", "1a"), ("99", "rc1")],
    )
    def test_numeric_identifier_below_digit_bearing_alphanumeric(
        self, numeric, alphanumeric
    ):
        """Test that the natural tie-break never applies to a numeric identifier."""
        assert compare_identifiers(numeric, alphanumeric) == -1
        assert compare_identifiers(alphanumeric, numeric) == 1

    def test_numeric_prerelease_below_digit_bearing_alphanumeric(self):
        """Test 1.0.0-10 sorts before 1.0.0-2a."""
        assert _cmp("1.0.0-10", "1.0.0-2a") == -1
        assert _cmp("1.0.0-2a", "1.0.0-10") == 1


class TestNaturalOrdering:
    """Tests for the natural tie-break between similar identifiers."""

    @pytest.mark.parametrize(
        "lower, higher",
        [
            ("1.0.0-rc3", "1.0.0-rc11"),
            ("1.0.0-beta3", "1.0.0-beta11"),
            ("1.0.0-beta11", "1.0.0-rc3"),
            ("1.0.0-rc.3.x-3", "1.0.0-rc.3.x-13"),
            ("1.24.1-A-20240111143213", "1.24.1-A-20240111143214"),
            ("4.0.0-beta.9-macro", "4.0.0-beta.9-macro2"),
            ("1.2.3-beta.9-macro", "1.2.3-beta.9-macro2"),
            ("1.0.0-macro2", "1.0.0-macro10"),
        ],
    )
    def test_natural_order(self, lower, higher):
        """Test digit runs after a shared prefix compare numerically."""
        assert _cmp(lower, higher) == -1
        assert _cmp(higher, lower) == 1

    def test_different_prefixes_fall_back_to_code_points(self):
        """Test that different leading text compares by code point."""
        assert compare_identifiers("alpha10", "beta2") == -1

    def test_equal_numbers_with_padding_stay_ordered(self):
        """Test that a01 and a1 are not considered equal."""
        assert compare_identifiers("a01", "a1") != 0
        assert compare_identifiers("a01", "a1") == -compare_identifiers("a1", "a01")


class TestBuildMetadata:
    """Tests that build metadata never affects ordering."""

    @pytest.mark.parametrize(
        "a, b",
        [
            ("1.0.0+a", "1.0.0+b"),
            ("1.0.0", "1.0.0+build.1"),
            ("1.0.0-rc.1+x", "1.0.0-rc.1+y.z"),
        ],
    )
    def test_build_ignored(self, a, b):
        """Test that versions differing only by build compare equal."""
        assert _cmp(a, b) == 0


class TestTotalOrder:
    """Tests that sorting by precedence is consistent."""

    def test_sorting_shuffled_versions(self):
        """Test that a shuffled list sorts back to precedence order."""
        ordered = [
            "0.0.1",
            "0.1.0",
            "1.0.0-alpha",
            "1.0.0-alpha.1",
            "1.0.0-beta.2",
            "1.0.0-beta.11",
            "1.0.0-rc.1",
            "1.0.0",
            "1.0.1",
            "1.10.0",
            "2.0.0",
        ]
        shuffled = ordered[:]
        random.Random(42).shuffle(shuffled)

        result = sorted(parse_version(v) for v in shuffled)

        assert [str(v) for v in result] == ordered

    def test_antisymmetry(self):
        """Test that swapping arguments negates the result."""
        samples = ["1.0.0", "1.0.0-rc3", "1.0.0-rc11", "1.0.0-a.b", "2.0.0+x"]
        for a in samples:
            for b in samples:
                assert _cmp(a, b) == -_cmp(b, a)
