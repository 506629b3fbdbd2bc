"""
Tests for semverkit.versioning.version module.

Tests strict parsing and the Version value including:
- Valid and invalid grammar
- 32-bit overflow detection
- Exact equality vs. precedence equivalence
- Diff, stability and API compatibility
- Derived versions (increments, pre-release/build mutation)
"""

from __future__ import annotations

import dataclasses

import pytest

from semverkit.exceptions import MalformedVersionError, NumericOverflowError, SemverError
from semverkit.versioning import (
    ZERO,
    Version,
    VersionDiff,
    is_valid,
    parse_version,
    try_parse,
)


class TestParsing:
    """Tests for parse_version()."""

    def test_parse_components(self):
        """Test that every section lands in its own field."""
        v = parse_version("1.2.3-rc.1+build.5")

        assert v.major == 1
        assert v.minor == 2
        assert v.patch == 3
        assert v.prerelease == ("rc", "1")
        assert v.build == ("build", "5")

    def test_parse_release_has_empty_sections(self):
        """Test that a release version has empty pre-release and build."""
        v = parse_version("10.20.30")

        assert v.prerelease == ()
        assert v.build == ()

    def test_surrounding_whitespace_is_trimmed(self):
        """Test that leading/trailing whitespace is ignored."""
        assert parse_version("  1.2.3 \n") == Version(1, 2, 3)

    @pytest.mark.parametrize(
        "text",
        [
            "0.0.0",
            "1.2.3",
            "1.0.0-alpha",
            "1.0.0-alpha.1",
            "1.0.0-0.3.7",
            "1.0.0-x.7.z.92",
            "1.0.0-x-y-z.--",
            "1.0.0-0a",
            "1.0.0+20130313144700",
            "1.0.0-beta+exp.sha.5114f85",
            "1.0.0+21AF26D3----117B344092BD",
            "1.2.3+build.098",
            "2147483647.2147483647.2147483647",
        ],
    )
    def test_round_trip(self, text):
        """Test that canonical text renders back unchanged."""
        assert str(parse_version(text)) == text

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "1",
            "1.2",
            "1.2.3.4",
            "v1.2.3",
            "=1.2.3",
            "01.2.3",
            "1.02.3",
            "1.2.03",
            "1.2.3-",
            "1.2.3-01",
            "1.2.3-alpha..1",
            "1.2.3-.alpha",
            "1.2.3-alpha.",
            "1.2.3+",
            "1.2.3+a..b",
            "1.2.3-alpha_1",
            "a.b.c",
            "-1.2.3",
            "1.2.3 4",
        ],
    )
    def test_invalid_versions_raise(self, text):
        """Test that text outside the grammar raises MalformedVersionError."""
        with pytest.raises(MalformedVersionError):
            parse_version(text)

    def test_malformed_error_carries_text(self):
        """Test that the error message and attribute name the input."""
        with pytest.raises(MalformedVersionError, match=r"Version \[v1\.2\.3\]") as exc:
            parse_version("v1.2.3")

        assert exc.value.text == "v1.2.3"

    def test_errors_are_value_errors(self):
        """Test that version errors can be caught as ValueError or SemverError."""
        with pytest.raises(ValueError):
            parse_version("nope")
        with pytest.raises(SemverError):
            parse_version("nope")

    def test_overflow_huge_major(self):
        """Test that a huge major raises NumericOverflowError, not wrap."""
        with pytest.raises(NumericOverflowError) as exc:
            parse_version("99999999999999999999999.0.0")

        assert exc.value.token == "99999999999999999999999"

    @pytest.mark.parametrize(
        "text",
        [
            "2147483648.0.0",
            "0.2147483648.0",
            "0.0.2147483648",
            "1.0.0-2147483648",
            "1.0.0-alpha.99999999999",
        ],
    )
    def test_overflow_boundaries(self, text):
        """Test that numbers just past 2**31 - 1 are rejected."""
        with pytest.raises(NumericOverflowError):
            parse_version(text)

    def test_build_numbers_are_not_bounded(self):
        """Test that build identifiers are opaque text."""
        assert parse_version("1.0.0+99999999999999").build == ("99999999999999",)

    def test_try_parse_and_is_valid(self):
        """Test the non-raising helpers."""
        assert try_parse("1.2.3") == Version(1, 2, 3)
        assert try_parse("1.2") is None
        assert try_parse("99999999999.0.0") is None
        assert try_parse(None) is None
        assert is_valid("1.0.0-rc.1")
        assert not is_valid("v1.0.0")
        assert not is_valid(None)


class TestConstruction:
    """Tests for constructing Version directly."""

    def test_sequences_become_tuples(self):
        """Test that list identifiers are stored as tuples."""
        v = Version(1, 2, 3, ["rc", "1"], ["b"])

        assert v.prerelease == ("rc", "1")
        assert v.build == ("b",)
        assert v == parse_version("1.2.3-rc.1+b")

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"major": -1, "minor": 0, "patch": 0},
            {"major": 1, "minor": 0, "patch": 0, "prerelease": ("01",)},
            {"major": 1, "minor": 0, "patch": 0, "prerelease": ("",)},
            {"major": 1, "minor": 0, "patch": 0, "build": ("a b",)},
        ],
    )
    def test_invalid_fields_raise(self, kwargs):
        """Test that construction validates like the parser."""
        with pytest.raises(MalformedVersionError):
            Version(**kwargs)

    def test_overflowing_field_raises(self):
        """Test that an oversized component is rejected on construction."""
        with pytest.raises(NumericOverflowError):
            Version(2**31, 0, 0)

    def test_version_is_immutable(self):
        """Test that fields cannot be reassigned."""
        v = Version(1, 2, 3)

        with pytest.raises(dataclasses.FrozenInstanceError):
            v.major = 2  # type: ignore[misc]

    def test_zero_constant(self):
        """Test the ZERO constant."""
        assert ZERO == Version(0, 0, 0)
        assert str(ZERO) == "0.0.0"


class TestEqualityAndPrecedence:
    """Tests for exact equality vs. precedence."""

    def test_build_breaks_exact_equality(self):
        """Test that build metadata is part of ==."""
        assert parse_version("1.0.0+a") != parse_version("1.0.0+b")

    def test_build_ignored_by_precedence(self):
        """Test that <= and >= both hold between build variants."""
        a = parse_version("1.0.0+a")
        b = parse_version("1.0.0+b")

        assert a <= b
        assert b <= a
        assert not a < b
        assert a.is_equivalent_to(b)
        assert a.compare_to("1.0.0") == 0

    def test_rich_comparisons(self):
        """Test <, >, and mixed-type comparisons."""
        assert parse_version("1.0.0-rc.1") < parse_version("1.0.0")
        assert parse_version("2.0.0") > parse_version("1.99.99")
        assert parse_version("1.2.3").compare_to("1.2.4") == -1

    def test_hashable(self):
        """Test that versions can be used in sets."""
        assert len({parse_version("1.0.0"), Version(1, 0, 0)}) == 1


class TestDiff:
    """Tests for diff(), is_stable and is_api_compatible()."""

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            ("1.2.3", "2.0.0", VersionDiff.MAJOR),
            ("1.2.3", "1.3.0", VersionDiff.MINOR),
            ("1.2.3", "1.2.4", VersionDiff.PATCH),
            ("1.2.3-alpha", "1.2.3-beta", VersionDiff.PRE_RELEASE),
            ("1.2.3+a", "1.2.3+b", VersionDiff.BUILD),
            ("1.2.3", "1.2.3", VersionDiff.NONE),
        ],
    )
    def test_diff(self, a, b, expected):
        """Test that diff reports the most significant difference."""
        assert parse_version(a).diff(b) is expected

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("1.0.0", True),
            ("0.9.0", False),
            ("1.0.0-rc.1", False),
            ("2.3.4+build", True),
        ],
    )
    def test_is_stable(self, text, expected):
        """Test stability: major above zero and no pre-release."""
        assert parse_version(text).is_stable is expected

    def test_api_compatibility(self):
        """Test that only a major difference breaks API compatibility."""
        v = parse_version("1.2.3")

        assert v.is_api_compatible("1.9.0")
        assert not v.is_api_compatible("2.0.0")


class TestDerivedVersions:
    """Tests for next_*/with_* mutators."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("1.0.0-1", "1.0.0"),
            ("1.2.3", "2.0.0"),
            ("1.2.3-tag", "2.0.0"),
            ("1.2.3+build.098", "2.0.0+build.098"),
        ],
    )
    def test_next_major(self, text, expected):
        """Test next_major, which finishes a x.0.0 pre-release."""
        assert str(parse_version(text).next_major()) == expected

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("1.2.0-1", "1.2.0"),
            ("1.2.3-tag", "1.3.0"),
            ("1.2.3", "1.3.0"),
        ],
    )
    def test_next_minor(self, text, expected):
        """Test next_minor, which finishes a x.y.0 pre-release."""
        assert str(parse_version(text).next_minor()) == expected

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("1.2.3-tag", "1.2.3"),
            ("1.2.3", "1.2.4"),
            ("1.2.3+b", "1.2.4+b"),
        ],
    )
    def test_next_patch(self, text, expected):
        """Test next_patch, which finishes any pre-release."""
        assert str(parse_version(text).next_patch()) == expected

    def test_increments_keep_sections(self):
        """Test that with_inc_* keep pre-release and build."""
        v = parse_version("1.2.3-tag+b")

        assert str(v.with_inc_major(2)) == "3.2.3-tag+b"
        assert str(v.with_inc_minor()) == "1.3.3-tag+b"
        assert str(v.with_inc_patch(5)) == "1.2.8-tag+b"

    def test_with_pre_release_and_build(self):
        """Test replacing pre-release and build sections."""
        v = parse_version("1.2.3+build.098")

        assert str(v.with_pre_release("alpha.1")) == "1.2.3-alpha.1+build.098"
        assert str(v.with_build("build.100")) == "1.2.3+build.100"

    def test_clearing_sections(self):
        """Test the with_cleared_* mutators."""
        v = parse_version("1.2.3-beta.2+build.098")

        assert str(v.with_cleared_pre_release()) == "1.2.3+build.098"
        assert str(v.with_cleared_build()) == "1.2.3-beta.2"
        assert str(v.with_cleared_pre_release_and_build()) == "1.2.3"

    def test_mutators_leave_original_untouched(self):
        """Test that mutators return new instances."""
        v = parse_version("1.2.3")
        v.with_inc_major()

        assert str(v) == "1.2.3"

    def test_increment_past_limit_raises(self):
        """Test that incrementing beyond 32 bits raises NumericOverflowError."""
        with pytest.raises(NumericOverflowError):
            parse_version("2147483647.0.0").with_inc_major()

    def test_invalid_pre_release_raises(self):
        """Test that mutated text is validated."""
        with pytest.raises(MalformedVersionError):
            parse_version("1.2.3").with_pre_release("bad..id")


class TestSatisfies:
    """Tests for Version.satisfies()."""

    def test_satisfies_range_text(self):
        """Test satisfaction against range text."""
        v = parse_version("1.4.2")

        assert v.satisfies("^1.2.0")
        assert not v.satisfies("^2")

    def test_satisfies_include_prerelease(self):
        """Test that include_prerelease reaches the compiler."""
        v = parse_version("1.3.0-beta")

        assert not v.satisfies("^1.2.0")
        assert v.satisfies("^1.2.0", include_prerelease=True)
