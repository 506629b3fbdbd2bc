"""
Tests for semverkit.versioning.coerce module.
"""

from __future__ import annotations

import pytest

from semverkit.versioning import Version, coerce


class TestCoerce:
    """Tests for lenient version extraction."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("1.2.3", "1.2.3"),
            ("1.2.3-rc.1+b", "1.2.3-rc.1+b"),
            (" 1.2.3 ", "1.2.3"),
            ("v1.2", "1.2.0"),
            ("release-3", "3.0.0"),
            ("1.2.3.4", "1.2.3"),
            ("Chrome 140.0.7339.128", "140.0.7339"),
            ("version 2.5 (stable)", "2.5.0"),
        ],
    )
    def test_coerce_extracts_version(self, text, expected):
        """Test that the first run of numbers becomes a version."""
        assert str(coerce(text)) == expected

    @pytest.mark.parametrize(
        "text",
        [None, "", "no digits here", "99999999999.1.2"],
    )
    def test_coerce_returns_none(self, text):
        """Test that missing or oversized numbers yield None."""
        assert coerce(text) is None

    def test_coerce_returns_version_instance(self):
        """Test the return type."""
        assert coerce("v7") == Version(7, 0, 0)
