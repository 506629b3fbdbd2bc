# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Strict semantic version parsing and the immutable Version value.

This module is format-agnostic: it does NOT read files or talk to package
registries. It turns version text into a typed ``Version`` and back, and
derives new versions from existing ones.

Parsing is strict:

- ``MAJOR.MINOR.PATCH`` with no leading zeros (``0`` itself is fine)
- optional ``-pre.release`` identifiers, optional ``+build`` identifiers
- surrounding whitespace is trimmed, a leading ``v`` is rejected
- every numeric component must fit in a signed 32-bit integer

Equality vs. precedence:

- ``==`` is exact equality and includes build metadata
- ``<``, ``<=``, ``>``, ``>=`` and ``is_equivalent_to`` use precedence,
  which ignores build metadata

So ``1.0.0+a <= 1.0.0+b`` and ``1.0.0+b <= 1.0.0+a`` both hold while
``1.0.0+a != 1.0.0+b``.

Example:
    Parse and inspect:

        >>> from semverkit.versioning import parse_version
        >>> v = parse_version("1.2.3-rc.1+build.5")
        >>> v.major, v.prerelease, v.build
        (1, ('rc', '1'), ('build', '5'))
        >>> str(v.next_minor())
        '1.3.0+build.5'

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
import re
from typing import TYPE_CHECKING, Union

from semverkit.exceptions import MalformedVersionError, NumericOverflowError
from semverkit.grammar import (
    ALL_DIGITS,
    BUILD_IDENTIFIER,
    MAX_NUMERIC,
    PRERELEASE_IDENTIFIER,
    STRICT,
)
from semverkit.versioning.compare import compare_versions

if TYPE_CHECKING:
    from semverkit.ranges.range_list import RangeList

__all__ = [
    "Version",
    "VersionDiff",
    "ZERO",
    "parse_version",
    "try_parse",
    "is_valid",
]

_PRERELEASE_ID = re.compile(PRERELEASE_IDENTIFIER)
_BUILD_ID = re.compile(BUILD_IDENTIFIER)


class VersionDiff(IntEnum):
    """Most significant field that differs between two versions."""

    NONE = 0
    BUILD = 1
    PRE_RELEASE = 2
    PATCH = 3
    MINOR = 4
    MAJOR = 5


def _check_numeric(token: str) -> int:
    """Convert a numeric token, rejecting values wider than 32 bits.

    The token is converted with arbitrary precision first, so an oversized
    value is reported as such instead of failing with a generic error.
    """
    value = int(token)
    if value > MAX_NUMERIC:
        raise NumericOverflowError(token)
    return value


def _split_identifiers(section: str | None) -> tuple[str, ...]:
    return tuple(section.split(".")) if section else ()


@dataclass(frozen=True)
class Version:
    """An immutable, validated semantic version.

    Direct construction is validated with the same rules as
    ``parse_version``, so an invalid instance never exists.

    Attributes:
        major: Major component.
        minor: Minor component.
        patch: Patch component.
        prerelease: Pre-release identifiers; empty for a release.
        build: Build metadata identifiers; ignored by precedence.

    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...] = ()
    build: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        for value in (self.major, self.minor, self.patch):
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise MalformedVersionError(self._raw_text())
            _check_numeric(str(value))

        # Accept any iterable of identifiers but store tuples.
        object.__setattr__(self, "prerelease", tuple(self.prerelease))
        object.__setattr__(self, "build", tuple(self.build))

        for ident in self.prerelease:
            if not isinstance(ident, str) or not _PRERELEASE_ID.fullmatch(ident):
                raise MalformedVersionError(self._raw_text())
            if ALL_DIGITS.fullmatch(ident):
                _check_numeric(ident)
        for ident in self.build:
            if not isinstance(ident, str) or not _BUILD_ID.fullmatch(ident):
                raise MalformedVersionError(self._raw_text())

    def _raw_text(self) -> str:
        # Best-effort rendering for error messages on invalid fields.
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += "-" + ".".join(str(p) for p in self.prerelease)
        if self.build:
            text += "+" + ".".join(str(b) for b in self.build)
        return text

    def __str__(self) -> str:
        base = f"{self.major}.{self.minor}.{self.patch}"
        prerelease = f"-{'.'.join(self.prerelease)}" if self.prerelease else ""
        build = f"+{'.'.join(self.build)}" if self.build else ""
        return f"{base}{prerelease}{build}"

    # ----------------------------
    # Precedence
    # ----------------------------

    def compare_to(self, other: VersionLike) -> int:
        """Return -1, 0 or 1 comparing precedence with ``other``."""
        return compare_versions(self, _as_version(other))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_versions(self, other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_versions(self, other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_versions(self, other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_versions(self, other) >= 0

    def is_equivalent_to(self, other: VersionLike) -> bool:
        """True when precedence is equal (build metadata ignored)."""
        return self.compare_to(other) == 0

    @property
    def is_stable(self) -> bool:
        """True for a release with a non-zero major (``1.0.0`` and up)."""
        return self.major > 0 and not self.prerelease

    def diff(self, other: VersionLike) -> VersionDiff:
        """Return the most significant field that differs from ``other``."""
        other = _as_version(other)
        if self.major != other.major:
            return VersionDiff.MAJOR
        if self.minor != other.minor:
            return VersionDiff.MINOR
        if self.patch != other.patch:
            return VersionDiff.PATCH
        if self.prerelease != other.prerelease:
            return VersionDiff.PRE_RELEASE
        if self.build != other.build:
            return VersionDiff.BUILD
        return VersionDiff.NONE

    def is_api_compatible(self, other: VersionLike) -> bool:
        """True when ``other`` differs by less than a major bump."""
        return self.diff(other) < VersionDiff.MAJOR

    def satisfies(
        self, range_: str | RangeList, include_prerelease: bool = False
    ) -> bool:
        """Check this version against range text or a compiled RangeList.

        Args:
            range_: Range expression text, or an already compiled RangeList
                (whose own include_prerelease flag then applies).
            include_prerelease: Used only when compiling range text.

        Returns:
            True if the version satisfies the range.

        """
        from semverkit.ranges.compiler import compile_range

        if isinstance(range_, str):
            range_ = compile_range(range_, include_prerelease)
        return range_.is_satisfied_by(self)

    # ----------------------------
    # Derived versions
    # ----------------------------

    def next_major(self) -> Version:
        """Next major release; ``1.0.0-5`` becomes ``1.0.0``."""
        major = self.major
        if self.minor != 0 or self.patch != 0 or not self.prerelease:
            major += 1
        return self._derive(major, 0, 0, ())

    def next_minor(self) -> Version:
        """Next minor release; ``1.2.0-5`` becomes ``1.2.0``."""
        minor = self.minor
        if self.patch != 0 or not self.prerelease:
            minor += 1
        return self._derive(self.major, minor, 0, ())

    def next_patch(self) -> Version:
        """Next patch release; ``1.2.3-5`` becomes ``1.2.3``."""
        patch = self.patch
        if not self.prerelease:
            patch += 1
        return self._derive(self.major, self.minor, patch, ())

    def with_inc_major(self, number: int = 1) -> Version:
        return self._derive(self.major + number, self.minor, self.patch)

    def with_inc_minor(self, number: int = 1) -> Version:
        return self._derive(self.major, self.minor + number, self.patch)

    def with_inc_patch(self, number: int = 1) -> Version:
        return self._derive(self.major, self.minor, self.patch + number)

    def with_pre_release(self, prerelease: str) -> Version:
        return self._derive(
            self.major, self.minor, self.patch, tuple(prerelease.split("."))
        )

    def with_build(self, build: str) -> Version:
        return self._derive(
            self.major, self.minor, self.patch, build=tuple(build.split("."))
        )

    def with_cleared_pre_release(self) -> Version:
        return self._derive(self.major, self.minor, self.patch, ())

    def with_cleared_build(self) -> Version:
        return self._derive(self.major, self.minor, self.patch, build=())

    def with_cleared_pre_release_and_build(self) -> Version:
        return self._derive(self.major, self.minor, self.patch, (), ())

    def _derive(
        self,
        major: int,
        minor: int,
        patch: int,
        prerelease: tuple[str, ...] | None = None,
        build: tuple[str, ...] | None = None,
    ) -> Version:
        """Re-render and re-parse so derived versions obey the grammar."""
        candidate = _render(
            major,
            minor,
            patch,
            self.prerelease if prerelease is None else prerelease,
            self.build if build is None else build,
        )
        return parse_version(candidate)


VersionLike = Union[Version, str]

ZERO = Version(0, 0, 0)


def _render(
    major: int,
    minor: int,
    patch: int,
    prerelease: tuple[str, ...],
    build: tuple[str, ...],
) -> str:
    text = f"{major}.{minor}.{patch}"
    if prerelease:
        text += "-" + ".".join(prerelease)
    if build:
        text += "+" + ".".join(build)
    return text


def _as_version(value: VersionLike) -> Version:
    return value if isinstance(value, Version) else parse_version(value)


def parse_version(text: str) -> Version:
    """Parse version text strictly.

    Args:
        text: Version text, e.g. "1.2.3-rc.1+build.5". Surrounding
            whitespace is ignored.

    Returns:
        The parsed Version.

    Raises:
        MalformedVersionError: If the text does not match the grammar.
        NumericOverflowError: If a numeric component or numeric
            pre-release identifier exceeds 2**31 - 1.

    """
    stripped = text.strip()
    match = STRICT.fullmatch(stripped)
    if not match:
        raise MalformedVersionError(stripped)

    major = _check_numeric(match["major"])
    minor = _check_numeric(match["minor"])
    patch = _check_numeric(match["patch"])
    prerelease = _split_identifiers(match["prerelease"])
    build = _split_identifiers(match["build"])

    return Version(major, minor, patch, prerelease, build)


def try_parse(text: str | None) -> Version | None:
    """Parse version text, returning None instead of raising."""
    if text is None:
        return None
    try:
        return parse_version(text)
    except (MalformedVersionError, NumericOverflowError):
        return None


def is_valid(text: str | None) -> bool:
    """True if ``text`` is a strictly valid semantic version."""
    return try_parse(text) is not None
