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

"""Precedence ordering for parsed versions.

Implements SemVer 2.0.0 precedence with one documented extension: two
pre-release identifiers that share the text before their first digit are
compared by the number that follows, so ``rc3 < rc11`` and
``macro < macro2`` (natural order). SemVer itself asks for plain ASCII
order between alphanumeric identifiers; the natural order is kept on
purpose because consumers depend on it.

Build metadata never takes part in ordering.

Example:
    Compare two versions:

        >>> from semverkit.versioning import parse_version, compare_versions
        >>> compare_versions(parse_version("1.0.0-rc3"), parse_version("1.0.0-rc11"))
        -1

"""

from __future__ import annotations

from itertools import zip_longest
from typing import TYPE_CHECKING

from semverkit.grammar import ALL_DIGITS, DIGIT_RUN

if TYPE_CHECKING:
    from semverkit.versioning.version import Version

__all__ = ["compare_versions", "compare_identifiers"]


def _sign(a: object, b: object) -> int:
    return (a > b) - (a < b)  # type: ignore[operator]


def compare_versions(a: Version, b: Version) -> int:
    """Compare two versions by precedence.

    Args:
        a: Left-hand version.
        b: Right-hand version.

    Returns:
        -1 if a has lower precedence than b, 0 if they are equivalent,
        1 if a has higher precedence.

    """
    result = _sign(
        (a.major, a.minor, a.patch),
        (b.major, b.minor, b.patch),
    )
    if result != 0:
        return result
    return _compare_prerelease(a.prerelease, b.prerelease)


def _compare_prerelease(a: tuple[str, ...], b: tuple[str, ...]) -> int:
    # A release outranks any pre-release of the same core.
    if a and not b:
        return -1
    if b and not a:
        return 1

    for left, right in zip_longest(a, b):
        if left is None:
            return -1
        if right is None:
            return 1
        if left == right:
            continue
        return compare_identifiers(left, right)
    return 0


def compare_identifiers(a: str, b: str) -> int:
    """Compare two pre-release identifiers.

    Rules, in order:

    1. Both fully numeric: compare as integers. Exactly one fully
       numeric: the numeric one sorts first.
    2. Both contain a digit and share the text before the first digit:
       compare the digit runs as integers, then the remainders (an empty
       remainder sorts first). A tie falls through to rule 3.
    3. Otherwise compare by code point.

    Args:
        a: Left-hand identifier.
        b: Right-hand identifier.

    Returns:
        -1, 0 or 1.

    """
    a_numeric = ALL_DIGITS.fullmatch(a) is not None
    b_numeric = ALL_DIGITS.fullmatch(b) is not None
    if a_numeric and b_numeric:
        return _sign(int(a), int(b))
    if a_numeric or b_numeric:
        return -1 if a_numeric else 1

    left = DIGIT_RUN.fullmatch(a)
    right = DIGIT_RUN.fullmatch(b)
    if left and right and left["head"] == right["head"]:
        result = _sign(int(left["digits"]), int(right["digits"]))
        if result == 0:
            result = _compare_tails(left["tail"], right["tail"])
        if result != 0:
            return result

    return _sign(a, b)


def _compare_tails(a: str, b: str) -> int:
    if a and b:
        return compare_identifiers(a, b)
    return _sign(bool(a), bool(b))
