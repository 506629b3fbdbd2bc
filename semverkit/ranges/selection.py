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

"""Pick satisfying versions out of a list of candidates.

Candidates may be Version objects or text; text that does not parse is
skipped, which suits lists scraped from tags or registries.
"""

from __future__ import annotations

from typing import Iterable

from semverkit.ranges.compiler import compile_range
from semverkit.ranges.range_list import RangeList
from semverkit.versioning.compare import compare_versions
from semverkit.versioning.version import Version, try_parse

__all__ = ["filter_satisfying", "max_satisfying", "min_satisfying"]


def _as_range_list(range_: str | RangeList, include_prerelease: bool) -> RangeList:
    if isinstance(range_, RangeList):
        return range_
    return compile_range(range_, include_prerelease)


def filter_satisfying(
    candidates: Iterable[Version | str],
    range_: str | RangeList,
    include_prerelease: bool = False,
) -> list[Version]:
    """Return the candidates satisfying ``range_``, in input order.

    Args:
        candidates: Versions or version text.
        range_: Range text, or a compiled RangeList (whose own
            include_prerelease flag then applies).
        include_prerelease: Used only when compiling range text.

    Returns:
        Parsed versions that satisfy the range.

    """
    ranges = _as_range_list(range_, include_prerelease)
    matches = []
    for candidate in candidates:
        version = candidate if isinstance(candidate, Version) else try_parse(candidate)
        if version is not None and ranges.is_satisfied_by(version):
            matches.append(version)
    return matches


def max_satisfying(
    candidates: Iterable[Version | str],
    range_: str | RangeList,
    include_prerelease: bool = False,
) -> Version | None:
    """Highest-precedence satisfying candidate, or None.

    Among equivalent candidates the first one wins.
    """
    best = None
    for version in filter_satisfying(candidates, range_, include_prerelease):
        if best is None or compare_versions(version, best) > 0:
            best = version
    return best


def min_satisfying(
    candidates: Iterable[Version | str],
    range_: str | RangeList,
    include_prerelease: bool = False,
) -> Version | None:
    """Lowest-precedence satisfying candidate, or None."""
    best = None
    for version in filter_satisfying(candidates, range_, include_prerelease):
        if best is None or compare_versions(version, best) < 0:
            best = version
    return best
