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

"""Compiled range: an OR of AND groups of comparator constraints.

Evaluation applies the pre-release visibility rule: unless the list was
built with ``include_prerelease``, a pre-release version only satisfies
a group that itself names a pre-release on the same major.minor.patch.
So ``1.2.4-beta`` does not satisfy ``>=1.2.3 <2.0.0`` while
``1.2.3-beta.4`` does satisfy ``>=1.2.3-beta.2 <1.3.0``.

Example:
    >>> from semverkit.ranges import compile_range
    >>> ranges = compile_range(">1.2.1 <1.2.8 || >2.0.0")
    >>> str(ranges)
    '(>1.2.1 and <1.2.8) or >2.0.0'
    >>> ranges.is_satisfied_by("1.2.2")
    True

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from semverkit.ranges.range import Range
from semverkit.versioning.version import Version, parse_version

__all__ = ["RangeList"]

_OR_JOINER = " or "
_AND_JOINER = " and "


@dataclass(frozen=True)
class RangeList:
    """An immutable OR-list of AND groups.

    Attributes:
        groups: Non-empty groups of constraints. Empty groups passed in are
            dropped.
        include_prerelease: If True, pre-release versions are evaluated
            like any other version.

    """

    groups: tuple[tuple[Range, ...], ...] = ()
    include_prerelease: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "groups",
            tuple(tuple(group) for group in self.groups if group),
        )

    @classmethod
    def of(
        cls, groups: Iterable[Iterable[Range]], include_prerelease: bool = False
    ) -> RangeList:
        return cls(tuple(tuple(group) for group in groups), include_prerelease)

    def __iter__(self) -> Iterator[tuple[Range, ...]]:
        return iter(self.groups)

    def __len__(self) -> int:
        return len(self.groups)

    def is_satisfied_by(self, version: Version | str) -> bool:
        """True if at least one group is satisfied by ``version``.

        Raises:
            MalformedVersionError: If ``version`` is text that does not parse.

        """
        if isinstance(version, str):
            version = parse_version(version)
        return any(self._group_satisfied(group, version) for group in self.groups)

    def is_satisfied_by_any(self) -> bool:
        """True if every constraint is ``>=0.0.0`` (vacuously true when empty)."""
        return all(rng.is_satisfied_by_any() for group in self.groups for rng in group)

    def _group_satisfied(self, group: tuple[Range, ...], version: Version) -> bool:
        if not all(rng.is_satisfied_by(version) for rng in group):
            return False

        if version.prerelease and not self.include_prerelease:
            core = (version.major, version.minor, version.patch)
            return any(
                rng.version.prerelease
                and (rng.version.major, rng.version.minor, rng.version.patch) == core
                for rng in group
            )

        return True

    def __str__(self) -> str:
        if len(self.groups) == 1:
            return _AND_JOINER.join(str(rng) for rng in self.groups[0])
        return _OR_JOINER.join(_format_group(group) for group in self.groups)


def _format_group(group: tuple[Range, ...]) -> str:
    text = _AND_JOINER.join(str(rng) for rng in group)
    return f"({text})" if len(group) > 1 else text
