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

"""Fluent builder for RangeList values.

Build ranges in code instead of text:

Example:
    ```python
    from semverkit.ranges import RangeExpression as R

    ranges = (
        R.greater("1.0.0")
        .and_(R.less("2.0.0"))
        .or_(R.eq("3.0.0"))
        .to_range_list()
    )
    str(ranges)  # '(>1.0.0 and <2.0.0) or =3.0.0'
    ```

Every call returns a new expression; existing expressions never change.
"""

from __future__ import annotations

from dataclasses import dataclass

from semverkit.ranges.range import Operator, Range
from semverkit.ranges.range_list import RangeList
from semverkit.versioning.version import Version

__all__ = ["RangeExpression"]


@dataclass(frozen=True)
class RangeExpression:
    """An immutable range expression under construction.

    Attributes:
        closed: AND groups already terminated by ``or_``.
        current: The AND group still being extended by ``and_``.

    """

    closed: tuple[tuple[Range, ...], ...] = ()
    current: tuple[Range, ...] = ()

    @classmethod
    def _single(cls, operator: Operator, version: Version | str) -> RangeExpression:
        return cls(current=(Range.of(operator, version),))

    @classmethod
    def eq(cls, version: Version | str) -> RangeExpression:
        return cls._single(Operator.EQ, version)

    @classmethod
    def greater(cls, version: Version | str) -> RangeExpression:
        return cls._single(Operator.GT, version)

    @classmethod
    def greater_or_equal(cls, version: Version | str) -> RangeExpression:
        return cls._single(Operator.GTE, version)

    @classmethod
    def less(cls, version: Version | str) -> RangeExpression:
        return cls._single(Operator.LT, version)

    @classmethod
    def less_or_equal(cls, version: Version | str) -> RangeExpression:
        return cls._single(Operator.LTE, version)

    def and_(self, other: RangeExpression) -> RangeExpression:
        """AND ``other`` onto the current group.

        When ``other`` itself holds several OR groups, its first group
        joins the current one and the rest stay separate groups.
        """
        closed, current = self.closed, self.current
        other_groups = other.to_range_list().groups
        for group in other_groups:
            current = current + group
            if len(other_groups) > 1:
                closed, current = closed + (current,), ()
        return RangeExpression(closed, current)

    def or_(self, other: RangeExpression) -> RangeExpression:
        """Close the current group and start a new one from ``other``."""
        return RangeExpression(self.closed + (self.current,), ()).and_(other)

    def to_range_list(self) -> RangeList:
        """Finish the expression; pre-releases are not included."""
        return RangeList(self.closed + (self.current,), include_prerelease=False)
