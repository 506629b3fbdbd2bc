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

"""A single comparator constraint: an operator applied to a version."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from semverkit.versioning.compare import compare_versions
from semverkit.versioning.version import Version, parse_version

__all__ = ["Operator", "Range"]


class Operator(Enum):
    """Comparison operators, valued by their canonical spelling."""

    EQ = "="
    LT = "<"
    LTE = "<="
    GT = ">"
    GTE = ">="

    @classmethod
    def from_string(cls, text: str) -> Operator:
        """Map an operator spelling to an Operator; empty text means EQ."""
        return cls(text or "=")


@dataclass(frozen=True)
class Range:
    """An immutable ``(operator, version)`` constraint.

    Attributes:
        operator: How the candidate is compared.
        version: The bound the candidate is compared against.

    """

    operator: Operator
    version: Version

    @classmethod
    def of(cls, operator: Operator | str, version: Version | str) -> Range:
        if isinstance(operator, str):
            operator = Operator.from_string(operator)
        if isinstance(version, str):
            version = parse_version(version)
        return cls(operator, version)

    def is_satisfied_by(self, version: Version | str) -> bool:
        """Check ``version`` against this constraint, ignoring build metadata.

        Raises:
            MalformedVersionError: If ``version`` is text that does not parse.

        """
        if isinstance(version, str):
            version = parse_version(version)

        result = compare_versions(version, self.version)
        if self.operator is Operator.EQ:
            return result == 0
        if self.operator is Operator.LT:
            return result < 0
        if self.operator is Operator.LTE:
            return result <= 0
        if self.operator is Operator.GT:
            return result > 0
        return result >= 0

    def is_satisfied_by_any(self) -> bool:
        """True only for the unconstrained ``>=0.0.0``."""
        return self.operator is Operator.GTE and self.version == Version(0, 0, 0)

    def __str__(self) -> str:
        return f"{self.operator.value}{self.version}"
