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

"""Public API return types for semverkit.

This module defines dataclasses for return values from public API
functions that evaluate constraint manifests.

All dataclasses are frozen (immutable) to prevent accidental mutation of
return values.

Example:
    Using result types:
        ```python
        from pathlib import Path
        from semverkit.core import check_manifest

        result = check_manifest(Path("constraints.yaml"))
        for entry in result.results:
            print(entry.name, entry.satisfied)
        ```

Note:
    Only public API return types belong in this module. Domain types
    (like Version and RangeList) stay with their related logic.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ConstraintResult:
    """Outcome of checking one manifest constraint.

    Attributes:
        name: Constraint name from the manifest.
        version: Version text as written in the manifest.
        range: Range text as written in the manifest.
        canonical_range: The compiled range rendered canonically.
        include_prerelease: Effective pre-release inclusion flag.
        satisfied: True if the version satisfies the range.
        error: Parse error message when the version is invalid, else None.
    """

    name: str
    version: str
    range: str
    canonical_range: str
    include_prerelease: bool
    satisfied: bool
    error: str | None = None


@dataclass(frozen=True)
class ManifestCheckResult:
    """Result from checking every constraint in a manifest.

    Attributes:
        manifest_path: Path to the manifest that was checked.
        results: One ConstraintResult per constraint, in manifest order.
    """

    manifest_path: Path
    results: tuple[ConstraintResult, ...]

    @property
    def all_satisfied(self) -> bool:
        return all(result.satisfied for result in self.results)

    @property
    def failed(self) -> tuple[ConstraintResult, ...]:
        return tuple(result for result in self.results if not result.satisfied)
