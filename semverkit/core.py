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

"""Core orchestration for semverkit.

Ties the manifest loader to the range compiler: each constraint's version
is parsed, its range compiled, and the verdict collected into a
ManifestCheckResult. Invalid versions do not abort the check; they are
reported on their own ConstraintResult.

Example:
    Programmatic usage:
        ```python
        from pathlib import Path
        from semverkit.core import check_manifest

        result = check_manifest(Path("constraints.yaml"))
        if not result.all_satisfied:
            for entry in result.failed:
                print(f"{entry.name}: {entry.version} !~ {entry.range}")
        ```

"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from semverkit.config.loader import load_manifest
from semverkit.exceptions import MalformedVersionError, NumericOverflowError
from semverkit.logging import Channel
from semverkit.ranges.compiler import compile_range
from semverkit.results import ConstraintResult, ManifestCheckResult
from semverkit.versioning.version import parse_version

__all__ = ["check_manifest", "check_constraint"]

_log = Channel("MANIFEST")


def check_constraint(entry: dict[str, Any]) -> ConstraintResult:
    """Evaluate one validated manifest constraint.

    Args:
        entry: A constraint mapping as returned by load_manifest(), with
            name, version, range and include_prerelease.

    Returns:
        The constraint's result. An unparsable version yields
            satisfied=False and an error message.
    """
    include_prerelease = entry.get("include_prerelease", False)
    ranges = compile_range(entry["range"], include_prerelease)

    error = None
    satisfied = False
    try:
        satisfied = ranges.is_satisfied_by(parse_version(entry["version"]))
    except (MalformedVersionError, NumericOverflowError) as err:
        error = str(err)

    return ConstraintResult(
        name=entry["name"],
        version=entry["version"],
        range=entry["range"],
        canonical_range=str(ranges),
        include_prerelease=include_prerelease,
        satisfied=satisfied,
        error=error,
    )


def check_manifest(manifest_path: Path) -> ManifestCheckResult:
    """Load a manifest and check every constraint in it.

    Args:
        manifest_path: Path to the manifest YAML file.

    Returns:
        Per-constraint results in manifest order.

    Raises:
        ConfigError: If the manifest cannot be loaded or is invalid.
    """
    manifest = load_manifest(manifest_path)
    constraints = manifest["constraints"]

    results = []
    for i, entry in enumerate(constraints, start=1):
        _log.step(i, len(constraints), f"Checking {entry['name']}...")
        result = check_constraint(entry)
        if result.error:
            _log.verbose(f"{result.name}: {result.error}")
        else:
            _log.verbose(
                f"{result.name}: {result.version} against {result.canonical_range}"
                f" -> {'satisfied' if result.satisfied else 'not satisfied'}",
            )
        results.append(result)

    return ManifestCheckResult(
        manifest_path=Path(manifest_path).resolve(), results=tuple(results)
    )
