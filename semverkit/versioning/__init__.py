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

"""
Version parsing, ordering and derivation for semverkit.

Modules
-------
version : module
    Strict parser and the immutable Version value with its mutators.
compare : module
    SemVer 2.0.0 precedence with the natural numeric tie-break.
coerce : module
    Best-effort extraction of a version from free-form text.

Public API
----------
Version : dataclass
    Immutable, validated semantic version.
VersionDiff : IntEnum
    Most significant differing field between two versions.
parse_version : function
    Strict parse; raises MalformedVersionError or NumericOverflowError.
try_parse : function
    Strict parse returning None on failure.
is_valid : function
    True if text is a strict semantic version.
coerce : function
    Lenient extraction from arbitrary text.
compare_versions : function
    Compare two versions, returning -1, 0, or 1.

Examples
--------
    >>> from semverkit.versioning import parse_version, compare_versions
    >>> compare_versions(parse_version("1.0.0-rc.1"), parse_version("1.0.0"))
    -1
    >>> parse_version("1.0.0+a") == parse_version("1.0.0+b")
    False
    >>> parse_version("1.0.0+a").is_equivalent_to("1.0.0+b")
    True

Notes
-----
- Nothing in this package performs I/O
- Build metadata is part of equality but never of precedence
"""

from .coerce import coerce
from .compare import compare_identifiers, compare_versions
from .version import (
    ZERO,
    Version,
    VersionDiff,
    is_valid,
    parse_version,
    try_parse,
)

__all__ = [
    "Version",
    "VersionDiff",
    "ZERO",
    "parse_version",
    "try_parse",
    "is_valid",
    "coerce",
    "compare_versions",
    "compare_identifiers",
]
