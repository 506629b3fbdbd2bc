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

"""Token grammar for versions and range syntaxes.

Pure data: every pattern used by the parser, the normalizers and the range
compiler is assembled here from a handful of building blocks, so the
syntaxes agree on what an identifier is.

Digits are spelled ``[0-9]`` rather than ``\\d`` because ``\\d`` also
matches non-ASCII digits in ``str`` patterns.

Patterns that embed a version expose named groups ``major``, ``minor``,
``patch``, ``prerelease`` and ``build``. The hyphen pattern holds two
versions, so its groups carry ``from_``/``to_`` prefixes.
"""

from __future__ import annotations

import re

# Largest accepted numeric component (32-bit signed int maximum)
MAX_NUMERIC = 2**31 - 1

# Lowest possible pre-release suffix; appended to synthesized bounds when
# pre-releases are included.
LOWEST_PRERELEASE = "-0"

# Component spellings treated as "any value" by range syntaxes
WILDCARDS = frozenset({"x", "X", "*", "+"})

# Ivy keywords equivalent to "any version"
IVY_LATEST = frozenset({"latest", "latest.integration"})

NUMERIC_IDENTIFIER = r"0|[1-9][0-9]*"
NON_NUMERIC_IDENTIFIER = r"[0-9]*[a-zA-Z-][a-zA-Z0-9-]*"
PRERELEASE_IDENTIFIER = rf"(?:{NUMERIC_IDENTIFIER}|{NON_NUMERIC_IDENTIFIER})"
BUILD_IDENTIFIER = r"[0-9A-Za-z-]+"
XRANGE_IDENTIFIER = rf"{NUMERIC_IDENTIFIER}|x|X|\*|\+"


def _prerelease(prefix: str = "") -> str:
    return (
        rf"(?:-(?P<{prefix}prerelease>"
        rf"{PRERELEASE_IDENTIFIER}(?:\.{PRERELEASE_IDENTIFIER})*))"
    )


def _build(prefix: str = "") -> str:
    return rf"(?:\+(?P<{prefix}build>{BUILD_IDENTIFIER}(?:\.{BUILD_IDENTIFIER})*))"


def _strict_plain(prefix: str = "") -> str:
    return (
        rf"(?P<{prefix}major>{NUMERIC_IDENTIFIER})"
        rf"\.(?P<{prefix}minor>{NUMERIC_IDENTIFIER})"
        rf"\.(?P<{prefix}patch>{NUMERIC_IDENTIFIER})"
        rf"{_prerelease(prefix)}?{_build(prefix)}?"
    )


def _xrange_plain(prefix: str = "") -> str:
    # Missing minor/patch groups are None, which callers treat as wildcards.
    return (
        rf"[v=\s]*(?P<{prefix}major>{XRANGE_IDENTIFIER})"
        rf"(?:\.(?P<{prefix}minor>{XRANGE_IDENTIFIER})"
        rf"(?:\.(?P<{prefix}patch>{XRANGE_IDENTIFIER})"
        rf"{_prerelease(prefix)}?{_build(prefix)}?)?)?"
    )


_OPERATOR = r"(?P<operator>(?:<|>)?=?)"
_IVY_SIDE = (
    r"(?:(?P<{0}_major>[0-9]+)"
    r"(?:\.(?P<{0}_minor>[0-9]+)"
    r"(?:\.(?P<{0}_patch>[0-9]+))?)?)?"
)

# Strict version: MAJOR.MINOR.PATCH[-pre][+build], no prefix, no padding
STRICT = re.compile(rf"^{_strict_plain()}$")

# One canonical comparator token, e.g. ">=1.2.3-rc.1"
COMPARATOR = re.compile(rf"^{_OPERATOR}\s*(?P<version>{_strict_plain()})$")

# "^1.2.3", "^1.x", "^0.0.1-beta"
CARET = re.compile(rf"^\^{_xrange_plain()}$")

# "~1.2.3", "~>1.2"
TILDE = re.compile(rf"^~>?{_xrange_plain()}$")

# "1.2.3 - 2.3.4", "1.2 - 2"
HYPHEN = re.compile(
    rf"^\s*(?P<from>{_xrange_plain('from_')})\s+-\s+(?P<to>{_xrange_plain('to_')})\s*$"
)

# One x-range term, optionally with an operator: "1.2.x", ">=1.X", "<=2.*"
XRANGE = re.compile(rf"^{_OPERATOR}\s*{_xrange_plain()}$")

# "[1.0,2.0)", "]1.0.1,2.0.1[", "(,2.0]"
IVY = re.compile(
    r"^(?P<open>[\[\](])"
    + _IVY_SIDE.format("lo")
    + ","
    + _IVY_SIDE.format("hi")
    + r"(?P<close>[\]\[)])$"
)

# Whitespace around an operator; replaced by r"\1\2" to glue the operator
# to its version while keeping the separating space.
OPERATOR_SPACING = re.compile(r"(\s*)([<>]?=?)\s*")

# OR separator between clauses
OR_SEPARATOR = re.compile(r"\|\|")

# First 1-3 dot-separated numbers embedded in arbitrary text
COERCE = re.compile(
    r"(^|[^0-9])([0-9]{1,16})(?:\.([0-9]{1,16}))?(?:\.([0-9]{1,16}))?(?:$|[^0-9])"
)

ALL_DIGITS = re.compile(r"^[0-9]+$")

# Identifier that holds at least one digit, split into the run before the
# first digit, the digit run, and whatever follows.
DIGIT_RUN = re.compile(r"^(?P<head>[^0-9]*)(?P<digits>[0-9]+)(?P<tail>.*)$")
