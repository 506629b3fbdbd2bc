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

"""Range compiler: turns range text into a RangeList.

Steps for each ``||``-separated clause:

1. Glue operators to their versions (``">= 1.2.3"`` becomes ``">=1.2.3"``)
2. Let the first accepting normalizer rewrite the clause into canonical
   tokens; a clause no normalizer accepts passes through unchanged
3. Turn each canonical token into a Range, skipping tokens that are not
   comparators and tokens whose numbers do not fit in 32 bits
4. Keep the group if it holds at least one Range

Compilation never raises for string input. Text that yields no usable
tokens compiles to an empty RangeList, which no version satisfies.

Example:
    Enable debug logging to see each clause:
        ```python
        from semverkit.logging import get_logger, use_logger
        from semverkit.ranges import compile_range

        with use_logger(get_logger(debug=True)):
            compile_range("^1.2 || 2.x")
        # [RANGE] Clause '^1.2' accepted by 'caret': >=1.2.0 <2.0.0
        # [RANGE] Clause '2.x' accepted by 'xrange': >=2.0.0 <3.0.0
        # [RANGE] Compiled '^1.2 || 2.x' to (>=1.2.0 and <2.0.0) or (>=2.0.0 and <3.0.0)
        ```
"""

from __future__ import annotations

from typing import Sequence

from semverkit.exceptions import NumericOverflowError
from semverkit.grammar import COMPARATOR, OPERATOR_SPACING, OR_SEPARATOR
from semverkit.logging import Channel
from semverkit.ranges.normalizers import NORMALIZER_ORDER, normalize_clause
from semverkit.ranges.range import Operator, Range
from semverkit.ranges.range_list import RangeList
from semverkit.versioning.version import parse_version

__all__ = ["compile_range"]

_log = Channel("RANGE")


def compile_range(
    text: str,
    include_prerelease: bool = False,
    normalizers: Sequence[str] = NORMALIZER_ORDER,
) -> RangeList:
    """Compile range text into a RangeList.

    Args:
        text: Range expression, e.g. ">=1.2.3 <2.0.0 || ^3.1".
        include_prerelease: If True, pre-release versions may satisfy
            ranges that do not name a pre-release, and synthesized bounds
            receive the ``-0`` suffix.
        normalizers: Registered normalizer names to try for each clause,
            in order. Defaults to every built-in syntax.

    Returns:
        The compiled RangeList (possibly empty).

    """
    groups = []
    for raw_clause in OR_SEPARATOR.split(text.strip()):
        clause = OPERATOR_SPACING.sub(r"\1\2", raw_clause).strip()
        name, canonical = normalize_clause(clause, include_prerelease, normalizers)
        if name is None:
            _log.debug(f"Clause {clause!r} not rewritten")
        else:
            _log.debug(f"Clause {clause!r} accepted by {name!r}: {canonical}")

        group = [rng for rng in map(_tokenize, canonical.split()) if rng is not None]
        if group:
            groups.append(tuple(group))

    compiled = RangeList(tuple(groups), include_prerelease)
    _log.verbose(f"Compiled {text!r} to {compiled}")
    return compiled


def _tokenize(token: str) -> Range | None:
    match = COMPARATOR.fullmatch(token)
    if not match:
        _log.debug(f"Skipping token {token!r}")
        return None

    try:
        version = parse_version(match["version"])
    except NumericOverflowError as err:
        _log.debug(f"Skipping token {token!r}: {err}")
        return None

    return Range(Operator.from_string(match["operator"]), version)
