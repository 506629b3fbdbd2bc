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

"""Ivy normalizer: Apache Ivy interval notation and dynamic revisions.

Translates:

- ``[1.0,2.0]`` to ``>=1.0.0 <=2.0.0``
- ``[1.0,2.0[`` to ``>=1.0.0 <2.0.0``
- ``]1.0,2.0]`` to ``>1.0.0 <=2.0.0``
- ``]1.0,2.0[`` to ``>1.0.0 <2.0.0``
- ``[1.0,)`` to ``>=1.0.0``
- ``]1.0,)`` to ``>1.0.0``
- ``(,2.0]`` to ``<=2.0.0``
- ``(,2.0[`` to ``<2.0.0``
- ``latest`` and ``latest.integration`` to ``>=0.0.0``

Interval bounds never receive the ``-0`` suffix. ``latest`` and a fully
unbounded interval behave like the ``*`` wildcard, suffix included.
"""

from __future__ import annotations

import re

from semverkit.grammar import IVY, IVY_LATEST

from .base import all_versions, bound, register_normalizer


def _side(match: re.Match[str], prefix: str) -> tuple[int, int, int] | None:
    if match[f"{prefix}_major"] is None:
        return None
    return (
        int(match[f"{prefix}_major"]),
        int(match[f"{prefix}_minor"] or 0),
        int(match[f"{prefix}_patch"] or 0),
    )


class IvyNormalizer:
    """Rewrites Ivy intervals and the ``latest`` keywords."""

    def normalize(self, clause: str, include_prerelease: bool) -> str | None:
        if clause in IVY_LATEST:
            return all_versions(include_prerelease)

        match = IVY.fullmatch(clause)
        if not match:
            return None

        parts = []
        low = _side(match, "lo")
        if low is not None and match["open"] != "(":
            parts.append(bound(">=" if match["open"] == "[" else ">", *low))
        high = _side(match, "hi")
        if high is not None and match["close"] != ")":
            parts.append(bound("<=" if match["close"] == "]" else "<", *high))

        if not parts:
            return all_versions(include_prerelease)
        return " ".join(parts)


register_normalizer("ivy", IvyNormalizer)
