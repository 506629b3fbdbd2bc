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

"""Hyphen normalizer: ``A - B`` is an inclusive range.

Translates:

- ``1.2.3 - 2.3.4`` to ``>=1.2.3 <2.3.5``
- ``1.2 - 2.3.4`` to ``>=1.2.0 <2.3.5``
- ``1.2.3 - 2.3`` to ``>=1.2.3 <2.4.0``
- ``1.2.3 - 2`` to ``>=1.2.3 <3.0.0``
- ``1.2.3-alpha - 2.1.4-beta`` to ``>=1.2.3-alpha <=2.1.4-beta``

With pre-releases included, partial lower bounds and every exclusive
upper bound receive ``-0``: ``1.2 - 2.3.4`` becomes
``>=1.2.0-0 <2.3.5-0``. An upper bound carrying its own pre-release is
kept as an inclusive ``<=`` bound.

Either side may carry a ``v`` or ``=`` prefix. A side whose major is a
wildcard leaves that end unbounded.
"""

from __future__ import annotations

import re

from semverkit.grammar import HYPHEN

from .base import (
    all_versions,
    bound,
    component,
    lower_bound,
    prerelease_suffix,
    register_normalizer,
)


class HyphenNormalizer:
    """Rewrites ``A - B`` ranges."""

    def normalize(self, clause: str, include_prerelease: bool) -> str | None:
        match = HYPHEN.fullmatch(clause)
        if not match:
            return None

        suffix = prerelease_suffix(include_prerelease)
        parts = [
            part
            for part in (self._lower(match, suffix), self._upper(match, suffix))
            if part is not None
        ]
        if not parts:
            return all_versions(include_prerelease)
        return " ".join(parts)

    @staticmethod
    def _lower(match: re.Match[str], suffix: str) -> str | None:
        major = component(match["from_major"])
        if major is None:
            return None
        return lower_bound(
            major,
            component(match["from_minor"]),
            component(match["from_patch"]),
            match["from_prerelease"],
            suffix,
        )

    @staticmethod
    def _upper(match: re.Match[str], suffix: str) -> str | None:
        major = component(match["to_major"])
        minor = component(match["to_minor"])
        patch = component(match["to_patch"])
        prerelease = match["to_prerelease"]

        if major is None:
            return None
        if minor is None:
            return bound("<", major + 1, 0, 0, suffix)
        if patch is None:
            return bound("<", major, minor + 1, 0, suffix)
        if prerelease:
            return bound("<=", major, minor, patch, f"-{prerelease}")
        return bound("<", major, minor, patch + 1, suffix)


register_normalizer("hyphen", HyphenNormalizer)
