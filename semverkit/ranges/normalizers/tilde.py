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

"""Tilde normalizer: ``~A`` (or ``~>A``) allows patch-level changes when
a minor is given, minor-level changes otherwise.

Translates:

- ``~1.2.3`` to ``>=1.2.3 <1.3.0``
- ``~1.2`` to ``>=1.2.0 <1.3.0``
- ``~1`` to ``>=1.0.0 <2.0.0``
- ``~0.2.3`` to ``>=0.2.3 <0.3.0``
- ``~>1.2.3`` to ``>=1.2.3 <1.3.0``

With pre-releases included: ``~1.2`` becomes ``>=1.2.0-0 <1.3.0-0``.
"""

from __future__ import annotations

from semverkit.grammar import TILDE

from .base import (
    all_versions,
    bound,
    component,
    lower_bound,
    prerelease_suffix,
    register_normalizer,
)


class TildeNormalizer:
    """Rewrites ``~`` and ``~>`` ranges."""

    def normalize(self, clause: str, include_prerelease: bool) -> str | None:
        match = TILDE.fullmatch(clause)
        if not match:
            return None

        major = component(match["major"])
        minor = component(match["minor"])
        patch = component(match["patch"])
        suffix = prerelease_suffix(include_prerelease)

        if major is None:
            return all_versions(include_prerelease)

        lower = lower_bound(major, minor, patch, match["prerelease"], suffix)
        if minor is None:
            upper = bound("<", major + 1, 0, 0, suffix)
        else:
            upper = bound("<", major, minor + 1, 0, suffix)

        return f"{lower} {upper}"


register_normalizer("tilde", TildeNormalizer)
