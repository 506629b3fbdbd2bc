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

"""Caret normalizer: ``^A`` allows changes that keep the left-most
non-zero component.

Translates:

- ``^1.2.3`` to ``>=1.2.3 <2.0.0``
- ``^1.2`` to ``>=1.2.0 <2.0.0``
- ``^1`` to ``>=1.0.0 <2.0.0``
- ``^0.2.3`` to ``>=0.2.3 <0.3.0``
- ``^0.0.3`` to ``>=0.0.3 <0.0.4``
- ``^0.0`` to ``>=0.0.0 <0.1.0``

With pre-releases included the upper bound, and the lower bound of a
partial version, receive ``-0``: ``^1.2`` becomes
``>=1.2.0-0 <2.0.0-0``. A wildcard major (``^x``) matches everything.
"""

from __future__ import annotations

from semverkit.grammar import CARET

from .base import (
    all_versions,
    bound,
    component,
    lower_bound,
    prerelease_suffix,
    register_normalizer,
)


class CaretNormalizer:
    """Rewrites ``^`` ranges."""

    def normalize(self, clause: str, include_prerelease: bool) -> str | None:
        match = CARET.fullmatch(clause)
        if not match:
            return None

        major = component(match["major"])
        minor = component(match["minor"])
        patch = component(match["patch"])
        suffix = prerelease_suffix(include_prerelease)

        if major is None:
            return all_versions(include_prerelease)

        lower = lower_bound(major, minor, patch, match["prerelease"], suffix)

        if minor is None or major != 0:
            upper = bound("<", major + 1, 0, 0, suffix)
        elif minor != 0 or patch is None:
            upper = bound("<", 0, minor + 1, 0, suffix)
        else:
            upper = bound("<", 0, 0, patch + 1, suffix)

        return f"{lower} {upper}"


register_normalizer("caret", CaretNormalizer)
