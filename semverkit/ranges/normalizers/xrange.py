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

"""X-range normalizer: ``x``, ``X``, ``*`` and ``+`` stand for any value.

Each whitespace-separated term is rewritten on its own and terms that are
not x-ranges are dropped. A missing component counts as a wildcard, so
``1`` means ``1.x.x``.

Translates:

- ``1.x`` to ``>=1.0.0 <2.0.0``
- ``1.2.x`` (or ``=1.2.x``) to ``>=1.2.0 <1.3.0``
- ``>1.2.x`` to ``>=1.3.0``
- ``>1.x`` to ``>=2.0.0``
- ``<=1.2.x`` to ``<1.3.0``
- ``>=1.2.x`` to ``>=1.2.0``
- ``<1.x`` to ``<1.0.0``
- ``>=1.2.3`` unchanged

A wildcard major with an operator follows node-semver: ``<*`` and ``>*``
match nothing (``<0.0.0-0``), while ``>=*``, ``<=*`` and ``=*`` match
everything (``>=0.0.0``). Some tools read ``>*`` and ``<=*`` the other
way round.

With pre-releases included every synthesized bound receives ``-0``;
fully specified terms are left alone.
"""

from __future__ import annotations

from semverkit.grammar import XRANGE

from .base import (
    bound,
    component,
    prerelease_suffix,
    register_normalizer,
)

# Satisfied by no version at all
_NOTHING = "<0.0.0-0"


class XRangeNormalizer:
    """Rewrites x-range terms; declines when no term is an x-range."""

    def normalize(self, clause: str, include_prerelease: bool) -> str | None:
        suffix = prerelease_suffix(include_prerelease)
        terms = [self._term(term, suffix) for term in clause.split()]
        terms = [term for term in terms if term is not None]
        if not terms:
            return None
        return " ".join(terms)

    @staticmethod
    def _term(term: str, suffix: str) -> str | None:
        match = XRANGE.fullmatch(term)
        if not match:
            return None

        operator = match["operator"]
        major = component(match["major"])
        minor = component(match["minor"])
        patch = component(match["patch"])

        if operator == "=" and patch is None:
            operator = ""

        if major is None:
            if operator in ("<", ">"):
                return _NOTHING
            return bound(">=", 0, 0, 0, suffix)

        if operator and patch is None:
            if operator in (">", "<="):
                operator = ">=" if operator == ">" else "<"
                if minor is None:
                    major, minor = major + 1, 0
                else:
                    minor += 1
            elif minor is None:
                minor = 0
            return bound(operator, major, minor, 0, suffix)

        if minor is None:
            return (
                f"{bound('>=', major, 0, 0, suffix)} "
                f"{bound('<', major + 1, 0, 0, suffix)}"
            )
        if patch is None:
            return (
                f"{bound('>=', major, minor, 0, suffix)} "
                f"{bound('<', major, minor + 1, 0, suffix)}"
            )

        version = bound("", major, minor, patch)
        if match["prerelease"]:
            version += f"-{match['prerelease']}"
        if match["build"]:
            version += f"+{match['build']}"
        return operator + version


register_normalizer("xrange", XRangeNormalizer)
