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

"""Normalizer base protocol and registry for semverkit.

This module defines the foundational components for range normalization:

- RangeNormalizer protocol: Interface that all normalizers must implement
- Normalizer registry: Global dict mapping normalizer names to implementations
- Registration and lookup functions: register_normalizer() and get_normalizer()
- Dispatch: normalize_clause() tries the normalizers in NORMALIZER_ORDER

A normalizer rewrites one OR clause written in a shorthand syntax into a
canonical clause: space-separated ``operator+version`` tokens that are
AND-ed together. Supported syntaxes:

- wildcard: ``*`` or an empty clause
- ivy: ``[1.0,2.0)``, ``]1.0,)``, ``latest``
- hyphen: ``1.2.3 - 2.3.4``
- caret: ``^1.2.3``
- tilde: ``~1.2.3``, ``~>1.2``
- xrange: ``1.2.x``, ``>=1.X``, ``<=2``

Design Philosophy:
    - Normalizers are Protocol classes (structural subtyping, not inheritance)
    - Registration happens at module import time (normalizers self-register)
    - The default dispatch order is fixed; the first normalizer returning
      text wins
    - A clause nobody accepts passes through unchanged

Example:
    Implementing a custom normalizer:
        ```python
        from semverkit.ranges.normalizers.base import register_normalizer

        class PinNormalizer:
            def normalize(self, clause, include_prerelease):
                if not clause.startswith("pin:"):
                    return None
                return "=" + clause[len("pin:"):]

        register_normalizer("pin", PinNormalizer)
        ```

Note:
    Registering a name does not add it to NORMALIZER_ORDER. Pass a custom
    order to normalize_clause() (or compile_range()) to use it. Registering
    an existing name replaces that normalizer (allows monkey-patching for
    tests).
"""

from __future__ import annotations

from typing import Protocol, Sequence

from semverkit.grammar import LOWEST_PRERELEASE, WILDCARDS

# Dispatch order; the first normalizer that accepts a clause wins
NORMALIZER_ORDER: tuple[str, ...] = (
    "wildcard",
    "ivy",
    "hyphen",
    "caret",
    "tilde",
    "xrange",
)

# Canonical clause matching every release
ALL_RANGE = ">=0.0.0"


# -------------------------------
# Normalizer Protocol
# -------------------------------


class RangeNormalizer(Protocol):
    """Protocol for range syntax normalizers."""

    def normalize(self, clause: str, include_prerelease: bool) -> str | None:
        """Rewrite a clause into canonical comparator tokens.

        Args:
            clause: One OR clause, trimmed, with operators already glued to
                their versions.
            include_prerelease: If True, synthesized bounds receive the
                lowest pre-release suffix ``-0``.

        Returns:
            The canonical clause, or None if the clause is not written in
            this normalizer's syntax.
        """
        ...


# -------------------------------
# Normalizer Registry
# -------------------------------

_NORMALIZER_REGISTRY: dict[str, type[RangeNormalizer]] = {}


def register_normalizer(name: str, normalizer_class: type[RangeNormalizer]) -> None:
    """Register a normalizer by name in the global registry.

    Args:
        name: Normalizer name (e.g., "caret").
        normalizer_class: The normalizer class to register.
    """
    _NORMALIZER_REGISTRY[name] = normalizer_class


def get_normalizer(name: str) -> RangeNormalizer:
    """Get a normalizer instance by name from the global registry.

    Normalizers are stateless, so a new instance is created for each call.

    Args:
        name: Normalizer name. Must match a name registered via
            register_normalizer(). Case-sensitive.

    Returns:
        A new instance of the requested normalizer.

    Raises:
        KeyError: If the name is not registered. The message lists the
            available normalizers.
    """
    if name not in _NORMALIZER_REGISTRY:
        available = ", ".join(_NORMALIZER_REGISTRY.keys())
        raise KeyError(
            f"Unknown range normalizer: {name!r}. Available: {available or '(none)'}"
        )
    return _NORMALIZER_REGISTRY[name]()


def normalize_clause(
    clause: str,
    include_prerelease: bool,
    order: Sequence[str] = NORMALIZER_ORDER,
) -> tuple[str | None, str]:
    """Run the normalizers in dispatch order over one clause.

    Args:
        clause: One OR clause, already trimmed and operator-glued.
        include_prerelease: Passed through to each normalizer.
        order: Registered normalizer names to try, first match wins.

    Returns:
        A tuple (name, canonical), where name is the accepting normalizer
            or None when none accepted, and canonical is the rewritten clause
            (the input itself when none accepted).
    """
    for name in order:
        result = get_normalizer(name).normalize(clause, include_prerelease)
        if result is not None:
            return name, result
    return None, clause


# -------------------------------
# Shared helpers
# -------------------------------


def prerelease_suffix(include_prerelease: bool) -> str:
    return LOWEST_PRERELEASE if include_prerelease else ""


def all_versions(include_prerelease: bool) -> str:
    """Canonical clause accepting every version."""
    return ALL_RANGE + prerelease_suffix(include_prerelease)


def component(text: str | None) -> int | None:
    """Parse a version component; None stands for a wildcard or a gap."""
    if text is None or text in WILDCARDS:
        return None
    return int(text)


def bound(operator: str, major: int, minor: int, patch: int, suffix: str = "") -> str:
    return f"{operator}{major}.{minor}.{patch}{suffix}"


def lower_bound(
    major: int,
    minor: int | None,
    patch: int | None,
    prerelease: str | None,
    suffix: str,
) -> str:
    """``>=`` bound for a possibly partial version.

    Gaps are filled with zero and receive ``suffix``. A complete version
    keeps its own pre-release and never receives ``suffix``.
    """
    if minor is None:
        return bound(">=", major, 0, 0, suffix)
    if patch is None:
        return bound(">=", major, minor, 0, suffix)
    if prerelease:
        return bound(">=", major, minor, patch, f"-{prerelease}")
    return bound(">=", major, minor, patch)
