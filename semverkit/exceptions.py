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

"""Exception hierarchy for semverkit.

This module defines a custom exception hierarchy that allows library users
to distinguish between different types of errors:

- MalformedVersionError: Version text does not match the strict grammar
- NumericOverflowError: A numeric component does not fit in 32 bits
- ConfigError: Manifest-related errors (YAML parse, missing fields, bad types)

All exceptions inherit from SemverError, allowing users to catch all
semverkit errors with a single except clause if needed. The two version
errors also inherit from ValueError, so code that already guards parsing
with ``except ValueError`` keeps working.

Example:
    Catching specific error types:
        ```python
        from semverkit import parse_version
        from semverkit.exceptions import MalformedVersionError, NumericOverflowError

        try:
            version = parse_version("99999999999.0.0")
        except NumericOverflowError as e:
            print(f"Too big: {e.token}")
        except MalformedVersionError as e:
            print(f"Not a version: {e.text}")
        ```

    Catching all semverkit errors:
        ```python
        from semverkit.exceptions import SemverError

        try:
            result = check_manifest(Path("constraints.yaml"))
        except SemverError as e:
            print(f"semverkit error: {e}")
        ```
"""

from __future__ import annotations

__all__ = [
    "SemverError",
    "MalformedVersionError",
    "NumericOverflowError",
    "ConfigError",
]


class SemverError(Exception):
    """Base exception for all semverkit errors.

    All semverkit-specific exceptions inherit from this class, allowing
    users to catch all semverkit errors with a single except clause if
    needed.
    """

    pass


class MalformedVersionError(SemverError, ValueError):
    """Raised when version text does not match the strict SemVer grammar.

    This covers a wrong number of core components, leading zeros, a
    leading ``v``, empty or disallowed pre-release/build identifiers and
    any other character outside the grammar.

    Attributes:
        text: The offending version text (after trimming).
    """

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Version [{text}] is not valid semver.")


class NumericOverflowError(SemverError, ValueError):
    """Raised when a numeric token is well formed but wider than 32 bits.

    The check happens on the arbitrary-precision value, so oversized input
    is reported with the original token instead of being truncated.

    Attributes:
        token: The numeric token that exceeded the limit.
    """

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Value [{token}] is too big.")


class ConfigError(SemverError):
    """Raised for constraint manifest errors.

    This exception is raised when there are problems with:

    - Missing manifest files (file not found)
    - YAML parse errors (syntax errors, empty documents)
    - Invalid manifest structure (top level not a mapping, constraints not
        a list, missing 'name'/'version'/'range' fields, wrong value types)

    Example:
        Catching configuration errors:
            ```python
            from semverkit.exceptions import ConfigError

            try:
                manifest = load_manifest(Path("invalid.yaml"))
            except ConfigError as e:
                print(f"Config error: {e}")
            ```
    """

    pass
