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

"""Best-effort extraction of a version from free-form text.

Useful for tool output, file names and tags such as ``"v1.2"``,
``"release-3"`` or ``"Chrome 140.0.7339.128"``. Pre-release and build
information is dropped unless the whole text already is a strict version.

Example:
    >>> from semverkit.versioning import coerce
    >>> str(coerce("v1.2"))
    '1.2.0'
    >>> coerce("no digits here") is None
    True

"""

from __future__ import annotations

from semverkit.exceptions import NumericOverflowError
from semverkit.grammar import COERCE
from semverkit.versioning.version import Version, try_parse

__all__ = ["coerce"]


def coerce(text: str | None) -> Version | None:
    """Coerce arbitrary text into a Version.

    The text is first parsed strictly. If that fails, the first run of one
    to three dot-separated numbers is used, with missing minor and patch
    filled with zero.

    Args:
        text: Text that may contain a version.

    Returns:
        The coerced Version, or None if no numbers were found or a number
        does not fit in 32 bits.

    """
    if text is None:
        return None

    strict = try_parse(text)
    if strict is not None:
        return strict

    match = COERCE.search(text)
    if not match:
        return None

    major, minor, patch = (int(part or 0) for part in match.group(2, 3, 4))
    try:
        return Version(major, minor, patch)
    except NumericOverflowError:
        return None
