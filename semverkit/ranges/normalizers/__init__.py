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

"""Range normalizers for semverkit.

Each module implements one range syntax and registers itself on import.
Dispatch order and the registry live in :mod:`.base`.

Example:
    Normalize a single clause:

        >>> from semverkit.ranges.normalizers import normalize_clause
        >>> normalize_clause("^1.2", include_prerelease=False)
        ('caret', '>=1.2.0 <2.0.0')

"""

# Import normalizer modules to trigger self-registration
from . import (
    caret,  # noqa: F401
    hyphen,  # noqa: F401
    ivy,  # noqa: F401
    tilde,  # noqa: F401
    wildcard,  # noqa: F401
    xrange,  # noqa: F401
)
from .base import (
    NORMALIZER_ORDER,
    RangeNormalizer,
    get_normalizer,
    normalize_clause,
    register_normalizer,
)

__all__ = [
    "NORMALIZER_ORDER",
    "RangeNormalizer",
    "get_normalizer",
    "normalize_clause",
    "register_normalizer",
]
