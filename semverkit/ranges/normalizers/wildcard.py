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

"""Wildcard normalizer: ``*`` and the empty clause match every version.

Translates:

- ``*`` to ``>=0.0.0``
- an empty clause to ``>=0.0.0``

With pre-releases included both become ``>=0.0.0-0``.
"""

from __future__ import annotations

from .base import all_versions, register_normalizer


class WildcardNormalizer:
    """Accepts only ``*`` and the empty clause."""

    def normalize(self, clause: str, include_prerelease: bool) -> str | None:
        if clause in ("*", ""):
            return all_versions(include_prerelease)
        return None


register_normalizer("wildcard", WildcardNormalizer)
