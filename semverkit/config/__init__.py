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

"""Constraint manifest loading for semverkit.

Manifests are YAML files listing named versions and the ranges they must
satisfy. An optional sibling defaults.yaml is deep-merged underneath:
dicts are merged recursively and lists/scalars are replaced (last wins).

Public API:

- load_manifest: Load, merge and validate a manifest

Example:
    Basic usage:

        from pathlib import Path
        from semverkit.config import load_manifest

        manifest = load_manifest(Path("constraints.yaml"))
        for entry in manifest["constraints"]:
            print(entry["name"], entry["range"])

"""

from .loader import load_manifest

__all__ = ["load_manifest"]
