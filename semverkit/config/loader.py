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

"""
Constraint manifest loader for semverkit.

A manifest lists named versions together with the range each one must
satisfy. It is plain YAML:

    apiVersion: semverkit/v1
    defaults:
      include_prerelease: false
    constraints:
      - name: api-client
        version: "1.4.2"
        range: "^1.2.0"
      - name: runtime
        version: "3.0.0-rc.1"
        range: ">=3.0.0-rc.0 <4"
        include_prerelease: true

Layering
--------
An optional ``defaults.yaml`` next to the manifest is loaded first and
the manifest is merged on top of it:

  - **Dicts**: Recursively merged (keys from the manifest override)
  - **Lists**: Completely replaced (NOT appended/extended)
  - **Scalars**: Overwritten

After merging, every constraint without its own ``include_prerelease``
receives the value from ``defaults`` (False when unset).

Functions
---------
load_manifest : function
    Load, merge and validate a manifest (main public API).

Error Handling
--------------
- ConfigError: missing file, YAML syntax error, empty document, or any
  structural problem. Structural problems are collected and reported
  together in one message.
- All errors are chained with "from err" for better debugging

Examples
--------
    >>> from pathlib import Path
    >>> from semverkit.config import load_manifest
    >>> manifest = load_manifest(Path("constraints.yaml"))
    >>> manifest["constraints"][0]["name"]
    'api-client'

Notes
-----
- Versions and ranges must be YAML strings; quote values such as
  ``1.4`` that YAML would otherwise read as numbers
- The loader does not parse versions or ranges; that is left to
  semverkit.core.check_manifest
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from semverkit.exceptions import ConfigError
from semverkit.logging import Channel

__all__ = ["load_manifest", "API_VERSION", "DEFAULTS_FILENAME"]

API_VERSION = "semverkit/v1"
DEFAULTS_FILENAME = "defaults.yaml"

_REQUIRED_CONSTRAINT_FIELDS = ("name", "version", "range")

_log = Channel("MANIFEST")


# -------------------------------
# YAML helpers
# -------------------------------


def _load_yaml_file(p: Path) -> Any:
    """
    Load a YAML file and return the parsed Python object.

    Raises:
      ConfigError - when the file does not exist, does not parse, or is empty
    """
    if not p.exists():
        raise ConfigError(f"Manifest file not found: {p}")
    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as err:
        raise ConfigError(f"Error parsing YAML: {p}: {err}") from err
    if data is None:
        raise ConfigError(f"YAML file is empty: {p}")
    return data


# -------------------------------
# Merge logic
# -------------------------------


def _deep_merge_dicts(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """
    Deep-merge two dicts with "overlay wins".

    Rules:
      - dict + dict -> deep merge
      - list + list -> overlay REPLACES base (not concatenated)
      - everything else -> overlay overwrites base

    This function does not mutate inputs; returns a new dict.
    """
    result: dict[str, Any] = dict(base)
    for k, v in overlay.items():
        if k in result and isinstance(result[k], dict) and isinstance(v, dict):
            result[k] = _deep_merge_dicts(result[k], v)
        else:
            # Replace lists and scalars entirely
            result[k] = v
    return result


# -------------------------------
# Validation
# -------------------------------


def _validate(manifest: dict[str, Any]) -> list[str]:
    """Return human-readable problems with a merged manifest."""
    errors: list[str] = []

    api_version = manifest.get("apiVersion")
    if api_version is None:
        errors.append("Missing required field: apiVersion")
    elif api_version != API_VERSION:
        errors.append(
            f"Unsupported apiVersion: {api_version!r} (expected {API_VERSION!r})"
        )

    defaults = manifest.get("defaults", {})
    if not isinstance(defaults, dict):
        errors.append("Field 'defaults' must be a mapping")
    elif not isinstance(defaults.get("include_prerelease", False), bool):
        errors.append("Field 'defaults.include_prerelease' must be a boolean")

    if "constraints" not in manifest:
        errors.append("Missing required field: constraints")
        return errors

    constraints = manifest["constraints"]
    if not isinstance(constraints, list):
        errors.append("Field 'constraints' must be a list")
        return errors

    for i, entry in enumerate(constraints):
        prefix = f"constraints[{i}]"
        if not isinstance(entry, dict):
            errors.append(f"{prefix}: Constraint must be a mapping")
            continue
        for field in _REQUIRED_CONSTRAINT_FIELDS:
            if field not in entry:
                errors.append(f"{prefix}: Missing required field: {field}")
            elif not isinstance(entry[field], str):
                errors.append(f"{prefix}: Field '{field}' must be a string")
        if not isinstance(entry.get("include_prerelease", False), bool):
            errors.append(f"{prefix}: Field 'include_prerelease' must be a boolean")

    return errors


# -------------------------------
# Public API
# -------------------------------


def load_manifest(manifest_path: Path) -> dict[str, Any]:
    """Load, merge and validate a constraint manifest.

    Args:
        manifest_path: Path to the manifest YAML file.

    Returns:
        The merged manifest. ``defaults.include_prerelease`` is always
            present, and every constraint carries its effective
            ``include_prerelease`` flag.

    Raises:
        ConfigError: If a file is missing or unparsable, or the merged
            manifest is structurally invalid.

    """
    manifest_path = Path(manifest_path).resolve()
    _log.verbose(f"Loading manifest: {manifest_path}")

    manifest_obj = _load_yaml_file(manifest_path)
    if not isinstance(manifest_obj, dict):
        raise ConfigError(
            f"Top-level YAML must be a mapping (dict): {manifest_path}"
        )

    merged: dict[str, Any] = {}
    defaults_path = manifest_path.parent / DEFAULTS_FILENAME
    if defaults_path != manifest_path and defaults_path.exists():
        _log.verbose(f"Loading defaults: {defaults_path}")
        defaults_obj = _load_yaml_file(defaults_path)
        if not isinstance(defaults_obj, dict):
            raise ConfigError(
                f"Top-level YAML must be a mapping (dict): {defaults_path}"
            )
        merged = _deep_merge_dicts(merged, defaults_obj)

    merged = _deep_merge_dicts(merged, manifest_obj)

    errors = _validate(merged)
    if errors:
        details = "\n  - ".join(errors)
        raise ConfigError(f"Invalid manifest {manifest_path}:\n  - {details}")

    defaults = dict(merged.get("defaults", {}))
    defaults.setdefault("include_prerelease", False)
    merged["defaults"] = defaults
    merged["constraints"] = [
        {"include_prerelease": defaults["include_prerelease"], **entry}
        for entry in merged["constraints"]
    ]

    _log.verbose(f"Loaded {len(merged['constraints'])} constraint(s)")
    return merged
