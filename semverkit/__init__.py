"""
semverkit - semantic versions and version ranges

A Python library and CLI for parsing semantic versions, ordering them by
precedence, and checking them against range expressions.

semverkit provides:
  - Strict SemVer 2.0.0 parsing into immutable Version values
  - Precedence ordering with natural ordering of pre-release identifiers
  - Range expressions in several syntaxes: comparators, hyphen ranges,
    caret and tilde ranges, x-ranges, Ivy intervals and wildcards
  - Version conveniences: increments, diff, coercion of free-form text
  - YAML constraint manifests checked from the command line

Quick Start
-----------
Check a version against a range:

    $ semverkit satisfies 1.2.4 "^1.2.0"

Check every constraint in a manifest:

    $ semverkit check constraints.yaml

For full CLI documentation:

    $ semverkit --help

Package Structure
-----------------
cli : module
    Command-line interface with argparse.
core : module
    Manifest checking orchestration.
config : package
    YAML manifest loading and merging.
grammar : module
    Regular expressions shared by the parser and the range syntaxes.
versioning : package
    Version parsing, precedence and derivation.
ranges : package
    Range compilation, normalizers and evaluation.

Public API
----------
The most used functions are re-exported here:

    from semverkit import parse_version, compile_range
    parse_version("1.2.3").satisfies(">=1.0.0 <2.0.0")

For more details, see the individual module docstrings.

Project Information
-------------------
Author: Roger Cibrian
License: Apache-2.0
"""

__version__ = "0.1.0"
__author__ = "Roger Cibrian"
__license__ = "Apache-2.0"
__description__ = "semverkit - semantic version parsing, ordering and range checks"

# Re-export commonly used functions for convenience
from semverkit.config import load_manifest
from semverkit.core import check_manifest
from semverkit.ranges import (
    RangeExpression,
    RangeList,
    compile_range,
    filter_satisfying,
    max_satisfying,
    min_satisfying,
)
from semverkit.versioning import (
    ZERO,
    Version,
    VersionDiff,
    coerce,
    compare_versions,
    is_valid,
    parse_version,
    try_parse,
)

__all__ = [
    "__version__",
    "__author__",
    "__license__",
    "__description__",
    "Version",
    "VersionDiff",
    "ZERO",
    "parse_version",
    "try_parse",
    "is_valid",
    "coerce",
    "compare_versions",
    "compile_range",
    "RangeList",
    "RangeExpression",
    "filter_satisfying",
    "max_satisfying",
    "min_satisfying",
    "load_manifest",
    "check_manifest",
]
