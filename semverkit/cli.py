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

"""Command-line interface for semverkit.

This module provides the main CLI entry point for the semverkit tool,
offering commands to inspect, compare and range-check semantic versions.

Commands:

    parse: Show the components of a version
    compare: Compare two versions by precedence
    satisfies: Check a version against a range expression
    check: Check every constraint in a YAML manifest

Example:
    Inspect a version:
        ```bash
        $ semverkit parse 1.2.3-rc.1+build.5
        ```

    Compare two versions:
        ```bash
        $ semverkit compare 1.0.0-rc3 1.0.0-rc11
        ```

    Check a range:
        ```bash
        $ semverkit satisfies 1.2.4 "^1.2.0 || 2.x"
        ```

    Check a manifest with debug output:
        ```bash
        $ semverkit check constraints.yaml --debug
        ```

Exit Codes:

- 0: Success (version valid, range satisfied, all constraints satisfied)
- 1: Error, or a range/constraint that is not satisfied

Note:
    Each command has its own handler function (cmd_<command>).
    Verbose mode shows full tracebacks on errors for debugging.
    Debug mode implies verbose mode and shows each range clause as it is
    normalized.

"""

from __future__ import annotations

import argparse
from importlib.metadata import version
from pathlib import Path
import sys

from semverkit.core import check_manifest
from semverkit.exceptions import ConfigError, SemverError
from semverkit.logging import get_logger, set_global_logger
from semverkit.ranges.compiler import compile_range
from semverkit.versioning.version import parse_version


def _print_error(err: Exception, args: argparse.Namespace) -> None:
    print(f"Error: {err}")
    if args.verbose or args.debug:
        import traceback

        traceback.print_exc()


def _dotted(parts: tuple[str, ...]) -> str:
    return ".".join(parts) if parts else "(none)"


def cmd_parse(args: argparse.Namespace) -> int:
    """Handler for 'semverkit parse' command.

    Args:
        args: Parsed command-line arguments containing the version text
            and verbosity flags.

    Returns:
        Exit code (0 for a valid version, 1 otherwise).

    """
    # Configure global logger
    logger = get_logger(verbose=args.verbose, debug=args.debug)
    set_global_logger(logger)

    try:
        parsed = parse_version(args.version)
    except SemverError as err:
        _print_error(err, args)
        return 1

    print("=" * 70)
    print("VERSION")
    print("=" * 70)
    print(f"Version:      {parsed}")
    print(f"Major:        {parsed.major}")
    print(f"Minor:        {parsed.minor}")
    print(f"Patch:        {parsed.patch}")
    print(f"Pre-release:  {_dotted(parsed.prerelease)}")
    print(f"Build:        {_dotted(parsed.build)}")
    print(f"Stable:       {'yes' if parsed.is_stable else 'no'}")
    print("=" * 70)

    return 0


def cmd_compare(args: argparse.Namespace) -> int:
    """Handler for 'semverkit compare' command.

    Prints -1, 0 or 1 (left against right) and the most significant
    differing field.

    Args:
        args: Parsed command-line arguments containing both versions.

    Returns:
        Exit code (0 when both versions parse, 1 otherwise).

    """
    # Configure global logger
    logger = get_logger(verbose=args.verbose, debug=args.debug)
    set_global_logger(logger)

    try:
        left = parse_version(args.left)
        right = parse_version(args.right)
    except SemverError as err:
        _print_error(err, args)
        return 1

    result = left.compare_to(right)
    symbol = {-1: "<", 0: "==", 1: ">"}[result]

    print("=" * 70)
    print("COMPARISON")
    print("=" * 70)
    print(f"Result:       {result}")
    print(f"Relation:     {left} {symbol} {right}")
    print(f"Difference:   {left.diff(right).name.lower()}")
    print("=" * 70)

    return 0


def cmd_satisfies(args: argparse.Namespace) -> int:
    """Handler for 'semverkit satisfies' command.

    Args:
        args: Parsed command-line arguments containing the version, the
            range expression and the --include-prerelease flag.

    Returns:
        Exit code (0 when satisfied, 1 when not satisfied or on error).

    """
    # Configure global logger
    logger = get_logger(verbose=args.verbose, debug=args.debug)
    set_global_logger(logger)

    try:
        parsed = parse_version(args.version)
    except SemverError as err:
        _print_error(err, args)
        return 1

    ranges = compile_range(args.range, args.include_prerelease)
    satisfied = ranges.is_satisfied_by(parsed)

    print("=" * 70)
    print("RANGE CHECK")
    print("=" * 70)
    print(f"Version:      {parsed}")
    print(f"Range:        {args.range}")
    print(f"Canonical:    {ranges or '(matches nothing)'}")
    print(f"Pre-release:  {'included' if args.include_prerelease else 'excluded'}")
    print(f"Result:       {'SATISFIED' if satisfied else 'NOT SATISFIED'}")
    print("=" * 70)

    return 0 if satisfied else 1


def cmd_check(args: argparse.Namespace) -> int:
    """Handler for 'semverkit check' command.

    Args:
        args: Parsed command-line arguments containing the manifest path.

    Returns:
        Exit code (0 when every constraint is satisfied, 1 otherwise).

    Note:
        Constraints with unparsable versions are reported as errors in
        the results table rather than aborting the whole check.

    """
    # Configure global logger
    logger = get_logger(verbose=args.verbose, debug=args.debug)
    set_global_logger(logger)

    manifest_path = Path(args.manifest).resolve()

    print(f"Checking manifest: {manifest_path}")
    print()

    try:
        result = check_manifest(manifest_path)
    except ConfigError as err:
        _print_error(err, args)
        return 1
    except SemverError as err:
        # Catch any other semverkit errors we might have missed
        _print_error(err, args)
        return 1

    print("=" * 70)
    print("CONSTRAINT RESULTS")
    print("=" * 70)
    for entry in result.results:
        if entry.error:
            status = "ERROR"
        elif entry.satisfied:
            status = "PASS"
        else:
            status = "FAIL"
        print(f"[{status}] {entry.name}: {entry.version} in {entry.range}")
        if entry.error:
            print(f"        {entry.error}")
        else:
            print(f"        canonical: {entry.canonical_range or '(matches nothing)'}")
    print("=" * 70)
    print(f"Constraints:  {len(result.results)}")
    print(f"Failed:       {len(result.failed)}")
    print("=" * 70)
    print()

    if result.all_satisfied:
        print("[SUCCESS] All constraints satisfied!")
        return 0

    print(f"[FAILED] {len(result.failed)} constraint(s) not satisfied")
    return 1


def _add_verbosity_flags(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show progress and high-level status updates",
    )
    subparser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Show detailed debugging output (implies --verbose)",
    )


def main() -> None:
    """Main entry point for the semverkit CLI.

    This function is registered as the 'semverkit' console script in
    pyproject.toml.
    """
    parser = argparse.ArgumentParser(
        prog="semverkit",
        description="semverkit - semantic version parsing, ordering and range checks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"semverkit {version('semverkit')}",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Available commands",
        required=True,
    )

    # 'parse' command
    parser_parse = subparsers.add_parser(
        "parse",
        help="Show the components of a version",
        description="Parse a version strictly and print its components.",
    )
    parser_parse.add_argument(
        "version",
        help="Version text, e.g. 1.2.3-rc.1+build.5",
    )
    _add_verbosity_flags(parser_parse)
    parser_parse.set_defaults(func=cmd_parse)

    # 'compare' command
    parser_compare = subparsers.add_parser(
        "compare",
        help="Compare two versions by precedence",
        description="Print -1, 0 or 1 comparing LEFT with RIGHT, ignoring build metadata.",
    )
    parser_compare.add_argument("left", help="Left-hand version")
    parser_compare.add_argument("right", help="Right-hand version")
    _add_verbosity_flags(parser_compare)
    parser_compare.set_defaults(func=cmd_compare)

    # 'satisfies' command
    parser_satisfies = subparsers.add_parser(
        "satisfies",
        help="Check a version against a range expression",
        description="Compile a range expression and check whether a version satisfies it.",
    )
    parser_satisfies.add_argument("version", help="Version to check")
    parser_satisfies.add_argument(
        "range",
        help='Range expression, e.g. "^1.2.0 || >=2.0.0 <3.0.0"',
    )
    parser_satisfies.add_argument(
        "--include-prerelease",
        action="store_true",
        help="Let pre-release versions satisfy ranges that name no pre-release",
    )
    _add_verbosity_flags(parser_satisfies)
    parser_satisfies.set_defaults(func=cmd_satisfies)

    # 'check' command
    parser_check = subparsers.add_parser(
        "check",
        help="Check every constraint in a YAML manifest",
        description="Load a constraint manifest and report which versions satisfy their ranges.",
    )
    parser_check.add_argument(
        "manifest",
        help="Path to the manifest YAML file",
    )
    _add_verbosity_flags(parser_check)
    parser_check.set_defaults(func=cmd_check)

    # Parse and dispatch
    args = parser.parse_args()

    # Call the appropriate command handler
    exit_code = args.func(args)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
