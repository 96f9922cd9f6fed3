#!/usr/bin/env python3
"""
Compare and select loosely formatted version strings from the command line.

Usage:
  loosever normalize v1.7.1.10               # -> 1.7.1.10
  loosever compare v1.0 1.0.0                # -> 0
  loosever at-least 1.7.1 1.7.0              # exit code 0 when satisfied
  loosever latest 1.0.0 1.7.1.10 1.7.1       # -> 1.7.1.10
  loosever latest -f releases.yaml -k tag    # latest "tag" field of the records in a file
  loosever sort 4.12 4.10 4.15 --latest 2    # -> 4.12, 4.15
  loosever series v1.4.0 v1.4.1 v1.5.0       # latest tag per major.minor
"""

from __future__ import annotations

import argparse
import logging
import sys

import yaml

from loosever.config import load_versions_file
from loosever.errors import VersionFileError
from loosever.release_tags import latest_per_series
from loosever.settings import Settings
from loosever.version_utils import (
    compare,
    get_earliest_versions,
    get_latest_versions,
    get_sorted_versions,
    is_at_least,
    latest,
    normalize,
)

logger = logging.getLogger(__name__)

COMMANDS = ("normalize", "compare", "at-least", "latest", "sort", "series")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="loosever",
        description="Compare loosely formatted version strings.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s compare v1.0 1.0.0
  %(prog)s latest -f releases.yaml -k tag
""",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging (overrides LOOSEVER_LOG_LEVEL).",
    )

    subparsers = parser.add_subparsers(dest="command", help="Action to perform")

    p = subparsers.add_parser("normalize", help="Strip prefixes and whitespace from versions")
    p.add_argument("versions", nargs="+", metavar="VERSION")

    p = subparsers.add_parser("compare", help="Print -1, 0 or 1 comparing A to B")
    p.add_argument("a", metavar="A")
    p.add_argument("b", metavar="B")

    p = subparsers.add_parser("at-least", help="Succeed if VERSION >= TARGET")
    p.add_argument("version", metavar="VERSION")
    p.add_argument("target", metavar="TARGET")

    p = subparsers.add_parser("latest", help="Print the latest of the given versions")
    p.add_argument("versions", nargs="*", metavar="VERSION")
    p.add_argument(
        "-f", "--file",
        dest="versions_file",
        help="YAML/JSON file with a list of versions or records.",
    )
    p.add_argument(
        "-k", "--key",
        help="Record field holding the version (default: LOOSEVER_VERSION_KEY, "
             "else version, versionCode, tag).",
    )

    p = subparsers.add_parser("sort", help="Print versions in ascending order")
    p.add_argument("versions", nargs="+", metavar="VERSION")
    limit = p.add_mutually_exclusive_group()
    limit.add_argument("--latest", type=int, metavar="N", help="Only the latest N versions.")
    limit.add_argument("--earliest", type=int, metavar="N", help="Only the earliest N versions.")

    p = subparsers.add_parser("series", help="Print the latest tag of each release series as YAML")
    p.add_argument("tags", nargs="+", metavar="TAG")
    p.add_argument("--depth", type=int, default=2, help="Segments identifying a series (default: 2).")
    p.add_argument(
        "--ignore",
        help="Regex of versions to skip (default: LOOSEVER_IGNORED_VERSIONS_REGEX).",
    )

    return parser.parse_args(argv)


def run_latest(args: argparse.Namespace, settings: Settings) -> int:
    items: list = list(args.versions)
    if args.versions_file:
        items.extend(load_versions_file(args.versions_file))
    key = args.key or settings.version_key

    result = latest(items, key)
    if result is None:
        print("Error: no usable version found", file=sys.stderr)
        return 1
    print(result)
    return 0


def run_sort(args: argparse.Namespace) -> int:
    if args.latest is not None:
        versions = get_latest_versions(args.versions, args.latest)
    elif args.earliest is not None:
        versions = get_earliest_versions(args.versions, args.earliest)
    else:
        versions = get_sorted_versions(args.versions)
    for version in versions:
        print(version)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    command = args.command
    if not command:
        print(f"Error: no command specified. Use one of: {', '.join(COMMANDS)}", file=sys.stderr)
        return 1

    try:
        settings = Settings()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.debug(f"Running command '{command}'")

    try:
        if command == "normalize":
            rc = 0
            for version in args.versions:
                normalized = normalize(version)
                if normalized is None:
                    rc = 1
                print(normalized or "")
            return rc

        elif command == "compare":
            result = compare(args.a, args.b)
            print((result > 0) - (result < 0))

        elif command == "at-least":
            satisfied = is_at_least(args.version, args.target)
            print("true" if satisfied else "false")
            return 0 if satisfied else 1

        elif command == "latest":
            return run_latest(args, settings)

        elif command == "sort":
            return run_sort(args)

        elif command == "series":
            ignore = args.ignore or settings.ignored_versions
            series = latest_per_series(args.tags, depth=args.depth, ignore=ignore)
            print(yaml.safe_dump(series, default_flow_style=False, sort_keys=False), end="")

        else:
            print(f"Unknown command: {command}", file=sys.stderr)
            return 1

    except (FileNotFoundError, VersionFileError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
