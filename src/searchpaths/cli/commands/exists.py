"""
searchpaths exists command.

SUMMARY: Test whether a resource can be found on the search paths

Exits 0 when the target is found, 1 when it is not, and 2 on errors.
"""

from __future__ import annotations

import argparse
import sys

from searchpaths.cli import OutputFormatter, add_standard_flags, build_resolver
from searchpaths.core.exceptions import SearchPathsError

SUMMARY = "Test whether a resource can be found on the search paths"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument("target", help="Resource name, relative or absolute")
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        resolver, _ = build_resolver(args)
        found = resolver.exists(args.target)
    except (SearchPathsError, ValueError) as e:
        formatter.error(e, error_code="exists_error")
        return 2

    formatter.success(
        {"target": args.target, "exists": found},
        "yes" if found else "no",
        status="found" if found else "not_found",
    )
    return 0 if found else 1


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    cli_args = parser.parse_args()
    sys.exit(main(cli_args))
