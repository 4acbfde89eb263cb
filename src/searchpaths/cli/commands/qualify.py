"""
searchpaths qualify command.

SUMMARY: Resolve a resource name to its full path

Prints the first existing candidate and the search path that produced it.
Unresolvable targets are printed unchanged; this is not an error.
"""

from __future__ import annotations

import argparse
import sys

from searchpaths.cli import OutputFormatter, add_standard_flags, build_resolver
from searchpaths.core.exceptions import SearchPathsError

SUMMARY = "Resolve a resource name to its full path"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument("target", help="Resource name, relative or absolute")
    parser.add_argument(
        "--show-origin",
        action="store_true",
        help="Also print the search path that produced the match",
    )
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        resolver, _ = build_resolver(args)
        result = resolver.qualify(args.target)
    except (SearchPathsError, ValueError) as e:
        formatter.error(e, error_code="qualify_error")
        return 1

    if formatter.json_mode:
        formatter.json_output(
            {
                "target": args.target,
                "path": result.path,
                "searchPath": result.search_path,
                "found": result.found,
            }
        )
        return 0

    formatter.text(result.path)
    if args.show_origin:
        origin = result.search_path
        if origin is None:
            origin = "<root>" if result.found else "<none>"
        formatter.text_kv("search path", origin)
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    cli_args = parser.parse_args()
    sys.exit(main(cli_args))
