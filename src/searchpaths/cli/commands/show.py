"""
searchpaths show command.

SUMMARY: Show the effective search order

Prints the delimited effective search order (root first, then every
search path anchored under the root), suitable for exporting to another
process. ``--list`` prints one entry per line with its origin instead.
"""

from __future__ import annotations

import argparse
import sys
from typing import Dict, List

from searchpaths.cli import OutputFormatter, add_standard_flags, build_resolver
from searchpaths.core.exceptions import SearchPathsError
from searchpaths.core.resolver import SearchPaths

SUMMARY = "Show the effective search order"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "--reversed",
        dest="reversed_order",
        action="store_true",
        help="Emit the order reversed (newest search path first, root last)",
    )
    parser.add_argument(
        "--list",
        dest="as_list",
        action="store_true",
        help="One entry per line, annotated with where it came from",
    )
    add_standard_flags(parser)


def _layers(resolver: SearchPaths) -> List[Dict[str, str]]:
    """Raw entries in lookup order (newest first), root last."""
    env_count = len(resolver.environment_paths)
    entries: List[Dict[str, str]] = []
    for index, path in enumerate(resolver.combined_paths):
        origin = "environment" if index < env_count else "explicit"
        entries.append({"path": path, "origin": origin})
    entries.reverse()
    if resolver.has_root():
        entries.append({"path": resolver.root_path, "origin": "root"})
    return entries


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        resolver, separator = build_resolver(args)
        serialized = resolver.serialize(separator, args.reversed_order)
    except (SearchPathsError, ValueError) as e:
        formatter.error(e, error_code="show_error")
        return 1

    if formatter.json_mode:
        formatter.json_output(
            {
                "separator": separator,
                "root": resolver.root_path or None,
                "paths": resolver.effective_paths(args.reversed_order),
                "serialized": serialized,
                "layers": _layers(resolver),
            }
        )
        return 0

    if args.as_list:
        for entry in _layers(resolver):
            formatter.text(f"{entry['origin']:<12} {entry['path']}")
        return 0

    formatter.text(serialized)
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    cli_args = parser.parse_args()
    sys.exit(main(cli_args))
