"""Common CLI argument registration utilities."""
from __future__ import annotations

import argparse


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    """Add --json flag for JSON output mode."""
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )


def add_config_flag(parser: argparse.ArgumentParser) -> None:
    """Add --config flag pointing at a project config file."""
    parser.add_argument(
        "--config",
        type=str,
        help="Config file (default: ./searchpaths.yaml when present)",
    )


def add_search_flags(parser: argparse.ArgumentParser) -> None:
    """Add flags that shape the resolver on top of the loaded config.

    Args:
        parser: ArgumentParser to add the flags to
    """
    parser.add_argument(
        "--envvar",
        type=str,
        help="Environment variable seeding the search paths (overrides search.envvar)",
    )
    parser.add_argument(
        "--separator",
        type=str,
        help="Single-character path list separator (default: platform separator)",
    )
    parser.add_argument(
        "--root",
        type=str,
        help="Root path anchoring relative search paths and targets",
    )
    parser.add_argument(
        "--path",
        dest="extra_paths",
        action="append",
        default=[],
        metavar="DIR",
        help="Append a search path (repeatable; later paths win)",
    )
    parser.add_argument(
        "--paths",
        dest="split_paths",
        type=str,
        help="Append a separator-delimited list of search paths",
    )


def add_standard_flags(parser: argparse.ArgumentParser) -> None:
    """Add the flags shared by every resolver command."""
    add_search_flags(parser)
    add_config_flag(parser)
    add_json_flag(parser)


__all__ = [
    "add_json_flag",
    "add_config_flag",
    "add_search_flags",
    "add_standard_flags",
]
