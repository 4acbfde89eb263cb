"""
searchpaths config command.

SUMMARY: Show current configuration

Displays the merged configuration from bundled defaults, the project
config file and SEARCHPATHS_* environment variables.
"""

from __future__ import annotations

import argparse
import sys

from searchpaths.cli import OutputFormatter, add_config_flag, add_json_flag, load_config
from searchpaths.core.exceptions import SearchPathsError
from searchpaths.core.utils.io import dump_yaml

SUMMARY = "Show current configuration"


def _nest_key(key: str, value):
    """Nest a dot-notation key into a YAML/JSON-friendly mapping."""
    parts = [p for p in str(key).split(".") if p]
    out = value
    for part in reversed(parts):
        out = {part: out}
    return out


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "key",
        nargs="?",
        help="Specific configuration key to show (e.g., 'search.envvar')",
    )
    add_config_flag(parser)
    add_json_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        config_data = load_config(args)
    except SearchPathsError as e:
        formatter.error(e, error_code="config_error")
        return 1

    if args.key:
        value = config_data
        for part in args.key.split("."):
            if not isinstance(value, dict) or part not in value:
                formatter.error(KeyError(args.key), f"Key not found: {args.key}", error_code="config_key_error")
                return 1
            value = value[part]
        payload = _nest_key(args.key, value)
    else:
        payload = config_data

    if formatter.json_mode:
        formatter.json_output(payload)
    else:
        formatter.text(dump_yaml(payload).rstrip())
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    cli_args = parser.parse_args()
    sys.exit(main(cli_args))
