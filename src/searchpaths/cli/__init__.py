"""
searchpaths CLI package.

Commands are auto-discovered from ``cli/commands/``; each module exposes
``SUMMARY``, ``register_args(parser)`` and ``main(args) -> int``.
"""
from ._output import OutputFormatter
from ._args import (
    add_json_flag,
    add_config_flag,
    add_search_flags,
    add_standard_flags,
)
from ._utils import build_resolver, load_config

__all__ = [
    "OutputFormatter",
    "add_json_flag",
    "add_config_flag",
    "add_search_flags",
    "add_standard_flags",
    "build_resolver",
    "load_config",
]
