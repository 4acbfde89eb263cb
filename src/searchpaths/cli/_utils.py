"""Shared CLI utilities."""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Dict, Tuple

from searchpaths.core.config import ConfigManager, build_search_paths, deep_merge
from searchpaths.core.resolver import SearchPaths
from searchpaths.core.separators import environment_path_separator
from searchpaths.core.stdlib_logging import configure_logging


def load_config(args: argparse.Namespace) -> Dict[str, Any]:
    """Load configuration and apply its logging settings.

    ``--verbose`` on the command line takes precedence over
    ``logging.level``.
    """
    config_path = getattr(args, "config", None)
    manager = ConfigManager(Path(config_path) if config_path else None)
    cfg = manager.load_config()

    log_cfg = cfg.get("logging") or {}
    level = "DEBUG" if getattr(args, "verbose", False) else str(log_cfg.get("level") or "WARNING")
    log_file = log_cfg.get("file")
    configure_logging(level=level, log_path=Path(log_file) if log_file else None)
    return cfg


def build_resolver(args: argparse.Namespace) -> Tuple[SearchPaths, str]:
    """Build a resolver from config plus command-line overrides.

    Returns:
        The resolver and the separator in effect.
    """
    cfg = load_config(args)

    overrides: Dict[str, Any] = {}
    for flag in ("envvar", "separator", "root"):
        value = getattr(args, flag, None)
        if value:
            overrides[flag] = value
    cfg = deep_merge(cfg, {"search": overrides})

    resolver = build_search_paths(cfg)
    separator = cfg["search"].get("separator") or environment_path_separator()

    for path in getattr(args, "extra_paths", None) or []:
        resolver.append(path)
    split_paths = getattr(args, "split_paths", None)
    if split_paths is not None:
        resolver.append_split(split_paths, separator)

    return resolver, separator


__all__ = ["load_config", "build_resolver"]
