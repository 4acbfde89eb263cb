"""Process-wide logging setup for the searchpaths CLI.

Library modules only create module loggers; handlers are installed here,
once per process, by the command-line entry point.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

_CONFIGURED_TARGET: Optional[str] = None
_HANDLER: Optional[logging.Handler] = None

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def level_from_name(name: str) -> int:
    try:
        return int(getattr(logging, str(name).upper()))
    except (AttributeError, TypeError, ValueError):
        return logging.INFO


def configure_logging(*, level: str = "WARNING", log_path: Optional[Path] = None) -> logging.Handler:
    """Install the package log handler on the ``searchpaths`` logger.

    Writes to ``log_path`` when given, otherwise to stderr. Idempotent per
    process: reconfiguring with the same target only updates the level.
    """
    global _CONFIGURED_TARGET, _HANDLER

    target = str(Path(log_path).resolve()) if log_path is not None else "<stderr>"
    pkg_logger = logging.getLogger("searchpaths")
    pkg_logger.setLevel(level_from_name(level))

    if _HANDLER is not None and _CONFIGURED_TARGET == target:
        _HANDLER.setLevel(level_from_name(level))
        return _HANDLER

    if _HANDLER is not None:
        pkg_logger.removeHandler(_HANDLER)
        _HANDLER.close()
        _HANDLER = None

    handler: logging.Handler
    if log_path is not None:
        Path(target).parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(target, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level_from_name(level))
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    pkg_logger.addHandler(handler)

    _HANDLER = handler
    _CONFIGURED_TARGET = target
    return handler


def reset_logging_for_tests() -> None:
    """Test-only: remove the package handler."""
    global _CONFIGURED_TARGET, _HANDLER
    if _HANDLER is not None:
        logging.getLogger("searchpaths").removeHandler(_HANDLER)
        _HANDLER.close()
    _HANDLER = None
    _CONFIGURED_TARGET = None
    logging.getLogger("searchpaths").setLevel(logging.NOTSET)


__all__ = ["configure_logging", "level_from_name", "reset_logging_for_tests"]
