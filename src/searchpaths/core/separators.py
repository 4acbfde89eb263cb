"""Separator conventions for delimited search path strings."""
from __future__ import annotations

import sys


def environment_path_separator() -> str:
    """Return the separator used by OS path-list variables (``PATH`` style)."""
    if sys.platform.startswith("win"):
        return ";"
    return ":"


def osl_path_separator() -> str:
    """Return the separator used by shader search paths, on every platform."""
    return ":"


__all__ = ["environment_path_separator", "osl_path_separator"]
