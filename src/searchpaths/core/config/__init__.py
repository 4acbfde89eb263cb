"""Configuration loading for searchpaths."""

from .builder import build_search_paths
from .manager import ENV_PREFIX, PROJECT_CONFIG_FILENAME, ConfigManager, deep_merge

__all__ = [
    "ConfigManager",
    "build_search_paths",
    "deep_merge",
    "ENV_PREFIX",
    "PROJECT_CONFIG_FILENAME",
]
