"""Core search path resolution components."""

from .exceptions import ConfigError, SearchPathIndexError, SearchPathsError
from .filesystem import FileSystem, LocalFileSystem, default_filesystem
from .resolver import Qualification, SearchPaths
from .separators import environment_path_separator, osl_path_separator

__all__ = [
    "ConfigError",
    "SearchPathIndexError",
    "SearchPathsError",
    "FileSystem",
    "LocalFileSystem",
    "default_filesystem",
    "Qualification",
    "SearchPaths",
    "environment_path_separator",
    "osl_path_separator",
]
