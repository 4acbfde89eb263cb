"""Filesystem collaborator used by the search path resolver.

The resolver only ever needs four operations: an existence test, joining two
path segments, normalizing separators, and an absoluteness check. They are
grouped behind :class:`FileSystem` so lookups can be observed or redirected
in tests without touching the real disk.

Path strings are kept as ``str`` end to end; ``pathlib`` does the platform
specific work.
"""
from __future__ import annotations

from pathlib import Path, PurePath
from typing import Protocol, runtime_checkable


@runtime_checkable
class FileSystem(Protocol):
    """Minimal filesystem capability consumed by ``SearchPaths``."""

    def exists(self, path: str) -> bool: ...

    def join(self, base: str, child: str) -> str: ...

    def make_preferred(self, path: str) -> str: ...

    def is_absolute(self, path: str) -> bool: ...


class LocalFileSystem:
    """``FileSystem`` backed by the local disk."""

    def exists(self, path: str) -> bool:
        # An empty path never names anything; Path("") would mean ".".
        if not path:
            return False
        try:
            return Path(path).exists()
        except OSError:
            return False

    def join(self, base: str, child: str) -> str:
        if not base:
            return child
        if not child:
            return base
        return str(PurePath(base) / child)

    def make_preferred(self, path: str) -> str:
        if not path:
            return ""
        return str(PurePath(path))

    def is_absolute(self, path: str) -> bool:
        if not path:
            return False
        return PurePath(path).is_absolute()


_DEFAULT_FILESYSTEM = LocalFileSystem()


def default_filesystem() -> FileSystem:
    """Return the shared local filesystem instance."""
    return _DEFAULT_FILESYSTEM


__all__ = ["FileSystem", "LocalFileSystem", "default_filesystem"]
