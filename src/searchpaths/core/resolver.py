"""Layered search path resolution.

``SearchPaths`` maps a possibly-relative resource name (texture, include
file, plugin) to an existing location by consulting an ordered set of
directories:

- environment paths, parsed once from an environment variable at
  construction (absolute entries only);
- explicit paths, registered at runtime by the caller;
- an optional root path anchoring relative search paths and relative
  targets.

Lookup walks the combined list (environment paths followed by explicit
paths) from the most recently added entry to the oldest, so later additions
take precedence. The root path is consulted after every search path, and
``exists`` finally falls back to the target relative to the working
directory.

Instances are not synchronized. Concurrent readers are fine as long as no
mutation runs on the same instance; callers that need both must guard the
whole instance themselves.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from .exceptions import SearchPathIndexError
from .filesystem import FileSystem, default_filesystem
from .separators import environment_path_separator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Qualification:
    """Result of :meth:`SearchPaths.qualify`.

    Attributes:
        path: Qualified path on a hit, otherwise the target unchanged
        search_path: Raw search path entry that produced the hit; ``None``
            when the hit came from the root path or nothing matched
    """

    path: str
    search_path: Optional[str] = None
    found: bool = False


@dataclass
class _SearchPathsState:
    root_path: str = ""
    explicit_paths: List[str] = field(default_factory=list)
    environment_paths: List[str] = field(default_factory=list)
    all_paths: List[str] = field(default_factory=list)

    def duplicate(self) -> "_SearchPathsState":
        return _SearchPathsState(
            root_path=self.root_path,
            explicit_paths=list(self.explicit_paths),
            environment_paths=list(self.environment_paths),
            all_paths=list(self.all_paths),
        )


def _check_separator(separator: str) -> str:
    if not isinstance(separator, str) or len(separator) != 1:
        raise ValueError(f"Separator must be a single character, got {separator!r}")
    return separator


class SearchPaths:
    """Ordered collection of search paths with newest-first lookup."""

    def __init__(
        self,
        envvar: Optional[str] = None,
        separator: Optional[str] = None,
        *,
        filesystem: Optional[FileSystem] = None,
    ) -> None:
        """Create an empty resolver, optionally seeded from ``envvar``.

        Args:
            envvar: Name of an environment variable holding a delimited list
                of directories. Relative and empty entries are ignored.
            separator: Delimiter for ``envvar`` (defaults to the platform
                path-list separator)
            filesystem: Filesystem collaborator (defaults to the local disk)
        """
        self._fs: FileSystem = filesystem or default_filesystem()
        self._state = _SearchPathsState()

        if envvar is None:
            return

        sep = _check_separator(environment_path_separator() if separator is None else separator)
        value = os.environ.get(envvar)
        if value is None:
            return

        for token in value.split(sep):
            if not token:
                continue
            if not self._fs.is_absolute(token):
                logger.debug("Ignoring relative path %r from $%s", token, envvar)
                continue
            self._state.environment_paths.append(token)
            self._state.all_paths.append(token)

    # ----- copy / assignment -----

    def copy(self) -> "SearchPaths":
        """Return an independent duplicate sharing the same filesystem."""
        clone = SearchPaths.__new__(SearchPaths)
        clone._fs = self._fs
        clone._state = self._state.duplicate()
        return clone

    def __copy__(self) -> "SearchPaths":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "SearchPaths":
        return self.copy()

    def swap(self, other: "SearchPaths") -> None:
        """Exchange the search path state of two resolvers."""
        self._state, other._state = other._state, self._state

    def assign(self, other: "SearchPaths") -> "SearchPaths":
        """Replace this resolver's state with a copy of ``other``'s.

        The copy is built before anything is touched, so a failure leaves
        this resolver unchanged.
        """
        tmp = other.copy()
        self.swap(tmp)
        return self

    # ----- root path -----

    def set_root(self, path: str) -> None:
        self._state.root_path = self._fs.make_preferred(path)

    def has_root(self) -> bool:
        return bool(self._state.root_path)

    @property
    def root_path(self) -> str:
        """Current root path, ``""`` when unset."""
        return self._state.root_path

    # ----- mutation -----

    def clear(self) -> None:
        """Remove everything: root, environment and explicit paths."""
        self._state.root_path = ""
        self._state.explicit_paths.clear()
        self._state.environment_paths.clear()
        self._state.all_paths.clear()

    def reset(self) -> None:
        """Drop explicit paths, leaving only the environment paths."""
        self._state.explicit_paths.clear()
        self._state.all_paths = list(self._state.environment_paths)

    def append(self, path: str) -> None:
        """Register ``path`` as the highest-precedence search path."""
        self._state.explicit_paths.append(path)
        self._state.all_paths.append(path)

    def append_split(self, paths: str, separator: Optional[str] = None) -> None:
        """Split ``paths`` on ``separator`` and append every token in order.

        Empty tokens are kept.
        """
        sep = _check_separator(environment_path_separator() if separator is None else separator)
        for token in paths.split(sep):
            self.append(token)

    def remove_at(self, index: int) -> None:
        """Remove the explicit path at ``index``."""
        self._check_index(index)
        del self._state.explicit_paths[index]
        self._state.all_paths = self._state.environment_paths + self._state.explicit_paths

    # ----- explicit path accessors -----

    def empty(self) -> bool:
        return not self._state.explicit_paths

    def explicit_count(self) -> int:
        return len(self._state.explicit_paths)

    def explicit_at(self, index: int) -> str:
        self._check_index(index)
        return self._state.explicit_paths[index]

    def __len__(self) -> int:
        return self.explicit_count()

    def __getitem__(self, index: int) -> str:
        return self.explicit_at(index)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._state.explicit_paths))

    @property
    def environment_paths(self) -> Tuple[str, ...]:
        return tuple(self._state.environment_paths)

    @property
    def combined_paths(self) -> Tuple[str, ...]:
        """Environment paths followed by explicit paths, in append order."""
        return tuple(self._state.all_paths)

    def _check_index(self, index: int) -> None:
        size = len(self._state.explicit_paths)
        if not 0 <= index < size:
            raise SearchPathIndexError(index, size)

    # ----- lookup -----

    def _anchor(self, path: str) -> str:
        if self.has_root() and not self._fs.is_absolute(path):
            return self._fs.join(self._state.root_path, path)
        return path

    def _iter_candidates(self, target: str) -> Iterator[Tuple[str, Optional[str]]]:
        """Yield ``(candidate, search_path)`` for a relative target, in lookup order."""
        for search_path in reversed(self._state.all_paths):
            yield self._fs.join(self._anchor(search_path), target), search_path

        if self.has_root():
            yield self._fs.join(self._state.root_path, target), None

    def exists(self, target: str) -> bool:
        """Return True if ``target`` can be found.

        Absolute targets are tested as-is. Relative targets are tried under
        every search path (newest first), then under the root path, then
        relative to the working directory.
        """
        if not self._fs.is_absolute(target):
            for candidate, _ in self._iter_candidates(target):
                if self._fs.exists(candidate):
                    return True

        return self._fs.exists(target)

    def qualify(self, target: str) -> Qualification:
        """Resolve ``target`` to the first existing candidate.

        Never fails: when nothing matches (or ``target`` is absolute) the
        target is returned unchanged with no originating search path.
        """
        if not self._fs.is_absolute(target):
            for candidate, search_path in self._iter_candidates(target):
                if self._fs.exists(candidate):
                    qualified = self._fs.make_preferred(candidate)
                    logger.debug("Qualified %r as %r (search path %r)", target, qualified, search_path)
                    return Qualification(path=qualified, search_path=search_path, found=True)

        return Qualification(path=target)

    # ----- serialization -----

    def effective_paths(self, reversed_order: bool = False) -> List[str]:
        """Return the effective search order as absolute-or-anchored paths.

        The root path comes first, followed by the combined search paths
        anchored under the root. Relative entries are dropped when there is
        no root.
        """
        paths: List[str] = []
        if self.has_root():
            paths.append(self._state.root_path)

        for path in self._state.all_paths:
            if not self._fs.is_absolute(path):
                if not self.has_root():
                    continue
                path = self._fs.join(self._state.root_path, path)
            paths.append(path)

        if reversed_order:
            paths.reverse()
        return paths

    def serialize(self, separator: Optional[str] = None, reversed_order: bool = False) -> str:
        """Join :meth:`effective_paths` with ``separator``."""
        sep = _check_separator(environment_path_separator() if separator is None else separator)
        return sep.join(self.effective_paths(reversed_order))

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return (
            f"SearchPaths(root={self._state.root_path!r}, "
            f"environment={self._state.environment_paths!r}, "
            f"explicit={self._state.explicit_paths!r})"
        )


__all__ = ["Qualification", "SearchPaths"]
