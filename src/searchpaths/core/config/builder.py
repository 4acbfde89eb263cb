"""Build a ``SearchPaths`` resolver from loaded configuration."""
from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from searchpaths.core.filesystem import FileSystem
from searchpaths.core.resolver import SearchPaths

logger = logging.getLogger(__name__)


def _search_section(config: Mapping[str, Any]) -> Dict[str, Any]:
    section = config.get("search") if isinstance(config, Mapping) else None
    return dict(section) if isinstance(section, Mapping) else {}


def build_search_paths(
    config: Mapping[str, Any],
    *,
    filesystem: Optional[FileSystem] = None,
) -> SearchPaths:
    """Create a resolver seeded from the ``search`` config section.

    Environment paths come from ``search.envvar``; the root is set from
    ``search.root`` and ``search.paths`` are appended in order.
    """
    search = _search_section(config)
    envvar = search.get("envvar") or None
    separator = search.get("separator") or None

    resolver = SearchPaths(envvar, separator, filesystem=filesystem)

    root = search.get("root")
    if root:
        resolver.set_root(str(root))

    for path in search.get("paths") or []:
        resolver.append(str(path))

    logger.debug("Built %r", resolver)
    return resolver


__all__ = ["build_search_paths"]
