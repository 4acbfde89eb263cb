from __future__ import annotations

from typing import Any, Dict, Mapping


class SearchPathsError(Exception):
    """Base exception for the searchpaths package."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            # Store a shallow copy to avoid accidental mutation.
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class SearchPathIndexError(SearchPathsError, IndexError):
    """Raised when an explicit search path index is out of range."""

    def __init__(self, index: int, size: int) -> None:
        message = f"Explicit search path index {index} out of range (size {size})"
        SearchPathsError.__init__(self, message, context={"index": index, "size": size})
        IndexError.__init__(self, message)


class ConfigError(SearchPathsError, ValueError):
    """Raised when configuration cannot be loaded or fails validation."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        SearchPathsError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


__all__ = [
    "SearchPathsError",
    "SearchPathIndexError",
    "ConfigError",
]
