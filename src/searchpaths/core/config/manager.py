"""
searchpaths configuration management (YAML, environment overrides, JSON Schema).
"""
from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple

import jsonschema
import yaml

from searchpaths.core.exceptions import ConfigError
from searchpaths.core.utils.io import read_yaml
from searchpaths.data import get_data_path

logger = logging.getLogger(__name__)

ENV_PREFIX = "SEARCHPATHS_"
PROJECT_CONFIG_FILENAME = "searchpaths.yaml"


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge dictionaries without mutating inputs.

    Nested mappings merge key by key; every other value (lists included)
    in ``override`` replaces the one in ``base``.

    Example:
        >>> deep_merge({"a": 1, "b": {"c": 2}}, {"b": {"d": 3}})
        {'a': 1, 'b': {'c': 2, 'd': 3}}
    """
    result: Dict[str, Any] = dict(base)
    for key, value in (override or {}).items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


class ConfigManager:
    """Load, merge, and validate searchpaths configuration.

    Configuration sources (highest to lowest priority):
    1. Environment variables: SEARCHPATHS_<section>__<key>
    2. Project config: ``config_path``, else ./searchpaths.yaml when present
    3. Bundled defaults: searchpaths.data/config/defaults.yaml
    """

    def __init__(self, config_path: Optional[Path] = None, *, cwd: Optional[Path] = None) -> None:
        self.cwd = Path(cwd) if cwd is not None else Path.cwd()
        self.explicit_config_path = Path(config_path) if config_path is not None else None
        self.core_defaults_path = get_data_path("config", "defaults.yaml")
        self.schema_path = get_data_path("schemas", "config.schema.yaml")

    @property
    def project_config_path(self) -> Optional[Path]:
        """Project config file in effect, or None."""
        if self.explicit_config_path is not None:
            return self.explicit_config_path
        candidate = self.cwd / PROJECT_CONFIG_FILENAME
        return candidate if candidate.exists() else None

    def load_yaml(self, path: Path) -> Dict[str, Any]:
        try:
            data = read_yaml(path, default={}, raise_on_error=True)
        except FileNotFoundError as exc:
            raise ConfigError(f"Config file not found: {path}", context={"path": str(path)}) from exc
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {path}: {exc}", context={"path": str(path)}) from exc
        if not isinstance(data, dict):
            raise ConfigError(
                f"Config file must contain a mapping: {path}",
                context={"path": str(path), "type": type(data).__name__},
            )
        return data

    # ========== Environment overrides ==========

    def _as_bool(self, v: str) -> Optional[bool]:
        low = v.strip().lower()
        if low in {"true", "false"}:
            return low == "true"
        return None

    def _as_int(self, v: str) -> Optional[int]:
        if re.fullmatch(r"[-+]?\d+", v.strip() or " "):
            return int(v)
        return None

    def _as_float(self, v: str) -> Optional[float]:
        s = v.strip()
        if re.fullmatch(r"[-+]?\d*\.\d+", s) or re.fullmatch(r"[-+]?\d+\.\d*", s):
            return float(s)
        return None

    def _as_json(self, v: str) -> Optional[Any]:
        s = v.strip()
        if (s.startswith("{") and s.endswith("}")) or (s.startswith("[") and s.endswith("]")):
            try:
                return json.loads(s)
            except json.JSONDecodeError:
                return None
        return None

    def _coerce_type(self, value: str) -> Any:
        for caster in (self._as_bool, self._as_int, self._as_float, self._as_json):
            result = caster(value)
            if result is not None:
                return result
        return value.strip()

    def _parse_env_key(self, raw: str, *, strict: bool) -> List[str]:
        segs = raw.split("__") if "__" in raw else raw.split("_")
        processed: List[str] = []
        for seg in segs:
            if seg == "":
                if strict:
                    raise ConfigError(
                        f"Malformed {ENV_PREFIX}* key: empty segment in '{raw}'.",
                        context={"key": raw},
                    )
                return []
            processed.append(seg.lower())
        return processed

    def _iter_env_overrides(self, *, strict: bool) -> Iterator[Tuple[List[str], Any, str]]:
        for key in sorted(os.environ.keys()):
            if not key.startswith(ENV_PREFIX):
                continue
            raw = key[len(ENV_PREFIX):]
            if not raw:
                if strict:
                    raise ConfigError(f"Malformed {ENV_PREFIX}* key", context={"key": key})
                continue
            path = self._parse_env_key(raw, strict=strict)
            if not path:
                continue
            yield path, self._coerce_type(os.environ[key]), raw

    def _set_nested(self, root: Dict[str, Any], path: List[str], value: Any) -> None:
        cur = root
        for part in path[:-1]:
            existing = {k.lower(): k for k in cur.keys() if isinstance(k, str)}
            key = existing.get(part, part)
            if not isinstance(cur.get(key), dict):
                cur[key] = {}
            cur = cur[key]
        existing = {k.lower(): k for k in cur.keys() if isinstance(k, str)}
        cur[existing.get(path[-1], path[-1])] = value

    def apply_env_overrides(self, cfg: Dict[str, Any], *, strict: bool) -> None:
        for path, typed_value, raw in self._iter_env_overrides(strict=strict):
            logger.debug("Applying %s%s override", ENV_PREFIX, raw)
            self._set_nested(cfg, path, typed_value)

    # ========== Loading ==========

    def validate_schema(self, config: Dict[str, Any]) -> None:
        schema = self.load_yaml(self.schema_path)
        try:
            jsonschema.Draft202012Validator(schema).validate(config)
        except jsonschema.ValidationError as exc:
            location = ".".join(str(p) for p in exc.absolute_path) or "<root>"
            raise ConfigError(
                f"Invalid configuration at '{location}': {exc.message}",
                context={"location": location},
            ) from exc

    def load_config(self, validate: bool = True) -> Dict[str, Any]:
        """Load the merged configuration.

        Args:
            validate: Validate the merged result against the bundled schema
                and reject malformed environment override keys.

        Raises:
            ConfigError: When a source is unreadable or validation fails
        """
        cfg = self.load_yaml(self.core_defaults_path)

        project_path = self.project_config_path
        if project_path is not None:
            logger.debug("Loading project config %s", project_path)
            cfg = deep_merge(cfg, self.load_yaml(project_path))

        self.apply_env_overrides(cfg, strict=validate)

        if validate:
            self.validate_schema(cfg)
        return cfg

    def get_all(self) -> Dict[str, Any]:
        """Get full merged configuration without validation."""
        return self.load_config(validate=False)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a config value by dot-notation key.

        Example:
            >>> manager.get('search.envvar')
            'SEARCH_PATH'
            >>> manager.get('nonexistent.key', 'fallback')
            'fallback'
        """
        current: Any = self.load_config(validate=False)
        for part in key.split("."):
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default
        return current


__all__ = ["ConfigManager", "deep_merge", "ENV_PREFIX", "PROJECT_CONFIG_FILENAME"]
