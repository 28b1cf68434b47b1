"""
Config - dotted-path access to view component configuration
Access nested config mappings using dot notation or key sequences
"""

import importlib
from collections.abc import Mapping
from typing import Any, Dict, List, Optional

from viewkit.exceptions import FailedToProcessConfig

_MISSING = object()
_NOT_FOUND = object()


class Config:
    """
    Configuration object with dot notation access

    Usage:
        config = Config(DEFAULT_VIEW_CONFIG)

        # Get config value
        class_name = config.get_key('ViewFinder.ClassName')
        class_name = config.get_key('ViewFinder', 'ClassName')   # Same result
        class_name = config.get_key(['ViewFinder', 'ClassName'])  # Same result

        # With default
        engines = config.get_key('EngineFinder.Engines', default={})

        # Check existence
        if config.has_key(['ViewFinder', 'Views', 'json']):
            ...

        # Narrow down to a section
        finder_config = config.get_sub_config('ViewFinder')

    A path given as a single string is split on dots. A path given as a
    sequence, or as several positional arguments, is taken literally so
    that keys may themselves contain dots. Lookups are case-insensitive.
    """

    def __init__(self, data: Optional[Mapping] = None):
        if data is None:
            data = {}
        if isinstance(data, Config):
            data = data.as_dict()
        if not isinstance(data, Mapping):
            raise FailedToProcessConfig(
                f"Config must be built from a mapping, got {type(data).__name__}."
            )
        self._data: Dict[str, Any] = dict(data)

    @classmethod
    def from_module(cls, module_path: str, attribute: str = 'VIEW_CONFIG') -> 'Config':
        """
        Load configuration from a Python module attribute

        Args:
            module_path: Dotted module path (e.g., 'config.views')
            attribute: Module attribute holding the config mapping

        Returns:
            Config instance

        Raises:
            FailedToProcessConfig: If the module or attribute cannot be loaded

        Example:
            config = Config.from_module('config.views')
        """
        try:
            module = importlib.import_module(module_path)
        except ImportError as e:
            raise FailedToProcessConfig(
                f"Could not import config module '{module_path}': {e}"
            ) from e

        if not hasattr(module, attribute):
            raise FailedToProcessConfig(
                f"Config module '{module_path}' has no attribute '{attribute}'."
            )

        return cls(getattr(module, attribute))

    @classmethod
    def merged(cls, defaults: Mapping, *overrides: Optional[Mapping]) -> 'Config':
        """
        Build a config by deep-merging overrides onto defaults

        Nested mappings are merged key by key, any other value replaces the
        default outright.

        Example:
            config = Config.merged(DEFAULT_VIEW_CONFIG, {'ViewFinder': {'Views': {...}}})
        """
        result = _deep_merge({}, _as_mapping(defaults))
        for override in overrides:
            if override is None:
                continue
            result = _deep_merge(result, _as_mapping(override))
        return cls(result)

    def get_key(self, *path, default: Any = _MISSING) -> Any:
        """
        Get configuration value at a path

        Args:
            *path: Dotted string, sequence of keys, or several keys
            default: Value to return if the key is not found

        Returns:
            Configuration value or default

        Raises:
            FailedToProcessConfig: If the key is missing and no default is given
        """
        keys = self._normalize_path(path)
        value: Any = self._data

        for key in keys:
            found, value = self._lookup(value, key)
            if not found:
                if default is _MISSING:
                    raise FailedToProcessConfig(
                        f"Config key '{'.'.join(keys)}' not found."
                    )
                return default

        return value

    def has_key(self, *path) -> bool:
        """
        Check if configuration key exists

        Example:
            if config.has_key(['ViewFinder', 'Views', 'json']):
                ...
        """
        return self.get_key(*path, default=_NOT_FOUND) is not _NOT_FOUND

    def get_sub_config(self, *path) -> 'Config':
        """
        Get the mapping at a path as its own Config

        Raises:
            FailedToProcessConfig: If the key is missing or not a mapping
        """
        value = self.get_key(*path)
        if not isinstance(value, Mapping):
            raise FailedToProcessConfig(
                f"Config key '{'.'.join(self._normalize_path(path))}' is not a mapping."
            )
        return Config(value)

    def as_dict(self) -> Dict[str, Any]:
        """Get a shallow copy of the underlying mapping"""
        return dict(self._data)

    @staticmethod
    def _normalize_path(path) -> List[str]:
        if len(path) == 1:
            path = path[0]
            if isinstance(path, str):
                return [part for part in path.split('.') if part]
        if isinstance(path, str):
            return [path]

        keys = []
        for part in path:
            if isinstance(part, (list, tuple)):
                keys.extend(str(p) for p in part)
            else:
                keys.append(str(part))
        return keys

    @staticmethod
    def _lookup(value: Any, key: str):
        if not isinstance(value, Mapping):
            return False, None
        if key in value:
            return True, value[key]

        # Case-insensitive fallback
        key_lower = key.lower()
        for candidate in value.keys():
            if isinstance(candidate, str) and candidate.lower() == key_lower:
                return True, value[candidate]
        return False, None

    def __contains__(self, key) -> bool:
        return self.has_key(key)

    def __repr__(self):
        keys = ', '.join(str(k) for k in self._data.keys())
        return f'<Config ({keys})>'


def _as_mapping(value) -> Mapping:
    if isinstance(value, Config):
        return value.as_dict()
    if not isinstance(value, Mapping):
        raise FailedToProcessConfig(
            f"Cannot merge config from {type(value).__name__}."
        )
    return value


def _deep_merge(base: Dict[str, Any], override: Mapping) -> Dict[str, Any]:
    result = dict(base)
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(result.get(key), Mapping):
            result[key] = _deep_merge(dict(result[key]), value)
        elif isinstance(value, Mapping):
            result[key] = _deep_merge({}, value)
        else:
            result[key] = value
    return result
