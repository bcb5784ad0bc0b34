"""
Configuration management for css-modules-context

Handles tsconfig/jsconfig discovery, JSON5 loading, extends resolution and
central defaults.
"""

from .loader import ConfigChainLoader, find_config_file, load_json5_file, resolve_extends
from .defaults import CONFIG_SEARCH_PLACES, DEFAULT_SETTINGS, ENV_VAR_MAPPING, MAX_EXTENDS_DEPTH

__all__ = [
    "ConfigChainLoader",
    "find_config_file",
    "load_json5_file",
    "resolve_extends",
    "CONFIG_SEARCH_PLACES",
    "DEFAULT_SETTINGS",
    "ENV_VAR_MAPPING",
    "MAX_EXTENDS_DEPTH",
]
