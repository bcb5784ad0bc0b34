"""
Default configuration values for css-modules-context.

Centralized defaults that can be overridden by environment variables or a
``.env`` file (see GlobalSettings).
"""

from typing import Any, Dict, List

# Files searched for path aliases, nearest directory first
CONFIG_SEARCH_PLACES: List[str] = ["tsconfig.json", "jsconfig.json"]

# Maximum number of extends hops followed before resolution is abandoned
MAX_EXTENDS_DEPTH = 10

# Stylesheet extensions an import specifier may end with
STYLESHEET_EXTENSIONS: List[str] = [".styl", ".sass", ".scss", ".less", ".css"]

# Global default settings, keyed by GlobalSettings field
DEFAULT_SETTINGS: Dict[str, Any] = {
    # Classname transformation: "disabled", "full" or "dashes"
    "camel_case": "full",

    # Alias resolution
    "config_search_places": CONFIG_SEARCH_PLACES,
    "max_extends_depth": MAX_EXTENDS_DEPTH,

    # Stylesheet parsing
    "strict_parsing": False,
    "max_file_size_mb": 10,

    # Logging
    "log_level": "WARNING",
}

# Environment variable -> GlobalSettings field
ENV_VAR_MAPPING: Dict[str, str] = {
    "CSS_MODULES_CAMEL_CASE": "camel_case",
    "CSS_MODULES_CONFIG_SEARCH_PLACES": "config_search_places",
    "CSS_MODULES_MAX_EXTENDS_DEPTH": "max_extends_depth",
    "CSS_MODULES_STRICT_PARSING": "strict_parsing",
    "CSS_MODULES_MAX_FILE_SIZE_MB": "max_file_size_mb",
    "CSS_MODULES_LOG_LEVEL": "log_level",
}
