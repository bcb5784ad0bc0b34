"""
CSS Modules Context - classname lookup for CSS modules imports.

Indexes CSS, SCSS, LESS and Sass stylesheets into class name dictionaries
and resolves ``import styles from "..."`` specifiers, including
tsconfig/jsconfig path aliases, for completion, definition and hover.
"""

__version__ = "1.0.0"

# Package imports for convenient access
from core.indexer import build_index, get_transformer, index_stylesheet, lookup
from core.models.classnames import ClassnameEntry, ClassnameIndex, Position
from core.models.config import CamelCaseMode, GlobalSettings
from core.providers import CompletionProvider, DefinitionProvider, HoverProvider
from core.resolver import ModuleAliasResolver, find_raw_specifier, resolve_import

__all__ = [
    "build_index",
    "get_transformer",
    "index_stylesheet",
    "lookup",
    "ClassnameEntry",
    "ClassnameIndex",
    "Position",
    "CamelCaseMode",
    "GlobalSettings",
    "CompletionProvider",
    "DefinitionProvider",
    "HoverProvider",
    "ModuleAliasResolver",
    "find_raw_specifier",
    "resolve_import",
    "__version__",
]
