"""
Core data models for css-modules-context

Stylesheet node tree, classname index entries and configuration models.
"""

from .stylesheet import NodeType, SourcePosition, StylesheetNode
from .classnames import ClassnameEntry, ClassnameIndex, Position
from .config import AliasConfig, CamelCaseMode, ConfigFile, GlobalSettings

__all__ = [
    # Stylesheet tree
    "NodeType",
    "SourcePosition",
    "StylesheetNode",

    # Index
    "ClassnameEntry",
    "ClassnameIndex",
    "Position",

    # Configuration
    "AliasConfig",
    "CamelCaseMode",
    "ConfigFile",
    "GlobalSettings",
]
