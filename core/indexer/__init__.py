"""
Classname indexing for CSS modules.

Key Components:
- ClassnameIndexer: Stylesheet node tree to ClassnameIndex
- Selector helpers: comma splitting, sanitizing, ``&`` substitution
- Transformers: identity, full camelCase and dashes-only camelCase
"""

from .classnames import (
    ClassnameIndexer,
    build_index,
    get_all_class_names,
    get_position,
    index_stylesheet,
    lookup,
)
from .formatting import get_eol, stringify_classname
from .transformer import StringTransformer, get_transformer

__all__ = [
    "ClassnameIndexer",
    "build_index",
    "get_all_class_names",
    "get_position",
    "index_stylesheet",
    "lookup",
    "get_eol",
    "stringify_classname",
    "StringTransformer",
    "get_transformer",
]
