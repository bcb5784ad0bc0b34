"""
css-modules-context core package

Classname indexing and module alias resolution for CSS modules.
"""

__version__ = "1.0.0"

from .models import ClassnameEntry, ClassnameIndex, GlobalSettings, Position, StylesheetNode

__all__ = [
    "ClassnameEntry",
    "ClassnameIndex",
    "GlobalSettings",
    "Position",
    "StylesheetNode",
]
