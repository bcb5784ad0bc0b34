"""
Import specifier resolution.

Key Components:
- find_raw_specifier: Stylesheet specifier bound to a local identifier
- ModuleAliasResolver: tsconfig/jsconfig baseUrl and paths resolution
- resolve_import: Specifier extraction plus relative or aliased resolution
"""

from .alias import ModuleAliasResolver, resolve_aliased_import
from .import_path import (
    find_raw_specifier,
    gen_import_regexp,
    is_import_line_match,
    resolve_import,
)

__all__ = [
    "ModuleAliasResolver",
    "resolve_aliased_import",
    "find_raw_specifier",
    "gen_import_regexp",
    "is_import_line_match",
    "resolve_import",
]
