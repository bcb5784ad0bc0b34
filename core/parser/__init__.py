"""
Tree-sitter based stylesheet parsers.

Turns CSS, SCSS, LESS and indented Sass sources into a StylesheetNode tree
that the classname indexer walks.

Key Components:
- StylesheetSyntax: Closed set of supported dialects, detected by extension
- DialectMasker: Byte-preserving masking of SCSS/LESS constructs before parsing
- CSSParser: Tree-sitter CSS grammar to StylesheetNode conversion
- SassParser: Indented syntax rewritten to braces, then parsed as CSS
- ParserRegistry: Syntax to parser dispatch

Example:
    from core.parser import parse_stylesheet, StylesheetSyntax

    result = parse_stylesheet(".a { color: red; }", StylesheetSyntax.CSS)
    print(f"Found {result.rule_count} rules")
"""

from .base import (
    ParseError,
    ParseResult,
    StylesheetParseError,
    StylesheetSyntax,
    TreeSitterError,
    UnsupportedSyntaxError,
)
from .registry import ParserRegistry, parse_stylesheet, parser_registry

__all__ = [
    "ParseError",
    "ParseResult",
    "StylesheetParseError",
    "StylesheetSyntax",
    "TreeSitterError",
    "UnsupportedSyntaxError",
    "ParserRegistry",
    "parse_stylesheet",
    "parser_registry",
]
