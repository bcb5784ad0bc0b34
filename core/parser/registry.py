"""
Parser registry for stylesheet syntaxes.

Maps each StylesheetSyntax to the parser class that handles it. The set of
syntaxes is closed; the registry only creates parser instances lazily.
"""

import logging
from pathlib import Path
from typing import Callable, Dict, Optional, Tuple

from .base import BaseParser, ParseResult, StylesheetSyntax, UnsupportedSyntaxError
from .css_parser import CSSParser
from .sass_parser import SassParser

logger = logging.getLogger(__name__)


ParserFactory = Callable[[bool], BaseParser]

PARSER_FACTORIES: Dict[StylesheetSyntax, ParserFactory] = {
    StylesheetSyntax.CSS: lambda strict: CSSParser(StylesheetSyntax.CSS, strict=strict),
    StylesheetSyntax.LESS: lambda strict: CSSParser(StylesheetSyntax.LESS, strict=strict),
    StylesheetSyntax.SCSS: lambda strict: CSSParser(StylesheetSyntax.SCSS, strict=strict),
    StylesheetSyntax.SASS: lambda strict: SassParser(strict=strict),
}


class ParserRegistry:
    """
    Registry of stylesheet parsers keyed by syntax.

    Parser instances hold a loaded Tree-sitter language and are reused;
    parsed stylesheets are never cached.
    """

    def __init__(self):
        self._parser_instances: Dict[Tuple[StylesheetSyntax, bool], BaseParser] = {}

    def get_parser(self, syntax: StylesheetSyntax, strict: bool = False) -> BaseParser:
        """
        Get parser instance for a syntax.

        Raises:
            UnsupportedSyntaxError: If no parser handles the syntax
            TreeSitterError: If the grammar cannot be loaded
        """
        key = (syntax, strict)
        if key in self._parser_instances:
            return self._parser_instances[key]

        factory = PARSER_FACTORIES.get(syntax)
        if factory is None:
            raise UnsupportedSyntaxError(f"No parser registered for {syntax}")

        instance = factory(strict)
        self._parser_instances[key] = instance
        logger.debug(f"Created parser instance for {syntax.value}")
        return instance

    def get_parser_for_file(self, file_path: Path, strict: bool = False) -> BaseParser:
        return self.get_parser(StylesheetSyntax.from_path(file_path), strict=strict)

    def parse_file(
        self,
        file_path: Path,
        strict: bool = False,
        max_file_size: Optional[int] = None
    ) -> ParseResult:
        parser = self.get_parser_for_file(file_path, strict=strict)
        return parser.parse_file(Path(file_path), max_file_size)


# Global registry instance
parser_registry = ParserRegistry()


def parse_stylesheet(
    content: str,
    syntax: StylesheetSyntax = StylesheetSyntax.CSS,
    file_path: Optional[Path] = None,
    strict: bool = False
) -> ParseResult:
    """Parse stylesheet text with the parser registered for syntax"""
    return parser_registry.get_parser(syntax, strict=strict).parse(content, file_path)
