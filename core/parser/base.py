"""
Abstract base classes and protocols for stylesheet parsers.

Defines the interface every stylesheet parser implements, the closed set of
supported syntaxes, the parse result container and the parser exceptions.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional
import logging
import time

from ..models.stylesheet import StylesheetNode

logger = logging.getLogger(__name__)


class StylesheetSyntax(Enum):
    """Stylesheet dialects, selected once from the file extension"""
    CSS = "css"
    LESS = "less"
    SCSS = "scss"
    SASS = "sass"

    @classmethod
    def from_path(cls, file_path: Path) -> "StylesheetSyntax":
        """Detect syntax by extension; anything unknown is parsed as CSS"""
        suffix = Path(file_path).suffix.lower()
        return _SYNTAX_BY_EXTENSION.get(suffix, cls.CSS)


_SYNTAX_BY_EXTENSION = {
    ".less": StylesheetSyntax.LESS,
    ".scss": StylesheetSyntax.SCSS,
    ".sass": StylesheetSyntax.SASS,
}


@dataclass
class ParseResult:
    """
    Result of parsing one stylesheet.

    Holds the converted node tree along with timing and recovered syntax
    errors (Tree-sitter keeps going past malformed input).
    """
    root: StylesheetNode
    syntax: StylesheetSyntax
    file_path: Optional[Path] = None

    parse_time: float = 0.0  # Seconds
    syntax_errors: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """Check if parsing completed without syntax errors"""
        return len(self.syntax_errors) == 0

    @property
    def rule_count(self) -> int:
        return sum(1 for _ in self.root.walk_rules())


class StylesheetParser(ABC):
    """Protocol for stylesheet parsers"""

    @abstractmethod
    def get_syntax(self) -> StylesheetSyntax:
        """Return the syntax this parser handles"""
        pass

    @abstractmethod
    def parse(self, content: str, file_path: Optional[Path] = None) -> ParseResult:
        """
        Parse stylesheet text into a StylesheetNode tree.

        Raises:
            StylesheetParseError: If the text cannot be parsed
        """
        pass


class BaseParser(StylesheetParser):
    """
    Base implementation with common functionality.

    Provides file reading, timing and strict-mode handling that every
    stylesheet parser shares.
    """

    MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
    MAX_SYNTAX_ERRORS = 50

    def __init__(self, syntax: StylesheetSyntax, strict: bool = False):
        self.syntax = syntax
        self.strict = strict
        self._parser_start_time = 0.0

    def get_syntax(self) -> StylesheetSyntax:
        return self.syntax

    def parse_file(self, file_path: Path, max_file_size: Optional[int] = None) -> ParseResult:
        """Read and parse a stylesheet file"""
        content = self.read_file(file_path, max_file_size)
        return self.parse(content, file_path)

    def _start_timing(self) -> None:
        self._parser_start_time = time.perf_counter()

    def _get_elapsed_time(self) -> float:
        return time.perf_counter() - self._parser_start_time

    def read_file(self, file_path: Path, max_file_size: Optional[int] = None) -> str:
        """
        Read a stylesheet as text.

        Raises:
            StylesheetParseError: If the file is missing, too large or not
                decodable
        """
        file_path = Path(file_path)
        try:
            file_size = file_path.stat().st_size
        except OSError as e:
            raise StylesheetParseError(f"Cannot read {file_path}: {e}") from e

        if file_size > (max_file_size or self.MAX_FILE_SIZE):
            raise StylesheetParseError(f"File too large: {file_path} ({file_size} bytes)")

        for encoding in ("utf-8", "utf-8-sig", "latin-1"):
            try:
                return file_path.read_text(encoding=encoding)
            except UnicodeDecodeError:
                logger.debug(f"Decoding {file_path} as {encoding} failed, trying next encoding")
                continue
            except OSError as e:
                raise StylesheetParseError(f"Cannot read {file_path}: {e}") from e

        raise StylesheetParseError(f"Cannot decode {file_path}")

    def _check_strict(self, result: ParseResult) -> None:
        """Raise on recovered syntax errors when strict parsing is on"""
        if not result.syntax_errors:
            return

        first = result.syntax_errors[0]
        location = f"{result.file_path or '<text>'}:{first.get('line', 0)}:{first.get('column', 0)}"
        if self.strict:
            raise StylesheetParseError(
                f"{len(result.syntax_errors)} syntax error(s) in {location}: {first.get('message')}"
            )
        logger.warning(
            f"Recovered from {len(result.syntax_errors)} syntax error(s) in {location}"
        )


# Error types for parser exceptions
class ParseError(Exception):
    """Base class for parsing errors"""
    pass


class StylesheetParseError(ParseError):
    """Raised when a stylesheet cannot be read or parsed"""
    pass


class UnsupportedSyntaxError(ParseError):
    """Raised when no parser is registered for a syntax"""
    pass


class TreeSitterError(ParseError):
    """Raised when Tree-sitter setup or parsing fails"""
    pass
