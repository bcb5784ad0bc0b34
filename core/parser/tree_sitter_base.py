"""
Base Tree-sitter functionality for stylesheet parsers.

Provides language loading, byte/character offset bookkeeping, syntax error
collection and small node helpers shared by the Tree-sitter based parsers.
"""

import importlib
import logging
from typing import Any, Dict, List, Optional

try:
    import tree_sitter
except ImportError:
    tree_sitter = None

from .base import BaseParser, StylesheetSyntax, TreeSitterError
from ..models.stylesheet import SourcePosition

logger = logging.getLogger(__name__)


class SourceText:
    """
    Stylesheet text with byte offset conversion.

    Tree-sitter reports byte offsets into the UTF-8 encoding; node text and
    positions are needed in characters.
    """

    def __init__(self, content: str):
        self.content = content
        self.data = content.encode("utf-8", errors="replace")
        self._char_offsets: Optional[List[int]] = None
        if not content.isascii():
            self._char_offsets = self._build_char_offsets()

    def _build_char_offsets(self) -> List[int]:
        offsets = [0] * (len(self.data) + 1)
        byte_offset = 0
        for index, char in enumerate(self.content):
            width = len(char.encode("utf-8", errors="replace"))
            for i in range(width):
                offsets[byte_offset + i] = index
            byte_offset += width
        offsets[byte_offset] = len(self.content)
        return offsets

    def char_offset(self, byte_offset: int) -> int:
        if self._char_offsets is None:
            return byte_offset
        return self._char_offsets[min(byte_offset, len(self._char_offsets) - 1)]

    def slice(self, start_byte: int, end_byte: int) -> str:
        return self.data[start_byte:end_byte].decode("utf-8", errors="replace")

    def node_text(self, node: Any) -> str:
        return self.slice(node.start_byte, node.end_byte)

    def position(self, byte_offset: int) -> SourcePosition:
        """1-based line/column of a byte offset"""
        offset = self.char_offset(byte_offset)
        line = self.content.count("\n", 0, offset) + 1
        line_start = self.content.rfind("\n", 0, offset) + 1
        return SourcePosition(line=line, column=offset - line_start + 1)


class TreeSitterBase(BaseParser):
    """
    Base class for Tree-sitter stylesheet parsers.

    Loads the grammar module for the language once per instance and exposes
    helpers for walking the concrete syntax tree.
    """

    LANGUAGE_MODULES = {
        "css": "tree_sitter_css",
    }

    def __init__(self, syntax: StylesheetSyntax, language: str = "css", strict: bool = False):
        super().__init__(syntax, strict=strict)

        if tree_sitter is None:
            raise TreeSitterError("tree-sitter package not installed")

        self.language = language
        try:
            self.tree_sitter_language = self._load_language(language)
        except TreeSitterError:
            raise
        except Exception as e:
            logger.error(f"Failed to setup {language} parser: {e}")
            raise TreeSitterError(f"Cannot initialize {language} parser: {e}") from e

        self.parser = tree_sitter.Parser(self.tree_sitter_language)

    def _load_language(self, language: str) -> "tree_sitter.Language":
        """Import the grammar package and wrap its language capsule"""
        if language not in self.LANGUAGE_MODULES:
            raise TreeSitterError(f"Unsupported language: {language}")

        module_name = self.LANGUAGE_MODULES[language]
        try:
            language_module = importlib.import_module(module_name)
        except ImportError as e:
            raise TreeSitterError(
                f"Tree-sitter language module '{module_name}' not installed. "
                f"Install with: pip install {module_name.replace('_', '-')}"
            ) from e

        logger.debug(f"Loaded {language} Tree-sitter language")
        return tree_sitter.Language(language_module.language())

    def parse_tree(self, source: SourceText, masked: Optional[str] = None) -> "tree_sitter.Tree":
        """Parse source, or a same-length masked rendition of it"""
        data = source.data if masked is None else masked.encode("utf-8", errors="replace")
        tree = self.parser.parse(data)
        if tree is None:
            raise TreeSitterError("Tree-sitter parsing failed")
        return tree

    def _extract_syntax_errors(self, tree: "tree_sitter.Tree", source: SourceText) -> List[Dict[str, Any]]:
        """Collect ERROR and MISSING nodes, iteratively and capped"""
        errors: List[Dict[str, Any]] = []
        if not tree.root_node.has_error:
            return errors

        stack = [tree.root_node]
        while stack and len(errors) < self.MAX_SYNTAX_ERRORS:
            node = stack.pop()
            if node.type == "ERROR" or node.is_missing:
                position = source.position(node.start_byte)
                text = source.node_text(node)
                errors.append({
                    "type": "SYNTAX_ERROR" if node.type == "ERROR" else "MISSING_NODE",
                    "message": (
                        f"Missing {node.type}" if node.is_missing
                        else f"Unexpected '{text[:50]}'"
                    ),
                    "line": position.line,
                    "column": position.column,
                    "start_byte": node.start_byte,
                    "end_byte": node.end_byte,
                })
            if node.has_error:
                stack.extend(reversed(node.children))

        return errors

    def find_child_by_type(self, node: Any, child_type: str) -> Optional[Any]:
        for child in node.children:
            if child.type == child_type:
                return child
        return None
