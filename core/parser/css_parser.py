"""
CSS parser using Tree-sitter.

Converts the Tree-sitter CSS syntax tree into a StylesheetNode tree of rules,
at-rules, declarations and comments. The grammar accepts nested rule sets and
the ``&`` nesting selector, so the same parser serves CSS, SCSS and LESS
sources. Dialect constructs the grammar rejects are masked before parsing
(see ``recovery``); all text is still taken from the unmasked source.
"""

import logging
from pathlib import Path
from typing import Any, List, Optional, Tuple

from .base import ParseResult, StylesheetSyntax
from .recovery import mask_dialect_syntax
from .tree_sitter_base import SourceText, TreeSitterBase
from ..models.stylesheet import StylesheetNode

logger = logging.getLogger(__name__)


# Statements the grammar names explicitly; everything else starting with "@"
# is a generic at_rule
AT_RULE_STATEMENTS = {
    "media_statement", "import_statement", "charset_statement",
    "namespace_statement", "keyframes_statement", "supports_statement",
    "scope_statement", "postcss_statement", "at_rule",
}

COMMENT_TYPES = {"comment", "js_comment"}

PUNCTUATION = {"{", "}", ";"}


def comment_text(raw: str) -> str:
    """Strip comment delimiters: ``/* c */`` -> ``c``, ``// c`` -> ``c``"""
    text = raw.strip()
    if text.startswith("/*"):
        text = text[2:]
        if text.endswith("*/"):
            text = text[:-2]
    elif text.startswith("//"):
        text = text[2:]
    return text.strip()


class CSSParser(TreeSitterBase):
    """
    Stylesheet parser backed by tree-sitter-css.

    Features:
    - Rules with raw selector text and selector start position
    - Nested rules (CSS nesting, SCSS/LESS ``&`` combinators)
    - At-rules with lower-cased names and their nested blocks
    - Declarations as prop/value pairs
    - Block and line comments
    """

    def __init__(self, syntax: StylesheetSyntax = StylesheetSyntax.CSS, strict: bool = False):
        super().__init__(syntax, language="css", strict=strict)
        logger.debug(f"CSS parser initialized for {syntax.value}")

    def parse(self, content: str, file_path: Optional[Path] = None) -> ParseResult:
        self._start_timing()

        source = SourceText(content)
        tree = self.parse_tree(source, mask_dialect_syntax(content, self.syntax))

        root = StylesheetNode.root()
        self._convert(tree.root_node, root, source)

        result = ParseResult(
            root=root,
            syntax=self.syntax,
            file_path=file_path,
            syntax_errors=self._extract_syntax_errors(tree, source),
        )
        result.parse_time = self._get_elapsed_time()
        self._check_strict(result)

        logger.debug(
            f"Parsed {file_path or '<text>'}: {result.rule_count} rules "
            f"in {result.parse_time * 1000:.1f}ms"
        )
        return result

    def _convert(self, container: Any, parent: StylesheetNode, source: SourceText) -> None:
        """
        Convert children of a stylesheet/block node.

        Uses an explicit work list so deeply nested stylesheets do not hit
        the recursion limit.
        """
        pending: List[Tuple[Any, StylesheetNode]] = [(container, parent)]

        while pending:
            ts_container, node_parent = pending.pop()
            children = list(ts_container.children)
            index = 0
            while index < len(children):
                child = children[index]
                index += 1
                if child.type in PUNCTUATION:
                    continue

                if child.type == "ERROR":
                    # Splice in whatever the parser recovered, in place
                    children[index:index] = child.children
                    continue

                if child.type in COMMENT_TYPES:
                    node_parent.append(StylesheetNode.comment(
                        comment_text(source.node_text(child)),
                        source=source.position(child.start_byte),
                    ))
                elif child.type == "rule_set":
                    block = self.find_child_by_type(child, "block")
                    rule = node_parent.append(self._convert_rule(child, block, source))
                    if block is not None:
                        pending.append((block, rule))
                elif child.type == "declaration":
                    declaration = self._convert_declaration(child, source)
                    if declaration is not None:
                        node_parent.append(declaration)
                elif child.type in AT_RULE_STATEMENTS:
                    block = self.find_child_by_type(child, "block")
                    at_rule = node_parent.append(self._convert_at_rule(child, block, source))
                    if block is not None:
                        pending.append((block, at_rule))

    def _convert_rule(self, node: Any, block: Optional[Any], source: SourceText) -> StylesheetNode:
        if block is not None:
            selector = source.slice(node.start_byte, block.start_byte)
        else:
            selectors = self.find_child_by_type(node, "selectors")
            selector = source.node_text(selectors if selectors is not None else node)

        return StylesheetNode.rule(selector.rstrip(), source=source.position(node.start_byte))

    def _convert_declaration(self, node: Any, source: SourceText) -> Optional[StylesheetNode]:
        property_node = self.find_child_by_type(node, "property_name")
        colon = self.find_child_by_type(node, ":")
        if property_node is None or colon is None:
            return None

        value = source.slice(colon.end_byte, node.end_byte).strip()
        if value.endswith(";"):
            value = value[:-1].rstrip()

        return StylesheetNode.declaration(
            source.node_text(property_node).strip(),
            value,
            source=source.position(node.start_byte),
        )

    def _convert_at_rule(self, node: Any, block: Optional[Any], source: SourceText) -> StylesheetNode:
        keyword = node.children[0] if node.children else node
        name = source.node_text(keyword).strip().lstrip("@")

        params_end = block.start_byte if block is not None else node.end_byte
        params = source.slice(keyword.end_byte, params_end).strip().rstrip(";").strip()

        return StylesheetNode.at_rule(name, params, source=source.position(node.start_byte))
