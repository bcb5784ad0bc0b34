"""
Stylesheet classname indexer.

Walks a parsed stylesheet and builds the classname index: transformed class
selector -> declarations, leading comments and source position of the rule
that first defines it.
"""

import logging
from collections import deque
from pathlib import Path
from typing import Deque, Dict, List, Optional, Union

from .selectors import concat_selectors, find_class_names, split_selectors
from .transformer import StringTransformer, get_transformer, identity
from ..models.classnames import ClassnameEntry, ClassnameIndex, Position
from ..models.config import CamelCaseMode, GlobalSettings
from ..models.stylesheet import NodeType, StylesheetNode
from ..parser.registry import parser_registry

logger = logging.getLogger(__name__)


def find_parent_rule(node: StylesheetNode) -> Optional[StylesheetNode]:
    """Nearest ancestor rule, skipping at-rules; None once the root is reached"""
    parent = node.parent
    while parent is not None and not parent.is_root:
        if parent.type == NodeType.RULE:
            return parent
        parent = parent.parent
    return None


def format_declarations(rule: StylesheetNode) -> List[str]:
    return [f"{decl.prop}: {decl.value};" for decl in rule.declarations()]


def token_position(rule: StylesheetNode, class_name: str) -> Position:
    """
    Position of a class token inside a top-level rule's raw selector.

    Advances from the rule start by the text preceding the first occurrence
    of the token.
    """
    line = rule.source.line if rule.source else 0
    column = rule.source.column if rule.source else 0

    offset = rule.selector.find(class_name)
    lines = rule.selector[:max(offset, 0)].split("\n")
    last_line = lines[-1]

    if len(lines) == 1:
        return Position(line=line, column=column + len(last_line))
    return Position(line=line + len(lines) - 1, column=len(last_line) + 1)


class ClassnameIndexer:
    """
    Builds a ClassnameIndex from a stylesheet node tree.

    Siblings are visited breadth-first from a work queue; ``@media`` children
    are spliced in at the front, other at-rules are skipped, and a rule's
    children go to the back of the queue. Comments collected since the last
    at-rule are attached to the first new class name of the next rule.
    """

    def __init__(
        self,
        transformer: StringTransformer = identity,
        logger: Optional[logging.Logger] = None
    ):
        self.transformer = transformer
        self.logger = logger or globals()["logger"]

    def index(self, root: StylesheetNode) -> ClassnameIndex:
        index: ClassnameIndex = {}
        resolved_selectors: Dict[StylesheetNode, List[str]] = {}
        queue: Deque[StylesheetNode] = deque(root.nodes)
        comments: List[StylesheetNode] = []

        while queue:
            node = queue.popleft()

            if node.type == NodeType.COMMENT:
                comments.append(node)
                continue

            if node.type == NodeType.AT_RULE:
                if node.name == "media" and node.nodes:
                    queue.extendleft(reversed(node.nodes))
                comments = []
                continue

            if node.type != NodeType.RULE:
                continue

            selectors = split_selectors(node.selector)

            if node.parent is root or (node.parent is not None and node.parent.is_root):
                for selector in selectors:
                    for class_name in find_class_names(selector):
                        if self._add(index, class_name, node, comments, token_position(node, class_name)):
                            comments = []
                resolved_selectors[node] = selectors
            else:
                parent_rule = find_parent_rule(node)
                parent_selectors = resolved_selectors.get(parent_rule) if parent_rule is not None else None
                finished = concat_selectors(parent_selectors, selectors)

                position = Position(line=node.source.line, column=node.source.column) if node.source else None
                for selector in finished:
                    for class_name in find_class_names(selector):
                        if position is not None and self._add(index, class_name, node, comments, position):
                            comments = []
                resolved_selectors[node] = finished

            queue.extend(node.nodes)

        self.logger.debug(f"Indexed {len(index)} class names")
        return index

    def _add(
        self,
        index: ClassnameIndex,
        class_name: str,
        rule: StylesheetNode,
        comments: List[StylesheetNode],
        position: Position
    ) -> bool:
        """Add a class name unless already indexed; True when added"""
        key = self.transformer(class_name)
        if key in index:
            return False

        index[key] = ClassnameEntry(
            declarations=format_declarations(rule),
            comments=[comment.text for comment in comments],
            position=position,
        )
        return True


def index_stylesheet(
    root: StylesheetNode,
    transformer: StringTransformer = identity,
    logger: Optional[logging.Logger] = None
) -> ClassnameIndex:
    """Build the classname index of a parsed stylesheet"""
    return ClassnameIndexer(transformer, logger=logger).index(root)


def build_index(
    file_path: Union[str, Path],
    transformer: StringTransformer = identity,
    settings: Optional[GlobalSettings] = None,
    logger: Optional[logging.Logger] = None
) -> ClassnameIndex:
    """
    Read, parse and index a stylesheet file.

    Raises:
        ParseError: If the file cannot be read or parsed
    """
    log = logger or globals()["logger"]
    settings = settings or GlobalSettings()
    result = parser_registry.parse_file(
        Path(file_path),
        strict=settings.strict_parsing,
        max_file_size=settings.max_file_size_bytes
    )
    log.debug(f"Parsed {file_path} as {result.syntax.value} in {result.parse_time * 1000:.1f}ms")

    return index_stylesheet(result.root, transformer, logger=log)


def lookup(index: ClassnameIndex, name: str) -> Optional[ClassnameEntry]:
    """Entry for a transformed class name, with or without the leading dot"""
    key = name if name.startswith(".") else f".{name}"
    return index.get(key)


def get_all_class_names(
    file_path: Union[str, Path],
    keyword: str,
    transformer: StringTransformer = identity,
    settings: Optional[GlobalSettings] = None
) -> List[str]:
    """Indexed class names without the dot, filtered by keyword when given"""
    class_names = [key[1:] for key in build_index(file_path, transformer, settings)]
    if keyword:
        return [name for name in class_names if keyword in name]
    return class_names


def get_position(
    file_path: Union[str, Path],
    class_name: str,
    camel_case: Union[CamelCaseMode, bool, str] = CamelCaseMode.DISABLED,
    settings: Optional[GlobalSettings] = None
) -> Optional[Position]:
    """Editor position (0-based line) of ``.class_name`` in a stylesheet"""
    index = build_index(file_path, get_transformer(camel_case), settings)
    entry = lookup(index, class_name)
    if entry is None:
        return None
    return Position(line=max(entry.position.line - 1, 0), column=entry.position.column)
