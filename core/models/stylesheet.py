"""
Stylesheet node tree produced by the stylesheet parsers.

A small, parser-independent tree (root, rule, at-rule, declaration, comment)
with parent links, so the classname indexer never touches Tree-sitter nodes
directly.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional


class NodeType(Enum):
    """Kinds of stylesheet nodes"""
    ROOT = "root"
    RULE = "rule"
    AT_RULE = "atrule"
    DECLARATION = "declaration"
    COMMENT = "comment"


@dataclass(frozen=True)
class SourcePosition:
    """1-based line/column of a node start (column counted in characters)"""
    line: int
    column: int


@dataclass(eq=False)
class StylesheetNode:
    """
    Node of a parsed stylesheet.

    Equality and hashing are identity based, so nodes can key dictionaries
    (the indexer keeps resolved selectors per rule node this way).
    """
    type: NodeType
    source: Optional[SourcePosition] = None

    # rule
    selector: str = ""
    # at-rule
    name: str = ""
    params: str = ""
    # declaration
    prop: str = ""
    value: str = ""
    # comment
    text: str = ""

    nodes: List["StylesheetNode"] = field(default_factory=list)
    parent: Optional["StylesheetNode"] = field(default=None, repr=False)

    @classmethod
    def root(cls) -> "StylesheetNode":
        return cls(type=NodeType.ROOT, source=SourcePosition(1, 1))

    @classmethod
    def rule(cls, selector: str, source: Optional[SourcePosition] = None) -> "StylesheetNode":
        return cls(type=NodeType.RULE, selector=selector, source=source)

    @classmethod
    def at_rule(
        cls,
        name: str,
        params: str = "",
        source: Optional[SourcePosition] = None
    ) -> "StylesheetNode":
        return cls(type=NodeType.AT_RULE, name=name.lower(), params=params, source=source)

    @classmethod
    def declaration(
        cls,
        prop: str,
        value: str,
        source: Optional[SourcePosition] = None
    ) -> "StylesheetNode":
        return cls(type=NodeType.DECLARATION, prop=prop, value=value, source=source)

    @classmethod
    def comment(cls, text: str, source: Optional[SourcePosition] = None) -> "StylesheetNode":
        return cls(type=NodeType.COMMENT, text=text, source=source)

    def append(self, child: "StylesheetNode") -> "StylesheetNode":
        """Attach child as last node and set its parent link"""
        child.parent = self
        self.nodes.append(child)
        return child

    @property
    def is_root(self) -> bool:
        return self.type == NodeType.ROOT

    def declarations(self) -> List["StylesheetNode"]:
        """Direct declaration children in source order"""
        return [node for node in self.nodes if node.type == NodeType.DECLARATION]

    def walk(self) -> Iterator["StylesheetNode"]:
        """Iterate over all descendants depth-first (without recursion)"""
        stack = list(reversed(self.nodes))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.nodes))

    def walk_rules(self) -> Iterator["StylesheetNode"]:
        for node in self.walk():
            if node.type == NodeType.RULE:
                yield node
