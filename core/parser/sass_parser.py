"""
Parser for the indented ``.sass`` syntax.

The indented syntax is rewritten into brace syntax line by line (line
numbers and selector columns are preserved) and then handed to the
Tree-sitter CSS parser.
"""

import logging
import re
from pathlib import Path
from typing import List, Optional

from .base import ParseResult, StylesheetSyntax
from .css_parser import CSSParser

logger = logging.getLogger(__name__)

MIXIN_SHORTHAND = re.compile(r"^=(?=[\w-])")
INCLUDE_SHORTHAND = re.compile(r"^\+(?=[\w-])")


def _indentation(line: str) -> int:
    return len(line) - len(line.lstrip(" \t"))


def _expand_shorthands(line: str, indent: int) -> str:
    body = line[indent:]
    body = MIXIN_SHORTHAND.sub("@mixin ", body)
    body = INCLUDE_SHORTHAND.sub("@include ", body)
    return line[:indent] + body


def indented_to_braces(content: str) -> str:
    """
    Rewrite indented Sass into SCSS-like brace syntax.

    A line followed by a more indented line opens a block; dedents close
    blocks by appending ``}`` to the last non-blank line. ``//`` comments
    become block comments spanning their indented continuation lines.
    """
    lines = content.split("\n")
    out = list(lines)

    open_blocks: List[int] = []
    last_line: Optional[int] = None
    comment_indent: Optional[int] = None

    def next_indent(start: int) -> int:
        for candidate in lines[start + 1:]:
            if candidate.strip():
                return _indentation(candidate)
        return -1

    def close_comment() -> None:
        nonlocal comment_indent
        if last_line is not None and not out[last_line].rstrip().endswith("*/"):
            out[last_line] = _with_suffix(out[last_line], " */")
        comment_indent = None

    def close_blocks(indent: int) -> None:
        while open_blocks and indent <= open_blocks[-1]:
            open_blocks.pop()
            if last_line is not None:
                out[last_line] = _with_suffix(out[last_line], " }")

    for index, raw in enumerate(lines):
        line = raw.rstrip("\r")
        stripped = line.strip()
        if not stripped:
            continue

        indent = _indentation(line)

        if comment_indent is not None:
            if indent > comment_indent:
                last_line = index
                continue
            close_comment()

        close_blocks(indent)
        last_line = index

        if stripped.startswith("/*") and stripped.endswith("*/"):
            continue
        if stripped.startswith("//") or stripped.startswith("/*"):
            out[index] = _keep_cr(raw, line[:indent] + "/*" + line[indent + 2:])
            comment_indent = indent
            continue

        line = _expand_shorthands(line, indent)

        if stripped.endswith(","):
            # Selector list continues on the next line
            out[index] = _keep_cr(raw, line)
        elif next_indent(index) > indent:
            out[index] = _keep_cr(raw, line + " {")
            open_blocks.append(indent)
        else:
            out[index] = _keep_cr(raw, line if stripped.endswith(";") else line + ";")

    if comment_indent is not None:
        close_comment()
    close_blocks(-1)

    return "\n".join(out)


def _keep_cr(original: str, converted: str) -> str:
    return converted + "\r" if original.endswith("\r") else converted


def _with_suffix(line: str, suffix: str) -> str:
    if line.endswith("\r"):
        return line[:-1] + suffix + "\r"
    return line + suffix


class SassParser(CSSParser):
    """Indented Sass syntax parser"""

    def __init__(self, strict: bool = False):
        super().__init__(StylesheetSyntax.SASS, strict=strict)

    def parse(self, content: str, file_path: Optional[Path] = None) -> ParseResult:
        converted = indented_to_braces(content)
        logger.debug(f"Converted indented syntax of {file_path or '<text>'} to brace syntax")
        return super().parse(converted, file_path)
