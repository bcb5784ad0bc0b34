"""
Dialect recovery for the Tree-sitter CSS grammar.

SCSS, LESS and indented Sass (after brace conversion) use constructs the CSS
grammar rejects: ``&`` suffix selectors (``&-mod``, ``&__el``), ``$`` and
``@`` variables, ``!default`` flags, placeholder selectors, mixin calls and
control at-rules with arbitrary parameters. The grammar is run over a masked
copy in which those constructs are rewritten into plain CSS of the same UTF-8
byte length. Node offsets therefore stay valid for the original text, which
remains the only source of selector, value and comment text.
"""

import re
from typing import List

from .base import StylesheetSyntax

# At-rules whose parameters the grammar models; all others have their
# parameters blanked so the statement parses as a generic at_rule
STRUCTURED_AT_RULES = {
    "media", "import", "charset", "namespace", "supports", "scope",
    "layer", "container", "page", "font-face",
}

AT_KEYWORD_PATTERN = re.compile(r"@[A-Za-z_-]+")
SCSS_FLAG_PATTERN = re.compile(r"!\s*(?:default|global|optional)\b")

SCSS_SYNTAXES = (StylesheetSyntax.SCSS, StylesheetSyntax.SASS)
NAME_CHARS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_-")


def _is_ident_char(char: str) -> bool:
    return bool(char) and (char.isalnum() or char in "-_")


class DialectMasker:
    """
    Single pass over a stylesheet that tracks statement boundaries.

    A statement starts after ``{``, ``}`` or ``;``; strings, comments and
    ``#{...}`` interpolation never end one.
    """

    def __init__(self, content: str, syntax: StylesheetSyntax):
        self.content = content
        self.syntax = syntax
        self.chars: List[str] = list(content)

    def mask(self) -> str:
        content = self.content
        length = len(content)
        statement_start = True
        index = 0

        while index < length:
            char = content[index]

            if content.startswith("/*", index):
                end = content.find("*/", index + 2)
                index = length if end == -1 else end + 2
                continue
            if content.startswith("//", index) and self._line_comment_allowed(index):
                end = content.find("\n", index)
                index = length if end == -1 else end
                continue
            if char in "\"'":
                index = self._skip_string(index)
                statement_start = False
                continue
            if content.startswith("#{", index):
                end = self._interpolation_end(index)
                for position in range(index + 2, end):
                    self._mask_char(position)
                index = end
                statement_start = False
                continue
            if char in "{};":
                statement_start = True
                index += 1
                continue
            if char.isspace():
                index += 1
                continue

            if statement_start:
                statement_start = False
                if char == "@":
                    index = self._mask_at_rule(index)
                    continue
                if char in ".#" and self.syntax == StylesheetSyntax.LESS:
                    end = self._statement_end(index)
                    if end < length and content[end] in ";}" and self._mask_mixin_call(index, end):
                        index = end
                        continue
                if char == "%" and self.syntax in SCSS_SYNTAXES and _is_ident_char(content[index + 1:index + 2]):
                    # placeholder selector
                    self.chars[index] = "."
                    index += 1
                    continue

            self._mask_char(index)
            index += 1

        return "".join(self.chars)

    def _mask_char(self, index: int) -> None:
        content = self.content
        char = content[index]
        following = content[index + 1:index + 2]

        if char == "&" and _is_ident_char(following):
            self.chars[index] = "."
        elif char == "$" and self.syntax in SCSS_SYNTAXES and _is_ident_char(following):
            self.chars[index] = "_"
        elif char == "@" and self.syntax == StylesheetSyntax.LESS and _is_ident_char(following):
            self.chars[index] = "_"
        elif char == "~" and self.syntax == StylesheetSyntax.LESS and following in ("\"", "'"):
            self.chars[index] = " "
        elif char == "!" and self.syntax in SCSS_SYNTAXES:
            match = SCSS_FLAG_PATTERN.match(content, index)
            if match is not None:
                self._blank(match.start(), match.end())

    def _mask_at_rule(self, index: int) -> int:
        match = AT_KEYWORD_PATTERN.match(self.content, index)
        if match is None:
            self._mask_char(index)
            return index + 1

        name = match.group()[1:].lower()
        if name in STRUCTURED_AT_RULES or name.endswith("keyframes"):
            return match.end()

        end = self._statement_end(match.end())
        self._blank(match.end(), end)
        if end < len(self.content) and self.content[end] == "}":
            self._terminate(match.end(), end)
        return end

    def _mask_mixin_call(self, index: int, end: int) -> bool:
        """``.mixin(args);`` becomes ``@mixin       ;``"""
        name_end = index + 1
        while name_end < end and self.content[name_end] in NAME_CHARS:
            name_end += 1
        if name_end == index + 1:
            return False

        self.chars[index] = "@"
        self._blank(name_end, end)
        if self.content[end] == "}":
            self._terminate(name_end, end)
        return True

    def _blank(self, start: int, end: int) -> None:
        for position in range(start, end):
            char = self.content[position]
            if char not in "\r\n":
                self.chars[position] = " " * len(char.encode("utf-8", errors="replace"))

    def _terminate(self, start: int, end: int) -> None:
        """Put a ``;`` into the last blanked position before a closing brace"""
        for position in range(end - 1, start - 1, -1):
            if self.content[position] not in "\r\n":
                self.chars[position] = ";" + self.chars[position][1:]
                return

    def _statement_end(self, start: int) -> int:
        """Index of the ``{``, ``;`` or ``}`` ending the statement at start"""
        content = self.content
        depth = 0
        index = start
        while index < len(content):
            char = content[index]
            if char in "\"'":
                index = self._skip_string(index)
                continue
            if content.startswith("#{", index):
                index = self._interpolation_end(index)
                continue
            if char == "(":
                depth += 1
            elif char == ")":
                depth = max(depth - 1, 0)
            elif depth == 0 and char in "{;}":
                return index
            index += 1
        return len(content)

    def _skip_string(self, index: int) -> int:
        content = self.content
        quote = content[index]
        index += 1
        while index < len(content):
            char = content[index]
            if char == "\\":
                index += 2
                continue
            if char == quote:
                return index + 1
            if char == "\n":
                return index
            index += 1
        return len(content)

    def _interpolation_end(self, index: int) -> int:
        end = self.content.find("}", index + 2)
        return len(self.content) if end == -1 else end + 1

    def _line_comment_allowed(self, index: int) -> bool:
        return index == 0 or self.content[index - 1].isspace() or self.content[index - 1] in "{};"


def mask_dialect_syntax(content: str, syntax: StylesheetSyntax) -> str:
    """
    Rewrite dialect constructs into grammar-friendly text of equal byte length.

    Suffix selectors and at-rule parameters are masked for every syntax; SCSS
    and Sass additionally mask ``$`` variables, flags and placeholders, LESS
    masks ``@`` variables, ``~"..."`` escapes and mixin calls.
    """
    return DialectMasker(content, syntax).mask()
