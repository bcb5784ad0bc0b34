"""
Unit tests for the Tree-sitter CSS parser.

Tests conversion of the CSS syntax tree into StylesheetNode rules, at-rules,
declarations and comments, with positions and syntax error handling.
"""

import pytest

from core.models.stylesheet import NodeType, SourcePosition
from core.parser.base import StylesheetParseError, StylesheetSyntax
from core.parser.css_parser import CSSParser, comment_text


class TestCommentText:
    """Test comment delimiter stripping"""

    def test_block_comment(self):
        assert comment_text("/* c */") == "c"

    def test_multiline_block_comment(self):
        assert comment_text("/*\n  first\n  second\n*/") == "first\n  second"

    def test_line_comment(self):
        assert comment_text("// note") == "note"


class TestCSSParser:
    """Test CSS parser functionality"""

    def setup_method(self):
        """Setup test instance"""
        self.parser = CSSParser()

    def test_syntax(self):
        assert self.parser.get_syntax() == StylesheetSyntax.CSS
        assert CSSParser(StylesheetSyntax.SCSS).get_syntax() == StylesheetSyntax.SCSS

    def test_rules_and_declarations(self):
        """Test rule selectors and declarations are extracted in order"""
        content = ".container {\n  width: 100%;\n  margin: 0 auto;\n}\n#header { color: white }\n"

        result = self.parser.parse(content)
        rules = list(result.root.walk_rules())

        assert [rule.selector for rule in rules] == [".container", "#header"]
        assert [(d.prop, d.value) for d in rules[0].declarations()] == [
            ("width", "100%"),
            ("margin", "0 auto"),
        ]
        assert [(d.prop, d.value) for d in rules[1].declarations()] == [("color", "white")]
        assert result.success
        assert result.rule_count == 2

    def test_rule_position_is_selector_start(self):
        """Test positions are 1-based line/column of the selector"""
        result = self.parser.parse("\n\n  .a, .b { color: red; }\n")
        rule = next(result.root.walk_rules())

        assert rule.source == SourcePosition(line=3, column=3)
        assert rule.selector == ".a, .b"

    def test_multiline_selector_kept_raw(self):
        """Test selectors spanning lines keep their newlines"""
        result = self.parser.parse(".first,\n.second {\n  color: red;\n}\n")
        rule = next(result.root.walk_rules())

        assert rule.selector == ".first,\n.second"

    def test_column_counts_characters(self):
        """Test columns are counted in characters, not UTF-8 bytes"""
        result = self.parser.parse('.a::before { content: "é"; } .b { color: red; }')
        rules = list(result.root.walk_rules())

        assert rules[1].source == SourcePosition(line=1, column=30)

    def test_comments(self):
        """Test comments are converted with delimiters stripped"""
        result = self.parser.parse("/* heading */\n.a { color: red; }\n")
        comment = result.root.nodes[0]

        assert comment.type == NodeType.COMMENT
        assert comment.text == "heading"
        assert result.root.nodes[1].type == NodeType.RULE

    def test_media_at_rule(self):
        """Test @media becomes an at-rule with nested rules"""
        result = self.parser.parse("@media (max-width: 600px) {\n  .a { color: red; }\n}\n")
        media = result.root.nodes[0]

        assert media.type == NodeType.AT_RULE
        assert media.name == "media"
        assert media.params == "(max-width: 600px)"
        assert [node.selector for node in media.nodes] == [".a"]
        assert media.nodes[0].parent is media

    def test_at_rule_without_block(self):
        """Test @import is an at-rule without children"""
        result = self.parser.parse("@import 'base.css';\n.a { color: red; }\n")
        at_rule = result.root.nodes[0]

        assert at_rule.type == NodeType.AT_RULE
        assert at_rule.name == "import"
        assert at_rule.nodes == []

    def test_nested_rule(self):
        """Test nested rule sets keep their parent links"""
        result = self.parser.parse(".parent {\n  color: red;\n  & .child {\n    color: blue;\n  }\n}\n")
        parent = result.root.nodes[0]
        child = [node for node in parent.nodes if node.type == NodeType.RULE][0]

        assert child.selector == "& .child"
        assert child.parent is parent
        assert child.source == SourcePosition(line=3, column=3)

    def test_parse_file(self, tmp_path):
        stylesheet = tmp_path / "test.css"
        stylesheet.write_text(".a { color: red; }\n")

        result = self.parser.parse_file(stylesheet)

        assert result.file_path == stylesheet
        assert result.rule_count == 1

    def test_syntax_errors_recovered(self):
        """Test malformed input is reported but not raised by default"""
        result = self.parser.parse(".a { color: red; }\n.b { color: blue;\n")

        assert not result.success
        assert result.syntax_errors
        assert ".a" in [rule.selector for rule in result.root.walk_rules()]

    def test_strict_mode_raises(self):
        """Test strict parsing raises on syntax errors"""
        parser = CSSParser(strict=True)

        with pytest.raises(StylesheetParseError):
            parser.parse(".a { color: red; }\n.b { color: blue;\n")


class TestDialectSources:
    """Test SCSS and LESS constructs the CSS grammar rejects on its own"""

    def rule_declarations(self, rule):
        return [(d.prop, d.value) for d in rule.declarations()]

    def test_scss_suffix_selectors_kept_raw(self):
        content = ".a {\n  &-mod { color: red; }\n  &__el { color: blue; }\n}\n"

        result = CSSParser(StylesheetSyntax.SCSS).parse(content)
        rules = list(result.root.walk_rules())

        assert [rule.selector for rule in rules] == [".a", "&-mod", "&__el"]
        assert self.rule_declarations(rules[1]) == [("color", "red")]
        assert self.rule_declarations(rules[2]) == [("color", "blue")]
        assert rules[1].source == SourcePosition(line=2, column=3)

    def test_scss_variable_values_kept(self):
        result = CSSParser(StylesheetSyntax.SCSS).parse(".a { width: $v; color: red }")
        rule = next(result.root.walk_rules())

        assert self.rule_declarations(rule) == [("width", "$v"), ("color", "red")]

    def test_scss_include_is_at_rule(self):
        content = ".a {\n  @include size($w: 2px);\n  color: red;\n}\n"

        result = CSSParser(StylesheetSyntax.SCSS).parse(content)
        rule = result.root.nodes[0]
        at_rules = [node for node in rule.nodes if node.type == NodeType.AT_RULE]

        assert [node.name for node in at_rules] == ["include"]
        assert at_rules[0].params == "size($w: 2px)"
        assert self.rule_declarations(rule) == [("color", "red")]

    def test_less_variable_values_kept(self):
        content = "@w: 10px;\n.b { width: @w; }\n"

        result = CSSParser(StylesheetSyntax.LESS).parse(content)
        rule = next(result.root.walk_rules())

        assert result.root.nodes[0].type == NodeType.AT_RULE
        assert result.root.nodes[0].name == "w"
        assert self.rule_declarations(rule) == [("width", "@w")]

    def test_less_mixin_call_does_not_swallow_declarations(self):
        result = CSSParser(StylesheetSyntax.LESS).parse(".b { .mixin(); color: blue; }")
        rule = next(result.root.walk_rules())

        assert [r.selector for r in result.root.walk_rules()] == [".b"]
        assert self.rule_declarations(rule) == [("color", "blue")]
