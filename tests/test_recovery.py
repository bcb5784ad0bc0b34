"""
Unit tests for dialect masking ahead of Tree-sitter parsing.
"""

from core.parser.base import StylesheetSyntax
from core.parser.recovery import mask_dialect_syntax


def byte_length(text):
    return len(text.encode("utf-8"))


class TestSuffixSelectors:
    """Test ``&`` suffix selectors become class selectors"""

    def test_suffix_masked_for_every_syntax(self):
        content = ".a { &-mod { x: y; } &__el { x: y; } }"

        for syntax in StylesheetSyntax:
            assert mask_dialect_syntax(content, syntax) == ".a { .-mod { x: y; } .__el { x: y; } }"

    def test_plain_nesting_untouched(self):
        content = ".a { &:hover { x: y; } & .b { x: y; } }"

        assert mask_dialect_syntax(content, StylesheetSyntax.SCSS) == content


class TestScssMasking:
    """Test SCSS variables, flags and placeholders"""

    def test_variable_in_value(self):
        masked = mask_dialect_syntax(".a { width: $v; color: red }", StylesheetSyntax.SCSS)

        assert masked == ".a { width: _v; color: red }"

    def test_variable_declaration_with_default_flag(self):
        masked = mask_dialect_syntax("$v: 1px !default;", StylesheetSyntax.SCSS)

        assert masked == "_v: 1px " + " " * len("!default") + ";"

    def test_placeholder_selector(self):
        assert mask_dialect_syntax("%base { x: y; }", StylesheetSyntax.SCSS) == ".base { x: y; }"

    def test_include_parameters_blanked(self):
        content = "@include button($size: 2px);"

        masked = mask_dialect_syntax(content, StylesheetSyntax.SCSS)

        assert masked == "@include" + " " * len(" button($size: 2px)") + ";"

    def test_control_rule_keeps_block(self):
        content = "@if $a == 1 { .b { x: y; } }"

        masked = mask_dialect_syntax(content, StylesheetSyntax.SCSS)

        assert masked == "@if" + " " * len(" $a == 1 ") + "{ .b { x: y; } }"

    def test_dollar_left_alone_in_css(self):
        content = ".a { width: $v; }"

        assert mask_dialect_syntax(content, StylesheetSyntax.CSS) == content


class TestLessMasking:
    """Test LESS variables, escapes and mixin calls"""

    def test_variable_definition_becomes_at_rule(self):
        content = "@w: 10px;\n.b { width: @w; }"

        masked = mask_dialect_syntax(content, StylesheetSyntax.LESS)

        assert masked == "@w      ;\n.b { width: _w; }"

    def test_variable_in_media_params(self):
        content = "@media @phone { .a { x: y; } }"

        masked = mask_dialect_syntax(content, StylesheetSyntax.LESS)

        assert masked == "@media _phone { .a { x: y; } }"

    def test_mixin_call_becomes_at_rule(self):
        masked = mask_dialect_syntax(".b { .mixin(); color: blue; }", StylesheetSyntax.LESS)

        assert masked == ".b { @mixin  ; color: blue; }"

    def test_mixin_call_before_closing_brace_terminated(self):
        masked = mask_dialect_syntax(".b { .m() }", StylesheetSyntax.LESS)

        assert masked == ".b { @m  ;}"

    def test_mixin_arguments_with_semicolons(self):
        content = ".b { .m(1; 2); color: blue; }"

        masked = mask_dialect_syntax(content, StylesheetSyntax.LESS)

        assert masked == ".b { @m" + " " * len("(1; 2)") + "; color: blue; }"

    def test_rule_with_block_not_a_mixin_call(self):
        content = ".b { .c { x: y; } }"

        assert mask_dialect_syntax(content, StylesheetSyntax.LESS) == content

    def test_escaped_string(self):
        masked = mask_dialect_syntax('.a { width: ~"calc(1px)"; }', StylesheetSyntax.LESS)

        assert masked == '.a { width:  "calc(1px)"; }'


class TestMaskingInvariants:
    """Test masking never moves byte offsets or touches literal text"""

    def test_strings_and_comments_untouched(self):
        content = '.a { content: "$x &-y @z"; } /* $z &-q */'

        assert mask_dialect_syntax(content, StylesheetSyntax.SCSS) == content
        assert mask_dialect_syntax(content, StylesheetSyntax.LESS) == content

    def test_byte_length_preserved_for_non_ascii(self):
        content = '@include icon("→ ü");\n.a { &-é { x: y; } }'

        masked = mask_dialect_syntax(content, StylesheetSyntax.SCSS)

        assert byte_length(masked) == byte_length(content)
        assert masked.endswith(".a { .-é { x: y; } }")

    def test_newlines_kept_in_blanked_parameters(self):
        content = "@include m(\n  $a,\n  $b\n);\n.c { x: y; }"

        masked = mask_dialect_syntax(content, StylesheetSyntax.SCSS)

        assert masked.count("\n") == content.count("\n")
        assert masked.endswith(";\n.c { x: y; }")
