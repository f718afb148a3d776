"""Test identifier characters, lexing, and boundaries."""

from jsxlite.tokens import TokenType, is_ident_char

from tests.conftest import assert_tag


class TestIsIdentChar:
    def test_letters(self):
        assert is_ident_char("a")
        assert is_ident_char("Z")

    def test_digits(self):
        assert is_ident_char("0")
        assert is_ident_char("9")

    def test_underscore_and_dash(self):
        assert is_ident_char("_")
        assert is_ident_char("-")

    def test_non_ident(self):
        for ch in '<>/={}". \t\n.:@':
            assert not is_ident_char(ch), f"Expected '{ch}' to NOT be ident_char"

    def test_non_ascii_letters_excluded(self):
        assert not is_ident_char("é")
        assert not is_ident_char("名")

    def test_empty_string(self):
        assert not is_ident_char("")


class TestIdentifierLexing:
    def test_dashed_tag_name(self, lex):
        tokens = lex("<my-widget/>")
        assert tokens[1].type == TokenType.IDENTIFIER
        assert tokens[1].value == "my-widget"

    def test_identifier_ends_at_equals(self, lex):
        tokens = lex('<a data-x="1"/>')
        assert tokens[3].value == "data-x"
        assert tokens[4].type == TokenType.EQUALS

    def test_identifier_ends_at_slash_gt(self, lex):
        tokens = lex("<br/>")
        assert tokens[1].value == "br"

    def test_digit_leading_name(self, lex):
        tokens = lex("<2col/>")
        assert tokens[1].value == "2col"


class TestIdentifierParsing:
    def test_name_with_all_classes(self, parse_root):
        root = parse_root("<Ab_9-z/>")
        assert_tag(root, "Ab_9-z")

    def test_attribute_key_with_dashes(self, parse_root):
        root = parse_root('<div aria-label="x"/>')
        assert root.attributes[0].key == "aria-label"
