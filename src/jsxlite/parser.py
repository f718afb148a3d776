"""jsxlite parser — converts the lexer's token stream into a parse tree."""

from __future__ import annotations

from dataclasses import dataclass, field

from jsxlite.ast import Attribute, Bool, Document, Embedded, StringLiteral, Tag, Text
from jsxlite.errors import ParseError, TrailingInput, UnexpectedToken, UnterminatedTag
from jsxlite.lexer import Lexer
from jsxlite.tokens import Position, Span, Token, TokenType

_BOOLEANS = {"true": True, "false": False}


@dataclass(slots=True)
class _OpenTag:
    """A paired tag whose closer has not been reached yet."""

    name: str
    attributes: tuple[Attribute, ...]
    start: Position
    children: list[Tag | Embedded | Text] = field(default_factory=list)


class Parser:
    """Predictive parser for jsxlite templates.

    Every alternative is chosen from the next token alone, so there is no
    backtracking: the first mismatch is raised as the error. Tag nesting is
    tracked on an explicit stack, so depth is bounded by memory only.
    """

    def __init__(self, lexer: Lexer, source: str, filename: str) -> None:
        self._lexer = lexer
        self._source = source
        self._filename = filename
        self._current: Token | None = None

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def _peek(self) -> Token:
        if self._current is None:
            self._current = self._lexer.next_token()
        return self._current

    def _at(self, *types: TokenType) -> bool:
        return self._peek().type in types

    def _advance(self) -> Token:
        tok = self._peek()
        if tok.type != TokenType.EOF:
            self._current = None
        return tok

    def _expect(self, tt: TokenType, message: str, expected: str) -> Token:
        """Consume a token inside a tag; running out of input means the tag is unterminated."""
        if not self._at(tt):
            raise self._mismatch(message, expected)
        return self._advance()

    def _skip_ws(self) -> None:
        if self._at(TokenType.WS):
            self._advance()

    # ------------------------------------------------------------------
    # Document level
    # ------------------------------------------------------------------

    def parse(self) -> Document:
        start = Position(1, 1, 0)
        self._skip_ws()

        if not self._at(TokenType.LT):
            raise self._error(UnexpectedToken, "expected a tag", "'<'")
        root = self._parse_tag()

        self._skip_ws()
        if not self._at(TokenType.EOF):
            raise self._error(
                TrailingInput, "unexpected content after the top-level tag", "end of input"
            )

        return Document(root, Span(start, self._peek().span.end))

    # ------------------------------------------------------------------
    # Tags
    # ------------------------------------------------------------------

    def _parse_tag(self) -> Tag:
        """Parse a tag and its descendants with an explicit stack of open tags."""
        open_tags: list[_OpenTag] = []

        while True:
            tag = self._parse_start_tag(open_tags)

            # Collect children of the innermost open tag until a nested tag starts
            while True:
                if tag is not None:
                    if not open_tags:
                        return tag
                    open_tags[-1].children.append(tag)
                    tag = None

                self._skip_ws()
                tok = self._peek()
                top = open_tags[-1]

                if tok.type == TokenType.LT:
                    break
                elif tok.type == TokenType.EMBEDDED:
                    self._advance()
                    top.children.append(Embedded(tok.value, tok.span))
                elif tok.type == TokenType.TEXT:
                    self._advance()
                    top.children.append(Text(tok.value, tok.span))
                elif tok.type == TokenType.CLOSE_TAG:
                    # The closer's name is deliberately not compared with the opening name
                    self._advance()
                    open_tags.pop()
                    tag = Tag(
                        top.name,
                        top.attributes,
                        tuple(top.children),
                        Span(top.start, tok.span.end),
                    )
                else:
                    raise self._error(
                        UnterminatedTag,
                        f"missing closing tag for <{top.name}>",
                        "'</' closing tag",
                    )

    def _parse_start_tag(self, open_tags: list[_OpenTag]) -> Tag | None:
        """Parse '<' name attrs up to '/>' or '>'.

        A self-closing tag is returned complete; a paired tag is pushed onto
        *open_tags* and None is returned.
        """
        start = self._advance().span.start  # consume LT
        self._skip_ws()

        name_tok = self._expect(TokenType.IDENTIFIER, "expected tag name after '<'", "tag name")
        attributes = self._parse_attributes()

        if self._at(TokenType.SLASH_GT):
            end_tok = self._advance()
            return Tag(name_tok.value, attributes, (), Span(start, end_tok.span.end))

        self._expect(TokenType.GT, "expected attribute, '>' or '/>'", "attribute, '>' or '/>'")
        open_tags.append(_OpenTag(name_tok.value, attributes, start))
        return None

    # ------------------------------------------------------------------
    # Attributes
    # ------------------------------------------------------------------

    def _parse_attributes(self) -> tuple[Attribute, ...]:
        attributes: list[Attribute] = []
        while True:
            self._skip_ws()
            if not self._at(TokenType.IDENTIFIER):
                return tuple(attributes)
            attributes.append(self._parse_attribute())

    def _parse_attribute(self) -> Attribute:
        key_tok = self._advance()
        self._skip_ws()
        self._expect(TokenType.EQUALS, "expected '=' after attribute name", "'='")
        self._skip_ws()
        value = self._parse_attribute_value()
        return Attribute(
            key_tok.value, value, key_tok.span, Span(key_tok.span.start, value.span.end)
        )

    def _parse_attribute_value(self) -> StringLiteral | Bool | Embedded:
        tok = self._peek()

        if tok.type == TokenType.STRING:
            self._advance()
            return StringLiteral(tok.value, tok.span)
        if tok.type == TokenType.IDENTIFIER and tok.value in _BOOLEANS:
            self._advance()
            return Bool(_BOOLEANS[tok.value], tok.span)
        if tok.type == TokenType.EMBEDDED:
            self._advance()
            return Embedded(tok.value, tok.span)

        raise self._mismatch(
            "expected attribute value", "string literal, true, false or {expression}"
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _error(self, cls: type[ParseError], message: str, expected: str) -> ParseError:
        return cls(message, self._peek().span, self._source, expected, self._filename)

    def _mismatch(self, message: str, expected: str) -> ParseError:
        """Error for an unexpected token inside a tag."""
        if self._at(TokenType.EOF):
            return self._error(UnterminatedTag, f"unterminated tag: {message}", expected)
        return self._error(UnexpectedToken, message, expected)


def parse(source: str, filename: str = "input.jsx") -> Document:
    """Convenience function: parse template source and return a Document."""
    return Parser(Lexer(source, filename), source, filename).parse()
