"""jsxlite lexer — converts template source into tokens on demand.

The lexer is lazy: the parser pulls one token at a time, so an error
further along in the source never masks an earlier syntax error.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum, auto

from jsxlite.errors import ParseError, UnterminatedEmbedded, UnterminatedString, UnterminatedTag
from jsxlite.tokens import Position, Span, Token, TokenType, is_ident_char, is_ws_start


class _State(Enum):
    DOCUMENT = auto()  # outside every tag
    TAG = auto()  # between '<' and '>' or '/>'
    CONTENT = auto()  # children of a paired tag


class Lexer:
    """Tokenize jsxlite source text into a stream of Token objects."""

    def __init__(self, source: str, filename: str = "input.jsx") -> None:
        self._source = source
        self._filename = filename
        self._pos = 0
        self._line = 1
        self._col = 1
        self._state_stack: list[_State] = []
        self._state = _State.DOCUMENT
        # A string or embedded value may only start right after '='
        self._after_equals = False

    def next_token(self) -> Token:
        """Scan and return the next token; EOF repeats once input is exhausted."""
        if self._pos >= len(self._source):
            return self._emit(TokenType.EOF, "", self._current_pos())

        if is_ws_start(self._source, self._pos):
            return self._lex_ws()

        if self._state == _State.TAG:
            return self._lex_tag()
        if self._state == _State.CONTENT:
            return self._lex_content()
        return self._lex_document()

    def __iter__(self) -> Iterator[Token]:
        while True:
            tok = self.next_token()
            yield tok
            if tok.type == TokenType.EOF:
                return

    # ------------------------------------------------------------------
    # Position helpers
    # ------------------------------------------------------------------

    def _current_pos(self) -> Position:
        return Position(self._line, self._col, self._pos)

    def _peek(self, offset: int = 0) -> str:
        idx = self._pos + offset
        if idx < len(self._source):
            return self._source[idx]
        return ""

    def _at_end(self) -> bool:
        return self._pos >= len(self._source)

    def _advance(self) -> str:
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        return ch

    def _emit(self, tt: TokenType, value: str, start: Position) -> Token:
        raw = self._source[start.offset : self._pos]
        return Token(tt, value, raw, Span(start, self._current_pos()))

    def _error(
        self, cls: type[ParseError], message: str, start: Position, expected: str
    ) -> ParseError:
        return cls(
            message, Span(start, self._current_pos()), self._source, expected, self._filename
        )

    # ------------------------------------------------------------------
    # State management
    # ------------------------------------------------------------------

    def _push_state(self, state: _State) -> None:
        self._state_stack.append(self._state)
        self._state = state

    def _pop_state(self) -> None:
        self._state = self._state_stack.pop()

    # ------------------------------------------------------------------
    # Shared scanners
    # ------------------------------------------------------------------

    def _lex_ws(self) -> Token:
        start = self._current_pos()
        while not self._at_end() and is_ws_start(self._source, self._pos):
            if self._peek() == "\r":
                self._advance()
            self._advance()
        return self._emit(TokenType.WS, self._source[start.offset : self._pos], start)

    def _lex_open_angle(self) -> Token:
        start = self._current_pos()
        self._advance()
        self._after_equals = False
        self._push_state(_State.TAG)
        return self._emit(TokenType.LT, "<", start)

    def _lex_embedded(self) -> Token:
        """Scan a balanced {...} region; the value keeps inner braces verbatim."""
        start = self._current_pos()
        self._advance()  # consume opening brace
        content_start = self._pos
        depth = 0

        while not self._at_end():
            ch = self._peek()
            if ch == "{":
                depth += 1
            elif ch == "}":
                if depth == 0:
                    value = self._source[content_start : self._pos]
                    self._advance()
                    return self._emit(TokenType.EMBEDDED, value, start)
                depth -= 1
            self._advance()

        raise self._error(
            UnterminatedEmbedded,
            "unterminated embedded expression",
            start,
            "'}' closing the expression",
        )

    # ------------------------------------------------------------------
    # Document mode
    # ------------------------------------------------------------------

    def _lex_document(self) -> Token:
        if self._peek() == "<":
            return self._lex_open_angle()

        # Stray content outside the root tag; the parser reports it
        start = self._current_pos()
        while not self._at_end() and self._peek() != "<":
            if is_ws_start(self._source, self._pos):
                break
            self._advance()
        return self._emit(TokenType.TEXT, self._source[start.offset : self._pos], start)

    # ------------------------------------------------------------------
    # Tag mode
    # ------------------------------------------------------------------

    def _lex_tag(self) -> Token:
        ch = self._peek()
        start = self._current_pos()
        value_expected = self._after_equals
        self._after_equals = False

        if is_ident_char(ch):
            while not self._at_end() and is_ident_char(self._peek()):
                self._advance()
            return self._emit(TokenType.IDENTIFIER, self._source[start.offset : self._pos], start)

        if ch == "=":
            self._advance()
            self._after_equals = True
            return self._emit(TokenType.EQUALS, "=", start)

        if ch == '"' and value_expected:
            return self._lex_string()

        if ch == "{" and value_expected:
            return self._lex_embedded()

        if ch == ">":
            self._advance()
            # The opening tag is complete; its children follow
            self._state = _State.CONTENT
            return self._emit(TokenType.GT, ">", start)

        if ch == "/" and self._peek(1) == ">":
            self._advance()
            self._advance()
            self._pop_state()
            return self._emit(TokenType.SLASH_GT, "/>", start)

        # Anything else is a single stray character, including a quote or
        # brace that does not follow '='
        self._advance()
        return self._emit(TokenType.TEXT, ch, start)

    def _lex_string(self) -> Token:
        start = self._current_pos()
        self._advance()  # consume opening quote
        content_start = self._pos

        while not self._at_end():
            if self._peek() == '"':
                value = self._source[content_start : self._pos]
                self._advance()
                return self._emit(TokenType.STRING, value, start)
            self._advance()

        raise self._error(UnterminatedString, "unterminated string literal", start, "closing '\"'")

    # ------------------------------------------------------------------
    # Content mode
    # ------------------------------------------------------------------

    def _lex_content(self) -> Token:
        ch = self._peek()

        if ch == "<":
            if self._peek(1) == "/":
                return self._lex_close_tag()
            return self._lex_open_angle()

        if ch == "{":
            return self._lex_embedded()

        return self._lex_text()

    def _lex_text(self) -> Token:
        start = self._current_pos()
        while not self._at_end() and self._peek() not in "<{":
            self._advance()
        return self._emit(TokenType.TEXT, self._source[start.offset : self._pos], start)

    def _lex_close_tag(self) -> Token:
        """Scan '</' up to the next '>'; the text in between is not checked."""
        start = self._current_pos()
        self._advance()
        self._advance()
        name_start = self._pos

        while not self._at_end():
            if self._peek() == ">":
                value = self._source[name_start : self._pos]
                self._advance()
                self._pop_state()
                return self._emit(TokenType.CLOSE_TAG, value, start)
            self._advance()

        raise self._error(
            UnterminatedTag, "unterminated closing tag", start, "'>' ending the closing tag"
        )


def tokenize(source: str, filename: str = "input.jsx") -> list[Token]:
    """Convenience function: tokenize source text and return the token list."""
    return list(Lexer(source, filename))
