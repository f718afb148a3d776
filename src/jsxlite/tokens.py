"""Token types, data structures, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    # Tag structure
    LT = auto()  # < opening a tag
    GT = auto()  # > ending an opening tag
    SLASH_GT = auto()  # />
    CLOSE_TAG = auto()  # </...> — value is the (ignored) closer text
    EQUALS = auto()  # =

    # Content
    IDENTIFIER = auto()  # [A-Za-z0-9_-]+
    STRING = auto()  # "..." — value is the text between the quotes
    EMBEDDED = auto()  # {...} — value is the text between the outer braces
    TEXT = auto()  # child text run, or stray characters outside content

    # Whitespace
    WS = auto()  # run of spaces, \n and \r\n

    EOF = auto()


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based character offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Span:
    """Source range from start to end position."""

    start: Position
    end: Position


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexer token with its value and original source text."""

    type: TokenType
    value: str
    raw: str
    span: Span


_IDENT_SPECIAL = frozenset("_-")


def is_ident_char(ch: str) -> bool:
    """Return True if ch is a valid identifier character."""
    return ch.isascii() and (ch.isalnum() or ch in _IDENT_SPECIAL)


def is_ws_start(source: str, pos: int) -> bool:
    """Return True if a whitespace unit (space, \\n or \\r\\n) starts at pos."""
    ch = source[pos : pos + 1]
    if ch in (" ", "\n"):
        return True
    return ch == "\r" and source[pos + 1 : pos + 2] == "\n"
