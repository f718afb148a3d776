"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from jsxlite.ast import Attribute, Bool, Document, Embedded, StringLiteral, Tag, Text
from jsxlite.lexer import tokenize
from jsxlite.parser import parse
from jsxlite.tokens import Token, TokenType


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns tokens (excluding EOF)."""

    def _lex(source: str) -> list[Token]:
        tokens = tokenize(source)
        # Strip trailing EOF for convenience
        return [t for t in tokens if t.type != TokenType.EOF]

    return _lex


@pytest.fixture
def parse_source():
    """Return a helper that parses source and returns a Document."""

    def _parse(source: str, filename: str = "test.jsx") -> Document:
        return parse(source, filename)

    return _parse


@pytest.fixture
def parse_root(parse_source):
    """Return a helper that parses source and returns the root Tag."""

    def _parse(source: str) -> Tag:
        return parse_source(source).root

    return _parse


def assert_types(tokens: list[Token], expected: list[TokenType]) -> None:
    """Assert that the token types match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_values(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token values match the expected list."""
    actual = [t.value for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_tag(
    node: object,
    name: str,
    num_attrs: int = 0,
    num_children: int = 0,
) -> None:
    """Assert basic properties of a Tag node."""
    assert isinstance(node, Tag), f"Expected Tag, got {type(node).__name__}"
    assert node.name == name, f"Expected name '{name}', got '{node.name}'"
    assert len(node.attributes) == num_attrs, (
        f"Expected {num_attrs} attributes, got {len(node.attributes)}"
    )
    assert len(node.children) == num_children, (
        f"Expected {num_children} children, got {len(node.children)}"
    )


def attr_pairs(tag: Tag) -> list[tuple[str, object]]:
    """Return (key, python value) pairs for a tag's attributes."""
    pairs: list[tuple[str, object]] = []
    for attr in tag.attributes:
        assert isinstance(attr, Attribute)
        value = attr.value
        if isinstance(value, (StringLiteral, Bool)):
            pairs.append((attr.key, value.value))
        elif isinstance(value, Embedded):
            pairs.append((attr.key, ("embedded", value.code)))
    return pairs


def child_summary(tag: Tag) -> list[tuple[str, str]]:
    """Return (kind, name-or-text) pairs describing a tag's children."""
    summary: list[tuple[str, str]] = []
    for child in tag.children:
        if isinstance(child, Tag):
            summary.append(("tag", child.name))
        elif isinstance(child, Embedded):
            summary.append(("embedded", child.code))
        elif isinstance(child, Text):
            summary.append(("text", child.value))
    return summary
