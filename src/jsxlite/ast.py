"""Parse tree node types for jsxlite templates.

Every node records its source span, but spans do not take part in
equality: two trees compare equal when their structure and values match,
wherever in the source they came from.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from jsxlite.tokens import Span


@dataclass(frozen=True, slots=True)
class Text:
    """A run of child text, kept verbatim."""

    value: str
    span: Span = field(compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class Embedded:
    """Host-language expression text from between balanced braces."""

    code: str
    span: Span = field(compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class StringLiteral:
    """Quoted attribute value (no escape processing)."""

    value: str
    span: Span = field(compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class Bool:
    """Attribute value written as true or false."""

    value: bool
    span: Span = field(compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class Attribute:
    """Attribute: key=value."""

    key: str
    value: StringLiteral | Bool | Embedded
    key_span: Span = field(compare=False, repr=False)
    span: Span = field(compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class Tag:
    """An element: <name attrs/> or <name attrs>children</...>."""

    name: str
    attributes: tuple[Attribute, ...]
    children: tuple[Tag | Embedded | Text, ...]
    span: Span = field(compare=False, repr=False)

    def attribute(self, key: str) -> Attribute | None:
        """Return the first attribute named *key*, or None."""
        for attr in self.attributes:
            if attr.key == key:
                return attr
        return None

    @property
    def key(self) -> str | None:
        """String value of the ``key`` attribute, used to match sibling elements."""
        attr = self.attribute("key")
        if attr is not None and isinstance(attr.value, StringLiteral):
            return attr.value.value
        return None

    @property
    def handlers(self) -> tuple[tuple[str, str], ...]:
        """(event, code) pairs for ``on<event>={...}`` attributes, in source order."""
        return tuple(
            (attr.key[2:], attr.value.code)
            for attr in self.attributes
            if attr.key.startswith("on")
            and len(attr.key) > 2
            and isinstance(attr.value, Embedded)
        )


@dataclass(frozen=True, slots=True)
class Document:
    """Root document node holding the single top-level tag."""

    root: Tag
    span: Span = field(compare=False, repr=False)


AttributeValue = StringLiteral | Bool | Embedded
Node = Tag | Embedded | Text
