"""Serializers — convert a parse tree back to template source or plain data."""

from __future__ import annotations

from typing import Any

from jsxlite.ast import Attribute, Bool, Document, Embedded, StringLiteral, Tag, Text


def to_source(doc: Document | Tag) -> str:
    """Render a tree as template source that parses back to an equal tree.

    Tags without children are written self-closing; paired tags get a
    closer repeating the opening name.
    """
    root = doc.root if isinstance(doc, Document) else doc
    parts: list[str] = []
    # Pending work: nodes still to write, or closers already rendered
    stack: list[Tag | Embedded | Text | str] = [root]

    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, Tag):
            parts.append(f"<{item.name}")
            for attr in item.attributes:
                parts.append(" ")
                parts.append(_source_attribute(attr))
            if not item.children:
                parts.append("/>")
                continue
            parts.append(">")
            stack.append(f"</{item.name}>")
            stack.extend(reversed(item.children))
        elif isinstance(item, Embedded):
            parts.append(f"{{{item.code}}}")
        else:
            parts.append(item.value)

    return "".join(parts)


def _source_attribute(attr: Attribute) -> str:
    value = attr.value
    if isinstance(value, StringLiteral):
        return f'{attr.key}="{value.value}"'
    if isinstance(value, Bool):
        return f"{attr.key}={'true' if value.value else 'false'}"
    return f"{attr.key}={{{value.code}}}"


# ----------------------------------------------------------------------
# Plain data (JSON-compatible) form for code generators
# ----------------------------------------------------------------------


def to_data(doc: Document | Tag) -> dict[str, Any]:
    """Convert a tree to nested dicts and lists of JSON-compatible values."""
    root = doc.root if isinstance(doc, Document) else doc
    result = _data_tag(root)
    stack = [(root, result)]

    while stack:
        tag, data = stack.pop()
        for child in tag.children:
            if isinstance(child, Tag):
                child_data = _data_tag(child)
                stack.append((child, child_data))
                data["children"].append(child_data)
            elif isinstance(child, Embedded):
                data["children"].append({"type": "embedded", "code": child.code})
            else:
                data["children"].append({"type": "text", "value": child.value})

    return result


def _data_tag(tag: Tag) -> dict[str, Any]:
    """Shallow dict for *tag*; ``children`` is filled in by to_data."""
    return {
        "type": "tag",
        "name": tag.name,
        "attributes": [
            {"key": attr.key, "value": _data_value(attr.value)} for attr in tag.attributes
        ],
        "children": [],
    }


def _data_value(value: StringLiteral | Bool | Embedded) -> dict[str, Any]:
    if isinstance(value, StringLiteral):
        return {"type": "string", "value": value.value}
    if isinstance(value, Bool):
        return {"type": "bool", "value": value.value}
    return {"type": "embedded", "code": value.code}
