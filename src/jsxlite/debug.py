"""--debug tree dump to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from jsxlite.ast import Bool, Document, Embedded, StringLiteral, Tag, Text


def dump_tree(doc: Document, *, file: TextIO = sys.stderr) -> None:
    """Print a human-readable parse tree to *file*."""
    file.write("Document\n")
    stack: list[tuple[Tag | Embedded | Text, int]] = [(doc.root, 1)]

    while stack:
        node, depth = stack.pop()
        if isinstance(node, Tag):
            _dump_tag_header(node, depth, file)
            stack.extend((child, depth + 1) for child in reversed(node.children))
        elif isinstance(node, Embedded):
            file.write(f"{_indent(depth)}Embedded({node.code!r})\n")
        elif isinstance(node, Text):
            file.write(f"{_indent(depth)}Text({node.value!r})\n")


def _indent(depth: int) -> str:
    return "  " * depth


def _dump_tag_header(tag: Tag, depth: int, f: TextIO) -> None:
    f.write(f"{_indent(depth)}Tag {tag.name}\n")
    for attr in tag.attributes:
        f.write(f"{_indent(depth + 1)}Attr {attr.key}=")
        _dump_value_inline(attr.value, f)
        f.write("\n")


def _dump_value_inline(value: StringLiteral | Bool | Embedded, f: TextIO) -> None:
    if isinstance(value, StringLiteral):
        f.write(f"String({value.value!r})")
    elif isinstance(value, Bool):
        f.write(f"Bool({value.value})")
    elif isinstance(value, Embedded):
        f.write(f"Embedded({value.code!r})")
