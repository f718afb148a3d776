"""jsxlite — parser for a small JSX-like template language."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jsxlite.ast import Document

__version__ = "0.1.0"


def parse(source: str, filename: str = "input.jsx") -> Document:
    """Parse template source into a Document tree.

    Raises a ``jsxlite.errors.ParseError`` subclass on the first syntax error.
    """
    from jsxlite.parser import parse as _parse

    return _parse(source, filename)
