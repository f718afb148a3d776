"""Parse error types with formatted source context."""

from __future__ import annotations

from jsxlite.tokens import Position, Span


class ParseError(Exception):
    """Raised on the first syntax error, with span and source context.

    ``expected`` names the construct the parser was looking for when it
    failed, e.g. ``"tag name"`` or ``"'>' or '/>'"``.
    """

    def __init__(
        self,
        message: str,
        span: Span,
        source: str,
        expected: str | None = None,
        filename: str = "input.jsx",
    ) -> None:
        self.message = message
        self.span = span
        self.source = source
        self.expected = expected
        self.filename = filename
        super().__init__(self.format())

    @property
    def position(self) -> Position:
        return self.span.start

    def format(self, filename: str | None = None) -> str:
        """Render the error rustc-style; *filename* overrides the one parsed from."""
        filename = filename or self.filename
        lines = self.source.splitlines(keepends=True)
        line_idx = self.span.start.line - 1
        col = self.span.start.column

        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].rstrip("\n").rstrip("\r")
        else:
            source_line = ""

        # Underline the full span when on one line, otherwise to end of line
        if self.span.end.line == self.span.start.line:
            underline_len = max(1, self.span.end.column - col)
        else:
            underline_len = max(1, len(source_line) - col + 1)

        pad = " " * (col - 1)
        carets = "^" * underline_len

        line_num = str(self.span.start.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        result = (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.span.start.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}{carets}"
        )
        if self.expected:
            result += f"\n  expected: {self.expected}"
        return result


class UnexpectedToken(ParseError):
    """Input at a position matches none of the expected alternatives."""


class UnterminatedEmbedded(ParseError):
    """A '{' never reaches its matching '}' before input ends."""


class UnterminatedString(ParseError):
    """A string literal is missing its closing quote."""


class UnterminatedTag(ParseError):
    """An open tag, or a paired tag's closing marker, is never finished."""


class TrailingInput(ParseError):
    """Content follows the single top-level tag."""
