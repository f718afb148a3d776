"""Minimal LSP server for jsxlite templates — diagnostics only."""

from __future__ import annotations

import logging

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from jsxlite import __version__
from jsxlite.errors import ParseError
from jsxlite.parser import parse

logger = logging.getLogger(__name__)

server = LanguageServer(
    "jsxlite-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full
)


def _diagnostic(exc: ParseError) -> Diagnostic:
    """Convert a parse error (1-based span) to an LSP diagnostic (0-based range)."""
    message = exc.message
    if exc.expected:
        message += f" (expected {exc.expected})"
    return Diagnostic(
        range=Range(
            start=Position(line=exc.span.start.line - 1, character=exc.span.start.column - 1),
            end=Position(line=exc.span.end.line - 1, character=exc.span.end.column - 1),
        ),
        message=message,
        severity=DiagnosticSeverity.Error,
        code=type(exc).__name__,
        source="jsxlite",
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Parse the document and publish its diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    filename = uri.rsplit("/", 1)[-1] if "/" in uri else uri
    diagnostics: list[Diagnostic] = []

    try:
        parse(doc.source, filename)
    except ParseError as exc:
        logger.debug("%s: %s", filename, exc.message)
        diagnostics.append(_diagnostic(exc))

    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    server.start_io()
