"""Minimal LSP server for fsmlex — diagnostics only."""

from __future__ import annotations

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

from fsmlex import __version__
from fsmlex.errors import InternalStateError, LexError
from fsmlex.lexer import Lexer

server = LanguageServer(
    "fsmlex-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full
)


def _validate(ls: LanguageServer, uri: str) -> None:
    """Lex the document and publish diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    diagnostics: list[Diagnostic] = []

    try:
        Lexer(doc.source).tokenize()
    except InternalStateError as exc:
        diagnostics.append(_diagnostic(exc, DiagnosticSeverity.Warning))
    except LexError as exc:
        diagnostics.append(_diagnostic(exc, DiagnosticSeverity.Error))

    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


def _diagnostic(exc: LexError, severity: DiagnosticSeverity) -> Diagnostic:
    line = exc.position.line - 1
    col = exc.position.column - 1
    return Diagnostic(
        range=Range(
            start=Position(line=line, character=col),
            end=Position(line=line, character=col + 1),
        ),
        message=exc.message,
        severity=severity,
        code=exc.kind,
        source="fsmlex",
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
