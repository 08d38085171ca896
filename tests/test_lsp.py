"""Tests for the LSP server — diagnostic generation."""

from __future__ import annotations

import pytest
from lsprotocol.types import (
    DiagnosticSeverity,
    PublishDiagnosticsParams,
    TextDocumentItem,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer
from pygls.workspace import Workspace

from fsmlex.errors import InternalStateError
from fsmlex.lsp import _validate
from fsmlex.tokens import Position


@pytest.fixture
def lsp_env():
    """Create a LanguageServer with an initialized workspace and captured diagnostics."""
    ls = LanguageServer("test", "v0", text_document_sync_kind=TextDocumentSyncKind.Full)
    ws = Workspace(None)
    ls.protocol._workspace = ws

    published: list[PublishDiagnosticsParams] = []
    ls.text_document_publish_diagnostics = lambda params: published.append(params)

    def put(source: str, uri: str = "file:///test.txt") -> None:
        ws.put_text_document(
            TextDocumentItem(uri=uri, language_id="fsmlex", version=0, text=source)
        )

    return ls, published, put


# ---------------------------------------------------------------------------
# Malformed input → Error severity
# ---------------------------------------------------------------------------


class TestLexErrors:
    def test_illegal_dot(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("x = 1.2.3")
        _validate(ls, "file:///test.txt")

        assert len(published) == 1
        diags = published[0].diagnostics
        assert len(diags) == 1
        d = diags[0]
        assert d.severity == DiagnosticSeverity.Error
        assert d.code == "IllegalDot"
        assert d.source == "fsmlex"
        # second dot is at column 8 (1-based) → character 7 (0-based)
        assert d.range.start.line == 0
        assert d.range.start.character == 7

    def test_invalid_identifier_second_line(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("while (x)\n  2b ;")
        _validate(ls, "file:///test.txt")

        d = published[0].diagnostics[0]
        assert d.code == "InvalidIdentifier"
        assert d.range.start.line == 1
        assert d.range.start.character == 3


class TestInternalErrors:
    def test_internal_error_is_warning(self, lsp_env, monkeypatch) -> None:
        ls, published, put = lsp_env
        put("x")

        def broken(self):
            raise InternalStateError("internal error", Position(1, 1, 0), "x")

        monkeypatch.setattr("fsmlex.lsp.Lexer.tokenize", broken)
        _validate(ls, "file:///test.txt")

        d = published[0].diagnostics[0]
        assert d.severity == DiagnosticSeverity.Warning
        assert d.code == "InternalStateError"


# ---------------------------------------------------------------------------
# Clean document → empty diagnostics
# ---------------------------------------------------------------------------


class TestCleanDocument:
    def test_valid_document(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("while (x < 10) ;\n")
        _validate(ls, "file:///test.txt")

        assert len(published) == 1
        assert published[0].diagnostics == []
