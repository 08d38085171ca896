"""--debug token trace to stderr."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from fsmlex.tokens import Span, Token


def dump_tokens(tokens: Iterable[Token], *, file: TextIO | None = None) -> None:
    """Print one line per token with its source span to *file*."""
    f = sys.stderr if file is None else file
    for tok in tokens:
        f.write(f"{_span(tok.span)} {tok.type.name} {tok.lexeme!r}\n")


def _span(span: Span) -> str:
    return f"{span.start.line}:{span.start.column}-{span.end.line}:{span.end.column}"
