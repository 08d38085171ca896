"""fsmlex finite-state lexical analyzer."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fsmlex.tokens import Token

__version__ = "0.1.0"


def tokenize(source: str, keywords: list[str] | None = None) -> list[Token]:
    """Tokenize source text, optionally adding extra keywords."""
    from fsmlex.lexer import tokenize as _tokenize
    from fsmlex.tokens import build_keywords

    return _tokenize(source, keywords=build_keywords(keywords or []))
