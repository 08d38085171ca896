"""Render tokens as ``KIND = lexeme`` output lines."""

from __future__ import annotations

from collections.abc import Iterable

from fsmlex.tokens import Token

LABEL_WIDTH = 10


def render_token(token: Token) -> str:
    """Right-align the upper-case kind label, then ``" = "`` and the lexeme."""
    return f"{token.type.name:>{LABEL_WIDTH}} = {token.lexeme}"


def render_tokens(tokens: Iterable[Token]) -> str:
    return "".join(f"{render_token(tok)}\n" for tok in tokens)
