"""Token types, data structures, and character classification helpers."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType


class TokenType(Enum):
    IDENTIFIER = auto()  # identifier-class char, then identifier or digit chars
    NUMBER = auto()  # digit+
    REAL = auto()  # digit+ . digit*
    SEPARATOR = auto()  # ( ) ;
    OPERATOR = auto()  # < > =
    KEYWORD = auto()  # identifier found in the keyword table


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based character offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Span:
    """Source range from start to end position (end exclusive)."""

    start: Position
    end: Position


@dataclass(frozen=True, slots=True)
class Token:
    """A classified lexeme and the source range it came from."""

    type: TokenType
    lexeme: str
    span: Span


WHITESPACE = frozenset(" \t\r\n")
DOT = "."
SEPARATORS = frozenset("();")
OPERATORS = frozenset("<>=")
DIGITS = frozenset("0123456789")

# Exact lexeme -> token type, consulted only when an identifier is finalized
KEYWORDS: Mapping[str, TokenType] = MappingProxyType({"while": TokenType.KEYWORD})


def is_whitespace(ch: str) -> bool:
    return ch in WHITESPACE


def is_separator(ch: str) -> bool:
    return ch in SEPARATORS


def is_operator(ch: str) -> bool:
    return ch in OPERATORS


def is_digit(ch: str) -> bool:
    """Return True for ASCII digits only (not other Unicode numerals)."""
    return ch in DIGITS


def is_ident_char(ch: str) -> bool:
    """Return True if ch falls through to the identifier class."""
    return not (
        is_whitespace(ch) or ch == DOT or is_separator(ch) or is_operator(ch) or is_digit(ch)
    )


def build_keywords(extra: list[str] | tuple[str, ...] = ()) -> Mapping[str, TokenType]:
    """Return the default keyword table extended with *extra* lexemes."""
    table = dict(KEYWORDS)
    for word in extra:
        table[word] = TokenType.KEYWORD
    return MappingProxyType(table)
