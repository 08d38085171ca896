"""fsmlex lexer — a finite-state scanner producing one token per call."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from enum import Enum, auto

from fsmlex.cursor import CharCursor
from fsmlex.errors import (
    EndOfInput,
    IllegalDotError,
    InternalStateError,
    InvalidIdentifierError,
)
from fsmlex.tokens import (
    DOT,
    KEYWORDS,
    Position,
    Span,
    Token,
    TokenType,
    is_digit,
    is_operator,
    is_separator,
    is_whitespace,
)


class _Phase(Enum):
    START = auto()
    IN_IDENTIFIER = auto()
    IN_INTEGER = auto()
    IN_REAL = auto()


def scan_one(cursor: CharCursor, keywords: Mapping[str, TokenType] = KEYWORDS) -> Token:
    """Scan the next token from *cursor*.

    Leaves the cursor just past the token's last character. A separator or
    operator that ends a pending lexeme is left unconsumed for the next call.

    Raises EndOfInput when only whitespace remains, IllegalDotError or
    InvalidIdentifierError on malformed input, and InternalStateError if the
    state machine finalizes an empty lexeme.
    """
    phase = _Phase.START
    lexeme: list[str] = []
    start = cursor.position
    end = start

    while True:
        ch = cursor.peek()

        if ch is None:
            if phase is _Phase.START:
                raise EndOfInput("end of input", cursor.position, cursor.source)
            return _finalize(phase, lexeme, start, end, cursor, keywords)

        if is_whitespace(ch):
            cursor.advance()
            if phase is _Phase.START:
                start = end = cursor.position
                continue
            return _finalize(phase, lexeme, start, end, cursor, keywords)

        if ch == DOT:
            if phase is not _Phase.IN_INTEGER:
                raise IllegalDotError(_dot_message(phase), cursor.position, cursor.source)
            cursor.advance()
            lexeme.append(ch)
            end = cursor.position
            phase = _Phase.IN_REAL
            continue

        if is_separator(ch) or is_operator(ch):
            if phase is not _Phase.START:
                return _finalize(phase, lexeme, start, end, cursor, keywords)
            cursor.advance()
            tt = TokenType.SEPARATOR if is_separator(ch) else TokenType.OPERATOR
            return Token(tt, ch, Span(start, cursor.position))

        if is_digit(ch):
            cursor.advance()
            lexeme.append(ch)
            end = cursor.position
            if phase is _Phase.START:
                phase = _Phase.IN_INTEGER
            continue

        # Identifier class: everything not matched above
        pos = cursor.position
        cursor.advance()
        lexeme.append(ch)
        end = cursor.position
        if phase is _Phase.START:
            phase = _Phase.IN_IDENTIFIER
        elif phase is not _Phase.IN_IDENTIFIER:
            kind = "real" if phase is _Phase.IN_REAL else "number"
            raise InvalidIdentifierError(
                f"invalid character {ch!r} in {kind} {''.join(lexeme[:-1])!r}",
                pos,
                cursor.source,
            )


def _dot_message(phase: _Phase) -> str:
    if phase is _Phase.IN_REAL:
        return "second '.' in real number"
    if phase is _Phase.IN_IDENTIFIER:
        return "'.' inside identifier"
    return "'.' at start of token"


def _finalize(
    phase: _Phase,
    lexeme: list[str],
    start: Position,
    end: Position,
    cursor: CharCursor,
    keywords: Mapping[str, TokenType],
) -> Token:
    """Classify the accumulated lexeme into a token."""
    text = "".join(lexeme)
    span = Span(start, end)
    if phase is _Phase.IN_IDENTIFIER:
        return Token(keywords.get(text, TokenType.IDENTIFIER), text, span)
    if phase is _Phase.IN_INTEGER:
        return Token(TokenType.NUMBER, text, span)
    if phase is _Phase.IN_REAL:
        return Token(TokenType.REAL, text, span)
    raise InternalStateError(
        "finalize reached with no lexeme", start, cursor.source
    )


class Lexer:
    """Tokenize source text by calling scan_one until the input is exhausted."""

    def __init__(
        self,
        source: str,
        keywords: Mapping[str, TokenType] | None = None,
    ) -> None:
        self._cursor = CharCursor(source)
        self._keywords = KEYWORDS if keywords is None else keywords

    def scan_one(self) -> Token:
        return scan_one(self._cursor, self._keywords)

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens until EndOfInput; malformed-input errors propagate."""
        while True:
            try:
                tok = self.scan_one()
            except EndOfInput:
                return
            yield tok

    def tokenize(self) -> list[Token]:
        """Tokenize the full source and return the token list."""
        return list(self)


def tokenize(
    source: str,
    keywords: Mapping[str, TokenType] | None = None,
) -> list[Token]:
    """Convenience function: tokenize source text and return token list."""
    return Lexer(source, keywords).tokenize()
