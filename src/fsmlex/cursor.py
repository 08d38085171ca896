"""Peekable character cursor with line/column tracking."""

from __future__ import annotations

from fsmlex.tokens import Position


class CharCursor:
    """One-character lookahead over source text.

    The cursor belongs to whoever drives the scan; the lexer only borrows it
    for the duration of a single ``scan_one`` call.
    """

    def __init__(self, source: str) -> None:
        self.source = source
        self._pos = 0
        self._line = 1
        self._col = 1

    @property
    def position(self) -> Position:
        """Position of the next pending character."""
        return Position(self._line, self._col, self._pos)

    @property
    def at_end(self) -> bool:
        return self._pos >= len(self.source)

    def peek(self) -> str | None:
        if self._pos < len(self.source):
            return self.source[self._pos]
        return None

    def advance(self) -> str:
        ch = self.source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        return ch

    def __repr__(self) -> str:
        return f"CharCursor(line={self._line}, column={self._col}, offset={self._pos})"
