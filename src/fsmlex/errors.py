"""Error types with formatted source context."""

from __future__ import annotations

from fsmlex.tokens import Position


class LexError(Exception):
    """Raised by the lexer instead of returning a token."""

    kind = "LexError"

    def __init__(self, message: str, position: Position, source: str) -> None:
        self.message = message
        self.position = position
        self.source = source
        super().__init__(self.format())

    def format(self, filename: str = "input_scode.txt") -> str:
        lines = self.source.splitlines(keepends=True)
        line_idx = self.position.line - 1
        col = self.position.column

        # Build the source line (strip trailing newline for display)
        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].rstrip("\n").rstrip("\r")
        else:
            source_line = ""

        pad = " " * (col - 1)

        line_num = str(self.position.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.position.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}^"
        )


class EndOfInput(LexError):
    """All input consumed; the normal way a scan loop ends."""

    kind = "EndOfInput"


class IllegalDotError(LexError):
    """A '.' at the start of a token, inside an identifier, or a second one in a real."""

    kind = "IllegalDot"


class InvalidIdentifierError(LexError):
    """An identifier-class character continuing a number."""

    kind = "InvalidIdentifier"


class InternalStateError(LexError):
    """The state machine tried to finalize an empty lexeme. Indicates a lexer bug."""

    kind = "InternalStateError"


# Errors caused by the source text; the rest of the input is void after one
MALFORMED_INPUT_ERRORS = (IllegalDotError, InvalidIdentifierError)
