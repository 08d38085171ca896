"""Test integer and real literals."""

import pytest

from fsmlex.errors import IllegalDotError, InvalidIdentifierError
from fsmlex.lexer import scan_one
from fsmlex.tokens import TokenType

from .conftest import assert_lexemes, assert_types


class TestIntegers:
    def test_number(self, cursor):
        tok = scan_one(cursor("123"))
        assert tok.type == TokenType.NUMBER
        assert tok.lexeme == "123"

    def test_leading_zeros_kept(self, lex):
        assert lex("007")[0].lexeme == "007"

    def test_several(self, lex):
        tokens = lex("1 22 333")
        assert_types(tokens, [TokenType.NUMBER] * 3)
        assert_lexemes(tokens, ["1", "22", "333"])


class TestReals:
    def test_real(self, cursor):
        tok = scan_one(cursor("123.45"))
        assert tok.type == TokenType.REAL
        assert tok.lexeme == "123.45"

    def test_trailing_dot(self, lex):
        tokens = lex("12.")
        assert_types(tokens, [TokenType.REAL])
        assert tokens[0].lexeme == "12."

    def test_real_then_separator(self, lex):
        tokens = lex("0.5;")
        assert_types(tokens, [TokenType.REAL, TokenType.SEPARATOR])


class TestMalformed:
    def test_second_dot(self, cursor):
        cur = cursor("123.45.6")
        with pytest.raises(IllegalDotError):
            scan_one(cur)
        assert cur.peek() == "."
        assert cur.position.offset == 6

    def test_leading_dot(self, cursor):
        with pytest.raises(IllegalDotError):
            scan_one(cursor(".5"))

    def test_dot_in_identifier(self, cursor):
        with pytest.raises(IllegalDotError):
            scan_one(cursor("a.b"))

    def test_letter_after_digits(self, cursor):
        with pytest.raises(InvalidIdentifierError):
            scan_one(cursor("1a"))

    def test_letter_after_real(self, cursor):
        with pytest.raises(InvalidIdentifierError):
            scan_one(cursor("1.5e"))

    def test_offending_char_consumed(self, cursor):
        cur = cursor("1ab")
        with pytest.raises(InvalidIdentifierError):
            scan_one(cur)
        assert cur.peek() == "b"
