"""Turns source text into a stream of tokens."""

from __future__ import annotations

from collections.abc import Iterator

from monke.tokens import Token, TokenType, lookup_ident

_END = "\0"
_WHITESPACE = frozenset(" \t\n\r")

_SINGLE_CHAR: dict[str, TokenType] = {
    "=": TokenType.ASSIGN,
    ";": TokenType.SEMICOLON,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    ",": TokenType.COMMA,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "!": TokenType.BANG,
    "*": TokenType.ASTERISK,
    "/": TokenType.SLASH,
    "<": TokenType.LT,
    ">": TokenType.GT,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
}

_DOUBLE_CHAR: dict[str, TokenType] = {
    "==": TokenType.EQ,
    "!=": TokenType.NOT_EQ,
}


def _is_letter(ch: str) -> bool:
    return ch.isalpha() or ch == "_"


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


class Lexer:
    """Reads tokens one at a time from a source string."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0
        self._read_position = 0
        self._ch = _END
        self._read_char()

    def _read_char(self) -> None:
        self._ch = self._peek_char()
        self._position = self._read_position
        self._read_position += 1

    def _peek_char(self) -> str:
        if self._read_position >= len(self._source):
            return _END
        return self._source[self._read_position]

    def _skip_whitespace(self) -> None:
        while self._ch in _WHITESPACE:
            self._read_char()

    def _read_while(self, predicate) -> str:
        start = self._position
        while predicate(self._ch):
            self._read_char()
        return self._source[start:self._position]

    def _read_string(self) -> str:
        start = self._position + 1
        while True:
            self._read_char()
            if self._ch in ('"', _END):
                break
        return self._source[start:self._position]

    def next_token(self) -> Token:
        """Return the next token; at the end of input this is always EOF."""
        self._skip_whitespace()
        ch = self._ch

        pair = ch + self._peek_char()
        if pair in _DOUBLE_CHAR:
            self._read_char()
            tok = Token(_DOUBLE_CHAR[pair], pair)
        elif ch in _SINGLE_CHAR:
            tok = Token(_SINGLE_CHAR[ch], ch)
        elif ch == '"':
            tok = Token(TokenType.STRING, self._read_string())
        elif ch == _END:
            tok = Token(TokenType.EOF, "")
        elif _is_letter(ch):
            literal = self._read_while(_is_letter)
            return Token(lookup_ident(literal), literal)
        elif _is_digit(ch):
            return Token(TokenType.INT, self._read_while(_is_digit))
        else:
            tok = Token(TokenType.ILLEGAL, ch)

        self._read_char()
        return tok

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the EOF token."""
        while True:
            tok = self.next_token()
            yield tok
            if tok.type is TokenType.EOF:
                return