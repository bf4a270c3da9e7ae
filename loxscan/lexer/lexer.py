"""Lexer."""

from dataclasses import dataclass
import logging
from typing import Final

from loxscan.diagnostics import ErrorSink, ScanError, UnexpectedCharacter, has_errors
from loxscan.lexer.tokens import Token, TokenKind, eof_token
from loxscan.text import NEWLINE_GRAPHEMES, graphemes

logger = logging.getLogger(__name__)

SINGLE_CHAR_TOKENS: Final[dict[str, TokenKind]] = {
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    ",": TokenKind.COMMA,
    ".": TokenKind.DOT,
    "-": TokenKind.MINUS,
    "+": TokenKind.PLUS,
    ";": TokenKind.SEMICOLON,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
}

# Operator -> (kind alone, kind when followed by "=")
EQUAL_SUFFIXED_TOKENS: Final[dict[str, tuple[TokenKind, TokenKind]]] = {
    "!": (TokenKind.BANG, TokenKind.BANG_EQUAL),
    "=": (TokenKind.EQUAL, TokenKind.EQUAL_EQUAL),
    "<": (TokenKind.LESS, TokenKind.LESS_EQUAL),
    ">": (TokenKind.GREATER, TokenKind.GREATER_EQUAL),
}

WHITESPACE: Final[frozenset[str]] = frozenset((" ", "\r", "\t"))


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Tokens of one scan (always EOF-terminated) plus the errors met on the way."""

    tokens: tuple[Token, ...]
    errors: tuple[ScanError, ...] = ()

    @property
    def had_error(self) -> bool:
        return has_errors(self.errors)


class Lexer:
    """Error-tolerant scanner over the grapheme clusters of `source`.

    Whitespace and newlines produce no tokens. An unknown grapheme is recorded
    as an error, handed to `on_error` right away, and skipped.
    """

    def __init__(self, source: str, *, on_error: ErrorSink | None = None) -> None:
        self._source = source
        self._chars = graphemes(source)
        self._position = 0
        self._line = 1
        self._on_error = on_error
        self._errors: list[ScanError] = []

    @property
    def source(self) -> str:
        """Original source text."""
        return self._source

    @property
    def errors(self) -> list[ScanError]:
        """Errors recorded so far, in source order."""
        return self._errors

    @property
    def line(self) -> int:
        return self._line

    @property
    def position(self) -> int:
        """Index of the next grapheme to scan."""
        return self._position

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._chars)

    def next_token(self) -> Token:
        """Scan up to and including the next token. Returns EOF once input is exhausted."""
        while not self.is_eof:
            start = self._position
            line = self._line
            kind = self._lex_token()
            if kind is None:
                continue
            lexeme = "".join(self._chars[start : self._position])
            return Token(kind, lexeme, None, line)
        return eof_token(self._line)

    def lex(self) -> list[Token]:
        tokens: list[Token] = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.kind == TokenKind.EOF:
                break
        return tokens

    def _lex_token(self) -> TokenKind | None:
        ch = self._current_char()

        if ch in WHITESPACE:
            self._advance(1)
            return None

        if ch in NEWLINE_GRAPHEMES:
            self._advance(1)
            self._line += 1
            return None

        kind = SINGLE_CHAR_TOKENS.get(ch)
        if kind is not None:
            self._advance(1)
            return kind

        pair = EQUAL_SUFFIXED_TOKENS.get(ch)
        if pair is not None:
            single, double = pair
            if self._peek_char() == "=":
                self._advance(2)
                return double
            self._advance(1)
            return single

        self._unexpected_character(ch)
        self._advance(1)
        return None

    def _unexpected_character(self, ch: str) -> None:
        error = UnexpectedCharacter(character=ch, line=self._line)
        self._errors.append(error)
        if self._on_error is not None:
            self._on_error(error)

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._chars[self._position]

    def _peek_char(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= len(self._chars):
            return "\0"
        return self._chars[index]

    def _advance(self, steps: int) -> None:
        self._position += steps


def scan(source: str, *, on_error: ErrorSink | None = None) -> ScanResult:
    """Scan `source` into tokens. Never raises on bad input; see `ScanResult.had_error`."""
    lexer = Lexer(source, on_error=on_error)
    tokens = lexer.lex()
    logger.debug("scanned %d tokens over %d lines (%d errors)", len(tokens), lexer.line, len(lexer.errors))
    return ScanResult(tokens=tuple(tokens), errors=tuple(lexer.errors))
