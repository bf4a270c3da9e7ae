"""Lexer tokens."""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum


class TokenKind(IntEnum):
    # -------------------------
    # Single-character tokens
    # -------------------------
    LEFT_PAREN = 1  # (
    RIGHT_PAREN = 2  # )
    LEFT_BRACE = 3  # {
    RIGHT_BRACE = 4  # }
    COMMA = 5  # ,
    DOT = 6  # .
    MINUS = 7  # -
    PLUS = 8  # +
    SEMICOLON = 9  # ;
    SLASH = 10  # /
    STAR = 11  # *

    # -------------------------
    # One or two character tokens
    # -------------------------
    BANG = 20  # !
    BANG_EQUAL = 21  # !=
    EQUAL = 22  # =
    EQUAL_EQUAL = 23  # ==
    GREATER = 24  # >
    GREATER_EQUAL = 25  # >=
    LESS = 26  # <
    LESS_EQUAL = 27  # <=

    # -------------------------
    # Literals (reserved, not scanned yet)
    # -------------------------
    IDENTIFIER = 30
    STRING = 31
    NUMBER = 32

    # -------------------------
    # Keywords (reserved, not scanned yet)
    # -------------------------
    AND = 40
    CLASS = 41
    ELSE = 42
    FALSE = 43
    FUN = 44
    FOR = 45
    IF = 46
    NIL = 47
    OR = 48
    PRINT = 49
    RETURN = 50
    SUPER = 51
    THIS = 52
    TRUE = 53
    VAR = 54
    WHILE = 55

    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 100

    @property
    def is_literal(self) -> bool:
        return self in (TokenKind.IDENTIFIER, TokenKind.STRING, TokenKind.NUMBER)

    @property
    def is_keyword(self) -> bool:
        return TokenKind.AND <= self <= TokenKind.WHILE


@dataclass(frozen=True, slots=True)
class Token:
    """A single scanned token.

    `lexeme` is the exact source text the token covers (empty for EOF) and
    `line` is the 1-based line of its first character.
    """

    kind: TokenKind
    lexeme: str
    literal: object | None
    line: int

    def to_text(self) -> str:
        """Render as `<KIND_NAME> <lexeme> <literal>`, with `null` for no literal."""
        literal = "null" if self.literal is None else str(self.literal)
        return f"{self.kind.name} {self.lexeme} {literal}"

    def __str__(self) -> str:
        return self.to_text()


def eof_token(line: int) -> Token:
    return Token(TokenKind.EOF, "", None, line)


def render_tokens(tokens: Iterable[Token]) -> list[str]:
    """Text form of each token, in order."""
    return [token.to_text() for token in tokens]
