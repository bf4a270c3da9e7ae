"""Lexer."""

from loxscan.lexer.lexer import Lexer, ScanResult, scan
from loxscan.lexer.tokens import Token, TokenKind, eof_token, render_tokens

__all__ = [
    "Lexer",
    "ScanResult",
    "Token",
    "TokenKind",
    "eof_token",
    "render_tokens",
    "scan",
]
