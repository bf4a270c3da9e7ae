"""Lexical scanner for the Lox scripting language."""

from loxscan.lexer import Lexer, ScanResult, Token, TokenKind, scan

__version__ = "0.1.0"

__all__ = [
    "Lexer",
    "ScanResult",
    "Token",
    "TokenKind",
    "scan",
]
