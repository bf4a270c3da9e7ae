"""Tokenize run carrier."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from loxscan.diagnostics import ScanError
from loxscan.lexer import ScanResult, Token


@dataclass(frozen=True, slots=True)
class TokenizeRunResult:
    """Source text together with the result of scanning it."""

    source_text: str
    scan: ScanResult
    path: Path | None = None

    @property
    def tokens(self) -> tuple[Token, ...]:
        return self.scan.tokens

    @property
    def errors(self) -> tuple[ScanError, ...]:
        return self.scan.errors

    @property
    def had_error(self) -> bool:
        return self.scan.had_error
