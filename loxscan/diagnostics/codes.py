"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


LEXER_UNEXPECTED_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNEXPECTED_CHARACTER",
    message="Unexpected character: {character}",
    hint="Remove the character; only punctuation and comparison operators are scanned.",
    severity="error",
    category="lexer",
)

LEXER_SCAN_FAILURE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_SCAN_FAILURE",
    message="{message}",
    severity="error",
    category="lexer",
)
