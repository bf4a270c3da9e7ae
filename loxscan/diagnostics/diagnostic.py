"""Scan error variants."""

from dataclasses import dataclass

from loxscan.diagnostics.codes import (
    LEXER_SCAN_FAILURE,
    LEXER_UNEXPECTED_CHARACTER,
    DiagnosticSpec,
)


@dataclass(frozen=True, slots=True)
class UnexpectedCharacter:
    """A grapheme the scanner has no rule for."""

    character: str
    line: int

    @property
    def spec(self) -> DiagnosticSpec:
        return LEXER_UNEXPECTED_CHARACTER

    @property
    def code(self) -> str:
        return self.spec.code

    @property
    def message(self) -> str:
        return self.spec.message.format(character=self.character)


@dataclass(frozen=True, slots=True)
class ScanFailure:
    """Unclassified scan error, optionally tied to a line."""

    reason: str
    line: int | None = None

    @property
    def spec(self) -> DiagnosticSpec:
        return LEXER_SCAN_FAILURE

    @property
    def code(self) -> str:
        return self.spec.code

    @property
    def message(self) -> str:
        return self.spec.message.format(message=self.reason)


ScanError = UnexpectedCharacter | ScanFailure
