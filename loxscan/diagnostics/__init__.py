"""Diagnostics."""

from loxscan.diagnostics.codes import (
    LEXER_SCAN_FAILURE,
    LEXER_UNEXPECTED_CHARACTER,
    DiagnosticSpec,
    Severity,
)
from loxscan.diagnostics.diagnostic import ScanError, ScanFailure, UnexpectedCharacter
from loxscan.diagnostics.report import (
    ErrorSink,
    StreamErrorReporter,
    format_error,
    has_errors,
)

__all__ = [
    "LEXER_SCAN_FAILURE",
    "LEXER_UNEXPECTED_CHARACTER",
    "DiagnosticSpec",
    "ErrorSink",
    "ScanError",
    "ScanFailure",
    "Severity",
    "StreamErrorReporter",
    "UnexpectedCharacter",
    "format_error",
    "has_errors",
]
