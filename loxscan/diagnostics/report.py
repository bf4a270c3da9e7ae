"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Callable, Iterable
import sys
from typing import TextIO

from loxscan.diagnostics.diagnostic import ScanError, ScanFailure, UnexpectedCharacter

ErrorSink = Callable[[ScanError], None]
"""Receives each scan error as soon as it is found."""


def format_error(error: ScanError) -> str:
    match error:
        case UnexpectedCharacter(line=line):
            return f"[line {line}] Error: {error.message}"
        case ScanFailure(line=None):
            return f"Error: {error.message}"
        case ScanFailure(line=line):
            return f"[line {line}] Error: {error.message}"
        case _:
            raise TypeError(f"Not a scan error: {error!r}")


def has_errors(errors: Iterable[ScanError]) -> bool:
    return any(True for _ in errors)


class StreamErrorReporter:
    """Error sink that writes one formatted line per error to a text stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self.count = 0

    @property
    def stream(self) -> TextIO:
        # Looked up per call; sys.stderr may be replaced after construction.
        return self._stream if self._stream is not None else sys.stderr

    def __call__(self, error: ScanError) -> None:
        self.count += 1
        print(format_error(error), file=self.stream, flush=True)
