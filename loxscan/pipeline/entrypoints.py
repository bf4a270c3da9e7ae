"""Entrypoints that run loader and scanner as one step."""

from __future__ import annotations

from pathlib import Path

from loxscan.diagnostics import ErrorSink
from loxscan.lexer import scan
from loxscan.pipeline.load import LoadOptions, load_source
from loxscan.pipeline.result import TokenizeRunResult


def run_tokenize(text: str, *, on_error: ErrorSink | None = None) -> TokenizeRunResult:
    """Scan in-memory source text."""
    return TokenizeRunResult(source_text=text, scan=scan(text, on_error=on_error))


def run_tokenize_file(
    path: str | Path,
    options: LoadOptions | None = None,
    *,
    on_error: ErrorSink | None = None,
) -> TokenizeRunResult:
    """Load a file and scan it. Raises `SourceLoadError` if the file cannot be read."""
    source_path = Path(path)
    text = load_source(source_path, options)
    return TokenizeRunResult(source_text=text, scan=scan(text, on_error=on_error), path=source_path)
