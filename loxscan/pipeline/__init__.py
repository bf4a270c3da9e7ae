"""Loader and tokenize entrypoints."""

from loxscan.pipeline.entrypoints import run_tokenize, run_tokenize_file
from loxscan.pipeline.load import LoadOptions, SourceLoadError, load_source
from loxscan.pipeline.result import TokenizeRunResult

__all__ = [
    "LoadOptions",
    "SourceLoadError",
    "TokenizeRunResult",
    "load_source",
    "run_tokenize",
    "run_tokenize_file",
]
