"""Command-line entry point: `loxscan tokenize <filename>`."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
import logging
from pathlib import Path
import sys
from typing import NoReturn

from loxscan.diagnostics import StreamErrorReporter
from loxscan.lexer import render_tokens
from loxscan.pipeline import LoadOptions, SourceLoadError, TokenizeRunResult, run_tokenize_file

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_DATA_ERROR = 65


class UsageError(Exception):
    """Bad command-line arguments."""


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise UsageError(f"{self.format_usage().rstrip()}\n{self.prog}: error: {message}")


def build_parser() -> _ArgumentParser:
    parser = _ArgumentParser(prog="loxscan", description="Scan Lox source into tokens")
    commands = parser.add_subparsers(dest="command", metavar="command", required=True)

    tokenize = commands.add_parser("tokenize", help="Print the tokens of a source file")
    tokenize.add_argument("filename", type=Path, help="Source file to scan")
    tokenize.add_argument("--encoding", default="utf-8", help="Source file encoding (default: utf-8)")
    tokenize.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging on stderr")
    return parser


def exit_code_for(result: TokenizeRunResult) -> int:
    return EXIT_DATA_ERROR if result.had_error else EXIT_OK


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _tokenize(args: argparse.Namespace) -> int:
    reporter = StreamErrorReporter()
    try:
        result = run_tokenize_file(args.filename, LoadOptions(encoding=args.encoding), on_error=reporter)
    except SourceLoadError as exc:
        print(exc, file=sys.stderr)
        return EXIT_FAILURE

    for line in render_tokens(result.tokens):
        print(line)
    logger.debug("%s: %d tokens, %d errors", result.path, len(result.tokens), reporter.count)
    return exit_code_for(result)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as exc:
        print(exc, file=sys.stderr)
        return EXIT_FAILURE

    _configure_logging(args.verbose)
    match args.command:
        case "tokenize":
            return _tokenize(args)
        case _:
            print(f"Unknown command: {args.command}", file=sys.stderr)
            return EXIT_FAILURE


if __name__ == "__main__":
    raise SystemExit(main())
