from pathlib import Path

import pytest

from loxscan.diagnostics import ScanError, UnexpectedCharacter
from loxscan.lexer import TokenKind, render_tokens, scan
from loxscan.pipeline import (
    LoadOptions,
    SourceLoadError,
    load_source,
    run_tokenize,
    run_tokenize_file,
)


def test_run_tokenize_matches_scan() -> None:
    source = "(){};\n"

    result = run_tokenize(source)

    assert result.source_text == source
    assert result.scan == scan(source)
    assert result.path is None
    assert result.had_error is False


def test_run_tokenize_forwards_errors_to_sink() -> None:
    seen: list[ScanError] = []

    result = run_tokenize("(&)", on_error=seen.append)

    assert seen == [UnexpectedCharacter(character="&", line=1)]
    assert result.errors == tuple(seen)
    assert result.had_error is True


def test_run_tokenize_file_reads_and_scans(tmp_path: Path) -> None:
    path = tmp_path / "test.lox"
    path.write_text("<=\n>", encoding="utf-8")

    result = run_tokenize_file(path)

    assert result.path == path
    assert render_tokens(result.tokens) == ["LESS_EQUAL <= null", "GREATER > null", "EOF  null"]
    assert result.tokens[-1].line == 2


def test_load_source_strips_bom(tmp_path: Path) -> None:
    path = tmp_path / "bom.lox"
    path.write_bytes(b"\xef\xbb\xbf()")

    assert load_source(path) == "()"
    assert load_source(path, LoadOptions(strip_bom=False)) == "\ufeff()"


def test_kept_bom_is_an_unexpected_character(tmp_path: Path) -> None:
    path = tmp_path / "bom.lox"
    path.write_bytes(b"\xef\xbb\xbf;")

    result = run_tokenize_file(path, LoadOptions(strip_bom=False))

    assert result.errors == (UnexpectedCharacter(character="\ufeff", line=1),)
    assert [t.kind for t in result.tokens] == [TokenKind.SEMICOLON, TokenKind.EOF]


def test_load_source_with_other_encoding(tmp_path: Path) -> None:
    path = tmp_path / "latin.lox"
    path.write_bytes("(é)".encode("latin-1"))

    assert load_source(path, LoadOptions(encoding="latin-1")) == "(é)"


def test_missing_file_raises_source_load_error(tmp_path: Path) -> None:
    path = tmp_path / "missing.lox"

    with pytest.raises(SourceLoadError) as excinfo:
        load_source(path)

    assert excinfo.value.path == path
    assert str(path) in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, OSError)


def test_undecodable_file_raises_source_load_error(tmp_path: Path) -> None:
    path = tmp_path / "bad.lox"
    path.write_bytes(b"(\xff)")

    with pytest.raises(SourceLoadError) as excinfo:
        run_tokenize_file(path)

    assert "utf-8" in excinfo.value.reason
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)


def test_unknown_encoding_raises_source_load_error(tmp_path: Path) -> None:
    path = tmp_path / "x.lox"
    path.write_text("()", encoding="utf-8")

    with pytest.raises(SourceLoadError, match="unknown encoding"):
        load_source(path, LoadOptions(encoding="no-such-codec"))
