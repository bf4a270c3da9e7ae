"""Filesystem loader for source files."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

_BOM = "\ufeff"


@dataclass(frozen=True, slots=True)
class LoadOptions:
    """How source bytes are turned into text."""

    encoding: str = "utf-8"
    strip_bom: bool = True


class SourceLoadError(Exception):
    """A source file could not be read or decoded."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to read file {path}: {reason}")
        self.path = path
        self.reason = reason


def load_source(path: str | Path, options: LoadOptions | None = None) -> str:
    resolved = options or LoadOptions()
    source_path = Path(path)
    try:
        text = source_path.read_bytes().decode(resolved.encoding)
    except OSError as exc:
        raise SourceLoadError(source_path, exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise SourceLoadError(source_path, f"not valid {resolved.encoding} ({exc.reason})") from exc
    except LookupError as exc:
        raise SourceLoadError(source_path, f"unknown encoding {resolved.encoding!r}") from exc

    if resolved.strip_bom and text.startswith(_BOM):
        text = text[1:]
    logger.debug("loaded %s (%d chars)", source_path, len(text))
    return text
