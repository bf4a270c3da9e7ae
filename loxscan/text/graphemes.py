"""Grapheme cluster segmentation."""

from typing import Final

import regex

_GRAPHEME: Final = regex.compile(r"\X")

NEWLINE_GRAPHEMES: Final[frozenset[str]] = frozenset(("\n", "\r\n"))
"""Clusters that end a line. UAX #29 keeps CR LF together as one cluster."""


def graphemes(source: str) -> tuple[str, ...]:
    """Split text into extended grapheme clusters.

    Concatenating the result gives back `source` unchanged.
    """
    return tuple(_GRAPHEME.findall(source))
