"""Source text helpers."""

from loxscan.text.graphemes import NEWLINE_GRAPHEMES, graphemes

__all__ = [
    "NEWLINE_GRAPHEMES",
    "graphemes",
]
