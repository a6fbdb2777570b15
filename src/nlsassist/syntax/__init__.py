"""Manifest text model and placeholder detection.

Python 3.13+. Zero external dependencies.
"""

from .document import TextDocument
from .locator import PartialPlaceholder, PlaceholderToken, match_full_token, match_partial_token
from .position import LineIndex, Position, Range

__all__ = [
    "LineIndex",
    "PartialPlaceholder",
    "PlaceholderToken",
    "Position",
    "Range",
    "TextDocument",
    "match_full_token",
    "match_partial_token",
]
