"""Citation markup helpers for answer text."""

from .core import insert_sup_tags
from .errors import InvalidSourceError
from .types import CitationMarker, GroupedCitation, Insertion, Source

__all__ = [
    "insert_sup_tags",
    "InvalidSourceError",
    "CitationMarker",
    "GroupedCitation",
    "Insertion",
    "Source",
]
