from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class CitationMarker:
    end_offset: int


@dataclass
class Source:
    """
    A citation-providing record: one citation number, one or more markers
    pointing at the end of the span it supports.
    """

    citation_number: int
    citation_markers: List[CitationMarker] = field(default_factory=list)


@dataclass(frozen=True)
class Insertion:
    position: int
    original_offset: int
    citation_number: int


@dataclass(frozen=True)
class GroupedCitation:
    citation_number: int
    original_offset: int
