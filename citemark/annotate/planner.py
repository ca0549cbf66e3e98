from __future__ import annotations

from typing import Dict, Iterable, List

from ..types import GroupedCitation, Insertion, Source
from .boundary import find_word_boundary


def plan_insertions(text: str, sources: Iterable[Source]) -> List[Insertion]:
    """One insertion per (source, marker) pair, in source then marker order."""
    insertions: List[Insertion] = []
    for source in sources:
        for marker in source.citation_markers:
            insertions.append(
                Insertion(
                    position=find_word_boundary(text, marker.end_offset),
                    original_offset=marker.end_offset,
                    citation_number=source.citation_number,
                )
            )
    return insertions


def group_insertions(insertions: Iterable[Insertion]) -> Dict[int, List[GroupedCitation]]:
    grouped: Dict[int, List[GroupedCitation]] = {}
    for insertion in insertions:
        grouped.setdefault(insertion.position, []).append(
            GroupedCitation(
                citation_number=insertion.citation_number,
                original_offset=insertion.original_offset,
            )
        )
    return grouped
