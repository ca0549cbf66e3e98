from __future__ import annotations

from typing import Iterable

from ..types import GroupedCitation

SUP_TAG_TEMPLATE = '<sup data-endoffset="{offset}">{number}</sup>'


def render_sup_tag(citation_number: int, original_offset: int) -> str:
    return SUP_TAG_TEMPLATE.format(offset=original_offset, number=citation_number)


def render_group(entries: Iterable[GroupedCitation]) -> str:
    """Concatenate tags in the order they were grouped (no numeric re-sort)."""
    return "".join(
        render_sup_tag(entry.citation_number, entry.original_offset) for entry in entries
    )
