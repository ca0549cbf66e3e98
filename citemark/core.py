from __future__ import annotations

import logging
from typing import Any, Sequence

from .annotate import group_insertions, plan_insertions, splice_insertions
from .data import sources_from_records, validate_sources

logger = logging.getLogger(__name__)


def insert_sup_tags(text: str, sources: Sequence[Any]) -> str:
    """
    Insert ``<sup data-endoffset="...">N</sup>`` citation tags into ``text``.

    Each marker is moved forward to the next word boundary; markers landing
    on the same boundary share one tag block. ``sources`` may hold ``Source``
    objects or upstream records such as
    ``{"citationNumber": 1, "citationMarkers": [{"endOffset": 7}]}``.

    Raises ``InvalidSourceError`` for malformed records or offsets outside
    the text.
    """
    parsed = sources_from_records(sources)
    validate_sources(text, parsed)
    if not parsed:
        return text

    insertions = plan_insertions(text, parsed)
    grouped = group_insertions(insertions)
    logger.debug(
        "Inserting %d citation tags from %d sources at %d positions",
        len(insertions),
        len(parsed),
        len(grouped),
    )
    return splice_insertions(text, grouped)
