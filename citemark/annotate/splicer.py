from __future__ import annotations

import re
from functools import reduce
from typing import Dict, List, Tuple

from ..types import GroupedCitation
from .renderer import render_group

# Punctuation only; whitespace is a word boundary but gets the leading-space layout.
PUNCTUATION_RE = re.compile(r"[.,!?;:]")


def is_punctuation(text: str, position: int) -> bool:
    if position < 0 or position >= len(text):
        return False
    return PUNCTUATION_RE.match(text[position]) is not None


def splice_at(text: str, position: int, block: str, at_punctuation: bool) -> str:
    """
    Insert ``block`` at ``position``.

    Before punctuation the block goes in flush with a trailing space;
    anywhere else it is preceded by a single space.
    """
    space_before = "" if at_punctuation else " "
    space_after = " " if at_punctuation else ""
    return f"{text[:position]}{space_before}{block}{space_after}{text[position:]}"


def splice_insertions(text: str, grouped: Dict[int, List[GroupedCitation]]) -> str:
    """
    Apply grouped citations rightmost first so lower positions stay valid.

    The punctuation check for every step reads the original ``text``, not the
    partially spliced result.
    """
    steps: List[Tuple[int, str, bool]] = [
        (position, render_group(grouped[position]), is_punctuation(text, position))
        for position in sorted(grouped, reverse=True)
    ]
    return reduce(
        lambda current, step: splice_at(current, *step),
        steps,
        text,
    )
