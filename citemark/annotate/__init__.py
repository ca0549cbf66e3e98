"""Boundary lookup, planning, rendering and splicing of citation tags."""

from .boundary import find_word_boundary
from .planner import group_insertions, plan_insertions
from .renderer import render_group, render_sup_tag
from .splicer import is_punctuation, splice_at, splice_insertions

__all__ = [
    "find_word_boundary",
    "plan_insertions",
    "group_insertions",
    "render_sup_tag",
    "render_group",
    "is_punctuation",
    "splice_at",
    "splice_insertions",
]
