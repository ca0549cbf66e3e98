from __future__ import annotations

import re

# ECMAScript whitespace, which differs from Python's \s (U+FEFF in; \x1c-\x1f, \x85 out).
JS_WHITESPACE = "\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
WORD_BOUNDARY_RE = re.compile(f"[{JS_WHITESPACE}.,!?;:]")


def _is_boundary_char(text: str, position: int) -> bool:
    if position < 0 or position >= len(text):
        return False
    return WORD_BOUNDARY_RE.match(text[position]) is not None


def find_word_boundary(text: str, position: int) -> int:
    """
    Return the smallest index >= ``position`` holding whitespace or one of
    ``. , ! ? ; :``, or ``len(text)`` when the scan runs off the end.
    """
    if _is_boundary_char(text, position):
        return position

    boundary = position
    while boundary < len(text) and not _is_boundary_char(text, boundary):
        boundary += 1
    return boundary
