"""Bidirectional text utilities: direction detection and Unicode marks."""

from __future__ import annotations

import re

from hekaya.parser.models import TextDirection

ARABIC_RANGES = "\u0600-\u06ff\u0750-\u077f\u08a0-\u08ff\ufb50-\ufdff\ufe70-\ufeff"

_ARABIC_CHAR = re.compile(f"[{ARABIC_RANGES}]")
_LATIN_CHAR = re.compile(r"[A-Za-z]")

# Unicode Right-to-Left Mark (U+200F)
RLM = "\u200f"
# Unicode Left-to-Right Mark (U+200E)
LRM = "\u200e"


def detect_direction(text: str) -> TextDirection:
    """Detect whether a string is predominantly RTL (Arabic) or LTR (Latin).

    Counts Arabic-block characters against ASCII Latin letters. Text with
    neither (digits, punctuation, empty) is ``auto``. Equal non-zero counts
    resolve to ``ltr``.

    Args:
        text: Any string

    Returns:
        The inferred direction
    """
    arabic_count = len(_ARABIC_CHAR.findall(text))
    latin_count = len(_LATIN_CHAR.findall(text))

    if arabic_count == 0 and latin_count == 0:
        return TextDirection.AUTO
    if arabic_count > latin_count:
        return TextDirection.RTL
    return TextDirection.LTR


def contains_arabic(text: str) -> bool:
    """Check if a string contains any Arabic characters."""
    return _ARABIC_CHAR.search(text) is not None


def apply_direction_marker(text: str, direction: TextDirection | str) -> str:
    """Prefix ``text`` with RLM or LRM for an explicit direction.

    ``auto`` leaves the text untouched.
    """
    direction = TextDirection(direction)
    if direction is TextDirection.RTL:
        return RLM + text
    if direction is TextDirection.LTR:
        return LRM + text
    return text
