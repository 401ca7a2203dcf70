"""Hekaya screenplay parser: bidirectional Arabic/Latin Fountain extension."""

from __future__ import annotations

from .bidi import LRM, RLM, apply_direction_marker, contains_arabic, detect_direction
from .character_registry import CharacterRegistry
from .hekaya import Hekaya
from .inline import process_inline_formatting, strip_inline_formatting
from .lexer import parse
from .models import (
    ElementType,
    Language,
    ParsedScript,
    ParseOptions,
    TextDirection,
    TitleEntry,
    Token,
)
from .serializer import serialize

__all__ = [
    "LRM",
    "RLM",
    "CharacterRegistry",
    "ElementType",
    "Hekaya",
    "Language",
    "ParseOptions",
    "ParsedScript",
    "TextDirection",
    "TitleEntry",
    "Token",
    "apply_direction_marker",
    "contains_arabic",
    "detect_direction",
    "parse",
    "process_inline_formatting",
    "serialize",
    "strip_inline_formatting",
]
