"""Hekaya: a bidirectional Arabic/English screenplay markup parser.

Hekaya extends the Fountain plain-text screenplay format with Arabic scene
headings, transitions and title page keys, plus a character registry that
recognizes Arabic character cues without uppercase.
"""

from .config import HekayaSettings, get_logger, get_settings
from .exceptions import (
    ConfigurationError,
    HekayaError,
    ParseError,
    ValidationError,
)
from .parser import (
    LRM,
    RLM,
    CharacterRegistry,
    ElementType,
    Hekaya,
    Language,
    ParsedScript,
    ParseOptions,
    TextDirection,
    TitleEntry,
    Token,
    apply_direction_marker,
    contains_arabic,
    detect_direction,
    parse,
    process_inline_formatting,
    serialize,
    strip_inline_formatting,
)
from .parser.keywords import (
    CHARACTER_EXTENSIONS_AR,
    DIRECTION_VALUES_AR,
    SCENE_HEADING_KEYWORDS_AR,
    SCENE_HEADING_KEYWORDS_EN,
    TIME_OF_DAY_AR,
    TITLE_KEYS_AR,
    TITLE_KEYS_EN,
    TRANSITION_KEYWORDS_AR,
    TRANSITION_MAP_AR_EN,
)

__version__ = "0.1.0"

__all__ = [
    "CHARACTER_EXTENSIONS_AR",
    "DIRECTION_VALUES_AR",
    "LRM",
    "RLM",
    "SCENE_HEADING_KEYWORDS_AR",
    "SCENE_HEADING_KEYWORDS_EN",
    "TIME_OF_DAY_AR",
    "TITLE_KEYS_AR",
    "TITLE_KEYS_EN",
    "TRANSITION_KEYWORDS_AR",
    "TRANSITION_MAP_AR_EN",
    "CharacterRegistry",
    "ConfigurationError",
    "ElementType",
    "Hekaya",
    "HekayaError",
    "HekayaSettings",
    "Language",
    "ParseError",
    "ParseOptions",
    "ParsedScript",
    "TextDirection",
    "TitleEntry",
    "Token",
    "ValidationError",
    "__version__",
    "apply_direction_marker",
    "contains_arabic",
    "detect_direction",
    "get_logger",
    "get_settings",
    "parse",
    "process_inline_formatting",
    "serialize",
    "strip_inline_formatting",
]
