"""Regex patterns and the ordered rule table for line classification.

Every body line is classified by walking ``RULES`` top to bottom; the first
rule whose matcher returns a truthy value builds the token. The order of
``RULES`` is the precedence contract of the tokenizer, so it is spelled out
here rather than buried in a chain of ``if`` statements.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from hekaya.parser.bidi import detect_direction
from hekaya.parser.keywords import (
    SCENE_HEADING_KEYWORDS_AR,
    SCENE_HEADING_KEYWORDS_EN,
    TITLE_KEYS_AR,
    TITLE_KEYS_EN,
    TRANSITION_KEYWORDS_AR,
)
from hekaya.parser.models import ElementType, ParseOptions, TextDirection, Token

if TYPE_CHECKING:
    from hekaya.parser.character_registry import CharacterRegistry


def _alternation(words: Any) -> str:
    return "|".join(re.escape(word) for word in words)


_SCENE_KEYWORDS = _alternation(
    [*SCENE_HEADING_KEYWORDS_AR, *SCENE_HEADING_KEYWORDS_EN]
)
# Longest first so "قطع إلى" is not cut short by "قطع"
_TRANSITION_KEYWORDS = _alternation(
    sorted(TRANSITION_KEYWORDS_AR, key=len, reverse=True)
)
_TITLE_KEYS = _alternation([*TITLE_KEYS_AR, *TITLE_KEYS_EN])

# Scene heading: keyword followed by "." or whitespace, or a single forcing "."
SCENE_HEADING = re.compile(
    rf"^\s*(?:(\.)(?!\.)|(?:{_SCENE_KEYWORDS})[.\s])", re.IGNORECASE
)

# Trailing #number# on a scene heading; Western or Arabic-Indic digits
SCENE_NUMBER = re.compile(r"\s*#([\u0660-\u06690-9A-Za-z\u0600-\u06ff\-.]+)#\s*$")

CHARACTER_FORCED = re.compile(r"^\s*@(.+)$")

# Standard Fountain cue: an all-uppercase line
CHARACTER_ENGLISH = re.compile(r"^([A-Z][A-Z0-9 _\-']+)(\s*\(.+\))?\s*\^?\s*$")

DUAL_DIALOGUE = re.compile(r"\s*\^\s*$")

CHARACTER_EXTENSION = re.compile(r"\s*\(([^)]+)\)\s*$")

# "قطع", "- قطع -" and "قطع إلى:" (colon kept for older scripts)
TRANSITION_ARABIC = re.compile(rf"^\s*-?\s*({_TRANSITION_KEYWORDS})\s*:?\s*-?\s*$")

TRANSITION_ENGLISH = re.compile(r"^\s*[A-Z ]+TO:\s*$")

# ">" prefix that is not centered text ">...<"
TRANSITION_FORCED = re.compile(r"^\s*>(?!.*<\s*$).+$")

PARENTHETICAL = re.compile(r"^\s*\(.*\)\s*$")

TITLE_KEY = re.compile(rf"^\s*({_TITLE_KEYS})\s*:\s*(.*)$", re.IGNORECASE)

TITLE_CONTINUATION = re.compile(r"^[\t ]+\S")

CENTERED = re.compile(r"^\s*>([^<\n]+)<\s*$")

SECTION = re.compile(r"^(#{1,6})\s+(.+)$")

SYNOPSIS = re.compile(r"^=(?!=)\s*(.+)$")

PAGE_BREAK = re.compile(r"^={3,}\s*$")

NOTE = re.compile(r"\[\[([^\]]+)\]\]")

BONEYARD = re.compile(r"/\*.*?\*/", re.DOTALL)

LYRICS = re.compile(r"^~(.+)$")

ACTION_FORCED = re.compile(r"^!(.+)$")

BLANK_LINE = re.compile(r"^\s*$")

# Emphasis, applied longest marker run first
BOLD_ITALIC = re.compile(r"\*{3}(.+?)\*{3}")
BOLD = re.compile(r"\*{2}(.+?)\*{2}")
ITALIC = re.compile(r"(?<!\*)\*(?!\*)(.+?)(?<!\*)\*(?!\*)")
UNDERLINE = re.compile(r"_([^_\n]+)_")

# Tashkeel: harakat, tanween, shadda, sukun and superscript alef
DIACRITICS = re.compile("[\u0610-\u061a\u064b-\u065f\u0670]")

# أ إ آ ٱ
ALEF_VARIANTS = re.compile("[\u0623\u0625\u0622\u0671]")


@dataclass(frozen=True)
class LineContext:
    """Everything a rule may look at when classifying one body line."""

    line: str
    previous_blank: bool
    has_following_non_blank: bool
    options: ParseOptions
    registry: CharacterRegistry

    @property
    def trimmed(self) -> str:
        return self.line.strip()


Matcher = Callable[[LineContext], Any]
Builder = Callable[[LineContext, Any], Token]


@dataclass(frozen=True)
class Rule:
    """One entry of the classification table.

    ``match`` returns a falsy value when the rule does not apply, otherwise a
    value (usually an ``re.Match``) handed on to ``build``.
    """

    name: str
    match: Matcher
    build: Builder
    opens_dialogue: bool = False
    registers_character: bool = False


def parse_character_line(text: str, forced: bool) -> Token:
    """Build a character token, splitting off the dual marker and extension."""
    character_name = text
    character_extension = None
    dual_dialogue = False

    if DUAL_DIALOGUE.search(text):
        dual_dialogue = True
        character_name = DUAL_DIALOGUE.sub("", text).strip()

    # Must run after the dual marker is gone: "سمير (ص.خ) ^"
    extension_match = CHARACTER_EXTENSION.search(character_name)
    if extension_match:
        character_extension = extension_match.group(1).strip()
        character_name = CHARACTER_EXTENSION.sub("", character_name).strip()

    return Token(
        type=ElementType.CHARACTER,
        text=DUAL_DIALOGUE.sub("", text).strip(),
        character_name=character_name,
        character_extension=character_extension,
        dual_dialogue=dual_dialogue,
        forced=forced,
        direction=detect_direction(character_name),
    )


def _simple(element: ElementType, group: int = 1, forced: bool = False) -> Builder:
    def build(ctx: LineContext, match: re.Match[str]) -> Token:
        text = match.group(group)
        return Token(
            type=element, text=text, forced=forced, direction=detect_direction(text)
        )

    return build


def _build_blank(ctx: LineContext, match: Any) -> Token:
    return Token(type=ElementType.BLANK, text="")


def _build_page_break(ctx: LineContext, match: Any) -> Token:
    return Token(type=ElementType.PAGE_BREAK, text=ctx.trimmed)


def _build_centered(ctx: LineContext, match: re.Match[str]) -> Token:
    return Token(
        type=ElementType.CENTERED,
        text=match.group(1).strip(),
        direction=detect_direction(match.group(1)),
    )


def _build_section(ctx: LineContext, match: re.Match[str]) -> Token:
    text = match.group(2)
    return Token(
        type=ElementType.SECTION,
        text=text,
        depth=len(match.group(1)),
        direction=detect_direction(text),
    )


def _build_scene_heading(ctx: LineContext, match: Any) -> Token:
    text = ctx.trimmed
    forced = False
    scene_number = None

    if text.startswith(".") and not text.startswith(".."):
        text = text[1:].strip()
        forced = True

    number_match = SCENE_NUMBER.search(text)
    if number_match:
        scene_number = number_match.group(1)
        text = SCENE_NUMBER.sub("", text).strip()

    return Token(
        type=ElementType.SCENE_HEADING,
        text=text,
        forced=forced,
        scene_number=scene_number,
        direction=detect_direction(text),
    )


def _build_forced_transition(ctx: LineContext, match: Any) -> Token:
    text = re.sub(r"^\s*>\s*", "", ctx.trimmed)
    text = re.sub(r"\s*:\s*$", "", text).strip()
    return Token(
        type=ElementType.TRANSITION,
        text=text,
        forced=True,
        direction=detect_direction(text),
    )


def _match_arabic_transition(ctx: LineContext) -> Any:
    return ctx.previous_blank and TRANSITION_ARABIC.match(ctx.trimmed)


def _build_arabic_transition(ctx: LineContext, match: Any) -> Token:
    text = re.sub(r"^\s*-\s*", "", ctx.trimmed)
    text = re.sub(r"\s*-\s*$", "", text)
    text = re.sub(r"\s*:\s*$", "", text).strip()
    return Token(type=ElementType.TRANSITION, text=text, direction=TextDirection.RTL)


def _build_english_transition(ctx: LineContext, match: Any) -> Token:
    return Token(
        type=ElementType.TRANSITION, text=ctx.trimmed, direction=TextDirection.LTR
    )


def _build_forced_character(ctx: LineContext, match: re.Match[str]) -> Token:
    return parse_character_line(match.group(1).strip(), forced=True)


def _match_uppercase_character(ctx: LineContext) -> Any:
    if ctx.options.strict_mode or not ctx.previous_blank:
        return None
    return CHARACTER_ENGLISH.match(ctx.trimmed)


def _match_registered_character(ctx: LineContext) -> bool:
    return (
        ctx.options.enable_character_registry
        and not ctx.options.strict_mode
        and ctx.previous_blank
        and ctx.registry.is_character_line(ctx.trimmed, ctx.has_following_non_blank)
    )


def _build_bare_character(ctx: LineContext, match: Any) -> Token:
    return parse_character_line(ctx.trimmed, forced=False)


def _build_action(ctx: LineContext, match: Any) -> Token:
    return Token(
        type=ElementType.ACTION,
        text=ctx.trimmed,
        direction=detect_direction(ctx.trimmed),
    )


RULES: tuple[Rule, ...] = (
    Rule("blank", lambda ctx: BLANK_LINE.match(ctx.line), _build_blank),
    Rule("page_break", lambda ctx: PAGE_BREAK.match(ctx.trimmed), _build_page_break),
    Rule(
        "forced_action",
        lambda ctx: ACTION_FORCED.match(ctx.trimmed),
        _simple(ElementType.ACTION, forced=True),
    ),
    Rule(
        "lyrics", lambda ctx: LYRICS.match(ctx.trimmed), _simple(ElementType.LYRICS)
    ),
    Rule("centered", lambda ctx: CENTERED.match(ctx.trimmed), _build_centered),
    Rule("section", lambda ctx: SECTION.match(ctx.trimmed), _build_section),
    Rule(
        "synopsis",
        lambda ctx: SYNOPSIS.match(ctx.trimmed),
        _simple(ElementType.SYNOPSIS),
    ),
    Rule(
        "scene_heading",
        lambda ctx: SCENE_HEADING.match(ctx.trimmed),
        _build_scene_heading,
    ),
    Rule(
        "forced_transition",
        lambda ctx: TRANSITION_FORCED.match(ctx.trimmed),
        _build_forced_transition,
    ),
    Rule("arabic_transition", _match_arabic_transition, _build_arabic_transition),
    Rule(
        "english_transition",
        lambda ctx: TRANSITION_ENGLISH.match(ctx.trimmed),
        _build_english_transition,
    ),
    Rule(
        "forced_character",
        lambda ctx: CHARACTER_FORCED.match(ctx.trimmed),
        _build_forced_character,
        opens_dialogue=True,
        registers_character=True,
    ),
    Rule(
        "uppercase_character",
        _match_uppercase_character,
        _build_bare_character,
        opens_dialogue=True,
        registers_character=True,
    ),
    Rule(
        "registered_character",
        _match_registered_character,
        _build_bare_character,
        opens_dialogue=True,
    ),
    Rule("action", lambda ctx: True, _build_action),
)


def classify_line(ctx: LineContext) -> tuple[Rule, Token]:
    """Return the first rule matching ``ctx`` and the token it builds."""
    for rule in RULES[:-1]:
        match = rule.match(ctx)
        if match:
            return rule, rule.build(ctx, match)
    fallback = RULES[-1]
    return fallback, fallback.build(ctx, None)
