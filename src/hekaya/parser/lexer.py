"""Hekaya lexer: turns script text into title entries and tokens.

Two passes:
    1. Preprocess: extract boneyards and inline notes, normalize line endings.
    2. Tokenize: split off the title page, then classify body lines with the
       rule table, running a dialogue sub-loop after every character cue.
"""

from __future__ import annotations

import re
from typing import Any

from hekaya.config import get_logger
from hekaya.exceptions import ParseError
from hekaya.parser.bidi import detect_direction
from hekaya.parser.character_registry import CharacterRegistry
from hekaya.parser.models import (
    ElementType,
    ParsedScript,
    ParseOptions,
    TextDirection,
    Token,
)
from hekaya.parser.rules import (
    BLANK_LINE,
    BONEYARD,
    NOTE,
    PARENTHETICAL,
    LineContext,
    classify_line,
)
from hekaya.parser.title_page import parse_title_page

logger = get_logger(__name__)


def _resolve_options(
    options: ParseOptions | None, overrides: dict[str, Any]
) -> ParseOptions:
    if options is not None and not isinstance(options, ParseOptions):
        raise ParseError(
            message="Parse options must be a ParseOptions instance",
            hint="Pass ParseOptions(...) or keyword overrides such as strict_mode=True",
            details={"options_type": type(options).__name__},
        )
    if not overrides:
        return options or ParseOptions()
    base = options or ParseOptions()
    known = {
        "default_direction": base.default_direction,
        "enable_character_registry": base.enable_character_registry,
        "strict_mode": base.strict_mode,
        "language": base.language,
    }
    unknown = set(overrides) - set(known)
    if unknown:
        raise ParseError(
            message=f"Unknown parse option(s): {', '.join(sorted(unknown))}",
            hint=f"Valid options are: {', '.join(known)}",
            details={"unknown": sorted(unknown)},
        )
    known.update(overrides)
    return ParseOptions(**known)


def preprocess(text: str) -> tuple[str, list[str], list[str]]:
    """Strip boneyards and inline notes and normalize line endings.

    Args:
        text: Raw script text

    Returns:
        Tuple of (cleaned text, notes, boneyards), each list in order of
        appearance
    """
    boneyards: list[str] = []
    notes: list[str] = []

    def _take_boneyard(match: re.Match[str]) -> str:
        boneyards.append(match.group(0)[2:-2].strip())
        return ""

    def _take_note(match: re.Match[str]) -> str:
        notes.append(match.group(1))
        return ""

    cleaned = BONEYARD.sub(_take_boneyard, text)
    cleaned = NOTE.sub(_take_note, cleaned)
    cleaned = cleaned.replace("\r\n", "\n").replace("\r", "\n")
    return cleaned, notes, boneyards


def parse_dialogue_block(lines: list[str], start: int, tokens: list[Token]) -> int:
    """Consume the parentheticals and dialogue following a character cue.

    The block ends at the first blank line or at the end of input; the rule
    table is not consulted inside it.

    Returns:
        Index of the first line after the block
    """
    i = start
    while i < len(lines) and not BLANK_LINE.match(lines[i]):
        trimmed = lines[i].strip()
        element = (
            ElementType.PARENTHETICAL
            if PARENTHETICAL.match(trimmed)
            else ElementType.DIALOGUE
        )
        tokens.append(
            Token(type=element, text=trimmed, direction=detect_direction(trimmed))
        )
        i += 1
    return i


def tokenize(
    body: str,
    registry: CharacterRegistry,
    options: ParseOptions,
) -> list[Token]:
    """Tokenize the script body.

    Args:
        body: Body text (title page removed)
        registry: Registry owned by this parse; cues are registered into it
        options: Parser options

    Returns:
        Tokens in line order, with trailing blank tokens removed
    """
    tokens: list[Token] = []
    lines = body.split("\n")

    i = 0
    while i < len(lines):
        next_line = lines[i + 1] if i + 1 < len(lines) else None
        ctx = LineContext(
            line=lines[i],
            previous_blank=not tokens or tokens[-1].type is ElementType.BLANK,
            has_following_non_blank=(
                next_line is not None and not BLANK_LINE.match(next_line)
            ),
            options=options,
            registry=registry,
        )
        rule, token = classify_line(ctx)
        tokens.append(token)
        i += 1

        if rule.registers_character and token.character_name:
            registry.register(token.character_name)
        if rule.opens_dialogue:
            i = parse_dialogue_block(lines, i, tokens)

    while tokens and tokens[-1].type is ElementType.BLANK:
        tokens.pop()

    return tokens


def parse(
    text: str, options: ParseOptions | None = None, **overrides: Any
) -> ParsedScript:
    """Parse a Hekaya or Fountain script.

    Args:
        text: The plain text screenplay
        options: Parser options; keyword overrides such as
            ``strict_mode=True`` are applied on top

    Returns:
        The parsed screenplay

    Raises:
        ParseError: If ``text`` is not a string or the options are invalid
    """
    if not isinstance(text, str):
        raise ParseError(
            message="Script text must be a string",
            hint="Decode bytes as UTF-8 before parsing",
            details={"input_type": type(text).__name__},
        )
    opts = _resolve_options(options, overrides)

    cleaned, notes, boneyards = preprocess(text)
    title_page = parse_title_page(cleaned)

    direction = opts.default_direction
    if title_page.explicit_direction is not None:
        direction = title_page.explicit_direction
    elif direction is TextDirection.AUTO:
        direction = detect_direction(title_page.body)

    registry = CharacterRegistry()
    tokens = tokenize(title_page.body, registry, opts)

    logger.debug(
        "Parsed script",
        title_entries=len(title_page.entries),
        tokens=len(tokens),
        characters=len(registry),
        notes=len(notes),
        boneyards=len(boneyards),
        direction=direction.value,
    )

    return ParsedScript(
        title_entries=tuple(title_page.entries),
        tokens=tuple(tokens),
        characters=tuple(registry.names()),
        notes=tuple(notes),
        boneyards=tuple(boneyards),
        direction=direction,
    )
