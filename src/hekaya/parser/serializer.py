"""Serializer: renders a parsed script back to Hekaya/Fountain plain text.

The output keeps Fountain-compatible syntax, so it can be read by any
Fountain tool and re-parsed by ``hekaya.parse``. Notes and boneyards are
not re-inserted because the parse keeps no position information for them.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from hekaya.exceptions import ValidationError
from hekaya.parser.models import ElementType, ParsedScript, TitleEntry, Token
from hekaya.parser.rules import TRANSITION_ENGLISH

TITLE_INDENT = "   "


def serialize(script: ParsedScript) -> str:
    """Serialize a parsed script to plain text.

    Args:
        script: Result of ``hekaya.parse``

    Returns:
        The script as Hekaya text

    Raises:
        ValidationError: If ``script`` is not a ParsedScript
    """
    if not isinstance(script, ParsedScript):
        raise ValidationError(
            message="Only a ParsedScript can be serialized",
            hint="Pass the result of hekaya.parse()",
            details={"input_type": type(script).__name__},
        )

    parts: list[str] = []
    if script.title_entries:
        parts.append(serialize_title_page(script.title_entries))
        parts.append("")
    parts.append(serialize_tokens(script.tokens))
    return "\n".join(parts)


def serialize_title_page(entries: Iterable[TitleEntry]) -> str:
    """Render title entries using the keys as originally written."""
    lines: list[str] = []
    for entry in entries:
        if "\n" in entry.value:
            lines.append(f"{entry.key_original}:")
            lines.extend(f"{TITLE_INDENT}{line}" for line in entry.value.split("\n"))
        else:
            lines.append(f"{entry.key_original}: {entry.value}")
    return "\n".join(lines)


def serialize_tokens(tokens: Iterable[Token]) -> str:
    """Render tokens, one output line per token."""
    return "\n".join(serialize_token(token) for token in tokens)


def serialize_token(token: Token) -> str:
    """Render a single token."""
    render = _RENDERERS.get(token.type)
    if render is None:
        return token.text
    return render(token)


def _scene_heading(token: Token) -> str:
    text = f".{token.text}" if token.forced else token.text
    if token.scene_number:
        text = f"{text} #{token.scene_number}#"
    return text


def _action(token: Token) -> str:
    return f"!{token.text}" if token.forced else token.text


def _character(token: Token) -> str:
    name = token.character_name or token.text
    if token.character_extension:
        name = f"{name} ({token.character_extension})"
    if token.forced:
        name = f"@{name}"
    if token.dual_dialogue:
        name = f"{name} ^"
    return name


def _transition(token: Token) -> str:
    if token.forced:
        return f"> {token.text}"
    if TRANSITION_ENGLISH.match(token.text):
        return token.text
    return f"- {token.text} -"


def _section(token: Token) -> str:
    return f"{'#' * (token.depth or 1)} {token.text}"


_RENDERERS: dict[ElementType, Callable[[Token], str]] = {
    ElementType.BLANK: lambda token: "",
    ElementType.SCENE_HEADING: _scene_heading,
    ElementType.ACTION: _action,
    ElementType.CHARACTER: _character,
    ElementType.DIALOGUE: lambda token: token.text,
    ElementType.PARENTHETICAL: lambda token: token.text,
    ElementType.TRANSITION: _transition,
    ElementType.CENTERED: lambda token: f">{token.text}<",
    ElementType.PAGE_BREAK: lambda token: "===",
    ElementType.SECTION: _section,
    ElementType.SYNOPSIS: lambda token: f"= {token.text}",
    ElementType.LYRICS: lambda token: f"~{token.text}",
    ElementType.NOTE_INLINE: lambda token: f"[[{token.text}]]",
    ElementType.BONEYARD: lambda token: f"/* {token.text} */",
}
