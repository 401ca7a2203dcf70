"""Data models for Hekaya screenplay parsing."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from hekaya.exceptions import ValidationError


class ElementType(str, Enum):
    """Hekaya/Fountain screenplay element types."""

    TITLE_PAGE = "title_page"
    SCENE_HEADING = "scene_heading"
    ACTION = "action"
    CHARACTER = "character"
    DIALOGUE = "dialogue"
    PARENTHETICAL = "parenthetical"
    TRANSITION = "transition"
    CENTERED = "centered"
    PAGE_BREAK = "page_break"
    SECTION = "section"
    SYNOPSIS = "synopsis"
    NOTE_INLINE = "note_inline"
    BONEYARD = "boneyard"
    LYRICS = "lyrics"
    BLANK = "blank"


class TextDirection(str, Enum):
    """Text direction for bidirectional rendering."""

    RTL = "rtl"
    LTR = "ltr"
    AUTO = "auto"


class Language(str, Enum):
    """Language hint for keyword detection."""

    ARABIC = "ar"
    ENGLISH = "en"
    AUTO = "auto"


@dataclass(frozen=True)
class Token:
    """A single parsed screenplay element.

    Only the fields relevant to ``type`` are set: ``scene_number`` for scene
    headings, ``character_name``/``character_extension``/``dual_dialogue``
    for character cues and ``depth`` for sections.
    """

    type: ElementType
    text: str
    direction: TextDirection | None = None
    forced: bool = False
    scene_number: str | None = None
    character_name: str | None = None
    character_extension: str | None = None
    dual_dialogue: bool = False
    depth: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping without unset optional fields."""
        data: dict[str, Any] = {"type": self.type.value, "text": self.text}
        if self.direction is not None:
            data["direction"] = self.direction.value
        if self.forced:
            data["forced"] = True
        if self.scene_number is not None:
            data["scene_number"] = self.scene_number
        if self.character_name is not None:
            data["character_name"] = self.character_name
        if self.character_extension is not None:
            data["character_extension"] = self.character_extension
        if self.dual_dialogue:
            data["dual_dialogue"] = True
        if self.depth is not None:
            data["depth"] = self.depth
        return data


@dataclass(frozen=True)
class TitleEntry:
    """A single title page entry."""

    key: str
    key_original: str
    value: str

    def to_dict(self) -> dict[str, str]:
        """Return a JSON-ready mapping."""
        return {
            "key": self.key,
            "key_original": self.key_original,
            "value": self.value,
        }


@dataclass(frozen=True)
class ParsedScript:
    """Represents a parsed screenplay."""

    title_entries: tuple[TitleEntry, ...] = ()
    tokens: tuple[Token, ...] = ()
    characters: tuple[str, ...] = ()
    notes: tuple[str, ...] = ()
    boneyards: tuple[str, ...] = ()
    direction: TextDirection = TextDirection.AUTO

    def title_value(self, key: str) -> str | None:
        """Return the value of the first title entry with canonical ``key``."""
        for entry in self.title_entries:
            if entry.key == key:
                return entry.value
        return None

    @property
    def scene_headings(self) -> list[Token]:
        """All scene heading tokens in script order."""
        return [t for t in self.tokens if t.type is ElementType.SCENE_HEADING]

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping of the whole script."""
        return {
            "title_entries": [entry.to_dict() for entry in self.title_entries],
            "tokens": [token.to_dict() for token in self.tokens],
            "characters": list(self.characters),
            "notes": list(self.notes),
            "boneyards": list(self.boneyards),
            "direction": self.direction.value,
        }


@dataclass(frozen=True)
class ParseOptions:
    """Options controlling parser behavior."""

    default_direction: TextDirection = TextDirection.AUTO
    enable_character_registry: bool = True
    strict_mode: bool = False
    # Advisory only; keyword detection always considers both languages
    language: Language = Language.AUTO

    def __post_init__(self) -> None:
        # Accept plain strings ("rtl", "en") from callers and config files
        try:
            direction = TextDirection(self.default_direction)
            language = Language(self.language)
        except ValueError as e:
            raise ValidationError(
                message=f"Invalid parse option: {e}",
                hint="default_direction is rtl/ltr/auto; language is ar/en/auto",
                details={
                    "default_direction": self.default_direction,
                    "language": self.language,
                },
            ) from e
        object.__setattr__(self, "default_direction", direction)
        object.__setattr__(self, "language", language)

    @classmethod
    def from_settings(cls, settings: Any) -> ParseOptions:
        """Build parser options from a ``HekayaSettings`` instance."""
        return cls(
            default_direction=TextDirection(settings.default_direction),
            enable_character_registry=settings.enable_character_registry,
            strict_mode=settings.strict_mode,
            language=Language(settings.language),
        )


@dataclass
class TitlePage:
    """Result of splitting the title page from the script body."""

    entries: list[TitleEntry] = field(default_factory=list)
    body: str = ""
    explicit_direction: TextDirection | None = None
