"""Tests for parser data models."""

import json

import pytest

from hekaya.config.settings import HekayaSettings
from hekaya.exceptions import ValidationError
from hekaya.parser.lexer import parse
from hekaya.parser.models import (
    ElementType,
    Language,
    ParseOptions,
    TextDirection,
    Token,
)


class TestToken:
    """Test Token serialization."""

    def test_to_dict_omits_unset_fields(self):
        """Test only set fields appear in the mapping."""
        token = Token(type=ElementType.ACTION, text="يمشي")
        assert token.to_dict() == {"type": "action", "text": "يمشي"}

    def test_to_dict_character(self):
        """Test character fields are included when set."""
        token = Token(
            type=ElementType.CHARACTER,
            text="سمير",
            direction=TextDirection.RTL,
            forced=True,
            character_name="سمير",
            dual_dialogue=True,
        )
        assert token.to_dict() == {
            "type": "character",
            "text": "سمير",
            "direction": "rtl",
            "forced": True,
            "character_name": "سمير",
            "dual_dialogue": True,
        }

    def test_enums_are_strings(self):
        """Test enum members compare equal to their values."""
        assert ElementType.SCENE_HEADING == "scene_heading"
        assert TextDirection.RTL == "rtl"


class TestParsedScript:
    """Test ParsedScript helpers."""

    def test_to_dict_is_json_serializable(self, arabic_script):
        """Test the whole script converts to JSON."""
        data = parse(arabic_script).to_dict()
        decoded = json.loads(json.dumps(data, ensure_ascii=False))
        assert decoded["direction"] == "rtl"
        assert decoded["characters"] == ["سمير", "نادية"]
        assert decoded["title_entries"][0]["key_original"] == "العنوان"
        assert decoded["tokens"][0]["scene_number"] == "١"

    def test_title_value_missing(self):
        """Test a missing key returns None."""
        assert parse("Body.").title_value("title") is None

    def test_scene_headings(self, english_script):
        """Test scene headings are listed in order."""
        headings = parse(english_script).scene_headings
        assert [h.text for h in headings] == [
            "INT. COFFEE SHOP - DAY",
            "EXT. STREET - NIGHT",
        ]


class TestParseOptions:
    """Test ParseOptions construction."""

    def test_defaults(self):
        """Test default option values."""
        options = ParseOptions()
        assert options.default_direction == TextDirection.AUTO
        assert options.enable_character_registry is True
        assert options.strict_mode is False
        assert options.language == Language.AUTO

    def test_strings_are_coerced(self):
        """Test plain strings become enum members."""
        options = ParseOptions(default_direction="rtl", language="ar")
        assert options.default_direction is TextDirection.RTL
        assert options.language is Language.ARABIC

    @pytest.mark.parametrize(
        "kwargs", [{"default_direction": "up"}, {"language": "fr"}]
    )
    def test_invalid_values(self, kwargs):
        """Test invalid values raise a validation error with a hint."""
        with pytest.raises(ValidationError) as exc_info:
            ParseOptions(**kwargs)
        assert exc_info.value.hint

    def test_from_settings(self):
        """Test options are built from settings."""
        settings = HekayaSettings(
            default_direction="ltr", strict_mode=True, language="en"
        )
        options = ParseOptions.from_settings(settings)
        assert options.default_direction is TextDirection.LTR
        assert options.strict_mode is True
        assert options.language is Language.ENGLISH
        assert options.enable_character_registry is True
