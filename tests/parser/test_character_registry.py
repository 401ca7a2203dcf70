"""Tests for the character registry and name normalization."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from hekaya.parser.character_registry import CharacterRegistry


class TestNormalize:
    """Test CharacterRegistry.normalize."""

    def test_strips_whitespace(self):
        """Test surrounding whitespace is removed."""
        assert CharacterRegistry.normalize("  سمير  ") == "سمير"

    def test_strips_dual_dialogue_marker(self):
        """Test a trailing caret is removed."""
        assert CharacterRegistry.normalize("نادية ^") == "نادية"

    def test_strips_extension(self):
        """Test a trailing parenthetical extension is removed."""
        assert CharacterRegistry.normalize("سمير (صوت خارجي)") == "سمير"

    def test_strips_extension_and_dual_marker(self):
        """Test dual marker and extension are both removed."""
        assert CharacterRegistry.normalize("سمير (ص.خ) ^") == "سمير"

    def test_removes_diacritics(self):
        """Test tashkeel is removed."""
        assert CharacterRegistry.normalize("سَمِير") == "سمير"

    @pytest.mark.parametrize("variant", ["أحمد", "إحمد", "آحمد", "ٱحمد"])
    def test_folds_alef_variants(self, variant):
        """Test hamza and madda alef forms fold to a bare alef."""
        assert CharacterRegistry.normalize(variant) == "احمد"

    def test_latin_names_untouched(self):
        """Test English names keep their case."""
        assert CharacterRegistry.normalize("JOHN (V.O.)") == "JOHN"

    @given(st.text())
    def test_idempotent(self, name):
        """Test that normalizing twice equals normalizing once."""
        once = CharacterRegistry.normalize(name)
        assert CharacterRegistry.normalize(once) == once

    @pytest.mark.parametrize(
        "name", ["سمير ^ ^", "أحمد ((ص.خ))", "نادية (أ) (ب)", " َسمير"]
    )
    def test_idempotent_on_nested_markers(self, name):
        """Test idempotence on inputs where one pass is not enough."""
        once = CharacterRegistry.normalize(name)
        assert CharacterRegistry.normalize(once) == once


class TestRegistry:
    """Test registration and lookup."""

    def test_register_and_lookup_normalized(self):
        """Test lookups match through normalization."""
        registry = CharacterRegistry()
        registry.register("أحمد")
        assert registry.is_known("احمد")
        assert registry.is_known("أَحمد (تابع)")
        assert "إحمد" in registry

    def test_unknown_name(self):
        """Test an unregistered name is unknown."""
        registry = CharacterRegistry()
        registry.register("سمير")
        assert not registry.is_known("نادية")
        assert 42 not in registry

    def test_empty_name_is_ignored(self):
        """Test names that normalize to nothing are not registered."""
        registry = CharacterRegistry()
        registry.register("   ")
        registry.register("(صوت خارجي)")
        assert len(registry) == 0

    def test_names_keep_registration_order(self):
        """Test names() is a snapshot in insertion order without duplicates."""
        registry = CharacterRegistry()
        for name in ["سمير", "نادية", "سمير", "JOHN"]:
            registry.register(name)
        names = registry.names()
        assert names == ["سمير", "نادية", "JOHN"]

        names.append("other")
        assert len(registry) == 3

    def test_clear(self):
        """Test clear forgets every name."""
        registry = CharacterRegistry()
        registry.register("سمير")
        registry.clear()
        assert len(registry) == 0
        assert not registry.is_known("سمير")

    @given(st.lists(st.text(), max_size=10), st.text())
    def test_registration_is_monotonic(self, names, extra):
        """Test registering never makes a known name unknown."""
        registry = CharacterRegistry()
        for name in names:
            registry.register(name)
        known_before = [n for n in names if registry.is_known(n)]
        registry.register(extra)
        assert all(registry.is_known(n) for n in known_before)


class TestCharacterLine:
    """Test is_character_line and extract_name."""

    def test_requires_following_line(self):
        """Test a known name is a cue only when dialogue follows."""
        registry = CharacterRegistry()
        registry.register("سمير")
        assert registry.is_character_line("سمير", has_following_non_blank=True)
        assert not registry.is_character_line("سمير", has_following_non_blank=False)

    def test_line_with_extension(self):
        """Test a known name with an extension is a cue."""
        registry = CharacterRegistry()
        registry.register("سمير")
        assert registry.is_character_line("سمير (تابع)", True)

    def test_extract_name_drops_at_marker(self):
        """Test extract_name removes the forcing marker."""
        registry = CharacterRegistry()
        assert registry.extract_name("  @سمير ^") == "سمير"
