"""Tests for text direction detection and direction markers."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from hekaya.parser.bidi import (
    LRM,
    RLM,
    apply_direction_marker,
    contains_arabic,
    detect_direction,
)
from hekaya.parser.models import TextDirection


class TestDetectDirection:
    """Test detect_direction."""

    def test_arabic_text_is_rtl(self):
        """Test that Arabic text is right-to-left."""
        assert detect_direction("مرحبا بالعالم") == TextDirection.RTL

    def test_latin_text_is_ltr(self):
        """Test that Latin text is left-to-right."""
        assert detect_direction("Hello world") == TextDirection.LTR

    @pytest.mark.parametrize("text", ["", "   ", "123 456", "!?.,"])
    def test_no_letters_is_auto(self, text):
        """Test that text without letters has no direction."""
        assert detect_direction(text) == TextDirection.AUTO

    def test_majority_wins(self):
        """Test mixed text follows the majority script."""
        assert detect_direction("سمير قال OK") == TextDirection.RTL
        assert detect_direction("John said مرحبا") == TextDirection.LTR

    def test_equal_counts_resolve_to_ltr(self):
        """Test that a tie between scripts resolves to LTR."""
        assert detect_direction("ab سم") == TextDirection.LTR

    def test_presentation_forms_count_as_arabic(self):
        """Test Arabic presentation form characters are recognized."""
        assert detect_direction("ﻵﺍ") == TextDirection.RTL

    @given(st.text())
    def test_total_over_any_string(self, text):
        """Test that any string yields one of the three directions."""
        assert detect_direction(text) in set(TextDirection)


class TestContainsArabic:
    """Test contains_arabic."""

    def test_detects_single_arabic_letter(self):
        """Test one Arabic letter among Latin text is found."""
        assert contains_arabic("Scene ا") is True

    def test_latin_only(self):
        """Test Latin text has no Arabic."""
        assert contains_arabic("INT. HOUSE") is False


class TestApplyDirectionMarker:
    """Test apply_direction_marker."""

    def test_rtl_prefixes_rlm(self):
        """Test RTL text gets a right-to-left mark."""
        assert apply_direction_marker("سمير", TextDirection.RTL) == RLM + "سمير"

    def test_ltr_prefixes_lrm(self):
        """Test LTR text gets a left-to-right mark."""
        assert apply_direction_marker("John", "ltr") == LRM + "John"

    def test_auto_leaves_text_untouched(self):
        """Test auto direction adds no mark."""
        assert apply_direction_marker("text", TextDirection.AUTO) == "text"

    def test_invalid_direction_raises(self):
        """Test an unknown direction string is rejected."""
        with pytest.raises(ValueError):
            apply_direction_marker("text", "sideways")
