"""Tests for title page parsing."""

import pytest

from hekaya.parser.models import TextDirection
from hekaya.parser.title_page import (
    canonical_title_key,
    parse_title_page,
    resolve_direction_value,
)


class TestCanonicalKey:
    """Test title key canonicalization."""

    @pytest.mark.parametrize(
        ("raw", "canonical"),
        [
            ("العنوان", "title"),
            ("مسودة", "draft date"),
            ("Title", "title"),
            ("DRAFT DATE", "draft date"),
            ("Custom", "custom"),
        ],
    )
    def test_mapping(self, raw, canonical):
        """Test Arabic, English and unknown keys."""
        assert canonical_title_key(raw) == canonical


class TestResolveDirection:
    """Test direction value resolution."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("rtl", TextDirection.RTL),
            ("LTR", TextDirection.LTR),
            (" يمين-لليسار ", TextDirection.RTL),
            ("يسار-لليمين", TextDirection.LTR),
            ("sideways", None),
            ("", None),
        ],
    )
    def test_values(self, value, expected):
        """Test accepted and rejected direction values."""
        assert resolve_direction_value(value) == expected


class TestParseTitlePage:
    """Test splitting the title page from the body."""

    def test_arabic_keys(self):
        """Test Arabic keys keep their original spelling."""
        page = parse_title_page(
            "العنوان: آخر أيام الصيف\nالمؤلف: سمير عبدالحميد\n\nداخلي - قهوة - نهار"
        )
        assert [e.key for e in page.entries] == ["title", "author"]
        assert page.entries[0].key_original == "العنوان"
        assert page.entries[0].value == "آخر أيام الصيف"
        assert page.body == "داخلي - قهوة - نهار"

    def test_mixed_languages(self):
        """Test Arabic and English keys on one page."""
        page = parse_title_page("العنوان: The Last Meeting\nAuthor: سمير\n\nبداية")
        assert [e.key for e in page.entries] == ["title", "author"]
        assert page.entries[1].key_original == "Author"

    def test_multiline_value(self):
        """Test indented lines continue the previous value."""
        page = parse_title_page(
            "المؤلف:\n    سمير عبدالحميد\n    ونادية حسن\n\nداخلي - قهوة - نهار"
        )
        assert page.entries[0].value == "سمير عبدالحميد\nونادية حسن"

    def test_no_title_page(self):
        """Test a body without key lines is returned whole."""
        text = "داخلي - قهوة - نهار\n\nسمير قاعد."
        page = parse_title_page(text)
        assert page.entries == []
        assert page.body == text
        assert page.explicit_direction is None

    def test_unknown_first_key_is_body(self):
        """Test an unknown key on the first line is not a title page."""
        text = "Scene: something\n\nبداية"
        page = parse_title_page(text)
        assert page.entries == []
        assert page.body == text

    def test_leading_blank_lines_skipped(self):
        """Test blank lines before the title page are ignored."""
        page = parse_title_page("\n\nTitle: X\n\nBody")
        assert page.entries[0].value == "X"
        assert page.body == "Body"

    def test_blank_only_input(self):
        """Test input without any content yields an empty body."""
        page = parse_title_page("\n  \n")
        assert page.entries == []
        assert page.body == ""

    def test_non_key_line_ends_title_page_unconsumed(self):
        """Test a body line right after the entries stays in the body."""
        page = parse_title_page("Title: X\nINT. HOUSE - DAY\n\nAction.")
        assert len(page.entries) == 1
        assert page.body == "INT. HOUSE - DAY\n\nAction."

    def test_explicit_direction(self):
        """Test a direction entry sets the explicit direction."""
        page = parse_title_page("اتجاه: يمين-لليسار\n\nINT. HOUSE")
        assert page.explicit_direction == TextDirection.RTL
        assert page.entries[0].key == "direction"

    def test_unresolvable_direction_is_kept_as_entry(self):
        """Test an unknown direction value is recorded but ignored."""
        page = parse_title_page("Direction: diagonal\n\nBody")
        assert page.explicit_direction is None
        assert page.entries[0].value == "diagonal"

    def test_last_direction_wins(self):
        """Test a later direction entry overrides an earlier one."""
        page = parse_title_page("Direction: rtl\nDirection: ltr\n\nBody")
        assert page.explicit_direction == TextDirection.LTR

    def test_title_page_without_body(self):
        """Test a title page at end of input leaves an empty body."""
        page = parse_title_page("Title: X\nAuthor: Y")
        assert len(page.entries) == 2
        assert page.body == ""
