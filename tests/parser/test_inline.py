"""Tests for inline emphasis processing."""

from hekaya.parser.inline import process_inline_formatting, strip_inline_formatting


class TestProcessInlineFormatting:
    """Test conversion of emphasis markers to HTML."""

    def test_bold(self):
        """Test double asterisks become bold."""
        assert process_inline_formatting("**مهم**") == "<b>مهم</b>"

    def test_italic(self):
        """Test single asterisks become italic."""
        assert process_inline_formatting("*soft*") == "<i>soft</i>"

    def test_bold_italic(self):
        """Test triple asterisks become bold italic."""
        assert process_inline_formatting("***loud***") == "<b><i>loud</i></b>"

    def test_underline(self):
        """Test underscores become underline."""
        assert process_inline_formatting("_تحت_") == "<u>تحت</u>"

    def test_mixed_in_sentence(self):
        """Test several markers in one line."""
        result = process_inline_formatting("هو **جري** و *وقف* _فجأة_")
        assert result == "هو <b>جري</b> و <i>وقف</i> <u>فجأة</u>"

    def test_plain_text_unchanged(self):
        """Test text without markers is returned as-is."""
        assert process_inline_formatting("سمير قاعد.") == "سمير قاعد."

    def test_lone_asterisk_unchanged(self):
        """Test an unmatched asterisk is left alone."""
        assert process_inline_formatting("5 * 3") == "5 * 3"


class TestStripInlineFormatting:
    """Test removal of emphasis markers."""

    def test_keeps_inner_text(self):
        """Test markers are removed and text kept."""
        assert strip_inline_formatting("***a*** **b** *c* _d_") == "a b c d"

    def test_plain_text_unchanged(self):
        """Test text without markers is returned as-is."""
        assert strip_inline_formatting("INT. HOUSE") == "INT. HOUSE"
