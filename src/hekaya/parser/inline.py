"""Inline emphasis: bold, italic, bold-italic and underline markers."""

from __future__ import annotations

from hekaya.parser.rules import BOLD, BOLD_ITALIC, ITALIC, UNDERLINE


def process_inline_formatting(text: str) -> str:
    """Convert Fountain/Hekaya emphasis markers to HTML tags.

    ``***`` runs are handled before ``**`` and ``*`` so the shorter markers
    never match inside a longer run.
    """
    text = BOLD_ITALIC.sub(r"<b><i>\1</i></b>", text)
    text = BOLD.sub(r"<b>\1</b>", text)
    text = ITALIC.sub(r"<i>\1</i>", text)
    return UNDERLINE.sub(r"<u>\1</u>", text)


def strip_inline_formatting(text: str) -> str:
    """Remove emphasis markers, keeping the emphasized text."""
    for pattern in (BOLD_ITALIC, BOLD, ITALIC, UNDERLINE):
        text = pattern.sub(r"\1", text)
    return text
