"""Title page parsing: the leading block of ``key: value`` lines."""

from __future__ import annotations

from hekaya.config import get_logger
from hekaya.parser.keywords import DIRECTION_VALUES_AR, TITLE_KEYS_AR, TITLE_KEYS_EN
from hekaya.parser.models import TextDirection, TitleEntry, TitlePage
from hekaya.parser.rules import BLANK_LINE, TITLE_CONTINUATION, TITLE_KEY

logger = get_logger(__name__)


def resolve_direction_value(value: str) -> TextDirection | None:
    """Map a title page direction value in either language to a direction."""
    normalized = value.strip().lower()
    resolved = DIRECTION_VALUES_AR.get(normalized, normalized)
    if resolved == "rtl":
        return TextDirection.RTL
    if resolved == "ltr":
        return TextDirection.LTR
    return None


def canonical_title_key(raw_key: str) -> str:
    """Return the language-independent key for a title key as written."""
    lower_key = raw_key.lower()
    return TITLE_KEYS_AR.get(raw_key) or TITLE_KEYS_EN.get(lower_key) or lower_key


class _EntryBuilder:
    """Accumulates one title entry across its continuation lines."""

    def __init__(self) -> None:
        self.entries: list[TitleEntry] = []
        self.explicit_direction: TextDirection | None = None
        self._key: str | None = None
        self._key_original: str | None = None
        self._value: list[str] = []

    def start(self, raw_key: str, value: str) -> None:
        self.flush()
        self._key_original = raw_key
        self._key = canonical_title_key(raw_key)
        self._value = [value.strip()] if value else []

    def continue_value(self, line: str) -> None:
        if self._key is not None:
            self._value.append(line.strip())

    def flush(self) -> None:
        if self._key is None or self._key_original is None:
            return
        value = "\n".join(self._value).strip()
        self.entries.append(
            TitleEntry(key=self._key, key_original=self._key_original, value=value)
        )
        if self._key == "direction":
            direction = resolve_direction_value(value)
            if direction is not None:
                self.explicit_direction = direction
                logger.debug("Explicit direction on title page", direction=direction)
        self._key = None
        self._key_original = None
        self._value = []


def parse_title_page(text: str) -> TitlePage:
    """Split the title page from the script body.

    The title page exists only when the first non-blank line is a known
    ``key: value`` line. It ends at the first blank line, which is consumed,
    or at the first line that is neither a key line nor an indented
    continuation, which is left in the body.

    Args:
        text: Script text with notes and boneyards already removed

    Returns:
        The title entries, the remaining body text and any explicit direction
    """
    lines = text.split("\n")
    i = 0

    while i < len(lines) and BLANK_LINE.match(lines[i]):
        i += 1

    if i >= len(lines):
        return TitlePage(body="")

    if not TITLE_KEY.match(lines[i]):
        return TitlePage(body=text)

    builder = _EntryBuilder()

    while i < len(lines):
        line = lines[i]

        if BLANK_LINE.match(line):
            i += 1
            break

        key_match = TITLE_KEY.match(line)
        if key_match:
            builder.start(key_match.group(1).strip(), key_match.group(2))
        elif TITLE_CONTINUATION.match(line):
            builder.continue_value(line)
        else:
            # First body line; left unconsumed
            break

        i += 1

    builder.flush()

    return TitlePage(
        entries=builder.entries,
        body="\n".join(lines[i:]),
        explicit_direction=builder.explicit_direction,
    )
