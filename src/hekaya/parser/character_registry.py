"""Character registry for markerless character cues.

Arabic has no uppercase, so the Fountain convention of detecting cues by
capitalization does not work for Arabic names. A character is introduced
once with the ``@`` marker; afterwards a standalone line matching a
registered name and followed by dialogue is detected as a cue without it.
"""

from __future__ import annotations

from hekaya.parser.rules import ALEF_VARIANTS, CHARACTER_EXTENSION, DIACRITICS

_DUAL_MARKER = "^"


class CharacterRegistry:
    """Set of canonical character names seen during one parse."""

    def __init__(self) -> None:
        """Initialize an empty registry."""
        # dict keeps insertion order for the characters snapshot
        self._known_names: dict[str, None] = {}

    def register(self, name: str) -> None:
        """Register a character name in its canonical form.

        Names that are empty after normalization are ignored.
        """
        normalized = self.normalize(name)
        if normalized:
            self._known_names[normalized] = None

    def is_known(self, name: str) -> bool:
        """Check whether ``name`` canonicalizes to a registered name."""
        return self.normalize(name) in self._known_names

    def is_character_line(self, line: str, has_following_non_blank: bool) -> bool:
        """Check if a standalone line is a cue for a registered character.

        Args:
            line: The trimmed body line
            has_following_non_blank: Whether dialogue follows the line

        Returns:
            True only if dialogue follows and the line names a known character
        """
        if not has_following_non_blank:
            return False
        return self.is_known(self.extract_name(line))

    def extract_name(self, line: str) -> str:
        """Extract the canonical name from a cue line, dropping ``@``."""
        line = line.strip()
        if line.startswith("@"):
            line = line[1:]
        return self.normalize(line)

    def names(self) -> list[str]:
        """All registered names in registration order."""
        return list(self._known_names)

    def clear(self) -> None:
        """Forget every registered name."""
        self._known_names.clear()

    def __len__(self) -> int:
        return len(self._known_names)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.is_known(name)

    @staticmethod
    def normalize(name: str) -> str:
        """Canonicalize a character name for comparison.

        Steps, in order: trim, drop a trailing dual dialogue ``^``, drop a
        trailing parenthetical extension, trim, strip tashkeel and fold the
        alef variants to a bare alef. The steps repeat until the name is
        stable, so ``normalize(normalize(n)) == normalize(n)``.
        """
        while True:
            normalized = name.strip()
            if normalized.endswith(_DUAL_MARKER):
                normalized = normalized[: -len(_DUAL_MARKER)]
            normalized = CHARACTER_EXTENSION.sub("", normalized).strip()
            normalized = DIACRITICS.sub("", normalized)
            normalized = ALEF_VARIANTS.sub("\u0627", normalized)
            if normalized == name:
                return normalized
            name = normalized
