"""Public facade for the Hekaya screenplay parser.

Usage:
    from hekaya import Hekaya

    script = Hekaya.parse(text)
    print(script.tokens)
    print(script.characters)
"""

from __future__ import annotations

from typing import Any

from hekaya.parser.lexer import parse
from hekaya.parser.models import ParsedScript, ParseOptions
from hekaya.parser.serializer import serialize


class Hekaya:
    """Static entry points for parsing and serializing scripts."""

    @staticmethod
    def parse(
        text: str, options: ParseOptions | None = None, **overrides: Any
    ) -> ParsedScript:
        """Parse a Hekaya or Fountain script string.

        Args:
            text: The plain text screenplay content
            options: Optional parser configuration
            **overrides: Individual option overrides

        Returns:
            The parsed screenplay structure
        """
        return parse(text, options, **overrides)

    @staticmethod
    def serialize(script: ParsedScript) -> str:
        """Serialize a parsed script back to Hekaya/Fountain plain text."""
        return serialize(script)
