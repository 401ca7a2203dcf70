"""CLI command for hekaya validate."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from hekaya.cli.utils.cli_handler import CLIHandler
from hekaya.config import get_logger
from hekaya.parser import ElementType, ParsedScript, parse

logger = get_logger(__name__)
console = Console()

# A dialogue line may only follow one of these
_DIALOGUE_PREDECESSORS = frozenset(
    {ElementType.CHARACTER, ElementType.PARENTHETICAL, ElementType.DIALOGUE}
)


def find_issues(script: ParsedScript) -> list[str]:
    """Return human readable problems found in a parsed script."""
    issues: list[str] = []

    if not script.title_entries:
        issues.append("No title page metadata found")
    elif script.title_value("title") is None:
        issues.append("Missing title (العنوان/Title)")

    body = [t for t in script.tokens if t.type is not ElementType.BLANK]
    if not body:
        issues.append("Script body is empty")

    previous: ElementType | None = None
    for index, token in enumerate(script.tokens, start=1):
        if token.type is ElementType.BLANK:
            continue
        if (
            token.type is ElementType.DIALOGUE
            and previous not in _DIALOGUE_PREDECESSORS
        ):
            issues.append(f"Element {index}: Dialogue without a character name")
        previous = token.type

    if body and not script.scene_headings:
        issues.append("No scene headings found")

    return issues


def validate_command(
    file: Annotated[Path, typer.Argument(help="Input .hekaya or .fountain file")],
) -> None:
    """Validate a .hekaya file."""
    handler = CLIHandler(console)

    try:
        script = parse(handler.read_script(file))
    except Exception as e:
        handler.handle_error(e, "validating", file)

    issues = find_issues(script)
    if issues:
        plural = "s" if len(issues) > 1 else ""
        console.print(
            f"[yellow]{escape(str(file))}: {len(issues)} issue{plural}[/yellow]"
        )
        for issue in issues:
            console.print(f"[yellow]  - {escape(issue)}[/yellow]")
        logger.info("Validation failed", path=str(file), issues=len(issues))
        raise typer.Exit(1)

    elements = sum(1 for t in script.tokens if t.type is not ElementType.BLANK)
    handler.handle_success(f"{file}: Valid")
    console.print(f"  {elements} elements, {len(script.scene_headings)} scenes")
