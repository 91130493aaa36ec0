from dataclasses import replace
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from svgsense.buffer import Position, StringBuffer
from svgsense.completion import CompletionCandidate, SvgCompletionProvider
from svgsense.config import CompletionSettings, load_settings
from svgsense.exceptions import SchemaLoadError
from svgsense.logger import get_logger, setup_logger
from svgsense.schema import catalog_for

console = Console()

cli = typer.Typer(
    name="svgsense",
    help="Context-aware completion for SVG markup",
    epilog="""
    Examples:
    $ svgsense complete drawing.svg --line 3 --column 6
    $ svgsense elements
    """,
    add_completion=False,
)


def _settings(schema: Optional[Path], debug: bool) -> CompletionSettings:
    settings = load_settings()
    if schema is not None:
        settings = replace(settings, schema_path=str(schema))
    setup_logger(log_level="DEBUG" if debug else settings.log_level, console_output=debug)
    return settings


def _describe_command(candidate: CompletionCandidate) -> str:
    command = candidate.command
    if command is None:
        return ""
    text = f"{command.kind.value} {command.offset}"
    if command.has_enum_follow_up:
        text += " (values)"
    return text


@cli.command()
def complete(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="SVG document to complete in"),
    line: int = typer.Option(..., "--line", "-l", min=1, help="Cursor line (1-based)"),
    column: int = typer.Option(..., "--column", "-c", min=1, help="Cursor column (1-based)"),
    schema: Optional[Path] = typer.Option(None, "--schema", help="Schema document to use instead of the bundled one"),
    debug: bool = typer.Option(False, "--debug", help="Log to the console"),
):
    """Show the completion candidates at a cursor position."""
    settings = _settings(schema, debug)
    logger = get_logger("main")

    try:
        provider = SvgCompletionProvider(settings=settings)
    except SchemaLoadError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)

    buffer = StringBuffer(file.read_text(encoding="utf-8"))
    position = Position(line - 1, column - 1)
    candidates = provider.provide_completions(buffer, position)
    logger.info(f"{len(candidates)} candidates at {file}:{line}:{column}")

    if not candidates:
        console.print("No completions")
        return

    table = Table(title=f"{file.name}:{line}:{column}")
    table.add_column("Label", style="cyan")
    table.add_column("Detail", style="magenta")
    table.add_column("Insert")
    table.add_column("Cursor", style="dim")
    for candidate in candidates:
        table.add_row(
            candidate.label,
            candidate.detail or "",
            repr(candidate.insertion),
            _describe_command(candidate),
        )
    console.print(table)


@cli.command()
def elements(
    schema: Optional[Path] = typer.Option(None, "--schema", help="Schema document to use instead of the bundled one"),
):
    """List the elements of the grammar in catalog order."""
    settings = _settings(schema, debug=False)
    try:
        catalog = catalog_for(settings.schema_path)
    except SchemaLoadError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)

    table = Table(title=f"{len(catalog)} elements")
    table.add_column("Element", style="cyan")
    table.add_column("Kind")
    table.add_column("Children")
    table.add_column("Attributes")
    table.add_column("Deprecated", style="red")
    for name, element in catalog.elements.items():
        kind = "simple" if element.simple else "inline" if element.inline else "block"
        children = "any" if element.sub_elements is None else str(len(element.sub_elements))
        table.add_row(name, kind, children, str(len(element.attributes)), "yes" if element.deprecated else "")
    console.print(table)


if __name__ == "__main__":
    cli()
