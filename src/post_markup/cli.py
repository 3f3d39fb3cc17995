"""Command-line interface for post-markup."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from post_markup import __version__
from post_markup.config import get_settings
from post_markup.editing.inserter import (
    MarkupEditingInserter,
    SelectionError,
    SelectionRange,
    ToolbarAction,
)
from post_markup.formatting.delimiters import (
    SUPPORTED_CONVENTIONS,
    DelimiterSet,
    get_delimiters,
)
from post_markup.formatting.ir import StyledRun, TextStyle
from post_markup.formatting.parser import StyleMarkupParser

app = typer.Typer(
    name="post-markup",
    help="Preview and edit inline emphasis markup in social post content.",
    add_completion=False,
)
console = Console()

# Rich style names applied to each markup style
RICH_STYLES: dict[TextStyle, str] = {
    TextStyle.BOLD: "bold",
    TextStyle.ITALIC: "italic",
    TextStyle.UNDERLINE: "underline",
}


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"post-markup v{__version__}")
        raise typer.Exit()


def setup_logging(verbose: bool) -> None:
    """Route library logging through rich at the configured level."""
    level = "DEBUG" if verbose else get_settings().log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def rich_style(style: TextStyle) -> str:
    """Get the rich style string for combined markup styles."""
    names = [name for flag, name in RICH_STYLES.items() if flag in style]
    return " ".join(names)


def runs_to_text(runs: list[StyledRun]) -> Text:
    """Render styled runs as one rich paragraph."""
    text = Text()
    for run in runs:
        text.append(run.text, style=rich_style(run.style) or None)
    return text


def resolve_convention(convention: Optional[str]) -> DelimiterSet:
    """Look up a delimiter set, exiting with an error if unknown."""
    name = convention or get_settings().convention
    try:
        return get_delimiters(name)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e


def read_content(text: Optional[str], file: Optional[Path]) -> str:
    """Get content from the argument or a file."""
    if file is not None:
        if not file.exists():
            console.print(f"[red]Error:[/red] File not found: {file}")
            raise typer.Exit(1)
        return file.read_text(encoding="utf-8")
    if text is None:
        console.print("[red]Error:[/red] Provide TEXT or --file")
        raise typer.Exit(1)
    return text


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Preview and edit inline emphasis markup in social post content."""
    setup_logging(verbose)


@app.command()
def render(
    text: Optional[str] = typer.Argument(None, help="Markup to render"),
    file: Optional[Path] = typer.Option(
        None,
        "--file",
        "-f",
        help="Read markup from a file instead",
    ),
    convention: Optional[str] = typer.Option(
        None,
        "--convention",
        "-c",
        help=f"Underline convention: {', '.join(SUPPORTED_CONVENTIONS)}",
    ),
    show_runs: bool = typer.Option(
        False,
        "--runs",
        "-r",
        help="Show a table of styled runs instead of the styled text",
    ),
) -> None:
    """
    Render post content with its styling.

    Examples:

        post-markup render "**bold** and *italic*"

        post-markup render --file post.txt --runs
    """
    content = read_content(text, file)
    parser = StyleMarkupParser(resolve_convention(convention))
    runs = parser.parse(content)

    if not show_runs:
        console.print(runs_to_text(runs))
        return

    table = Table(title=f"{len(runs)} run(s)")
    table.add_column("#", justify="right")
    table.add_column("Text")
    table.add_column("Style")
    for index, run in enumerate(runs):
        table.add_row(str(index), repr(run.text), rich_style(run.style) or "plain")
    console.print(table)


@app.command()
def wrap(
    text: str = typer.Argument(..., help="Current text"),
    start: int = typer.Argument(..., help="Selection start offset"),
    end: int = typer.Argument(..., help="Selection end offset"),
    action: ToolbarAction = typer.Option(
        ToolbarAction.BOLD,
        "--action",
        "-a",
        help="Toolbar action to apply",
    ),
    convention: Optional[str] = typer.Option(
        None,
        "--convention",
        "-c",
        help=f"Underline convention: {', '.join(SUPPORTED_CONVENTIONS)}",
    ),
) -> None:
    """Apply a toolbar action to a selection and print the new text."""
    inserter = MarkupEditingInserter(resolve_convention(convention))
    try:
        result = inserter.apply(text, SelectionRange(start, end), action)
    except SelectionError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e
    console.print(result, markup=False, highlight=False)


@app.command()
def length(
    text: str = typer.Argument(..., help="Post text"),
    max_length: Optional[int] = typer.Option(
        None,
        "--max",
        "-m",
        min=1,
        help="Character budget (default: POST_MARKUP_MAX_LENGTH)",
    ),
    convention: Optional[str] = typer.Option(
        None,
        "--convention",
        "-c",
        help=f"Underline convention: {', '.join(SUPPORTED_CONVENTIONS)}",
    ),
) -> None:
    """Show visible length and the remaining character budget."""
    inserter = MarkupEditingInserter(
        resolve_convention(convention), max_post_length=max_length
    )
    visible = inserter.visible_length(text)
    remaining = inserter.remaining_characters(text)

    color = "green" if remaining >= 0 else "red"
    console.print(f"[blue]Visible:[/blue] {visible}")
    console.print(f"[{color}]Remaining:[/{color}] {remaining}")
    if remaining < 0:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
