"""Main CLI application."""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from rsvp_reader.commands.info import execute_info
from rsvp_reader.commands.paragraphs import execute_paragraphs
from rsvp_reader.commands.preview import execute_preview
from rsvp_reader.config import DEFAULT_WORDS_PER_PARAGRAPH, DEFAULT_WPM, ReaderSettings
from rsvp_reader.core.errors import DocumentReadError, UnsupportedFormatError
from rsvp_reader.core.parser_factory import ParserFactory

app = typer.Typer(
    name="rsvp-reader",
    help="Inspect how PDF/EPUB books are split into words, paragraphs and timings.",
    add_completion=False,
)

console = Console()

BookArgument = Annotated[
    Path,
    typer.Argument(
        help="Path to the book file (EPUB or PDF)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
    ),
]
WpmOption = Annotated[
    int,
    typer.Option("--wpm", "-w", help="Reading speed in words per minute", min=1),
]


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show parser log output"),
    ] = False,
) -> None:
    """Inspect how PDF/EPUB books are split into words, paragraphs and timings."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def _check_supported(book_path: Path) -> None:
    if not ParserFactory.is_supported(book_path.name):
        console.print(f"[red]Unsupported file format: {book_path.suffix}[/]")
        console.print(f"[dim]Supported formats: {ParserFactory.supported_extensions()}[/]")
        raise typer.Exit(1)


@app.command()
def info(
    book_path: BookArgument,
    wpm: WpmOption = DEFAULT_WPM,
) -> None:
    """Display document metadata, word counts and chapters."""
    _check_supported(book_path)

    try:
        execute_info(book_path, ReaderSettings(wpm=wpm), console)
    except (UnsupportedFormatError, DocumentReadError) as e:
        console.print(f"[red]Error: {e}[/]")
        raise typer.Exit(1)


@app.command()
def paragraphs(
    book_path: BookArgument,
    limit: Annotated[
        int,
        typer.Option("--limit", "-n", help="Number of paragraphs to show", min=1),
    ] = 20,
    size: Annotated[
        int,
        typer.Option(
            "--size",
            help="Words per paragraph when the document has no paragraph breaks",
            min=1,
        ),
    ] = DEFAULT_WORDS_PER_PARAGRAPH,
) -> None:
    """Show how the word stream is grouped into display paragraphs."""
    _check_supported(book_path)

    try:
        execute_paragraphs(book_path, limit, size, console)
    except (UnsupportedFormatError, DocumentReadError) as e:
        console.print(f"[red]Error: {e}[/]")
        raise typer.Exit(1)


@app.command()
def preview(
    book_path: BookArgument,
    start: Annotated[
        int,
        typer.Option("--start", "-s", help="Index of the first word", min=0),
    ] = 0,
    count: Annotated[
        int,
        typer.Option("--count", "-c", help="Number of words to show", min=1),
    ] = 20,
    wpm: WpmOption = DEFAULT_WPM,
    no_punctuation_pause: Annotated[
        bool,
        typer.Option(
            "--no-punctuation-pause",
            help="Do not hold words ending in punctuation longer",
        ),
    ] = False,
    punctuation_multiplier: Annotated[
        float,
        typer.Option(
            "--punctuation-multiplier",
            help="Delay factor for words ending a sentence",
            min=1.0,
        ),
    ] = 2.0,
    word_length_multiplier: Annotated[
        float,
        typer.Option(
            "--word-length-multiplier",
            help="Extra delay in percent per character beyond 12",
            min=0.0,
        ),
    ] = 0.0,
    pause_every: Annotated[
        int,
        typer.Option("--pause-every", help="Pause after every N words (0 = never)", min=0),
    ] = 0,
    frame_size: Annotated[
        int,
        typer.Option("--frame-size", "-f", help="Words of context to show", min=1),
    ] = 1,
) -> None:
    """Show ORP highlighting and per-word delays for a run of words."""
    _check_supported(book_path)

    settings = ReaderSettings(
        wpm=wpm,
        pause_on_punctuation=not no_punctuation_pause,
        punctuation_multiplier=punctuation_multiplier,
        word_length_multiplier=word_length_multiplier,
        pause_every_words=pause_every,
        frame_size=frame_size,
    )

    try:
        execute_preview(book_path, start, count, settings, console)
    except (UnsupportedFormatError, DocumentReadError) as e:
        console.print(f"[red]Error: {e}[/]")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
