"""Info command implementation."""

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from rsvp_reader.config import ReaderSettings
from rsvp_reader.core.parser_factory import parse_file
from rsvp_reader.core.timing import estimate_reading_time, format_time_remaining
from rsvp_reader.models.document import ParsedContent


def format_duration(milliseconds: float) -> str:
    """Render milliseconds as h:mm:ss or m:ss."""
    seconds = int(round(milliseconds / 1000))
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def display_chapters(
    parsed: ParsedContent, words: list[str], settings: ReaderSettings, console: Console
) -> None:
    """Display chapter spans with their reading times."""
    table = Table(title="Table of Contents", show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=4)
    table.add_column("Title", style="white")
    table.add_column("Words", justify="right", style="green")
    table.add_column("Range", justify="right", style="dim")
    table.add_column("Time", justify="right", style="yellow")

    for i, chapter in enumerate(parsed.chapters):
        chapter_words = words[chapter.word_start_index : chapter.word_end_index + 1]
        indent = "  " * chapter.level
        table.add_row(
            str(i + 1),
            f"{indent}{escape(chapter.title)}",
            f"{len(chapter_words):,}",
            f"{chapter.word_start_index}-{chapter.word_end_index}",
            format_duration(estimate_reading_time(chapter_words, settings)),
        )

    console.print(table)


def execute_info(book_path: Path, settings: ReaderSettings, console: Console) -> None:
    """Print metadata, word statistics and chapters of a document."""
    parsed = parse_file(book_path)
    words = parsed.words
    metadata = parsed.metadata

    info_lines = []
    if metadata:
        info_lines += [
            f"[bold]{escape(metadata.title)}[/]",
            "",
            f"[dim]Author(s):[/] {escape(', '.join(metadata.authors)) or 'Unknown'}",
            f"[dim]Format:[/] {metadata.source_format.upper()}",
        ]
        if metadata.source_format == "epub":
            info_lines.append(f"[dim]Language:[/] {metadata.language or 'Unknown'}")

    info_lines += [
        f"[dim]Words:[/] {len(words):,}",
        f"[dim]Paragraphs:[/] {len(parsed.paragraph_breaks):,}",
        f"[dim]Chapters:[/] {len(parsed.chapters)}"
        + ("" if parsed.has_toc else " [dim](no table of contents)[/]"),
        f"[dim]Reading time at {settings.wpm} WPM:[/] "
        f"{format_time_remaining(len(words), settings.wpm)} "
        f"[dim](with pauses: {format_duration(estimate_reading_time(words, settings))})[/]",
    ]

    console.print(Panel("\n".join(info_lines), title="Document Info", border_style="blue"))

    if parsed.has_toc:
        console.print()
        display_chapters(parsed, words, settings, console)
