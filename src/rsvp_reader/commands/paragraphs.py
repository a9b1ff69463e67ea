"""Paragraphs command implementation."""

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule

from rsvp_reader.core.layout import group_words_into_real_paragraphs
from rsvp_reader.core.parser_factory import parse_file

PREVIEW_WORDS = 24


def execute_paragraphs(
    book_path: Path,
    limit: int,
    words_per_paragraph: int,
    console: Console,
) -> None:
    """Print the display grouping with chapter headings."""
    parsed = parse_file(book_path)
    paragraphs = group_words_into_real_paragraphs(
        parsed.words,
        parsed.paragraph_breaks,
        parsed.chapters,
        words_per_paragraph,
    )

    for i, paragraph in enumerate(paragraphs[:limit]):
        if paragraph.chapter_title:
            console.print(Rule(escape(paragraph.chapter_title), style="cyan", align="left"))

        text = " ".join(paragraph.words[:PREVIEW_WORDS])
        if len(paragraph.words) > PREVIEW_WORDS:
            text += " ..."
        console.print(
            f"[dim]{i + 1:>4} [{paragraph.start_index}-{paragraph.end_index}][/] {escape(text)}",
            highlight=False,
        )

    if len(paragraphs) > limit:
        console.print(f"\n[dim]... {len(paragraphs) - limit} more paragraph(s)[/]")
