"""Preview command implementation."""

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from rsvp_reader.config import ReaderSettings
from rsvp_reader.core.layout import (
    extract_word_frame,
    find_paragraph_for_word_index,
    group_words_into_real_paragraphs,
)
from rsvp_reader.core.parser_factory import parse_file
from rsvp_reader.core.timing import (
    format_time_remaining,
    get_word_delay,
    should_pause_at_word,
    split_word_for_display,
)

ORP_STYLE = "bold red"


def highlight_word(word: str) -> Text:
    """Word with its ORP character emphasized."""
    parts = split_word_for_display(word)
    return Text.assemble(parts.before, (parts.orp, ORP_STYLE), parts.after)


def frame_text(words: list[str], index: int, frame_size: int) -> Text:
    """Surrounding words with the current one highlighted."""
    frame = extract_word_frame(words, index, frame_size)
    text = Text()
    for offset, word in enumerate(frame.subset):
        if offset:
            text.append(" ")
        if offset == frame.center_offset:
            text.append_text(highlight_word(word))
        else:
            text.append(word, style="dim")
    return text


def execute_preview(
    book_path: Path,
    start: int,
    count: int,
    settings: ReaderSettings,
    console: Console,
) -> None:
    """Print how a run of words would be timed and laid out."""
    parsed = parse_file(book_path)
    words = parsed.words

    if not 0 <= start < len(words):
        console.print(f"[yellow]Start index {start} is outside 0-{len(words) - 1}[/]")
        return

    paragraphs = group_words_into_real_paragraphs(
        words, parsed.paragraph_breaks, parsed.chapters, settings.words_per_paragraph
    )
    paragraph_index = find_paragraph_for_word_index(paragraphs, start)
    heading = next(
        (
            p.chapter_title
            for p in reversed(paragraphs[: paragraph_index + 1])
            if p.chapter_title
        ),
        None,
    )

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Word")
    table.add_column("Delay", justify="right", style="green")
    table.add_column("Pause", justify="center", style="yellow")
    if settings.frame_size > 1:
        table.add_column("Frame")

    for index in range(start, min(start + count, len(words))):
        word = words[index]
        delay = get_word_delay(
            word,
            settings.wpm,
            settings.pause_on_punctuation,
            settings.punctuation_multiplier,
            settings.word_length_multiplier,
        )
        row = [
            str(index),
            highlight_word(word),
            f"{delay:.0f} ms",
            "||" if should_pause_at_word(index, settings.pause_every_words) else "",
        ]
        if settings.frame_size > 1:
            row.append(frame_text(words, index, settings.frame_size))
        table.add_row(*row)

    if heading:
        console.print(f"[bold]{escape(heading)}[/]")
    console.print(
        f"[dim]Paragraph {paragraph_index + 1} of {len(paragraphs)}[/]"
    )
    console.print(table)
    console.print(
        f"[dim]Time remaining at {settings.wpm} WPM:[/] "
        f"{format_time_remaining(len(words) - start, settings.wpm)}"
    )
