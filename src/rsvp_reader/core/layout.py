"""Windowing and paragraph grouping over the word stream."""

from collections.abc import Iterable, Sequence

from rsvp_reader.config import DEFAULT_WORDS_PER_PARAGRAPH
from rsvp_reader.models.display import WordFrame, WordParagraph
from rsvp_reader.models.document import Chapter


def extract_word_frame(
    words: Sequence[str], center_index: int, frame_size: int
) -> WordFrame:
    """Return the words around ``center_index`` and its offset in that slice.

    Near either end the window is cut short rather than padded, so it can be
    narrower than ``frame_size`` and lopsided.
    """
    if frame_size <= 1 or not 0 <= center_index < len(words):
        word = words[center_index] if 0 <= center_index < len(words) else ""
        return WordFrame(subset=[word], center_offset=0)

    radius = frame_size // 2
    left = max(0, center_index - radius)
    right = min(len(words), center_index + radius + 1)

    return WordFrame(subset=list(words[left:right]), center_offset=center_index - left)


def group_words_into_paragraphs(
    words: Sequence[str], words_per_paragraph: int = DEFAULT_WORDS_PER_PARAGRAPH
) -> list[WordParagraph]:
    """Chunk the word stream into fixed-size paragraphs."""
    if not words:
        return []
    if words_per_paragraph <= 0:
        words_per_paragraph = DEFAULT_WORDS_PER_PARAGRAPH

    paragraphs = []
    for start in range(0, len(words), words_per_paragraph):
        end = min(start + words_per_paragraph, len(words)) - 1
        paragraphs.append(
            WordParagraph(
                words=list(words[start : end + 1]),
                start_index=start,
                end_index=end,
            )
        )
    return paragraphs


def group_words_into_real_paragraphs(
    words: Sequence[str],
    paragraph_breaks: Iterable[int] | None,
    chapters: Iterable[Chapter] = (),
    words_per_paragraph: int = DEFAULT_WORDS_PER_PARAGRAPH,
) -> list[WordParagraph]:
    """Group words at real paragraph breaks and attach chapter headings.

    A chapter is attached to the paragraph its start index falls in, which
    need not be the paragraph's first word. Each chapter is used once.
    Without breaks this falls back to fixed-size chunks.
    """
    if not words:
        return []

    breaks = [b for b in paragraph_breaks or [] if b >= 0]
    if not breaks:
        return group_words_into_paragraphs(words, words_per_paragraph)
    # Word 0 always opens a paragraph even when the list omits it
    breaks = sorted(set(breaks) | {0})

    sorted_chapters = sorted(chapters, key=lambda c: c.word_start_index)
    assigned: set[str] = set()
    paragraphs = []

    for i, start in enumerate(breaks):
        next_start = breaks[i + 1] if i + 1 < len(breaks) else len(words)
        end = min(next_start, len(words)) - 1
        if start > end or start >= len(words):
            continue

        matched = None
        for chapter in sorted_chapters:
            if chapter.id in assigned:
                continue
            if start <= chapter.word_start_index <= end:
                matched = chapter
                assigned.add(chapter.id)
                break

        paragraphs.append(
            WordParagraph(
                words=list(words[start : end + 1]),
                start_index=start,
                end_index=end,
                chapter_title=matched.title if matched else None,
                chapter_level=matched.level if matched else 0,
            )
        )

    return paragraphs


def find_paragraph_for_word_index(
    paragraphs: Sequence[WordParagraph], word_index: int
) -> int:
    """Index of the paragraph containing ``word_index``, or -1."""
    for i, paragraph in enumerate(paragraphs):
        if paragraph.start_index <= word_index <= paragraph.end_index:
            return i
    return -1
