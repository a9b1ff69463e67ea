"""Per-word timing math for RSVP display.

Every function here is pure and total: bad input maps to a documented
fallback value instead of an exception.
"""

import math

from rsvp_reader.config import (
    COMMA_MULTIPLIER,
    DEFAULT_PUNCTUATION_MULTIPLIER,
    FALLBACK_WORD_DELAY_MS,
    LONG_WORD_THRESHOLD,
    ReaderSettings,
)
from rsvp_reader.models.display import WordSplit

SENTENCE_END_MARKS = ".!?;:"


def parse_text(text: str | None) -> list[str]:
    """Split text into words on runs of whitespace."""
    if not text or not isinstance(text, str):
        return []
    return text.split()


def _letter_count(word: str) -> int:
    return sum(1 for char in word if char.isalpha())


def get_orp_index(word: str | None) -> int:
    """Return which letter (0-based, letters only) the eye should fixate on.

    Only Unicode letters are counted, so leading quotes or trailing
    punctuation do not shift the fixation point.
    """
    if not word or not isinstance(word, str):
        return 0

    letters = _letter_count(word)
    if letters <= 3:
        return 0
    if letters <= 5:
        return 1
    if letters <= 9:
        return 2
    if letters <= 12:
        return 3
    return math.floor(math.log2(letters - 1)) + 1


def get_actual_orp_index(word: str | None) -> int:
    """Map the ORP letter index to a character index in the raw word."""
    if not word or not isinstance(word, str):
        return 0

    orp_index = get_orp_index(word)
    letters_seen = 0
    for i, char in enumerate(word):
        if char.isalpha():
            if letters_seen == orp_index:
                return i
            letters_seen += 1

    return min(orp_index, len(word) - 1)


def get_word_delay(
    word: str | None,
    wpm: float,
    pause_on_punctuation: bool = True,
    punctuation_multiplier: float = DEFAULT_PUNCTUATION_MULTIPLIER,
    word_length_multiplier: float = 0,
) -> float:
    """Display time for a word in milliseconds.

    Long words (12+ characters) get ``word_length_multiplier`` percentage
    points of extra time per character past the threshold. Sentence marks
    then multiply by ``punctuation_multiplier`` and commas by 1.5.
    """
    if not isinstance(wpm, (int, float)) or not math.isfinite(wpm) or wpm <= 0:
        return FALLBACK_WORD_DELAY_MS

    delay = 60000 / wpm
    if not word or not isinstance(word, str):
        return delay

    if word_length_multiplier > 0 and len(word) >= LONG_WORD_THRESHOLD:
        delay *= 1 + (word_length_multiplier / 100) * (len(word) - LONG_WORD_THRESHOLD)

    if pause_on_punctuation:
        if word[-1] in SENTENCE_END_MARKS:
            return delay * punctuation_multiplier
        if word[-1] == ",":
            return delay * COMMA_MULTIPLIER

    return delay


def format_time_remaining(remaining_words: int, wpm: float) -> str:
    """Format the time left at ``wpm`` as ``m:ss``."""
    if not remaining_words or remaining_words <= 0 or not wpm or wpm <= 0:
        return "0:00"
    # NaN in either argument
    if not math.isfinite(remaining_words / wpm):
        return "0:00"

    seconds = math.ceil(remaining_words / wpm * 60)
    minutes, secs = divmod(seconds, 60)
    return f"{minutes}:{secs:02d}"


def split_word_for_display(word: str | None) -> WordSplit:
    """Cut a word into the text before, at and after its ORP character."""
    if not word or not isinstance(word, str):
        return WordSplit()

    orp_index = get_actual_orp_index(word)
    return WordSplit(
        before=word[:orp_index],
        orp=word[orp_index] if orp_index < len(word) else "",
        after=word[orp_index + 1 :],
    )


def should_pause_at_word(word_index: int, pause_every_words: int) -> bool:
    """True on every ``pause_every_words``-th word, never on the first."""
    if pause_every_words <= 0 or word_index <= 0:
        return False
    return word_index % pause_every_words == 0


def estimate_reading_time(words: list[str], settings: ReaderSettings) -> float:
    """Total display time in milliseconds for ``words`` under ``settings``."""
    total = 0.0
    for index, word in enumerate(words):
        total += get_word_delay(
            word,
            settings.wpm,
            settings.pause_on_punctuation,
            settings.punctuation_multiplier,
            settings.word_length_multiplier,
        )
        if should_pause_at_word(index, settings.pause_every_words):
            total += settings.periodic_pause_ms
    return total
