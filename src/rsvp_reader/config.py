"""Reader settings and tuning constants."""

from dataclasses import dataclass

# Word count between synthetic paragraph breaks for PDFs, which carry no
# paragraph markup through text extraction.
PDF_PARAGRAPH_WIDTH = 100

# Chunk size for display grouping when no real paragraph breaks exist.
DEFAULT_WORDS_PER_PARAGRAPH = 50

DEFAULT_WPM = 300
FALLBACK_WORD_DELAY_MS = 200.0
DEFAULT_PUNCTUATION_MULTIPLIER = 2.0
COMMA_MULTIPLIER = 1.5

# Words at or above this many characters get extra display time when a
# word-length multiplier is configured.
LONG_WORD_THRESHOLD = 12


@dataclass
class ReaderSettings:
    """Configuration for timing and layout of an RSVP session."""

    wpm: int = DEFAULT_WPM
    pause_on_punctuation: bool = True
    punctuation_multiplier: float = DEFAULT_PUNCTUATION_MULTIPLIER
    word_length_multiplier: float = 0  # Percentage points per extra char
    pause_every_words: int = 0  # 0 = disabled
    periodic_pause_ms: float = 0
    frame_size: int = 1
    words_per_paragraph: int = DEFAULT_WORDS_PER_PARAGRAPH
