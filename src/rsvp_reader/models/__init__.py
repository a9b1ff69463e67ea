"""Data models."""

from rsvp_reader.models.display import (
    WordFrame,
    WordParagraph,
    WordSplit,
)
from rsvp_reader.models.document import (
    Chapter,
    DocumentMetadata,
    ParsedContent,
    SpineSection,
    TOCEntry,
)

__all__ = [
    # Document models
    "TOCEntry",
    "SpineSection",
    "Chapter",
    "DocumentMetadata",
    "ParsedContent",
    # Display models
    "WordSplit",
    "WordFrame",
    "WordParagraph",
]
