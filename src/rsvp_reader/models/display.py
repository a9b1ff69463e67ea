"""Data models for word-by-word display."""

from pydantic import BaseModel, Field


class WordSplit(BaseModel):
    """A word cut around its ORP character for highlighting."""

    before: str = ""
    orp: str = ""
    after: str = ""


class WordFrame(BaseModel):
    """Window of words around the current position."""

    subset: list[str]
    center_offset: int = 0


class WordParagraph(BaseModel):
    """Contiguous run of words shown as one item of a virtual list."""

    words: list[str] = Field(default_factory=list)
    start_index: int
    end_index: int
    chapter_title: str | None = None  # Set when a chapter starts here
    chapter_level: int = 0
