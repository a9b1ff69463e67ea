"""Data models for ingested documents (EPUB and PDF)."""

from pydantic import BaseModel, ConfigDict, Field, computed_field


class TOCEntry(BaseModel):
    """Single entry in table of contents."""

    label: str
    href: str = ""
    children: list["TOCEntry"] = Field(default_factory=list)


class SpineSection(BaseModel):
    """A content document in reading order."""

    id: str = ""
    href: str


class Chapter(BaseModel):
    """Chapter span within the global word stream."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    level: int = 0
    word_start_index: int
    word_end_index: int


class DocumentMetadata(BaseModel):
    """Book-level metadata."""

    model_config = ConfigDict(frozen=True)

    title: str
    authors: list[str] = Field(default_factory=list)
    language: str | None = None
    source_format: str = "epub"  # "epub" | "pdf"


class ParsedContent(BaseModel):
    """Complete result of ingesting one document."""

    model_config = ConfigDict(frozen=True)

    text: str
    chapters: list[Chapter] = Field(default_factory=list)
    paragraph_breaks: list[int] = Field(default_factory=list)
    metadata: DocumentMetadata | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_toc(self) -> bool:
        """Whether any chapter could be matched against the ToC."""
        return len(self.chapters) > 0

    @property
    def words(self) -> list[str]:
        """The word stream every index in this result refers to."""
        return self.text.split()
