"""EPUB parsing using ebooklib."""

import io
import logging
import zipfile
from dataclasses import dataclass, field
from pathlib import Path

from ebooklib import epub

from rsvp_reader.core.content_processor import (
    ContentProcessor,
    SectionText,
    clean_text,
)
from rsvp_reader.core.errors import DocumentReadError
from rsvp_reader.core.parser_factory import DocumentParser
from rsvp_reader.core.source import DocumentSource
from rsvp_reader.core.timing import parse_text
from rsvp_reader.models.document import (
    Chapter,
    DocumentMetadata,
    ParsedContent,
    SpineSection,
    TOCEntry,
)

log = logging.getLogger(__name__)


# =============================================================================
# Table of contents lookup
# =============================================================================


@dataclass
class TocMatch:
    """A ToC entry matched to a spine section."""

    label: str
    level: int


def _strip_anchor(href: str) -> str:
    return href.split("#")[0]


def find_toc_entry(
    toc: list[TOCEntry], href: str, level: int = 0
) -> TocMatch | None:
    """Depth-first search for the ToC entry pointing at ``href``.

    Anchors are ignored and either reference may be a suffix of the other,
    since ToC and spine can disagree on relative vs absolute paths. Entries
    are checked before their children; the first match wins.
    """
    target = _strip_anchor(href)
    if not target:
        return None

    for entry in toc:
        entry_href = _strip_anchor(entry.href)
        # Grouping entries without a target must not match everything
        if entry_href and (
            entry_href == target
            or entry_href.endswith(target)
            or target.endswith(entry_href)
        ):
            return TocMatch(label=entry.label, level=level)

        if entry.children:
            nested = find_toc_entry(entry.children, href, level + 1)
            if nested:
                return nested

    return None


# =============================================================================
# Section accumulation
# =============================================================================


@dataclass
class SectionFold:
    """Running state while spine sections are appended to the word stream."""

    word_index: int = 0
    texts: list[str] = field(default_factory=list)
    chapters: list[Chapter] = field(default_factory=list)
    # First word always starts a paragraph
    paragraph_breaks: list[int] = field(default_factory=lambda: [0])

    def to_content(self, metadata: DocumentMetadata | None = None) -> ParsedContent:
        return ParsedContent(
            text=" ".join(self.texts).strip(),
            chapters=self.chapters,
            paragraph_breaks=self.paragraph_breaks,
            metadata=metadata,
        )


def fold_section(
    state: SectionFold,
    section: SpineSection,
    section_text: SectionText,
    toc: list[TOCEntry],
) -> SectionFold:
    """Return the state after appending one section's words."""
    cleaned = clean_text(section_text.text)
    word_count = len(parse_text(cleaned))
    start = state.word_index

    # Local start 0 is the section boundary, not a new paragraph break
    breaks = state.paragraph_breaks + [
        start + local for local in section_text.paragraph_starts if local > 0
    ]

    chapters = list(state.chapters)
    match = find_toc_entry(toc, section.href)
    if match and word_count:
        chapters.append(
            Chapter(
                id=section.id or section.href,
                title=match.label.strip() or f"Chapter {len(chapters) + 1}",
                level=match.level,
                word_start_index=start,
                word_end_index=start + word_count - 1,
            )
        )

    return SectionFold(
        word_index=start + word_count,
        texts=(state.texts + [cleaned]) if cleaned else list(state.texts),
        chapters=chapters,
        paragraph_breaks=breaks,
    )


# =============================================================================
# Archive reader
# =============================================================================


class TolerantEpubReader(epub.EpubReader):
    """EpubReader that treats a missing NCX or a broken NCX/nav as "no ToC".

    ebooklib reads the NCX while loading the manifest and the spine, so a
    bad navigation file would otherwise abort the whole book.
    """

    def read_file(self, name):
        try:
            return super().read_file(name)
        except KeyError:
            if not name.lower().endswith(".ncx"):
                raise
            log.warning(f"NCX file {name} is missing from the archive")
            return b""

    def _load_spine(self):
        # The spine list is set before the NCX lookup, so it survives
        try:
            super()._load_spine()
        except (epub.EpubException, AttributeError, KeyError) as e:
            log.warning(f"Could not locate NCX: {e}")
            self.book.toc = []

    def _parse_ncx(self, data):
        try:
            super()._parse_ncx(data)
        except Exception as e:
            log.warning(f"Could not parse NCX: {e}")
            self.book.toc = []

    def _parse_nav(self, data, base_path, navtype="toc"):
        try:
            super()._parse_nav(data, base_path, navtype=navtype)
        except Exception as e:
            log.warning(f"Could not parse {navtype} navigation: {e}")
            if navtype == "toc":
                self.book.toc = []


# =============================================================================
# EPUB Parser Class
# =============================================================================


class EpubParser(DocumentParser):
    """Parse EPUB files into text with chapters and paragraph breaks."""

    def __init__(self, source: DocumentSource):
        self.source = source
        self.processor = ContentProcessor()
        self.book = self._read_book()

    def parse(self) -> ParsedContent:
        """Walk the spine in reading order and build the word stream."""
        toc = self._load_toc()
        state = SectionFold()

        for section in self._get_spine():
            try:
                markup = self._load_markup(section)
                section_text = self.processor.extract_blocks(markup)
            except Exception as e:
                log.warning(f"Could not load section {section.id or section.href!r}: {e}")
                continue

            state = fold_section(state, section, section_text, toc)
            log.debug(f"Section {section.href}: words up to {state.word_index}")

        log.info(
            f"Parsed {state.word_index} words, {len(state.chapters)} chapter(s) "
            f"from {self.source.name}"
        )
        return state.to_content(self.get_metadata())

    def get_metadata(self) -> DocumentMetadata:
        """Extract book metadata."""
        title = self.book.get_metadata("DC", "title")
        authors = self.book.get_metadata("DC", "creator")
        language = self.book.get_metadata("DC", "language")

        return DocumentMetadata(
            title=title[0][0] if title else Path(self.source.name).stem or "Unknown Title",
            authors=[a[0] for a in authors] if authors else [],
            language=language[0][0] if language else None,
            source_format="epub",
        )

    def _read_book(self) -> epub.EpubBook:
        """Open the archive; the navigation document wins over NCX."""
        try:
            reader = TolerantEpubReader(
                io.BytesIO(self.source.read_bytes()), {"ignore_ncx": True}
            )
            book = reader.load()
            reader.process()
            return book
        except (zipfile.BadZipFile, epub.EpubException, KeyError) as e:
            raise DocumentReadError(f"EPUB could not be opened: {e}")

    def _get_spine(self) -> list[SpineSection]:
        """Resolve spine idrefs to content document references."""
        sections = []
        for entry in self.book.spine:
            idref = entry[0] if isinstance(entry, tuple) else entry
            item = self.book.get_item_with_id(idref)
            sections.append(
                SpineSection(id=idref, href=item.get_name() if item else "")
            )
        return sections

    def _load_markup(self, section: SpineSection) -> bytes:
        if not section.href:
            raise LookupError("spine item has no content reference")
        item = self.book.get_item_with_href(section.href)
        if item is None:
            raise LookupError(f"no manifest item for {section.href}")
        return item.get_content()

    def _load_toc(self) -> list[TOCEntry]:
        """Read the navigation tree, or nothing if the book has none."""
        try:
            return self._parse_toc_recursive(self.book.toc)
        except Exception as e:
            log.warning(f"Could not load ToC: {e}")
            return []

    def _parse_toc_recursive(self, toc_items) -> list[TOCEntry]:
        """Convert ebooklib Link/Section tuples into TOCEntry trees."""
        entries = []

        for item in toc_items or []:
            if isinstance(item, tuple):
                # Section with children: (Section, [children])
                section, children = item
                entries.append(
                    TOCEntry(
                        label=section.title or "",
                        href=getattr(section, "href", None) or "",
                        children=self._parse_toc_recursive(children),
                    )
                )
            else:
                entries.append(
                    TOCEntry(label=item.title or "", href=item.href or "")
                )

        return entries
