"""PDF text extraction into a flat word stream."""

import io
import logging
from pathlib import Path

# Suppress warnings about malformed PDF object references from PDF libraries
logging.getLogger("pdfminer").setLevel(logging.ERROR)
logging.getLogger("pypdf").setLevel(logging.ERROR)

import pdfplumber
import pypdf
from pypdf.errors import EmptyFileError, FileNotDecryptedError, PdfReadError

from rsvp_reader.config import PDF_PARAGRAPH_WIDTH
from rsvp_reader.core.content_processor import clean_text, synthetic_paragraph_breaks
from rsvp_reader.core.errors import DocumentReadError
from rsvp_reader.core.parser_factory import DocumentParser
from rsvp_reader.core.source import DocumentSource
from rsvp_reader.core.timing import parse_text
from rsvp_reader.models.document import DocumentMetadata, ParsedContent

log = logging.getLogger(__name__)


def join_page_items(pages: list[list[str]]) -> str:
    """Join per-page text items into one cleaned string.

    Items on a page are separated by single spaces and every page is
    followed by a space before cleaning.
    """
    full_text = "".join(" ".join(items) + " " for items in pages)
    return clean_text(full_text)


class PdfParser(DocumentParser):
    """Parse PDF files into text with synthetic paragraph breaks.

    PDF text extraction carries no paragraph markup, so breaks are placed
    every ``paragraph_width`` words and no chapters are produced.
    """

    def __init__(
        self, source: DocumentSource, paragraph_width: int = PDF_PARAGRAPH_WIDTH
    ):
        self.source = source
        self.paragraph_width = paragraph_width

    def parse(self) -> ParsedContent:
        """Parse the PDF and return its word stream."""
        data = self.source.read_bytes()
        reader = self._open_reader(data)

        pages = self._extract_page_items(data) if len(reader.pages) else []
        text = join_page_items(pages)
        word_count = len(parse_text(text))
        log.info(f"Extracted {word_count} words from {len(pages)} PDF page(s)")

        return ParsedContent(
            text=text,
            chapters=[],
            paragraph_breaks=synthetic_paragraph_breaks(
                word_count, self.paragraph_width
            ),
            metadata=self._get_metadata(reader),
        )

    def get_metadata(self) -> DocumentMetadata:
        """Extract document metadata from the PDF info dictionary."""
        return self._get_metadata(self._open_reader(self.source.read_bytes()))

    def _open_reader(self, data: bytes) -> pypdf.PdfReader:
        try:
            reader = pypdf.PdfReader(io.BytesIO(data))
            # Page tree access surfaces encryption and xref errors early
            len(reader.pages)
        except FileNotDecryptedError:
            raise DocumentReadError("PDF is encrypted. Please decrypt first.")
        except EmptyFileError:
            raise DocumentReadError("PDF file is empty.")
        except PdfReadError as e:
            raise DocumentReadError(f"PDF appears corrupted: {e}")
        return reader

    def _extract_page_items(self, data: bytes) -> list[list[str]]:
        """Text items of every page, in page order."""
        pages: list[list[str]] = []
        try:
            with pdfplumber.open(io.BytesIO(data)) as pdf:
                for page_num, page in enumerate(pdf.pages):
                    items = [
                        word["text"] for word in page.extract_words() if word.get("text")
                    ]
                    log.debug(f"Page {page_num + 1}: {len(items)} text items")
                    pages.append(items)
        except Exception as e:
            # pypdf accepted the file but pdfminer could not lay out its text
            raise DocumentReadError(f"PDF text could not be extracted: {e}")
        return pages

    def _get_metadata(self, reader: pypdf.PdfReader) -> DocumentMetadata:
        info = reader.metadata or {}

        title = str(info.get("/Title") or "").strip()
        if not title:
            title = Path(self.source.name).stem or "Untitled"

        authors: list[str] = []
        if info.get("/Author"):
            author_str = str(info.get("/Author"))
            # Split on common separators
            if "," in author_str:
                authors = [a.strip() for a in author_str.split(",")]
            elif ";" in author_str:
                authors = [a.strip() for a in author_str.split(";")]
            else:
                authors = [author_str]

        return DocumentMetadata(
            title=title,
            authors=authors,
            language=None,  # Not standard in PDF metadata
            source_format="pdf",
        )
