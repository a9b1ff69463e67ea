"""Factory for creating document parsers based on file format."""

import logging
from abc import ABC, abstractmethod

from rsvp_reader.core.errors import UnsupportedFormatError
from rsvp_reader.core.source import DocumentSource, SourceLike
from rsvp_reader.models.document import DocumentMetadata, ParsedContent

log = logging.getLogger(__name__)


class DocumentParser(ABC):
    """Abstract base class for document parsers."""

    @abstractmethod
    def parse(self) -> ParsedContent:
        """Parse the document and return its word stream."""
        pass

    @abstractmethod
    def get_metadata(self) -> DocumentMetadata:
        """Extract document metadata."""
        pass


class ParserFactory:
    """Factory for creating appropriate parser based on file format."""

    SUPPORTED_FORMATS = {
        ".epub": "epub",
        ".pdf": "pdf",
    }

    @classmethod
    def create(cls, source: SourceLike) -> DocumentParser:
        """Create appropriate parser for the given file.

        Args:
            source: Path, open binary file or DocumentSource

        Returns:
            DocumentParser instance for the file type

        Raises:
            UnsupportedFormatError: If the extension is not .pdf or .epub
        """
        source = DocumentSource.coerce(source)
        file_format = cls.detect_format(source.name)

        if file_format == "epub":
            from rsvp_reader.core.epub_parser import EpubParser

            return EpubParser(source)
        elif file_format == "pdf":
            from rsvp_reader.core.pdf_parser import PdfParser

            return PdfParser(source)

        raise UnsupportedFormatError(source.name.lower())

    @classmethod
    def detect_format(cls, file_name: str) -> str:
        """Detect file format from extension.

        Returns:
            Format string ("epub", "pdf", or "unknown")
        """
        lowered = file_name.lower()
        for suffix, file_format in cls.SUPPORTED_FORMATS.items():
            if lowered.endswith(suffix):
                return file_format
        return "unknown"

    @classmethod
    def is_supported(cls, file_name: str) -> bool:
        """Check if file format is supported."""
        return cls.detect_format(file_name) != "unknown"

    @classmethod
    def supported_extensions(cls) -> str:
        """Comma-separated list for file pickers, e.g. ".pdf,.epub"."""
        return ",".join(sorted(cls.SUPPORTED_FORMATS, reverse=True))


def parse_file(source: SourceLike) -> ParsedContent:
    """Detect the format of ``source`` and ingest it."""
    parser = ParserFactory.create(source)
    log.info(f"Parsing with {type(parser).__name__}")
    return parser.parse()
