"""Document ingestion and RSVP display math for speed reading."""

from rsvp_reader.core.errors import DocumentReadError, UnsupportedFormatError
from rsvp_reader.core.parser_factory import ParserFactory, parse_file
from rsvp_reader.models.document import Chapter, ParsedContent

__version__ = "0.1.0"

__all__ = [
    "Chapter",
    "DocumentReadError",
    "ParsedContent",
    "ParserFactory",
    "UnsupportedFormatError",
    "parse_file",
]
