"""Turn extracted document text and markup into a clean word stream."""

import re
import warnings
from dataclasses import dataclass, field

from bs4 import BeautifulSoup, XMLParsedAsHTMLWarning

from rsvp_reader.config import PDF_PARAGRAPH_WIDTH

# Suppress XML parsing warnings - EPUB files often use XHTML
warnings.filterwarnings("ignore", category=XMLParsedAsHTMLWarning)

_WHITESPACE_RE = re.compile(r"\s+")
_REPEATED_STOP_RE = re.compile(r"([.!?])\1+")


def clean_text(text: str) -> str:
    """Collapse whitespace and repeated sentence marks, then trim.

    "What???  Really!!!" -> "What? Really!"
    """
    text = _WHITESPACE_RE.sub(" ", text)
    text = _REPEATED_STOP_RE.sub(r"\1", text)
    return text.strip()


def synthetic_paragraph_breaks(
    word_count: int, width: int = PDF_PARAGRAPH_WIDTH
) -> list[int]:
    """Paragraph starts every ``width`` words for text without markup."""
    if width <= 0:
        return [0] if word_count > 0 else []
    return list(range(0, word_count, width))


@dataclass
class SectionText:
    """Text of one content document with its block boundaries."""

    text: str = ""
    # Word offsets (within ``text``) where each block starts
    paragraph_starts: list[int] = field(default_factory=list)


class ContentProcessor:
    """Segment XHTML content documents into block-level text."""

    BLOCK_TAGS = ["p", "h1", "h2", "h3", "h4", "h5", "h6", "div", "li", "blockquote"]
    # A block containing one of these is a wrapper; its children are counted
    NESTED_BLOCK_TAGS = ["p", "div"]

    def extract_blocks(self, html_content: bytes | str) -> SectionText:
        """Collect block texts and the word offset each one starts at."""
        soup = BeautifulSoup(html_content, "lxml")

        for tag in soup(["script", "style"]):
            tag.decompose()

        body = soup.body or soup
        elements = body.find_all(self.BLOCK_TAGS)
        if not elements:
            return SectionText(text=body.get_text(), paragraph_starts=[0])

        parts: list[str] = []
        starts: list[int] = []
        word_count = 0

        for element in elements:
            # Skip wrappers to avoid counting text twice
            if element.find(self.NESTED_BLOCK_TAGS):
                continue

            text = element.get_text().strip()
            if not text:
                continue

            starts.append(word_count)
            word_count += len(text.split())
            parts.append(text)

        if not parts:
            return SectionText(text=body.get_text(), paragraph_starts=[0])

        return SectionText(text=" ".join(parts), paragraph_starts=starts)
