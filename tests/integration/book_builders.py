"""Deterministic EPUB and PDF fixtures for integration tests."""

import zipfile
from pathlib import Path

from ebooklib import epub
from reportlab.lib.pagesizes import LETTER
from reportlab.pdfgen import canvas


def build_epub(
    path: Path,
    sections: list[tuple[str, str, str]],
    toc: list | None = None,
    nav: bool = True,
    spine: list[str] | None = None,
) -> Path:
    """Write an EPUB whose spine is ``sections`` of (uid, label, body html).

    ``toc`` defaults to one link per section labelled with its label. With
    ``nav=False`` only the NCX carries the ToC. ``spine`` lists idrefs in
    reading order; ids that are not section uids are written as-is.
    """
    book = epub.EpubBook()
    book.set_identifier("rsvp-test-book")
    book.set_title("Test Book")
    book.set_language("en")
    book.add_author("Jane Doe")

    items = []
    for uid, label, body in sections:
        item = epub.EpubHtml(uid=uid, title=label, file_name=f"{uid}.xhtml", lang="en")
        item.content = body
        book.add_item(item)
        items.append(item)

    if toc is None:
        toc = [
            epub.Link(item.file_name, label, item.id)
            for item, (_, label, _) in zip(items, sections)
        ]
    book.toc = toc

    book.add_item(epub.EpubNcx())
    if nav:
        book.add_item(epub.EpubNav())

    if spine is None:
        book.spine = items
    else:
        by_id = {item.id: item for item in items}
        book.spine = [by_id.get(idref, idref) for idref in spine]

    epub.write_epub(str(path), book)
    return path


def rewrite_epub(source: Path, target: Path, replace: dict[str, bytes | None]) -> Path:
    """Copy an EPUB archive, swapping entry contents; ``None`` drops an entry."""
    with zipfile.ZipFile(source) as src, zipfile.ZipFile(target, "w") as dst:
        for info in src.infolist():
            if info.filename not in replace:
                dst.writestr(info, src.read(info.filename))
            elif replace[info.filename] is not None:
                dst.writestr(info, replace[info.filename])
    return target


def build_pdf(path: Path, pages: list[list[str]], title: str = "", author: str = "") -> Path:
    """Write a PDF with one text line per string, one list per page."""
    c = canvas.Canvas(str(path), pagesize=LETTER)
    if title:
        c.setTitle(title)
    if author:
        c.setAuthor(author)
    width, height = LETTER

    for lines in pages:
        text = c.beginText(40, height - 50)
        for line in lines:
            text.textLine(line)
        c.drawText(text)
        c.showPage()

    c.save()
    return path
