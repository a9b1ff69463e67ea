from pathlib import Path

import pytest
from ebooklib import epub

from book_builders import build_epub, build_pdf


@pytest.fixture(scope="module")
def book_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    return tmp_path_factory.mktemp("books")


@pytest.fixture(scope="module")
def two_chapter_epub(book_dir: Path) -> Path:
    return build_epub(
        book_dir / "two_chapters.epub",
        [
            ("chapter_one", "Chapter One", "<h1>Chapter One</h1>"),
            ("chapter_two", "Chapter Two", "<h1>Chapter Two</h1>"),
        ],
    )


@pytest.fixture(scope="module")
def paragraph_epub(book_dir: Path) -> Path:
    return build_epub(
        book_dir / "paragraphs.epub",
        [
            (
                "opening",
                "Opening",
                "<h1>Opening</h1><p>It was a dark night.</p><p>The rain fell!!!</p>",
            ),
            (
                "middle",
                "Middle",
                "<div><p>Nested   paragraph one.</p><p>Nested two.</p></div>",
            ),
        ],
    )


@pytest.fixture(scope="module")
def nested_toc_epub(book_dir: Path) -> Path:
    return build_epub(
        book_dir / "nested.epub",
        [
            ("cover", "Cover", "<p>Cover text</p>"),
            ("part_one", "Part One", "<h1>Part One</h1>"),
            ("scene_a", "Scene A", "<p>First scene words.</p>"),
            ("scene_b", "Scene B", "<p>Second scene.</p>"),
        ],
        toc=[
            (
                epub.Section("Part One", href="part_one.xhtml"),
                [
                    epub.Link("scene_a.xhtml", "Scene A", "scene_a"),
                    epub.Link("scene_b.xhtml#top", "  ", "scene_b"),
                ],
            ),
        ],
    )


@pytest.fixture(scope="module")
def no_toc_epub(book_dir: Path) -> Path:
    return build_epub(
        book_dir / "no_toc.epub",
        [("only", "Only", "<p>Just some text.</p>")],
        toc=[],
    )


@pytest.fixture(scope="module")
def punctuation_pdf(book_dir: Path) -> Path:
    return build_pdf(
        book_dir / "punctuation.pdf",
        [["What???", "Really!!!"]],
        title="Punctuation",
        author="Jane Doe, John Roe",
    )


@pytest.fixture(scope="module")
def long_pdf(book_dir: Path) -> Path:
    words = [f"w{i:03d}" for i in range(250)]
    lines = [" ".join(words[i : i + 10]) for i in range(0, 250, 10)]
    return build_pdf(book_dir / "long.pdf", [lines[:15], lines[15:]])


@pytest.fixture(scope="module")
def ncx_only_epub(book_dir: Path) -> Path:
    return build_epub(
        book_dir / "ncx_only.epub",
        [("greeting", "Greeting", "<p>Hello world</p>")],
        nav=False,
    )


@pytest.fixture(scope="module")
def dangling_spine_epub(book_dir: Path) -> Path:
    return build_epub(
        book_dir / "dangling_spine.epub",
        [
            ("chapter_one", "Chapter One", "<h1>Chapter One</h1>"),
            ("chapter_two", "Chapter Two", "<h1>Chapter Two</h1>"),
        ],
        spine=["chapter_one", "ghost", "chapter_two"],
    )
