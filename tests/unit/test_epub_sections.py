from rsvp_reader.core.content_processor import SectionText
from rsvp_reader.core.epub_parser import SectionFold, find_toc_entry, fold_section
from rsvp_reader.models.document import SpineSection, TOCEntry

TOC = [
    TOCEntry(
        label="Part One",
        href="Text/part1.xhtml",
        children=[
            TOCEntry(label=" Chapter 1 ", href="Text/chapter1.xhtml#start"),
            TOCEntry(
                label="Chapter 2",
                href="Text/chapter2.xhtml",
                children=[TOCEntry(label="Scene", href="Text/scene.xhtml")],
            ),
        ],
    ),
    TOCEntry(label="Grouping", href="", children=[TOCEntry(label="", href="Text/untitled.xhtml")]),
    TOCEntry(label="Epilogue", href="OEBPS/Text/epilogue.xhtml"),
]


class TestFindTocEntry:
    def test_exact_match_top_level(self) -> None:
        match = find_toc_entry(TOC, "Text/part1.xhtml")
        assert match is not None
        assert (match.label, match.level) == ("Part One", 0)

    def test_anchor_is_ignored(self) -> None:
        match = find_toc_entry(TOC, "Text/chapter1.xhtml")
        assert match is not None
        assert (match.label, match.level) == (" Chapter 1 ", 1)

    def test_nested_level(self) -> None:
        match = find_toc_entry(TOC, "Text/scene.xhtml#s1")
        assert match is not None
        assert match.level == 2

    def test_suffix_match_either_direction(self) -> None:
        assert find_toc_entry(TOC, "Text/epilogue.xhtml").label == "Epilogue"
        assert find_toc_entry(TOC, "/book/OEBPS/Text/part1.xhtml").label == "Part One"

    def test_entry_without_href_does_not_match(self) -> None:
        match = find_toc_entry(TOC, "Text/untitled.xhtml")
        assert match is not None
        assert match.level == 1
        assert match.label == ""

    def test_no_match(self) -> None:
        assert find_toc_entry(TOC, "Text/appendix.xhtml") is None
        assert find_toc_entry(TOC, "") is None
        assert find_toc_entry([], "Text/part1.xhtml") is None

    def test_first_match_in_pre_order_wins(self) -> None:
        toc = [
            TOCEntry(label="Outer", href="a.xhtml#x", children=[TOCEntry(label="Inner", href="a.xhtml")]),
        ]
        assert find_toc_entry(toc, "a.xhtml").label == "Outer"


class TestFoldSection:
    def test_offsets_breaks_and_emits_chapter(self) -> None:
        state = SectionFold()
        state = fold_section(
            state,
            SpineSection(id="c1", href="Text/chapter1.xhtml"),
            SectionText(text="One two.  Three!!!", paragraph_starts=[0, 2]),
            TOC,
        )
        state = fold_section(
            state,
            SpineSection(id="c2", href="Text/chapter2.xhtml"),
            SectionText(text="Four five six", paragraph_starts=[0, 1]),
            TOC,
        )

        assert state.word_index == 6
        assert state.paragraph_breaks == [0, 2, 4]
        assert state.texts == ["One two. Three!", "Four five six"]
        assert [(c.id, c.title, c.level) for c in state.chapters] == [
            ("c1", "Chapter 1", 1),
            ("c2", "Chapter 2", 1),
        ]
        assert [(c.word_start_index, c.word_end_index) for c in state.chapters] == [
            (0, 2),
            (3, 5),
        ]

    def test_does_not_mutate_previous_state(self) -> None:
        first = SectionFold()
        second = fold_section(
            first, SpineSection(id="x", href="x.xhtml"), SectionText("a b", [0, 1]), []
        )

        assert first.word_index == 0
        assert first.paragraph_breaks == [0]
        assert second.paragraph_breaks == [0, 1]

    def test_blank_label_gets_numbered_title(self) -> None:
        state = fold_section(
            SectionFold(),
            SpineSection(id="", href="Text/untitled.xhtml"),
            SectionText("Some words", [0]),
            TOC,
        )

        assert state.chapters[0].title == "Chapter 1"
        assert state.chapters[0].id == "Text/untitled.xhtml"

    def test_unmatched_section_adds_words_only(self) -> None:
        state = fold_section(
            SectionFold(),
            SpineSection(id="cover", href="cover.xhtml"),
            SectionText("Cover page", [0]),
            TOC,
        )

        assert state.chapters == []
        assert state.word_index == 2

    def test_empty_section_emits_nothing(self) -> None:
        state = fold_section(
            SectionFold(),
            SpineSection(id="p1", href="Text/part1.xhtml"),
            SectionText("   ", [0]),
            TOC,
        )

        assert state.chapters == []
        assert state.texts == []
        assert state.word_index == 0

    def test_to_content(self) -> None:
        state = fold_section(
            SectionFold(),
            SpineSection(id="c1", href="Text/chapter1.xhtml"),
            SectionText("Hello there", [0]),
            TOC,
        )
        content = state.to_content()

        assert content.text == "Hello there"
        assert content.has_toc is True
        assert content.paragraph_breaks == [0]
