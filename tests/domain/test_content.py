"""Tests for header, seed and marker rendering."""

import pytest

from notectl.domain.content import (
    HEADER_DELIMITER,
    NoteHeader,
    format_categories,
    format_marker,
    insert_marker,
    parse_header,
    render_header,
    render_note,
    render_seed,
)

HEADER = NoteHeader(
    title="My First Note!",
    date="2020-10-08",
    categories=("economics", "politics"),
    orig_name="20201008_093000--economics-politics--my-first-note.txt",
    orig_id="20201008_093000",
)

EXPECTED_HEADER = (
    "title: My First Note!\n"
    "date: 2020-10-08\n"
    "category: Economics, Politics\n"
    "orig_name: 20201008_093000--economics-politics--my-first-note.txt\n"
    "orig_id: 20201008_093000\n"
    "------------------------\n"
    "\n"
)


class TestHeader:
    def test_render(self) -> None:
        assert render_header(HEADER) == EXPECTED_HEADER

    def test_delimiter_is_24_dashes(self) -> None:
        assert HEADER_DELIMITER == "-" * 24

    def test_format_categories(self) -> None:
        assert format_categories(["economics", "politics"]) == "Economics, Politics"
        assert format_categories([]) == ""

    def test_parse_round_trip(self) -> None:
        assert parse_header(render_header(HEADER) + "body text\n") == HEADER

    def test_parse_no_categories(self) -> None:
        header = NoteHeader("T", "2020-10-08", (), "20201008_093000----t.txt", "20201008_093000")
        assert parse_header(render_header(header)) == header

    def test_title_with_colon(self) -> None:
        header = NoteHeader("Re: ideas", "2020-10-08", (), "20201008_093000----re-ideas.txt", "20201008_093000")
        parsed = parse_header(render_header(header))
        assert parsed is not None
        assert parsed.title == "Re: ideas"

    def test_parse_without_delimiter(self) -> None:
        assert parse_header("title: x\ndate: y\n") is None

    def test_parse_missing_field(self) -> None:
        text = "title: x\ndate: y\ncategory: \norig_name: n\n" + HEADER_DELIMITER + "\n"
        assert parse_header(text) is None

    def test_fields_after_delimiter_ignored(self) -> None:
        text = HEADER_DELIMITER + "\ntitle: x\n"
        assert parse_header(text) is None


class TestSeed:
    def test_render_seed(self) -> None:
        assert render_seed("one\ntwo") == "* * *\n\n> one\n> two\n"

    def test_blank_lines_are_bare_quote_marks(self) -> None:
        assert render_seed("one\n\ntwo\n") == "* * *\n\n> one\n>\n> two\n"

    def test_custom_separator(self) -> None:
        assert render_seed("x", separator="~~~").startswith("~~~\n\n")

    def test_note_without_seed_is_header_only(self) -> None:
        assert render_note(HEADER) == EXPECTED_HEADER
        assert render_note(HEADER, "   \n") == EXPECTED_HEADER

    def test_note_with_seed(self) -> None:
        text = render_note(HEADER, "quoted passage")
        assert text == EXPECTED_HEADER + "\n* * *\n\n> quoted passage\n"


class TestInsertMarker:
    def test_format(self) -> None:
        assert format_marker("20201008_093000") == "^20201008_093000"

    def test_at_position(self) -> None:
        assert insert_marker("see here.", "20201008_093000", 8) == "see here^20201008_093000."

    @pytest.mark.parametrize("position,expected", [(-5, "^1abc"), (99, "abc^1")])
    def test_position_is_clamped(self, position: int, expected: str) -> None:
        assert insert_marker("abc", "1", position) == expected

    def test_end_of_body(self) -> None:
        assert insert_marker("hello\n", "20201008_093000") == "hello ^20201008_093000\n"

    def test_empty_text(self) -> None:
        assert insert_marker("", "20201008_093000") == "^20201008_093000\n"

    def test_before_reference_block(self) -> None:
        text = "body\n\n^^ 20201008_093000----a.txt\n"
        assert insert_marker(text, "20201009_100000") == (
            "body ^20201009_100000\n\n^^ 20201008_093000----a.txt\n"
        )

    def test_header_only_note_opens_body(self) -> None:
        text = insert_marker(EXPECTED_HEADER, "20201009_100000")
        assert text == EXPECTED_HEADER + "^20201009_100000\n\n"
        assert parse_header(text) == HEADER
