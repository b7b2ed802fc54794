"""Tests for document level parsing."""

import logging

import pytest

from bibparse import parse
from bibparse.config import ParserConfig
from bibparse.document import parse_document
from bibparse.exceptions import IncompleteInputError, ParseError
from bibparse.model import Comment, Entry, Preamble, StringMacro

TWO_ENTRIES = """@article {label,
    title = "article",
    author = {somebody},
    date = 2000,
}

@book {labeltwo,
    title = "book",
    author = {somebody else},
    date = 2000,
}"""


def test_bib_file() -> None:
    """Back-to-back entries are returned in input order."""
    items = parse(TWO_ENTRIES)

    assert items == [
        Entry(
            entry_type="ARTICLE",
            label="label",
            tags={"title": "article", "author": "somebody", "date": "2000"},
        ),
        Entry(
            entry_type="BOOK",
            label="labeltwo",
            tags={"title": "book", "author": "somebody else", "date": "2000"},
        ),
    ]


def test_mixed_items_keep_order() -> None:
    """All item kinds are kept, in order, without deduplication."""
    text = """
@STRING{jan = {January}}
@PREAMBLE{"\\makeatletter"}
@article{first, title = {One}}
@COMMENT{not retained}
@article{first, title = {One}}
"""
    items = parse(text)

    assert items == [
        StringMacro({"jan": "January"}),
        Preamble(),
        Entry(entry_type="ARTICLE", label="first", tags={"title": "One"}),
        Comment(),
        Entry(entry_type="ARTICLE", label="first", tags={"title": "One"}),
    ]


def test_empty_and_blank_documents() -> None:
    """Documents without items parse to an empty list."""
    assert parse("") == []
    assert parse(" \n\t\r\n") == []


def test_trailing_garbage_is_discarded(caplog: pytest.LogCaptureFixture) -> None:
    """Unrecognized trailing content is dropped without an error."""
    text = TWO_ENTRIES + "\n\nthis is not an item @ all"

    with caplog.at_level(logging.WARNING, logger="bibparse"):
        end, items = parse_document(text)

    assert len(items) == 2
    assert text[end:] == "this is not an item @ all"
    assert "Discarding" in caplog.text


def test_parsing_stops_at_first_unrecognized_item() -> None:
    """Items after unrecognized content are dropped as well."""
    text = "@article{a, x = 1}\n% a line comment\n@article{b, x = 2}"
    items = parse(text)
    assert items == [Entry(entry_type="ARTICLE", label="a", tags={"x": "1"})]


def test_strict_mode_rejects_trailing_garbage() -> None:
    """In strict mode the whole input must be consumed."""
    text = TWO_ENTRIES + "\ntrailing"

    with pytest.raises(ParseError):
        parse(text, ParserConfig(strict=True))

    assert len(parse(TWO_ENTRIES, ParserConfig(strict=True))) == 2


def test_unmatched_brace_fails_whole_document() -> None:
    """A malformed recognized item fails the parse; no items are returned."""
    text = """@article{good, title = {Fine}}

@article{bad,
    title = {Unclosed {brace},
}
"""
    with pytest.raises(IncompleteInputError):
        parse(text)


def test_trailing_comma_matches_no_trailing_comma() -> None:
    """Trailing commas do not change the parsed document."""
    with_comma = "@misc{x, a = {1}, b = 2,}"
    without_comma = "@misc{x, a = {1}, b = 2}"
    assert parse(with_comma) == parse(without_comma)


def test_nested_braces_in_document() -> None:
    """Protected capitalization survives as literal braces."""
    items = parse('@article{x, title = "A {Quoted} Term"}')
    assert isinstance(items[0], Entry)
    assert items[0].tags["title"] == "A {Quoted} Term"


def test_parse_calls_are_independent() -> None:
    """Each parse builds fresh items."""
    first = parse("@misc{x, a = 1}")
    second = parse("@misc{x, a = 1}")
    assert first == second
    assert first is not second
    assert first[0].tags is not second[0].tags
