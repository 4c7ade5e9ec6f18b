"""Tests for reference parsing."""

import pytest

from scripture_tui.data.sample import BOOKS
from scripture_tui.query.parser import parse_reference, scan_book
from scripture_tui.query.types import (
    Exact,
    ExactSet,
    PatternError,
    QueryError,
    Range,
    RangeExt,
    ReferenceSyntaxError,
    Search,
)

GENESIS = 1
MATTHEW = 47
JOHN = 50
FIRST_JOHN = 69


def parse(text):
    return parse_reference(text, BOOKS)


class TestScanBook:
    """Test book token scanning."""

    def test_name_with_chapter(self):
        """Token should stop at the first digit after a letter."""
        assert scan_book("Jn 3:16") == (True, 3)

    def test_numbered_book(self):
        """Leading digits belong to the book token."""
        assert scan_book("1 John 4:8") == (True, 7)

    def test_no_letters(self):
        """Digits alone are not a book token."""
        assert scan_book("3:16") == (False, 1)
        assert scan_book("/love") == (False, 0)

    def test_whole_input(self):
        """A bare name is consumed entirely."""
        assert scan_book("Song of Solomon") == (True, 15)


class TestExact:
    """Test book, chapter and verse references."""

    def test_book(self):
        """Book alone should parse as Exact with wildcards."""
        assert parse("Genesis") == Exact(GENESIS, 0, 0)

    def test_book_chapter(self):
        """Book and chapter should parse."""
        assert parse("Gen 1") == Exact(GENESIS, 1)
        assert parse("Gen:1") == Exact(GENESIS, 1)
        assert parse("Gen1") == Exact(GENESIS, 1)

    def test_book_chapter_verse(self):
        """Book, chapter and verse should parse."""
        assert parse("Jn 3:16") == Exact(JOHN, 3, 16)
        assert parse("Jn:3:16") == Exact(JOHN, 3, 16)

    def test_numbered_book(self):
        """Numbered books should parse."""
        assert parse("1 Jn 4:8") == Exact(FIRST_JOHN, 4, 8)
        assert parse("1 John 4") == Exact(FIRST_JOHN, 4)

    def test_surrounding_whitespace(self):
        """Surrounding whitespace should be ignored."""
        assert parse("  Jn 3:16  ") == Exact(JOHN, 3, 16)

    def test_unknown_book(self):
        """An unknown book is not an error; it gets book 0."""
        assert parse("Xyz 1:1") == Exact(0, 1, 1)
        assert parse("Gen x") == Exact(0)


class TestExactSet:
    """Test comma-separated verse lists."""

    def test_two_verses(self):
        """Two verses should parse as a set."""
        assert parse("Gen 1:1,3") == ExactSet(GENESIS, 1, frozenset({1, 3}))

    def test_many_verses(self):
        """Several verses should parse as a set."""
        assert parse("Gen 1:1,3,5") == ExactSet(GENESIS, 1, frozenset({1, 3, 5}))

    def test_trailing_garbage(self):
        """Content after the list is a syntax error."""
        with pytest.raises(ReferenceSyntaxError):
            parse("Gen 1:1,3x")
        with pytest.raises(ReferenceSyntaxError):
            parse("Gen 1:1,3,")


class TestRange:
    """Test chapter and verse ranges."""

    def test_chapter_range(self):
        """Chapter range should parse."""
        assert parse("Gen 1-2") == Range(GENESIS, 1, chapter_end=2)

    def test_verse_range(self):
        """Verse range within a chapter should parse."""
        assert parse("Jn 3:16-18") == Range(JOHN, 3, verse=16, verse_end=18)

    def test_chapter_range_trailing_garbage(self):
        """Content after a chapter range is a syntax error."""
        with pytest.raises(ReferenceSyntaxError):
            parse("Gen 1-2x")

    def test_extended_range(self):
        """Chapter:verse to chapter:verse should parse as RangeExt."""
        assert parse("Matt 5:3-6:4") == RangeExt(MATTHEW, 5, 3, 6, 4)

    def test_extended_range_incomplete(self):
        """The end chapter must be followed by :<verse> ending the input."""
        with pytest.raises(ReferenceSyntaxError):
            parse("Matt 5:3-6:")
        with pytest.raises(ReferenceSyntaxError):
            parse("Matt 5:3-6x")
        with pytest.raises(ReferenceSyntaxError):
            parse("Matt 5:3-6:4x")


class TestSearch:
    """Test search references."""

    def test_corpus_search(self):
        """A leading slash searches the whole corpus."""
        query = parse("/love")
        assert isinstance(query, Search)
        assert query.text == "love"
        assert query.book == 0
        assert query.chapter == 0

    def test_case_insensitive(self):
        """Search patterns should ignore case."""
        query = parse("/love")
        assert query.pattern.search("LOVE one another")

    def test_book_search(self):
        """Book followed by a slash searches that book."""
        query = parse("Gen/light")
        assert isinstance(query, Search)
        assert query.book == GENESIS
        assert query.chapter == 0
        assert query.text == "light"

    def test_chapter_search(self):
        """Book and chapter followed by a slash searches that chapter."""
        query = parse("Gen 1/light")
        assert isinstance(query, Search)
        assert (query.book, query.chapter) == (GENESIS, 1)

    def test_pattern_keeps_regex(self):
        """Patterns are regular expressions."""
        query = parse("/^in the beg")
        assert query.pattern.search("In the beginning")
        assert not query.pattern.search("Then in the beginning")

    def test_pattern_keeps_trailing_space(self):
        """Only leading whitespace is dropped before a search."""
        assert parse("/love ").text == "love "
        assert parse("  Gen 1/light ").text == "light "

    def test_invalid_pattern(self):
        """An invalid pattern should raise PatternError."""
        with pytest.raises(PatternError):
            parse("/[")
        with pytest.raises(PatternError):
            parse("Gen 1/(")


class TestSyntaxErrors:
    """Test malformed references."""

    @pytest.mark.parametrize("text", ["Jn 3:16:", "3:16", "", "Gen 1:", "Gen 1x", "Jn 3:16 17"])
    def test_syntax_error(self, text):
        """Malformed references should raise ReferenceSyntaxError."""
        with pytest.raises(ReferenceSyntaxError):
            parse(text)

    @pytest.mark.parametrize("text", ["Gen ३", "Gen 1:३", "Gen 1-２"])
    def test_non_ascii_digits(self, text):
        """Only ASCII digits are numbers."""
        with pytest.raises(ReferenceSyntaxError):
            parse(text)

    def test_errors_share_base(self):
        """Both error kinds derive from QueryError and keep the input."""
        with pytest.raises(QueryError) as excinfo:
            parse("3:16")
        assert excinfo.value.text == "3:16"
        assert issubclass(PatternError, QueryError)
