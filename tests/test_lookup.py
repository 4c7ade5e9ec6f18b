"""Tests for end-to-end reference lookup."""

from scripture_tui.config import Config
from scripture_tui.lookup import UNKNOWN_REFERENCE, lookup
from scripture_tui.query.types import Exact, RangeExt


class TestLookup:
    """Test lookup against the sample corpus."""

    def test_single_verse(self, sample):
        """A verse reference renders the book header and the verse."""
        result = lookup("Jn 3:16", sample)
        assert result.success
        assert result.query == Exact(50, 3, 16)
        assert len(result.positions) == 1
        assert result.lines[0].plain == "John"
        assert "3:16\tFor God so loved" in result.plain

    def test_verse_range(self, sample):
        """A verse range renders exactly those verses."""
        result = lookup("Jn 3:16-18", sample)
        verses = [sample[i].verse for i in result.positions]
        assert verses == [16, 17, 18]

    def test_extended_range(self, sample):
        """A range across chapters excludes verses outside the span."""
        result = lookup("Matt 5:3-6:4", sample)
        assert result.query == RangeExt(47, 5, 3, 6, 4)
        refs = [(sample[i].chapter, sample[i].verse) for i in result.positions]
        assert refs[0] == (5, 3)
        assert refs[-1] == (6, 4)
        assert (5, 2) not in refs
        assert (6, 5) not in refs

    def test_search_across_books(self, sample):
        """A search renders one header per book, in corpus order."""
        result = lookup("/love", sample)
        headers = [line.plain for line in result.lines if line.style == "underline"]
        assert headers == ["Matthew", "John", "1 John"]

    def test_context(self, sample):
        """Context options widen the selection."""
        config = Config(context_before=1, context_after=1)
        result = lookup("Jn 3:16", sample, config)
        assert [sample[i].verse for i in result.positions] == [15, 16, 17]

    def test_whole_chapter(self, sample):
        """Whole-chapter context shows the enclosing chapter."""
        config = Config(whole_chapter=True)
        result = lookup("Ps 23:4", sample, config)
        assert [sample[i].verse for i in result.positions] == [1, 2, 3, 4, 5, 6]

    def test_width(self, sample):
        """Lines should fit the configured width."""
        config = Config(max_line_width=40)
        result = lookup("Ps 23", sample, config)
        for line in result.lines:
            assert len(line.plain.expandtabs(8)) <= 40

    def test_unknown_book(self, sample):
        """An unknown book parses but finds nothing."""
        result = lookup("Xyz 1:1", sample)
        assert not result.success
        assert result.message == UNKNOWN_REFERENCE
        assert result.query == Exact(0, 1, 1)
        assert result.lines == []

    def test_missing_chapter(self, sample):
        """A chapter absent from the corpus finds nothing."""
        result = lookup("Gen 40", sample)
        assert not result.success
        assert result.message == UNKNOWN_REFERENCE

    def test_syntax_error(self, sample):
        """A malformed reference fails without a query."""
        result = lookup("Jn 3:16:", sample)
        assert not result.success
        assert result.query is None
        assert "invalid reference" in result.message

    def test_pattern_error(self, sample):
        """An invalid pattern fails without a query."""
        result = lookup("/[", sample)
        assert not result.success
        assert result.query is None
        assert "invalid pattern" in result.message
