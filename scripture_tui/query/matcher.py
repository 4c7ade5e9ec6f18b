"""Verse matching for parsed queries."""

from typing import Iterator

from scripture_tui.data.canon import Corpus
from scripture_tui.data.types import Verse
from scripture_tui.query.types import Exact, ExactSet, Query, Range, RangeExt, Search


def _any_or_equal(wanted: int, actual: int) -> bool:
    """Check a field against a value where 0 means any."""
    return wanted == 0 or wanted == actual


def _match_exact(query: Exact, verse: Verse) -> bool:
    return (
        query.book == verse.book
        and _any_or_equal(query.chapter, verse.chapter)
        and _any_or_equal(query.verse, verse.verse)
    )


def _match_exact_set(query: ExactSet, verse: Verse) -> bool:
    return (
        query.book == verse.book
        and _any_or_equal(query.chapter, verse.chapter)
        and verse.verse in query.verses
    )


def _match_range(query: Range, verse: Verse) -> bool:
    if query.book != verse.book:
        return False
    if query.chapter_end:
        in_chapters = query.chapter <= verse.chapter <= query.chapter_end
    else:
        in_chapters = query.chapter == verse.chapter
    return (
        in_chapters
        and (query.verse == 0 or verse.verse >= query.verse)
        and (query.verse_end == 0 or verse.verse <= query.verse_end)
    )


def _match_range_ext(query: RangeExt, verse: Verse) -> bool:
    if query.book != verse.book:
        return False
    if query.chapter == query.chapter_end:
        return verse.chapter == query.chapter and query.verse <= verse.verse <= query.verse_end
    if verse.chapter == query.chapter:
        return verse.verse >= query.verse
    if verse.chapter == query.chapter_end:
        return verse.verse <= query.verse_end
    return query.chapter < verse.chapter < query.chapter_end


def _match_search(query: Search, verse: Verse) -> bool:
    return (
        _any_or_equal(query.book, verse.book)
        and _any_or_equal(query.chapter, verse.chapter)
        and query.pattern.search(verse.text) is not None
    )


def matches(query: Query, verse: Verse) -> bool:
    """Check whether a verse is selected by a query."""
    if isinstance(query, Exact):
        return _match_exact(query, verse)
    if isinstance(query, ExactSet):
        return _match_exact_set(query, verse)
    if isinstance(query, Range):
        return _match_range(query, verse)
    if isinstance(query, RangeExt):
        return _match_range_ext(query, verse)
    if isinstance(query, Search):
        return _match_search(query, verse)
    raise TypeError(f"unknown query type: {type(query).__name__}")


def next_match(query: Query, corpus: Corpus, start: int = 0) -> int:
    """Return the position of the first match at or after start, or -1."""
    for i in range(max(start, 0), len(corpus)):
        if matches(query, corpus[i]):
            return i
    return -1


def find_matches(query: Query, corpus: Corpus, start: int = 0) -> Iterator[int]:
    """Yield the positions of all matching verses from start onwards."""
    i = next_match(query, corpus, start)
    while i != -1:
        yield i
        i = next_match(query, corpus, i + 1)
