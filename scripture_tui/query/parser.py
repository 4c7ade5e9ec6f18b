"""Reference parser for scripture locators."""

import logging
import re
from typing import Optional, Sequence

from scripture_tui.data.canon import resolve_book
from scripture_tui.data.types import Book
from scripture_tui.query.types import (
    Exact,
    ExactSet,
    PatternError,
    Query,
    Range,
    RangeExt,
    ReferenceSyntaxError,
    Search,
)

logger = logging.getLogger(__name__)

_NUMBER = re.compile(r"\s*([0-9]+)")
_COLON_NUMBER = re.compile(r":\s*([0-9]+)")
_DASH_NUMBER = re.compile(r"-\s*([0-9]+)")
_COMMA_NUMBER = re.compile(r",\s*([0-9]+)")


def scan_book(text: str) -> tuple[bool, int]:
    """Scan the leading book token.

    The token is a run of letters and spaces, optionally preceded by digits
    (for numbered books such as "1 John"). Digits after the first letter end
    the token.

    Returns:
        Tuple of (token contains a letter, token length)
    """
    seen_letter = False
    for i, ch in enumerate(text):
        if ch == " ":
            continue
        if ch.isalpha():
            seen_letter = True
        elif "0" <= ch <= "9" and not seen_letter:
            continue
        else:
            return seen_letter, i
    return seen_letter, len(text)


def compile_pattern(pattern: str, text: str = "") -> "re.Pattern[str]":
    """Compile a case-insensitive search pattern.

    Raises:
        PatternError: If the pattern is not a valid regular expression
    """
    try:
        return re.compile(pattern, re.IGNORECASE)
    except re.error as exc:
        raise PatternError(f"invalid pattern {pattern!r}: {exc}", text or pattern) from exc


def _search(pattern: str, text: str, book: int = 0, chapter: int = 0) -> Search:
    return Search(compile_pattern(pattern, text), pattern, book, chapter)


def _syntax_error(text: str) -> ReferenceSyntaxError:
    return ReferenceSyntaxError(f"invalid reference: {text}", text)


def parse_reference(text: str, books: Sequence[Book]) -> Query:
    """Parse a scripture reference into a query.

    Supports:
    - "Gen" -> Exact(book)
    - "Gen 1", "Gen:1" -> Exact(book, chapter)
    - "Gen 1:5" -> Exact(book, chapter, verse)
    - "Gen 1:5,7,9" -> ExactSet(book, chapter, {5, 7, 9})
    - "Gen 1-3" -> Range(book, chapter, chapter_end)
    - "Gen 1:5-10" -> Range(book, chapter, verse, verse_end)
    - "Gen 1:5-2:3" -> RangeExt(book, chapter, verse, chapter_end, verse_end)
    - "/light" -> Search over the whole corpus
    - "Gen/light", "Gen 1/light" -> Search within a book or chapter

    An unknown book name is not an error: the query gets book 0 and matches
    no verse.

    Args:
        text: Reference string
        books: Corpus book list used to resolve the book token

    Returns:
        Parsed query

    Raises:
        ReferenceSyntaxError: If the reference matches no accepted form
        PatternError: If the search pattern does not compile
    """
    reference = text.lstrip()
    # Trailing whitespace belongs to a search pattern.
    if "/" not in reference:
        reference = reference.rstrip()
    query = _parse(reference, books)
    logger.debug("parsed %r as %r", text, query)
    return query


def _parse(text: str, books: Sequence[Book]) -> Query:
    has_book, n = scan_book(text)
    if has_book:
        book = resolve_book(books, text[:n])
        if not book:
            logger.debug("unknown book %r", text[:n].strip())
        rest = text[n:]
    elif text.startswith("/"):
        return _search(text[1:], text)
    else:
        raise _syntax_error(text)

    # Chapter, with or without a leading colon
    match = _COLON_NUMBER.match(rest) or _NUMBER.match(rest)
    if match:
        chapter = int(match.group(1))
        rest = rest[match.end():]
    elif rest.startswith("/"):
        return _search(rest[1:], text, book)
    elif not rest:
        return Exact(book)
    else:
        raise _syntax_error(text)

    match = _COLON_NUMBER.match(rest)
    if match:
        verse = int(match.group(1))
        rest = rest[match.end():]
    else:
        match = _DASH_NUMBER.match(rest)
        if match:
            if rest[match.end():]:
                raise _syntax_error(text)
            return Range(book, chapter, chapter_end=int(match.group(1)))
        if rest.startswith("/"):
            return _search(rest[1:], text, book, chapter)
        if not rest:
            return Exact(book, chapter)
        raise _syntax_error(text)

    # A dash-number ending the input is a verse range; otherwise it is the
    # end chapter of a chapter:verse range.
    match = _DASH_NUMBER.match(rest)
    if match:
        value = int(match.group(1))
        rest = rest[match.end():]
        if not rest:
            return Range(book, chapter, verse=verse, verse_end=value)
        match = _COLON_NUMBER.match(rest)
        if match and not rest[match.end():]:
            return RangeExt(book, chapter, verse, value, int(match.group(1)))
        raise _syntax_error(text)

    if not rest:
        return Exact(book, chapter, verse)

    verses = _scan_verse_list(rest)
    if verses is None:
        raise _syntax_error(text)
    extra, rest = verses
    if rest:
        raise _syntax_error(text)
    return ExactSet(book, chapter, frozenset({verse, *extra}))


def _scan_verse_list(text: str) -> Optional[tuple[list[int], str]]:
    """Consume one or more ",<verse>" tokens.

    Returns:
        Tuple of (verse numbers, unparsed remainder) or None if the text
        does not start with a comma-number
    """
    verses: list[int] = []
    match = _COMMA_NUMBER.match(text)
    while match:
        verses.append(int(match.group(1)))
        text = text[match.end():]
        match = _COMMA_NUMBER.match(text)
    if not verses:
        return None
    return verses, text
