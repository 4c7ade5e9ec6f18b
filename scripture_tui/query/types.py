"""Query variants produced by the reference parser.

A query is exactly one of ``Exact``, ``ExactSet``, ``Range``, ``RangeExt``
or ``Search``. A value of 0 in a book, chapter or verse field is a wildcard.
"""

import re
from dataclasses import dataclass, field
from typing import FrozenSet, Union


class QueryError(ValueError):
    """Base class for reference parse failures."""

    def __init__(self, message: str, text: str = "") -> None:
        super().__init__(message)
        self.text = text


class ReferenceSyntaxError(QueryError):
    """The reference does not match any accepted form."""


class PatternError(QueryError):
    """The search pattern is not a valid regular expression."""


@dataclass(frozen=True)
class Exact:
    """A book, a chapter, or a single verse."""

    book: int
    chapter: int = 0
    verse: int = 0


@dataclass(frozen=True)
class ExactSet:
    """An explicit set of verses in one chapter."""

    book: int
    chapter: int
    verses: FrozenSet[int] = frozenset()


@dataclass(frozen=True)
class Range:
    """A span of chapters, or a span of verses in one chapter."""

    book: int
    chapter: int
    chapter_end: int = 0
    verse: int = 0
    verse_end: int = 0


@dataclass(frozen=True)
class RangeExt:
    """A verse-to-verse span crossing chapters."""

    book: int
    chapter: int
    verse: int
    chapter_end: int
    verse_end: int


@dataclass(frozen=True)
class Search:
    """Verses whose text matches a pattern, optionally within a book or chapter."""

    pattern: "re.Pattern[str]" = field(compare=False)
    text: str = ""
    book: int = 0
    chapter: int = 0


Query = Union[Exact, ExactSet, Range, RangeExt, Search]
