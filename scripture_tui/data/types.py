"""Data types for scripture-tui."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Book:
    """A book of the corpus.

    ``number`` is 1-based and equals the book's position in the corpus
    book list.
    """

    number: int
    name: str
    abbr: str

    @property
    def listing(self) -> str:
        """Return the book as shown by the book list."""
        return f"{self.name} ({self.abbr})"


@dataclass(frozen=True)
class Verse:
    """A single verse of the corpus."""

    book: int
    chapter: int
    verse: int
    text: str

    @property
    def label(self) -> str:
        """Return the chapter:verse label."""
        return f"{self.chapter}:{self.verse}"

    @property
    def key(self) -> tuple[int, int, int]:
        """Return the sort key of the verse."""
        return (self.book, self.chapter, self.verse)

    def same_chapter(self, other: "Verse") -> bool:
        """Check if both verses belong to the same chapter of the same book."""
        return self.book == other.book and self.chapter == other.chapter
