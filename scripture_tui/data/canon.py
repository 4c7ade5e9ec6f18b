"""Corpus container, book name resolution and corpus loading."""

import json
import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence, Union

from scripture_tui.data.types import Book, Verse

logger = logging.getLogger(__name__)


class CorpusError(ValueError):
    """Raised when a corpus is malformed or out of order."""


def _normalize(text: str) -> str:
    """Lowercase and drop every space character."""
    return text.replace(" ", "").lower()


def book_matches(book: Book, token: str) -> bool:
    """Check a token against the full name, the abbreviation, or a name prefix.

    Case and spaces are ignored on both sides.
    """
    needle = _normalize(token)
    name = _normalize(book.name)
    return name == needle or _normalize(book.abbr) == needle or name.startswith(needle)


def resolve_book(books: Sequence[Book], token: str) -> int:
    """Resolve a book token to a book number.

    Books are scanned in corpus order and the first match wins, so an
    ambiguous prefix resolves to the earliest book.

    Args:
        books: Corpus book list
        token: Book name, abbreviation or name prefix (e.g. "Jn", "gen", "1 John")

    Returns:
        Book number, or 0 if no book matches
    """
    if not _normalize(token):
        return 0
    for book in books:
        if book_matches(book, token):
            return book.number
    return 0


class Corpus:
    """Immutable ordered book and verse lists.

    Verses are sorted by (book, chapter, verse) and the verses of a chapter
    are contiguous, so chapter boundaries can be found by comparing
    neighbours.
    """

    def __init__(self, books: Iterable[Book], verses: Iterable[Verse]) -> None:
        self._books: tuple[Book, ...] = tuple(books)
        self._verses: tuple[Verse, ...] = tuple(verses)

    @property
    def books(self) -> tuple[Book, ...]:
        """Return the book list."""
        return self._books

    def __len__(self) -> int:
        return len(self._verses)

    def __getitem__(self, index: int) -> Verse:
        return self._verses[index]

    def __iter__(self) -> Iterator[Verse]:
        return iter(self._verses)

    def book(self, number: int) -> Optional[Book]:
        """Get a book by its 1-based number."""
        if 1 <= number <= len(self._books):
            return self._books[number - 1]
        return None

    def book_name(self, number: int) -> str:
        """Return the name of a book, or an empty string if unknown."""
        book = self.book(number)
        return book.name if book else ""

    def resolve(self, token: str) -> int:
        """Resolve a book token against this corpus."""
        return resolve_book(self._books, token)

    def validate(self) -> None:
        """Check numbering and ordering.

        Raises:
            CorpusError: If a book number does not match its position or
                the verses are not strictly ascending.
        """
        for i, book in enumerate(self._books, 1):
            if book.number != i:
                raise CorpusError(f"book {book.name!r} has number {book.number}, expected {i}")

        previous: Optional[Verse] = None
        for verse in self._verses:
            if verse.book < 1 or verse.book > len(self._books):
                raise CorpusError(f"verse {verse.label} references unknown book {verse.book}")
            if verse.chapter < 1 or verse.verse < 1:
                raise CorpusError(f"verse {verse.book} {verse.label} is not 1-based")
            if previous is not None and previous.key >= verse.key:
                raise CorpusError(
                    f"verse {verse.book} {verse.label} is out of order"
                )
            previous = verse


def list_books(corpus: Corpus) -> List[str]:
    """Return the book list as "Name (Abbr)" lines."""
    return [book.listing for book in corpus.books]


def corpus_from_dict(data: dict) -> Corpus:
    """Build a corpus from decoded JSON.

    Expected format::

        {
          "books": [{"number": 1, "name": "Genesis", "abbr": "Gen"}, ...],
          "verses": [[1, 1, 1, "In the beginning ..."], ...]
        }

    Verses may also be objects with book/chapter/verse/text keys.

    Raises:
        CorpusError: If the data is malformed or violates the ordering.
    """
    try:
        books = [
            Book(number=int(b["number"]), name=b["name"], abbr=b.get("abbr", b["name"]))
            for b in data["books"]
        ]
        verses = []
        for v in data["verses"]:
            if isinstance(v, dict):
                verses.append(Verse(int(v["book"]), int(v["chapter"]), int(v["verse"]), v["text"]))
            else:
                book, chapter, verse, text = v
                verses.append(Verse(int(book), int(chapter), int(verse), text))
    except (KeyError, TypeError, ValueError) as exc:
        raise CorpusError(f"malformed corpus: {exc}") from exc

    corpus = Corpus(books, verses)
    corpus.validate()
    return corpus


def load_corpus(path: Union[str, Path, None] = None) -> Corpus:
    """Load a corpus from a JSON file, or the built-in sample corpus.

    Args:
        path: Path to a corpus JSON file; None loads the sample corpus

    Raises:
        CorpusError: If the file cannot be decoded or is malformed
    """
    if path is None:
        from scripture_tui.data.sample import sample_corpus

        return sample_corpus()

    path = Path(path).expanduser()
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except ValueError as exc:
        raise CorpusError(f"{path}: {exc}") from exc

    corpus = corpus_from_dict(data)
    logger.debug("loaded %d books, %d verses from %s", len(corpus.books), len(corpus), path)
    return corpus
