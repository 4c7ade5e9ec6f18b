"""Data types, corpus container and book resolution."""

from scripture_tui.data.types import Book, Verse
from scripture_tui.data.canon import (
    Corpus,
    CorpusError,
    book_matches,
    corpus_from_dict,
    list_books,
    load_corpus,
    resolve_book,
)
from scripture_tui.data.sample import sample_corpus

__all__ = [
    "Book",
    "Verse",
    "Corpus",
    "CorpusError",
    "book_matches",
    "corpus_from_dict",
    "list_books",
    "load_corpus",
    "resolve_book",
    "sample_corpus",
]
