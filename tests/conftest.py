"""Shared fixtures for scripture-tui tests."""

import pytest

from scripture_tui.data.canon import Corpus
from scripture_tui.data.sample import sample_corpus
from scripture_tui.data.types import Book, Verse


def make_corpus() -> Corpus:
    """Build a small synthetic corpus.

    Positions:
        0-9    Alpha 1:1-10
        10-14  Alpha 2:1-5
        15-17  Beta 1:1-3
    """
    books = [Book(1, "Alpha", "Al"), Book(2, "Beta", "Be")]
    verses = [Verse(1, 1, v, f"alpha one {v}") for v in range(1, 11)]
    verses += [Verse(1, 2, v, f"alpha two {v}") for v in range(1, 6)]
    verses += [Verse(2, 1, v, f"beta one {v}") for v in range(1, 4)]
    return Corpus(books, verses)


@pytest.fixture
def corpus() -> Corpus:
    return make_corpus()


@pytest.fixture
def sample() -> Corpus:
    return sample_corpus()
