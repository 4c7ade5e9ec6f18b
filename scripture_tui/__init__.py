"""scripture-tui: read scripture from your terminal."""

from scripture_tui.context import ContextIterator
from scripture_tui.data import Corpus, load_corpus, sample_corpus
from scripture_tui.lookup import LookupResult, lookup
from scripture_tui.query import matches, parse_reference
from scripture_tui.render import Renderer

__version__ = "0.1.0"

__all__ = [
    "ContextIterator",
    "Corpus",
    "LookupResult",
    "Renderer",
    "load_corpus",
    "lookup",
    "matches",
    "parse_reference",
    "sample_corpus",
]
