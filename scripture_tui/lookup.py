"""End-to-end reference lookup: parse, select with context, render."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from rich.text import Text

from scripture_tui.config import DEFAULT_LINE_WIDTH, Config
from scripture_tui.context import ContextIterator
from scripture_tui.data.canon import Corpus
from scripture_tui.query.parser import parse_reference
from scripture_tui.query.types import Query, QueryError, Search
from scripture_tui.render import Renderer

logger = logging.getLogger(__name__)

UNKNOWN_REFERENCE = "unknown reference"


@dataclass
class LookupResult:
    """Result of a reference lookup."""

    success: bool
    message: str = ""
    lines: List[Text] = field(default_factory=list)
    query: Optional[Query] = None
    positions: List[int] = field(default_factory=list)

    @property
    def plain(self) -> str:
        """Return the rendered lines without styling."""
        return "\n".join(line.plain for line in self.lines)


def positions_for(query: Query, corpus: Corpus, config: Config) -> ContextIterator:
    """Return a context iterator configured from the options."""
    return ContextIterator(
        query,
        corpus,
        before=config.context_before,
        after=config.context_after,
        whole_chapter=config.whole_chapter,
    )


def lookup(text: str, corpus: Corpus, config: Optional[Config] = None) -> LookupResult:
    """Look up a reference string.

    A reference that does not parse fails with the parser's message and no
    lines. A reference that parses but selects nothing fails with
    "unknown reference".

    Args:
        text: Reference string, e.g. "Jn 3:16-18" or "/love"
        corpus: Verse corpus
        config: Display and context options

    Returns:
        LookupResult with the rendered lines
    """
    config = config or Config()
    try:
        query = parse_reference(text, corpus.books)
    except QueryError as exc:
        logger.debug("lookup of %r failed: %s", text, exc)
        return LookupResult(success=False, message=str(exc))

    highlight = query.pattern if isinstance(query, Search) else None
    renderer = Renderer(corpus, width=config.max_line_width or DEFAULT_LINE_WIDTH, highlight=highlight)
    positions = list(positions_for(query, corpus, config))
    lines = list(renderer.render(positions))

    if not positions:
        return LookupResult(success=False, message=UNKNOWN_REFERENCE, query=query)
    return LookupResult(success=True, lines=lines, query=query, positions=positions)
