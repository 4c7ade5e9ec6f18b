"""Context window iteration over query matches.

Walks the corpus once, expands every match into a window of surrounding
verses and merges overlapping windows, so a consumer sees each corpus
position at most once and in order. At most two windows are pending at a
time: the active one and a single look-ahead.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Optional

from scripture_tui.data.canon import Corpus
from scripture_tui.query.matcher import next_match
from scripture_tui.query.types import Query

logger = logging.getLogger(__name__)

BEFORE = -1
AFTER = 1


@dataclass(frozen=True)
class Window:
    """Half-open interval [start, end) of corpus positions."""

    start: int
    end: int

    def __len__(self) -> int:
        return max(self.end - self.start, 0)

    def __contains__(self, position: int) -> bool:
        return self.start <= position < self.end


def chapter_bound(
    corpus: Corpus, position: int, direction: int, max_steps: Optional[int] = None
) -> int:
    """Walk from a position towards the chapter boundary.

    Args:
        corpus: Verse corpus
        position: Starting corpus position
        direction: BEFORE (-1) or AFTER (1)
        max_steps: Maximum number of verses to walk; None walks to the
            chapter boundary

    Returns:
        The last position reached that is still in the starting chapter
    """
    if direction not in (BEFORE, AFTER):
        raise ValueError(f"invalid direction: {direction}")

    steps = 0
    while 0 <= position + direction < len(corpus):
        if max_steps is not None and steps >= max_steps:
            break
        if not corpus[position].same_chapter(corpus[position + direction]):
            break
        position += direction
        steps += 1
    return position


class ContextIterator:
    """Iterator over the corpus positions selected by a query, with context.

    A fresh iterator is needed for every pass; iterators are not rewound.
    """

    def __init__(
        self,
        query: Query,
        corpus: Corpus,
        before: int = 0,
        after: int = 0,
        whole_chapter: bool = False,
    ) -> None:
        if before < 0 or after < 0:
            raise ValueError("context sizes must not be negative")
        self.query = query
        self.corpus = corpus
        self.before = before
        self.after = after
        self.whole_chapter = whole_chapter

        self._cursor = 0
        self._last_match = -1
        self._exhausted = False
        self._active: Optional[Window] = None
        self._pending: Optional[Window] = None

    @property
    def cursor(self) -> int:
        """Return the next position to be considered."""
        return self._cursor

    @property
    def active(self) -> Optional[Window]:
        """Return the window currently being emitted."""
        return self._active

    @property
    def pending(self) -> Optional[Window]:
        """Return the look-ahead window, if any."""
        return self._pending

    def window_for(self, position: int) -> Window:
        """Return the context window around a matching position."""
        if self.whole_chapter:
            before: Optional[int] = None
            after: Optional[int] = None
        else:
            before, after = self.before, self.after
        return Window(
            chapter_bound(self.corpus, position, BEFORE, before),
            chapter_bound(self.corpus, position, AFTER, after) + 1,
        )

    def _add_window(self, window: Window) -> None:
        if self._active is None:
            self._active = window
        elif window.start < self._active.end:
            # Matches arrive in order, so the new window only extends the active one
            self._active = Window(
                min(self._active.start, window.start),
                max(self._active.end, window.end),
            )
        else:
            self._pending = window
        logger.debug("window %s active=%s pending=%s", window, self._active, self._pending)

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        if self._cursor >= len(self.corpus):
            raise StopIteration

        if self._active is not None and self._cursor >= self._active.end:
            self._active, self._pending = self._pending, None

        if not self._exhausted and self._last_match < self._cursor:
            match = next_match(self.query, self.corpus, self._cursor)
            if match == -1:
                self._exhausted = True
            else:
                self._last_match = match
                self._add_window(self.window_for(match))

        if self._active is None:
            raise StopIteration

        if self._cursor < self._active.start:
            self._cursor = self._active.start

        position = self._cursor
        self._cursor += 1
        return position
