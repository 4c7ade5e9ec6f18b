"""Verse rendering to word-wrapped rich text lines."""

import re
from typing import Iterable, Iterator, List, Optional

from rich.text import Text

from scripture_tui.data.canon import Corpus
from scripture_tui.data.types import Verse

# The chapter:verse label is followed by a tab, so text starts at column 8
LABEL_WIDTH = 8
MARGIN = 2

LABEL_STYLE = "bold"
HEADER_STYLE = "underline"
MATCH_STYLE = "bold black on yellow"


def wrap_words(text: str, width: int) -> List[str]:
    """Pack words into lines of at most width characters.

    Words are never split; a word longer than width gets a line of its own.
    """
    lines: List[str] = []
    current: List[str] = []
    length = 0
    for word in text.split():
        extra = len(word) + (1 if current else 0)
        if current and length + extra > width:
            lines.append(" ".join(current))
            current = []
            length = 0
            extra = len(word)
        current.append(word)
        length += extra
    if current:
        lines.append(" ".join(current))
    return lines or [""]


class Renderer:
    """Formats verses for terminal output."""

    def __init__(
        self,
        corpus: Corpus,
        width: int = 80,
        highlight: Optional["re.Pattern[str]"] = None,
    ) -> None:
        """Initialize the renderer.

        Args:
            corpus: Corpus the rendered positions refer to
            width: Maximum output line width
            highlight: Optional pattern whose matches are highlighted
        """
        self.corpus = corpus
        self.width = width
        self.highlight = highlight

    @property
    def text_width(self) -> int:
        """Width available for verse text after the label column."""
        return max(self.width - LABEL_WIDTH - MARGIN, 1)

    def header(self, book: int) -> Text:
        """Return the section header for a book."""
        return Text(self.corpus.book_name(book), style=HEADER_STYLE)

    def render_verse(self, verse: Verse) -> List[Text]:
        """Render one verse as label plus wrapped text lines."""
        lines: List[Text] = []
        for i, chunk in enumerate(wrap_words(verse.text, self.text_width)):
            line = Text()
            if i == 0:
                line.append(verse.label, style=LABEL_STYLE)
            line.append("\t")
            self._append_with_highlight(line, chunk)
            lines.append(line)
        return lines

    def render(self, positions: Iterable[int]) -> Iterator[Text]:
        """Render corpus positions, emitting a header whenever the book changes."""
        last_book: Optional[int] = None
        for position in positions:
            verse = self.corpus[position]
            if verse.book != last_book:
                if last_book is not None:
                    yield Text()
                yield self.header(verse.book)
                yield Text()
            yield from self.render_verse(verse)
            last_book = verse.book

    def _append_with_highlight(self, text: Text, content: str) -> None:
        """Append text with search match highlighting."""
        if self.highlight is None:
            text.append(content)
            return

        last_end = 0
        for match in self.highlight.finditer(content):
            if match.start() == match.end():
                continue
            if match.start() > last_end:
                text.append(content[last_end : match.start()])
            text.append(match.group(), style=MATCH_STYLE)
            last_end = match.end()

        if last_end < len(content):
            text.append(content[last_end:])
