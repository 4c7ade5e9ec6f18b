"""Passage display widget."""

from typing import List

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widgets import Static


class PassageView(VerticalScroll):
    """Scrollable view of rendered passage lines."""

    DEFAULT_CSS = """
    PassageView {
        width: 100%;
        height: 1fr;
        background: $surface;
        padding: 0 1;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._lines: List[Text] = []

    def compose(self) -> ComposeResult:
        yield Static("", id="passage-text")

    @property
    def lines(self) -> List[Text]:
        """Return the displayed lines."""
        return self._lines.copy()

    def update_content(self, lines: List[Text]) -> None:
        """Replace the displayed passage and scroll to the top."""
        self._lines = list(lines)
        self.query_one("#passage-text", Static).update(Text("\n").join(self._lines))
        self.scroll_home(animate=False)
