"""Status bar widget."""

from typing import Optional

from rich.text import Text
from textual.widgets import Static


class StatusBar(Static):
    """Status bar showing the last reference and lookup messages."""

    DEFAULT_CSS = """
    StatusBar {
        dock: bottom;
        height: 1;
        background: $primary-darken-2;
        color: $text-muted;
        padding: 0 1;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__("", **kwargs)
        self._reference = ""
        self._verse_count = 0
        self._message: Optional[str] = None
        self._is_error = False

    def set_reference(self, reference: str, verse_count: int) -> None:
        """Show the reference being displayed."""
        self._reference = reference
        self._verse_count = verse_count
        self._message = None
        self._update()

    def show_message(self, message: str, error: bool = False) -> None:
        """Show a message until the next lookup."""
        self._message = message
        self._is_error = error
        self._update()

    def _update(self) -> None:
        """Update the status bar display."""
        text = Text()

        if self._reference:
            text.append(self._reference, style="bold")
            text.append(f" ({self._verse_count} vs)", style="dim")

        if self._message:
            text.append("  ")
            text.append(self._message, style="bold red" if self._is_error else "yellow")
        else:
            text.append("  ")
            for i, (key, desc) in enumerate((("Enter", "lookup"), ("Up/Down", "history"), ("^Q", "quit"))):
                if i > 0:
                    text.append(" ", style="dim")
                text.append(key, style="bold yellow")
                text.append(f" {desc}", style="dim")

        self.update(text)
