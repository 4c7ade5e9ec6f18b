"""Interactive Textual reader for scripture-tui."""

import logging
from dataclasses import replace
from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Header

from scripture_tui.config import MIN_LINE_WIDTH, Config
from scripture_tui.data.canon import Corpus
from scripture_tui.lookup import lookup
from scripture_tui.widgets import CommandInput, PassageView, StatusBar

logger = logging.getLogger(__name__)


class ReaderApp(App):
    """Prompt for references and show the matching passages."""

    TITLE = "Scripture-TUI"

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", show=False),
        Binding("pageup", "page_up", "Page up", show=False),
        Binding("pagedown", "page_down", "Page down", show=False),
    ]

    def __init__(
        self,
        corpus: Corpus,
        config: Optional[Config] = None,
        reference: str = "",
    ) -> None:
        super().__init__()
        self._corpus = corpus
        self._config = config or Config()
        self._initial_reference = reference

    def compose(self) -> ComposeResult:
        yield Header()
        yield PassageView(id="passage")
        yield StatusBar(id="status")
        yield CommandInput(id="command")

    def on_mount(self) -> None:
        self.query_one("#command", CommandInput).focus()
        self.query_one("#status", StatusBar).show_message(f"{len(self._corpus)} verses loaded")
        if self._initial_reference:
            self.show_reference(self._initial_reference)

    def _display_config(self) -> Config:
        """Return the options with the width fitted to the passage view.

        A configured width is kept unless the view is narrower.
        """
        width = max(self.query_one("#passage", PassageView).size.width - 2, MIN_LINE_WIDTH)
        if self._config.max_line_width:
            width = min(width, self._config.max_line_width)
        return replace(self._config, max_line_width=width)

    def show_reference(self, reference: str) -> None:
        """Look up a reference and display the result."""
        status = self.query_one("#status", StatusBar)
        result = lookup(reference, self._corpus, self._display_config())
        if not result.success:
            logger.debug("lookup of %r failed: %s", reference, result.message)
            status.show_message(result.message, error=True)
            return

        self.query_one("#passage", PassageView).update_content(result.lines)
        status.set_reference(reference.strip(), len(result.positions))

    def on_command_input_reference_submitted(
        self, event: CommandInput.ReferenceSubmitted
    ) -> None:
        self.show_reference(event.reference)

    def action_page_up(self) -> None:
        self.query_one("#passage", PassageView).scroll_page_up()

    def action_page_down(self) -> None:
        self.query_one("#passage", PassageView).scroll_page_down()
