"""Reference prompt widget with history."""

from textual.app import ComposeResult
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Input, Static

from scripture_tui.history import InputHistory

PROMPT = "scripture> "


class CommandInput(Widget):
    """Single-line reference prompt with up/down history."""

    DEFAULT_CSS = """
    CommandInput {
        dock: bottom;
        height: 1;
        layout: horizontal;
        background: $surface;
    }

    CommandInput > .command-prefix {
        width: auto;
        height: 1;
        color: $text;
    }

    CommandInput > .command-text {
        width: 1fr;
        height: 1;
        border: none;
        padding: 0;
        background: $surface;
    }

    CommandInput > .command-text:focus {
        border: none;
    }
    """

    class ReferenceSubmitted(Message):
        """Message sent when a reference is submitted."""

        def __init__(self, reference: str) -> None:
            self.reference = reference
            super().__init__()

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.history = InputHistory()

    def compose(self) -> ComposeResult:
        yield Static(PROMPT, classes="command-prefix", id="cmd-prefix")
        yield Input(placeholder="Jn 3:16, Gen 1:1-5, /love", classes="command-text", id="cmd-input")

    @property
    def input_widget(self) -> Input:
        """Get the input widget."""
        return self.query_one("#cmd-input", Input)

    def focus(self, scroll_visible: bool = True) -> None:
        """Focus the input widget."""
        self.input_widget.focus(scroll_visible=scroll_visible)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle Enter key."""
        event.stop()
        reference = self.input_widget.value
        self.history.add(reference)
        self.input_widget.value = ""
        if reference.strip():
            self.post_message(self.ReferenceSubmitted(reference))

    def on_key(self, event) -> None:
        """Handle history keys."""
        if event.key == "up":
            event.prevent_default()
            event.stop()
            value = self.history.previous(self.input_widget.value)
        elif event.key == "down":
            event.prevent_default()
            event.stop()
            value = self.history.next()
        else:
            return

        if value is not None:
            self.input_widget.value = value
            self.input_widget.cursor_position = len(value)
