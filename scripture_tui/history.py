"""Reference history for the interactive prompt (up/down recall)."""

from typing import Optional

MAX_ENTRIES = 100


class InputHistory:
    """Submitted references with shell-style back/forward navigation.

    Navigating back from the prompt remembers the text being typed, so
    moving forward past the newest entry restores it.
    """

    def __init__(self) -> None:
        self._entries: list[str] = []
        self._index: int = -1  # -1 means "not navigating"
        self._saved_input = ""

    def add(self, text: str) -> None:
        """Record a submitted reference and stop navigating."""
        self._index = -1
        self._saved_input = ""
        text = text.strip()
        if not text:
            return
        # Don't add duplicates of the last entry
        if self._entries and self._entries[-1] == text:
            return
        self._entries.append(text)
        if len(self._entries) > MAX_ENTRIES:
            self._entries = self._entries[-MAX_ENTRIES:]

    def previous(self, current: str = "") -> Optional[str]:
        """Step back in history.

        Args:
            current: Text currently in the prompt, restored by next()

        Returns:
            The older entry, or None if there is no history
        """
        if not self._entries:
            return None

        if self._index == -1:
            self._saved_input = current
            self._index = len(self._entries) - 1
        elif self._index > 0:
            self._index -= 1

        return self._entries[self._index]

    def next(self) -> Optional[str]:
        """Step forward in history.

        Returns:
            The newer entry, the saved prompt text when stepping past the
            newest entry, or None when not navigating
        """
        if self._index == -1:
            return None

        if self._index < len(self._entries) - 1:
            self._index += 1
            return self._entries[self._index]

        self._index = -1
        return self._saved_input

    @property
    def entries(self) -> list[str]:
        """Return a copy of all entries."""
        return self._entries.copy()

    @property
    def index(self) -> int:
        """Return the navigation index (-1 when not navigating)."""
        return self._index
