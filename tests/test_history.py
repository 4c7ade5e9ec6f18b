"""Tests for the interactive input history."""

from scripture_tui.history import MAX_ENTRIES, InputHistory


class TestInputHistory:
    """Test history recording and navigation."""

    def test_empty(self):
        """Navigation without entries does nothing."""
        history = InputHistory()
        assert history.previous("Gen") is None
        assert history.next() is None

    def test_add(self):
        """Entries are recorded in order, without blanks or repeats."""
        history = InputHistory()
        history.add("Gen 1")
        history.add("  ")
        history.add("Jn 3:16")
        history.add("Jn 3:16")
        assert history.entries == ["Gen 1", "Jn 3:16"]

    def test_previous_and_next(self):
        """Up walks back, down walks forward and restores the typed text."""
        history = InputHistory()
        history.add("Gen 1")
        history.add("Jn 3:16")

        assert history.previous("/lo") == "Jn 3:16"
        assert history.previous() == "Gen 1"
        assert history.previous() == "Gen 1"
        assert history.next() == "Jn 3:16"
        assert history.next() == "/lo"
        assert history.index == -1
        assert history.next() is None

    def test_add_resets_navigation(self):
        """Submitting stops navigation."""
        history = InputHistory()
        history.add("Gen 1")
        history.previous()
        history.add("Gen 2")
        assert history.index == -1
        assert history.previous() == "Gen 2"

    def test_max_entries(self):
        """History is capped."""
        history = InputHistory()
        for i in range(MAX_ENTRIES + 5):
            history.add(f"Ps {i}")
        assert len(history.entries) == MAX_ENTRIES
        assert history.entries[0] == "Ps 5"
