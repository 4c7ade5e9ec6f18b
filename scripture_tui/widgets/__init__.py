"""Textual widgets for scripture-tui."""

from scripture_tui.widgets.command_input import CommandInput
from scripture_tui.widgets.passage_view import PassageView
from scripture_tui.widgets.status_bar import StatusBar

__all__ = [
    "CommandInput",
    "PassageView",
    "StatusBar",
]
