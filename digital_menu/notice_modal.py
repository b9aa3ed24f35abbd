"""Blocking notice modal screen."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static


class NoticeModal(ModalScreen[None]):
    """Show a message and block input until it is acknowledged."""

    CSS = """
    NoticeModal {
        align: center middle;
        background: $background 60%;
    }

    #notice-dialog {
        width: 56;
        height: auto;
        border: round $warning;
        background: $panel;
        padding: 1 2;
    }

    #notice-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #notice-message {
        color: #ffb3b3;
        margin-bottom: 1;
    }

    #notice-help {
        color: #dddddd;
    }
    """

    def __init__(self, message: str, title: str = "Notice") -> None:
        super().__init__()
        self.message = message
        self.title_text = title

    def compose(self) -> ComposeResult:
        with Container(id="notice-dialog"):
            yield Static(self.title_text, id="notice-title")
            yield Static(self.message, id="notice-message")
            yield Static("Enter / Esc / q to close.", id="notice-help")

    def on_key(self, event: Key) -> None:
        if event.key in {"enter", "escape", "q"}:
            self.dismiss(None)
        # Nothing behind the notice reacts while it is open.
        event.stop()
