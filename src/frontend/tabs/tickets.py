"""Tickets tab: category and transcript routing."""

from __future__ import annotations

from textual.containers import Container
from textual.widgets import Input, Static


class TicketsTab(Container):
    def compose(self):
        yield Static("ticket category", classes="form-label")
        yield Input(placeholder="category id", id="ticket-category")
        yield Static("transcript channel", classes="form-label")
        yield Input(placeholder="channel id", id="ticket-transcript")
