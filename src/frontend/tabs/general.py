"""General tab: command prefix and timezone."""

from __future__ import annotations

from textual.containers import Container
from textual.widgets import Input, Static


class GeneralTab(Container):
    def compose(self):
        yield Static("prefix", classes="form-label")
        yield Input(placeholder="!", id="prefix-input")
        yield Static("timezone", classes="form-label")
        yield Input(placeholder="Europe/Berlin", id="timezone-input")
