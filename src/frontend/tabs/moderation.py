"""Moderation tab: warn limit, antispam and log channel."""

from __future__ import annotations

from textual.containers import Container
from textual.widgets import Input, Select, Static

from ..constants import ANTISPAM_OPTIONS, ANTISPAM_SELECT


class ModerationTab(Container):
    def compose(self):
        yield Static("max warns", classes="form-label")
        yield Input(placeholder="0", id="max-warns")
        yield Static("antispam", classes="form-label")
        yield Select(ANTISPAM_OPTIONS, allow_blank=False, value="true", id=ANTISPAM_SELECT)
        yield Static("log channel", classes="form-label")
        yield Input(placeholder="channel id", id="log-channel")
