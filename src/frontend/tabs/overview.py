"""Overview tab: banner and a short how-to."""

from __future__ import annotations

from art import text2art
from rich.text import Text
from textual.containers import Container
from textual.widgets import Static

from ..constants import APP_NAME, BANNER_FONT

HELP_TEXT = (
    "1. Log in with Discord (Login) so the backend knows who you are.\n"
    "2. Pick a server from the list, or paste its Guild ID and press Enter.\n"
    "3. Edit settings on the General, Welcome, Moderation and Tickets pages.\n"
    "4. Press Save (ctrl+s) to send the configuration to the backend."
)


class OverviewTab(Container):
    def compose(self):
        yield Static(Text(text2art(APP_NAME, font=BANNER_FONT)), id="banner")
        yield Static(HELP_TEXT, classes="subtle")
