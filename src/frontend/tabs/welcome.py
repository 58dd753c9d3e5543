"""Welcome tab: greeting channel, message template and image."""

from __future__ import annotations

from textual.containers import Container
from textual.widgets import Button, Input, Static


class WelcomeTab(Container):
    def compose(self):
        yield Static("welcome channel", classes="form-label")
        yield Input(placeholder="channel id", id="welcome-channel")
        yield Static("welcome message ({user} and {server} are replaced)", classes="form-label")
        yield Input(placeholder="Welcome {user} to {server}!", id="welcome-message")
        yield Static("welcome image", classes="form-label")
        yield Input(placeholder="https://...", id="welcome-image")
        yield Button("Preview", id="preview-btn")
