"""Roles tab placeholder."""

from __future__ import annotations

from textual.containers import Container
from textual.widgets import Static


class RolesTab(Container):
    def compose(self):
        yield Static("*Roles*", classes="placeholder")
