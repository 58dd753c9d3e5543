"""Modal dialogs for the Textual guild panel."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.screen import ModalScreen
from textual.widgets import Button, Static


class UnsavedChangesScreen(ModalScreen[str]):
    """Prompt when exiting with unsaved changes."""

    def compose(self) -> ComposeResult:
        yield Container(
            Static("Unsaved changes", classes="modal-title"),
            Static("Save the guild config before exit?", classes="modal-body"),
            Horizontal(
                Button("Save", id="unsaved-save", variant="success"),
                Button("Discard", id="unsaved-discard", variant="error"),
                Button("Cancel", id="unsaved-cancel"),
                classes="modal-actions",
            ),
            classes="modal-dialog modal-dialog--confirm",
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "unsaved-save":
            self.dismiss("save")
        elif event.button.id == "unsaved-discard":
            self.dismiss("discard")
        else:
            self.dismiss("cancel")


class WelcomePreviewScreen(ModalScreen[None]):
    """Shows the welcome message with sample names filled in."""

    BINDINGS = [("escape", "close", "Close")]

    def __init__(self, preview: str) -> None:
        super().__init__()
        self._preview = preview

    @property
    def preview(self) -> str:
        return self._preview

    def compose(self) -> ComposeResult:
        yield Container(
            Static("Preview", classes="modal-title"),
            Static(Text(self._preview), id="preview-text", classes="modal-body"),
            Horizontal(
                Button("Close", id="preview-close"),
                classes="modal-actions",
            ),
            classes="modal-dialog",
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(None)

    def action_close(self) -> None:
        self.dismiss(None)
