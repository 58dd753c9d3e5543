"""Main Textual app for the guild config dashboard."""

from __future__ import annotations

import logging
import webbrowser
from typing import Any, Optional

from rich.text import Text
from textual import on, work
from textual.app import App, ComposeResult
from textual.containers import Container, Horizontal, Vertical
from textual.widgets import Button, Footer, Input, Select, Static

from core.config_sync import ConfigLoader, ConfigSaver
from core.directory import GuildDirectoryLoader
from core.navigation import NavigationView, Page
from core.ports import TransportPort
from core.preview import render_welcome_preview
from core.status import StatusMessage

from .constants import (
    ANTISPAM_SELECT,
    DISCORD_BLURPLE,
    FORM_INPUTS,
    MSG_READY,
    SEVERITY_STYLES,
)
from .modals import UnsavedChangesScreen, WelcomePreviewScreen
from .state import DashboardState
from .tabs.general import GeneralTab
from .tabs.moderation import ModerationTab
from .tabs.overview import OverviewTab
from .tabs.roles import RolesTab
from .tabs.tickets import TicketsTab
from .tabs.welcome import WelcomeTab

LOGGER = logging.getLogger(__name__)

PAGE_PANELS = {
    Page.OVERVIEW: OverviewTab,
    Page.GENERAL: GeneralTab,
    Page.WELCOME: WelcomeTab,
    Page.MODERATION: ModerationTab,
    Page.TICKETS: TicketsTab,
    Page.ROLES: RolesTab,
}

_unwired = [page.value for page in Page if page not in PAGE_PANELS]
if _unwired:
    raise RuntimeError(f"Pages without a panel: {', '.join(_unwired)}")

_INPUT_FIELDS = {widget_id: attr for attr, widget_id in FORM_INPUTS.items()}


class GuildPanelApp(App):
    """Guild config dashboard: directory, form pages and a single status line."""

    BINDINGS = [
        ("ctrl+s", "save_config", "Save"),
        ("ctrl+r", "reload_guilds", "Reload"),
        ("q", "request_quit", "Quit"),
        ("ctrl+c", "request_quit", "Quit"),
    ]

    CSS = """
    Screen {
        background: #16171d;
        color: #e8eaf2;
    }

    #header {
        height: auto;
        padding: 1 2;
        border-bottom: solid #2b2d38;
    }

    #header-row {
        height: auto;
    }

    #header-left, #header-right {
        width: 1fr;
        height: auto;
    }

    #title, #page-title {
        text-style: bold;
    }

    #header-actions {
        height: auto;
    }

    #sidebar {
        width: 20;
        padding: 1 1;
        border-right: solid #2b2d38;
    }

    .nav-btn {
        width: 100%;
    }

    .nav-btn.active {
        background: #5865F2;
        text-style: bold;
    }

    #content {
        width: 1fr;
        padding: 1 2;
    }

    .form-label, .subtle {
        color: #b5bac8;
    }

    .placeholder {
        content-align: center middle;
        text-style: bold;
    }

    .modal-dialog {
        width: 60;
        height: auto;
        padding: 1 2;
        border: round #5865F2;
        background: #1e1f27;
    }

    .modal-title {
        text-style: bold;
    }

    .modal-actions {
        height: auto;
        margin-top: 1;
    }

    ModalScreen {
        align: center middle;
    }
    """

    def __init__(
        self,
        transport: TransportPort,
        *,
        login_url: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.state = DashboardState()
        self._transport = transport
        self._login_url = login_url
        self._directory_loader = GuildDirectoryLoader(transport, self.state.directory, self.state.status)
        self._config_loader = ConfigLoader(transport, self.state.form, self.state.status)
        self._config_saver = ConfigSaver(transport, self.state.form, self.state.status)

    def compose(self) -> ComposeResult:
        with Container(id="header"):
            with Horizontal(id="header-row"):
                with Vertical(id="header-left"):
                    yield Static(self._title_text(), id="title")
                    yield Static(self.state.navigation.current.title, id="page-title")
                    yield Static("", id="op-status")
                    yield Static("", id="header-status", classes="subtle")
                with Vertical(id="header-right"):
                    yield Select(
                        self.state.directory.options(),
                        allow_blank=False,
                        value="",
                        id="guild-select",
                    )
                    yield Input(placeholder="Guild ID (manual)", id="manual-guild")
                    yield Horizontal(
                        Button("Save", id="save-btn", variant="success"),
                        Button("Reload", id="reload-btn"),
                        Button("Login", id="login-btn"),
                        id="header-actions",
                    )

        with Horizontal(id="body"):
            with Vertical(id="sidebar"):
                for page in Page:
                    yield Button(page.title, id=page.nav_id, classes="nav-btn")
            with Container(id="content"):
                for page in Page:
                    yield PAGE_PANELS[page](id=page.panel_id, classes="page")
        yield Footer()

    def on_mount(self) -> None:
        self.state.status.set_listener(self._render_status)
        self.navigate(Page.OVERVIEW)
        self._render_form()
        self._refresh_header()
        self._startup()

    async def on_unmount(self) -> None:
        self.state.status.set_listener(None)
        await self._transport.close()

    @work
    async def _startup(self) -> None:
        await self._reload_directory()
        self.state.status.report(MSG_READY)

    # Navigation

    def navigate(self, target: Page | str) -> NavigationView:
        view = self.state.navigation.navigate(target)
        self._apply_navigation(view)
        return view

    def _apply_navigation(self, view: NavigationView) -> None:
        for page in Page:
            self.query_one(f"#{page.panel_id}").display = view.is_visible(page)
            self.query_one(f"#{page.nav_id}", Button).set_class(view.is_active(page), "active")
        self.query_one("#page-title", Static).update(view.title)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if button_id.startswith("nav-"):
            self.navigate(button_id[len("nav-") :])
        elif button_id == "save-btn":
            self.action_save_config()
        elif button_id == "reload-btn":
            self.action_reload_guilds()
        elif button_id == "login-btn":
            self.action_login()
        elif button_id == "preview-btn":
            self.action_preview_welcome()

    # Guild selection and config sync

    @on(Select.Changed, "#guild-select")
    def _on_guild_selected(self, event: Select.Changed) -> None:
        guild_id = "" if event.value is Select.BLANK else str(event.value)
        self.state.selected_guild_id = guild_id
        if not guild_id:
            return
        self.state.form.manual_guild_id = ""
        self.query_one("#manual-guild", Input).value = ""
        self.load_config(guild_id)

    @on(Input.Submitted, "#manual-guild")
    def _on_manual_guild_submitted(self, event: Input.Submitted) -> None:
        guild_id = event.value.strip()
        if guild_id:
            self.load_config(guild_id)

    def on_input_changed(self, event: Input.Changed) -> None:
        attr = _INPUT_FIELDS.get(event.input.id or "")
        if attr is None or getattr(self.state.form, attr) == event.value:
            return
        setattr(self.state.form, attr, event.value)
        if attr != "manual_guild_id":
            self.mark_dirty()

    @on(Select.Changed, f"#{ANTISPAM_SELECT}")
    def _on_antispam_changed(self, event: Select.Changed) -> None:
        if event.value is Select.BLANK or self.state.form.antispam == event.value:
            return
        self.state.form.antispam = str(event.value)
        self.mark_dirty()

    @work
    async def load_config(self, guild_id: str) -> None:
        if await self._config_loader.load(guild_id):
            self._render_form()
            self.state.dirty = False
            self._refresh_header()

    @work
    async def save_config(self) -> None:
        await self._save()

    async def _save(self) -> bool:
        saved = await self._config_saver.save(self.state.selected_guild_id)
        if saved:
            self.state.dirty = False
            self._refresh_header()
        return saved

    async def _reload_directory(self) -> None:
        if await self._directory_loader.load():
            self._render_directory()
        elif not self.state.directory.guilds:
            self._render_directory()

    def _render_directory(self) -> None:
        select = self.query_one("#guild-select", Select)
        select.set_options(self.state.directory.options())

    def _render_form(self) -> None:
        form = self.state.form
        for attr, widget_id in FORM_INPUTS.items():
            self.query_one(f"#{widget_id}", Input).value = getattr(form, attr)
        self.query_one(f"#{ANTISPAM_SELECT}", Select).value = form.antispam

    def _render_status(self, message: StatusMessage) -> None:
        status = self.query_one("#op-status", Static)
        status.update(Text(message.text, style=SEVERITY_STYLES[message.severity]))

    def mark_dirty(self) -> None:
        self.state.dirty = True
        self._refresh_header()

    def _refresh_header(self) -> None:
        header_status = self.query_one("#header-status", Static)
        header_status.update("config: modified *" if self.state.dirty else "config: clean")

    # Actions

    def action_save_config(self) -> None:
        self.save_config()

    @work
    async def action_reload_guilds(self) -> None:
        await self._reload_directory()

    def action_login(self) -> None:
        if not self._login_url:
            return
        LOGGER.info("Opening login page %s", self._login_url)
        webbrowser.open(self._login_url)

    def action_preview_welcome(self) -> None:
        preview = render_welcome_preview(self.state.form.welcome_message)
        self.push_screen(WelcomePreviewScreen(preview))

    def action_request_quit(self) -> None:
        if self.state.dirty:
            self.push_screen(UnsavedChangesScreen(), self._handle_exit_choice)
        else:
            self.exit()

    async def _handle_exit_choice(self, choice: str | None) -> None:
        if choice == "save":
            if await self._save():
                self.exit()
        elif choice == "discard":
            self.exit()

    @staticmethod
    def _title_text() -> Text:
        return Text.assemble(
            ("GUILD", DISCORD_BLURPLE),
            (" PANEL > Server Config", "bold"),
        )
