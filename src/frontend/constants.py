"""Shared constants for the Textual UI."""

from __future__ import annotations

from core.status import Severity

DISCORD_BLURPLE = "#5865F2"
APP_NAME = "GUILD PANEL"
BANNER_FONT = "small"

SEVERITY_STYLES = {
    Severity.INFO: "",
    Severity.OK: "#bbf7d0",
    Severity.ERROR: "#fca5a5",
}

# ConfigForm attribute -> Input widget id.
FORM_INPUTS = {
    "prefix": "prefix-input",
    "timezone": "timezone-input",
    "welcome_channel": "welcome-channel",
    "welcome_message": "welcome-message",
    "welcome_image": "welcome-image",
    "max_warns": "max-warns",
    "log_channel": "log-channel",
    "ticket_category": "ticket-category",
    "ticket_transcript": "ticket-transcript",
    "manual_guild_id": "manual-guild",
}
ANTISPAM_SELECT = "antispam"
ANTISPAM_OPTIONS = [("Enabled", "true"), ("Disabled", "false")]

MSG_READY = "Ready. Connect your Discord account to load servers (if implemented)."
