"""Loading and saving one guild's config through the transport port.

Both components read and write the shared ``ConfigForm``; neither keeps a
copy of a previously loaded config.
"""

from __future__ import annotations

import json
import logging
from typing import Optional
from urllib.parse import quote

from core.guild_config import ConfigForm, config_to_wire, fill_form, normalize_config, read_form
from core.ports import TransportPort
from core.status import Severity, StatusReporter

LOGGER = logging.getLogger(__name__)

MSG_NO_GUILD = "No guild selected."
MSG_LOADING = "Loading server configuration..."
MSG_LOAD_MISSING = "No config found or endpoint missing. You can still save a new config."
MSG_LOADED = "Configuration loaded."
MSG_NEED_GUILD = "Please select or paste a Guild ID first."
MSG_BAD_GUILD = "Guild ID must be numeric."
MSG_SAVING = "Saving configuration..."
MSG_SAVE_FAILED = "Failed to save config. Check backend logs or endpoint."
MSG_SAVED = "Configuration saved successfully."


def is_valid_guild_id(guild_id: str) -> bool:
    """Discord guild ids are decimal snowflakes."""

    return guild_id.isascii() and guild_id.isdigit()


def config_path(guild_id: str) -> str:
    return f"/api/guild/{quote(guild_id, safe='')}/config"


class ConfigLoader:
    """Fetches a guild config and fills the form with defaults applied.

    Overlapping loads are allowed; only the most recently started one may
    write to the form or the status line.
    """

    def __init__(self, transport: TransportPort, form: ConfigForm, status: StatusReporter) -> None:
        self._transport = transport
        self._form = form
        self._status = status
        self._generation = 0

    async def load(self, guild_id: str) -> bool:
        guild_id = (guild_id or "").strip()
        if not guild_id:
            self._status.report(MSG_NO_GUILD)
            return False
        if not is_valid_guild_id(guild_id):
            self._status.report(MSG_BAD_GUILD, Severity.ERROR)
            return False

        self._generation += 1
        generation = self._generation
        self._status.report(MSG_LOADING)
        result = await self._transport.request(config_path(guild_id))

        if generation != self._generation:
            LOGGER.debug("Discarding stale config response for guild %s", guild_id)
            return False

        if not result.ok:
            self._status.report(MSG_LOAD_MISSING, Severity.ERROR)
            return False

        fill_form(self._form, normalize_config(result.payload))
        self._status.report(MSG_LOADED, Severity.OK)
        return True


class ConfigSaver:
    """Validates the target guild locally, then POSTs the form contents."""

    def __init__(self, transport: TransportPort, form: ConfigForm, status: StatusReporter) -> None:
        self._transport = transport
        self._form = form
        self._status = status

    def resolve_guild_id(self, guild_id: Optional[str] = None) -> str:
        """The selector value wins; the manual field is the fallback."""

        return (guild_id or "").strip() or self._form.manual_guild_id.strip()

    async def save(self, guild_id: Optional[str] = None) -> bool:
        target = self.resolve_guild_id(guild_id)
        if not target:
            self._status.report(MSG_NEED_GUILD, Severity.ERROR)
            return False
        if not is_valid_guild_id(target):
            self._status.report(MSG_BAD_GUILD, Severity.ERROR)
            return False

        body = json.dumps(config_to_wire(read_form(self._form)))
        self._status.report(MSG_SAVING)
        result = await self._transport.request(
            config_path(target),
            method="POST",
            headers={"Content-Type": "application/json"},
            body=body,
        )
        if not result.ok:
            # Transport and HTTP failures get the same remedy, so one message.
            LOGGER.warning("Saving config for guild %s failed: %s", target, result.error or result.payload)
            self._status.report(MSG_SAVE_FAILED, Severity.ERROR)
            return False

        self._status.report(MSG_SAVED, Severity.OK)
        return True
