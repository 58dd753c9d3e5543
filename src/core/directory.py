"""Guild directory state and the loader that fills it."""

from __future__ import annotations

import logging
from typing import Any, Iterable

from core.models import GuildSummary
from core.ports import TransportPort
from core.status import Severity, StatusReporter

LOGGER = logging.getLogger(__name__)

GUILDS_PATH = "/api/guilds"
PLACEHOLDER_LABEL = "Select a server (guild)"

MSG_LOADING = "Loading servers..."
MSG_UNAVAILABLE = (
    "Could not fetch servers from backend. "
    "Paste Guild ID manually or implement /api/guilds at backend."
)
MSG_BAD_SHAPE = "Unexpected response from /api/guilds"
MSG_LOADED = "Servers loaded. Choose one."


class GuildDirectory:
    """Selectable guild entries, always led by the no-selection placeholder."""

    def __init__(self) -> None:
        self._guilds: list[GuildSummary] = []

    @property
    def guilds(self) -> list[GuildSummary]:
        return list(self._guilds)

    def replace(self, guilds: Iterable[GuildSummary]) -> None:
        self._guilds = list(guilds)

    def clear(self) -> None:
        self._guilds = []

    def options(self) -> list[tuple[str, str]]:
        """(label, value) pairs for a select control."""

        return [(PLACEHOLDER_LABEL, "")] + [(g.name, g.id) for g in self._guilds]


def _parse_guild(entry: Any) -> GuildSummary | None:
    if not isinstance(entry, dict):
        return None
    guild_id = entry.get("id")
    if guild_id is None or str(guild_id) == "":
        return None
    name = entry.get("name")
    return GuildSummary(id=str(guild_id), name=str(name) if name else str(guild_id))


class GuildDirectoryLoader:
    """Fetches the guild list and repopulates the directory."""

    def __init__(
        self,
        transport: TransportPort,
        directory: GuildDirectory,
        status: StatusReporter,
    ) -> None:
        self._transport = transport
        self._directory = directory
        self._status = status

    async def load(self) -> bool:
        self._status.report(MSG_LOADING)
        result = await self._transport.request(GUILDS_PATH)
        if not result.ok:
            # Expected while the backend has no directory endpoint yet.
            self._status.report(MSG_UNAVAILABLE, Severity.ERROR)
            return False

        if not isinstance(result.payload, list):
            self._directory.clear()
            self._status.report(MSG_BAD_SHAPE, Severity.ERROR)
            return False

        guilds = []
        for entry in result.payload:
            guild = _parse_guild(entry)
            if guild is None:
                LOGGER.warning("Skipping malformed guild entry: %r", entry)
                continue
            guilds.append(guild)
        self._directory.replace(guilds)
        LOGGER.info("Loaded %d guilds", len(guilds))
        self._status.report(MSG_LOADED, Severity.OK)
        return True
