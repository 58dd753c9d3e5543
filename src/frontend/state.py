"""State container for the dashboard session."""

from __future__ import annotations

from dataclasses import dataclass, field

from core.directory import GuildDirectory
from core.guild_config import ConfigForm
from core.navigation import NavigationState
from core.status import StatusReporter


@dataclass
class DashboardState:
    form: ConfigForm = field(default_factory=ConfigForm)
    directory: GuildDirectory = field(default_factory=GuildDirectory)
    navigation: NavigationState = field(default_factory=NavigationState)
    status: StatusReporter = field(default_factory=StatusReporter)
    selected_guild_id: str = ""
    dirty: bool = False
