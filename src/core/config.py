"""Core configuration dataclasses.

We keep environment parsing outside the core, but these dataclasses define
the shape the adapters and app layers expect so they can be built safely.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class LoggingConfig:
    """Logging settings applied once at startup."""

    level: str = "INFO"
    console: bool = False
    file_path: Optional[str] = "logs/guild_panel.log"
    max_bytes: int = 5 * 1024 * 1024
    backup_count: int = 5


@dataclass(frozen=True)
class DashboardSettings:
    """Connection settings for the guild config backend."""

    api_base: str
    session_cookie: Optional[str] = None
    cookie_name: str = "session"
    timeout_seconds: float = 15.0
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @property
    def login_url(self) -> str:
        return f"{self.api_base}/auth/discord"
