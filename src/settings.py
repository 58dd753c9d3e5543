"""Runtime configuration for guild panel.

Everything comes from environment variables (optionally via a local .env
file) so the backend URL and session cookie never live in the repo.
"""

from __future__ import annotations

import os
from typing import Mapping, Optional
from urllib.parse import urlparse

from dotenv import load_dotenv

from core.config import DashboardSettings, LoggingConfig

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

ENV_PREFIX = "GUILD_PANEL_"
DEFAULT_API_BASE = "http://127.0.0.1:8080"
DEFAULT_LOG_FILE = "logs/guild_panel.log"

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _get(env: Mapping[str, str], name: str, default: Optional[str] = None) -> Optional[str]:
    value = env.get(ENV_PREFIX + name)
    if value is None:
        return default
    return value.strip()


def _normalize_api_base(raw: str) -> str:
    api_base = raw.strip().rstrip("/")
    parsed = urlparse(api_base)
    # Fail fast on a malformed base URL; every request would fail otherwise.
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        raise ValueError(f"{ENV_PREFIX}API_BASE must be an http(s) URL, got {raw!r}")
    return api_base


def _parse_timeout(raw: str) -> float:
    try:
        timeout = float(raw)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}TIMEOUT_SECONDS must be a number, got {raw!r}") from None
    if timeout <= 0:
        raise ValueError(f"{ENV_PREFIX}TIMEOUT_SECONDS must be positive, got {raw!r}")
    return timeout


def _load_logging(env: Mapping[str, str], level_override: Optional[str]) -> LoggingConfig:
    level = (level_override or _get(env, "LOG_LEVEL", "INFO") or "INFO").upper()
    file_path = _get(env, "LOG_FILE", DEFAULT_LOG_FILE) or None
    if file_path and not os.path.isabs(file_path):
        file_path = os.path.join(PROJECT_ROOT, file_path)
    console = (_get(env, "LOG_CONSOLE", "false") or "").lower() in _TRUE_VALUES
    return LoggingConfig(level=level, console=console, file_path=file_path)


def load_settings(
    env: Optional[Mapping[str, str]] = None,
    *,
    api_base: Optional[str] = None,
    log_level: Optional[str] = None,
) -> DashboardSettings:
    """Build settings from the environment; explicit arguments win.

    When ``env`` is omitted the process environment is used after reading
    ``.env``.
    """

    if env is None:
        load_dotenv()
        env = os.environ

    return DashboardSettings(
        api_base=_normalize_api_base(api_base or _get(env, "API_BASE", DEFAULT_API_BASE) or ""),
        session_cookie=_get(env, "SESSION_COOKIE") or None,
        cookie_name=_get(env, "COOKIE_NAME", "session") or "session",
        timeout_seconds=_parse_timeout(_get(env, "TIMEOUT_SECONDS", "15") or "15"),
        logging=_load_logging(env, log_level),
    )
