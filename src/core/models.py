"""Core domain models.

These dataclasses are shared across the core and adapters to avoid tight
coupling to aiohttp or Textual types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class GuildSummary:
    """One entry of the guild directory as returned by the backend."""

    id: str
    name: str


@dataclass(frozen=True)
class ApiResult:
    """Outcome of one backend call.

    ``error`` is only set when no response was obtained at all; in that case
    ``payload`` is None. Otherwise ``payload`` is the parsed JSON body, or the
    raw text when the body is not JSON.
    """

    ok: bool
    payload: Any = None
    error: Optional[str] = None
