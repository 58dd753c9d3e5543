"""Ports (interfaces) used by the core sync components.

Ports define the minimal contracts for the transport and status surface so
the loaders can run against aiohttp, a fake, or another frontend.
"""

from __future__ import annotations

from typing import Mapping, Optional, Protocol

from core.models import ApiResult


class TransportPort(Protocol):
    """The single network boundary. Implementations never raise."""

    async def request(
        self,
        path: str,
        *,
        method: str = "GET",
        headers: Optional[Mapping[str, str]] = None,
        body: Optional[str] = None,
    ) -> ApiResult:
        ...

    async def close(self) -> None:
        ...
