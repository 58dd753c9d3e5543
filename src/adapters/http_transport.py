"""aiohttp transport for the guild config backend.

This is the only place that talks to the network. Every call ends in an
``ApiResult``; connection problems become ``ok=False`` with an error string
instead of an exception.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Mapping, Optional

from aiohttp import ClientSession, ClientTimeout, CookieJar

from core.config import DashboardSettings
from core.models import ApiResult

LOGGER = logging.getLogger(__name__)


def _parse_body(text: str) -> Any:
    try:
        return json.loads(text)
    except ValueError:
        return text


def _describe(exc: BaseException) -> str:
    message = str(exc).strip()
    if message:
        return message
    return exc.__class__.__name__


class HttpTransport:
    """Cookie-authenticated client bound to one API base URL."""

    def __init__(
        self,
        api_base: str,
        *,
        cookies: Optional[Mapping[str, str]] = None,
        timeout_seconds: float = 15.0,
    ) -> None:
        self._api_base = api_base.rstrip("/")
        self._cookies = dict(cookies or {})
        self._timeout = ClientTimeout(total=timeout_seconds)
        self._session: Optional[ClientSession] = None

    @classmethod
    def from_settings(cls, settings: DashboardSettings) -> "HttpTransport":
        cookies = {}
        if settings.session_cookie:
            cookies[settings.cookie_name] = settings.session_cookie
        return cls(settings.api_base, cookies=cookies, timeout_seconds=settings.timeout_seconds)

    @property
    def api_base(self) -> str:
        return self._api_base

    def url_for(self, path: str) -> str:
        return f"{self._api_base}{path}"

    def _ensure_session(self) -> ClientSession:
        # Created lazily so the session binds to the running event loop.
        if self._session is None or self._session.closed:
            # unsafe: keep cookies for IP hosts such as 127.0.0.1.
            jar = CookieJar(unsafe=True)
            self._session = ClientSession(cookies=self._cookies, cookie_jar=jar, timeout=self._timeout)
        return self._session

    async def close(self) -> None:
        if self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None

    async def __aenter__(self) -> "HttpTransport":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def request(
        self,
        path: str,
        *,
        method: str = "GET",
        headers: Optional[Mapping[str, str]] = None,
        body: Optional[str] = None,
    ) -> ApiResult:
        url = self.url_for(path)
        try:
            session = self._ensure_session()
            async with session.request(method, url, headers=headers, data=body) as rsp:
                text = await rsp.text(errors="replace")
                # 2xx only; unfollowed redirects and 304 are not success.
                ok = 200 <= rsp.status < 300
                status = rsp.status
        except asyncio.CancelledError:
            raise
        except Exception as exc:
            # No response at all: DNS, refused connection, timeout, bad URL.
            error = _describe(exc)
            LOGGER.warning("%s %s failed: %s", method, url, error)
            return ApiResult(ok=False, payload=None, error=error)

        LOGGER.debug("%s %s -> %s", method, url, status)
        return ApiResult(ok=ok, payload=_parse_body(text))
