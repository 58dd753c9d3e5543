"""Transport factory for guild panel.

The aiohttp session itself is opened lazily on the first request and closed
by the app on unmount, so the factory only wires settings into the adapter.
"""

from __future__ import annotations

import logging

from adapters.http_transport import HttpTransport
from core.config import DashboardSettings


def build_transport(settings: DashboardSettings) -> HttpTransport:
    """Create the backend transport with the session cookie attached."""

    logger = logging.getLogger(__name__)
    # Without a cookie the backend will treat us as logged out; still usable
    # against endpoints that do not require a session.
    if not settings.session_cookie:
        logger.warning("No session cookie configured; requests are unauthenticated")

    logger.info("Initializing transport for %s", settings.api_base)

    return HttpTransport.from_settings(settings)
