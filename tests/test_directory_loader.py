from __future__ import annotations

import asyncio
from typing import Optional

from core.directory import (
    MSG_BAD_SHAPE,
    MSG_LOADED,
    MSG_UNAVAILABLE,
    PLACEHOLDER_LABEL,
    GuildDirectory,
    GuildDirectoryLoader,
)
from core.models import ApiResult, GuildSummary
from core.status import Severity, StatusReporter


class FakeTransport:
    def __init__(self, *results: ApiResult) -> None:
        self.results = list(results)
        self.calls: list[tuple[str, str]] = []

    async def request(self, path: str, *, method: str = "GET", headers=None, body: Optional[str] = None) -> ApiResult:
        self.calls.append((method, path))
        return self.results.pop(0)

    async def close(self) -> None:
        pass


def _loader(*results: ApiResult) -> tuple[GuildDirectoryLoader, GuildDirectory, StatusReporter, FakeTransport]:
    transport = FakeTransport(*results)
    directory = GuildDirectory()
    status = StatusReporter()
    return GuildDirectoryLoader(transport, directory, status), directory, status, transport


def test_empty_directory_still_has_placeholder() -> None:
    assert GuildDirectory().options() == [(PLACEHOLDER_LABEL, "")]


def test_loads_guilds_into_directory() -> None:
    payload = [{"id": "1", "name": "Alpha"}, {"id": "2", "name": "Beta"}]
    loader, directory, status, transport = _loader(ApiResult(ok=True, payload=payload))

    assert asyncio.run(loader.load()) is True

    assert transport.calls == [("GET", "/api/guilds")]
    assert directory.guilds == [GuildSummary("1", "Alpha"), GuildSummary("2", "Beta")]
    assert directory.options() == [(PLACEHOLDER_LABEL, ""), ("Alpha", "1"), ("Beta", "2")]
    assert status.current.text == MSG_LOADED
    assert status.current.severity is Severity.OK


def test_reload_does_not_duplicate_entries() -> None:
    payload = [{"id": "1", "name": "Alpha"}, {"id": "2", "name": "Beta"}]
    loader, directory, _, _ = _loader(
        ApiResult(ok=True, payload=payload),
        ApiResult(ok=True, payload=payload),
    )

    asyncio.run(loader.load())
    asyncio.run(loader.load())

    assert directory.options() == [(PLACEHOLDER_LABEL, ""), ("Alpha", "1"), ("Beta", "2")]


def test_failure_reports_manual_entry_hint_and_keeps_entries() -> None:
    loader, directory, status, _ = _loader(
        ApiResult(ok=True, payload=[{"id": "1", "name": "Alpha"}]),
        ApiResult(ok=False, payload=None, error="connection refused"),
    )

    asyncio.run(loader.load())
    assert asyncio.run(loader.load()) is False

    assert status.current.text == MSG_UNAVAILABLE
    assert status.current.severity is Severity.ERROR
    assert directory.guilds == [GuildSummary("1", "Alpha")]


def test_http_error_is_reported_like_network_failure() -> None:
    loader, _, status, _ = _loader(ApiResult(ok=False, payload="Not Found"))

    asyncio.run(loader.load())

    assert status.current.text == MSG_UNAVAILABLE


def test_non_list_payload_reports_unexpected_shape() -> None:
    loader, directory, status, _ = _loader(
        ApiResult(ok=True, payload=[{"id": "1", "name": "Alpha"}]),
        ApiResult(ok=True, payload={"guilds": []}),
    )

    asyncio.run(loader.load())
    assert asyncio.run(loader.load()) is False

    assert status.current.text == MSG_BAD_SHAPE
    assert status.current.text != MSG_UNAVAILABLE
    assert directory.options() == [(PLACEHOLDER_LABEL, "")]


def test_malformed_entries_are_skipped() -> None:
    payload = [{"id": 5, "name": "Numeric"}, {"name": "No id"}, "junk", {"id": "7"}]
    loader, directory, _, _ = _loader(ApiResult(ok=True, payload=payload))

    asyncio.run(loader.load())

    assert directory.guilds == [GuildSummary("5", "Numeric"), GuildSummary("7", "7")]
