from __future__ import annotations

from core.preview import render_welcome_preview
from core.status import Severity, StatusMessage, StatusReporter


def test_report_overwrites_previous_message() -> None:
    status = StatusReporter()

    status.report("Loading servers...")
    status.report("Servers loaded. Choose one.", Severity.OK)

    assert status.current == StatusMessage("Servers loaded. Choose one.", Severity.OK)


def test_listener_sees_every_report() -> None:
    seen: list[StatusMessage] = []
    status = StatusReporter(seen.append)

    status.report("one")
    status.report("two", Severity.ERROR)

    assert [m.text for m in seen] == ["one", "two"]
    assert seen[-1].severity is Severity.ERROR


def test_severity_accepts_plain_strings() -> None:
    status = StatusReporter()

    assert status.report("done", "ok").severity is Severity.OK


def test_welcome_preview_replaces_first_placeholders() -> None:
    assert render_welcome_preview("Hi {user}, welcome to {server}") == "Hi ExampleUser, welcome to ExampleServer"
    assert render_welcome_preview("{user} {user}") == "ExampleUser {user}"


def test_welcome_preview_uses_default_template() -> None:
    assert render_welcome_preview("") == "Welcome ExampleUser to ExampleServer!"
