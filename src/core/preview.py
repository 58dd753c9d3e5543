"""Welcome message preview with sample placeholders."""

from __future__ import annotations

DEFAULT_WELCOME = "Welcome {user} to {server}!"
SAMPLE_USER = "ExampleUser"
SAMPLE_SERVER = "ExampleServer"


def render_welcome_preview(template: str) -> str:
    """Substitute the first ``{user}`` and ``{server}`` with sample names."""

    sample = template or DEFAULT_WELCOME
    return sample.replace("{user}", SAMPLE_USER, 1).replace("{server}", SAMPLE_SERVER, 1)
