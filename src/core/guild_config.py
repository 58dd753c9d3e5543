"""Guild config normalization and the form state it flows through.

One default table drives both directions:

* ``normalize_config`` turns whatever the backend returned into a complete
  ``GuildConfig`` (strings default to "", ``max_warns`` to unset,
  ``antispam`` to True).
* ``fill_form`` renders a ``GuildConfig`` into the string values the widgets
  hold, and ``read_form`` parses them back for saving.

``ConfigForm`` is the only mutable copy of a config. Loads write into it,
saves read from it, and the frontend mirrors it into widgets.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

# Attribute name -> wire key. Order matches the form layout.
TEXT_FIELDS: dict[str, str] = {
    "prefix": "prefix",
    "timezone": "timezone",
    "welcome_channel": "welcomeChannel",
    "welcome_message": "welcomeMessage",
    "welcome_image": "welcomeImage",
    "log_channel": "logChannel",
    "ticket_category": "ticketCategory",
    "ticket_transcript": "ticketTranscript",
}
MAX_WARNS_KEY = "maxWarns"
ANTISPAM_KEY = "antispam"

ANTISPAM_DEFAULT = True


@dataclass(frozen=True)
class GuildConfig:
    """Per-guild settings as exchanged with the backend."""

    prefix: str = ""
    timezone: str = ""
    welcome_channel: str = ""
    welcome_message: str = ""
    welcome_image: str = ""
    max_warns: Optional[int] = None
    antispam: bool = ANTISPAM_DEFAULT
    log_channel: str = ""
    ticket_category: str = ""
    ticket_transcript: str = ""


@dataclass
class ConfigForm:
    """Editable form values, exactly as the input widgets hold them."""

    prefix: str = ""
    timezone: str = ""
    welcome_channel: str = ""
    welcome_message: str = ""
    welcome_image: str = ""
    max_warns: str = ""
    antispam: str = "true"
    log_channel: str = ""
    ticket_category: str = ""
    ticket_transcript: str = ""
    manual_guild_id: str = ""


def _as_text(value: Any) -> str:
    """Render a JSON scalar the way a text input would show it."""

    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _parse_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def normalize_config(raw: Any) -> GuildConfig:
    """Fill every missing field of a (possibly partial) payload with its default.

    Anything that is not a JSON object counts as an empty config, and null
    values count as absent.
    """

    partial: Mapping[str, Any] = raw if isinstance(raw, Mapping) else {}
    values: dict[str, Any] = {
        attr: _as_text(partial.get(key)) for attr, key in TEXT_FIELDS.items()
    }
    values["max_warns"] = _parse_int(partial.get(MAX_WARNS_KEY))
    antispam = partial.get(ANTISPAM_KEY)
    values["antispam"] = ANTISPAM_DEFAULT if antispam is None else _as_text(antispam) == "true"
    return GuildConfig(**values)


def fill_form(form: ConfigForm, config: GuildConfig) -> None:
    """Overwrite every config field of ``form``; the manual guild id is kept."""

    for attr in TEXT_FIELDS:
        setattr(form, attr, getattr(config, attr))
    form.max_warns = "" if config.max_warns is None else str(config.max_warns)
    form.antispam = "true" if config.antispam else "false"


def read_form(form: ConfigForm) -> GuildConfig:
    """Build the config to save: strings trimmed, bad numbers become 0."""

    values: dict[str, Any] = {
        attr: getattr(form, attr).strip() for attr in TEXT_FIELDS
    }
    max_warns = _parse_int(form.max_warns)
    values["max_warns"] = 0 if max_warns is None else max_warns
    values["antispam"] = form.antispam == "true"
    return GuildConfig(**values)


def config_to_wire(config: GuildConfig) -> dict[str, Any]:
    """Serialize to the backend's camelCase JSON object."""

    wire: dict[str, Any] = {}
    for attr, key in TEXT_FIELDS.items():
        wire[key] = getattr(config, attr)
    wire[MAX_WARNS_KEY] = 0 if config.max_warns is None else config.max_warns
    wire[ANTISPAM_KEY] = config.antispam
    return wire
