from __future__ import annotations

from core.guild_config import (
    ConfigForm,
    GuildConfig,
    config_to_wire,
    fill_form,
    normalize_config,
    read_form,
)


def test_normalize_fills_defaults_for_missing_fields() -> None:
    config = normalize_config({"prefix": "!"})

    assert config == GuildConfig(prefix="!")
    assert config.max_warns is None
    assert config.antispam is True
    assert config.welcome_message == ""


def test_normalize_treats_null_as_absent() -> None:
    config = normalize_config({"prefix": None, "antispam": None, "maxWarns": None})

    assert config.prefix == ""
    assert config.antispam is True
    assert config.max_warns is None


def test_normalize_non_object_payload_is_empty_config() -> None:
    assert normalize_config("<html>oops</html>") == GuildConfig()
    assert normalize_config(None) == GuildConfig()
    assert normalize_config([1, 2]) == GuildConfig()


def test_normalize_reads_camel_case_keys() -> None:
    config = normalize_config(
        {
            "welcomeChannel": "123",
            "welcomeMessage": "Hi {user}",
            "maxWarns": 3,
            "antispam": False,
            "ticketTranscript": "555",
        }
    )

    assert config.welcome_channel == "123"
    assert config.welcome_message == "Hi {user}"
    assert config.max_warns == 3
    assert config.antispam is False
    assert config.ticket_transcript == "555"


def test_normalize_renders_numbers_as_input_text() -> None:
    config = normalize_config({"logChannel": 987654321, "maxWarns": 5.0, "antispam": "false"})

    assert config.log_channel == "987654321"
    assert config.max_warns == 5
    assert config.antispam is False


def test_fill_form_renders_defaults_for_widgets() -> None:
    form = ConfigForm(prefix="old", max_warns="9", antispam="false", manual_guild_id="42")

    fill_form(form, normalize_config({"timezone": "UTC"}))

    assert form.prefix == ""
    assert form.timezone == "UTC"
    assert form.max_warns == ""
    assert form.antispam == "true"
    # The manual guild id is not part of a config.
    assert form.manual_guild_id == "42"


def test_read_form_trims_and_parses() -> None:
    form = ConfigForm(prefix="  ?  ", max_warns=" 4 ", antispam="true", log_channel=" 77 ")

    config = read_form(form)

    assert config.prefix == "?"
    assert config.max_warns == 4
    assert config.antispam is True
    assert config.log_channel == "77"


def test_read_form_max_warns_falls_back_to_zero() -> None:
    assert read_form(ConfigForm(max_warns="")).max_warns == 0
    assert read_form(ConfigForm(max_warns="lots")).max_warns == 0
    assert read_form(ConfigForm(max_warns="2.5")).max_warns == 0


def test_read_form_antispam_only_true_for_exact_string() -> None:
    assert read_form(ConfigForm(antispam="false")).antispam is False
    assert read_form(ConfigForm(antispam="True")).antispam is False
    assert read_form(ConfigForm(antispam="")).antispam is False


def test_load_then_save_without_edits_keeps_config() -> None:
    payload = {
        "prefix": "!",
        "timezone": "Europe/Paris",
        "welcomeChannel": "1",
        "welcomeMessage": "Welcome {user}",
        "welcomeImage": "https://img.example/w.png",
        "maxWarns": 3,
        "antispam": False,
        "logChannel": "2",
        "ticketCategory": "3",
        "ticketTranscript": "4",
    }
    form = ConfigForm()

    fill_form(form, normalize_config(payload))

    assert config_to_wire(read_form(form)) == payload


def test_round_trip_applies_defaults_for_absent_fields() -> None:
    form = ConfigForm()

    fill_form(form, normalize_config({"prefix": " ! "}))
    wire = config_to_wire(read_form(form))

    assert wire["prefix"] == "!"
    assert wire["antispam"] is True
    assert wire["maxWarns"] == 0
    assert wire["welcomeImage"] == ""
