from __future__ import annotations

import pytest

from safewire.config import DEFAULT_MAX_MESSAGE_BYTES, WireConfig, load_wire_config
from safewire.env import load_dotenv_if_present
from safewire.errors import ConfigError


def test_defaults_from_empty_env() -> None:
    cfg = load_wire_config({})
    assert cfg == WireConfig()
    assert cfg.max_message_bytes == DEFAULT_MAX_MESSAGE_BYTES
    assert cfg.accept_string_tags is True
    assert cfg.log_decode_events is False


def test_env_overrides() -> None:
    cfg = load_wire_config(
        {
            "SAFEWIRE_MAX_MESSAGE_BYTES": " 4096 ",
            "SAFEWIRE_ACCEPT_STRING_TAGS": "no",
            "SAFEWIRE_LOG_DECODE_EVENTS": "TRUE",
            "SAFEWIRE_LOG_LEVEL": "debug",
        }
    )
    assert cfg == WireConfig(max_message_bytes=4096, accept_string_tags=False, log_decode_events=True, log_level="DEBUG")


@pytest.mark.parametrize(
    "env",
    [
        {"SAFEWIRE_MAX_MESSAGE_BYTES": "0"},
        {"SAFEWIRE_MAX_MESSAGE_BYTES": "-5"},
        {"SAFEWIRE_MAX_MESSAGE_BYTES": "lots"},
        {"SAFEWIRE_ACCEPT_STRING_TAGS": "maybe"},
        {"SAFEWIRE_LOG_DECODE_EVENTS": ""},
        {"SAFEWIRE_LOG_LEVEL": "LOUD"},
    ],
)
def test_invalid_env_is_config_error(env) -> None:
    with pytest.raises(ConfigError):
        load_wire_config(env)


def test_dotenv_fills_missing_values_only(tmp_path, monkeypatch) -> None:
    p = tmp_path / "wire.env"
    p.write_text("SAFEWIRE_MAX_MESSAGE_BYTES=1234\nSAFEWIRE_LOG_LEVEL=ERROR\n", encoding="utf-8")
    # recorded as unset, so undo also removes what the .env adds
    monkeypatch.setenv("SAFEWIRE_MAX_MESSAGE_BYTES", "1")
    monkeypatch.delenv("SAFEWIRE_MAX_MESSAGE_BYTES")
    monkeypatch.setenv("SAFEWIRE_LOG_LEVEL", "WARNING")

    assert load_dotenv_if_present(str(p), force=True)
    cfg = load_wire_config()
    assert cfg.max_message_bytes == 1234
    assert cfg.log_level == "WARNING"


def test_missing_dotenv_is_not_an_error(tmp_path) -> None:
    assert not load_dotenv_if_present(str(tmp_path / "nope.env"), force=True)
