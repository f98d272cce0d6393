from __future__ import annotations

"""Codec configuration.

Read from the environment (after an optional .env, see env.py):

    SAFEWIRE_MAX_MESSAGE_BYTES   reject larger inputs before parsing (default 8 MiB)
    SAFEWIRE_ACCEPT_STRING_TAGS  accept "5483100"-style leading tags (default true)
    SAFEWIRE_LOG_DECODE_EVENTS   emit JSONL events for unknown tags / rejections (default false)
    SAFEWIRE_LOG_LEVEL           level for configure_structured_logging (default INFO)
"""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from safewire.env import load_dotenv_if_present
from safewire.errors import ConfigError

DEFAULT_MAX_MESSAGE_BYTES = 8 * 1024 * 1024

_TRUE = {"1", "true", "yes", "y", "on"}
_FALSE = {"0", "false", "no", "n", "off"}


@dataclass(frozen=True)
class WireConfig:
    max_message_bytes: int = DEFAULT_MAX_MESSAGE_BYTES
    accept_string_tags: bool = True
    log_decode_events: bool = False
    log_level: str = "INFO"


class WireConfigModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    max_message_bytes: int = Field(default=DEFAULT_MAX_MESSAGE_BYTES, gt=0)
    accept_string_tags: bool = True
    log_decode_events: bool = False
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        name = v.strip().upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"unknown log level: {v}")
        return name


def _flag(env: Mapping[str, str], key: str) -> Optional[bool]:
    raw = env.get(key)
    if raw is None:
        return None
    s = raw.strip().lower()
    if s in _TRUE:
        return True
    if s in _FALSE:
        return False
    raise ConfigError(f"{key}: expected a boolean, got {raw!r}")


def load_wire_config(env: Optional[Mapping[str, str]] = None) -> WireConfig:
    """Build a validated WireConfig from `env` (defaults to os.environ)."""
    if env is None:
        load_dotenv_if_present()
        env = os.environ

    raw = {}
    if env.get("SAFEWIRE_MAX_MESSAGE_BYTES") is not None:
        raw["max_message_bytes"] = env["SAFEWIRE_MAX_MESSAGE_BYTES"].strip()
    for key, name in (
        ("SAFEWIRE_ACCEPT_STRING_TAGS", "accept_string_tags"),
        ("SAFEWIRE_LOG_DECODE_EVENTS", "log_decode_events"),
    ):
        v = _flag(env, key)
        if v is not None:
            raw[name] = v
    if env.get("SAFEWIRE_LOG_LEVEL"):
        raw["log_level"] = env["SAFEWIRE_LOG_LEVEL"]

    try:
        m = WireConfigModel(**raw)
    except ValidationError as e:
        raise ConfigError(f"invalid wire config: {e}") from e
    return WireConfig(**m.model_dump())


@lru_cache(maxsize=1)
def default_wire_config() -> WireConfig:
    return load_wire_config()
