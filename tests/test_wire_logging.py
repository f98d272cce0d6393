from __future__ import annotations

import json
import logging

import msgpack
import pytest

from safewire.config import WireConfig
from safewire.errors import BadTagError
from safewire.net.codec import Unknown, decode
from safewire.net.envelope import encode
from safewire.net.net_logging import WIRE_LOGGER, configure_structured_logging, log_event

LOUD = WireConfig(log_decode_events=True)


def _events(caplog) -> list[dict]:
    return [json.loads(r.getMessage()) for r in caplog.records if r.name == WIRE_LOGGER]


def test_log_event_is_one_json_line_with_hex_bytes(caplog) -> None:
    log = logging.getLogger(WIRE_LOGGER)
    with caplog.at_level(logging.INFO, logger=WIRE_LOGGER):
        log_event(log, "probe", raw=b"\x01\xff", n=3)
    (ev,) = _events(caplog)
    assert ev["event"] == "probe"
    assert ev["raw"] == "01ff"
    assert ev["n"] == 3
    assert isinstance(ev["ts_ms"], int)


def test_unknown_tag_is_logged_when_enabled(caplog) -> None:
    with caplog.at_level(logging.INFO, logger=WIRE_LOGGER):
        assert decode(encode(42, []), config=LOUD) == Unknown(42)
    (ev,) = _events(caplog)
    assert ev["event"] == "wire_decode_unknown_tag"
    assert ev["tag"] == 42


def test_rejection_is_logged_then_raised(caplog) -> None:
    with caplog.at_level(logging.INFO, logger=WIRE_LOGGER):
        with pytest.raises(BadTagError):
            decode(msgpack.packb("x") + msgpack.packb([]), config=LOUD)
    (ev,) = _events(caplog)
    assert ev["event"] == "wire_decode_rejected"
    assert ev["code"] == "bad_tag"


def test_decode_is_quiet_by_default(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger=WIRE_LOGGER):
        decode(encode(42, []), config=WireConfig())
    assert _events(caplog) == []


def test_configure_structured_logging_is_idempotent() -> None:
    root = logging.getLogger("safewire")
    saved = (list(root.handlers), root.level, root.propagate, getattr(root, "_safewire_configured", False))
    try:
        configure_structured_logging("warning")
        configure_structured_logging("DEBUG")
        added = [h for h in root.handlers if h not in saved[0]]
        assert len(added) == 1
        assert root.level == logging.DEBUG
        assert root.propagate is False
    finally:
        root.handlers[:] = saved[0]
        root.setLevel(saved[1])
        root.propagate = saved[2]
        setattr(root, "_safewire_configured", saved[3])
