from __future__ import annotations

import msgpack
import pytest

from safewire.common.name_type import NameType
from safewire.config import WireConfig
from safewire.data.immutable_data import ImmutableData
from safewire.errors import BadTagError, MalformedError
from safewire.net.codec import Unknown, decode
from safewire.net.envelope import encode
from safewire.net.payload import Payload
from safewire.net.tags import TypeTag


def test_payload_carries_inner_value() -> None:
    inner = ImmutableData(b"block")
    p = Payload.new(inner)
    assert p.type_tag is TypeTag.PAYLOAD
    assert p.get_type_tag() == int(TypeTag.IMMUTABLE_DATA)
    assert p.get_data() == inner
    assert decode(p.encode()).get_data() == inner


def test_set_data_returns_new_payload() -> None:
    p = Payload.dummy_new(int(TypeTag.NAME_TYPE))
    assert p.payload == b""
    name = NameType(b"\x0a" * 64)
    q = p.set_data(name)
    assert p.payload == b""
    assert q.get_type_tag() == int(TypeTag.NAME_TYPE)
    assert q.get_data() == name


def test_payload_with_unknown_inner_tag_is_forwardable() -> None:
    inner = encode(77, [b"opaque"])
    p = Payload(77, inner)
    back = decode(p.encode())
    assert back.payload == inner
    assert back.get_data() == Unknown(77)


def test_payload_declared_tag_must_match_carried_value() -> None:
    p = Payload(int(TypeTag.NAME_TYPE), ImmutableData(b"x").encode())
    with pytest.raises(MalformedError):
        p.get_data()


def test_payload_inner_tag_must_be_u64() -> None:
    with pytest.raises(ValueError):
        Payload(-1, b"")
    with pytest.raises(ValueError):
        Payload(True, b"")  # type: ignore[arg-type]


STRICT = WireConfig(accept_string_tags=False)


def _string_tagged(tag: int, fields) -> bytes:
    return msgpack.packb(str(tag)) + msgpack.packb(fields, use_bin_type=True)


def test_strict_config_refuses_string_inner_tag() -> None:
    fields = [str(int(TypeTag.IMMUTABLE_DATA)), ImmutableData(b"a").encode()]
    outer = msgpack.packb(int(TypeTag.PAYLOAD)) + msgpack.packb(fields, use_bin_type=True)
    assert decode(outer, config=WireConfig()).get_data(config=WireConfig()) == ImmutableData(b"a")
    with pytest.raises(BadTagError):
        decode(outer, config=STRICT)


def test_get_data_applies_caller_config_to_inner_message() -> None:
    inner = _string_tagged(int(TypeTag.IMMUTABLE_DATA), [b"abc"])
    p = decode(Payload(int(TypeTag.IMMUTABLE_DATA), inner).encode(), config=STRICT)
    assert p.get_data(config=WireConfig()) == ImmutableData(b"abc")
    with pytest.raises(BadTagError):
        p.get_data(config=STRICT)


def test_get_data_applies_caller_size_limit() -> None:
    p = Payload.new(ImmutableData(b"z" * 64))
    with pytest.raises(MalformedError):
        p.get_data(config=WireConfig(max_message_bytes=16))
