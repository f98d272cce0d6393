from __future__ import annotations

import pytest

from safewire.common.name_type import NameType
from safewire.crypto.sig import SIGNATURE_LEN
from safewire.data.immutable_data import ImmutableData
from safewire.data.safecoin import SafeCoin
from safewire.data.structured_data import StructuredData
from safewire.id.public_id_type import PublicIdType
from safewire.net.codec import decode, encode_value
from safewire.net.payload import Payload
from safewire.net.tags import MPID_TAGS, TypeTag
from safewire.testing.keys import deterministic_id, deterministic_revocation


def _name(b: int) -> NameType:
    return NameType(bytes([b]) * 64)


def _samples():
    rev = deterministic_revocation(label="alice")
    rev_mpid = deterministic_revocation(label="bob", type_tags=MPID_TAGS)
    ident = deterministic_id(label="alice", revocation=rev)
    return [
        _name(1),
        ImmutableData(b"hello world"),
        ImmutableData(b"", TypeTag.IMMUTABLE_DATA_BACKUP),
        ImmutableData(b"\x00" * 1000, TypeTag.IMMUTABLE_DATA_SACRIFICIAL),
        StructuredData(_name(2), _name(3), ((_name(4), _name(5)), (), (_name(6),))),
        StructuredData(_name(2), _name(3)),
        SafeCoin.new(_name(7), [_name(8), _name(9)], [b"\x11" * SIGNATURE_LEN]),
        rev,
        rev_mpid,
        ident,
        PublicIdType.new(ident, rev),
        rev.public_record(),
        rev_mpid.public_record(),
        Payload.new(ImmutableData(b"inner")),
    ]


@pytest.mark.parametrize("value", _samples(), ids=lambda v: type(v).__name__)
def test_roundtrip_and_reencode_is_byte_identical(value) -> None:
    blob = encode_value(value)
    back = decode(blob)
    assert back == value
    assert type(back) is type(value)
    assert encode_value(back) == blob


def test_encoding_is_deterministic() -> None:
    a, b = _samples(), _samples()
    assert [encode_value(x) for x in a] == [encode_value(x) for x in b]


def test_name_type_golden_bytes() -> None:
    # uint32 tag, then a one-element array holding a 64-byte bin
    golden = bytes.fromhex("ce0053a9f8" "91c440") + b"\x01" * 64
    assert encode_value(_name(1)) == golden
    assert decode(golden) == _name(1)


def test_immutable_data_tag_selects_copy_kind() -> None:
    for tag in (TypeTag.IMMUTABLE_DATA, TypeTag.IMMUTABLE_DATA_BACKUP, TypeTag.IMMUTABLE_DATA_SACRIFICIAL):
        out = decode(ImmutableData(b"x", tag).encode())
        assert out.type_tag is tag
        assert out.get_name() == NameType.from_digest(b"x")


def test_secret_fields_survive_roundtrip() -> None:
    rev = deterministic_revocation(label="carol")
    back = decode(rev.encode())
    assert back.secret_key == rev.secret_key
    assert back.type_tags is rev.type_tags
