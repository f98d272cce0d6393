from __future__ import annotations

from safewire.common.name_type import NameType
from safewire.common.routable import Routable, closest
from safewire.data.immutable_data import ImmutableData
from safewire.data.safecoin import SafeCoin
from safewire.data.structured_data import StructuredData
from safewire.id.public_id_type import PublicIdType
from safewire.net.payload import Payload
from safewire.testing.keys import deterministic_id, deterministic_revocation


def _name(b: int) -> NameType:
    return NameType(bytes([b]) * 64)


def test_addressable_values_are_routable() -> None:
    rev = deterministic_revocation(label="r")
    ident = deterministic_id(label="r", revocation=rev)
    for v in (
        ImmutableData(b"x"),
        StructuredData(_name(1), _name(2)),
        SafeCoin.new(_name(1), [_name(2)], []),
        ident,
        PublicIdType.new(ident, rev),
        rev.public_record(),
    ):
        assert isinstance(v, Routable)
    assert not isinstance(Payload.dummy_new(1), Routable)


def test_owners() -> None:
    assert ImmutableData(b"x").get_owner() is None
    assert StructuredData(_name(1), _name(2)).get_owner() == _name(2)
    assert SafeCoin.new(_name(1), [_name(3), _name(4)], []).get_owner() == _name(3)
    assert SafeCoin.new(_name(1), [], []).get_owner() is None


def test_closest_orders_by_xor_distance() -> None:
    values = [StructuredData(_name(b), _name(0)) for b in (0x80, 0x01, 0x10, 0x03)]
    got = closest(values, _name(0x00), count=2)
    assert [v.get_name() for v in got] == [_name(0x01), _name(0x03)]
    assert closest(values, _name(0x00), count=0) == []
    assert len(closest(values, _name(0x00), count=10)) == 4
