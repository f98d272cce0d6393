from __future__ import annotations

"""NameType: the 64-byte address used for data and nodes.

Closeness is the XOR metric: for a fixed target, `a` is closer than `b` when
at the first byte where `a ^ target` and `b ^ target` differ, the `a` side is
smaller. Two names are only "equally close" when they are the same name.
"""

import secrets
from dataclasses import dataclass
from typing import Any, ClassVar, Final, Iterable, List, Tuple

from safewire.crypto.hashing import sha512, sha512_concat
from safewire.net.envelope import WireValue, expect_fields
from safewire.net.tags import TypeTag
from safewire.util.fixed import BytesLike, fixed_field, to_fixed

NAME_LEN: Final[int] = 64


@dataclass(frozen=True, slots=True)
class NameType(WireValue):
    id: bytes

    TAGS: ClassVar[Tuple[TypeTag, ...]] = (TypeTag.NAME_TYPE,)

    def __post_init__(self) -> None:
        object.__setattr__(self, "id", to_fixed(self.id, NAME_LEN, field="NameType"))

    @classmethod
    def new(cls, data: BytesLike) -> "NameType":
        return cls(data)

    @classmethod
    def from_digest(cls, content: bytes) -> "NameType":
        return cls(sha512(content))

    @classmethod
    def from_public_keys(cls, *keys: bytes) -> "NameType":
        return cls(sha512_concat(*keys))

    @classmethod
    def from_hex(cls, s: str) -> "NameType":
        return cls(bytes.fromhex(s.strip()))

    @classmethod
    def generate_random(cls) -> "NameType":
        return cls(secrets.token_bytes(NAME_LEN))

    def get_id(self) -> bytes:
        return self.id

    def hex(self) -> str:
        return self.id.hex()

    def is_valid(self) -> bool:
        return any(self.id)

    def distance(self, target: "NameType") -> bytes:
        return bytes(a ^ b for a, b in zip(self.id, target.id))

    def closer(self, other: "NameType", target: "NameType") -> bool:
        return closer_to_target(self, other, target)

    @property
    def type_tag(self) -> TypeTag:
        return TypeTag.NAME_TYPE

    def to_fields(self) -> List[Any]:
        return [self.id]

    @classmethod
    def from_fields(cls, tag: int, fields: List[Any]) -> "NameType":
        (raw,) = expect_fields(fields, 1, "NameType")
        return cls(fixed_field(raw, NAME_LEN, "NameType.id"))

    def __repr__(self) -> str:
        return f"NameType({self.id[:8].hex()}..)"


def closer_to_target(lhs: NameType, rhs: NameType, target: NameType) -> bool:
    for a, b, t in zip(lhs.id, rhs.id, target.id):
        res_0 = a ^ t
        res_1 = b ^ t
        if res_0 != res_1:
            return res_0 < res_1
    return False


def sort_by_closeness(names: Iterable[NameType], target: NameType) -> List[NameType]:
    """Closest first. Big-endian XOR distance compares the same way bytewise."""
    return sorted(names, key=lambda n: n.distance(target))
