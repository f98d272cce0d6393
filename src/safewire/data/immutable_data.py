from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, List, Optional, Tuple

from safewire.common.name_type import NameType
from safewire.net.envelope import WireValue, expect_bytes, expect_fields
from safewire.net.tags import IMMUTABLE_DATA_TAGS, TypeTag


@dataclass(frozen=True, slots=True)
class ImmutableData(WireValue):
    """Content-addressed block. Its name is the SHA-512 of its value.

    The same class covers the normal, backup and sacrificial copies; only the
    type tag differs on the wire.
    """

    value: bytes
    type_tag: TypeTag = TypeTag.IMMUTABLE_DATA

    TAGS: ClassVar[Tuple[TypeTag, ...]] = IMMUTABLE_DATA_TAGS

    def __post_init__(self) -> None:
        if not isinstance(self.value, (bytes, bytearray, memoryview)):
            raise TypeError(f"value must be bytes, got {type(self.value).__name__}")
        if int(self.type_tag) not in self.TAGS:
            raise ValueError(f"not an immutable data tag: {self.type_tag}")
        object.__setattr__(self, "value", bytes(self.value))
        object.__setattr__(self, "type_tag", TypeTag(self.type_tag))

    def get_name(self) -> NameType:
        return NameType.from_digest(self.value)

    def get_owner(self) -> Optional[NameType]:
        return None

    def get_value(self) -> bytes:
        return self.value

    def to_fields(self) -> List[Any]:
        return [self.value]

    @classmethod
    def from_fields(cls, tag: int, fields: List[Any]) -> "ImmutableData":
        (value,) = expect_fields(fields, 1, "ImmutableData")
        return cls(expect_bytes(value, "value", "ImmutableData"), TypeTag(tag))

    def __repr__(self) -> str:
        return f"ImmutableData(type_tag={self.type_tag.name}, name={self.get_name()!r}, len={len(self.value)})"
