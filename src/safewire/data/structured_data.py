from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, List, Optional, Sequence, Tuple

from safewire.common.name_type import NAME_LEN, NameType
from safewire.net.envelope import WireValue, expect_fields, expect_list
from safewire.net.tags import TypeTag
from safewire.util.fixed import fixed_field

NameRows = Tuple[Tuple[NameType, ...], ...]


def _rows(value: Sequence[Sequence[NameType]]) -> NameRows:
    out = []
    for row in value:
        r = tuple(row)
        for n in r:
            if not isinstance(n, NameType):
                raise TypeError(f"StructuredData rows hold NameType, got {type(n).__name__}")
        out.append(r)
    return tuple(out)


@dataclass(frozen=True, slots=True)
class StructuredData(WireValue):
    """Mutable record addressed by (name, owner); the value is rows of names."""

    name: NameType
    owner: NameType
    value: NameRows = ()

    TAGS: ClassVar[Tuple[TypeTag, ...]] = (TypeTag.STRUCTURED_DATA,)

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _rows(self.value))

    @property
    def type_tag(self) -> TypeTag:
        return TypeTag.STRUCTURED_DATA

    def get_name(self) -> NameType:
        return self.name

    def get_owner(self) -> Optional[NameType]:
        return self.owner

    def get_value(self) -> NameRows:
        return self.value

    def to_fields(self) -> List[Any]:
        return [self.name.id, self.owner.id, [[n.id for n in row] for row in self.value]]

    @classmethod
    def from_fields(cls, tag: int, fields: List[Any]) -> "StructuredData":
        v = "StructuredData"
        name, owner, rows = expect_fields(fields, 3, v)
        parsed = []
        for i, row in enumerate(expect_list(rows, "value", v)):
            parsed.append(
                tuple(NameType(fixed_field(n, NAME_LEN, f"value[{i}]")) for n in expect_list(row, f"value[{i}]", v))
            )
        return cls(
            name=NameType(fixed_field(name, NAME_LEN, "name")),
            owner=NameType(fixed_field(owner, NAME_LEN, "owner")),
            value=tuple(parsed),
        )
