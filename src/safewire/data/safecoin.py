from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, List, Optional, Sequence, Tuple

from safewire.common.name_type import NAME_LEN, NameType
from safewire.crypto.sig import SIGNATURE_LEN
from safewire.net.envelope import WireValue, expect_fields, expect_list
from safewire.net.tags import TypeTag
from safewire.util.fixed import fixed_field, to_fixed


@dataclass(frozen=True, slots=True)
class SafeCoin(WireValue):
    name: NameType
    owners: Tuple[NameType, ...]
    previous_owners: Tuple[NameType, ...]
    signatures: Tuple[bytes, ...]

    TAGS: ClassVar[Tuple[TypeTag, ...]] = (TypeTag.SAFECOIN,)

    def __post_init__(self) -> None:
        object.__setattr__(self, "owners", tuple(self.owners))
        object.__setattr__(self, "previous_owners", tuple(self.previous_owners))
        object.__setattr__(
            self,
            "signatures",
            tuple(to_fixed(s, SIGNATURE_LEN, field=f"signatures[{i}]") for i, s in enumerate(self.signatures)),
        )

    @classmethod
    def new(cls, name: NameType, owners: Sequence[NameType], signatures: Sequence[bytes]) -> "SafeCoin":
        # a freshly minted coin has no transfer history yet
        return cls(name=name, owners=tuple(owners), previous_owners=tuple(owners), signatures=tuple(signatures))

    @property
    def type_tag(self) -> TypeTag:
        return TypeTag.SAFECOIN

    def get_name(self) -> NameType:
        return self.name

    def get_owner(self) -> Optional[NameType]:
        return self.owners[0] if self.owners else None

    def to_fields(self) -> List[Any]:
        return [
            self.name.id,
            [n.id for n in self.owners],
            [n.id for n in self.previous_owners],
            list(self.signatures),
        ]

    @classmethod
    def from_fields(cls, tag: int, fields: List[Any]) -> "SafeCoin":
        v = "SafeCoin"
        name, owners, previous, sigs = expect_fields(fields, 4, v)
        return cls(
            name=NameType(fixed_field(name, NAME_LEN, "name")),
            owners=tuple(NameType(fixed_field(n, NAME_LEN, "owners")) for n in expect_list(owners, "owners", v)),
            previous_owners=tuple(
                NameType(fixed_field(n, NAME_LEN, "previous_owners")) for n in expect_list(previous, "previous_owners", v)
            ),
            signatures=tuple(fixed_field(s, SIGNATURE_LEN, "signatures") for s in expect_list(sigs, "signatures", v)),
        )
