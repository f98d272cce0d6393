from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, List, Optional, Tuple

from safewire.common.name_type import NameType
from safewire.crypto.sig import (
    BOX_PUBLIC_KEY_LEN,
    BOX_SECRET_KEY_LEN,
    SIGN_PUBLIC_KEY_LEN,
    SIGN_SECRET_KEY_LEN,
    gen_box_keypair,
    gen_sign_keypair,
    sign_detached,
)
from safewire.id.revocation_id_type import RevocationIdType
from safewire.net.envelope import WireValue, expect_fields
from safewire.net.tags import ID_FAMILIES, TypeTag
from safewire.util.fixed import fixed_field, to_fixed

KeyPair = Tuple[bytes, bytes]  # (signing, box)


@dataclass(frozen=True, slots=True)
class IdType(WireValue):
    """Full identity: signing and box key pairs, secrets included."""

    type_tag: TypeTag
    public_keys: KeyPair
    secret_keys: KeyPair = field(repr=False)

    TAGS: ClassVar[Tuple[TypeTag, ...]] = tuple(f.id for f in ID_FAMILIES)

    def __post_init__(self) -> None:
        if int(self.type_tag) not in self.TAGS:
            raise ValueError(f"not an id tag: {self.type_tag}")
        sign_pk, box_pk = self.public_keys
        sign_sk, box_sk = self.secret_keys
        object.__setattr__(self, "type_tag", TypeTag(self.type_tag))
        object.__setattr__(
            self,
            "public_keys",
            (
                to_fixed(sign_pk, SIGN_PUBLIC_KEY_LEN, field="public_keys.sign"),
                to_fixed(box_pk, BOX_PUBLIC_KEY_LEN, field="public_keys.box"),
            ),
        )
        object.__setattr__(
            self,
            "secret_keys",
            (
                to_fixed(sign_sk, SIGN_SECRET_KEY_LEN, field="secret_keys.sign"),
                to_fixed(box_sk, BOX_SECRET_KEY_LEN, field="secret_keys.box"),
            ),
        )

    @classmethod
    def new(cls, revocation: RevocationIdType) -> "IdType":
        sign_pk, sign_sk = gen_sign_keypair()
        box_pk, box_sk = gen_box_keypair()
        return cls(
            type_tag=revocation.type_tags.id,
            public_keys=(sign_pk, box_pk),
            secret_keys=(sign_sk, box_sk),
        )

    def sign(self, data: bytes) -> bytes:
        return sign_detached(data, self.secret_keys[0])

    def get_name(self) -> NameType:
        return NameType.from_public_keys(*self.public_keys)

    def get_owner(self) -> Optional[NameType]:
        return None

    def to_fields(self) -> List[Any]:
        return [self.public_keys[0], self.public_keys[1], self.secret_keys[0], self.secret_keys[1]]

    @classmethod
    def from_fields(cls, tag: int, fields: List[Any]) -> "IdType":
        sign_pk, box_pk, sign_sk, box_sk = expect_fields(fields, 4, "IdType")
        return cls(
            type_tag=TypeTag(tag),
            public_keys=(
                fixed_field(sign_pk, SIGN_PUBLIC_KEY_LEN, "public_keys.sign"),
                fixed_field(box_pk, BOX_PUBLIC_KEY_LEN, "public_keys.box"),
            ),
            secret_keys=(
                fixed_field(sign_sk, SIGN_SECRET_KEY_LEN, "secret_keys.sign"),
                fixed_field(box_sk, BOX_SECRET_KEY_LEN, "secret_keys.box"),
            ),
        )
