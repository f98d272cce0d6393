from __future__ import annotations

"""Public revocation record: a self-certifying revocation key.

The record carries a public key and a signature BY that key OVER that key.
Decoding verifies the signature, so a record whose signature attests to some
other key (or has been altered in transit) never becomes an object.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, List, Optional, Tuple

from safewire.common.name_type import NameType
from safewire.crypto.sig import SIGN_PUBLIC_KEY_LEN, SIGNATURE_LEN, verify_self_signed
from safewire.errors import BadSignatureError
from safewire.net.envelope import WireValue, expect_fields
from safewire.net.tags import ID_FAMILIES, TypeTag
from safewire.util.fixed import fixed_field, to_fixed

if TYPE_CHECKING:  # pragma: no cover
    from safewire.id.revocation_id_type import RevocationIdType


@dataclass(frozen=True, slots=True)
class PublicRevocationIdType(WireValue):
    type_tag: TypeTag
    public_key: bytes
    signature: bytes

    TAGS: ClassVar[Tuple[TypeTag, ...]] = tuple(f.public_revocation for f in ID_FAMILIES)

    def __post_init__(self) -> None:
        if int(self.type_tag) not in self.TAGS:
            raise ValueError(f"not a public revocation tag: {self.type_tag}")
        object.__setattr__(self, "type_tag", TypeTag(self.type_tag))
        object.__setattr__(self, "public_key", to_fixed(self.public_key, SIGN_PUBLIC_KEY_LEN, field="public_key"))
        object.__setattr__(self, "signature", to_fixed(self.signature, SIGNATURE_LEN, field="signature"))

    @classmethod
    def new(cls, revocation: "RevocationIdType") -> "PublicRevocationIdType":
        pk = revocation.public_key
        return cls(
            type_tag=revocation.type_tags.public_revocation,
            public_key=pk,
            signature=revocation.sign(pk),
        )

    def verify(self) -> bool:
        return verify_self_signed(self.public_key, self.signature, self.public_key)

    def get_name(self) -> NameType:
        return NameType.from_digest(self.public_key)

    def get_owner(self) -> Optional[NameType]:
        return self.get_name()

    def to_fields(self) -> List[Any]:
        return [self.public_key, self.signature]

    @classmethod
    def from_fields(cls, tag: int, fields: List[Any]) -> "PublicRevocationIdType":
        v = "PublicRevocationIdType"
        pk, sig = expect_fields(fields, 2, v)
        out = cls(
            type_tag=TypeTag(tag),
            public_key=fixed_field(pk, SIGN_PUBLIC_KEY_LEN, "public_key"),
            signature=fixed_field(sig, SIGNATURE_LEN, "signature"),
        )
        if not out.verify():
            raise BadSignatureError(f"{v}: self-signature does not verify", variant=v)
        return out
