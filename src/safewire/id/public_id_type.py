from __future__ import annotations

"""Public identity record.

Published form of an IdType: its public keys plus the family's revocation
public key, signed by the revocation key. Signing bytes:

    sign_pub || box_pub || revocation_pub || ascii(decimal type_tag)

Built in two phases: assemble the unsigned fields, sign their canonical
bytes, then freeze the result. Decoding re-derives the same bytes and checks
the signature before returning.
"""

from dataclasses import dataclass
from typing import Any, ClassVar, List, Optional, Tuple

from safewire.common.name_type import NameType
from safewire.crypto.hashing import sha512_concat
from safewire.crypto.sig import BOX_PUBLIC_KEY_LEN, SIGN_PUBLIC_KEY_LEN, SIGNATURE_LEN, verify_detached
from safewire.errors import BadSignatureError
from safewire.id.id_type import IdType, KeyPair
from safewire.id.revocation_id_type import RevocationIdType
from safewire.net.envelope import WireValue, expect_fields
from safewire.net.tags import ID_FAMILIES, TypeTag
from safewire.util.fixed import fixed_field, to_fixed


def signing_bytes(public_keys: KeyPair, revocation_public_key: bytes, type_tag: int) -> bytes:
    return public_keys[0] + public_keys[1] + revocation_public_key + str(int(type_tag)).encode("ascii")


@dataclass(frozen=True, slots=True)
class PublicIdType(WireValue):
    type_tag: TypeTag
    public_keys: KeyPair
    revocation_public_key: bytes
    signature: bytes

    TAGS: ClassVar[Tuple[TypeTag, ...]] = tuple(f.public_id for f in ID_FAMILIES)

    def __post_init__(self) -> None:
        if int(self.type_tag) not in self.TAGS:
            raise ValueError(f"not a public id tag: {self.type_tag}")
        sign_pk, box_pk = self.public_keys
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
            "revocation_public_key",
            to_fixed(self.revocation_public_key, SIGN_PUBLIC_KEY_LEN, field="revocation_public_key"),
        )
        object.__setattr__(self, "signature", to_fixed(self.signature, SIGNATURE_LEN, field="signature"))

    @classmethod
    def new(cls, id_type: IdType, revocation: RevocationIdType) -> "PublicIdType":
        if revocation.type_tags.id != id_type.type_tag:
            raise ValueError("id and revocation key belong to different families")
        type_tag = revocation.type_tags.public_id
        msg = signing_bytes(id_type.public_keys, revocation.public_key, type_tag)
        return cls(
            type_tag=type_tag,
            public_keys=id_type.public_keys,
            revocation_public_key=revocation.public_key,
            signature=revocation.sign(msg),
        )

    def signing_bytes(self) -> bytes:
        return signing_bytes(self.public_keys, self.revocation_public_key, self.type_tag)

    def verify(self) -> bool:
        return verify_detached(self.signature, self.signing_bytes(), self.revocation_public_key)

    def get_name(self) -> NameType:
        return NameType(sha512_concat(self.signing_bytes(), self.signature))

    def get_owner(self) -> Optional[NameType]:
        return None

    def to_fields(self) -> List[Any]:
        return [self.public_keys[0], self.public_keys[1], self.revocation_public_key, self.signature]

    @classmethod
    def from_fields(cls, tag: int, fields: List[Any]) -> "PublicIdType":
        v = "PublicIdType"
        sign_pk, box_pk, rev_pk, sig = expect_fields(fields, 4, v)
        out = cls(
            type_tag=TypeTag(tag),
            public_keys=(
                fixed_field(sign_pk, SIGN_PUBLIC_KEY_LEN, "public_keys.sign"),
                fixed_field(box_pk, BOX_PUBLIC_KEY_LEN, "public_keys.box"),
            ),
            revocation_public_key=fixed_field(rev_pk, SIGN_PUBLIC_KEY_LEN, "revocation_public_key"),
            signature=fixed_field(sig, SIGNATURE_LEN, "signature"),
        )
        if not out.verify():
            raise BadSignatureError(f"{v}: revocation signature does not verify", variant=v)
        return out
