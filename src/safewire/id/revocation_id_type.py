from __future__ import annotations

"""Revocation (anonymous) signing key for one identity family.

A RevocationIdType signs the public identity records of its family
(see public_id_type.py) and its own public revocation record
(see public_revocation_id_type.py). It carries the family's three tags so a
decoder can tell client keys from public-name keys.
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar, List, Tuple

from safewire.crypto.sig import SIGN_PUBLIC_KEY_LEN, SIGN_SECRET_KEY_LEN, gen_sign_keypair, sign_detached
from safewire.errors import BadTagError
from safewire.id.public_revocation_id_type import PublicRevocationIdType
from safewire.net.envelope import WireValue, expect_fields, expect_list, parse_tag
from safewire.net.tags import ID_FAMILIES, MAID_TAGS, IdTypeTags, TypeTag, family_for_tags
from safewire.util.fixed import fixed_field, to_fixed


@dataclass(frozen=True, slots=True)
class RevocationIdType(WireValue):
    type_tags: IdTypeTags
    public_key: bytes
    secret_key: bytes = field(repr=False)

    TAGS: ClassVar[Tuple[TypeTag, ...]] = tuple(f.revocation for f in ID_FAMILIES)
    NESTED_TAGS: ClassVar[bool] = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "public_key", to_fixed(self.public_key, SIGN_PUBLIC_KEY_LEN, field="public_key"))
        object.__setattr__(self, "secret_key", to_fixed(self.secret_key, SIGN_SECRET_KEY_LEN, field="secret_key"))

    @classmethod
    def new(cls, type_tags: IdTypeTags = MAID_TAGS) -> "RevocationIdType":
        pk, sk = gen_sign_keypair()
        return cls(type_tags=type_tags, public_key=pk, secret_key=sk)

    @property
    def type_tag(self) -> TypeTag:
        return self.type_tags.revocation

    def sign(self, data: bytes) -> bytes:
        """Detached signature over `data`."""
        return sign_detached(data, self.secret_key)

    def public_record(self) -> PublicRevocationIdType:
        return PublicRevocationIdType.new(self)

    def to_fields(self) -> List[Any]:
        return [list(self.type_tags.as_tuple()), self.public_key, self.secret_key]

    @classmethod
    def from_fields(cls, tag: int, fields: List[Any], *, accept_string_tags: bool = True) -> "RevocationIdType":
        v = "RevocationIdType"
        raw_tags, pk, sk = expect_fields(fields, 3, v)
        tags = expect_list(raw_tags, "type_tags", v)
        if len(tags) != 3:
            raise BadTagError(f"{v}: expected 3 family tags, got {len(tags)}", variant=v)
        parsed = tuple(parse_tag(t, accept_string_tags=accept_string_tags) for t in tags)
        fam = family_for_tags(parsed)  # type: ignore[arg-type]
        if fam is None or int(fam.revocation) != int(tag):
            raise BadTagError(f"{v}: family tags {parsed} do not match leading tag {tag}", variant=v)
        return cls(
            type_tags=fam,
            public_key=fixed_field(pk, SIGN_PUBLIC_KEY_LEN, "public_key"),
            secret_key=fixed_field(sk, SIGN_SECRET_KEY_LEN, "secret_key"),
        )
