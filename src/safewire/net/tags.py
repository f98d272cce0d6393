from __future__ import annotations

"""Type tag registry.

Every encoded value starts with one of these tags. Rules:
  - tags are BASE_TAG + a small offset, grouped by family
  - a tag is never reused for a different variant
  - new variants only ever add tags
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Final, Tuple

BASE_TAG: Final[int] = 5_483_000
U64_MAX: Final[int] = (1 << 64) - 1


class TypeTag(IntEnum):
    NAME_TYPE = BASE_TAG + 0
    PAYLOAD = BASE_TAG + 1

    # Data
    IMMUTABLE_DATA = BASE_TAG + 100
    IMMUTABLE_DATA_BACKUP = BASE_TAG + 101
    IMMUTABLE_DATA_SACRIFICIAL = BASE_TAG + 102
    STRUCTURED_DATA = BASE_TAG + 103
    SAFECOIN = BASE_TAG + 104

    # Client identity family
    AN_MAID = BASE_TAG + 200
    MAID = BASE_TAG + 201
    PUBLIC_MAID = BASE_TAG + 202
    PUBLIC_AN_MAID = BASE_TAG + 203

    # Public-name identity family
    AN_MPID = BASE_TAG + 210
    MPID = BASE_TAG + 211
    PUBLIC_MPID = BASE_TAG + 212
    PUBLIC_AN_MPID = BASE_TAG + 213


IMMUTABLE_DATA_TAGS: Final[Tuple[TypeTag, ...]] = (
    TypeTag.IMMUTABLE_DATA,
    TypeTag.IMMUTABLE_DATA_BACKUP,
    TypeTag.IMMUTABLE_DATA_SACRIFICIAL,
)


@dataclass(frozen=True, slots=True)
class IdTypeTags:
    """The tags of one identity family."""

    revocation: TypeTag
    id: TypeTag
    public_id: TypeTag
    public_revocation: TypeTag

    def as_tuple(self) -> Tuple[int, int, int]:
        # (revocation, id, public id) is what revocation records carry on the wire
        return (int(self.revocation), int(self.id), int(self.public_id))


MAID_TAGS: Final[IdTypeTags] = IdTypeTags(
    revocation=TypeTag.AN_MAID,
    id=TypeTag.MAID,
    public_id=TypeTag.PUBLIC_MAID,
    public_revocation=TypeTag.PUBLIC_AN_MAID,
)

MPID_TAGS: Final[IdTypeTags] = IdTypeTags(
    revocation=TypeTag.AN_MPID,
    id=TypeTag.MPID,
    public_id=TypeTag.PUBLIC_MPID,
    public_revocation=TypeTag.PUBLIC_AN_MPID,
)

ID_FAMILIES: Final[Tuple[IdTypeTags, ...]] = (MAID_TAGS, MPID_TAGS)


def family_for_tags(tags: Tuple[int, int, int]) -> IdTypeTags | None:
    for fam in ID_FAMILIES:
        if fam.as_tuple() == tuple(int(t) for t in tags):
            return fam
    return None


def family_for_tag(tag: int) -> IdTypeTags | None:
    for fam in ID_FAMILIES:
        if int(tag) in (fam.revocation, fam.id, fam.public_id, fam.public_revocation):
            return fam
    return None


def is_registered(tag: int) -> bool:
    try:
        TypeTag(tag)
        return True
    except ValueError:
        return False


def check_registry_unique() -> Dict[int, str]:
    """Return {tag: name}. Raises if two names share a tag.

    IntEnum silently turns duplicate values into aliases, so inspect
    __members__ (which includes aliases) rather than iterating the enum.
    """
    seen: Dict[int, str] = {}
    for name, member in TypeTag.__members__.items():
        v = int(member.value)
        if v in seen:
            raise RuntimeError(f"duplicate type tag {v}: {seen[v]} and {name}")
        if not (BASE_TAG <= v <= U64_MAX):
            raise RuntimeError(f"type tag {name}={v} outside registry range")
        seen[v] = name
    return seen


check_registry_unique()
