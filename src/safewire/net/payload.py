from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, ClassVar, List, Optional, Tuple

from safewire.config import WireConfig
from safewire.errors import MalformedError
from safewire.net.envelope import WireValue, expect_bytes, expect_fields, parse_tag
from safewire.net.tags import U64_MAX, TypeTag


@dataclass(frozen=True, slots=True)
class Payload(WireValue):
    """Opaque carrier: an inner type tag plus that value's encoded bytes.

    The inner tag may be one this build does not know; the bytes are kept
    verbatim so the payload can still be forwarded.
    """

    type_tag_inner: int
    payload: bytes = b""

    TAGS: ClassVar[Tuple[TypeTag, ...]] = (TypeTag.PAYLOAD,)
    NESTED_TAGS: ClassVar[bool] = True

    def __post_init__(self) -> None:
        t = self.type_tag_inner
        if isinstance(t, bool) or not isinstance(t, int) or not (0 <= t <= U64_MAX):
            raise ValueError(f"inner type tag must be u64, got {t!r}")
        object.__setattr__(self, "payload", bytes(self.payload))

    @classmethod
    def new(cls, value: WireValue) -> "Payload":
        return cls(int(value.type_tag), value.encode())  # type: ignore[attr-defined]

    @classmethod
    def dummy_new(cls, type_tag: int) -> "Payload":
        return cls(int(type_tag), b"")

    @property
    def type_tag(self) -> TypeTag:
        return TypeTag.PAYLOAD

    def get_type_tag(self) -> int:
        return self.type_tag_inner

    def get_data(self, config: Optional[WireConfig] = None):
        """Decode the carried value (an `Unknown` for tags this build lacks).

        `config` applies to the inner message exactly as to an outer one.
        """
        from safewire.net.codec import decode

        value = decode(self.payload, config=config)
        inner = getattr(value, "type_tag", getattr(value, "tag", None))
        if inner is not None and int(inner) != self.type_tag_inner:
            raise MalformedError(
                f"Payload: carried tag {int(inner)} does not match declared {self.type_tag_inner}",
                variant="Payload",
            )
        return value

    def set_data(self, value: WireValue) -> "Payload":
        return replace(self, type_tag_inner=int(value.type_tag), payload=value.encode())  # type: ignore[attr-defined]

    def to_fields(self) -> List[Any]:
        return [self.type_tag_inner, self.payload]

    @classmethod
    def from_fields(cls, tag: int, fields: List[Any], *, accept_string_tags: bool = True) -> "Payload":
        inner, payload = expect_fields(fields, 2, "Payload")
        return cls(
            parse_tag(inner, accept_string_tags=accept_string_tags),
            expect_bytes(payload, "payload", "Payload"),
        )
