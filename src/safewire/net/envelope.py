from __future__ import annotations

"""Tagged envelope framing.

Wire layout (two consecutive msgpack objects):

    [uint type_tag][array fields]

The tag is written first and on its own so a decoder can classify a message
without understanding its body. Fixed-size fields are msgpack `bin` values.
"""

import re
from typing import Any, ClassVar, List, Sequence, Tuple

import msgpack

from safewire.errors import BadTagError, MalformedError, WireEncodeError
from safewire.net.tags import U64_MAX

_DIGITS_RE = re.compile(r"[0-9]+")


class WireValue:
    """Mixin for registered variants: `encode()` from `type_tag` + `to_fields()`.

    Variants that carry type tags inside their fields set NESTED_TAGS; the
    dispatcher then passes `accept_string_tags` to their `from_fields`.
    """

    __slots__ = ()

    NESTED_TAGS: ClassVar[bool] = False

    def to_fields(self) -> List[Any]:  # pragma: no cover
        raise NotImplementedError

    def encode(self) -> bytes:
        return encode(int(self.type_tag), self.to_fields())  # type: ignore[attr-defined]


# ---------------------------------------------------------------------
# Encode
# ---------------------------------------------------------------------


def encode(tag: int, fields: Sequence[Any]) -> bytes:
    if isinstance(tag, bool) or not isinstance(tag, int):
        raise WireEncodeError("invalid_tag", f"tag must be int, got {type(tag).__name__}")
    if not (0 <= int(tag) <= U64_MAX):
        raise WireEncodeError("invalid_tag", f"tag out of u64 range: {tag}")
    try:
        return msgpack.packb(int(tag)) + msgpack.packb(list(fields), use_bin_type=True)
    except (TypeError, ValueError, OverflowError) as e:
        raise WireEncodeError("encode_failed", f"encode failed: {e}") from e


# ---------------------------------------------------------------------
# Decode
# ---------------------------------------------------------------------


def parse_tag(raw: Any, *, accept_string_tags: bool = True) -> int:
    """Validate a decoded tag value.

    Plain unsigned integers are canonical. ASCII-digit strings (or bytes) are
    accepted for older producers that stringified their tags.
    """
    if isinstance(raw, bool):
        raise BadTagError("tag must be an integer, got bool")
    if isinstance(raw, int):
        if 0 <= raw <= U64_MAX:
            return raw
        raise BadTagError(f"tag out of u64 range: {raw}")
    if isinstance(raw, (bytes, str)) and accept_string_tags:
        try:
            s = raw.decode("ascii") if isinstance(raw, bytes) else raw
        except UnicodeDecodeError as e:
            raise BadTagError("non-ascii tag text") from e
        if not _DIGITS_RE.fullmatch(s):
            raise BadTagError(f"non-numeric tag text: {s[:32]!r}")
        v = int(s)
        if v > U64_MAX:
            raise BadTagError(f"tag out of u64 range: {s[:32]}")
        return v
    raise BadTagError(f"invalid tag type: {type(raw).__name__}")


def _unpacker(data: bytes) -> msgpack.Unpacker:
    u = msgpack.Unpacker(raw=False, use_list=True, strict_map_key=False, max_buffer_size=max(len(data), 1))
    u.feed(data)
    return u


def _next(u: msgpack.Unpacker, what: str) -> Any:
    try:
        return u.unpack()
    except msgpack.OutOfData as e:
        raise MalformedError(f"truncated message: missing {what}") from e
    except (msgpack.UnpackException, ValueError, TypeError) as e:
        # UnicodeDecodeError is a ValueError; unhashable map keys raise TypeError
        raise MalformedError(f"invalid {what}: {e}") from e


def read_tag(data: bytes, *, accept_string_tags: bool = True) -> Tuple[int, msgpack.Unpacker]:
    """Return (tag, unpacker positioned at the fields)."""
    u = _unpacker(data)
    try:
        raw = _next(u, "type tag")
    except MalformedError as e:
        if isinstance(e.__cause__, UnicodeDecodeError):
            raise BadTagError("tag text is not valid utf-8") from e.__cause__
        raise
    return parse_tag(raw, accept_string_tags=accept_string_tags), u


def read_fields(u: msgpack.Unpacker, total_len: int) -> List[Any]:
    fields = _next(u, "fields")
    if u.tell() != total_len:
        raise MalformedError(f"trailing bytes after fields: {total_len - u.tell()}")
    if not isinstance(fields, list):
        raise MalformedError(f"fields must be an array, got {type(fields).__name__}")
    return fields


# ---------------------------------------------------------------------
# Field shape helpers used by variant decoders
# ---------------------------------------------------------------------


def expect_fields(fields: List[Any], n: int, variant: str) -> List[Any]:
    if len(fields) != n:
        raise MalformedError(f"{variant}: expected {n} fields, got {len(fields)}", variant=variant)
    return fields


def expect_bytes(v: Any, field: str, variant: str) -> bytes:
    if isinstance(v, (bytes, bytearray)):
        return bytes(v)
    raise MalformedError(f"{variant}: field '{field}' must be bytes, got {type(v).__name__}", variant=variant)


def expect_list(v: Any, field: str, variant: str) -> List[Any]:
    if isinstance(v, list):
        return v
    raise MalformedError(f"{variant}: field '{field}' must be an array, got {type(v).__name__}", variant=variant)
