# src/safewire/net/codec.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple, Type, Union

from safewire.common.name_type import NameType
from safewire.config import WireConfig, default_wire_config
from safewire.data.immutable_data import ImmutableData
from safewire.data.safecoin import SafeCoin
from safewire.data.structured_data import StructuredData
from safewire.errors import BadSizeError, MalformedError, SizeError, WireDecodeError, WireEncodeError
from safewire.id.id_type import IdType
from safewire.id.public_id_type import PublicIdType
from safewire.id.public_revocation_id_type import PublicRevocationIdType
from safewire.id.revocation_id_type import RevocationIdType
from safewire.net.envelope import WireValue, read_fields, read_tag
from safewire.net.net_logging import WIRE_LOGGER, log_event
from safewire.net.payload import Payload
from safewire.net.tags import TypeTag

_log = logging.getLogger(WIRE_LOGGER)


@dataclass(frozen=True, slots=True)
class Unknown:
    """A well-framed value whose tag this build does not know."""

    tag: int


AnyWireValue = Union[
    NameType,
    Payload,
    ImmutableData,
    StructuredData,
    SafeCoin,
    RevocationIdType,
    IdType,
    PublicIdType,
    PublicRevocationIdType,
]

DecodedValue = Union[AnyWireValue, Unknown]

_VARIANTS: Tuple[Type[Any], ...] = (
    NameType,
    Payload,
    ImmutableData,
    StructuredData,
    SafeCoin,
    RevocationIdType,
    IdType,
    PublicIdType,
    PublicRevocationIdType,
)


def _build_registry() -> Dict[int, Type[Any]]:
    reg: Dict[int, Type[Any]] = {}
    for cls in _VARIANTS:
        for tag in cls.TAGS:
            if int(tag) in reg:
                raise RuntimeError(f"tag {int(tag)} registered twice ({cls.__name__})")
            reg[int(tag)] = cls
    missing = [t.name for t in TypeTag if int(t) not in reg]
    if missing:
        raise RuntimeError(f"type tags without a decoder: {missing}")
    return reg


_DECODERS: Dict[int, Type[Any]] = _build_registry()


def registered_tags() -> List[int]:
    return sorted(_DECODERS)


def _variant_name(tag: int) -> str:
    try:
        return TypeTag(tag).name
    except ValueError:
        return str(tag)


def encode_value(value: WireValue) -> bytes:
    if not isinstance(value, _VARIANTS):
        raise WireEncodeError("unregistered_type", f"not a wire type: {type(value).__name__}")
    return value.encode()


def decode(data: bytes, *, config: Optional[WireConfig] = None) -> DecodedValue:
    """Decode one tagged message.

    Returns the variant instance, or Unknown(tag) for a tag not in the
    registry. Raises a WireDecodeError subclass for anything it rejects.
    """
    cfg = config or default_wire_config()
    try:
        return _decode(data, cfg)
    except WireDecodeError as e:
        if cfg.log_decode_events:
            log_event(_log, "wire_decode_rejected", level=logging.WARNING, code=e.code, variant=e.variant, reason=str(e))
        raise


def _decode(data: bytes, cfg: WireConfig) -> DecodedValue:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise MalformedError(f"expected bytes, got {type(data).__name__}")
    data = bytes(data)
    if len(data) > cfg.max_message_bytes:
        raise MalformedError(f"message too large: {len(data)} > {cfg.max_message_bytes}")

    tag, unpacker = read_tag(data, accept_string_tags=cfg.accept_string_tags)

    cls = _DECODERS.get(tag)
    if cls is None:
        if cfg.log_decode_events:
            log_event(_log, "wire_decode_unknown_tag", tag=tag, size=len(data))
        return Unknown(tag)

    variant = _variant_name(tag)
    fields = read_fields(unpacker, len(data))
    try:
        if cls.NESTED_TAGS:
            return cls.from_fields(tag, fields, accept_string_tags=cfg.accept_string_tags)
        return cls.from_fields(tag, fields)
    except SizeError as e:
        raise BadSizeError(f"{variant}: {e}", variant=variant) from e
    except WireDecodeError as e:
        if e.variant is None:
            e.variant = variant
        raise


@dataclass(frozen=True, slots=True)
class DecodeOutcome:
    ok: bool
    value: Optional[DecodedValue] = None
    error: Optional[WireDecodeError] = None


def decode_many(blobs: Iterable[bytes], *, config: Optional[WireConfig] = None) -> List[DecodeOutcome]:
    """Decode independent messages; a rejected one never stops the rest."""
    out: List[DecodeOutcome] = []
    for blob in blobs:
        try:
            out.append(DecodeOutcome(ok=True, value=decode(blob, config=config)))
        except WireDecodeError as e:
            out.append(DecodeOutcome(ok=False, error=e))
    return out
