"""Self-describing tagged wire types for a content-addressed XOR network."""

from safewire.common.name_type import NAME_LEN, NameType, closer_to_target, sort_by_closeness
from safewire.errors import (
    BadSignatureError,
    BadSizeError,
    BadTagError,
    MalformedError,
    SizeError,
    WireDecodeError,
    WireEncodeError,
)
from safewire.net.codec import DecodedValue, DecodeOutcome, Unknown, decode, decode_many, encode_value
from safewire.net.tags import BASE_TAG, MAID_TAGS, MPID_TAGS, TypeTag

__all__ = [
    "BASE_TAG",
    "MAID_TAGS",
    "MPID_TAGS",
    "NAME_LEN",
    "BadSignatureError",
    "BadSizeError",
    "BadTagError",
    "DecodeOutcome",
    "DecodedValue",
    "MalformedError",
    "NameType",
    "SizeError",
    "TypeTag",
    "Unknown",
    "WireDecodeError",
    "WireEncodeError",
    "closer_to_target",
    "decode",
    "decode_many",
    "encode_value",
    "sort_by_closeness",
]
