from __future__ import annotations

"""Fixed-length byte field helpers.

Every fixed-size field on the wire (identifiers, keys, signatures) passes
through `to_fixed`. The contract is exact length or SizeError: no truncation,
no zero padding, no partial result.
"""

from typing import Any, Union

from safewire.errors import SizeError

BytesLike = Union[bytes, bytearray, memoryview]


def to_fixed(buffer: BytesLike, expected_len: int, *, field: str = "") -> bytes:
    if not isinstance(buffer, (bytes, bytearray, memoryview)):
        raise TypeError(f"expected bytes-like for '{field or 'buffer'}', got {type(buffer).__name__}")
    n = len(buffer)
    if n != int(expected_len):
        raise SizeError(expected_len, n, field)
    return bytes(buffer)


def from_fixed(array: BytesLike) -> bytes:
    return bytes(array)


def fixed_field(value: Any, expected_len: int, field: str) -> bytes:
    """Coerce a decoded wire field to exactly `expected_len` bytes.

    Non-bytes values count as a size mismatch of length 0 so callers only
    need to handle SizeError.
    """
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise SizeError(expected_len, 0, field)
    return to_fixed(value, expected_len, field=field)
