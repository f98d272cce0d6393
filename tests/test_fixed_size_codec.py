from __future__ import annotations

import pytest

from safewire.errors import SizeError
from safewire.util.fixed import fixed_field, from_fixed, to_fixed


@pytest.mark.parametrize("n", [0, 1, 31, 33, 63, 65, 128])
def test_to_fixed_rejects_every_wrong_length(n: int) -> None:
    with pytest.raises(SizeError) as ei:
        to_fixed(b"\x07" * n, 32, field="k")
    assert ei.value.actual == n
    assert ei.value.field == "k"


def test_to_fixed_exact_length_keeps_bytes_in_order() -> None:
    buf = bytes(range(64))
    out = to_fixed(bytearray(buf), 64)
    assert isinstance(out, bytes)
    assert out == buf
    assert from_fixed(out) == buf


def test_to_fixed_accepts_memoryview() -> None:
    assert to_fixed(memoryview(b"abcd"), 4) == b"abcd"


def test_to_fixed_rejects_non_bytes() -> None:
    with pytest.raises(TypeError):
        to_fixed("x" * 32, 32)  # type: ignore[arg-type]


def test_fixed_field_treats_non_bytes_as_size_error() -> None:
    with pytest.raises(SizeError) as ei:
        fixed_field("not bytes", 32, "public_key")
    assert ei.value.expected == 32
    assert ei.value.actual == 0
    assert "public_key" in str(ei.value)
