from __future__ import annotations

import hashlib
from typing import Final

DIGEST_LEN: Final[int] = 64


def sha512(data: bytes) -> bytes:
    return hashlib.sha512(bytes(data)).digest()


def sha512_concat(*parts: bytes) -> bytes:
    h = hashlib.sha512()
    for p in parts:
        h.update(bytes(p))
    return h.digest()
