from __future__ import annotations

"""Error taxonomy for the wire layer.

  - SizeError:          a buffer does not have the fixed length its target type needs
  - WireDecodeError:    base for everything decode can reject
      BadTagError       leading tag is not an unsigned 64-bit value
      BadSizeError      a fixed-size field inside a known variant has the wrong length
      BadSignatureError an embedded self-signature failed verification
      MalformedError    framing / field-shape problems (truncated input, wrong arity)
  - WireEncodeError:    a value could not be encoded

An unrecognized tag is NOT an error; the decoder returns `Unknown(tag)`.
"""

from typing import Optional


class SizeError(ValueError):
    def __init__(self, expected: int, actual: int, field: str = "") -> None:
        where = f" for '{field}'" if field else ""
        super().__init__(f"expected {expected} bytes{where}, got {actual}")
        self.expected = int(expected)
        self.actual = int(actual)
        self.field = field


class WireDecodeError(RuntimeError):
    code = "decode_failed"

    def __init__(self, msg: str, *, variant: Optional[str] = None, code: Optional[str] = None) -> None:
        super().__init__(msg)
        if code is not None:
            self.code = code
        self.variant = variant


class BadTagError(WireDecodeError):
    code = "bad_tag"


class BadSizeError(WireDecodeError):
    code = "bad_size"


class BadSignatureError(WireDecodeError):
    code = "bad_signature"


class MalformedError(WireDecodeError):
    code = "malformed"


class WireEncodeError(RuntimeError):
    def __init__(self, code: str, msg: str) -> None:
        super().__init__(msg)
        self.code = code


class ConfigError(ValueError):
    pass
