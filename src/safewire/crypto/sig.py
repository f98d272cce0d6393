from __future__ import annotations

"""Signing primitives and signature binding.

The concrete algorithms live in `cryptography` (Ed25519 for signing, X25519
for box keys). Everything above this module only relies on the length
constants below and on sign/verify being deterministic and verifiable.

Signature binding layout (attached / combined mode):

    signed_blob = signature (SIGNATURE_LEN bytes) || payload
"""

from typing import Final, Tuple

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey, Ed25519PublicKey
from cryptography.hazmat.primitives.asymmetric.x25519 import X25519PrivateKey
from cryptography.hazmat.primitives.serialization import Encoding, NoEncryption, PrivateFormat, PublicFormat

from safewire.errors import SizeError
from safewire.util.fixed import to_fixed

SIGN_PUBLIC_KEY_LEN: Final[int] = 32
SIGN_SECRET_KEY_LEN: Final[int] = 32  # Ed25519 seed
BOX_PUBLIC_KEY_LEN: Final[int] = 32
BOX_SECRET_KEY_LEN: Final[int] = 32
SIGNATURE_LEN: Final[int] = 64


# ---------------------------------------------------------------------
# Key generation
# ---------------------------------------------------------------------


def _raw_private(key) -> bytes:
    return key.private_bytes(Encoding.Raw, PrivateFormat.Raw, NoEncryption())


def _raw_public(key) -> bytes:
    return key.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw)


def gen_sign_keypair() -> Tuple[bytes, bytes]:
    """Return (public_key, secret_key) for signing."""
    sk = Ed25519PrivateKey.generate()
    return _raw_public(sk), _raw_private(sk)


def gen_box_keypair() -> Tuple[bytes, bytes]:
    """Return (public_key, secret_key) for the asymmetric box."""
    sk = X25519PrivateKey.generate()
    return _raw_public(sk), _raw_private(sk)


def sign_public_from_secret(secret_key: bytes) -> bytes:
    sk = Ed25519PrivateKey.from_private_bytes(to_fixed(secret_key, SIGN_SECRET_KEY_LEN, field="secret_key"))
    return _raw_public(sk)


def box_public_from_secret(secret_key: bytes) -> bytes:
    sk = X25519PrivateKey.from_private_bytes(to_fixed(secret_key, BOX_SECRET_KEY_LEN, field="box_secret_key"))
    return _raw_public(sk)


# ---------------------------------------------------------------------
# Sign / verify
# ---------------------------------------------------------------------


def sign_detached(message: bytes, secret_key: bytes) -> bytes:
    sk = Ed25519PrivateKey.from_private_bytes(to_fixed(secret_key, SIGN_SECRET_KEY_LEN, field="secret_key"))
    return sk.sign(bytes(message))


def verify_detached(signature: bytes, message: bytes, public_key: bytes) -> bool:
    try:
        sig_b = to_fixed(signature, SIGNATURE_LEN, field="signature")
        pk = Ed25519PublicKey.from_public_bytes(to_fixed(public_key, SIGN_PUBLIC_KEY_LEN, field="public_key"))
        pk.verify(sig_b, bytes(message))
        return True
    except (InvalidSignature, ValueError):
        # SizeError is a ValueError
        return False


def verify_self_signed(owner_key: bytes, signature: bytes, payload: bytes) -> bool:
    """True iff `owner_key` validates `signature` over `payload`.

    For self-certifying records the payload is a deterministic function of
    the owner key itself, so a record cannot carry a signature that attests
    to some other key.
    """
    return verify_detached(signature, payload, owner_key)


# ---------------------------------------------------------------------
# Binding
# ---------------------------------------------------------------------


def attach(signature: bytes, payload: bytes) -> bytes:
    return to_fixed(signature, SIGNATURE_LEN, field="signature") + bytes(payload)


def detach(signed_blob: bytes) -> Tuple[bytes, bytes]:
    """Split `signature || payload`. Raises SizeError if the blob is too short."""
    b = bytes(signed_blob)
    if len(b) < SIGNATURE_LEN:
        raise SizeError(SIGNATURE_LEN, len(b), "signed_blob")
    return b[:SIGNATURE_LEN], b[SIGNATURE_LEN:]


def detach_signature(signed_blob: bytes) -> bytes:
    return detach(signed_blob)[0]


def sign_attached(message: bytes, secret_key: bytes) -> bytes:
    return attach(sign_detached(message, secret_key), message)


def open_attached(signed_blob: bytes, public_key: bytes) -> bytes | None:
    """Return the payload if the attached signature verifies, else None."""
    try:
        sig, payload = detach(signed_blob)
    except SizeError:
        return None
    if not verify_detached(sig, payload, public_key):
        return None
    return payload
