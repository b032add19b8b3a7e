"""Base64url and SHA-256 helpers shared by JWK export and ath binding."""

import base64
import hashlib


def base64url_encode(data: bytes) -> str:
    """Base64url encode without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def base64url_decode(data: str) -> bytes:
    """Base64url decode, restoring any stripped padding."""
    padding = -len(data) % 4
    return base64.urlsafe_b64decode(data + "=" * padding)


def int_to_base64url(value: int, length: int) -> str:
    """Encode an integer as fixed-length big-endian base64url."""
    raw = value.to_bytes(length, byteorder="big")
    return base64url_encode(raw)


def sha256_base64url(data: bytes | str) -> str:
    """SHA-256 digest of ``data``, base64url-encoded without padding.

    Strings are hashed as their UTF-8 encoding, which is how RFC 9449
    computes the ``ath`` claim from an access token.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    return base64url_encode(hashlib.sha256(data).digest())
