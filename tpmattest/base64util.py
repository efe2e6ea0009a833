"""Base64 and base64url conversions used by the attestation client."""

from __future__ import annotations

import base64
import binascii

_STANDARD = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_ACCEPTED = frozenset(_STANDARD + "=")


def base64_to_binary(base64_data: str) -> bytes:
    """Decode base64 text; padding may be absent and trailing zero bytes are dropped.

    A '=' counts as zero bits wherever it appears. Any character outside the
    alphabet raises ValueError.
    """
    bad = next((ch for ch in base64_data if ch not in _ACCEPTED), None)
    if bad is not None:
        raise ValueError(f"invalid base64 character {bad!r}")
    # Zero-valued filler only adds zero bytes, which are stripped below.
    text = base64_data.replace("=", "A")
    text += "A" * (-len(text) % 4)
    try:
        decoded = base64.b64decode(text, validate=True)
    except binascii.Error as exc:
        raise ValueError(str(exc)) from exc
    return decoded.rstrip(b"\0")


def binary_to_base64(binary_data: bytes) -> str:
    """Encode bytes as padded base64 text."""
    return base64.b64encode(bytes(binary_data)).decode("ascii")


def binary_to_base64url(binary_data: bytes) -> str:
    """Encode bytes as base64url text without padding."""
    return base64.urlsafe_b64encode(bytes(binary_data)).decode("ascii").rstrip("=")


def base64url_to_binary(base64_data: str) -> bytes:
    """Decode base64url text, with or without padding."""
    return base64_to_binary(base64_data.replace("-", "+").replace("_", "/"))


def base64_encode(data: str) -> str:
    """Encode the UTF-8 bytes of ``data`` as padded base64 text."""
    return binary_to_base64(data.encode("utf-8"))


def base64_decode(data: str) -> str:
    """Decode base64 text into a string, dropping trailing NUL characters."""
    return base64_to_binary(data).decode("utf-8", errors="surrogateescape")