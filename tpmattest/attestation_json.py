"""JSON bodies sent to and received from the attestation service."""

from __future__ import annotations

import json
import math
import sys
from collections.abc import Iterable
from typing import Any, Optional, TextIO

from .base64util import base64url_to_binary, binary_to_base64
from .types import PcrQuote, PcrSet

_INT64_MIN = -(2**63)
_UINT64_MAX = 2**64 - 1


def get_json(
    aik_cert: bytes,
    aik_pub: bytes,
    pcr_quote: PcrQuote,
    pcr_hash: bytes,
    pcr_values: PcrSet,
    tcg_log: bytes,
    is_windows: Optional[bool] = None,
) -> str:
    """Build the compact JSON request body, every binary field base64 encoded.

    ``is_windows`` defaults to whether the running platform is Windows.
    """
    if is_windows is None:
        is_windows = sys.platform.startswith("win")
    body = {
        "is_windows": bool(is_windows),
        "aik_cert": binary_to_base64(aik_cert),
        "aik_pub": binary_to_base64(aik_pub),
        "pcr_quote": binary_to_base64(pcr_quote.quote),
        "pcr_signature": binary_to_base64(pcr_quote.signature),
        "pcr_hash": binary_to_base64(pcr_hash),
        "tcg_log": binary_to_base64(tcg_log),
        "pcr_values": [
            {"index": pcr.index, "value": binary_to_base64(pcr.digest)}
            for pcr in pcr_values.pcrs
        ],
    }
    return json.dumps(body, separators=(",", ":"), ensure_ascii=False)


class _Members(tuple):
    """Members of a JSON object, in document order."""


def _parse_int(text: str) -> Any:
    value = int(text)
    if _INT64_MIN <= value <= _UINT64_MAX:
        return value
    return _parse_float(text)


def _parse_float(text: str) -> float:
    value = float(text)
    if math.isinf(value):
        raise ValueError(f"number too big: {text}")
    return value


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON value {name}")


def _c_string(text: str) -> str:
    return text.split("\0", 1)[0]


def _format_double(value: float) -> str:
    return f"{value:g}"


def _emit(value: Any, out: TextIO) -> None:
    if isinstance(value, _Members):
        for key, member in value:
            out.write(f"{_c_string(key)} : ")
            _emit(member, out)
    elif isinstance(value, list):
        out.write("StartArray()\n")
        for item in value:
            _emit(item, out)
        out.write(f"EndArray({len(value)})\n")
    elif value is None:
        out.write("\n")
    elif isinstance(value, bool):
        out.write("true\n" if value else "false\n")
    elif isinstance(value, int):
        out.write(f"{value}\n")
    elif isinstance(value, float):
        out.write(f"{_format_double(value)}\n")
    else:
        out.write(f"{_c_string(value)}\n")


def _decode_payload(response: str) -> Any:
    parts: Iterable[str] = response.split(".")
    parts = list(parts)
    if len(parts) < 2:
        raise ValueError("response is not a dot-separated token")
    text = base64url_to_binary(parts[1]).decode("utf-8")
    try:
        return json.loads(
            text,
            object_pairs_hook=_Members,
            parse_int=_parse_int,
            parse_float=_parse_float,
            parse_constant=_reject_constant,
        )
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON payload: {exc}") from exc


def parse_json(response: str, stream: Optional[TextIO] = None) -> None:
    """Decode the payload of a service token and print its events to ``stream``.

    ``stream`` defaults to standard output. Raises ValueError if the token has
    no payload part or the payload is not valid JSON.
    """
    out = sys.stdout if stream is None else stream
    out.write("\nParsing Response\n\n")
    _emit(_decode_payload(response), out)