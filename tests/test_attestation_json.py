import base64
import io
import json

import pytest

from tpmattest.attestation_json import get_json, parse_json
from tpmattest.base64util import binary_to_base64, binary_to_base64url
from tpmattest.types import HashAlg, PcrQuote, PcrSet, PcrValue

HEADER = "\nParsing Response\n\n"


def _token(payload: str) -> str:
    return "head." + binary_to_base64url(payload.encode("utf-8")) + ".sig"


def _sample_json(is_windows=False):
    pcrs = PcrSet(HashAlg.SHA256, [PcrValue(0, b"\x11" * 32), PcrValue(7, b"\x22" * 32)])
    return get_json(
        b"cert-bytes",
        b"pub-bytes",
        PcrQuote(b"quote", b"sig"),
        b"\x05" * 32,
        pcrs,
        b"log",
        is_windows=is_windows,
    )


def test_get_json_key_order():
    body = json.loads(_sample_json())
    assert list(body) == [
        "is_windows",
        "aik_cert",
        "aik_pub",
        "pcr_quote",
        "pcr_signature",
        "pcr_hash",
        "tcg_log",
        "pcr_values",
    ]


def test_get_json_values_round_trip():
    body = json.loads(_sample_json())
    assert body["is_windows"] is False
    assert base64.b64decode(body["aik_cert"]) == b"cert-bytes"
    assert base64.b64decode(body["aik_pub"]) == b"pub-bytes"
    assert base64.b64decode(body["pcr_quote"]) == b"quote"
    assert base64.b64decode(body["pcr_signature"]) == b"sig"
    assert base64.b64decode(body["pcr_hash"]) == b"\x05" * 32
    assert base64.b64decode(body["tcg_log"]) == b"log"


def test_get_json_pcr_values():
    body = json.loads(_sample_json())
    assert [entry["index"] for entry in body["pcr_values"]] == [0, 7]
    assert body["pcr_values"][1]["value"] == binary_to_base64(b"\x22" * 32)
    assert list(body["pcr_values"][0]) == ["index", "value"]


def test_get_json_is_compact_and_windows_flag():
    text = _sample_json(is_windows=True)
    assert " " not in text
    assert text.startswith('{"is_windows":true,')


def test_get_json_empty_inputs():
    text = get_json(b"", b"", PcrQuote(), b"", PcrSet(), b"", is_windows=False)
    body = json.loads(text)
    assert body["pcr_values"] == []
    assert body["aik_cert"] == ""


def test_parse_json_simple_object():
    out = io.StringIO()
    parse_json(_token('{"a":1}'), out)
    assert out.getvalue() == HEADER + "a : 1\n"


def test_parse_json_array_events():
    out = io.StringIO()
    parse_json(_token('{"list":[true,null,"x"]}'), out)
    text = out.getvalue()
    assert text.startswith(HEADER)
    body = text[len(HEADER):]
    assert body == "list : StartArray()\ntrue\n\nx\nEndArray(3)\n"


def test_parse_json_keeps_member_order():
    out = io.StringIO()
    parse_json(_token('{"z":"1","a":"2"}'), out)
    body = out.getvalue()[len(HEADER):]
    assert body.index("z : ") < body.index("a : ")


def test_parse_json_double():
    out = io.StringIO()
    parse_json(_token('{"d":1.5,"f":false}'), out)
    assert out.getvalue()[len(HEADER):] == "d : 1.5\nf : false\n"


def test_parse_json_defaults_to_stdout(capsys):
    parse_json(_token('{"k":"v"}'))
    assert capsys.readouterr().out == HEADER + "k : v\n"


def test_parse_json_without_payload_part():
    with pytest.raises(ValueError):
        parse_json("nodots", io.StringIO())


def test_parse_json_invalid_payload():
    with pytest.raises(ValueError):
        parse_json(_token("{not json"), io.StringIO())


def test_parse_json_rejects_nan():
    with pytest.raises(ValueError):
        parse_json(_token('{"n":NaN}'), io.StringIO())