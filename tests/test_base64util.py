import string

import pytest

from tpmattest.base64util import (
    base64_decode,
    base64_encode,
    base64_to_binary,
    base64url_to_binary,
    binary_to_base64,
    binary_to_base64url,
)

SAMPLES = [
    b"f",
    b"fo",
    b"foo",
    b"foobar",
    bytes(range(1, 256)),
    b"\x00\x01\x02\x03",
    b"\xfb\xff\xfe",
]

URL_ALPHABET = set(string.ascii_letters + string.digits + "-_")


def test_known_vectors():
    assert binary_to_base64(b"foobar") == "Zm9vYmFy"
    assert binary_to_base64(b"f") == "Zg=="
    assert binary_to_base64url(b"\xfb\xff") == "-_8"


@pytest.mark.parametrize("data", SAMPLES)
def test_base64_round_trip(data):
    assert base64_to_binary(binary_to_base64(data)) == data


@pytest.mark.parametrize("data", SAMPLES)
def test_base64url_round_trip(data):
    assert base64url_to_binary(binary_to_base64url(data)) == data


@pytest.mark.parametrize("data", SAMPLES)
def test_unpadded_input_decodes(data):
    assert base64_to_binary(binary_to_base64(data).rstrip("=")) == data


@pytest.mark.parametrize("data", SAMPLES + [b""])
def test_padded_length_is_multiple_of_four(data):
    assert len(binary_to_base64(data)) % 4 == 0


def test_url_alphabet_has_no_special_characters():
    encoded = binary_to_base64url(bytes(range(256)) * 3)
    assert len(encoded) == 1024
    assert set(encoded) <= URL_ALPHABET
    assert "-" in encoded and "_" in encoded


def test_url_and_standard_agree_apart_from_alphabet():
    data = bytes(range(256))
    standard = binary_to_base64(data).rstrip("=")
    assert binary_to_base64url(data) == standard.replace("+", "-").replace("/", "_")


def test_padded_url_input_decodes():
    data = b"\xfb\xff"
    padded = binary_to_base64(data).replace("+", "-").replace("/", "_")
    assert base64url_to_binary(padded) == data


def test_trailing_zero_bytes_are_dropped():
    assert base64_to_binary(binary_to_base64(b"ab\x00\x00")) == b"ab"
    assert base64_to_binary(binary_to_base64(b"\x00\x00\x00")) == b""


@pytest.mark.parametrize("text", ["ab*c", "Zm9v YmFy", "Zm9v\n", "Zg-="])
def test_invalid_characters_raise(text):
    with pytest.raises(ValueError):
        base64_to_binary(text)


def test_url_decoder_rejects_standard_only_characters_mixed_with_junk():
    with pytest.raises(ValueError):
        base64url_to_binary("ab.c")


@pytest.mark.parametrize("text", ["hello", "héllo wörld", "a", "ab", "abc"])
def test_string_round_trip(text):
    assert base64_decode(base64_encode(text)) == text


def test_string_encode_matches_binary_encode():
    text = "attestation"
    assert base64_encode(text) == binary_to_base64(text.encode("utf-8"))


def test_string_decode_drops_trailing_nul():
    assert base64_decode(binary_to_base64(b"tpm\x00\x00")) == "tpm"


def test_accepts_bytearray_input():
    data = bytearray(b"quote")
    assert base64_to_binary(binary_to_base64(data)) == bytes(data)