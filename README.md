# tpmattest

Building blocks for a client that proves the state of a machine's TPM to a
remote attestation service.

## Modules

- `tpmattest.types`: value types.
  - `TpmVersion` (`V1_2`, `V2_0`) and `HashAlg` (`SHA1`, `SHA256`, `SHA384`,
    `SHA512`, `SM3_256`) enums.
  - Frozen dataclasses `RsaPublicKey(bit_length, exponent, modulus)`,
    `PcrValue(index, digest)`, `PcrQuote(quote, signature)` and
    `EphemeralKey(encryption_key, certify_info, certify_info_signature)`.
    Byte fields are stored as `bytes`. `bit_length` must be 0–65535 and
    `index` 0–255, or `ValueError` is raised.
  - `PcrSet(hash_alg, pcrs)`: a mutable dataclass holding a bank's
    `HashAlg` and a list of `PcrValue`.
- `tpmattest.errors`: exceptions and helpers.
  - `Tss2Error(desc, rc)` and `OpenSslError(desc, rc)` keep the return code
    in `.rc`.
  - `HResultError(hr, desc="HRESULT error")` keeps the code, as a signed
    32-bit value, in `.hr`.
  - `FileNotFound` is a `FileNotFoundError` with the message "File not found".
  - `ApcaWebError(http_status, apca_addresses, invoke_https_result,
    http_response, short_error, apca_url_relative)` keeps the response cut to
    1024 characters in `.server_error`, the short error cut to 128 characters
    in `.server_error_short`, and the relative URL without its query string in
    `.apca_endpoint`.
  - `truncate(container, num_chars)`, `hresult_from_nt(status)`,
    `check_nt_status(status, desc)` and `check_hresult(hr, desc)`. The two
    `check_` functions raise `HResultError` on a non-zero NTSTATUS or a
    failing (negative) HRESULT.
- `tpmattest.logger`: a swappable logging hook.
  - `log(level, event_name, fmt, *args)` calls the installed function with
    the caller's file, function and line, then the level, event name, format
    and arguments.
  - `set_logger(fn)` installs a function; `set_logger(None)` restores the
    default, which writes to the standard `logging` logger named `tpmattest`.
  - `get_logger()` returns the installed function.
  - `LogLevel` has the members `INFO`, `WARN` and `ERROR`.
- `tpmattest.base64util`: base64 conversion.
  - `binary_to_base64` encodes with padding.
  - `binary_to_base64url` encodes URL-safe without padding.
  - `base64_to_binary` and `base64url_to_binary` accept missing padding and
    drop trailing zero bytes from the result. Characters outside the alphabet
    raise `ValueError`.
  - `base64_encode` and `base64_decode` do the same for `str`, using UTF-8.
- `tpmattest.attestation_json`: service payloads.
  - `get_json(aik_cert, aik_pub, pcr_quote, pcr_hash, pcr_values, tcg_log,
    is_windows=None)` builds the compact JSON request body. Every binary field
    is base64 encoded, and `pcr_values` becomes a list of
    `{"index", "value"}` objects. `is_windows` defaults to the running
    platform.
  - `parse_json(response, stream=None)` decodes the payload (the second
    dot-separated part) of a token returned by the service. It writes its
    keys and values line by line to `stream`, which defaults to standard
    output. It raises `ValueError` if there is no payload part or the payload
    is not valid JSON.
- `tpmattest.wrapper`: the TPM interface.
  - `TssWrapper` is an abstract base class listing the operations attestation
    needs: EK and AIK certificates and public keys, PCR quotes and values, the
    TCG log, the TPM version, unsealing, ephemeral keys, writing the AIK
    certificate, and the HCL report.
  - `Tpm(wrapper)` is a facade that checks and normalises its arguments and
    delegates each call to the wrapper.

## Example

```python
from tpmattest.base64util import binary_to_base64, base64_to_binary
from tpmattest.types import HashAlg, PcrQuote, PcrSet, PcrValue
from tpmattest.attestation_json import get_json

encoded = binary_to_base64(b"\x01\x02\x03")
assert base64_to_binary(encoded) == b"\x01\x02\x03"

pcrs = PcrSet(hash_alg=HashAlg.SHA256, pcrs=[PcrValue(index=0, digest=bytes(32))])
body = get_json(
    aik_cert=b"cert",
    aik_pub=b"pub",
    pcr_quote=PcrQuote(quote=b"quote", signature=b"sig"),
    pcr_hash=bytes(32),
    pcr_values=pcrs,
    tcg_log=b"log",
    is_windows=False,
)
```

## What the package does not do

The package has no `TssWrapper` implementation that talks to a TPM device.
To use `Tpm` against real hardware, subclass `TssWrapper`, implement every
method, and pass an instance to `Tpm`.

The package has no command-line program and does not contact an attestation
service itself. It only builds request bodies and decodes tokens.

## Installation and tests

```
pip install .
pip install .[test]
pytest
```