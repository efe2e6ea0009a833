"""Exceptions raised by the TPM and attestation layers."""

from __future__ import annotations

from collections.abc import Sequence

_FACILITY_NT_BIT = 0x10000000
_HRESULT_DEFAULT_DESC = "HRESULT error"
_NTSTATUS_DEFAULT_DESC = "NTSTATUS error"


def _to_signed32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def truncate(container: str | bytes | bytearray | Sequence[int], num_chars: int) -> str:
    """Return at most ``num_chars`` leading characters of ``container`` as text.

    Byte containers map each byte to the character of the same code.
    """
    head = container[:num_chars]
    if isinstance(head, str):
        return head
    return bytes(head).decode("latin-1")


class FileNotFound(FileNotFoundError):
    """A file the TPM layer needs does not exist."""

    def __init__(self) -> None:
        super().__init__("File not found")


class Tss2Error(Exception):
    """An error reported by the TPM software stack."""

    def __init__(self, desc: str, rc: int) -> None:
        self.desc = desc
        self.rc = rc
        super().__init__(f"tpm2-tss exception : message={desc}, code={rc}")


class OpenSslError(Exception):
    """An error reported by the cryptography library."""

    def __init__(self, desc: str | None, rc: int) -> None:
        self.desc = desc or ""
        self.rc = rc
        super().__init__(f'OpenSSL exception: message="{self.desc}", code={rc}')


class HResultError(Exception):
    """An error carrying a Windows HRESULT code."""

    def __init__(self, hr: int, desc: str = _HRESULT_DEFAULT_DESC) -> None:
        self.hr = _to_signed32(hr)
        self.desc = desc
        super().__init__(f"{desc}:{self.hr}")


def hresult_from_nt(status: int) -> int:
    """Map an NTSTATUS code to an HRESULT."""
    return _to_signed32(status | _FACILITY_NT_BIT)


def check_nt_status(status: int, desc: str = _NTSTATUS_DEFAULT_DESC) -> None:
    """Raise HResultError if ``status`` is not zero."""
    if status != 0:
        raise HResultError(hresult_from_nt(status), desc)


def check_hresult(hr: int, desc: str = _HRESULT_DEFAULT_DESC) -> None:
    """Raise HResultError if ``hr`` denotes a failure."""
    if _to_signed32(hr) < 0:
        raise HResultError(hr, desc)


class ApcaWebError(Exception):
    """An error response received from an APCA endpoint."""

    def __init__(
        self,
        http_status: int,
        apca_addresses: str,
        invoke_https_result: int,
        http_response: bytes | bytearray | Sequence[int],
        short_error: str,
        apca_url_relative: str,
    ) -> None:
        self.http_status = http_status
        self.invoke_https_result = invoke_https_result
        # The response comes from a third party, so only a bounded prefix is kept.
        self.server_error = truncate(http_response, 1024)
        self.server_error_short = truncate(short_error, 128)
        self.apca_endpoint = apca_url_relative.split("?", 1)[0]
        message = (
            f"Invoking APCA with retry address '{apca_addresses}', "
            f"partial URL '{apca_url_relative}' failed with error {invoke_https_result}. "
            f"HTTP {http_status}. Error response is: {self.server_error}"
        )
        super().__init__(message.split("\0", 1)[0])