"""Value types shared by the attestation client and the TPM layer."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class TpmVersion(enum.Enum):
    """Family of the TPM found on the machine."""

    V1_2 = 0
    V2_0 = 1


class HashAlg(enum.Enum):
    """Hash algorithm of a PCR bank."""

    SHA1 = 0
    SHA256 = 1
    SHA384 = 2
    SHA512 = 3
    SM3_256 = 4


def _check_range(name: str, value: int, upper: int) -> int:
    value = int(value)
    if not 0 <= value <= upper:
        raise ValueError(f"{name} must be between 0 and {upper}, got {value}")
    return value


@dataclass(frozen=True)
class RsaPublicKey:
    """An RSA public key split into its parts."""

    bit_length: int
    exponent: bytes = b""
    modulus: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "bit_length", _check_range("bit_length", self.bit_length, 0xFFFF))
        object.__setattr__(self, "exponent", bytes(self.exponent))
        object.__setattr__(self, "modulus", bytes(self.modulus))


@dataclass(frozen=True)
class PcrValue:
    """The digest held by one PCR."""

    index: int
    digest: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "index", _check_range("index", self.index, 0xFF))
        object.__setattr__(self, "digest", bytes(self.digest))


@dataclass
class PcrSet:
    """PCR values read from one bank."""

    hash_alg: HashAlg = HashAlg.SHA1
    pcrs: list[PcrValue] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.hash_alg = HashAlg(self.hash_alg)
        self.pcrs = list(self.pcrs)


@dataclass(frozen=True)
class PcrQuote:
    """A quote over PCRs together with its signature."""

    quote: bytes = b""
    signature: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "quote", bytes(self.quote))
        object.__setattr__(self, "signature", bytes(self.signature))


@dataclass(frozen=True)
class EphemeralKey:
    """An ephemeral key with its certify information and signature."""

    encryption_key: bytes = b""
    certify_info: bytes = b""
    certify_info_signature: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "encryption_key", bytes(self.encryption_key))
        object.__setattr__(self, "certify_info", bytes(self.certify_info))
        object.__setattr__(self, "certify_info_signature", bytes(self.certify_info_signature))