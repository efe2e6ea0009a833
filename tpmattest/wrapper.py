"""Abstract TPM software stack interface and the TPM facade over it."""

from __future__ import annotations

import abc
from collections.abc import Iterable

from .types import EphemeralKey, HashAlg, PcrQuote, PcrSet, TpmVersion


class TssWrapper(abc.ABC):
    """Functionality a TPM software stack provides for remote attestation."""

    @abc.abstractmethod
    def get_ek_nv_cert(self) -> bytes:
        """Return the EK certificate in X.509 form."""

    @abc.abstractmethod
    def get_ek_pub_without_persisting(self) -> bytes:
        """Return the packed EK public area, creating but not persisting the EK."""

    @abc.abstractmethod
    def get_ek_pub(self) -> bytes:
        """Return the packed EK public area, creating the EK if needed."""

    @abc.abstractmethod
    def get_aik_cert(self) -> bytes:
        """Return the AIK certificate in X.509 form."""

    @abc.abstractmethod
    def get_aik_pub(self) -> bytes:
        """Return the packed AIK public area."""

    @abc.abstractmethod
    def get_pcr_quote(self, pcrs: list[int], hash_alg: HashAlg) -> PcrQuote:
        """Return a quote over ``pcrs`` in the given bank, signed by the AIK."""

    @abc.abstractmethod
    def get_pcr_values(self, pcrs: list[int], hash_alg: HashAlg) -> PcrSet:
        """Return the values of ``pcrs`` in the given bank."""

    @abc.abstractmethod
    def get_tcg_log(self) -> bytes:
        """Return the TCG boot measurement log."""

    @abc.abstractmethod
    def get_version(self) -> TpmVersion:
        """Return the version of the TPM."""

    @abc.abstractmethod
    def unseal(
        self,
        importable_public: bytes,
        importable_private: bytes,
        encrypted_seed: bytes,
        pcr_set: PcrSet,
        hash_alg: HashAlg,
        use_pcr_auth: bool = True,
    ) -> bytes:
        """Unseal an imported object and return its clear data."""

    @abc.abstractmethod
    def remove_persistent_ek(self) -> None:
        """Remove the persisted EK."""

    @abc.abstractmethod
    def unpack_aik_pub_to_rsa(self, aik_pub_marshaled: bytes) -> bytes:
        """Return the RSA key held in a packed AIK public area."""

    @abc.abstractmethod
    def unpack_pcr_quote_to_rsa(self, pcr_quote_marshaled: PcrQuote) -> PcrQuote:
        """Return the raw quote and raw RSA signature of a packed quote."""

    @abc.abstractmethod
    def get_ephemeral_key(self, pcr_set: PcrSet) -> EphemeralKey:
        """Create an ephemeral key bound to ``pcr_set`` and certified by the AIK."""

    @abc.abstractmethod
    def decrypt_with_ephemeral_key(self, pcr_set: PcrSet, encrypted_blob: bytes) -> bytes:
        """Decrypt ``encrypted_blob`` with the ephemeral key bound to ``pcr_set``."""

    @abc.abstractmethod
    def write_aik_cert(self, aik_cert: bytes) -> None:
        """Store a renewed AIK certificate in the TPM."""

    @abc.abstractmethod
    def get_hcl_report(self) -> bytes:
        """Return the HCL report of a confidential VM."""


class Tpm:
    """TPM operations needed for remote attestation, served by a TssWrapper."""

    def __init__(self, wrapper: TssWrapper) -> None:
        if not isinstance(wrapper, TssWrapper):
            raise TypeError("wrapper must be a TssWrapper")
        self._wrapper = wrapper

    @staticmethod
    def _pcr_list(pcrs: Iterable[int]) -> list[int]:
        return [int(pcr) for pcr in pcrs]

    def get_aik_cert(self) -> bytes:
        return self._wrapper.get_aik_cert()

    def get_aik_pub(self) -> bytes:
        return self._wrapper.get_aik_pub()

    def get_pcr_quote(self, pcrs: Iterable[int], hash_alg: HashAlg) -> PcrQuote:
        return self._wrapper.get_pcr_quote(self._pcr_list(pcrs), HashAlg(hash_alg))

    def get_pcr_values(self, pcrs: Iterable[int], hash_alg: HashAlg) -> PcrSet:
        return self._wrapper.get_pcr_values(self._pcr_list(pcrs), HashAlg(hash_alg))

    def get_tcg_log(self) -> bytes:
        return self._wrapper.get_tcg_log()

    def get_ek_pub_without_persisting(self) -> bytes:
        return self._wrapper.get_ek_pub_without_persisting()

    def get_ek_pub(self) -> bytes:
        return self._wrapper.get_ek_pub()

    def get_ek_nv_cert(self) -> bytes:
        return self._wrapper.get_ek_nv_cert()

    def get_version(self) -> TpmVersion:
        return self._wrapper.get_version()

    def unseal(
        self,
        importable_public: bytes,
        importable_private: bytes,
        encrypted_seed: bytes,
        pcr_set: PcrSet,
        hash_alg: HashAlg,
        use_pcr_auth: bool = True,
    ) -> bytes:
        return self._wrapper.unseal(
            bytes(importable_public),
            bytes(importable_private),
            bytes(encrypted_seed),
            pcr_set,
            HashAlg(hash_alg),
            use_pcr_auth,
        )

    def remove_persistent_ek(self) -> None:
        self._wrapper.remove_persistent_ek()

    def unpack_aik_pub_to_rsa(self, aik_pub_marshaled: bytes) -> bytes:
        return self._wrapper.unpack_aik_pub_to_rsa(bytes(aik_pub_marshaled))

    def unpack_pcr_quote_to_rsa(self, pcr_quote_marshaled: PcrQuote) -> PcrQuote:
        return self._wrapper.unpack_pcr_quote_to_rsa(pcr_quote_marshaled)

    def get_ephemeral_key(self, pcr_set: PcrSet) -> EphemeralKey:
        return self._wrapper.get_ephemeral_key(pcr_set)

    def decrypt_with_ephemeral_key(self, pcr_set: PcrSet, encrypted_blob: bytes) -> bytes:
        return self._wrapper.decrypt_with_ephemeral_key(pcr_set, bytes(encrypted_blob))

    def write_aik_cert(self, aik_cert: bytes) -> None:
        self._wrapper.write_aik_cert(bytes(aik_cert))

    def get_hcl_report(self) -> bytes:
        return self._wrapper.get_hcl_report()