"""TPM remote attestation helpers: value types, errors, a logging hook, base64 and JSON payload encoding, and an abstract TPM interface."""

__version__ = "0.1.0"

__all__ = [
    "types",
    "errors",
    "logger",
    "base64util",
    "attestation_json",
    "wrapper",
]