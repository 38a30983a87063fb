"""Error types for hierarchical deterministic key handling."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Category of a failure, valued by its human-readable message."""

    BASE58 = "base58 error"
    BIP39 = "bip39 error"
    CHILD_NUMBER = "invalid child number"
    CRYPTO = "cryptographic error"
    DECODE = "decoding error"
    DEPTH = "maximum derivation depth exceeded"
    SEED_LENGTH = "seed length invalid"


class Bip32Error(ValueError):
    """Raised when a key, path or encoding operation fails."""

    def __init__(self, kind: ErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind

    def __str__(self) -> str:
        return self.kind.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bip32Error):
            return NotImplemented
        return self.kind is other.kind

    def __hash__(self) -> int:
        return hash(self.kind)