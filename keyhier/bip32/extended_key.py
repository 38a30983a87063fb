"""Serialized extended keys such as ``xprv`` and ``xpub``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from keyhier.bip32.base58 import b58decode_check, b58encode_check
from keyhier.bip32.child_number import ChildNumber
from keyhier.bip32.errors import Bip32Error, ErrorKind
from keyhier.bip32.prefix import Prefix

KEY_SIZE = 32
FINGERPRINT_SIZE = 4
MAX_DEPTH = 255


@dataclass(frozen=True, order=True)
class ExtendedKeyAttrs:
    """Fields shared by extended keys: depth, parent fingerprint, child number, chain code."""

    depth: int = 0
    parent_fingerprint: bytes = bytes(FINGERPRINT_SIZE)
    child_number: ChildNumber = ChildNumber(0)
    chain_code: bytes = bytes(KEY_SIZE)

    def __post_init__(self) -> None:
        if not isinstance(self.depth, int) or not 0 <= self.depth <= MAX_DEPTH:
            raise Bip32Error(ErrorKind.DEPTH)
        if len(self.parent_fingerprint) != FINGERPRINT_SIZE:
            raise Bip32Error(ErrorKind.DECODE)
        if len(self.chain_code) != KEY_SIZE:
            raise Bip32Error(ErrorKind.DECODE)
        object.__setattr__(self, "parent_fingerprint", bytes(self.parent_fingerprint))
        object.__setattr__(self, "chain_code", bytes(self.chain_code))


@dataclass(frozen=True)
class ExtendedKey:
    """An extended key: prefix, attributes and 33 bytes of key material.

    Private key material carries a leading zero byte; public key material
    is a compressed SEC1 point.
    """

    prefix: Prefix
    attrs: ExtendedKeyAttrs
    key_bytes: bytes

    BYTE_SIZE: ClassVar[int] = 78
    MAX_BASE58_SIZE: ClassVar[int] = 112

    def __post_init__(self) -> None:
        if len(self.key_bytes) != KEY_SIZE + 1:
            raise Bip32Error(ErrorKind.DECODE)
        object.__setattr__(self, "key_bytes", bytes(self.key_bytes))

    @classmethod
    def parse(cls, text: str) -> ExtendedKey:
        """Decode a Base58Check-encoded extended key."""
        payload = b58decode_check(text)
        if len(payload) > cls.BYTE_SIZE:
            raise Bip32Error(ErrorKind.BASE58)
        if len(payload) != cls.BYTE_SIZE:
            raise Bip32Error(ErrorKind.DECODE)

        chars = Prefix.validate_str(text[: Prefix.LENGTH])
        prefix = Prefix(chars, int.from_bytes(payload[:4], "big"))
        attrs = ExtendedKeyAttrs(
            depth=payload[4],
            parent_fingerprint=payload[5:9],
            child_number=ChildNumber.from_bytes(payload[9:13]),
            chain_code=payload[13:45],
        )
        return cls(prefix=prefix, attrs=attrs, key_bytes=payload[45:78])

    def to_base58(self) -> str:
        """Encode this key as a Base58Check string."""
        payload = b"".join(
            (
                self.prefix.to_bytes(),
                bytes([self.attrs.depth]),
                self.attrs.parent_fingerprint,
                self.attrs.child_number.to_bytes(),
                self.attrs.chain_code,
                self.key_bytes,
            )
        )
        return b58encode_check(payload)

    def __str__(self) -> str:
        return self.to_base58()