"""Extended key prefixes, known in the specification as versions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from keyhier.bip32.base58 import b58encode_check
from keyhier.bip32.errors import Bip32Error, ErrorKind

_EXTENDED_KEY_SIZE = 78


@dataclass(frozen=True, order=True, repr=False)
class Prefix:
    """Four ASCII letters (e.g. ``xprv``) plus the 32-bit version they encode."""

    chars: str
    version: int

    LENGTH: ClassVar[int] = 4
    TPRV: ClassVar[Prefix]
    TPUB: ClassVar[Prefix]
    XPRV: ClassVar[Prefix]
    XPUB: ClassVar[Prefix]
    YPRV: ClassVar[Prefix]
    YPUB: ClassVar[Prefix]
    ZPRV: ClassVar[Prefix]
    ZPUB: ClassVar[Prefix]

    def __init__(self, chars: str, version: int) -> None:
        """Pair characters with a version; their consistency is not checked."""
        self.validate_str(chars)
        if not isinstance(version, int) or not 0 <= version < 1 << 32:
            raise Bip32Error(ErrorKind.DECODE)
        object.__setattr__(self, "chars", chars)
        object.__setattr__(self, "version", version)

    @staticmethod
    def validate_str(text: str) -> str:
        """Return the text if it is exactly four ASCII letters."""
        if len(text) != Prefix.LENGTH or not (text.isascii() and text.isalpha()):
            raise Bip32Error(ErrorKind.DECODE)
        return text

    @classmethod
    def from_version(cls, version: int) -> Prefix:
        """Derive the prefix characters that a version number encodes to."""
        if not 0 <= version < 1 << 32:
            raise Bip32Error(ErrorKind.DECODE)
        payload = version.to_bytes(4, "big") + bytes(_EXTENDED_KEY_SIZE - 4)
        chars = b58encode_check(payload)[: cls.LENGTH]
        return cls(cls.validate_str(chars), version)

    @classmethod
    def from_bytes(cls, data: bytes) -> Prefix:
        """Build a prefix from a big-endian 4-byte version."""
        if len(data) != cls.LENGTH:
            raise Bip32Error(ErrorKind.DECODE)
        return cls.from_version(int.from_bytes(data, "big"))

    def is_public(self) -> bool:
        """Whether this prefix names a public key."""
        return self.chars[1:] == "pub"

    def is_private(self) -> bool:
        """Whether this prefix names a private key."""
        return self.chars[1:] == "prv"

    def to_bytes(self) -> bytes:
        """The version as 4 big-endian bytes."""
        return self.version.to_bytes(self.LENGTH, "big")

    def __str__(self) -> str:
        return self.chars

    def __repr__(self) -> str:
        return f"Prefix(chars={self.chars!r}, version={self.version:#010x})"


Prefix.TPRV = Prefix("tprv", 0x04358394)
Prefix.TPUB = Prefix("tpub", 0x043587CF)
Prefix.XPRV = Prefix("xprv", 0x0488ADE4)
Prefix.XPUB = Prefix("xpub", 0x0488B21E)
Prefix.YPRV = Prefix("yprv", 0x049D7878)
Prefix.YPUB = Prefix("ypub", 0x049D7CB2)
Prefix.ZPRV = Prefix("zprv", 0x04B2430C)
Prefix.ZPUB = Prefix("zpub", 0x04B24746)