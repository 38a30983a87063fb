"""Child numbers: indices of child keys in a derivation hierarchy."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar

from keyhier.bip32.errors import Bip32Error, ErrorKind

_U32_LIMIT = 1 << 32
_DIGITS = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True, order=True)
class ChildNumber:
    """Index of a child key; indices 2**31 and above are hardened."""

    value: int = 0

    BYTE_SIZE: ClassVar[int] = 4
    HARDENED_FLAG: ClassVar[int] = 1 << 31

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or not 0 <= self.value < _U32_LIMIT:
            raise Bip32Error(ErrorKind.CHILD_NUMBER)

    @classmethod
    def new(cls, index: int, hardened: bool) -> ChildNumber:
        """Build a child number from an index below 2**31 and a hardened flag."""
        if not 0 <= index < cls.HARDENED_FLAG:
            raise Bip32Error(ErrorKind.CHILD_NUMBER)
        return cls(index | cls.HARDENED_FLAG if hardened else index)

    @classmethod
    def parse(cls, text: str) -> ChildNumber:
        """Parse forms such as ``42``, ``42'`` or ``42h``."""
        hardened = text.endswith(("'", "h"))
        digits = text[:-1] if hardened else text
        if not _DIGITS.fullmatch(digits):
            raise Bip32Error(ErrorKind.CHILD_NUMBER)
        index = int(digits)
        if index >= _U32_LIMIT:
            raise Bip32Error(ErrorKind.CHILD_NUMBER)
        return cls.new(index, hardened)

    @classmethod
    def from_bytes(cls, data: bytes) -> ChildNumber:
        """Decode a big-endian 4-byte child number."""
        if len(data) != cls.BYTE_SIZE:
            raise Bip32Error(ErrorKind.DECODE)
        return cls(int.from_bytes(data, "big"))

    def to_bytes(self) -> bytes:
        """Encode as 4 big-endian bytes."""
        return self.value.to_bytes(self.BYTE_SIZE, "big")

    def index(self) -> int:
        """The index with the hardened flag cleared."""
        return self.value & ~self.HARDENED_FLAG

    def is_hardened(self) -> bool:
        """Whether this child number lies in the hardened range."""
        return bool(self.value & self.HARDENED_FLAG)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return f"{self.index()}'" if self.is_hardened() else str(self.index())