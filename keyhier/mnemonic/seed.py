"""BIP39 seed values."""

from __future__ import annotations

import hmac
from typing import ClassVar

from keyhier.bip32.errors import Bip32Error, ErrorKind


class Seed:
    """A 64-byte secret seed derived from a mnemonic phrase."""

    __slots__ = ("_data",)

    SIZE: ClassVar[int] = 64

    def __init__(self, data: bytes) -> None:
        data = bytes(data)
        if len(data) != self.SIZE:
            raise Bip32Error(ErrorKind.SEED_LENGTH)
        self._data = data

    def __bytes__(self) -> bytes:
        return self._data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Seed):
            return NotImplemented
        return hmac.compare_digest(self._data, other._data)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return "Seed(...)"