"""Base58 and Base58Check encoding with the Bitcoin alphabet."""

from __future__ import annotations

import hashlib

from keyhier.bip32.errors import Bip32Error, ErrorKind

ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_INDEX = {char: i for i, char in enumerate(ALPHABET)}
CHECKSUM_SIZE = 4


def _checksum(data: bytes) -> bytes:
    return hashlib.sha256(hashlib.sha256(data).digest()).digest()[:CHECKSUM_SIZE]


def b58encode(data: bytes) -> str:
    """Encode bytes as Base58."""
    zeros = len(data) - len(data.lstrip(b"\x00"))
    number = int.from_bytes(data, "big")
    digits = []
    while number:
        number, rem = divmod(number, 58)
        digits.append(ALPHABET[rem])
    return ALPHABET[0] * zeros + "".join(reversed(digits))


def b58decode(text: str) -> bytes:
    """Decode a Base58 string, raising on characters outside the alphabet."""
    number = 0
    for char in text:
        try:
            number = number * 58 + _INDEX[char]
        except KeyError:
            raise Bip32Error(ErrorKind.BASE58) from None
    zeros = len(text) - len(text.lstrip(ALPHABET[0]))
    body = number.to_bytes((number.bit_length() + 7) // 8, "big")
    return b"\x00" * zeros + body


def b58encode_check(data: bytes) -> str:
    """Encode bytes with a 4-byte double-SHA256 checksum appended."""
    return b58encode(bytes(data) + _checksum(data))


def b58decode_check(text: str) -> bytes:
    """Decode a Base58Check string and verify its checksum."""
    raw = b58decode(text)
    if len(raw) < CHECKSUM_SIZE:
        raise Bip32Error(ErrorKind.BASE58)
    payload, check = raw[:-CHECKSUM_SIZE], raw[-CHECKSUM_SIZE:]
    if _checksum(payload) != check:
        raise Bip32Error(ErrorKind.BASE58)
    return payload