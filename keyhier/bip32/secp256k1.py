"""secp256k1 signing and verifying keys with BIP32 child derivation."""

from __future__ import annotations

import hashlib
import hmac
from dataclasses import dataclass
from typing import Optional, Tuple

from Crypto.Hash import RIPEMD160

from keyhier.bip32.child_number import ChildNumber
from keyhier.bip32.errors import Bip32Error, ErrorKind
from keyhier.bip32.extended_key import FINGERPRINT_SIZE, KEY_SIZE

P = 2**256 - 2**32 - 977
N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
G = (
    0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798,
    0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8,
)

_Point = Optional[Tuple[int, int]]


def _point_add(a: _Point, b: _Point) -> _Point:
    if a is None:
        return b
    if b is None:
        return a
    (x1, y1), (x2, y2) = a, b
    if x1 == x2:
        if (y1 + y2) % P == 0:
            return None
        slope = 3 * x1 * x1 * pow(2 * y1, -1, P) % P
    else:
        slope = (y2 - y1) * pow(x2 - x1, -1, P) % P
    x3 = (slope * slope - x1 - x2) % P
    return x3, (slope * (x1 - x3) - y1) % P


def _point_mul(scalar: int, point: _Point) -> _Point:
    result: _Point = None
    addend = point
    while scalar:
        if scalar & 1:
            result = _point_add(result, addend)
        addend = _point_add(addend, addend)
        scalar >>= 1
    return result


def _nonzero_scalar(data: bytes) -> int:
    if len(data) != KEY_SIZE:
        raise Bip32Error(ErrorKind.DECODE)
    value = int.from_bytes(data, "big")
    if not 0 < value < N:
        raise Bip32Error(ErrorKind.CRYPTO)
    return value


def _hmac_split(chain_code: bytes, *parts: bytes) -> tuple[bytes, bytes]:
    if len(chain_code) != KEY_SIZE:
        raise Bip32Error(ErrorKind.DECODE)
    digest = hmac.new(bytes(chain_code), b"".join(parts), hashlib.sha512).digest()
    return digest[:KEY_SIZE], digest[KEY_SIZE:]


@dataclass(frozen=True, repr=False)
class VerifyingKey:
    """A secp256k1 public key (a non-identity curve point)."""

    x: int
    y: int

    @classmethod
    def from_bytes(cls, data: bytes) -> VerifyingKey:
        """Decode a 33-byte compressed SEC1 point."""
        if len(data) != KEY_SIZE + 1:
            raise Bip32Error(ErrorKind.DECODE)
        tag, x = data[0], int.from_bytes(data[1:], "big")
        if tag not in (2, 3) or x >= P:
            raise Bip32Error(ErrorKind.CRYPTO)
        rhs = (pow(x, 3, P) + 7) % P
        y = pow(rhs, (P + 1) // 4, P)
        if y * y % P != rhs:
            raise Bip32Error(ErrorKind.CRYPTO)
        if y & 1 != tag & 1:
            y = P - y
        return cls(x, y)

    def to_bytes(self) -> bytes:
        """Encode as a 33-byte compressed SEC1 point."""
        return bytes([2 | (self.y & 1)]) + self.x.to_bytes(KEY_SIZE, "big")

    def derive_child(self, tweak: bytes) -> VerifyingKey:
        """Add ``tweak * G`` to this point."""
        point = _point_add((self.x, self.y), _point_mul(_nonzero_scalar(tweak), G))
        if point is None:
            raise Bip32Error(ErrorKind.CRYPTO)
        return VerifyingKey(*point)

    def fingerprint(self) -> bytes:
        """First four bytes of RIPEMD160(SHA256(public key))."""
        sha = hashlib.sha256(self.to_bytes()).digest()
        return RIPEMD160.new(sha).digest()[:FINGERPRINT_SIZE]

    def derive_tweak(self, chain_code: bytes, child_number: ChildNumber) -> tuple[bytes, bytes]:
        """Compute the tweak and child chain code for a non-hardened child."""
        if child_number.is_hardened():
            raise Bip32Error(ErrorKind.CHILD_NUMBER)
        return _hmac_split(chain_code, self.to_bytes(), child_number.to_bytes())

    def __repr__(self) -> str:
        return f"VerifyingKey({self.to_bytes().hex()})"


@dataclass(frozen=True, repr=False)
class SigningKey:
    """A secp256k1 private scalar in the range [1, n)."""

    scalar: int

    def __post_init__(self) -> None:
        if not isinstance(self.scalar, int) or not 0 < self.scalar < N:
            raise Bip32Error(ErrorKind.CRYPTO)

    @classmethod
    def from_bytes(cls, data: bytes) -> SigningKey:
        """Decode a 32-byte big-endian scalar."""
        return cls(_nonzero_scalar(data))

    def to_bytes(self) -> bytes:
        """Encode the scalar as 32 big-endian bytes."""
        return self.scalar.to_bytes(KEY_SIZE, "big")

    def derive_child(self, tweak: bytes) -> SigningKey:
        """Add the tweak to this scalar modulo the group order."""
        derived = (self.scalar + _nonzero_scalar(tweak)) % N
        if derived == 0:
            raise Bip32Error(ErrorKind.CRYPTO)
        return SigningKey(derived)

    def public_key(self) -> VerifyingKey:
        """The public key for this scalar."""
        point = _point_mul(self.scalar, G)
        assert point is not None
        return VerifyingKey(*point)

    def derive_tweak(self, chain_code: bytes, child_number: ChildNumber) -> tuple[bytes, bytes]:
        """Compute the tweak and child chain code for any child number."""
        if child_number.is_hardened():
            data = b"\x00" + self.to_bytes()
        else:
            data = self.public_key().to_bytes()
        return _hmac_split(chain_code, data, child_number.to_bytes())

    def __repr__(self) -> str:
        return "SigningKey(...)"